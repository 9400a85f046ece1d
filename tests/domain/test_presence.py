from __future__ import annotations

from podstate.domain.presence import UNSET, Value, is_set, of, value_or


def test_unset_is_falsy_and_distinct_from_zero_values() -> None:
    assert not UNSET
    assert repr(UNSET) == "UNSET"
    assert is_set(Value(0))
    assert is_set(Value(""))
    assert is_set(Value(False))
    assert not is_set(UNSET)


def test_value_or_returns_set_value_even_when_falsy() -> None:
    assert value_or(Value(0), 5) == 0
    assert value_or(UNSET, 5) == 5


def test_of_wraps_value() -> None:
    assert of([1, 2]) == Value([1, 2])
