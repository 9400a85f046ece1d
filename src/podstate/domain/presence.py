"""Tri-state values: a field is either unset or explicitly set.

``None`` is deliberately not used for "unset", so an explicit ``Value(0)``,
``Value("")`` or ``Value(False)`` stays distinguishable from no intent at all.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final, Literal


class _UnsetType(Enum):
    UNSET = "unset"

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Final = _UnsetType.UNSET

type Unset = Literal[_UnsetType.UNSET]


@dataclass(frozen=True, slots=True)
class Value[T]:
    """An explicitly set value, including zero values."""

    value: T


type TriState[T] = Value[T] | Unset


def of[T](value: T) -> Value[T]:
    return Value(value)


def is_set(field: object) -> bool:
    return isinstance(field, Value)


def value_or[T, D](field: TriState[T], default: D) -> T | D:
    if isinstance(field, Value):
        return field.value
    return default


__all__ = ["UNSET", "TriState", "Unset", "Value", "is_set", "of", "value_or"]
