"""Folding remote records onto local state.

Each attribute is merged by exactly one rule from its :class:`MergeRule`:

* ``PRESERVE`` keeps the prior value when the remote omits the field, or a
  non-empty prior value when it reports the field as empty (write fields the
  API accepts but does not echo back),
* ``REMOTE`` always takes the remote value, empty meaning "not assigned yet",
* ``PRESENCE`` takes the remote value only when the key was in the payload.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from .fields import MergeRule
from .presence import Value

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .fields import FieldSpec, FieldTable
    from .model.record import RemoteRecord


def is_empty(value: object) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, list, tuple, dict)):
        return len(value) == 0
    if isinstance(value, (bool, int, float)):
        return not value
    return False


def to_state_value(value: object) -> object:
    """Normalise a config or wire value for storage in a frozen state."""

    if isinstance(value, list):
        return tuple(value)
    if isinstance(value, dict):
        return dict(value)
    return value


def merge_state[S](prior: S, record: RemoteRecord, table: FieldTable) -> S:
    """Return a new state: ``prior`` with ``record`` folded in. Pure."""

    changes: dict[str, object] = {}
    for spec in table:
        current = getattr(prior, spec.attr)
        remote = to_state_value(record.get(spec.attr))
        match spec.rule:
            case MergeRule.REMOTE:
                changes[spec.attr] = remote
            case MergeRule.PRESENCE:
                changes[spec.attr] = remote if record.has(spec.attr) else current
            case MergeRule.PRESERVE:
                keep = not record.has(spec.attr) or (is_empty(remote) and not is_empty(current))
                changes[spec.attr] = current if keep else remote
    return replace(prior, **changes)  # type: ignore[type-var]


def overlay_config[S](prior: S, config: object, specs: Iterable[FieldSpec]) -> S:
    """Apply the set fields of ``config`` restricted to ``specs`` onto ``prior``."""

    changes = {
        spec.attr: to_state_value(field.value)
        for spec in specs
        if isinstance(field := getattr(config, spec.attr), Value)
    }
    return replace(prior, **changes)  # type: ignore[type-var]


def seed_state[S](state_type: type[S], config: object, table: FieldTable) -> S:
    """Fresh local state from what the caller set plus documented defaults."""

    values: dict[str, object] = {}
    for spec in table.settable():
        field = getattr(config, spec.attr)
        if isinstance(field, Value):
            values[spec.attr] = to_state_value(field.value)
        elif isinstance(spec.default, Value):
            values[spec.attr] = to_state_value(spec.default.value)
    return state_type(**values)


__all__ = ["is_empty", "merge_state", "overlay_config", "seed_state", "to_state_value"]
