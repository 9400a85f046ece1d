"""Field presence codec: desired config <-> wire payload.

Unset fields are left out of the payload entirely; set fields are sent
verbatim, zero values included. Collections follow the same rule as whole
values, so there is no partial diffing of lists or maps.
"""

from __future__ import annotations

from dataclasses import fields as dataclass_fields
from typing import TYPE_CHECKING

from .presence import UNSET, Value

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from .fields import FieldSpec, FieldTable


def _copy(value: object) -> object:
    if isinstance(value, (list, tuple)):
        return list(value)
    if isinstance(value, dict):
        return dict(value)
    return value


def set_fields(config: object) -> frozenset[str]:
    """Attribute names the caller explicitly set on ``config``."""

    return frozenset(
        item.name
        for item in dataclass_fields(config)  # type: ignore[arg-type]
        if isinstance(getattr(config, item.name), Value)
    )


def encode_payload(config: object, specs: Iterable[FieldSpec]) -> dict[str, object]:
    """Encode the set fields of ``config`` that appear in ``specs``."""

    payload: dict[str, object] = {}
    for spec in specs:
        if spec.wire is None:
            continue
        field = getattr(config, spec.attr, UNSET)
        if isinstance(field, Value):
            payload[spec.wire] = _copy(field.value)
    return payload


def decode_payload[C](payload: Mapping[str, object], config_type: type[C], table: FieldTable) -> C:
    """Inverse of :func:`encode_payload`: present keys become ``Value``.

    Unknown keys are rejected so a typo in a declared config never turns into
    a silently ignored field.
    """

    known = {spec.wire: spec for spec in table.settable() if spec.wire is not None}
    unknown = sorted(set(payload) - set(known))
    if unknown:
        raise ValueError(f"Unknown {table.resource} fields: {', '.join(unknown)}")
    kwargs = {known[key].attr: Value(_copy(value)) for key, value in payload.items()}
    return config_type(**kwargs)


__all__ = ["decode_payload", "encode_payload", "set_fields"]
