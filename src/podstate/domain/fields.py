"""Static per-field classification used by the codec, merger and reconcilers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from .presence import UNSET

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .presence import TriState


class MergeRule(StrEnum):
    """How a remote value is folded onto prior local state."""

    # caller-settable; the remote service may not echo it, so an empty remote
    # value never erases a known local one
    PRESERVE = "preserve"
    # computed by the remote service; empty means "not assigned yet"
    REMOTE = "remote"
    # zero is a legitimate value; only a key present in the payload counts
    PRESENCE = "presence"


@dataclass(frozen=True, slots=True)
class FieldSpec:
    attr: str
    wire: str | None
    rule: MergeRule = MergeRule.PRESERVE
    settable: bool = True
    updatable: bool = True
    in_place: bool = False
    required: bool = False
    default: TriState[object] = UNSET

    @property
    def immutable(self) -> bool:
        return self.settable and not self.updatable


def computed(attr: str, wire: str | None) -> FieldSpec:
    return FieldSpec(attr, wire, MergeRule.REMOTE, settable=False, updatable=False)


@dataclass(frozen=True, slots=True)
class FieldTable:
    """Ordered field specs of one resource type."""

    resource: str
    specs: tuple[FieldSpec, ...]

    def __iter__(self) -> Iterator[FieldSpec]:
        return iter(self.specs)

    def __getitem__(self, attr: str) -> FieldSpec:
        for spec in self.specs:
            if spec.attr == attr:
                return spec
        raise KeyError(attr)

    def settable(self) -> tuple[FieldSpec, ...]:
        return tuple(spec for spec in self.specs if spec.settable)

    def updatable(self) -> tuple[FieldSpec, ...]:
        return tuple(spec for spec in self.specs if spec.updatable)

    def in_place(self) -> tuple[FieldSpec, ...]:
        return tuple(spec for spec in self.specs if spec.in_place)

    def immutable(self) -> tuple[FieldSpec, ...]:
        return tuple(spec for spec in self.specs if spec.immutable)

    def required(self) -> tuple[FieldSpec, ...]:
        return tuple(spec for spec in self.specs if spec.required)


__all__ = ["FieldSpec", "FieldTable", "MergeRule", "computed"]
