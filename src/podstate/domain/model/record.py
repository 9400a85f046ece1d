"""Remote records as seen by the core."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True, slots=True)
class RemoteRecord:
    """Decoded response body, keyed by local attribute name.

    Only keys that were present in the payload appear in ``values``; the
    merger relies on that to tell "reported as zero" from "not reported".
    """

    values: Mapping[str, object] = field(default_factory=dict)

    @property
    def identity(self) -> str | None:
        value = self.values.get("id")
        return value if isinstance(value, str) and value else None

    def has(self, attr: str) -> bool:
        return attr in self.values

    def get(self, attr: str) -> object:
        return self.values.get(attr)

    def with_identity(self, identity: str) -> RemoteRecord:
        return RemoteRecord(values={**self.values, "id": identity})
