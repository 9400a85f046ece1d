"""Network volume configuration, state and field table."""

from __future__ import annotations

from dataclasses import dataclass

from podstate.domain.fields import FieldSpec, FieldTable, computed
from podstate.domain.presence import UNSET, TriState


@dataclass(frozen=True, slots=True, kw_only=True)
class NetworkVolumeConfig:
    name: TriState[str] = UNSET
    size: TriState[int] = UNSET
    data_center_id: TriState[str] = UNSET


@dataclass(frozen=True, slots=True, kw_only=True)
class NetworkVolumeState:
    id: str | None = None
    name: str | None = None
    size: int | None = None
    data_center_id: str | None = None


NETWORK_VOLUME_FIELDS = FieldTable(
    resource="network volume",
    specs=(
        computed("id", "id"),
        FieldSpec("name", "name", required=True),
        FieldSpec("size", "size", required=True),
        FieldSpec("data_center_id", "dataCenterId", updatable=False, required=True),
    ),
)
