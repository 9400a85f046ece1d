"""Network volume reconciliation; the data center is fixed at create time."""

from __future__ import annotations

from typing import TYPE_CHECKING

from podstate.domain.model import NETWORK_VOLUME_FIELDS, NetworkVolumeConfig, NetworkVolumeState

from .base import ResourceReconciler

if TYPE_CHECKING:
    from podstate.domain.deletion import DeletionConfirmer
    from podstate.domain.ports import NetworkVolumeRemote


class NetworkVolumeReconciler(ResourceReconciler[NetworkVolumeConfig, NetworkVolumeState]):
    fields = NETWORK_VOLUME_FIELDS
    state_type = NetworkVolumeState

    def __init__(
        self, remote: NetworkVolumeRemote, *, confirmer: DeletionConfirmer | None = None
    ) -> None:
        super().__init__(remote, confirmer=confirmer)
