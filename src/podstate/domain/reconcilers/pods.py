"""Pod reconciliation: two update variants plus out-of-band power control."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from podstate.domain.codec import encode_payload, set_fields
from podstate.domain.errors import InPlaceUpdateRejected
from podstate.domain.model import POD_FIELDS, PodConfig, PodState

from .base import ResourceReconciler

if TYPE_CHECKING:
    from podstate.domain.deletion import DeletionConfirmer
    from podstate.domain.ports import PodRemote

log = getLogger(__name__)

IN_PLACE_FIELDS = frozenset(spec.attr for spec in POD_FIELDS.in_place())


class PodReconciler(ResourceReconciler[PodConfig, PodState]):
    fields = POD_FIELDS
    state_type = PodState

    def __init__(self, remote: PodRemote, *, confirmer: DeletionConfirmer | None = None) -> None:
        super().__init__(remote, confirmer=confirmer)
        self._pods = remote

    async def update(self, identity: str, config: PodConfig, prior: PodState) -> PodState:
        """Use the in-place variant when only in-place fields are set, else a full update.

        The choice looks at which fields the caller set, not at how they
        differ from ``prior``.
        """

        if set_fields(config) <= IN_PLACE_FIELDS:
            return await self.update_in_place(identity, config, prior)
        return await self.update_full(identity, config, prior)

    async def update_full(self, identity: str, config: PodConfig, prior: PodState) -> PodState:
        """PUT update; the remote service resets the pod to apply it."""

        return await super().update(identity, config, prior)

    async def update_in_place(
        self, identity: str, config: PodConfig, prior: PodState
    ) -> PodState:
        self._guard_immutable(identity, config, prior, "update in place")
        outside = set_fields(config) - IN_PLACE_FIELDS
        if outside:
            raise InPlaceUpdateRejected(
                fields=outside, operation="update pod in place", identity=identity
            )
        payload = encode_payload(config, POD_FIELDS.in_place())
        log.debug("Updating pod %s in place with fields %s", identity, sorted(payload))
        record = await self._pods.update_in_place(identity, payload)
        state = self._settle(identity, config, prior, record, "update in place")
        log.info("Updated pod %s in place", identity)
        return state

    async def stop(self, identity: str) -> None:
        await self._pods.stop(identity)
        log.info("Stop requested for pod %s", identity)

    async def start(self, identity: str) -> None:
        await self._pods.start(identity)
        log.info("Start requested for pod %s", identity)
