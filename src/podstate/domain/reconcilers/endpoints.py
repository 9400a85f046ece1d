"""Serverless endpoint reconciliation (single PATCH update variant)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from podstate.domain.model import ENDPOINT_FIELDS, EndpointConfig, EndpointState

from .base import ResourceReconciler

if TYPE_CHECKING:
    from podstate.domain.deletion import DeletionConfirmer
    from podstate.domain.ports import EndpointRemote


class EndpointReconciler(ResourceReconciler[EndpointConfig, EndpointState]):
    fields = ENDPOINT_FIELDS
    state_type = EndpointState

    def __init__(
        self, remote: EndpointRemote, *, confirmer: DeletionConfirmer | None = None
    ) -> None:
        super().__init__(remote, confirmer=confirmer)
