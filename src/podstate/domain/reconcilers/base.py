"""Shared create/read/update/delete lifecycle for reconciled resources.

A reconciler never mutates the state it is given: every successful call
returns a new state, and a failed call leaves the caller's last synced state
as the one to keep. No call is retried here; faults propagate unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, ClassVar

from podstate.domain.codec import encode_payload
from podstate.domain.deletion import DeletionConfirmer
from podstate.domain.errors import DecodeFailed, ImmutableFieldChanged, MissingRequiredField
from podstate.domain.merge import merge_state, overlay_config, seed_state, to_state_value
from podstate.domain.presence import Value

if TYPE_CHECKING:
    import asyncio

    from podstate.domain.deletion import DeletionResult
    from podstate.domain.fields import FieldTable
    from podstate.domain.model import RemoteRecord
    from podstate.domain.ports import ResourceRemote

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DeleteAck:
    """The remote service accepted the delete request."""

    resource: str
    identity: str


class ResourceReconciler[C, S]:
    fields: ClassVar[FieldTable]
    state_type: ClassVar[type]

    def __init__(
        self,
        remote: ResourceRemote,
        *,
        confirmer: DeletionConfirmer | None = None,
    ) -> None:
        self._remote = remote
        self._confirmer = confirmer or DeletionConfirmer()

    @property
    def resource(self) -> str:
        return self.fields.resource

    async def create(self, config: C) -> tuple[S, str]:
        operation = f"create {self.resource}"
        for spec in self.fields.required():
            if not isinstance(getattr(config, spec.attr), Value):
                raise MissingRequiredField(field=spec.attr, operation=operation)

        payload = encode_payload(config, self.fields.settable())
        log.debug("Creating %s with fields %s", self.resource, sorted(payload))
        record = await self._remote.create(payload)
        identity = record.identity
        if identity is None:
            raise DecodeFailed("response carried no id", operation=operation)

        state = merge_state(seed_state(self.state_type, config, self.fields), record, self.fields)
        log.info("Created %s %s", self.resource, identity)
        return state, identity

    async def read(self, identity: str, prior: S) -> S:
        log.debug("Reading %s %s", self.resource, identity)
        record = await self._remote.get(identity)
        state = merge_state(prior, self._checked(record, identity, "read"), self.fields)
        log.info("Read %s %s", self.resource, identity)
        return state

    async def update(self, identity: str, config: C, prior: S) -> S:
        self._guard_immutable(identity, config, prior, "update")
        payload = encode_payload(config, self.fields.updatable())
        log.debug("Updating %s %s with fields %s", self.resource, identity, sorted(payload))
        record = await self._remote.update(identity, payload)
        state = self._settle(identity, config, prior, record, "update")
        log.info("Updated %s %s", self.resource, identity)
        return state

    async def delete(self, identity: str) -> DeleteAck:
        log.debug("Deleting %s %s", self.resource, identity)
        await self._remote.delete(identity)
        log.info("Delete of %s %s accepted", self.resource, identity)
        return DeleteAck(self.resource, identity)

    async def await_gone(
        self,
        identity: str,
        *,
        abort: asyncio.Event | None = None,
    ) -> DeletionResult:
        async def probe() -> object:
            return await self._remote.get(identity)

        return await self._confirmer.await_gone(identity, probe, abort=abort)

    async def delete_and_confirm(
        self,
        identity: str,
        *,
        abort: asyncio.Event | None = None,
    ) -> DeletionResult:
        await self.delete(identity)
        return await self.await_gone(identity, abort=abort)

    async def list(self) -> list[S]:
        log.debug("Listing %s resources", self.resource)
        records = await self._remote.list()
        empty = self.state_type()
        states = [merge_state(empty, record, self.fields) for record in records]
        log.info("Listed %d %s resources", len(states), self.resource)
        return states

    def _settle(
        self,
        identity: str,
        config: C,
        prior: S,
        record: RemoteRecord,
        operation: str,
    ) -> S:
        desired = overlay_config(prior, config, self.fields.updatable())
        return merge_state(desired, self._checked(record, identity, operation), self.fields)

    def _checked(self, record: RemoteRecord, identity: str, operation: str) -> RemoteRecord:
        reported = record.identity
        if reported is None:
            return record.with_identity(identity)
        if reported != identity:
            raise DecodeFailed(
                f"response describes {reported}",
                operation=f"{operation} {self.resource}",
                identity=identity,
            )
        return record

    def _guard_immutable(self, identity: str, config: C, prior: S, operation: str) -> None:
        for spec in self.fields.immutable():
            field = getattr(config, spec.attr)
            if not isinstance(field, Value):
                continue
            current = getattr(prior, spec.attr)
            desired = to_state_value(field.value)
            # unknown prior (e.g. a freshly imported resource) has nothing to compare
            if current is not None and desired != current:
                raise ImmutableFieldChanged(
                    field=spec.attr,
                    prior=current,
                    desired=desired,
                    operation=f"{operation} {self.resource}",
                    identity=identity,
                )
