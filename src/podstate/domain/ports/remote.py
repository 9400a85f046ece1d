"""Ports the reconcilers use to reach the remote service.

Implementations raise the faults from :mod:`podstate.domain.errors`:
``TransportFailure`` when no response arrived, ``RemoteRejected`` (or its
``NotFound`` subclass for a missing identity) on an error status and
``DecodeFailed`` when the body has an unexpected shape.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping

    from podstate.domain.model import RemoteRecord, Template

type Payload = Mapping[str, object]


@runtime_checkable
class ResourceRemote(Protocol):
    """CRUD + list surface shared by every reconciled resource type."""

    async def create(self, payload: Payload) -> RemoteRecord: ...

    async def get(self, identity: str) -> RemoteRecord: ...

    async def update(self, identity: str, payload: Payload) -> RemoteRecord: ...

    async def delete(self, identity: str) -> None: ...

    async def list(self) -> list[RemoteRecord]: ...


@runtime_checkable
class PodRemote(ResourceRemote, Protocol):
    """Pods additionally support an in-place update and power control."""

    async def update_in_place(self, identity: str, payload: Payload) -> RemoteRecord: ...

    async def stop(self, identity: str) -> None: ...

    async def start(self, identity: str) -> None: ...


@runtime_checkable
class EndpointRemote(ResourceRemote, Protocol):
    """Endpoint updates are partial: only the sent fields change."""


@runtime_checkable
class NetworkVolumeRemote(ResourceRemote, Protocol):
    """Network volume updates accept name and size only."""


@runtime_checkable
class TemplateRemote(Protocol):
    async def list(self) -> list[Template]: ...


__all__ = [
    "EndpointRemote",
    "NetworkVolumeRemote",
    "Payload",
    "PodRemote",
    "ResourceRemote",
    "TemplateRemote",
]
