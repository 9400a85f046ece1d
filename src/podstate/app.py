"""Application wiring: one shared client, one reconciler per resource type."""

from __future__ import annotations

from contextlib import asynccontextmanager
from dataclasses import asdict, dataclass, fields
from logging import getLogger
from typing import TYPE_CHECKING

from podstate.adapters.runpod import RunpodClient
from podstate.config import get_deletion_policy, get_runpod_config
from podstate.domain.deletion import DeletionConfirmer
from podstate.domain.merge import to_state_value
from podstate.domain.reconcilers import (
    EndpointReconciler,
    NetworkVolumeReconciler,
    PodReconciler,
    TemplateCatalog,
)

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Mapping

    import httpx

    from podstate.config import DeletionPolicy, RunpodConfig
    from podstate.domain.deletion import Clock

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Session:
    pods: PodReconciler
    endpoints: EndpointReconciler
    network_volumes: NetworkVolumeReconciler
    templates: TemplateCatalog


@asynccontextmanager
async def open_session(
    config: RunpodConfig | None = None,
    *,
    deletion: DeletionPolicy | None = None,
    clock: Clock | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AsyncIterator[Session]:
    """Open a client and hand out reconcilers that share it.

    Configuration falls back to the environment when not passed explicitly.
    """

    effective_config = config or get_runpod_config()
    confirmer = DeletionConfirmer(deletion or get_deletion_policy(), clock=clock)
    log.debug("Opening session against %s", effective_config.resilience.base_url)
    async with RunpodClient(effective_config, transport=transport) as client:
        yield Session(
            pods=PodReconciler(client.pods, confirmer=confirmer),
            endpoints=EndpointReconciler(client.endpoints, confirmer=confirmer),
            network_volumes=NetworkVolumeReconciler(client.network_volumes, confirmer=confirmer),
            templates=TemplateCatalog(client.templates),
        )


def load_state[S](state_type: type[S], data: Mapping[str, object]) -> S:
    """Rebuild a state previously written by :func:`dump_state`."""

    known = {item.name for item in fields(state_type)}  # type: ignore[arg-type]
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown state fields: {', '.join(unknown)}")
    return state_type(**{name: to_state_value(value) for name, value in data.items()})


def dump_state(state: object) -> dict[str, object]:
    return asdict(state)  # type: ignore[call-overload]


__all__ = ["Session", "dump_state", "load_state", "open_session"]
