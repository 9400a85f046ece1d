"""RunPod REST API adapter."""

from __future__ import annotations

from .client import EndpointsApi, NetworkVolumesApi, PodsApi, RunpodClient, TemplatesApi
from .schema import EndpointPayload, NetworkVolumePayload, PodPayload
from .translator import checked_config

__all__ = [
    "EndpointPayload",
    "EndpointsApi",
    "NetworkVolumePayload",
    "NetworkVolumesApi",
    "PodPayload",
    "PodsApi",
    "RunpodClient",
    "TemplatesApi",
    "checked_config",
]
