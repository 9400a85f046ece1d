"""Resource models: desired configs, local states, field tables."""

from __future__ import annotations

from .endpoint import ENDPOINT_FIELDS, EndpointConfig, EndpointState
from .network_volume import NETWORK_VOLUME_FIELDS, NetworkVolumeConfig, NetworkVolumeState
from .pod import POD_FIELDS, PodConfig, PodState
from .record import RemoteRecord
from .template import Template

__all__ = [
    "ENDPOINT_FIELDS",
    "NETWORK_VOLUME_FIELDS",
    "POD_FIELDS",
    "EndpointConfig",
    "EndpointState",
    "NetworkVolumeConfig",
    "NetworkVolumeState",
    "PodConfig",
    "PodState",
    "RemoteRecord",
    "Template",
]
