"""Domain port definitions for adapters."""

from __future__ import annotations

from .remote import (
    EndpointRemote,
    NetworkVolumeRemote,
    Payload,
    PodRemote,
    ResourceRemote,
    TemplateRemote,
)

__all__ = [
    "EndpointRemote",
    "NetworkVolumeRemote",
    "Payload",
    "PodRemote",
    "ResourceRemote",
    "TemplateRemote",
]
