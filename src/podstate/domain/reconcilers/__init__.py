"""Per-resource reconcilers."""

from __future__ import annotations

from .base import DeleteAck, ResourceReconciler
from .endpoints import EndpointReconciler
from .network_volumes import NetworkVolumeReconciler
from .pods import IN_PLACE_FIELDS, PodReconciler
from .templates import TemplateCatalog

__all__ = [
    "IN_PLACE_FIELDS",
    "DeleteAck",
    "EndpointReconciler",
    "NetworkVolumeReconciler",
    "PodReconciler",
    "ResourceReconciler",
    "TemplateCatalog",
]
