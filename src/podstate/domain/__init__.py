"""Reconciliation core: tri-state configs, codec, merger, reconcilers."""

from __future__ import annotations

from .codec import decode_payload, encode_payload, set_fields
from .deletion import Clock, DeletionConfirmer, DeletionOutcome, DeletionResult, SystemClock
from .errors import (
    DecodeFailed,
    ImmutableFieldChanged,
    InPlaceUpdateRejected,
    MissingRequiredField,
    NotFound,
    ReconcileError,
    RemoteRejected,
    TimedOutWarning,
    TransportFailure,
)
from .fields import FieldSpec, FieldTable, MergeRule
from .merge import merge_state, overlay_config, seed_state
from .presence import UNSET, TriState, Value, is_set, of, value_or

__all__ = [
    "UNSET",
    "Clock",
    "DecodeFailed",
    "DeletionConfirmer",
    "DeletionOutcome",
    "DeletionResult",
    "FieldSpec",
    "FieldTable",
    "ImmutableFieldChanged",
    "InPlaceUpdateRejected",
    "MergeRule",
    "MissingRequiredField",
    "NotFound",
    "ReconcileError",
    "RemoteRejected",
    "SystemClock",
    "TimedOutWarning",
    "TransportFailure",
    "TriState",
    "Value",
    "decode_payload",
    "encode_payload",
    "is_set",
    "merge_state",
    "of",
    "overlay_config",
    "seed_state",
    "set_fields",
    "value_or",
]
