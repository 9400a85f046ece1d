"""Deletion confirmation defaults."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_float_env

DEFAULT_DELETE_POLL_SECONDS = 5.0
DEFAULT_DELETE_TIMEOUT_SECONDS = 300.0


@dataclass(frozen=True, slots=True)
class DeletionPolicy:
    interval_seconds: float = DEFAULT_DELETE_POLL_SECONDS
    timeout_seconds: float = DEFAULT_DELETE_TIMEOUT_SECONDS


def get_deletion_policy() -> DeletionPolicy:
    return DeletionPolicy(
        interval_seconds=optional_float_env(
            "PODSTATE_DELETE_POLL_SECONDS", DEFAULT_DELETE_POLL_SECONDS
        ),
        timeout_seconds=optional_float_env(
            "PODSTATE_DELETE_TIMEOUT_SECONDS", DEFAULT_DELETE_TIMEOUT_SECONDS
        ),
    )
