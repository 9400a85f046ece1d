"""Application configuration helpers."""

from __future__ import annotations

from podstate.common.logging import configure_logging

from .deletion import DeletionPolicy, get_deletion_policy
from .env import require_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy
from .runpod import RUNPOD_BASE_URL, RunpodConfig, get_runpod_config

__all__ = [
    "RUNPOD_BASE_URL",
    "ConfigurationError",
    "DeletionPolicy",
    "MissingConfigurationError",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "RunpodConfig",
    "configure_logging",
    "get_deletion_policy",
    "get_runpod_config",
    "require_env_var",
    "require_env_vars",
]
