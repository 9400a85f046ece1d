"""Remote service configuration values."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .env import require_env_var
from .errors import MissingConfigurationError
from .http_resilience import RateLimit, ResilienceConfig

RUNPOD_BASE_URL = "https://rest.runpod.io/v1"
RUNPOD_TIMEOUT_SECONDS = 300.0
API_KEY_ENV = "RUNPOD_API_KEY"
BASE_URL_ENV = "RUNPOD_BASE_URL"


@dataclass(frozen=True, slots=True)
class RunpodConfig:
    """Credentials and transport settings for the REST API."""

    api_key: str
    resilience: ResilienceConfig

    def __repr__(self) -> str:
        return f"RunpodConfig(api_key='***', resilience={self.resilience!r})"


def get_runpod_config(
    api_key: str | None = None,
    *,
    base_url: str | None = None,
    ratelimit: RateLimit | None = None,
) -> RunpodConfig:
    """Build the API configuration.

    An explicitly passed ``api_key`` wins over the ``RUNPOD_API_KEY``
    environment variable. Either way the key must be non-blank.
    """

    if api_key is not None:
        if not api_key.strip():
            raise MissingConfigurationError(
                f"Missing configuration for: api_key (set it explicitly or via {API_KEY_ENV})"
            )
        key = api_key
    else:
        key = require_env_var(API_KEY_ENV)

    resolved_base_url = base_url or os.getenv(BASE_URL_ENV) or RUNPOD_BASE_URL
    resilience = ResilienceConfig(
        name="runpod",
        base_url=resolved_base_url.rstrip("/"),
        timeout_seconds=RUNPOD_TIMEOUT_SECONDS,
        ratelimit=ratelimit,
    )
    return RunpodConfig(api_key=key, resilience=resilience)
