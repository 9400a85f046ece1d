from __future__ import annotations

import pytest

from podstate.config import RUNPOD_BASE_URL, MissingConfigurationError, get_runpod_config


def test_reads_api_key_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RUNPOD_API_KEY", "env-key")

    config = get_runpod_config()

    assert config.api_key == "env-key"
    assert config.resilience.base_url == RUNPOD_BASE_URL
    assert config.resilience.timeout_seconds == 300.0
    assert config.resilience.retry.total == 0


def test_explicit_key_wins_over_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RUNPOD_API_KEY", "env-key")

    assert get_runpod_config("explicit").api_key == "explicit"


def test_missing_or_blank_key_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    with pytest.raises(MissingConfigurationError, match="RUNPOD_API_KEY"):
        get_runpod_config()

    monkeypatch.setenv("RUNPOD_API_KEY", "env-key")
    with pytest.raises(MissingConfigurationError):
        get_runpod_config("  ")


def test_base_url_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RUNPOD_BASE_URL", "https://staging.example/v1/")

    assert get_runpod_config("k").resilience.base_url == "https://staging.example/v1"
    assert (
        get_runpod_config("k", base_url="https://other.example/v1").resilience.base_url
        == "https://other.example/v1"
    )


def test_repr_masks_api_key() -> None:
    assert "secret" not in repr(get_runpod_config("secret"))
