from __future__ import annotations

import pytest

from podstate.config import (
    ConfigurationError,
    MissingConfigurationError,
    get_deletion_policy,
    require_env_var,
    require_env_vars,
)


def test_require_env_vars_returns_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "value")

    assert require_env_vars(["EXAMPLE_VAR"]) == {"EXAMPLE_VAR": "value"}


def test_require_env_vars_names_every_missing_variable(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MISSING_A", raising=False)
    monkeypatch.setenv("MISSING_B", "  ")

    with pytest.raises(MissingConfigurationError) as exc:
        require_env_vars(["MISSING_B", "MISSING_A"])

    assert "MISSING_A, MISSING_B" in str(exc.value)


def test_require_env_var_handles_blank_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "   ")

    with pytest.raises(MissingConfigurationError):
        require_env_var("EXAMPLE_VAR")


def test_deletion_policy_defaults() -> None:
    policy = get_deletion_policy()

    assert policy.interval_seconds == 5.0
    assert policy.timeout_seconds == 300.0


def test_deletion_policy_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PODSTATE_DELETE_POLL_SECONDS", "0.5")
    monkeypatch.setenv("PODSTATE_DELETE_TIMEOUT_SECONDS", "30")

    policy = get_deletion_policy()

    assert policy.interval_seconds == 0.5
    assert policy.timeout_seconds == 30.0


@pytest.mark.parametrize("raw", ["soon", "0", "-1"])
def test_deletion_policy_rejects_invalid_values(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("PODSTATE_DELETE_TIMEOUT_SECONDS", raw)

    with pytest.raises(ConfigurationError, match="PODSTATE_DELETE_TIMEOUT_SECONDS"):
        get_deletion_policy()
