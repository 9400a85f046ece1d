from __future__ import annotations

import pytest

from podstate.config import DeletionPolicy
from podstate.domain.deletion import DeletionConfirmer
from tests.helpers.remotes import FakeClock


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "RUNPOD_API_KEY",
        "RUNPOD_BASE_URL",
        "PODSTATE_DELETE_POLL_SECONDS",
        "PODSTATE_DELETE_TIMEOUT_SECONDS",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def confirmer(clock: FakeClock) -> DeletionConfirmer:
    return DeletionConfirmer(DeletionPolicy(interval_seconds=1.0, timeout_seconds=2.0), clock=clock)
