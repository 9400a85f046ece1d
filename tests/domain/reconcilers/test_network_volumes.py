from __future__ import annotations

import asyncio

import pytest

from podstate.domain.errors import ImmutableFieldChanged, MissingRequiredField
from podstate.domain.model import NetworkVolumeConfig, NetworkVolumeState
from podstate.domain.presence import Value
from podstate.domain.reconcilers import NetworkVolumeReconciler
from tests.helpers.remotes import FakeResourceRemote


def test_create_requires_name_size_and_data_center() -> None:
    remote = FakeResourceRemote()

    with pytest.raises(MissingRequiredField) as excinfo:
        asyncio.run(
            NetworkVolumeReconciler(remote).create(
                NetworkVolumeConfig(name=Value("data"), size=Value(10))
            )
        )

    assert excinfo.value.field == "data_center_id"
    assert remote.calls == []


def test_data_center_change_is_refused_without_remote_call() -> None:
    remote = FakeResourceRemote()
    prior = NetworkVolumeState(id="v1", name="data", size=10, data_center_id="EU-RO-1")

    with pytest.raises(ImmutableFieldChanged) as excinfo:
        asyncio.run(
            NetworkVolumeReconciler(remote).update(
                "v1", NetworkVolumeConfig(data_center_id=Value("US-KS-2")), prior
            )
        )

    assert excinfo.value.prior == "EU-RO-1"
    assert excinfo.value.desired == "US-KS-2"
    assert "update network volume v1" in str(excinfo.value)
    assert remote.calls == []


def test_update_resizes_and_keeps_data_center_out_of_payload() -> None:
    remote = FakeResourceRemote(update_response={"id": "v1", "size": 20})
    prior = NetworkVolumeState(id="v1", name="data", size=10, data_center_id="EU-RO-1")
    config = NetworkVolumeConfig(
        name=Value("data"), size=Value(20), data_center_id=Value("EU-RO-1")
    )

    state = asyncio.run(NetworkVolumeReconciler(remote).update("v1", config, prior))

    assert remote.calls == [("update", ("v1", {"name": "data", "size": 20}))]
    assert state == NetworkVolumeState(id="v1", name="data", size=20, data_center_id="EU-RO-1")
