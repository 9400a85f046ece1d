from __future__ import annotations

import asyncio

import pytest

from podstate.domain.errors import ImmutableFieldChanged, MissingRequiredField
from podstate.domain.model import EndpointConfig, EndpointState
from podstate.domain.presence import Value
from podstate.domain.reconcilers import EndpointReconciler
from tests.helpers.remotes import FakeResourceRemote


def test_create_requires_template() -> None:
    remote = FakeResourceRemote()

    with pytest.raises(MissingRequiredField) as excinfo:
        asyncio.run(EndpointReconciler(remote).create(EndpointConfig(name=Value("api"))))

    assert excinfo.value.field == "template_id"
    assert remote.calls == []


def test_create_seeds_defaults_for_unset_fields() -> None:
    remote = FakeResourceRemote(create_response={"id": "e1", "template_id": "t1"})

    state, identity = asyncio.run(
        EndpointReconciler(remote).create(EndpointConfig(template_id=Value("t1")))
    )

    assert identity == "e1"
    assert remote.calls == [("create", {"templateId": "t1"})]
    assert state.workers_min == 0
    assert state.scaler_type == "QUEUE_DELAY"
    assert state.scaler_value == 4
    assert state.compute_type == "GPU"


def test_read_accepts_reported_zero_workers() -> None:
    remote = FakeResourceRemote(get_responses=[{"id": "e1", "workers_min": 0, "workers_max": 0}])
    prior = EndpointState(id="e1", workers_min=2, workers_max=3)

    state = asyncio.run(EndpointReconciler(remote).read("e1", prior))

    assert state.workers_min == 0
    # workers_max keeps the known value when reported empty
    assert state.workers_max == 3


def test_update_sends_set_fields_with_patch_semantics() -> None:
    remote = FakeResourceRemote(update_response={"id": "e1", "workers_max": 5, "version": 2})
    prior = EndpointState(id="e1", template_id="t1", workers_max=3, version=1)

    state = asyncio.run(
        EndpointReconciler(remote).update("e1", EndpointConfig(workers_max=Value(5)), prior)
    )

    assert remote.calls == [("update", ("e1", {"workersMax": 5}))]
    assert state.workers_max == 5
    assert state.version == 2
    assert state.template_id == "t1"


def test_compute_type_is_immutable() -> None:
    remote = FakeResourceRemote()
    prior = EndpointState(id="e1", compute_type="GPU")

    with pytest.raises(ImmutableFieldChanged):
        asyncio.run(
            EndpointReconciler(remote).update(
                "e1", EndpointConfig(compute_type=Value("CPU")), prior
            )
        )

    assert remote.calls == []
