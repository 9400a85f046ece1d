from __future__ import annotations

import pytest

from podstate.domain.codec import decode_payload, encode_payload, set_fields
from podstate.domain.model import (
    ENDPOINT_FIELDS,
    NETWORK_VOLUME_FIELDS,
    POD_FIELDS,
    EndpointConfig,
    NetworkVolumeConfig,
    PodConfig,
)
from podstate.domain.presence import UNSET, Value


def test_encode_sends_only_set_fields() -> None:
    config = PodConfig(gpu_count=Value(1), ports=Value(["8080/http"]))

    payload = encode_payload(config, POD_FIELDS.settable())

    assert payload == {"gpuCount": 1, "ports": ["8080/http"]}
    assert "name" not in payload


def test_encode_keeps_explicit_zero_values() -> None:
    config = EndpointConfig(workers_min=Value(0), flashboot=Value(False), name=Value(""))

    payload = encode_payload(config, ENDPOINT_FIELDS.settable())

    assert payload == {"workersMin": 0, "flashboot": False, "name": ""}


def test_encode_restricts_to_given_fields() -> None:
    config = PodConfig(name=Value("trainer"), gpu_count=Value(2), locked=Value(True))

    payload = encode_payload(config, POD_FIELDS.in_place())

    assert payload == {"name": "trainer", "locked": True}


def test_encode_uses_create_wire_name_for_image() -> None:
    payload = encode_payload(PodConfig(image_name=Value("runpod/base:1")), POD_FIELDS.settable())

    assert payload == {"imageName": "runpod/base:1"}


def test_encode_copies_collections() -> None:
    ports = ["22/tcp"]
    env = {"A": "1"}
    payload = encode_payload(PodConfig(ports=Value(ports), env=Value(env)), POD_FIELDS.settable())

    ports.append("8888/http")
    env["B"] = "2"

    assert payload == {"ports": ["22/tcp"], "env": {"A": "1"}}


@pytest.mark.parametrize(
    ("config", "table"),
    [
        (PodConfig(), POD_FIELDS),
        (
            PodConfig(
                name=Value("trainer"),
                gpu_count=Value(0),
                env=Value({"TOKEN": "x"}),
                interruptible=Value(False),
            ),
            POD_FIELDS,
        ),
        (EndpointConfig(template_id=Value("t1"), workers_min=Value(0)), ENDPOINT_FIELDS),
        (NetworkVolumeConfig(size=Value(50)), NETWORK_VOLUME_FIELDS),
    ],
)
def test_decode_restores_presence_pattern(config: object, table: object) -> None:
    payload = encode_payload(config, table.settable())  # type: ignore[attr-defined]

    decoded = decode_payload(payload, type(config), table)  # type: ignore[arg-type]

    assert decoded == config
    assert set_fields(decoded) == set_fields(config)


def test_decode_leaves_absent_keys_unset() -> None:
    decoded = decode_payload({"size": 10}, NetworkVolumeConfig, NETWORK_VOLUME_FIELDS)

    assert decoded.size == Value(10)
    assert decoded.name is UNSET
    assert decoded.data_center_id is UNSET


def test_decode_rejects_unknown_and_computed_keys() -> None:
    with pytest.raises(ValueError, match="gpuCont"):
        decode_payload({"gpuCont": 1}, PodConfig, POD_FIELDS)

    with pytest.raises(ValueError, match="machineId"):
        decode_payload({"machineId": "m1"}, PodConfig, POD_FIELDS)


def test_set_fields_lists_set_attributes() -> None:
    config = PodConfig(name=Value("a"), locked=Value(False))

    assert set_fields(config) == frozenset({"name", "locked"})
