"""Serverless endpoint configuration, state and field table."""

from __future__ import annotations

from dataclasses import dataclass

from podstate.domain.fields import FieldSpec, FieldTable, MergeRule, computed
from podstate.domain.presence import UNSET, TriState, Value


@dataclass(frozen=True, slots=True, kw_only=True)
class EndpointConfig:
    name: TriState[str] = UNSET
    template_id: TriState[str] = UNSET
    compute_type: TriState[str] = UNSET
    gpu_count: TriState[int] = UNSET
    vcpu_count: TriState[int] = UNSET
    gpu_type_ids: TriState[list[str]] = UNSET
    cpu_flavor_ids: TriState[list[str]] = UNSET
    data_center_ids: TriState[list[str]] = UNSET
    network_volume_id: TriState[str] = UNSET
    workers_min: TriState[int] = UNSET
    workers_max: TriState[int] = UNSET
    idle_timeout: TriState[int] = UNSET
    execution_timeout_ms: TriState[int] = UNSET
    scaler_type: TriState[str] = UNSET
    scaler_value: TriState[int] = UNSET
    allowed_cuda_versions: TriState[list[str]] = UNSET
    flashboot: TriState[bool] = UNSET


@dataclass(frozen=True, slots=True, kw_only=True)
class EndpointState:
    id: str | None = None
    name: str | None = None
    template_id: str | None = None
    compute_type: str | None = None
    gpu_count: int | None = None
    vcpu_count: int | None = None
    gpu_type_ids: tuple[str, ...] | None = None
    cpu_flavor_ids: tuple[str, ...] | None = None
    data_center_ids: tuple[str, ...] | None = None
    network_volume_id: str | None = None
    workers_min: int | None = None
    workers_max: int | None = None
    idle_timeout: int | None = None
    execution_timeout_ms: int | None = None
    scaler_type: str | None = None
    scaler_value: int | None = None
    allowed_cuda_versions: tuple[str, ...] | None = None
    flashboot: bool | None = None
    # computed
    created_at: str | None = None
    user_id: str | None = None
    version: int | None = None


ENDPOINT_FIELDS = FieldTable(
    resource="endpoint",
    specs=(
        computed("id", "id"),
        FieldSpec("name", "name"),
        FieldSpec("template_id", "templateId", required=True),
        FieldSpec("compute_type", "computeType", updatable=False, default=Value("GPU")),
        FieldSpec("gpu_count", "gpuCount", default=Value(1)),
        FieldSpec("vcpu_count", "vcpuCount", default=Value(2)),
        FieldSpec("gpu_type_ids", "gpuTypeIds"),
        FieldSpec("cpu_flavor_ids", "cpuFlavorIds"),
        FieldSpec("data_center_ids", "dataCenterIds"),
        FieldSpec("network_volume_id", "networkVolumeId"),
        FieldSpec("workers_min", "workersMin", MergeRule.PRESENCE, default=Value(0)),
        FieldSpec("workers_max", "workersMax"),
        FieldSpec("idle_timeout", "idleTimeout", default=Value(5)),
        FieldSpec("execution_timeout_ms", "executionTimeoutMs"),
        FieldSpec("scaler_type", "scalerType", default=Value("QUEUE_DELAY")),
        FieldSpec("scaler_value", "scalerValue", default=Value(4)),
        FieldSpec("allowed_cuda_versions", "allowedCudaVersions"),
        FieldSpec("flashboot", "flashboot"),
        computed("created_at", "createdAt"),
        computed("user_id", "userId"),
        computed("version", "version"),
    ),
)
