"""Compute instance ("pod") configuration, state and field table."""

from __future__ import annotations

from dataclasses import dataclass

from podstate.domain.fields import FieldSpec, FieldTable, computed
from podstate.domain.presence import UNSET, TriState, Value


@dataclass(frozen=True, slots=True, kw_only=True)
class PodConfig:
    name: TriState[str] = UNSET
    image_name: TriState[str] = UNSET
    compute_type: TriState[str] = UNSET
    cloud_type: TriState[str] = UNSET
    gpu_count: TriState[int] = UNSET
    vcpu_count: TriState[int] = UNSET
    gpu_type_ids: TriState[list[str]] = UNSET
    cpu_flavor_ids: TriState[list[str]] = UNSET
    data_center_ids: TriState[list[str]] = UNSET
    container_disk_in_gb: TriState[int] = UNSET
    volume_in_gb: TriState[int] = UNSET
    volume_mount_path: TriState[str] = UNSET
    ports: TriState[list[str]] = UNSET
    env: TriState[dict[str, str]] = UNSET
    docker_entrypoint: TriState[list[str]] = UNSET
    docker_start_cmd: TriState[list[str]] = UNSET
    template_id: TriState[str] = UNSET
    network_volume_id: TriState[str] = UNSET
    interruptible: TriState[bool] = UNSET
    locked: TriState[bool] = UNSET
    min_vcpu_per_gpu: TriState[int] = UNSET
    min_ram_per_gpu: TriState[int] = UNSET
    min_download_mbps: TriState[float] = UNSET
    min_upload_mbps: TriState[float] = UNSET
    min_disk_bandwidth_mbps: TriState[float] = UNSET
    support_public_ip: TriState[bool] = UNSET
    global_networking: TriState[bool] = UNSET
    allowed_cuda_versions: TriState[list[str]] = UNSET
    country_codes: TriState[list[str]] = UNSET
    gpu_type_priority: TriState[str] = UNSET
    cpu_flavor_priority: TriState[str] = UNSET
    data_center_priority: TriState[str] = UNSET
    container_registry_auth_id: TriState[str] = UNSET


@dataclass(frozen=True, slots=True, kw_only=True)
class PodState:
    id: str | None = None
    name: str | None = None
    image_name: str | None = None
    compute_type: str | None = None
    cloud_type: str | None = None
    gpu_count: int | None = None
    vcpu_count: int | None = None
    gpu_type_ids: tuple[str, ...] | None = None
    cpu_flavor_ids: tuple[str, ...] | None = None
    data_center_ids: tuple[str, ...] | None = None
    container_disk_in_gb: int | None = None
    volume_in_gb: int | None = None
    volume_mount_path: str | None = None
    ports: tuple[str, ...] | None = None
    env: dict[str, str] | None = None
    docker_entrypoint: tuple[str, ...] | None = None
    docker_start_cmd: tuple[str, ...] | None = None
    template_id: str | None = None
    network_volume_id: str | None = None
    interruptible: bool | None = None
    locked: bool | None = None
    min_vcpu_per_gpu: int | None = None
    min_ram_per_gpu: int | None = None
    min_download_mbps: float | None = None
    min_upload_mbps: float | None = None
    min_disk_bandwidth_mbps: float | None = None
    support_public_ip: bool | None = None
    global_networking: bool | None = None
    allowed_cuda_versions: tuple[str, ...] | None = None
    country_codes: tuple[str, ...] | None = None
    gpu_type_priority: str | None = None
    cpu_flavor_priority: str | None = None
    data_center_priority: str | None = None
    container_registry_auth_id: str | None = None
    # computed
    desired_status: str | None = None
    public_ip: str | None = None
    machine_id: str | None = None
    # no API field reports the placement; stays None until one does
    actual_data_center: str | None = None
    cost_per_hr: float | None = None
    adjusted_cost_per_hr: float | None = None
    memory_in_gb: float | None = None
    last_started_at: str | None = None
    last_status_change: str | None = None
    port_mappings: dict[str, int] | None = None


def _create_only(attr: str, wire: str, default: object = None) -> FieldSpec:
    if default is None:
        return FieldSpec(attr, wire, updatable=False)
    return FieldSpec(attr, wire, updatable=False, default=Value(default))


def _updatable(attr: str, wire: str, default: object = None, *, in_place: bool = False) -> FieldSpec:
    if default is None:
        return FieldSpec(attr, wire, in_place=in_place)
    return FieldSpec(attr, wire, in_place=in_place, default=Value(default))


POD_FIELDS = FieldTable(
    resource="pod",
    specs=(
        computed("id", "id"),
        _updatable("name", "name", "my pod", in_place=True),
        _updatable("image_name", "imageName"),
        _create_only("compute_type", "computeType", "GPU"),
        _create_only("cloud_type", "cloudType", "SECURE"),
        _create_only("gpu_count", "gpuCount", 1),
        _create_only("vcpu_count", "vcpuCount", 2),
        _create_only("gpu_type_ids", "gpuTypeIds"),
        _create_only("cpu_flavor_ids", "cpuFlavorIds"),
        _create_only("data_center_ids", "dataCenterIds"),
        _updatable("container_disk_in_gb", "containerDiskInGb", 50),
        _updatable("volume_in_gb", "volumeInGb", 20),
        _updatable("volume_mount_path", "volumeMountPath", "/workspace"),
        _updatable("ports", "ports"),
        _updatable("env", "env"),
        _updatable("docker_entrypoint", "dockerEntrypoint"),
        _updatable("docker_start_cmd", "dockerStartCmd"),
        _create_only("template_id", "templateId"),
        _create_only("network_volume_id", "networkVolumeId"),
        _create_only("interruptible", "interruptible", False),
        _updatable("locked", "locked", False, in_place=True),
        _create_only("min_vcpu_per_gpu", "minVCPUPerGPU", 2),
        _create_only("min_ram_per_gpu", "minRAMPerGPU", 8),
        _create_only("min_download_mbps", "minDownloadMbps"),
        _create_only("min_upload_mbps", "minUploadMbps"),
        _create_only("min_disk_bandwidth_mbps", "minDiskBandwidthMBps"),
        _create_only("support_public_ip", "supportPublicIp"),
        _updatable("global_networking", "globalNetworking", False),
        _create_only("allowed_cuda_versions", "allowedCudaVersions"),
        _create_only("country_codes", "countryCodes"),
        _create_only("gpu_type_priority", "gpuTypePriority", "availability"),
        _create_only("cpu_flavor_priority", "cpuFlavorPriority", "availability"),
        _create_only("data_center_priority", "dataCenterPriority", "availability"),
        _updatable("container_registry_auth_id", "containerRegistryAuthId"),
        computed("desired_status", "desiredStatus"),
        computed("public_ip", "publicIp"),
        computed("machine_id", "machineId"),
        computed("actual_data_center", None),
        computed("cost_per_hr", "costPerHr"),
        computed("adjusted_cost_per_hr", "adjustedCostPerHr"),
        computed("memory_in_gb", "memoryInGb"),
        computed("last_started_at", "lastStartedAt"),
        computed("last_status_change", "lastStatusChange"),
        computed("port_mappings", "portMappings"),
    ),
)
