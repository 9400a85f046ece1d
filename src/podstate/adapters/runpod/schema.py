"""Pydantic models describing the REST API payloads.

Field names match the attribute names of the local state models so the
translator can copy whatever the payload carried without a mapping table.
"""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, TypeAdapter


class RunpodBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class PodPayload(RunpodBaseModel):
    id: str | None = None
    name: str | None = None
    # create takes ``imageName`` but pod records answer with ``image``
    image_name: str | None = Field(
        default=None, validation_alias=AliasChoices("image", "imageName")
    )
    compute_type: str | None = Field(default=None, alias="computeType")
    cloud_type: str | None = Field(default=None, alias="cloudType")
    gpu_count: int | None = Field(default=None, alias="gpuCount")
    vcpu_count: int | None = Field(default=None, alias="vcpuCount")
    gpu_type_ids: list[str] | None = Field(default=None, alias="gpuTypeIds")
    cpu_flavor_ids: list[str] | None = Field(default=None, alias="cpuFlavorIds")
    data_center_ids: list[str] | None = Field(default=None, alias="dataCenterIds")
    container_disk_in_gb: int | None = Field(default=None, alias="containerDiskInGb")
    volume_in_gb: int | None = Field(default=None, alias="volumeInGb")
    volume_mount_path: str | None = Field(default=None, alias="volumeMountPath")
    ports: list[str] | None = None
    env: dict[str, str] | None = None
    docker_entrypoint: list[str] | None = Field(default=None, alias="dockerEntrypoint")
    docker_start_cmd: list[str] | None = Field(default=None, alias="dockerStartCmd")
    template_id: str | None = Field(default=None, alias="templateId")
    network_volume_id: str | None = Field(default=None, alias="networkVolumeId")
    interruptible: bool | None = None
    locked: bool | None = None
    min_vcpu_per_gpu: int | None = Field(default=None, alias="minVCPUPerGPU")
    min_ram_per_gpu: int | None = Field(default=None, alias="minRAMPerGPU")
    min_download_mbps: float | None = Field(default=None, alias="minDownloadMbps")
    min_upload_mbps: float | None = Field(default=None, alias="minUploadMbps")
    min_disk_bandwidth_mbps: float | None = Field(default=None, alias="minDiskBandwidthMBps")
    support_public_ip: bool | None = Field(default=None, alias="supportPublicIp")
    global_networking: bool | None = Field(default=None, alias="globalNetworking")
    allowed_cuda_versions: list[str] | None = Field(default=None, alias="allowedCudaVersions")
    country_codes: list[str] | None = Field(default=None, alias="countryCodes")
    gpu_type_priority: str | None = Field(default=None, alias="gpuTypePriority")
    cpu_flavor_priority: str | None = Field(default=None, alias="cpuFlavorPriority")
    data_center_priority: str | None = Field(default=None, alias="dataCenterPriority")
    container_registry_auth_id: str | None = Field(default=None, alias="containerRegistryAuthId")
    desired_status: str | None = Field(default=None, alias="desiredStatus")
    public_ip: str | None = Field(default=None, alias="publicIp")
    machine_id: str | None = Field(default=None, alias="machineId")
    cost_per_hr: float | None = Field(default=None, alias="costPerHr")
    adjusted_cost_per_hr: float | None = Field(default=None, alias="adjustedCostPerHr")
    memory_in_gb: float | None = Field(default=None, alias="memoryInGb")
    last_started_at: str | None = Field(default=None, alias="lastStartedAt")
    last_status_change: str | None = Field(default=None, alias="lastStatusChange")
    port_mappings: dict[str, int] | None = Field(default=None, alias="portMappings")


class EndpointPayload(RunpodBaseModel):
    id: str | None = None
    name: str | None = None
    template_id: str | None = Field(default=None, alias="templateId")
    compute_type: str | None = Field(default=None, alias="computeType")
    gpu_count: int | None = Field(default=None, alias="gpuCount")
    vcpu_count: int | None = Field(default=None, alias="vcpuCount")
    gpu_type_ids: list[str] | None = Field(default=None, alias="gpuTypeIds")
    cpu_flavor_ids: list[str] | None = Field(default=None, alias="cpuFlavorIds")
    data_center_ids: list[str] | None = Field(default=None, alias="dataCenterIds")
    network_volume_id: str | None = Field(default=None, alias="networkVolumeId")
    workers_min: int | None = Field(default=None, alias="workersMin")
    workers_max: int | None = Field(default=None, alias="workersMax")
    idle_timeout: int | None = Field(default=None, alias="idleTimeout")
    execution_timeout_ms: int | None = Field(default=None, alias="executionTimeoutMs")
    scaler_type: str | None = Field(default=None, alias="scalerType")
    scaler_value: int | None = Field(default=None, alias="scalerValue")
    allowed_cuda_versions: list[str] | None = Field(default=None, alias="allowedCudaVersions")
    flashboot: bool | None = None
    created_at: str | None = Field(default=None, alias="createdAt")
    user_id: str | None = Field(default=None, alias="userId")
    version: int | None = None


class NetworkVolumePayload(RunpodBaseModel):
    id: str | None = None
    name: str | None = None
    size: int | None = None
    data_center_id: str | None = Field(default=None, alias="dataCenterId")


class TemplatePayload(RunpodBaseModel):
    id: str
    name: str | None = None
    image_name: str | None = Field(default=None, alias="imageName")
    category: str | None = None
    is_public: bool = Field(default=False, alias="isPublic")
    is_runpod: bool = Field(default=False, alias="isRunpod")
    is_serverless: bool = Field(default=False, alias="isServerless")
    container_disk_in_gb: int | None = Field(default=None, alias="containerDiskInGb")
    volume_in_gb: int | None = Field(default=None, alias="volumeInGb")
    volume_mount_path: str | None = Field(default=None, alias="volumeMountPath")
    ports: list[str] | None = None
    env: dict[str, str] | None = None
    readme: str | None = None
    start_jupyter: bool = Field(default=False, alias="startJupyter")
    start_ssh: bool = Field(default=False, alias="startSsh")


type ResourcePayload = PodPayload | EndpointPayload | NetworkVolumePayload

TEMPLATE_LIST = TypeAdapter(list[TemplatePayload])
