"""Templates are listed, never reconciled."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class Template:
    id: str
    name: str | None = None
    image_name: str | None = None
    category: str | None = None
    is_public: bool = False
    is_runpod: bool = False
    is_serverless: bool = False
    container_disk_in_gb: int | None = None
    volume_in_gb: int | None = None
    volume_mount_path: str | None = None
    ports: tuple[str, ...] = ()
    env: dict[str, str] | None = None
    readme: str | None = None
    start_jupyter: bool = False
    start_ssh: bool = False
