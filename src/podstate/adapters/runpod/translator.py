"""Translate between API payload models and domain objects."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from pydantic import ValidationError

from podstate.domain.codec import set_fields
from podstate.domain.model import RemoteRecord, Template
from podstate.domain.presence import Value

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .schema import ResourcePayload, RunpodBaseModel, TemplatePayload


def to_remote_record(payload: ResourcePayload) -> RemoteRecord:
    """Keep exactly the fields the response carried."""

    return RemoteRecord(
        values={name: getattr(payload, name) for name in sorted(payload.model_fields_set)}
    )


def to_template(payload: TemplatePayload) -> Template:
    return Template(
        id=payload.id,
        name=payload.name,
        image_name=payload.image_name,
        category=payload.category,
        is_public=payload.is_public,
        is_runpod=payload.is_runpod,
        is_serverless=payload.is_serverless,
        container_disk_in_gb=payload.container_disk_in_gb,
        volume_in_gb=payload.volume_in_gb,
        volume_mount_path=payload.volume_mount_path,
        ports=tuple(payload.ports or ()),
        env=dict(payload.env) if payload.env is not None else None,
        readme=payload.readme,
        start_jupyter=payload.start_jupyter,
        start_ssh=payload.start_ssh,
    )


def checked_config[C](
    payload: Mapping[str, object], config: C, payload_model: type[RunpodBaseModel]
) -> C:
    """Replace the set values of ``config`` with ``payload`` coerced by the API model.

    ``payload`` is the wire-keyed source ``config`` was decoded from; a value
    the API would refuse raises ``ValueError`` before anything is sent.
    """

    try:
        checked = payload_model.model_validate(dict(payload))
    except ValidationError as exc:
        raise ValueError(f"Invalid configuration: {exc}") from exc
    return replace(  # type: ignore[type-var]
        config, **{name: Value(getattr(checked, name)) for name in set_fields(config)}
    )
