"""Read-only template listing."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from podstate.domain.model import Template
    from podstate.domain.ports import TemplateRemote

log = getLogger(__name__)


class TemplateCatalog:
    def __init__(self, remote: TemplateRemote) -> None:
        self._remote = remote

    async def list(self, *, serverless: bool | None = None) -> list[Template]:
        templates = await self._remote.list()
        if serverless is not None:
            templates = [item for item in templates if item.is_serverless is serverless]
        log.debug("Listed %d templates", len(templates))
        return templates
