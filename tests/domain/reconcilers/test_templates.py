from __future__ import annotations

import asyncio

from podstate.domain.model import Template
from podstate.domain.reconcilers import TemplateCatalog
from tests.helpers.remotes import FakeTemplateRemote


def test_list_filters_by_serverless_flag() -> None:
    templates = [
        Template(id="t1", name="pytorch", is_serverless=False),
        Template(id="t2", name="worker", is_serverless=True),
    ]
    catalog = TemplateCatalog(FakeTemplateRemote(templates))

    assert [item.id for item in asyncio.run(catalog.list())] == ["t1", "t2"]
    assert [item.id for item in asyncio.run(catalog.list(serverless=True))] == ["t2"]
    assert [item.id for item in asyncio.run(catalog.list(serverless=False))] == ["t1"]
