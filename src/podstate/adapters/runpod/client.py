"""HTTP client for the RunPod REST API."""

from __future__ import annotations

from dataclasses import replace
from logging import getLogger
from typing import TYPE_CHECKING, ClassVar

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from podstate.adapters.http_resilience import ResilienceConfig, ResilientClient
from podstate.domain.errors import DecodeFailed, NotFound, RemoteRejected, TransportFailure

from .schema import TEMPLATE_LIST, EndpointPayload, NetworkVolumePayload, PodPayload
from .translator import to_remote_record, to_template

if TYPE_CHECKING:
    from types import TracebackType

    from podstate.config.runpod import RunpodConfig
    from podstate.domain.model import RemoteRecord, Template
    from podstate.domain.ports import Payload

log = getLogger(__name__)


def _resilience_with_auth(config: RunpodConfig) -> ResilienceConfig:
    headers = dict(config.resilience.default_headers or {})
    headers.update(
        {
            "Authorization": f"Bearer {config.api_key}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
    )
    return replace(config.resilience, default_headers=headers)


class _Transport:
    """Sends one request and maps failures onto the domain fault taxonomy."""

    def __init__(self, http: ResilientClient) -> None:
        self._http = http

    async def send(
        self,
        method: str,
        path: str,
        *,
        operation: str,
        identity: str | None = None,
        json: object = None,
    ) -> httpx.Response:
        try:
            if json is None:
                response = await self._http.request(method, path)
            else:
                response = await self._http.request(method, path, json=json)
        except httpx.HTTPError as exc:
            raise TransportFailure(
                str(exc) or type(exc).__name__, operation=operation, identity=identity
            ) from exc

        if response.status_code >= 400:
            log.debug("%s rejected with %s", operation, response.status_code)
            error_type = NotFound if response.status_code == 404 else RemoteRejected
            raise error_type(
                status=response.status_code,
                body=response.text,
                operation=operation,
                identity=identity,
            )
        return response

    @staticmethod
    def decode[M: BaseModel](
        response: httpx.Response,
        model: type[M],
        *,
        operation: str,
        identity: str | None = None,
    ) -> M:
        try:
            return model.model_validate_json(response.content)
        except ValidationError as exc:
            raise DecodeFailed(
                f"unexpected response body ({exc.error_count()} errors)",
                operation=operation,
                identity=identity,
            ) from exc

    @staticmethod
    def decode_list[T](
        response: httpx.Response,
        adapter: TypeAdapter[list[T]],
        *,
        operation: str,
    ) -> list[T]:
        try:
            return adapter.validate_json(response.content)
        except ValidationError as exc:
            raise DecodeFailed(
                f"unexpected response body ({exc.error_count()} errors)",
                operation=operation,
            ) from exc


class ResourceApi:
    """CRUD and list calls for one REST collection."""

    path: ClassVar[str]
    resource: ClassVar[str]
    payload_model: ClassVar[type[PodPayload | EndpointPayload | NetworkVolumePayload]]

    def __init__(self, transport: _Transport) -> None:
        self._transport = transport
        self._list_adapter = TypeAdapter(list[self.payload_model])

    async def create(self, payload: Payload) -> RemoteRecord:
        operation = f"create {self.resource}"
        response = await self._transport.send(
            "POST", self.path, operation=operation, json=dict(payload)
        )
        return self._record(response, operation=operation)

    async def get(self, identity: str) -> RemoteRecord:
        operation = f"read {self.resource}"
        response = await self._transport.send(
            "GET", self._item(identity), operation=operation, identity=identity
        )
        return self._record(response, operation=operation, identity=identity)

    async def update(self, identity: str, payload: Payload) -> RemoteRecord:
        return await self._update("PATCH", identity, payload, operation=f"update {self.resource}")

    async def delete(self, identity: str) -> None:
        await self._transport.send(
            "DELETE",
            self._item(identity),
            operation=f"delete {self.resource}",
            identity=identity,
        )

    async def list(self) -> list[RemoteRecord]:
        operation = f"list {self.resource}"
        response = await self._transport.send("GET", self.path, operation=operation)
        payloads = self._transport.decode_list(response, self._list_adapter, operation=operation)
        return [to_remote_record(payload) for payload in payloads]

    async def _update(
        self, method: str, identity: str, payload: Payload, *, operation: str
    ) -> RemoteRecord:
        response = await self._transport.send(
            method,
            self._item(identity),
            operation=operation,
            identity=identity,
            json=dict(payload),
        )
        return self._record(response, operation=operation, identity=identity)

    def _item(self, identity: str) -> str:
        return f"{self.path}/{identity}"

    def _record(
        self,
        response: httpx.Response,
        *,
        operation: str,
        identity: str | None = None,
    ) -> RemoteRecord:
        payload = self._transport.decode(
            response, self.payload_model, operation=operation, identity=identity
        )
        return to_remote_record(payload)


class PodsApi(ResourceApi):
    path = "/pods"
    resource = "pod"
    payload_model = PodPayload

    async def update(self, identity: str, payload: Payload) -> RemoteRecord:
        # a full update resets the pod
        return await self._update("PUT", identity, payload, operation="update pod")

    async def update_in_place(self, identity: str, payload: Payload) -> RemoteRecord:
        return await self._update("PATCH", identity, payload, operation="update pod in place")

    async def stop(self, identity: str) -> None:
        await self._transport.send(
            "POST", f"{self._item(identity)}/stop", operation="stop pod", identity=identity
        )

    async def start(self, identity: str) -> None:
        await self._transport.send(
            "POST", f"{self._item(identity)}/start", operation="start pod", identity=identity
        )


class EndpointsApi(ResourceApi):
    path = "/endpoints"
    resource = "endpoint"
    payload_model = EndpointPayload


class NetworkVolumesApi(ResourceApi):
    path = "/networkvolumes"
    resource = "network volume"
    payload_model = NetworkVolumePayload


class TemplatesApi:
    def __init__(self, transport: _Transport) -> None:
        self._transport = transport

    async def list(self) -> list[Template]:
        operation = "list templates"
        response = await self._transport.send("GET", "/templates", operation=operation)
        payloads = self._transport.decode_list(response, TEMPLATE_LIST, operation=operation)
        return [to_template(payload) for payload in payloads]


class RunpodClient:
    """One authenticated connection pool shared by all resource collections.

    ``transport`` replaces the network layer, which tests use to plug in an
    ``httpx.MockTransport``.
    """

    def __init__(
        self,
        config: RunpodConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._http = ResilientClient(_resilience_with_auth(config), transport=transport)
        sender = _Transport(self._http)
        self.pods = PodsApi(sender)
        self.endpoints = EndpointsApi(sender)
        self.network_volumes = NetworkVolumesApi(sender)
        self.templates = TemplatesApi(sender)

    async def __aenter__(self) -> RunpodClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

