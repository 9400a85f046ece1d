"""Shared async HTTP client with a pooled connection and an optional rate limit."""

from __future__ import annotations

import time
from logging import getLogger
from typing import TYPE_CHECKING, TypedDict, Unpack

import httpx
from aiolimiter import AsyncLimiter
from httpx_retries import RetryTransport

from podstate.config.http_resilience import RateLimit, ResilienceConfig, RetryPolicy

if TYPE_CHECKING:
    from types import TracebackType

    from httpx._types import HeaderTypes, QueryParamTypes, TimeoutTypes

__all__ = ["RateLimit", "ResilienceConfig", "ResilientClient", "RetryPolicy"]

log = getLogger(__name__)


class RequestOptions(TypedDict, total=False):
    json: object
    params: QueryParamTypes | None
    headers: HeaderTypes | None
    timeout: TimeoutTypes


class ResilientClient:
    """``httpx.AsyncClient`` behind a retrying transport and an optional limiter.

    One instance owns one connection pool and may be shared by concurrent
    coroutines of the same event loop. ``transport`` replaces the network
    layer underneath the retry wrapper.
    """

    def __init__(
        self,
        config: ResilienceConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config
        self._limiter = (
            AsyncLimiter(config.ratelimit.max_calls, config.ratelimit.per_seconds)
            if config.ratelimit
            else None
        )
        self._client = httpx.AsyncClient(
            base_url=config.base_url or "",
            timeout=config.timeout_seconds,
            headers=dict(config.default_headers or {}),
            transport=RetryTransport(transport=transport, retry=config.retry.build()),
        )

    async def __aenter__(self) -> ResilientClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def request(
        self,
        method: str,
        url: str,
        **kwargs: Unpack[RequestOptions],
    ) -> httpx.Response:
        if self._limiter is None:
            return await self._timed(method, url, kwargs)
        async with self._limiter:
            return await self._timed(method, url, kwargs)

    async def _timed(self, method: str, url: str, options: RequestOptions) -> httpx.Response:
        started = time.perf_counter()
        response = await self._client.request(method, url, **options)
        log.debug(
            "[%s] %s %s -> %s in %.2fs",
            self.config.name,
            method,
            url,
            response.status_code,
            time.perf_counter() - started,
        )
        return response
