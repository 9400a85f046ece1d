from __future__ import annotations

import asyncio

import httpx

from podstate.adapters.http_resilience import (
    RateLimit,
    ResilienceConfig,
    ResilientClient,
    RetryPolicy,
)


def test_retry_policy_performs_no_retries_by_default() -> None:
    retry = RetryPolicy().build()

    assert retry.total == 0


def test_client_applies_base_url_headers_and_rate_limit() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"ok": True})

    config = ResilienceConfig(
        name="test",
        base_url="https://api.test/v1",
        ratelimit=RateLimit(max_calls=10, per_seconds=1.0),
        default_headers={"X-Client": "podstate"},
    )

    async def scenario() -> list[httpx.Response]:
        async with ResilientClient(config, transport=httpx.MockTransport(handler)) as client:
            return [
                await client.request("GET", "/pods"),
                await client.request("PATCH", "/pods/p1", json={"a": 1}),
            ]

    responses = asyncio.run(scenario())

    assert [response.status_code for response in responses] == [200, 200]
    assert [str(request.url) for request in seen] == [
        "https://api.test/v1/pods",
        "https://api.test/v1/pods/p1",
    ]
    assert all(request.headers["X-Client"] == "podstate" for request in seen)
