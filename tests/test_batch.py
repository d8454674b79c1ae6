from __future__ import annotations

import httpx
import pytest

from aq_pipeline.core.adapter import SourceAdapter
from aq_pipeline.core.coordinates import CoordinateResolver
from aq_pipeline.core.models import ErrorKind, SourceDescriptor
from aq_pipeline.jobs.batch import run_batch


@pytest.mark.asyncio
async def test_run_batch_isolates_failing_sources(resolver: CoordinateResolver, pm25in_page: str) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/broken":
            return httpx.Response(500)
        if request.url.path == "/garbled":
            return httpx.Response(200, text="{oops")
        return httpx.Response(200, text=pm25in_page)

    transport = httpx.MockTransport(handler)
    adapter = SourceAdapter(
        resolver=resolver,
        client_factory=lambda: httpx.AsyncClient(transport=transport, timeout=5.0),
    )
    sources = [
        SourceDescriptor(name="broken", url="https://source.example.com/broken", adapter="pm25in"),
        SourceDescriptor(name="garbled", url="https://source.example.com/garbled", adapter="pm25in_api"),
        SourceDescriptor(name="beijing", url="https://source.example.com/beijing", adapter="pm25in"),
    ]

    results = await run_batch(adapter, sources, max_concurrency=2)

    assert [result.source for result in results] == ["broken", "garbled", "beijing"]
    assert results[0].error.kind is ErrorKind.FETCH_FAILURE
    assert results[1].error.kind is ErrorKind.PARSE_FAILURE
    assert results[2].ok
    assert len(results[2].measurements) == 6


@pytest.mark.asyncio
async def test_run_batch_rejects_invalid_concurrency(resolver: CoordinateResolver) -> None:
    with pytest.raises(ValueError):
        await run_batch(SourceAdapter(resolver=resolver), [], max_concurrency=0)


@pytest.mark.asyncio
async def test_run_batch_contains_malformed_source_url(resolver: CoordinateResolver, pm25in_page: str) -> None:
    transport = httpx.MockTransport(lambda _: httpx.Response(200, text=pm25in_page))
    adapter = SourceAdapter(
        resolver=resolver,
        client_factory=lambda: httpx.AsyncClient(transport=transport, timeout=5.0),
    )
    sources = [
        SourceDescriptor(name="first", url="https://source.example.com/first", adapter="pm25in"),
        SourceDescriptor(name="bad-port", url="http://air-level.com:abc/air/beijing", adapter="airlevel"),
        SourceDescriptor(name="last", url="https://source.example.com/last", adapter="pm25in"),
    ]

    results = await run_batch(adapter, sources, max_concurrency=3)

    assert [result.source for result in results] == ["first", "bad-port", "last"]
    assert results[1].error.kind is ErrorKind.FETCH_FAILURE
    assert results[0].ok and results[2].ok
    assert len(results[0].measurements) == len(results[2].measurements) == 6
