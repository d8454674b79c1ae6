from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable

from aq_pipeline.core.adapter import SourceAdapter
from aq_pipeline.core.models import AdapterResult, SourceDescriptor

logger = logging.getLogger(__name__)


async def run_batch(
    adapter: SourceAdapter,
    sources: Iterable[SourceDescriptor],
    max_concurrency: int = 5,
) -> list[AdapterResult]:
    if max_concurrency <= 0:
        raise ValueError("max_concurrency must be > 0")
    semaphore = asyncio.Semaphore(max_concurrency)

    async def _run_one(source: SourceDescriptor) -> AdapterResult:
        async with semaphore:
            return await adapter.fetch(source)

    results = await asyncio.gather(*(_run_one(source) for source in sources))
    failed = [result for result in results if not result.ok]
    for result in failed:
        logger.warning(
            "batch_source_failed",
            extra={"source": result.source, "kind": result.error.kind.value, "reason": result.error.message},
        )
    logger.info(
        "batch_run_completed",
        extra={
            "source_count": len(results),
            "failed_count": len(failed),
            "measurement_count": sum(len(result.measurements) for result in results),
        },
    )
    return list(results)
