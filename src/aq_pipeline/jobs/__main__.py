from __future__ import annotations

import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import TextIO

from aq_pipeline.config import PipelineSettings, load_settings
from aq_pipeline.core.adapter import SourceAdapter
from aq_pipeline.core.coordinates import default_resolver
from aq_pipeline.core.metrics import InMemoryPipelineMetricsCollector
from aq_pipeline.core.models import AdapterResult
from aq_pipeline.core.prometheus_exporter import PipelinePrometheusExporter
from aq_pipeline.jobs.batch import run_batch
from aq_pipeline.jobs.sources import load_sources

pipeline_metrics = InMemoryPipelineMetricsCollector()
pipeline_exporter = PipelinePrometheusExporter()


def _required_setting(value: str | None, name: str) -> str:
    if not value:
        raise RuntimeError(f"missing required environment variable: {name}")
    return value


def _build_adapter(settings: PipelineSettings) -> SourceAdapter:
    if settings.AQ_REQUEST_TIMEOUT_SECONDS <= 0:
        raise RuntimeError("AQ_REQUEST_TIMEOUT_SECONDS must be > 0")
    return SourceAdapter(
        resolver=default_resolver(settings.AQ_COORDINATES_PATH),
        timeout_seconds=settings.AQ_REQUEST_TIMEOUT_SECONDS,
        metrics=pipeline_metrics,
    )


def _write_measurements(results: list[AdapterResult], stream: TextIO) -> int:
    written = 0
    for result in results:
        for measurement in result.measurements:
            stream.write(json.dumps(measurement.to_dict(), ensure_ascii=False) + "\n")
            written += 1
    return written


def _emit(results: list[AdapterResult], output_file: str | None) -> int:
    if not output_file:
        return _write_measurements(results, sys.stdout)
    path = Path(output_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as stream:
        return _write_measurements(results, stream)


def _write_metrics_textfile(path: str) -> None:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(pipeline_exporter.render(pipeline_metrics), encoding="utf-8")


def main() -> None:
    settings = load_settings()
    logging.basicConfig(level=settings.AQ_LOG_LEVEL.upper())
    if settings.AQ_MAX_CONCURRENCY <= 0:
        raise RuntimeError("AQ_MAX_CONCURRENCY must be > 0")
    sources = load_sources(_required_setting(settings.AQ_SOURCES_FILE, "AQ_SOURCES_FILE"))
    adapter = _build_adapter(settings)
    results = asyncio.run(run_batch(adapter, sources, max_concurrency=settings.AQ_MAX_CONCURRENCY))
    _emit(results, settings.AQ_OUTPUT_FILE)
    if settings.AQ_METRICS_TEXTFILE:
        _write_metrics_textfile(settings.AQ_METRICS_TEXTFILE)


if __name__ == "__main__":
    main()
