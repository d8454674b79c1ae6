from __future__ import annotations

from prometheus_client import CollectorRegistry, Gauge, generate_latest

from aq_pipeline.core.metrics import InMemoryPipelineMetricsCollector


class PipelinePrometheusExporter:
    def __init__(self) -> None:
        self._registry = CollectorRegistry()
        self._stage_duration = Gauge(
            "aq_stage_duration_ms",
            "Adapter stage duration in milliseconds",
            labelnames=("source", "stage"),
            registry=self._registry,
        )
        self._source_run_total = Gauge(
            "aq_source_run_total",
            "Adapter runs grouped by source and status",
            labelnames=("source", "status"),
            registry=self._registry,
        )
        self._measurements_total = Gauge(
            "aq_measurements_total",
            "Normalized measurements grouped by source and parameter",
            labelnames=("source", "parameter"),
            registry=self._registry,
        )
        self._http_errors_total = Gauge(
            "aq_source_http_errors_total",
            "Source HTTP errors grouped by source and code",
            labelnames=("source", "code"),
            registry=self._registry,
        )

    def render(self, metrics: InMemoryPipelineMetricsCollector) -> str:
        latest_by_stage: dict[tuple[str, str], float] = {}
        for item in metrics.stage_durations:
            latest_by_stage[(item.source, item.stage)] = item.duration_ms
        for (source, stage), duration in latest_by_stage.items():
            self._stage_duration.labels(source=source, stage=stage).set(duration)
        for (source, status), count in metrics.source_run_total.items():
            self._source_run_total.labels(source=source, status=status).set(count)
        for (source, parameter), count in metrics.measurements_total.items():
            self._measurements_total.labels(source=source, parameter=parameter).set(count)
        for (source, code), count in metrics.source_http_errors_total.items():
            self._http_errors_total.labels(source=source, code=code).set(count)
        return generate_latest(self._registry).decode("utf-8")
