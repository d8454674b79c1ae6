from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass


@dataclass(frozen=True)
class StageDuration:
    source: str
    stage: str
    duration_ms: float


class InMemoryPipelineMetricsCollector:
    def __init__(self) -> None:
        self.stage_durations: list[StageDuration] = []
        self.source_run_total: dict[tuple[str, str], int] = defaultdict(int)
        self.measurements_total: dict[tuple[str, str], int] = defaultdict(int)
        self.source_http_errors_total: dict[tuple[str, str], int] = defaultdict(int)

    def observe_stage_duration(self, source: str, stage: str, duration_ms: float) -> None:
        self.stage_durations.append(StageDuration(source=source, stage=stage, duration_ms=duration_ms))

    def increment_run(self, source: str, status: str) -> None:
        self.source_run_total[(source, status)] += 1

    def add_measurements(self, source: str, parameter: str, count: int = 1) -> None:
        if count <= 0:
            return
        self.measurements_total[(source, parameter)] += count

    def increment_http_error(self, source: str, code: int | str) -> None:
        self.source_http_errors_total[(source, str(code))] += 1
