from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_REQUEST_TIMEOUT_SECONDS = 60.0


class PipelineSettings(BaseSettings):
    model_config = SettingsConfigDict(extra="ignore")

    SERVICE_NAME: str = "aq-pipeline"
    AQ_SOURCES_FILE: str | None = None
    AQ_COORDINATES_PATH: str | None = None
    AQ_REQUEST_TIMEOUT_SECONDS: float = DEFAULT_REQUEST_TIMEOUT_SECONDS
    AQ_MAX_CONCURRENCY: int = 5
    AQ_OUTPUT_FILE: str | None = None
    AQ_METRICS_TEXTFILE: str | None = None
    AQ_LOG_LEVEL: str = "INFO"


def load_settings() -> PipelineSettings:
    return PipelineSettings()
