from __future__ import annotations

import logging
from collections.abc import Callable
from time import perf_counter

import httpx

from aq_pipeline.config import DEFAULT_REQUEST_TIMEOUT_SECONDS
from aq_pipeline.core.coordinates import CoordinateResolver, default_resolver
from aq_pipeline.core.exceptions import SourceFetchError, SourceParseError
from aq_pipeline.core.extraction import ExtractedDocument, build_extractor
from aq_pipeline.core.metrics import InMemoryPipelineMetricsCollector
from aq_pipeline.core.models import (
    AdapterError,
    AdapterResult,
    Attribution,
    ErrorKind,
    Measurement,
    MeasurementDate,
    RawRecord,
    SourceDescriptor,
)
from aq_pipeline.core.names import Transliterator, clean_name
from aq_pipeline.core.profiles import SourceProfile, StationKey, TableLayout
from aq_pipeline.core.timeparse import assemble_time, normalize_time
from aq_pipeline.core.values import normalize_value
from aq_pipeline.providers.factory import get_source_profile

logger = logging.getLogger(__name__)

FETCH_FAILURE_MESSAGE = "Failure to load data url."


class SourceAdapter:
    """Fetches one source and normalizes it into canonical measurements.

    ``fetch`` never raises: transport problems become ``fetch_failure`` and
    anything that goes wrong while reading the document becomes
    ``parse_failure``. Instances hold no per-run state, so one adapter can
    serve many sources concurrently.
    """

    def __init__(
        self,
        resolver: CoordinateResolver | None = None,
        transliterator: Transliterator | None = None,
        timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS,
        metrics: InMemoryPipelineMetricsCollector | None = None,
        client_factory: Callable[[], httpx.AsyncClient] | None = None,
    ) -> None:
        self._resolver = resolver if resolver is not None else default_resolver()
        self._transliterator = transliterator or Transliterator()
        self._timeout = httpx.Timeout(timeout_seconds)
        self._metrics = metrics
        self._client_factory = client_factory

    async def fetch(self, source: SourceDescriptor) -> AdapterResult:
        logger.info("source_fetch_started", extra={"source": source.name, "adapter": source.adapter})
        try:
            profile = get_source_profile(source.adapter)
        except ValueError as exc:
            logger.warning("source_adapter_unknown", extra={"source": source.name, "adapter": source.adapter})
            return self._failure(source, ErrorKind.PARSE_FAILURE, str(exc))

        started = perf_counter()
        try:
            body = await self._download(source)
        except SourceFetchError as exc:
            logger.warning("source_fetch_failed", extra={"source": source.name, "reason": str(exc)})
            return self._failure(source, ErrorKind.FETCH_FAILURE, FETCH_FAILURE_MESSAGE)
        except Exception as exc:
            logger.exception("source_fetch_failed", extra={"source": source.name, "reason": repr(exc)})
            return self._failure(source, ErrorKind.FETCH_FAILURE, FETCH_FAILURE_MESSAGE)
        self._observe(source.name, "fetch", started)

        started = perf_counter()
        try:
            measurements = self._normalize_with(profile, body, source)
        except SourceParseError as exc:
            logger.warning("source_parse_failed", extra={"source": source.name, "reason": str(exc)})
            return self._failure(source, ErrorKind.PARSE_FAILURE, f"Failure to parse data. {exc}")
        except Exception as exc:
            logger.exception("source_parse_failed", extra={"source": source.name, "reason": repr(exc)})
            return self._failure(source, ErrorKind.PARSE_FAILURE, "Unknown adapter error")
        self._observe(source.name, "normalize", started)

        if self._metrics:
            self._metrics.increment_run(source.name, "success")
            for measurement in measurements:
                self._metrics.add_measurements(source.name, measurement.parameter.value)
        logger.info(
            "source_fetch_completed",
            extra={"source": source.name, "measurement_count": len(measurements)},
        )
        return AdapterResult(source=source.name, measurements=measurements)

    def normalize(self, body: str | bytes, source: SourceDescriptor) -> list[Measurement]:
        return self._normalize_with(get_source_profile(source.adapter), body, source)

    async def _download(self, source: SourceDescriptor) -> str:
        factory = self._client_factory or (lambda: httpx.AsyncClient(timeout=self._timeout, follow_redirects=True))
        async with factory() as client:
            try:
                response = await client.get(source.url)
            except httpx.TimeoutException as exc:
                self._record_http_error(source, "timeout")
                raise SourceFetchError(f"source timeout: url={source.url}") from exc
            except httpx.HTTPError as exc:
                self._record_http_error(source, "transport")
                raise SourceFetchError(f"source request error: url={source.url}") from exc
            except httpx.InvalidURL as exc:
                self._record_http_error(source, "invalid_url")
                raise SourceFetchError(f"source url is invalid: {exc}") from exc
        if response.status_code != 200:
            self._record_http_error(source, response.status_code)
            raise SourceFetchError(f"source responded with status={response.status_code}")
        return response.text

    def _normalize_with(self, profile: SourceProfile, body: str | bytes, source: SourceDescriptor) -> list[Measurement]:
        document = build_extractor(profile.layout).extract(body)
        attribution = self._attribution(profile, source)
        page_city = document.city or clean_name(source.city) or None
        cycle_time: MeasurementDate | None = None
        measurements: list[Measurement] = []
        for record in document.records:
            station = clean_name(record.station)
            if not station and profile.station_key is StationKey.STATION_CODE:
                station = clean_name(record.station_code)
            if not station:
                logger.debug("source_record_skipped", extra={"source": source.name, "reason": "blank_station"})
                continue
            if record.observed_at is not None:
                date = normalize_time(record.observed_at)
            else:
                if cycle_time is None:
                    cycle_time = self._cycle_time(profile, document)
                date = cycle_time
            measurements.extend(self._to_measurements(profile, record, station, page_city, date, attribution))
        return measurements

    def _cycle_time(self, profile: SourceProfile, document: ExtractedDocument) -> MeasurementDate:
        layout = profile.layout
        if isinstance(layout, TableLayout) and layout.time_layout is not None:
            return assemble_time(document.time_label, layout.time_layout)
        return normalize_time(document.time_label)

    def _to_measurements(
        self,
        profile: SourceProfile,
        record: RawRecord,
        station: str,
        page_city: str | None,
        date: MeasurementDate,
        attribution: tuple[Attribution, ...],
    ) -> list[Measurement]:
        city = clean_name(record.city) or page_city
        if profile.station_key is StationKey.STATION:
            location = self._transliterator.transliterate(station)
            lookup_key = station
        elif profile.station_key is StationKey.CITY_STATION:
            location = self._transliterator.location(station, city)
            lookup_key = (city or "") + station
        else:
            location = self._transliterator.location(station, city)
            lookup_key = clean_name(record.station_code)
        coordinates = self._resolver.resolve(lookup_key) if lookup_key else None
        city_name = self._transliterator.transliterate(city) if city else None

        measurements: list[Measurement] = []
        for parameter, raw in record.values.items():
            value = normalize_value(raw, parameter, profile.value_pattern)
            if value is None:
                continue
            measurements.append(
                Measurement(
                    location=location,
                    city=city_name,
                    parameter=parameter,
                    value=value,
                    date=date,
                    attribution=attribution,
                    coordinates=coordinates,
                )
            )
        return measurements

    @staticmethod
    def _attribution(profile: SourceProfile, source: SourceDescriptor) -> tuple[Attribution, ...]:
        attribution = [profile.attribution]
        if source.source_url and source.source_url != profile.attribution.url:
            attribution.append(Attribution(name=source.name, url=source.source_url))
        return tuple(attribution)

    def _failure(self, source: SourceDescriptor, kind: ErrorKind, message: str) -> AdapterResult:
        if self._metrics:
            self._metrics.increment_run(source.name, kind.value)
        return AdapterResult(source=source.name, error=AdapterError(kind=kind, message=message, source=source.name))

    def _record_http_error(self, source: SourceDescriptor, code: int | str) -> None:
        if self._metrics:
            self._metrics.increment_http_error(source.name, code)

    def _observe(self, source: str, stage: str, started: float) -> None:
        if self._metrics:
            self._metrics.observe_stage_duration(source, stage, (perf_counter() - started) * 1000.0)
