from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

CANONICAL_UNIT = "µg/m³"


class Parameter(str, Enum):
    PM25 = "pm25"
    PM10 = "pm10"
    SO2 = "so2"
    NO2 = "no2"
    O3 = "o3"
    CO = "co"


class ErrorKind(str, Enum):
    FETCH_FAILURE = "fetch_failure"
    PARSE_FAILURE = "parse_failure"


@dataclass(frozen=True)
class SourceDescriptor:
    name: str
    url: str
    adapter: str
    source_url: str = ""
    country: str = "CN"
    city: str | None = None


@dataclass(frozen=True)
class Coordinates:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class Attribution:
    name: str
    url: str


@dataclass(frozen=True)
class AveragingPeriod:
    value: int = 1
    unit: str = "hours"


@dataclass(frozen=True)
class MeasurementDate:
    utc: datetime
    local: str


@dataclass(frozen=True)
class RawRecord:
    station: str
    values: dict[Parameter, Any]
    city: str | None = None
    station_code: str | None = None
    observed_at: str | None = None


@dataclass(frozen=True)
class Measurement:
    location: str
    city: str | None
    parameter: Parameter
    value: float
    date: MeasurementDate
    attribution: tuple[Attribution, ...]
    coordinates: Coordinates | None = None
    unit: str = CANONICAL_UNIT
    averaging_period: AveragingPeriod = field(default_factory=AveragingPeriod)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "location": self.location,
            "city": self.city,
            "parameter": self.parameter.value,
            "value": self.value,
            "unit": self.unit,
            "averagingPeriod": {"value": self.averaging_period.value, "unit": self.averaging_period.unit},
            "date": {"utc": self.date.utc.isoformat(), "local": self.date.local},
            "attribution": [{"name": item.name, "url": item.url} for item in self.attribution],
        }
        if self.coordinates is not None:
            payload["coordinates"] = {
                "latitude": self.coordinates.latitude,
                "longitude": self.coordinates.longitude,
            }
        return payload


@dataclass(frozen=True)
class AdapterError:
    kind: ErrorKind
    message: str
    source: str


@dataclass(frozen=True)
class AdapterResult:
    source: str
    measurements: list[Measurement] = field(default_factory=list)
    error: AdapterError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
