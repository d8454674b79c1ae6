from __future__ import annotations

from datetime import datetime, timezone

from aq_pipeline.core.models import (
    AdapterError,
    AdapterResult,
    Attribution,
    Coordinates,
    ErrorKind,
    Measurement,
    MeasurementDate,
    Parameter,
)


def _measurement(coordinates: Coordinates | None = None) -> Measurement:
    return Measurement(
        location="Bei Jing Dong Si",
        city="Bei Jing",
        parameter=Parameter.CO,
        value=2500.0,
        date=MeasurementDate(utc=datetime(2016, 3, 14, 2, tzinfo=timezone.utc), local="2016-03-14T10:00:00+08:00"),
        attribution=(Attribution(name="Air Level", url="air-level.com"),),
        coordinates=coordinates,
    )


def test_measurement_to_dict_uses_downstream_shape() -> None:
    payload = _measurement(Coordinates(latitude=39.929, longitude=116.417)).to_dict()

    assert payload == {
        "location": "Bei Jing Dong Si",
        "city": "Bei Jing",
        "parameter": "co",
        "value": 2500.0,
        "unit": "µg/m³",
        "averagingPeriod": {"value": 1, "unit": "hours"},
        "date": {"utc": "2016-03-14T02:00:00+00:00", "local": "2016-03-14T10:00:00+08:00"},
        "attribution": [{"name": "Air Level", "url": "air-level.com"}],
        "coordinates": {"latitude": 39.929, "longitude": 116.417},
    }


def test_measurement_to_dict_omits_absent_coordinates() -> None:
    assert "coordinates" not in _measurement().to_dict()


def test_adapter_result_ok_reflects_error() -> None:
    error = AdapterError(kind=ErrorKind.FETCH_FAILURE, message="Failure to load data url.", source="s")

    assert AdapterResult(source="s").ok
    assert not AdapterResult(source="s", error=error).ok
