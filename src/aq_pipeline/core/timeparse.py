from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timezone, tzinfo

from aq_pipeline.core.exceptions import TimeParseError
from aq_pipeline.core.models import MeasurementDate
from aq_pipeline.timezone import SOURCE_ZONE

_TIMESTAMP = re.compile(
    r"(?P<year>\d{4})-(?P<month>\d{1,2})-(?P<day>\d{1,2})[ T]+"
    r"(?P<hour>\d{1,2}):(?P<minute>\d{2})(?::(?P<second>\d{2}))?"
)
_DIGITS = re.compile(r"\d+")
_FRAGMENT_FIELDS = ("year", "month", "day", "hour", "minute", "second")


@dataclass(frozen=True)
class DateFragmentLayout:
    """Position of each date field among the digit runs of a localized label.

    ``("year", "month", "day", "hour")`` reads ``2016年3月14日10时`` as
    2016/03/14 10:00:00. Undeclared minute and second default to zero.
    """

    fields: tuple[str, ...]

    def __post_init__(self) -> None:
        unknown = [name for name in self.fields if name not in _FRAGMENT_FIELDS]
        if unknown:
            raise ValueError(f"unknown date fragment fields: {', '.join(unknown)}")
        missing = [name for name in ("year", "month", "day", "hour") if name not in self.fields]
        if missing:
            raise ValueError(f"date fragment layout missing fields: {', '.join(missing)}")
        if len(set(self.fields)) != len(self.fields):
            raise ValueError("date fragment layout has duplicate fields")


def _localize(parts: dict[str, int], zone: tzinfo) -> MeasurementDate:
    try:
        local = datetime(
            parts["year"],
            parts["month"],
            parts["day"],
            parts["hour"],
            parts.get("minute", 0),
            parts.get("second", 0),
            tzinfo=zone,
        )
    except ValueError as exc:
        raise TimeParseError(f"invalid measurement time: {exc}") from exc
    return MeasurementDate(utc=local.astimezone(timezone.utc), local=local.isoformat())


def normalize_time(raw: str | None, zone: tzinfo = SOURCE_ZONE) -> MeasurementDate:
    match = _TIMESTAMP.search(raw or "")
    if match is None:
        raise TimeParseError(f"no timestamp found in {raw!r}")
    parts = {name: int(value) for name, value in match.groupdict().items() if value is not None}
    return _localize(parts, zone)


def assemble_time(label: str | None, layout: DateFragmentLayout, zone: tzinfo = SOURCE_ZONE) -> MeasurementDate:
    fragments = _DIGITS.findall(label or "")
    if len(fragments) != len(layout.fields):
        raise TimeParseError(
            f"expected {len(layout.fields)} date fragments, found {len(fragments)} in {label!r}"
        )
    parts = {name: int(value) for name, value in zip(layout.fields, fragments)}
    return _localize(parts, zone)
