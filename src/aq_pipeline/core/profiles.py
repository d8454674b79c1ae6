from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from aq_pipeline.core.models import Attribution, Parameter
from aq_pipeline.core.timeparse import DateFragmentLayout


class StationKey(str, Enum):
    STATION = "station"
    CITY_STATION = "city_station"
    STATION_CODE = "station_code"


@dataclass(frozen=True)
class TableLayout:
    container_selector: str
    columns: dict[Parameter, int]
    row_selector: str = "tr"
    header_rows: int = 1
    station_column: int = 0
    # page-level fields; ``time_layout`` unset means a free-text timestamp
    time_selector: str | None = None
    time_layout: DateFragmentLayout | None = None
    city_selector: str | None = None
    city_selector_last: bool = False
    city_cleanup: re.Pattern[str] | None = None


@dataclass(frozen=True)
class JsonLayout:
    fields: dict[Parameter, str]
    station_field: str
    time_field: str
    city_field: str | None = None
    code_field: str | None = None
    records_path: tuple[str, ...] = ()


@dataclass(frozen=True)
class SourceProfile:
    name: str
    attribution: Attribution
    layout: TableLayout | JsonLayout
    station_key: StationKey = StationKey.STATION
    value_pattern: re.Pattern[str] | None = None

