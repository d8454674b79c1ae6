from __future__ import annotations

import re

from aq_pipeline.core.models import Attribution, Parameter
from aq_pipeline.core.profiles import SourceProfile, StationKey, TableLayout
from aq_pipeline.core.timeparse import DateFragmentLayout

PM25S_PROFILE = SourceProfile(
    name="pm25s",
    attribution=Attribution(name="PM25s.com", url="http://pm25s.com"),
    layout=TableLayout(
        container_selector=".pm25",
        row_selector="div",
        columns={
            Parameter.PM25: 2,
            Parameter.PM10: 3,
            Parameter.CO: 4,
            Parameter.NO2: 5,
            Parameter.SO2: 6,
            Parameter.O3: 7,
        },
        time_selector=".date",
        time_layout=DateFragmentLayout(fields=("year", "month", "day", "hour")),
        city_selector="#title",
        city_selector_last=True,
        # title reads like "北京PM2.5"
        city_cleanup=re.compile(r"[PM2.5]"),
    ),
    station_key=StationKey.CITY_STATION,
)
