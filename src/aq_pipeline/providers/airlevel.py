from __future__ import annotations

import re

from aq_pipeline.core.models import Attribution, Parameter
from aq_pipeline.core.profiles import SourceProfile, StationKey, TableLayout
from aq_pipeline.core.timeparse import DateFragmentLayout

# station names already start with the city, e.g. 北京东四
AIRLEVEL_PROFILE = SourceProfile(
    name="airlevel",
    attribution=Attribution(name="Air Level", url="air-level.com"),
    layout=TableLayout(
        container_selector=".text-center",
        columns={Parameter.PM25: 3, Parameter.PM10: 4},
        time_selector=".label-info",
        time_layout=DateFragmentLayout(fields=("year", "month", "day", "hour", "minute")),
    ),
    station_key=StationKey.STATION,
    # cells carry the unit inline, e.g. "35μg/m³"
    value_pattern=re.compile(r"\d+"),
)
