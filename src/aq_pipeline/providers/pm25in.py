from __future__ import annotations

from aq_pipeline.core.models import Attribution, Parameter
from aq_pipeline.core.profiles import SourceProfile, StationKey, TableLayout

PM25IN_ATTRIBUTION = Attribution(name="PM25.in from BestApp", url="http://pm25.in")

PM25IN_PROFILE = SourceProfile(
    name="pm25in",
    attribution=PM25IN_ATTRIBUTION,
    layout=TableLayout(
        container_selector="#detail-data",
        # column 9 is the 8-hour O3 average
        columns={
            Parameter.PM25: 4,
            Parameter.PM10: 5,
            Parameter.CO: 6,
            Parameter.NO2: 7,
            Parameter.O3: 8,
            Parameter.SO2: 10,
        },
        time_selector=".live_data_time",
        city_selector=".city_name",
    ),
    station_key=StationKey.CITY_STATION,
)
