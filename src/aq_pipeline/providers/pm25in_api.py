from __future__ import annotations

from aq_pipeline.core.models import Parameter
from aq_pipeline.core.profiles import JsonLayout, SourceProfile, StationKey
from aq_pipeline.providers.pm25in import PM25IN_ATTRIBUTION

# time_point is local Beijing time even though it carries a "Z" suffix
PM25IN_API_PROFILE = SourceProfile(
    name="pm25in_api",
    attribution=PM25IN_ATTRIBUTION,
    layout=JsonLayout(
        fields={
            Parameter.PM25: "pm2_5",
            Parameter.PM10: "pm10",
            Parameter.CO: "co",
            Parameter.NO2: "no2",
            Parameter.O3: "o3",
            Parameter.SO2: "so2",
        },
        station_field="position_name",
        time_field="time_point",
        city_field="area",
        code_field="station_code",
    ),
    station_key=StationKey.STATION_CODE,
)
