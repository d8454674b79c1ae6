from __future__ import annotations

import json

import pytest

from aq_pipeline.core.coordinates import CoordinateResolver
from aq_pipeline.core.models import Coordinates

AIRLEVEL_PAGE = """
<html><body>
<span class="label label-info">2016年03月14日 10时00分 更新</span>
<table class="table text-center">
  <tr><th>监测站</th><th>AQI</th><th>等级</th><th>PM2.5</th><th>PM10</th></tr>
  <tr><td>
      北京东四\\r\\n  </td><td>85</td><td>良</td><td>62μg/m³</td><td>98μg/m³</td></tr>
  <tr><td>北京天坛</td><td>—</td><td>—</td><td>—</td><td>71μg/m³</td></tr>
</table>
</body></html>
"""

PM25IN_PAGE = """
<html><body>
<div class="city_name"><h2>北京</h2></div>
<div class="live_data_time"><p>数据更新时间：2016-03-14 10:00:00</p></div>
<table id="detail-data">
  <thead>
    <tr><th>监测点</th><th>AQI</th><th>空气质量指数类别</th><th>首要污染物</th><th>PM2.5</th><th>PM10</th>
    <th>CO</th><th>NO2</th><th>O3</th><th>O3/8h</th><th>SO2</th></tr>
  </thead>
  <tbody>
    <tr><td>万寿西宫</td><td>90</td><td>良</td><td>PM2.5</td><td>67</td><td>85</td>
    <td>1.2</td><td>62</td><td>10</td><td>12</td><td>15</td></tr>
    <tr><td>东四</td><td>_</td><td>_</td><td>_</td><td>_</td><td>_</td>
    <td>_</td><td>_</td><td>_</td><td>_</td><td>_</td></tr>
  </tbody>
</table>
</body></html>
"""

PM25S_PAGE = """
<html><body>
<div id="title">空气质量</div>
<h1 id="title">上海PM2.5</h1>
<div class="date">2016年3月14日10时</div>
<div class="pm25">
  <div><span>监测点</span><span>AQI</span><span>PM2.5</span><span>PM10</span><span>CO</span>
  <span>NO2</span><span>SO2</span><span>O3</span></div>
  <div><span>普陀</span><span>120</span><span>91</span><span>110</span><span>0.9</span>
  <span>55</span><span>12</span><span>30</span></div>
</div>
<div class="pm25"><div><span>其他</span><span>1</span><span>1</span></div></div>
</body></html>
"""

PM25IN_API_PAYLOAD = json.dumps(
    [
        {
            "aqi": 90,
            "area": "北京",
            "co": 1.2,
            "no2": 62,
            "o3": 10,
            "pm10": 85,
            "pm2_5": 67,
            "position_name": "万寿西宫",
            "so2": 15,
            "station_code": "1001A",
            "time_point": "2016-03-14T10:00:00Z",
        },
        {
            "aqi": None,
            "area": "北京",
            "co": None,
            "no2": None,
            "o3": None,
            "pm10": None,
            "pm2_5": None,
            "position_name": "定陵",
            "so2": 0,
            "station_code": "1002A",
            "time_point": "2016-03-14T10:00:00Z",
        },
    ],
    ensure_ascii=False,
)


@pytest.fixture
def airlevel_page() -> str:
    return AIRLEVEL_PAGE


@pytest.fixture
def pm25in_page() -> str:
    return PM25IN_PAGE


@pytest.fixture
def pm25s_page() -> str:
    return PM25S_PAGE


@pytest.fixture
def pm25in_api_payload() -> str:
    return PM25IN_API_PAYLOAD


@pytest.fixture
def resolver() -> CoordinateResolver:
    return CoordinateResolver(
        {
            "北京东四": Coordinates(latitude=39.929, longitude=116.417),
            "北京万寿西宫": Coordinates(latitude=39.878, longitude=116.352),
            "上海普陀": Coordinates(latitude=31.238, longitude=121.4),
            "1001A": Coordinates(latitude=39.878, longitude=116.352),
        }
    )
