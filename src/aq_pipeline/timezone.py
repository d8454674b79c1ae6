from __future__ import annotations

from zoneinfo import ZoneInfo

SOURCE_TIMEZONE = "Asia/Shanghai"
SOURCE_ZONE = ZoneInfo(SOURCE_TIMEZONE)
