from __future__ import annotations

import re
from collections.abc import Mapping
from types import MappingProxyType

from unidecode import unidecode

# whitespace runs and escaped line-break artifacts left in scraped cells
_NAME_NOISE = re.compile(r"\s+\s|\\r|\\n")
_SPACES = re.compile(r"\s+")

DEFAULT_NAME_OVERRIDES: Mapping[str, str] = MappingProxyType(
    {
        # the general rule reads 重 as "Zhong"
        "重庆": "Chongqing",
    }
)


def clean_name(text: str | None) -> str:
    if text is None:
        return ""
    return _NAME_NOISE.sub("", text).strip()


class Transliterator:
    def __init__(self, overrides: Mapping[str, str] | None = None) -> None:
        source = DEFAULT_NAME_OVERRIDES if overrides is None else overrides
        self._overrides = MappingProxyType({clean_name(key): value for key, value in source.items()})

    def transliterate(self, text: str) -> str:
        name = clean_name(text)
        override = self._overrides.get(name)
        if override is not None:
            return override
        prefix = self._longest_prefix(name)
        if prefix:
            return f"{self._overrides[prefix]} {self._general(name[len(prefix) :])}".strip()
        return self._general(name)

    def location(self, station: str, city: str | None = None) -> str:
        """Transliterate ``city + station`` keeping an overridden city prefix intact."""
        station_name = clean_name(station)
        if not city:
            return self.transliterate(station_name)
        city_name = clean_name(city)
        override = self._overrides.get(city_name)
        if override is None:
            return self.transliterate(city_name + station_name)
        return f"{override} {self.transliterate(station_name)}".strip()

    def _longest_prefix(self, name: str) -> str | None:
        matches = [key for key in self._overrides if key and name.startswith(key)]
        return max(matches, key=len) if matches else None

    @staticmethod
    def _general(text: str) -> str:
        return _SPACES.sub(" ", unidecode(text)).strip()
