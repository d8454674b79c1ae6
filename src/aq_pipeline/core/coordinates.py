from __future__ import annotations

import json
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any

from aq_pipeline.core.models import Coordinates

DEFAULT_COORDINATES_PATH = Path(__file__).resolve().parent.parent / "data" / "china_locations.json"


def load_coordinate_table(path: str | Path) -> dict[str, Coordinates]:
    """Read a ``{key: [longitude, latitude]}`` JSON table."""
    payload = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(payload, dict):
        raise ValueError(f"coordinate table must be a json object: {path}")
    return {str(key): _to_coordinates(key, value) for key, value in payload.items()}


def _to_coordinates(key: Any, value: Any) -> Coordinates:
    if not isinstance(value, list) or len(value) != 2:
        raise ValueError(f"coordinate entry must be [longitude, latitude]: {key}")
    longitude, latitude = value
    return Coordinates(latitude=float(latitude), longitude=float(longitude))


class CoordinateResolver:
    def __init__(self, table: Mapping[str, Coordinates]) -> None:
        self._table = MappingProxyType(dict(table))

    def resolve(self, key: str) -> Coordinates | None:
        return self._table.get(key)


@lru_cache(maxsize=4)
def default_resolver(path: str | None = None) -> CoordinateResolver:
    return CoordinateResolver(load_coordinate_table(path or DEFAULT_COORDINATES_PATH))
