from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from aq_pipeline.core.models import SourceDescriptor

_REQUIRED_FIELDS = ("name", "url", "adapter")


def _to_descriptor(index: int, item: Any) -> SourceDescriptor:
    if not isinstance(item, dict):
        raise ValueError(f"source #{index} is not an object")
    missing = [field for field in _REQUIRED_FIELDS if not item.get(field)]
    if missing:
        raise ValueError(f"source #{index} missing required fields: {', '.join(missing)}")
    return SourceDescriptor(
        name=str(item["name"]),
        url=str(item["url"]),
        adapter=str(item["adapter"]),
        source_url=str(item.get("sourceURL") or ""),
        country=str(item.get("country") or "CN"),
        city=str(item["city"]) if item.get("city") else None,
    )


def load_sources(path: str | Path) -> list[SourceDescriptor]:
    payload = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(payload, list):
        raise ValueError(f"sources file must contain a json array: {path}")
    return [_to_descriptor(index, item) for index, item in enumerate(payload)]
