from __future__ import annotations

import math
import re
from typing import Any

from aq_pipeline.core.models import Parameter

MILLIGRAM_TO_MICROGRAM = 1000.0


def _to_number(raw: Any, pattern: re.Pattern[str] | None) -> float | None:
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        return float(raw)
    text = str(raw).strip()
    if not text:
        return None
    if pattern is not None:
        match = pattern.search(text)
        if match is None:
            return None
        text = match.group(0)
    try:
        return float(text)
    except ValueError:
        return None


def normalize_value(raw: Any, parameter: Parameter, pattern: re.Pattern[str] | None = None) -> float | None:
    """Return the value in µg/m³, or ``None`` when the field carries no reading.

    ``pattern`` picks the numeric run out of cells that embed units or labels;
    without it the whole cell must be a number.
    """
    value = _to_number(raw, pattern)
    if value is None or not math.isfinite(value):
        return None
    if parameter is Parameter.CO:
        value = value * MILLIGRAM_TO_MICROGRAM
    if value < 0:
        return None
    return value
