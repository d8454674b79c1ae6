from __future__ import annotations

import re

import pytest

from aq_pipeline.core.models import Parameter
from aq_pipeline.core.values import normalize_value


@pytest.mark.parametrize("raw", [None, "", "   ", "n/a", "—", "-", "nan", "inf", True, float("nan")])
def test_normalize_value_treats_missing_and_noise_as_absent(raw: object) -> None:
    assert normalize_value(raw, Parameter.PM25) is None


def test_normalize_value_never_turns_null_into_zero() -> None:
    assert normalize_value(None, Parameter.PM25, pattern=re.compile(r"\d+")) is None
    assert normalize_value("0", Parameter.PM25) == 0.0


def test_normalize_value_converts_co_from_milligrams() -> None:
    assert normalize_value("2.5", Parameter.CO) == 2500.0
    assert normalize_value(0.8, Parameter.CO) == 800.0


@pytest.mark.parametrize("parameter", [Parameter.PM25, Parameter.PM10, Parameter.SO2, Parameter.NO2, Parameter.O3])
def test_normalize_value_keeps_other_parameters_unchanged(parameter: Parameter) -> None:
    assert normalize_value(" 35 ", parameter) == 35.0
    assert normalize_value(12.5, parameter) == 12.5


def test_normalize_value_rejects_negative_readings() -> None:
    assert normalize_value("-1", Parameter.PM10) is None
    assert normalize_value(-0.2, Parameter.CO) is None


def test_normalize_value_uses_pattern_for_embedded_units() -> None:
    pattern = re.compile(r"\d+")

    assert normalize_value("35μg/m³", Parameter.PM25, pattern=pattern) == 35.0
    assert normalize_value("暂无", Parameter.PM25, pattern=pattern) is None


def test_normalize_value_requires_whole_number_without_pattern() -> None:
    assert normalize_value("35μg/m³", Parameter.PM25) is None
