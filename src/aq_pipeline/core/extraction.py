from __future__ import annotations

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from bs4 import BeautifulSoup, Tag

from aq_pipeline.core.exceptions import SourceParseError
from aq_pipeline.core.models import RawRecord
from aq_pipeline.core.names import clean_name
from aq_pipeline.core.profiles import JsonLayout, TableLayout

T = TypeVar("T")


@dataclass(frozen=True)
class ExtractedDocument:
    records: list[RawRecord] = field(default_factory=list)
    city: str | None = None
    time_label: str | None = None


class Extractor(ABC, Generic[T]):
    @abstractmethod
    def extract(self, document: T) -> ExtractedDocument:
        raise NotImplementedError


def _children(element: Tag) -> list[Tag]:
    return [child for child in element.children if isinstance(child, Tag)]


def _cell_text(cells: list[Tag], offset: int) -> str | None:
    if offset < 0 or offset >= len(cells):
        return None
    return cells[offset].get_text()


class TableExtractor(Extractor[str | bytes]):
    def __init__(self, layout: TableLayout) -> None:
        self._layout = layout

    def extract(self, document: str | bytes) -> ExtractedDocument:
        soup = BeautifulSoup(document, "lxml")
        return ExtractedDocument(
            records=[self._to_record(row) for row in self._data_rows(soup)],
            city=self._page_city(soup),
            time_label=self._page_time(soup),
        )

    def _data_rows(self, soup: BeautifulSoup) -> list[Tag]:
        container = soup.select_one(self._layout.container_selector)
        if container is None:
            return []
        rows = container.select(self._layout.row_selector)
        return rows[self._layout.header_rows :]

    def _to_record(self, row: Tag) -> RawRecord:
        cells = _children(row)
        values = {parameter: _cell_text(cells, offset) for parameter, offset in self._layout.columns.items()}
        return RawRecord(station=_cell_text(cells, self._layout.station_column) or "", values=values)

    def _page_time(self, soup: BeautifulSoup) -> str | None:
        if self._layout.time_selector is None:
            return None
        element = soup.select_one(self._layout.time_selector)
        if element is None:
            return None
        return element.get_text()

    def _page_city(self, soup: BeautifulSoup) -> str | None:
        if self._layout.city_selector is None:
            return None
        matches = soup.select(self._layout.city_selector)
        if not matches:
            return None
        text = (matches[-1] if self._layout.city_selector_last else matches[0]).get_text()
        if self._layout.city_cleanup is not None:
            text = self._layout.city_cleanup.sub("", text)
        return clean_name(text) or None


def _optional_text(item: dict[str, Any], key: str | None) -> str | None:
    if key is None:
        return None
    value = item.get(key)
    if value is None:
        return None
    return str(value)


class JsonExtractor(Extractor[str | bytes]):
    def __init__(self, layout: JsonLayout) -> None:
        self._layout = layout

    def extract(self, document: str | bytes) -> ExtractedDocument:
        try:
            items = json.loads(document)
        except ValueError as exc:
            raise SourceParseError(f"source payload is not valid json: {exc}") from exc
        for key in self._layout.records_path:
            if not isinstance(items, dict) or key not in items:
                raise SourceParseError(f"source payload missing field '{key}'")
            items = items[key]
        if not isinstance(items, list):
            raise SourceParseError("source payload is not a json array")
        return ExtractedDocument(records=[self._to_record(item) for item in items])

    def _to_record(self, item: Any) -> RawRecord:
        if not isinstance(item, dict):
            raise SourceParseError("source payload item is not an object")
        return RawRecord(
            station=_optional_text(item, self._layout.station_field) or "",
            values={parameter: item.get(key) for parameter, key in self._layout.fields.items()},
            city=_optional_text(item, self._layout.city_field),
            station_code=_optional_text(item, self._layout.code_field),
            observed_at=_optional_text(item, self._layout.time_field),
        )


def build_extractor(layout: TableLayout | JsonLayout) -> Extractor[str | bytes]:
    if isinstance(layout, TableLayout):
        return TableExtractor(layout)
    return JsonExtractor(layout)
