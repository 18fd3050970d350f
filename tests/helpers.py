from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping, Optional

from spiderchart.config import ChartDefinition, chart_from_mapping
from spiderchart.fonts import FontHandle, FontRequest


class StubOracle:
    """Font oracle with round numbers: every glyph is ``advance`` mm wide."""

    def __init__(self, advance: float = 1.0, line: float = 4.0) -> None:
        self.advance = advance
        self.line = line
        self.loaded: list[str] = []

    def load(self, request: FontRequest) -> FontHandle:
        self.loaded.append(request.role)
        return FontHandle(request.role, request.size, request.color, request.path)

    def line_height(self, font: FontHandle) -> float:
        return self.line

    def measure_text(self, font: FontHandle, text: str) -> float:
        return len(text) * self.advance


def build_chart(
    axes: Iterable[Any] = ("A", "B", "C", "D", "E"),
    series: Optional[Mapping[str, Mapping[str, float]]] = None,
    **options: Any,
) -> ChartDefinition:
    axis_list = [axis if isinstance(axis, dict) else {"name": axis} for axis in axes]
    series_list = [
        {"name": name, "data": dict(data)} for name, data in (series or {}).items()
    ]
    payload: Dict[str, Any] = {"options": options, "data": {"axes": axis_list, "series": series_list}}
    return chart_from_mapping(payload)
