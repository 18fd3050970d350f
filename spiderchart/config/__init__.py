"""Configuration helpers exposed at :mod:`spiderchart.config`."""

from __future__ import annotations

from .settings import (
    Axis,
    AxisOptions,
    ChartData,
    ChartDefinition,
    ChartOptions,
    ConnectType,
    FontStyle,
    LegendOptions,
    LegendPlacement,
    PlotOptions,
    PointShape,
    ScaleType,
    Series,
    SeriesOptions,
    chart_from_json,
    chart_from_mapping,
    chart_from_yaml,
    load_chart,
    save_chart,
)

__all__ = [
    "Axis",
    "AxisOptions",
    "ChartData",
    "ChartDefinition",
    "ChartOptions",
    "ConnectType",
    "FontStyle",
    "LegendOptions",
    "LegendPlacement",
    "PlotOptions",
    "PointShape",
    "ScaleType",
    "Series",
    "SeriesOptions",
    "chart_from_json",
    "chart_from_mapping",
    "chart_from_yaml",
    "load_chart",
    "save_chart",
]
