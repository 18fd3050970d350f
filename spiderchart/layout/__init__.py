"""Geometric layout of a spider chart.

:func:`build_layout` runs the region allocator, axis geometry, series
projection and legend flow once and returns an immutable
:class:`LayoutResult` that the renderer draws from.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Tuple

from ..colors import RGBA, parse_color
from ..config.settings import ChartDefinition
from ..fonts import FontOracle, FontSet
from .axes import (
    AxisGeometry,
    Tick,
    autoscale_max,
    compute_axes,
    format_tick_value,
    plot_radius,
)
from .legend import LegendEntry, LegendRow, layout_legend
from .regions import Point, Region, Regions, allocate, legend_visible
from .series import SeriesGeometry, SeriesStyle, project_series, resolve_series_style

LOG = logging.getLogger(__name__)

__all__ = [
    "AxisGeometry",
    "LayoutResult",
    "LegendEntry",
    "LegendRow",
    "Point",
    "Region",
    "Regions",
    "SeriesGeometry",
    "SeriesStyle",
    "Tick",
    "allocate",
    "autoscale_max",
    "build_layout",
    "compute_axes",
    "format_tick_value",
    "layout_legend",
    "plot_radius",
    "project_series",
    "resolve_series_style",
]


@dataclass(frozen=True, slots=True)
class LayoutResult:
    """Everything one render pass needs, computed once."""

    width: float
    height: float
    regions: Regions
    center: Point
    radius: float
    axes: Tuple[AxisGeometry, ...]
    series: Tuple[SeriesGeometry, ...]
    legend_rows: Tuple[LegendRow, ...]
    fonts: FontSet
    background: RGBA
    foreground: RGBA
    show_legend: bool


def build_layout(chart: ChartDefinition, fonts: FontSet, oracle: FontOracle) -> LayoutResult:
    """Compute the layout of an already validated ``chart``."""

    options = chart.options
    regions = allocate((options.width, options.height), options, fonts, oracle)
    center = regions.plot.center
    radius = plot_radius(options)
    series_data = [series.data for series in chart.data.series]

    axes = compute_axes(chart.data.axes, series_data, center, options.axis_options, radius)

    styles = [
        resolve_series_style(index, series, options)
        for index, series in enumerate(chart.data.series)
    ]
    projected = tuple(
        project_series(series, chart.data.axes, axes, center, radius, style, index)
        for index, (series, style) in enumerate(zip(chart.data.series, styles))
    )

    show_legend = legend_visible(options) and bool(chart.data.series)
    rows: Tuple[LegendRow, ...] = ()
    if show_legend:
        rows = layout_legend(
            [(series.name, style) for series, style in zip(chart.data.series, styles)],
            regions.legend,
            fonts.legend_label,
            oracle,
            options.legend_options,
        )

    LOG.debug("layout: radius=%.3f center=(%.3f, %.3f)", radius, center.x, center.y)
    return LayoutResult(
        width=options.width,
        height=options.height,
        regions=regions,
        center=center,
        radius=radius,
        axes=tuple(axes),
        series=projected,
        legend_rows=rows,
        fonts=fonts,
        background=parse_color(options.background),
        foreground=parse_color(options.foreground),
        show_legend=show_legend,
    )
