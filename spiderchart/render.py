"""Walk a :class:`~spiderchart.layout.LayoutResult` and emit drawing commands.

Parts are drawn in a fixed order: background, title, subtitle, plot outline,
axes, series and legend. Circles are approximated by straight segments so
every surface only needs ``move_to``/``line_to``.
"""

from __future__ import annotations

import logging
import math
from typing import List, Sequence, Tuple

from . import constants as C
from .colors import TRANSPARENT, parse_color
from .config.settings import ChartDefinition, ChartOptions, PointShape
from .drawing import CommandRecorder, DrawCommand, DrawingSurface
from .fonts import FontOracle
from .layout import LayoutResult, Point, build_layout
from .layout.series import SeriesStyle
from .validation import validate

LOG = logging.getLogger(__name__)

__all__ = ["draw_layout", "record_chart", "render_chart"]

# Approximate ascent and descent as fractions of the font size, used to
# place baselines inside text regions.
_ASCENT = 0.8
_DESCENT = 0.2


def _ring(cx: float, cy: float, radius: float, count: int, start: float = 90.0) -> List[Point]:
    step = 360.0 / count
    points = []
    for k in range(count):
        theta = math.radians(start + k * step)
        points.append(Point(cx + radius * math.cos(theta), cy + radius * math.sin(theta)))
    return points


def _polygon(surface: DrawingSurface, points: Sequence[Tuple[float, float]]) -> None:
    first, *rest = points
    surface.move_to(*first)
    for point in rest:
        surface.line_to(*point)
    surface.close()


def _marker_points(shape: PointShape, x: float, y: float, size: float) -> List[Point]:
    half = size / 2
    if shape == "circle":
        return _ring(x, y, half, C.MARKER_SEGMENTS)
    if shape == "square":
        return [
            Point(x - half, y - half),
            Point(x + half, y - half),
            Point(x + half, y + half),
            Point(x - half, y + half),
        ]
    if shape == "triangle":
        return _ring(x, y, half, 3)
    if shape == "diamond":
        return _ring(x, y, half, 4)
    return []


def _draw_marker(surface: DrawingSurface, style: SeriesStyle, x: float, y: float) -> None:
    points = _marker_points(style.point_shape, x, y, style.point_size)
    if not points:
        return
    surface.set_fill_color(style.point_fill_color)
    surface.set_stroke_color(style.point_color)
    surface.set_stroke_width(style.point_line_thickness)
    _polygon(surface, points)
    surface.fill_stroke()


# -------------------- Chart parts --------------------


def _draw_background(surface: DrawingSurface, layout: LayoutResult) -> None:
    surface.set_fill_color(layout.background)
    _polygon(
        surface,
        [(0.0, 0.0), (layout.width, 0.0), (layout.width, layout.height), (0.0, layout.height)],
    )
    surface.fill()


def _draw_title(surface: DrawingSurface, layout: LayoutResult, options: ChartOptions) -> None:
    if not (options.show_title and options.title):
        return
    region = layout.regions.title
    font = layout.fonts.title
    surface.draw_text(
        region.center.x, region.y0 + font.size_mm * _DESCENT, font, options.title, "center"
    )


def _draw_subtitle(surface: DrawingSurface, layout: LayoutResult, options: ChartOptions) -> None:
    if not (options.show_subtitle and options.subtitle):
        return
    region = layout.regions.subtitle
    font = layout.fonts.subtitle
    surface.draw_text(
        region.center.x, region.y1 - font.size_mm * _ASCENT, font, options.subtitle, "center"
    )


def _draw_plot_outline(surface: DrawingSurface, layout: LayoutResult, options: ChartOptions) -> None:
    plot = options.plot_options
    cx, cy = layout.center
    if plot.connect_type == "circle":
        points = _ring(cx, cy, layout.radius, C.CIRCLE_SEGMENTS)
    else:
        points = [axis.end for axis in layout.axes]
    if not points:
        return
    surface.set_fill_color(TRANSPARENT)
    surface.set_stroke_color(parse_color(plot.outline_color))
    surface.set_stroke_width(plot.outline_thickness)
    _polygon(surface, points)
    surface.stroke()


def _draw_axes(surface: DrawingSurface, layout: LayoutResult, options: ChartOptions) -> None:
    axis_opts = options.axis_options
    color = parse_color(axis_opts.line_color)
    show_names = options.show_axis_labels and axis_opts.show_name
    show_ticks = options.show_ticks and axis_opts.show_ticks
    show_tick_labels = options.show_tick_labels and axis_opts.show_tick_labels
    major_half = axis_opts.major_tick_length / 2
    minor_half = axis_opts.minor_tick_length / 2

    surface.set_stroke_color(color)
    for axis in layout.axes:
        surface.push_transform()
        surface.translate(*axis.center)
        surface.rotate(axis.angle)

        if axis_opts.show_axis:
            surface.set_stroke_width(axis_opts.line_thickness)
            surface.move_to(0.0, 0.0)
            surface.line_to(axis.radius, 0.0)
            surface.stroke()

        if show_names:
            surface.push_transform()
            surface.translate(axis.radius + axis_opts.label_offset, 0.0)
            # Keep names upright on the lower half of the chart.
            surface.rotate(90.0 if 180.0 < axis.angle < 360.0 else -90.0)
            surface.draw_text(0.0, 0.0, layout.fonts.axis_label, axis.name, "center")
            surface.pop_transform()

        if show_ticks:
            surface.set_stroke_width(axis_opts.major_tick_line_thickness)
            for tick in axis.major_ticks:
                surface.move_to(tick.radius, -major_half)
                surface.line_to(tick.radius, major_half)
                surface.stroke()
                if show_tick_labels:
                    surface.push_transform()
                    surface.translate(tick.radius, -major_half - axis_opts.label_offset)
                    surface.rotate(-axis.angle)
                    surface.draw_text(0.0, 0.0, layout.fonts.tick_label, tick.label, "center")
                    surface.pop_transform()
            surface.set_stroke_width(axis_opts.minor_tick_line_thickness)
            for tick in axis.minor_ticks:
                surface.move_to(tick.radius, -minor_half)
                surface.line_to(tick.radius, minor_half)
                surface.stroke()

        surface.pop_transform()


def _draw_series(surface: DrawingSurface, layout: LayoutResult) -> None:
    for series in layout.series:
        style = series.style
        if not series.vertices:
            continue
        if style.has_fill:
            surface.set_fill_color(style.fill_color)
            _polygon(surface, series.vertices)
            surface.fill()
        surface.set_stroke_color(style.line_color)
        surface.set_stroke_width(style.line_thickness)
        _polygon(surface, series.vertices)
        surface.stroke()
        for x, y in series.markers:
            _draw_marker(surface, style, x, y)


def _draw_legend(surface: DrawingSurface, layout: LayoutResult, options: ChartOptions) -> None:
    if not layout.show_legend:
        return
    legend_opts = options.legend_options
    region = layout.regions.legend
    if legend_opts.show_outline and not region.is_empty:
        surface.set_fill_color(TRANSPARENT)
        surface.set_stroke_color(parse_color(legend_opts.outline_color))
        surface.set_stroke_width(legend_opts.outline_thickness)
        _polygon(
            surface,
            [(region.x0, region.y0), (region.x1, region.y0), (region.x1, region.y1), (region.x0, region.y1)],
        )
        surface.stroke()

    font = layout.fonts.legend_label
    for row in layout.legend_rows:
        for entry in row.entries:
            style = entry.style
            surface.set_stroke_color(style.line_color)
            surface.set_stroke_width(legend_opts.line_thickness)
            surface.move_to(entry.x, row.y)
            surface.line_to(entry.x + entry.sample_width, row.y)
            surface.stroke()
            if style.has_markers:
                _draw_marker(surface, style, entry.x + entry.sample_width / 2, row.y)
            surface.draw_text(entry.label_x, row.baseline, font, entry.name, "left")


# -------------------- Entry points --------------------


def draw_layout(layout: LayoutResult, options: ChartOptions, surface: DrawingSurface) -> None:
    """Emit the drawing commands for an already computed ``layout``."""

    _draw_background(surface, layout)
    _draw_title(surface, layout, options)
    _draw_subtitle(surface, layout, options)
    _draw_plot_outline(surface, layout, options)
    _draw_axes(surface, layout, options)
    _draw_series(surface, layout)
    _draw_legend(surface, layout, options)


def render_chart(
    chart: ChartDefinition, surface: DrawingSurface, oracle: FontOracle
) -> LayoutResult:
    """Validate ``chart``, lay it out and draw it onto ``surface``.

    Raises :class:`~spiderchart.errors.ValidationError` or
    :class:`~spiderchart.errors.FontLoadError` before anything is drawn.
    """

    fonts = validate(chart, oracle)
    layout = build_layout(chart, fonts, oracle)
    draw_layout(layout, chart.options, surface)
    LOG.debug("rendered chart with %d axes and %d series", len(layout.axes), len(layout.series))
    return layout


def record_chart(chart: ChartDefinition, oracle: FontOracle) -> List[DrawCommand]:
    """Render ``chart`` into a :class:`CommandRecorder` and return its commands."""

    recorder = CommandRecorder()
    render_chart(chart, recorder, oracle)
    return recorder.commands
