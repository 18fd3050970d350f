"""Project series values onto the axes and resolve their styles."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, List, Sequence, Tuple

from .. import constants as C
from ..colors import RGBA, parse_color, resolve_with_opacity
from ..config.settings import ChartOptions, PointShape, Series
from .axes import AxisGeometry, value_to_radius
from .regions import Point

LOG = logging.getLogger(__name__)

__all__ = ["SeriesGeometry", "SeriesStyle", "project_series", "resolve_series_style"]


def _clamp_unit(value: float) -> float:
    return min(max(float(value), 0.0), 1.0)


@dataclass(frozen=True, slots=True)
class SeriesStyle:
    """Fully resolved drawing style of one series.

    Colors already carry their opacity in the alpha channel.
    """

    line_color: RGBA
    line_thickness: float
    fill_color: RGBA
    fill_opacity: float
    point_color: RGBA
    point_fill_color: RGBA
    point_fill_opacity: float
    point_shape: PointShape
    point_size: float
    point_line_thickness: float

    @property
    def has_fill(self) -> bool:
        return not self.fill_color.is_transparent

    @property
    def has_markers(self) -> bool:
        return self.point_shape != "none" and self.point_size > 0


def resolve_series_style(index: int, series: Series, options: ChartOptions) -> SeriesStyle:
    """Resolve the style of the ``index``-th series.

    Each attribute comes from the series' own options, then the chart-wide
    ``series_options``, then the palette (``colors`` and ``point_markers``
    indexed modulo their length) or a constant default.
    """

    own = series.options
    shared = options.series_options

    def pick(attr: str, default: Any) -> Any:
        value = getattr(own, attr)
        if value is None:
            value = getattr(shared, attr)
        return default if value is None else value

    palette_color = options.colors[index % len(options.colors)]
    palette_marker = options.point_markers[index % len(options.point_markers)]

    line_color = pick("line_color", palette_color)
    line_opacity = _clamp_unit(pick("line_opacity", 1.0))
    fill_opacity = _clamp_unit(pick("fill_opacity", C.DEFAULT_FILL_OPACITY))
    point_color = pick("point_color", line_color)
    point_fill_opacity = _clamp_unit(
        pick("point_fill_opacity", C.DEFAULT_POINT_FILL_OPACITY)
    )
    shape = pick("point_shape", palette_marker)
    if not options.show_point_markers:
        shape = "none"

    base_line = parse_color(line_color)
    return SeriesStyle(
        line_color=base_line.with_opacity(base_line.opacity * line_opacity),
        line_thickness=float(pick("line_thickness", C.DEFAULT_SERIES_LINE_THICKNESS)),
        fill_color=resolve_with_opacity(pick("fill_color", line_color), fill_opacity),
        fill_opacity=fill_opacity,
        point_color=parse_color(point_color),
        point_fill_color=resolve_with_opacity(
            pick("point_fill_color", point_color), point_fill_opacity
        ),
        point_fill_opacity=point_fill_opacity,
        point_shape=shape,
        point_size=float(pick("point_size", C.DEFAULT_POINT_SIZE)),
        point_line_thickness=float(
            pick("point_line_thickness", C.DEFAULT_POINT_LINE_THICKNESS)
        ),
    )


@dataclass(frozen=True, slots=True)
class SeriesGeometry:
    name: str
    index: int
    style: SeriesStyle
    vertices: Tuple[Point, ...]
    markers: Tuple[Point, ...]

    @property
    def path(self) -> Tuple[Point, ...]:
        """Vertices closed back on the first one."""

        if not self.vertices:
            return ()
        return self.vertices + (self.vertices[0],)


def project_series(
    series: Series,
    axes: Sequence,
    geometries: Sequence[AxisGeometry],
    center: Point,
    radius: float,
    style: SeriesStyle,
    index: int = 0,
) -> SeriesGeometry:
    """Map ``series`` values to polygon vertices around ``center``.

    Distances are interpolated from ``[0, axis max]`` onto ``[0, radius]``
    without clamping, so values above the maximum land outside the plot.
    """

    vertices: List[Point] = []
    for axis, geometry in zip(axes, geometries):
        distance = value_to_radius(
            series.data[axis.name], geometry.max, radius, geometry.scale
        )
        theta = geometry.angle_rad
        vertices.append(
            Point(center.x + distance * math.cos(theta), center.y + distance * math.sin(theta))
        )

    markers: Tuple[Point, ...] = tuple(vertices) if style.has_markers else ()
    LOG.debug("series %s projected onto %d axes", series.name, len(vertices))
    return SeriesGeometry(
        name=series.name,
        index=index,
        style=style,
        vertices=tuple(vertices),
        markers=markers,
    )
