"""Axis placement, autoscaling and tick generation."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple

from .. import constants as C
from ..config.settings import AxisOptions, ChartOptions, ScaleType
from .regions import Point

LOG = logging.getLogger(__name__)

__all__ = [
    "AxisGeometry",
    "Tick",
    "autoscale_max",
    "axis_angles",
    "compute_axes",
    "format_tick_value",
    "lerp",
    "linmap",
    "linspace",
    "plot_radius",
    "radius_to_value",
    "value_to_radius",
]


# -------------------- Interpolation helpers --------------------


def linspace(start: float, stop: float, count: int) -> List[float]:
    """Return ``count`` evenly spaced values from ``start`` to ``stop`` inclusive."""

    if count <= 0:
        return []
    if count == 1:
        return [start]
    step = (stop - start) / (count - 1)
    return [start + k * step for k in range(count)]


def lerp(a: float, b: float, t: float) -> float:
    return a + t * (b - a)


def linmap(a: float, b: float, c: float, d: float, value: float) -> float:
    """Map ``value`` from ``[a, b]`` onto ``[c, d]`` without clamping."""

    return lerp(c, d, (value - a) / (b - a))


# -------------------- Scale transforms --------------------

_LOG_BASES = {"log10": 10.0, "log2": 2.0}


def _forward(value: float, scale: ScaleType) -> float:
    base = _LOG_BASES.get(scale)
    if base is None:
        return value
    return math.log1p(value) / math.log(base)


def _inverse(value: float, scale: ScaleType) -> float:
    base = _LOG_BASES.get(scale)
    if base is None:
        return value
    return math.expm1(value * math.log(base))


def value_to_radius(
    value: float, maximum: float, radius: float, scale: ScaleType = "linear"
) -> float:
    """Radial distance of ``value`` on an axis whose ``maximum`` maps to ``radius``.

    Logarithmic scales interpolate through ``log_b(1 + v)``. The result is not
    clamped, so values above ``maximum`` land outside the plot.
    """

    return linmap(0.0, _forward(maximum, scale), 0.0, radius, _forward(value, scale))


def radius_to_value(
    distance: float, maximum: float, radius: float, scale: ScaleType = "linear"
) -> float:
    return _inverse(linmap(0.0, radius, 0.0, _forward(maximum, scale), distance), scale)


# -------------------- Tick labels --------------------

_MAGNITUDES: Tuple[Tuple[float, float, int, str], ...] = (
    (1.0, 1.0, 3, ""),
    (10.0, 1.0, 2, ""),
    (100.0, 1.0, 1, ""),
    (1e3, 1.0, 0, ""),
    (1e6, 1e3, 0, "k"),
    (1e9, 1e6, 0, "M"),
    (1e12, 1e9, 0, "G"),
    (1e15, 1e12, 0, "T"),
)


def format_tick_value(value: float) -> str:
    """Format a tick value by magnitude.

    >>> format_tick_value(0.5), format_tick_value(42), format_tick_value(2500)
    ('0.500', '42.0', '3k')
    """

    divisor, decimals, suffix = 1e15, 0, "P"
    for limit, scale_divisor, places, unit in _MAGNITUDES:
        if value < limit:
            divisor, decimals, suffix = scale_divisor, places, unit
            break
    if not math.isfinite(value):
        return f"{value}{suffix}"
    scaled = Decimal(repr(value / divisor))
    with localcontext() as ctx:
        # quantize needs room for every integer digit of very large ticks
        ctx.prec = max(ctx.prec, scaled.adjusted() + decimals + 2)
        rounded = scaled.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)
    return f"{rounded:f}{suffix}"


# -------------------- Geometry --------------------


def plot_radius(options: ChartOptions) -> float:
    """Radius at which a value equal to the axis maximum is drawn."""

    plot = options.plot_options
    return plot.scale * min(options.width, options.height) / 2 - plot.padding


def axis_angles(count: int) -> List[float]:
    """Angles in degrees, first axis at 90 degrees, evenly spaced."""

    if count <= 0:
        return []
    step = 360.0 / count
    return [90.0 + index * step for index in range(count)]


def autoscale_max(
    name: str,
    explicit: Optional[float],
    series_data: Iterable[Mapping[str, float]],
) -> float:
    """Explicit positive maximum, else the padded data maximum, else ``1.0``."""

    if explicit is not None and explicit > 0:
        return float(explicit)
    highest = 0.0
    for data in series_data:
        value = data.get(name)
        if value is not None and value > highest:
            highest = value
    if highest > 0:
        padded = highest * C.AUTOSCALE_PADDING_FACTOR
        return padded if math.isfinite(padded) else highest
    return 1.0


@dataclass(frozen=True, slots=True)
class Tick:
    radius: float
    value: float
    is_major: bool

    @property
    def label(self) -> str:
        return format_tick_value(self.value)


@dataclass(frozen=True, slots=True)
class AxisGeometry:
    name: str
    index: int
    angle: float
    max: float
    scale: ScaleType
    center: Point
    radius: float
    ticks: Tuple[Tick, ...]

    @property
    def angle_rad(self) -> float:
        return math.radians(self.angle)

    def point_at(self, distance: float) -> Point:
        theta = self.angle_rad
        return Point(
            self.center.x + distance * math.cos(theta),
            self.center.y + distance * math.sin(theta),
        )

    @property
    def end(self) -> Point:
        return self.point_at(self.radius)

    @property
    def major_ticks(self) -> Tuple[Tick, ...]:
        return tuple(tick for tick in self.ticks if tick.is_major)

    @property
    def minor_ticks(self) -> Tuple[Tick, ...]:
        return tuple(tick for tick in self.ticks if not tick.is_major)

    def value_to_radius(self, value: float) -> float:
        return value_to_radius(value, self.max, self.radius, self.scale)


def _ticks(
    radius: float, maximum: float, scale: ScaleType, options: AxisOptions
) -> Tuple[Tick, ...]:
    majors = linspace(0.0, radius, options.major_ticks + 2)
    ticks: List[Tick] = [
        Tick(r, radius_to_value(r, maximum, radius, scale), True) for r in majors[1:-1]
    ]
    for a, b in zip(majors, majors[1:]):
        for r in linspace(a, b, options.minor_ticks + 2)[1:-1]:
            ticks.append(Tick(r, radius_to_value(r, maximum, radius, scale), False))
    ticks.sort(key=lambda tick: tick.radius)
    return tuple(ticks)


def compute_axes(
    axes: Sequence,
    series_data: Sequence[Mapping[str, float]],
    center: Point,
    axis_options: AxisOptions,
    radius: float,
) -> List[AxisGeometry]:
    """Place every axis around ``center`` and generate its ticks.

    ``axes`` are :class:`~spiderchart.config.Axis` models; ``radius`` comes
    from :func:`plot_radius` and is shared with series projection.
    """

    geometries: List[AxisGeometry] = []
    for index, (axis, angle) in enumerate(zip(axes, axis_angles(len(axes)))):
        maximum = autoscale_max(axis.name, axis.max, series_data)
        geometries.append(
            AxisGeometry(
                name=axis.name,
                index=index,
                angle=angle,
                max=maximum,
                scale=axis.scale,
                center=center,
                radius=radius,
                ticks=_ticks(radius, maximum, axis.scale, axis_options),
            )
        )
        LOG.debug("axis %s: angle=%.3f max=%.6g", axis.name, angle, maximum)
    return geometries
