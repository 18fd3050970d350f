"""Structural checks run before any geometry is computed."""

from __future__ import annotations

import logging
from typing import Set

from . import constants as C
from .config.settings import ChartDefinition
from .errors import ValidationError
from .fonts import FontOracle, FontSet, load_font_set

LOG = logging.getLogger(__name__)

__all__ = ["validate"]


def _check_axes(chart: ChartDefinition) -> None:
    count = len(chart.data.axes)
    if count < C.MIN_AXES:
        raise ValidationError("axes", f"at least {C.MIN_AXES} axes are required, got {count}")
    if count > C.MAX_AXES:
        raise ValidationError("axes", f"maximum {C.MAX_AXES} axes allowed, got {count}")


def _check_series_count(chart: ChartDefinition) -> None:
    count = len(chart.data.series)
    if count > C.MAX_SERIES:
        raise ValidationError(
            "series", f"maximum {C.MAX_SERIES} series allowed, got {count}"
        )


def _check_axis_names(chart: ChartDefinition) -> None:
    seen: Set[str] = set()
    for index, axis in enumerate(chart.data.axes):
        if not axis.name:
            raise ValidationError("axes", f"axis at index {index} has no name")
        if axis.name in seen:
            raise ValidationError("axes", f"duplicate axis name: {axis.name}")
        seen.add(axis.name)
        if axis.max is not None and axis.max <= 0:
            raise ValidationError("axes.max", f"axis {axis.name}: max must be positive")


def _check_series(chart: ChartDefinition) -> None:
    axis_names = chart.axis_names()
    axis_set = set(axis_names)
    log_axes = [axis.name for axis in chart.data.axes if axis.scale != "linear"]
    seen: Set[str] = set()

    for index, series in enumerate(chart.data.series):
        if not series.name:
            raise ValidationError("series", f"series at index {index} has no name")
        if series.name in seen:
            raise ValidationError("series", f"duplicate series name: {series.name}")
        seen.add(series.name)

        for name in axis_names:
            if name not in series.data:
                raise ValidationError(
                    "series.data", f"series {series.name}: missing data for axis {name}"
                )
        for key in series.data:
            if key not in axis_set:
                raise ValidationError(
                    "series.data", f"series {series.name}: extra data key {key}"
                )
        for name in log_axes:
            if series.data[name] < 0:
                raise ValidationError(
                    "series.data",
                    f"series {series.name}: negative value on logarithmic axis {name}",
                )


def _check_options(chart: ChartDefinition) -> None:
    options = chart.options
    if options.width <= 0:
        raise ValidationError("options.width", "width must be positive")
    if options.height <= 0:
        raise ValidationError("options.height", "height must be positive")

    plot = options.plot_options
    if not 0 < plot.scale <= 1.0:
        raise ValidationError(
            "options.plot_options.scale", "plot scale must be in (0, 1]"
        )
    radius = plot.scale * min(options.width, options.height) / 2 - plot.padding
    if radius <= 0:
        raise ValidationError(
            "options.plot_options.padding",
            f"plot padding {plot.padding} leaves no room for the plot (radius {radius:.3f})",
        )

    legend = options.legend_options
    if legend.max_width is not None and legend.min_width > legend.max_width:
        raise ValidationError(
            "options.legend_options.min_width", "min_width must not exceed max_width"
        )


def validate(chart: ChartDefinition, oracle: FontOracle) -> FontSet:
    """Check ``chart`` and return the fonts needed to lay it out.

    Checks run in a fixed order and the first failure is raised: fonts, axis
    count, series count, axis names, series names and data keys, canvas size,
    then plot and legend options. ``chart`` is never modified.
    """

    fonts = load_font_set(chart.options, oracle)
    _check_axes(chart)
    _check_series_count(chart)
    _check_axis_names(chart)
    _check_series(chart)
    _check_options(chart)
    LOG.debug(
        "chart valid: %d axes, %d series",
        len(chart.data.axes),
        len(chart.data.series),
    )
    return fonts
