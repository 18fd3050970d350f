"""spiderchart package bootstrap and public API."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version as _get_version

from .colors import RGBA, parse_color, resolve_with_opacity
from .config import (
    Axis,
    ChartData,
    ChartDefinition,
    ChartOptions,
    Series,
    SeriesOptions,
    load_chart,
    save_chart,
)
from .drawing import CommandRecorder, DrawCommand, DrawingSurface
from .errors import (
    ConfigError,
    ExportError,
    FontLoadError,
    SpiderChartError,
    ValidationError,
)
from .export import export_chart, save_chart_image
from .fonts import FixedMetricsFontOracle, FontOracle, PillowFontOracle
from .layout import LayoutResult, build_layout
from .render import record_chart, render_chart
from .validation import validate

LOG = logging.getLogger(__name__)

try:
    __version__ = _get_version("spiderchart")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    __version__ = "0.0.0"


def get_version() -> str:
    """Return the resolved spiderchart package version."""

    return __version__


__all__ = [
    "Axis",
    "ChartData",
    "ChartDefinition",
    "ChartOptions",
    "CommandRecorder",
    "ConfigError",
    "DrawCommand",
    "DrawingSurface",
    "ExportError",
    "FixedMetricsFontOracle",
    "FontLoadError",
    "FontOracle",
    "LayoutResult",
    "PillowFontOracle",
    "RGBA",
    "Series",
    "SeriesOptions",
    "SpiderChartError",
    "ValidationError",
    "__version__",
    "build_layout",
    "export_chart",
    "get_version",
    "load_chart",
    "parse_color",
    "record_chart",
    "render_chart",
    "resolve_with_opacity",
    "save_chart",
    "save_chart_image",
    "validate",
]
