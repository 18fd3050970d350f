"""Configuration models and helpers for chart definitions."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Literal, Mapping, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from .. import constants as C
from ..errors import ConfigError, ValidationError

LOG = logging.getLogger(__name__)

ScaleType = Literal["linear", "log10", "log2"]
ConnectType = Literal["circle", "polygon"]
PointShape = Literal["circle", "square", "triangle", "diamond", "none"]
LegendPlacement = Literal["top", "bottom", "left", "right", "none"]

# -------------------- Chart Schema --------------------


class _Model(BaseModel):
    model_config = ConfigDict(extra="forbid", validate_assignment=True, allow_inf_nan=False)


class FontStyle(_Model):
    """Font selection for one text role.

    ``size`` is in points. Unset fields fall back to the role default size,
    the chart foreground color and the chart default font.
    """

    name: Optional[str] = None
    path: Optional[str] = None
    size: Optional[float] = Field(default=None, gt=0)
    color: Optional[str] = None


class PlotOptions(_Model):
    """Plot area sizing and outline."""

    scale: float = C.DEFAULT_PLOT_SCALE
    outline_thickness: float = Field(default=C.DEFAULT_PLOT_OUTLINE_THICKNESS, ge=0)
    outline_color: str = "#000000"
    connect_type: ConnectType = "circle"
    margin: float = C.DEFAULT_PLOT_MARGIN
    padding: float = C.DEFAULT_PLOT_PADDING


class AxisOptions(_Model):
    """Axis line, label and tick configuration shared by every axis."""

    line_thickness: float = Field(default=C.DEFAULT_AXIS_LINE_THICKNESS, ge=0)
    line_color: str = "#000000"
    label_offset: float = C.DEFAULT_LABEL_OFFSET
    label_style: FontStyle = Field(
        default_factory=lambda: FontStyle(size=C.DEFAULT_AXIS_LABEL_FONT_SIZE)
    )
    tick_label_style: FontStyle = Field(
        default_factory=lambda: FontStyle(size=C.DEFAULT_TICK_LABEL_FONT_SIZE)
    )
    major_ticks: int = Field(default=C.DEFAULT_MAJOR_TICK_COUNT, ge=0)
    minor_ticks: int = Field(default=C.DEFAULT_MINOR_TICK_COUNT, ge=0)
    major_tick_length: float = Field(default=C.DEFAULT_MAJOR_TICK_LENGTH, ge=0)
    minor_tick_length: float = Field(default=C.DEFAULT_MINOR_TICK_LENGTH, ge=0)
    major_tick_line_thickness: float = Field(
        default=C.DEFAULT_MAJOR_TICK_LINE_THICKNESS, ge=0
    )
    minor_tick_line_thickness: float = Field(
        default=C.DEFAULT_MINOR_TICK_LINE_THICKNESS, ge=0
    )
    show_name: bool = True
    show_axis: bool = True
    show_ticks: bool = True
    show_tick_labels: bool = True


class SeriesOptions(_Model):
    """Per-series style overrides.

    Every field is optional: ``None`` defers to the chart-wide
    ``series_options`` and then to the palette, so a configured ``0`` (for
    example a zero fill opacity) is honoured rather than treated as unset.
    """

    line_thickness: Optional[float] = Field(default=None, ge=0)
    line_color: Optional[str] = None
    line_opacity: Optional[float] = None
    fill_color: Optional[str] = None
    fill_opacity: Optional[float] = None
    point_size: Optional[float] = Field(default=None, ge=0)
    point_line_thickness: Optional[float] = Field(default=None, ge=0)
    point_color: Optional[str] = None
    point_fill_color: Optional[str] = None
    point_fill_opacity: Optional[float] = None
    point_shape: Optional[PointShape] = None


class LegendOptions(_Model):
    """Legend placement, sizing and sample styling."""

    show: bool = True
    placement: LegendPlacement = "bottom"
    min_width: float = Field(default=0.0, ge=0)
    max_width: Optional[float] = Field(default=None, gt=0)
    min_height: float = Field(default=0.0, ge=0)
    max_height: Optional[float] = Field(default=None, gt=0)
    line_length: float = Field(default=C.DEFAULT_LEGEND_LINE_LENGTH, ge=0)
    line_thickness: float = Field(default=C.DEFAULT_LEGEND_LINE_THICKNESS, ge=0)
    outline_thickness: float = Field(default=C.DEFAULT_LEGEND_OUTLINE_THICKNESS, ge=0)
    outline_color: str = "#000000"
    style: FontStyle = Field(
        default_factory=lambda: FontStyle(size=C.DEFAULT_LEGEND_FONT_SIZE)
    )
    padding: float = Field(default=C.DEFAULT_LEGEND_PADDING, ge=0)
    show_outline: bool = False


class ChartOptions(_Model):
    """Canvas-level options for a chart."""

    width: float = C.DEFAULT_CHART_WIDTH
    height: float = C.DEFAULT_CHART_HEIGHT
    background: str = "white"
    foreground: str = "black"
    title: str = ""
    title_style: FontStyle = Field(
        default_factory=lambda: FontStyle(size=C.DEFAULT_TITLE_FONT_SIZE)
    )
    title_margin: float = C.DEFAULT_TITLE_MARGIN
    subtitle: str = ""
    subtitle_style: FontStyle = Field(
        default_factory=lambda: FontStyle(size=C.DEFAULT_SUBTITLE_FONT_SIZE)
    )
    subtitle_margin: float = C.DEFAULT_SUBTITLE_MARGIN
    plot_options: PlotOptions = Field(default_factory=PlotOptions)
    axis_options: AxisOptions = Field(default_factory=AxisOptions)
    series_options: SeriesOptions = Field(default_factory=SeriesOptions)
    legend_options: LegendOptions = Field(default_factory=LegendOptions)
    colors: List[str] = Field(default_factory=lambda: list(C.DEFAULT_SERIES_COLORS))
    point_markers: List[PointShape] = Field(
        default_factory=lambda: list(C.DEFAULT_POINT_MARKERS)
    )
    page_margin: float = C.DEFAULT_PAGE_MARGIN
    default_font_name: Optional[str] = None
    default_font_path: Optional[str] = None
    show_title: bool = True
    show_subtitle: bool = True
    show_legend: bool = True
    show_axis_labels: bool = True
    show_ticks: bool = True
    show_tick_labels: bool = True
    show_point_markers: bool = True

    @field_validator("colors", mode="before")
    @classmethod
    def _default_empty_palette(cls, value: object) -> object:
        if value is None or value == []:
            return list(C.DEFAULT_SERIES_COLORS)
        return value

    @field_validator("point_markers", mode="before")
    @classmethod
    def _default_empty_markers(cls, value: object) -> object:
        if value is None or value == []:
            return list(C.DEFAULT_POINT_MARKERS)
        return value


class Axis(_Model):
    """A single spoke of the chart. ``max=None`` enables autoscaling."""

    name: str
    max: Optional[float] = None
    scale: ScaleType = "linear"


class Series(_Model):
    """A data polygon with one value per axis name."""

    name: str
    data: Dict[str, float] = Field(default_factory=dict)
    options: SeriesOptions = Field(default_factory=SeriesOptions)


class ChartData(_Model):
    axes: List[Axis] = Field(default_factory=list)
    series: List[Series] = Field(default_factory=list)


class ChartDefinition(_Model):
    """A complete, defaulted spider chart definition."""

    options: ChartOptions = Field(default_factory=ChartOptions)
    data: ChartData = Field(default_factory=ChartData)

    @property
    def width(self) -> float:
        return self.options.width

    @property
    def height(self) -> float:
        return self.options.height

    def axis_names(self) -> List[str]:
        return [axis.name for axis in self.data.axes]

    def add_axis(
        self,
        name: str,
        max: Optional[float] = None,
        scale: ScaleType = "linear",
    ) -> Axis:
        """Append an axis, rejecting duplicates and overflow."""

        if any(axis.name == name for axis in self.data.axes):
            raise ValidationError("axes", f"axis {name} already exists")
        if len(self.data.axes) >= C.MAX_AXES:
            raise ValidationError(
                "axes",
                f"maximum {C.MAX_AXES} axes allowed, got {len(self.data.axes)}",
            )
        axis = Axis(name=name, max=max, scale=scale)
        self.data.axes.append(axis)
        return axis

    def add_series(
        self,
        name: str,
        data: Mapping[str, float] | None = None,
        options: SeriesOptions | None = None,
    ) -> Series:
        """Append a series, rejecting duplicate names and overflow."""

        if any(series.name == name for series in self.data.series):
            raise ValidationError("series", f"series {name} already exists")
        if len(self.data.series) >= C.MAX_SERIES:
            raise ValidationError(
                "series",
                f"maximum {C.MAX_SERIES} series allowed, got {len(self.data.series)}",
            )
        series = Series(
            name=name,
            data={str(key): float(value) for key, value in (data or {}).items()},
            options=options or SeriesOptions(),
        )
        self.data.series.append(series)
        return series


# -------------------- I/O Helpers --------------------

_JSON_SUFFIXES = {".json"}
_YAML_SUFFIXES = {".yaml", ".yml"}


def _format_pydantic_errors(exc: PydanticValidationError) -> List[str]:
    messages: List[str] = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        messages.append(f"{location or '<root>'}: {error.get('msg', 'invalid value')}")
    return messages


def chart_from_mapping(payload: Mapping[str, Any]) -> ChartDefinition:
    """Build a :class:`ChartDefinition` from already-decoded data."""

    if not isinstance(payload, Mapping):
        raise ConfigError("chart configuration must be a mapping at the top level")
    try:
        return ChartDefinition.model_validate(dict(payload))
    except PydanticValidationError as exc:
        errors = _format_pydantic_errors(exc)
        raise ConfigError(
            "invalid chart configuration: " + "; ".join(errors), errors=errors
        ) from exc


def chart_from_json(text: str) -> ChartDefinition:
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"failed to parse JSON: {exc}") from exc
    return chart_from_mapping(payload)


def chart_from_yaml(text: str) -> ChartDefinition:
    try:
        payload = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"failed to parse YAML: {exc}") from exc
    return chart_from_mapping(payload or {})


def load_chart(path: str | Path) -> ChartDefinition:
    """Load a chart definition from ``path``.

    The format follows the file extension (``.json``, ``.yaml``/``.yml``).
    Other extensions are tried as JSON first, then YAML.
    """

    source = Path(path)
    try:
        text = source.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"failed to read {source}: {exc}") from exc

    suffix = source.suffix.lower()
    if suffix in _JSON_SUFFIXES:
        chart = chart_from_json(text)
    elif suffix in _YAML_SUFFIXES:
        chart = chart_from_yaml(text)
    else:
        try:
            chart = chart_from_json(text)
        except ConfigError:
            LOG.debug("%s is not valid JSON, retrying as YAML", source)
            chart = chart_from_yaml(text)
    LOG.debug(
        "loaded chart from %s (%d axes, %d series)",
        source,
        len(chart.data.axes),
        len(chart.data.series),
    )
    return chart


def save_chart(chart: ChartDefinition, path: str | Path) -> Path:
    """Persist ``chart`` as JSON or YAML depending on the extension."""

    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    data = chart.model_dump(exclude_none=True)
    if target.suffix.lower() in _JSON_SUFFIXES:
        target.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
    else:
        with target.open("w", encoding="utf-8") as handle:
            yaml.safe_dump(data, handle, sort_keys=False, allow_unicode=True)
    return target
