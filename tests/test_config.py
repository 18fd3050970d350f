from __future__ import annotations

import json
from pathlib import Path

import pytest

from spiderchart import constants as C
from spiderchart.config import (
    ChartDefinition,
    SeriesOptions,
    chart_from_mapping,
    chart_from_yaml,
    load_chart,
    save_chart,
)
from spiderchart.errors import ConfigError, ValidationError

YAML_CHART = """
options:
  title: Languages
  legend_options:
    placement: right
data:
  axes:
    - name: Speed
    - name: Safety
      max: 10
    - name: Tooling
      scale: log10
  series:
    - name: Rust
      data: {Speed: 9, Safety: 10, Tooling: 8}
      options:
        fill_opacity: 0
"""


def test_defaults_are_filled_in() -> None:
    chart = ChartDefinition()
    assert chart.width == C.DEFAULT_CHART_WIDTH
    assert chart.options.legend_options.placement == "bottom"
    assert chart.options.colors == list(C.DEFAULT_SERIES_COLORS)
    assert chart.options.series_options.fill_opacity is None


def test_yaml_definition_parses_enums_and_optionals() -> None:
    chart = chart_from_yaml(YAML_CHART)
    assert chart.axis_names() == ["Speed", "Safety", "Tooling"]
    assert chart.data.axes[1].max == 10
    assert chart.data.axes[2].scale == "log10"
    assert chart.options.legend_options.placement == "right"
    # an explicit zero is kept, not treated as unset
    assert chart.data.series[0].options.fill_opacity == 0


def test_empty_palette_falls_back_to_defaults() -> None:
    chart = chart_from_mapping({"options": {"colors": [], "point_markers": []}})
    assert chart.options.colors == list(C.DEFAULT_SERIES_COLORS)
    assert chart.options.point_markers == list(C.DEFAULT_POINT_MARKERS)


@pytest.mark.parametrize(
    "payload",
    [
        {"options": {"legend_options": {"placement": "middle"}}},
        {"options": {"plot_options": {"connect_type": "spline"}}},
        {"data": {"axes": [{"name": "A", "scale": "ln"}]}},
        {"options": {"unknown": 1}},
        {"data": {"axes": [{"name": "A", "max": float("inf")}]}},
        {"data": {"series": [{"name": "S", "data": {"A": float("nan")}}]}},
    ],
)
def test_invalid_values_raise_config_error(payload) -> None:
    with pytest.raises(ConfigError) as excinfo:
        chart_from_mapping(payload)
    assert excinfo.value.errors


def test_non_mapping_payload_is_rejected() -> None:
    with pytest.raises(ConfigError):
        chart_from_mapping(["not", "a", "mapping"])  # type: ignore[arg-type]


def test_load_chart_by_extension(tmp_path: Path) -> None:
    yaml_path = tmp_path / "chart.yml"
    yaml_path.write_text(YAML_CHART, encoding="utf-8")
    json_path = tmp_path / "chart.json"
    json_path.write_text(
        json.dumps({"data": {"axes": [{"name": "X"}, {"name": "Y"}, {"name": "Z"}]}}),
        encoding="utf-8",
    )

    assert load_chart(yaml_path).options.title == "Languages"
    assert load_chart(json_path).axis_names() == ["X", "Y", "Z"]


def test_unknown_extension_falls_back_to_yaml(tmp_path: Path) -> None:
    path = tmp_path / "chart.conf"
    path.write_text(YAML_CHART, encoding="utf-8")
    assert load_chart(path).data.series[0].name == "Rust"


def test_load_chart_reports_missing_file_and_bad_json(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="failed to read"):
        load_chart(tmp_path / "missing.yaml")
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigError, match="JSON"):
        load_chart(bad)


def test_save_chart_round_trip(tmp_path: Path) -> None:
    chart = chart_from_yaml(YAML_CHART)
    for name in ("out.yaml", "out.json"):
        target = save_chart(chart, tmp_path / name)
        assert load_chart(target) == chart


def test_add_axis_and_series() -> None:
    chart = ChartDefinition()
    chart.add_axis("A")
    chart.add_axis("B", max=4)
    series = chart.add_series("S", {"A": 1, "B": 2}, SeriesOptions(line_color="red"))
    assert chart.axis_names() == ["A", "B"]
    assert series.data == {"A": 1.0, "B": 2.0}
    assert chart.data.series[0].options.line_color == "red"

    with pytest.raises(ValidationError) as excinfo:
        chart.add_axis("A")
    assert excinfo.value.field == "axes"
    with pytest.raises(ValidationError, match="already exists"):
        chart.add_series("S")


def test_add_axis_and_series_limits() -> None:
    chart = ChartDefinition()
    for index in range(C.MAX_AXES):
        chart.add_axis(f"axis-{index}")
    with pytest.raises(ValidationError, match="maximum 50 axes"):
        chart.add_axis("one-too-many")

    for index in range(C.MAX_SERIES):
        chart.add_series(f"series-{index}")
    with pytest.raises(ValidationError, match="maximum 20 series"):
        chart.add_series("one-too-many")
