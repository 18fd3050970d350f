from __future__ import annotations

import math

import pytest

from spiderchart.config import Axis, AxisOptions, ChartOptions
from spiderchart.layout.axes import (
    autoscale_max,
    axis_angles,
    compute_axes,
    format_tick_value,
    linmap,
    linspace,
    plot_radius,
    radius_to_value,
    value_to_radius,
)
from spiderchart.layout.regions import Point


@pytest.mark.parametrize(
    "value, label",
    [
        (0.0, "0.000"),
        (0.5, "0.500"),
        (0.0005, "0.001"),
        (5.555, "5.56"),
        (42, "42.0"),
        (500, "500"),
        (999.4, "999"),
        (1234, "1k"),
        (2500, "3k"),
        (1500000, "2M"),
        (2.5e9, "3G"),
        (7.2e12, "7T"),
        (3e15, "3P"),
    ],
)
def test_format_tick_value(value: float, label: str) -> None:
    assert format_tick_value(value) == label


def test_linspace_and_linmap() -> None:
    assert linspace(0.0, 10.0, 6) == pytest.approx([0, 2, 4, 6, 8, 10])
    assert linspace(1.0, 2.0, 1) == [1.0]
    assert linspace(1.0, 2.0, 0) == []
    assert linmap(0, 10, 0, 100, 25) == pytest.approx(250)


@pytest.mark.parametrize("count", [3, 4, 7, 50])
def test_axis_angles(count: int) -> None:
    angles = axis_angles(count)
    assert angles[0] == 90.0
    for first, second in zip(angles, angles[1:]):
        assert second - first == pytest.approx(360.0 / count)


def test_autoscale_uses_padded_running_max() -> None:
    data = [{"A": 3.0}, {"A": 7.0}, {"A": 2.0}]
    assert autoscale_max("A", None, data) == pytest.approx(8.05)


@pytest.mark.parametrize("data", [[], [{"A": 0.0}, {"A": 0.0}], [{"A": -4.0}]])
def test_autoscale_defaults_to_one(data) -> None:
    assert autoscale_max("A", None, data) == 1.0


def test_explicit_max_wins() -> None:
    assert autoscale_max("A", 5.0, [{"A": 100.0}]) == 5.0


def test_plot_radius() -> None:
    assert plot_radius(ChartOptions()) == pytest.approx(55.0)
    options = ChartOptions(width=300, height=100, plot_options={"scale": 0.8, "padding": 2})
    assert plot_radius(options) == pytest.approx(38.0)


def test_ticks_follow_major_and_minor_counts() -> None:
    axes = [Axis(name="A", max=12.0), Axis(name="B"), Axis(name="C")]
    options = AxisOptions(major_ticks=5, minor_ticks=2)
    geometries = compute_axes(axes, [{"A": 1, "B": 4, "C": 2}], Point(0, 0), options, 60.0)

    first = geometries[0]
    majors = first.major_ticks
    assert len(majors) == 5
    assert len(first.minor_ticks) == 12
    assert [tick.radius for tick in majors] == pytest.approx([10, 20, 30, 40, 50])
    assert [tick.value for tick in majors] == pytest.approx([2, 4, 6, 8, 10])
    assert [tick.label for tick in majors] == ["2.00", "4.00", "6.00", "8.00", "10.0"]
    radii = [tick.radius for tick in first.ticks]
    assert radii == sorted(radii)
    assert all(0 < r < 60.0 for r in radii)

    assert geometries[1].max == pytest.approx(4 * 1.15)
    assert geometries[2].angle == pytest.approx(90 + 240)


def test_zero_ticks() -> None:
    options = AxisOptions(major_ticks=0, minor_ticks=0)
    geometries = compute_axes(
        [Axis(name=n) for n in "ABC"], [], Point(0, 0), options, 10.0
    )
    assert geometries[0].ticks == ()


def test_axis_geometry_points() -> None:
    geometry = compute_axes(
        [Axis(name=n) for n in "ABCD"], [], Point(10.0, 20.0), AxisOptions(), 5.0
    )
    assert geometry[0].end == pytest.approx((10.0, 25.0))
    assert geometry[1].end == pytest.approx((5.0, 20.0))
    assert geometry[2].end == pytest.approx((10.0, 15.0))


def test_value_radius_full_scale_is_exact() -> None:
    for scale in ("linear", "log10", "log2"):
        assert value_to_radius(37.5, 37.5, 42.0, scale) == pytest.approx(42.0, abs=1e-12)


def test_log_scale_interpolates_through_log1p() -> None:
    assert value_to_radius(9.0, 99.0, 10.0, "log10") == pytest.approx(5.0)
    assert value_to_radius(3.0, 15.0, 8.0, "log2") == pytest.approx(4.0)
    assert radius_to_value(5.0, 99.0, 10.0, "log10") == pytest.approx(9.0)
    assert math.isclose(radius_to_value(0.0, 99.0, 10.0, "log10"), 0.0, abs_tol=1e-12)


def test_values_above_max_are_not_clamped() -> None:
    assert value_to_radius(20.0, 10.0, 50.0) == pytest.approx(100.0)


def test_format_tick_value_keeps_every_digit_of_huge_values() -> None:
    label = format_tick_value(1e45)
    assert label.endswith("P")
    assert "." not in label
    assert float(label[:-1]) == pytest.approx(1e30)
    assert format_tick_value(1.7e308).endswith("P")


def test_format_tick_value_never_raises_on_non_finite() -> None:
    assert format_tick_value(float("inf")) == "infP"


def test_autoscale_does_not_overflow() -> None:
    assert autoscale_max("A", None, [{"A": 1.7e308}]) == 1.7e308
