from __future__ import annotations

import math

import pytest

from spiderchart.layout.axes import axis_angles, radius_to_value, value_to_radius

hypothesis = pytest.importorskip("hypothesis")
given = hypothesis.given
st = hypothesis.strategies
settings = hypothesis.settings

SCALES = st.sampled_from(["linear", "log10", "log2"])
MAXIMA = st.floats(min_value=1e-3, max_value=1e9, allow_nan=False, allow_infinity=False)
RADII = st.floats(min_value=1.0, max_value=500.0, allow_nan=False, allow_infinity=False)


@settings(deadline=None)
@given(count=st.integers(min_value=3, max_value=50))
def test_axes_are_evenly_spaced(count: int) -> None:
    angles = axis_angles(count)
    assert len(angles) == count
    assert angles[0] == 90.0
    for first, second in zip(angles, angles[1:]):
        assert math.isclose(second - first, 360.0 / count, rel_tol=1e-9)


@settings(deadline=None)
@given(maximum=MAXIMA, radius=RADII, scale=SCALES)
def test_full_scale_reaches_radius(maximum: float, radius: float, scale: str) -> None:
    assert math.isclose(value_to_radius(maximum, maximum, radius, scale), radius, rel_tol=1e-9)


@settings(deadline=None)
@given(
    fraction=st.floats(min_value=0.0, max_value=1.0, allow_nan=False),
    maximum=MAXIMA,
    radius=RADII,
    scale=SCALES,
)
def test_radius_round_trips_through_value(
    fraction: float, maximum: float, radius: float, scale: str
) -> None:
    r = fraction * radius
    value = radius_to_value(r, maximum, radius, scale)
    assert math.isclose(value_to_radius(value, maximum, radius, scale), r, rel_tol=1e-6, abs_tol=1e-6)
