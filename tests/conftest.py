from __future__ import annotations

import pytest

from spiderchart.config import ChartDefinition
from spiderchart.fonts import FixedMetricsFontOracle

from .helpers import StubOracle, build_chart


@pytest.fixture
def oracle() -> FixedMetricsFontOracle:
    return FixedMetricsFontOracle()


@pytest.fixture
def stub_oracle() -> StubOracle:
    return StubOracle()


@pytest.fixture
def sample_chart() -> ChartDefinition:
    return build_chart(
        series={
            "Alpha": {"A": 3, "B": 4, "C": 5, "D": 2, "E": 1},
            "Beta": {"A": 7, "B": 1, "C": 2, "D": 6, "E": 3},
            "Gamma": {"A": 2, "B": 5, "C": 4, "D": 1, "E": 6},
        },
        title="Team skills",
        subtitle="Q3 review",
    )
