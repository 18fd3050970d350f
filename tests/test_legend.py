from __future__ import annotations

import pytest

from spiderchart.colors import BLACK
from spiderchart.config import ChartOptions, LegendOptions, Series
from spiderchart.fonts import FontHandle
from spiderchart.layout.legend import layout_legend
from spiderchart.layout.regions import Region
from spiderchart.layout.series import resolve_series_style

from tests.helpers import StubOracle

FONT = FontHandle("legend_label", 10.0, BLACK)
OPTIONS = LegendOptions(line_length=10.0, padding=2.0)
REGION = Region(0.0, 0.0, 100.0, 20.0)


def _items(*names: str):
    options = ChartOptions()
    return [
        (name, resolve_series_style(index, Series(name=name), options))
        for index, name in enumerate(names)
    ]


def _row_names(rows):
    return [[entry.name for entry in row.entries] for row in rows]


def test_wrap_breaks_where_running_width_crosses_threshold() -> None:
    # entry width = 10 (sample) + len(name) + 4 (separators); threshold is 85
    names = ("a" * 16, "b" * 26, "c" * 6, "d" * 6, "e" * 6)
    rows = layout_legend(_items(*names), REGION, FONT, StubOracle(), OPTIONS)
    assert _row_names(rows) == [list(names[:2]), list(names[2:])]


def test_entry_exactly_at_threshold_stays_on_row() -> None:
    names = ("a" * 16, "b" * 26, "c" * 1)  # 30 + 40 + 15 == 85
    rows = layout_legend(_items(*names), REGION, FONT, StubOracle(), OPTIONS)
    assert len(rows) == 1


def test_oversized_entry_never_leaves_an_empty_row() -> None:
    names = ("x" * 200, "y")
    rows = layout_legend(_items(*names), REGION, FONT, StubOracle(), OPTIONS)
    assert _row_names(rows) == [["x" * 200], ["y"]]


def test_no_series_no_rows() -> None:
    assert layout_legend([], REGION, FONT, StubOracle(), OPTIONS) == ()


def test_entries_are_placed_left_to_right_and_rows_top_down() -> None:
    names = ("a" * 16, "b" * 26, "c" * 6, "d" * 6, "e" * 6)
    rows = layout_legend(_items(*names), REGION, FONT, StubOracle(line=4.0), OPTIONS)

    first, second = rows
    assert first.y > second.y
    assert first.y - second.y == pytest.approx(4.0)
    # rows are stacked around the region centre
    assert (first.y + second.y) / 2 == pytest.approx(REGION.center.y)

    xs = [entry.x for entry in second.entries]
    assert xs == sorted(xs)
    for entry in second.entries:
        assert entry.label_x == pytest.approx(entry.x + 10.0 + 2.0)
        assert entry.label_width == len(entry.name)

    # rows are centred horizontally
    assert second.width == pytest.approx(3 * 20.0 - 2.0)
    assert second.entries[0].x == pytest.approx((100.0 - second.width) / 2)
    assert first.baseline < first.y


def test_entries_keep_their_series_style() -> None:
    items = _items("one", "two")
    rows = layout_legend(items, REGION, FONT, StubOracle(), OPTIONS)
    styles = [entry.style for entry in rows[0].entries]
    assert styles == [style for _, style in items]
