"""Greedy row packing of legend entries."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import List, Sequence, Tuple

from ..config.settings import LegendOptions
from ..constants import LEGEND_WRAP_RATIO
from ..fonts import FontHandle, FontOracle
from .regions import Region
from .series import SeriesStyle

LOG = logging.getLogger(__name__)

__all__ = ["LegendEntry", "LegendRow", "layout_legend"]

# Vertical offset of the text baseline below the row centre, as a fraction
# of the font size.
_BASELINE_DROP = 0.35


@dataclass(frozen=True, slots=True)
class LegendEntry:
    """One sample line plus label.

    ``x`` is where the sample line starts and ``label_x`` where the label
    text starts, both in canvas coordinates.
    """

    name: str
    style: SeriesStyle
    sample_width: float
    label_width: float
    separator_width: float
    x: float = 0.0
    label_x: float = 0.0

    @property
    def width(self) -> float:
        return self.sample_width + self.label_width + self.separator_width


@dataclass(frozen=True, slots=True)
class LegendRow:
    """A wrapped line of entries.

    ``y`` is the vertical centre of the row and ``baseline`` the y at which
    labels are drawn.
    """

    entries: Tuple[LegendEntry, ...]
    width: float
    y: float = 0.0
    baseline: float = 0.0


def _measure_entries(
    items: Sequence[Tuple[str, SeriesStyle]],
    font: FontHandle,
    oracle: FontOracle,
    options: LegendOptions,
) -> List[LegendEntry]:
    return [
        LegendEntry(
            name=name,
            style=style,
            sample_width=options.line_length,
            label_width=oracle.measure_text(font, name),
            separator_width=2 * options.padding,
        )
        for name, style in items
    ]


def _wrap(entries: Sequence[LegendEntry], available: float) -> List[List[LegendEntry]]:
    rows: List[List[LegendEntry]] = []
    current: List[LegendEntry] = []
    running = 0.0
    for entry in entries:
        if current and running + entry.width > available:
            rows.append(current)
            current = []
            running = 0.0
        current.append(entry)
        running += entry.width
    if current:
        rows.append(current)
    return rows


def layout_legend(
    items: Sequence[Tuple[str, SeriesStyle]],
    region: Region,
    font: FontHandle,
    oracle: FontOracle,
    options: LegendOptions,
) -> Tuple[LegendRow, ...]:
    """Pack ``(name, style)`` items into rows that fit ``region``.

    An entry starts a new row when appending it would push the running row
    width past ``0.85 * region.width``; an empty row always takes its first
    entry. Rows are centred horizontally and stacked from the middle of the
    region, keeping the order of ``items``.
    """

    entries = _measure_entries(items, font, oracle, options)
    if not entries:
        return ()

    wrapped = _wrap(entries, LEGEND_WRAP_RATIO * region.width)
    line_height = oracle.line_height(font)
    top = region.center.y + line_height * len(wrapped) / 2

    rows: List[LegendRow] = []
    for row_index, row_entries in enumerate(wrapped):
        # The trailing separator is only padding after the last label.
        row_width = sum(entry.width for entry in row_entries) - options.padding
        x = region.x0 + (region.width - row_width) / 2
        y = top - (row_index + 0.5) * line_height
        placed: List[LegendEntry] = []
        for entry in row_entries:
            placed.append(
                replace(entry, x=x, label_x=x + entry.sample_width + options.padding)
            )
            x += entry.width
        rows.append(
            LegendRow(
                entries=tuple(placed),
                width=row_width,
                y=y,
                baseline=y - font.size_mm * _BASELINE_DROP,
            )
        )

    LOG.debug("legend: %d entries in %d rows", len(entries), len(rows))
    return tuple(rows)
