"""Partition the canvas into page, title, subtitle, plot and legend areas.

All coordinates are millimetres with the origin at the bottom-left corner of
the canvas and y growing upwards.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import NamedTuple, Tuple

from ..config.settings import ChartOptions
from ..constants import SMIDGE
from ..fonts import FontOracle, FontSet

LOG = logging.getLogger(__name__)

__all__ = ["Point", "Region", "Regions", "allocate", "legend_visible"]


class Point(NamedTuple):
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class Region:
    """Axis-aligned rectangle. Construct through :meth:`clamped` to keep
    ``x1 >= x0`` and ``y1 >= y0``."""

    x0: float
    y0: float
    x1: float
    y1: float

    @classmethod
    def clamped(cls, x0: float, y0: float, x1: float, y1: float) -> "Region":
        return cls(x0, y0, max(x0, x1), max(y0, y1))

    @property
    def width(self) -> float:
        return self.x1 - self.x0

    @property
    def height(self) -> float:
        return self.y1 - self.y0

    @property
    def center(self) -> Point:
        return Point(self.x0 + self.width / 2, self.y0 + self.height / 2)

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.x0, self.y0, self.x1, self.y1)


@dataclass(frozen=True, slots=True)
class Regions:
    page: Region
    title: Region
    subtitle: Region
    plot: Region
    legend: Region


def legend_visible(options: ChartOptions) -> bool:
    legend = options.legend_options
    return options.show_legend and legend.show and legend.placement != "none"


def _subtitle_text(options: ChartOptions) -> str:
    return options.subtitle if options.show_subtitle else ""


def allocate(
    canvas_size: Tuple[float, float],
    options: ChartOptions,
    fonts: FontSet,
    oracle: FontOracle,
) -> Regions:
    """Compute the five layout regions for a canvas of ``canvas_size``.

    The plot is centred on the canvas at ``plot_options.scale`` of its size.
    The legend is carved next to the plot according to its placement. A top
    legend that needs more than its natural height lowers the plot's top edge
    by the shortfall, and a side legend narrower than ``min_width`` shifts the
    plot sideways until the legend fits.
    """

    width, height = canvas_size
    margin = options.page_margin
    plot_opts = options.plot_options
    legend_opts = options.legend_options

    page = Region.clamped(margin, margin, width - margin, height - margin)

    plot_w = width * plot_opts.scale
    plot_h = height * plot_opts.scale
    plot_x = (width - plot_w - margin) / 2
    plot_y = (height - plot_h - margin) / 2
    px0, py0, px1, py1 = plot_x, plot_y, plot_x + plot_w, plot_y + plot_h

    subtitle_y0 = py1 + plot_opts.margin
    lx0 = ly0 = lx1 = ly1 = 0.0

    placement = legend_opts.placement if legend_visible(options) else "none"
    if placement == "top":
        natural = oracle.line_height(fonts.legend_label) * SMIDGE + legend_opts.padding
        target = max(natural, legend_opts.min_height)
        if legend_opts.max_height is not None:
            target = min(target, legend_opts.max_height)
        if natural < legend_opts.min_height:
            shortfall = target - natural
            LOG.debug("top legend below min height, lowering plot by %.3f", shortfall)
            py1 -= shortfall
        lx0, lx1 = page.x0, page.x1
        ly0 = py1 + plot_opts.margin
        ly1 = ly0 + target
        subtitle_y0 = ly1 + options.subtitle_margin
    elif placement == "bottom":
        lx0, lx1 = page.x0, page.x1
        ly0, ly1 = page.y0, py0 - plot_opts.margin
        if legend_opts.max_height is not None:
            ly0 = max(ly0, ly1 - legend_opts.max_height)
    elif placement == "left":
        shortfall = legend_opts.min_width - (px0 - plot_opts.margin - page.x0)
        if shortfall > 0:
            LOG.debug("left legend below min width, moving plot right by %.3f", shortfall)
            px0 += shortfall
            px1 += shortfall
        lx0, lx1 = page.x0, px0 - plot_opts.margin
        ly0, ly1 = py0, py1
        if legend_opts.max_width is not None:
            lx0 = max(lx0, lx1 - legend_opts.max_width)
    elif placement == "right":
        shortfall = legend_opts.min_width - (page.x1 - px1 - plot_opts.margin)
        if shortfall > 0:
            LOG.debug("right legend below min width, moving plot left by %.3f", shortfall)
            px0 -= shortfall
            px1 -= shortfall
        lx0, lx1 = px1 + plot_opts.margin, page.x1
        ly0, ly1 = py0, py1
        if legend_opts.max_width is not None:
            lx1 = min(lx1, lx0 + legend_opts.max_width)

    if placement in ("top", "bottom") and legend_opts.max_width is not None:
        excess = (lx1 - lx0) - legend_opts.max_width
        if excess > 0:
            lx0 += excess / 2
            lx1 -= excess / 2

    plot = Region.clamped(px0, py0, px1, py1)
    legend = Region.clamped(lx0, ly0, lx1, ly1)

    subtitle_height = 0.0
    if _subtitle_text(options):
        subtitle_height = oracle.line_height(fonts.subtitle) * SMIDGE
    subtitle = Region.clamped(
        page.x0, subtitle_y0, page.x1, subtitle_y0 + subtitle_height
    )
    title = Region.clamped(
        page.x0, subtitle.y1 + options.title_margin, page.x1, page.y1
    )

    LOG.debug(
        "regions: plot=%s legend=%s (%s) subtitle=%s title=%s",
        plot.as_tuple(),
        legend.as_tuple(),
        placement,
        subtitle.as_tuple(),
        title.as_tuple(),
    )
    return Regions(page=page, title=title, subtitle=subtitle, plot=plot, legend=legend)
