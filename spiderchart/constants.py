"""Shared constants for chart geometry and defaults.

Lengths are millimetres, font sizes are points.
"""

from __future__ import annotations

import math

DEFAULT_CHART_WIDTH = 200.0
DEFAULT_CHART_HEIGHT = 200.0

AUTOSCALE_PADDING_FACTOR = 1.15

MIN_AXES = 3
MAX_AXES = 50
MAX_SERIES = 20

DEFAULT_PAGE_MARGIN = 3.0
DEFAULT_PLOT_SCALE = 0.6
DEFAULT_PLOT_MARGIN = 3.0
DEFAULT_PLOT_PADDING = 5.0
DEFAULT_TITLE_MARGIN = 3.0
DEFAULT_SUBTITLE_MARGIN = 3.0
DEFAULT_LABEL_OFFSET = 3.0

DEFAULT_MAJOR_TICK_COUNT = 5
DEFAULT_MINOR_TICK_COUNT = 2
DEFAULT_MAJOR_TICK_LENGTH = 2.0
DEFAULT_MINOR_TICK_LENGTH = 1.0

DEFAULT_PLOT_OUTLINE_THICKNESS = 1.0
DEFAULT_AXIS_LINE_THICKNESS = 0.75
DEFAULT_MAJOR_TICK_LINE_THICKNESS = 0.5
DEFAULT_MINOR_TICK_LINE_THICKNESS = 0.25
DEFAULT_SERIES_LINE_THICKNESS = 0.75
DEFAULT_POINT_LINE_THICKNESS = 0.25
DEFAULT_POINT_SIZE = 2.0
DEFAULT_FILL_OPACITY = 0.0
DEFAULT_POINT_FILL_OPACITY = 1.0

DEFAULT_LEGEND_LINE_LENGTH = 7.0
DEFAULT_LEGEND_LINE_THICKNESS = 0.6
DEFAULT_LEGEND_OUTLINE_THICKNESS = 0.5
DEFAULT_LEGEND_PADDING = 2.0

DEFAULT_FONT_SIZE = 12.0
DEFAULT_TITLE_FONT_SIZE = 18.0
DEFAULT_SUBTITLE_FONT_SIZE = 14.0
DEFAULT_LEGEND_FONT_SIZE = 10.0
DEFAULT_AXIS_LABEL_FONT_SIZE = 10.0
DEFAULT_TICK_LABEL_FONT_SIZE = 8.0

DEFAULT_SERIES_COLORS = ("#677ad1", "#6fac5d", "#b94663", "#9750a1", "#bc7d39")
DEFAULT_POINT_MARKERS = ("circle", "square", "triangle", "diamond")

# Fraction of the legend width a row may fill before wrapping.
LEGEND_WRAP_RATIO = 0.85

# Segments used to approximate circles with straight path commands.
CIRCLE_SEGMENTS = 96
MARKER_SEGMENTS = 24

TAU = 2 * math.pi
SMIDGE = 1.000000001
MM_PER_PT = 0.3527777777777778
MM_PER_INCH = 25.4
DEFAULT_DPI = 96.0
