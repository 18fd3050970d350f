"""Render charts to SVG or PNG bytes and files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from ..config.settings import ChartDefinition
from ..constants import DEFAULT_DPI
from ..drawing import TransformSurface
from ..errors import ExportError
from ..fonts import FontOracle, PillowFontOracle
from ..render import render_chart
from .png import PngSurface
from .svg import SvgDocument, SvgElement, SvgSurface

LOG = logging.getLogger(__name__)

__all__ = [
    "SUPPORTED_FORMATS",
    "PngSurface",
    "SvgDocument",
    "SvgElement",
    "SvgSurface",
    "export_chart",
    "format_for_path",
    "make_surface",
    "save_chart_image",
]

SUPPORTED_FORMATS = ("svg", "png")


def format_for_path(path: str | Path) -> str:
    """Output format implied by the extension of ``path``."""

    suffix = Path(path).suffix.lower().lstrip(".")
    if suffix not in SUPPORTED_FORMATS:
        raise ExportError(
            f"unsupported output format {suffix or '<none>'!r} for {path}; "
            f"expected one of: {', '.join('.' + fmt for fmt in SUPPORTED_FORMATS)}"
        )
    return suffix


def make_surface(
    fmt: str, width: float, height: float, *, dpi: float = DEFAULT_DPI
) -> TransformSurface:
    fmt = fmt.lower()
    if fmt == "svg":
        return SvgSurface(width, height)
    if fmt == "png":
        return PngSurface(width, height, dpi=dpi)
    raise ExportError(f"unsupported output format: {fmt}")


def export_chart(
    chart: ChartDefinition,
    fmt: str = "svg",
    *,
    oracle: Optional[FontOracle] = None,
    dpi: float = DEFAULT_DPI,
) -> bytes:
    """Render ``chart`` and return the encoded ``fmt`` document."""

    surface = make_surface(fmt, chart.width, chart.height, dpi=dpi)
    render_chart(chart, surface, oracle or PillowFontOracle())
    return surface.to_bytes()


def save_chart_image(
    chart: ChartDefinition,
    path: str | Path,
    *,
    oracle: Optional[FontOracle] = None,
    dpi: float = DEFAULT_DPI,
) -> Path:
    """Render ``chart`` to ``path``; the format follows the file extension."""

    target = Path(path)
    payload = export_chart(chart, format_for_path(target), oracle=oracle, dpi=dpi)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(payload)
    except OSError as exc:
        raise ExportError(f"failed to write {target}: {exc}") from exc
    LOG.info("wrote %s (%d bytes)", target, len(payload))
    return target
