"""Font loading and text metrics.

Layout never inspects glyphs directly. It asks a :class:`FontOracle` for an
opaque :class:`FontHandle` per text role, then for line heights and advance
widths expressed in millimetres.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Iterator, Optional, Protocol, Sequence, Tuple

from PIL import ImageFont

from .colors import RGBA, parse_color
from .config.settings import ChartOptions, FontStyle
from .constants import (
    DEFAULT_AXIS_LABEL_FONT_SIZE,
    DEFAULT_LEGEND_FONT_SIZE,
    DEFAULT_SUBTITLE_FONT_SIZE,
    DEFAULT_TICK_LABEL_FONT_SIZE,
    DEFAULT_TITLE_FONT_SIZE,
    MM_PER_PT,
)
from .errors import FontLoadError

LOG = logging.getLogger(__name__)

__all__ = [
    "FONT_ROLES",
    "FixedMetricsFontOracle",
    "FontHandle",
    "FontOracle",
    "FontRequest",
    "FontSet",
    "PillowFontOracle",
    "font_requests",
    "load_font_set",
    "pillow_face",
]

FONT_ROLES: Tuple[str, ...] = (
    "title",
    "subtitle",
    "axis_label",
    "tick_label",
    "legend_label",
)

_ROLE_DEFAULT_SIZES = {
    "title": DEFAULT_TITLE_FONT_SIZE,
    "subtitle": DEFAULT_SUBTITLE_FONT_SIZE,
    "axis_label": DEFAULT_AXIS_LABEL_FONT_SIZE,
    "tick_label": DEFAULT_TICK_LABEL_FONT_SIZE,
    "legend_label": DEFAULT_LEGEND_FONT_SIZE,
}

# Tried in order when no font is configured.
SYSTEM_FONT_CANDIDATES: Sequence[str] = (
    "LiberationSans-Regular.ttf",
    "DejaVuSans.ttf",
    "Helvetica.ttc",
    "Arial.ttf",
    "arial.ttf",
)


@dataclass(frozen=True, slots=True)
class FontRequest:
    """Fully resolved description of the face a role needs."""

    role: str
    size: float
    color: RGBA
    name: Optional[str] = None
    path: Optional[str] = None

    @property
    def size_mm(self) -> float:
        return self.size * MM_PER_PT


@dataclass(frozen=True, slots=True)
class FontHandle:
    """Opaque font reference handed back by a :class:`FontOracle`.

    ``face`` is whatever object the oracle needs to measure text; surfaces
    only rely on ``role``, ``size``, ``color`` and ``source``.
    """

    role: str
    size: float
    color: RGBA
    source: Optional[str] = None
    face: Any = field(default=None, compare=False, repr=False)

    @property
    def size_mm(self) -> float:
        return self.size * MM_PER_PT


class FontOracle(Protocol):
    def load(self, request: FontRequest) -> FontHandle: ...

    def line_height(self, font: FontHandle) -> float: ...

    def measure_text(self, font: FontHandle, text: str) -> float: ...


@dataclass(frozen=True, slots=True)
class FontSet:
    """The five faces a chart needs, keyed by role."""

    title: FontHandle
    subtitle: FontHandle
    axis_label: FontHandle
    tick_label: FontHandle
    legend_label: FontHandle

    def __getitem__(self, role: str) -> FontHandle:
        if role not in FONT_ROLES:
            raise KeyError(role)
        return getattr(self, role)

    def __iter__(self) -> Iterator[FontHandle]:
        return iter(getattr(self, role) for role in FONT_ROLES)


def _resolve_request(role: str, style: FontStyle, options: ChartOptions) -> FontRequest:
    size = style.size if style.size is not None else _ROLE_DEFAULT_SIZES[role]
    color = parse_color(style.color if style.color is not None else options.foreground)
    path = style.path
    name = style.name
    if path is None and name is None:
        path = options.default_font_path
        name = options.default_font_name
    return FontRequest(role=role, size=float(size), color=color, name=name, path=path)


def font_requests(options: ChartOptions) -> Tuple[FontRequest, ...]:
    """Return the font requests for every role, in :data:`FONT_ROLES` order."""

    styles = {
        "title": options.title_style,
        "subtitle": options.subtitle_style,
        "axis_label": options.axis_options.label_style,
        "tick_label": options.axis_options.tick_label_style,
        "legend_label": options.legend_options.style,
    }
    return tuple(_resolve_request(role, styles[role], options) for role in FONT_ROLES)


def load_font_set(options: ChartOptions, oracle: FontOracle) -> FontSet:
    """Load all five faces, raising :class:`FontLoadError` on the first failure."""

    handles = {}
    for request in font_requests(options):
        try:
            handle = oracle.load(request)
        except FontLoadError:
            raise
        except (OSError, ValueError) as exc:
            raise FontLoadError(request.role, str(exc)) from exc
        if handle is None:
            raise FontLoadError(request.role, "font oracle returned no face")
        handles[request.role] = handle
    return FontSet(**handles)


# -------------------- Pillow backed oracle --------------------


@lru_cache(maxsize=64)
def _truetype(source: str, pixels: int) -> ImageFont.FreeTypeFont:
    return ImageFont.truetype(source, size=pixels)


@lru_cache(maxsize=16)
def _default_font(pixels: int) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    return ImageFont.load_default(size=pixels)


def pillow_face(
    source: Optional[str], pixels: int
) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    """Return a Pillow face for ``source`` at ``pixels``, or Pillow's default."""

    if source:
        try:
            return _truetype(source, pixels)
        except OSError:
            LOG.warning("font %s is not loadable by Pillow, using the default face", source)
    return _default_font(pixels)


class PillowFontOracle:
    """Measure text with Pillow FreeType faces.

    Faces are opened at ``pixels_per_mm`` resolution and metrics are scaled
    back to millimetres, so precision improves with a larger value.
    """

    def __init__(
        self,
        pixels_per_mm: float = 10.0,
        candidates: Sequence[str] = SYSTEM_FONT_CANDIDATES,
    ) -> None:
        self.pixels_per_mm = pixels_per_mm
        self.candidates = tuple(candidates)

    def _pixels(self, size_mm: float) -> int:
        return max(1, int(round(size_mm * self.pixels_per_mm)))

    def load(self, request: FontRequest) -> FontHandle:
        pixels = self._pixels(request.size_mm)
        explicit = request.path or request.name
        if explicit:
            try:
                face = _truetype(explicit, pixels)
            except OSError as exc:
                raise FontLoadError(request.role, f"{explicit}: {exc}") from exc
            return FontHandle(request.role, request.size, request.color, explicit, face)

        for candidate in self.candidates:
            try:
                face = _truetype(candidate, pixels)
            except OSError:
                continue
            LOG.debug("using %s for %s text", candidate, request.role)
            return FontHandle(request.role, request.size, request.color, candidate, face)

        LOG.debug("no system font found for %s text, using Pillow default", request.role)
        return FontHandle(
            request.role, request.size, request.color, None, _default_font(pixels)
        )

    def _scale(self, font: FontHandle) -> float:
        return font.size_mm / self._pixels(font.size_mm)

    def line_height(self, font: FontHandle) -> float:
        face = font.face
        if hasattr(face, "getmetrics"):
            ascent, descent = face.getmetrics()
            return (ascent + descent) * self._scale(font)
        return font.size_mm * 1.2

    def measure_text(self, font: FontHandle, text: str) -> float:
        if not text:
            return 0.0
        face = font.face
        if hasattr(face, "getlength"):
            return float(face.getlength(text)) * self._scale(font)
        left, _, right, _ = face.getbbox(text)
        return float(right - left) * self._scale(font)


class FixedMetricsFontOracle:
    """Deterministic metrics with a constant advance per character.

    Useful for headless vector output and for reproducible layouts, since it
    never touches the system font directories.
    """

    def __init__(self, advance_ratio: float = 0.6, line_spacing: float = 1.2) -> None:
        self.advance_ratio = advance_ratio
        self.line_spacing = line_spacing

    def load(self, request: FontRequest) -> FontHandle:
        return FontHandle(
            request.role, request.size, request.color, request.path or request.name
        )

    def line_height(self, font: FontHandle) -> float:
        return font.size_mm * self.line_spacing

    def measure_text(self, font: FontHandle, text: str) -> float:
        return len(text) * font.size_mm * self.advance_ratio
