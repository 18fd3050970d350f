"""Transform stack and path buffer shared by the export surfaces."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..colors import BLACK, RGBA, TRANSPARENT
from ..errors import ExportError
from ..fonts import FontHandle
from .commands import Align

__all__ = ["Affine", "SubPath", "TransformSurface"]


@dataclass(frozen=True, slots=True)
class Affine:
    """2D affine matrix ``[[a, c, e], [b, d, f]]``."""

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    def __matmul__(self, other: "Affine") -> "Affine":
        return Affine(
            self.a * other.a + self.c * other.b,
            self.b * other.a + self.d * other.b,
            self.a * other.c + self.c * other.d,
            self.b * other.c + self.d * other.d,
            self.a * other.e + self.c * other.f + self.e,
            self.b * other.e + self.d * other.f + self.f,
        )

    @classmethod
    def translation(cls, dx: float, dy: float) -> "Affine":
        return cls(e=dx, f=dy)

    @classmethod
    def rotation(cls, degrees: float) -> "Affine":
        theta = math.radians(degrees)
        cos, sin = math.cos(theta), math.sin(theta)
        return cls(cos, sin, -sin, cos)

    def apply(self, x: float, y: float) -> Tuple[float, float]:
        return (self.a * x + self.c * y + self.e, self.b * x + self.d * y + self.f)

    @property
    def angle(self) -> float:
        """Rotation component in degrees, counter-clockwise."""

        return math.degrees(math.atan2(self.b, self.a))


@dataclass(slots=True)
class SubPath:
    points: List[Tuple[float, float]] = field(default_factory=list)
    closed: bool = False


class TransformSurface:
    """Base drawing surface working in chart millimetres (y up).

    Subclasses receive already transformed geometry through :meth:`_paint`
    and :meth:`_text`.
    """

    def __init__(self, width: float, height: float) -> None:
        self.width = width
        self.height = height
        self.fill_color: RGBA = TRANSPARENT
        self.stroke_color: RGBA = BLACK
        self.stroke_width = 1.0
        self.ctm = Affine()
        self._stack: List[Affine] = []
        self._path: List[SubPath] = []

    # Path construction ----------------------------------------------------
    def set_fill_color(self, color: RGBA) -> None:
        self.fill_color = color

    def set_stroke_color(self, color: RGBA) -> None:
        self.stroke_color = color

    def set_stroke_width(self, width: float) -> None:
        self.stroke_width = width

    def move_to(self, x: float, y: float) -> None:
        self._path.append(SubPath([self.ctm.apply(x, y)]))

    def line_to(self, x: float, y: float) -> None:
        if not self._path or self._path[-1].closed:
            self._path.append(SubPath())
        self._path[-1].points.append(self.ctm.apply(x, y))

    def close(self) -> None:
        if self._path:
            self._path[-1].closed = True

    # Painting -------------------------------------------------------------
    def _flush(self, fill: Optional[RGBA], stroke: Optional[RGBA]) -> None:
        path, self._path = self._path, []
        path = [sub for sub in path if len(sub.points) > 1]
        if not path:
            return
        if fill is not None and fill.is_transparent:
            fill = None
        if stroke is not None and (stroke.is_transparent or self.stroke_width <= 0):
            stroke = None
        if fill is None and stroke is None:
            return
        self._paint(path, fill, stroke, self.stroke_width)

    def stroke(self) -> None:
        self._flush(None, self.stroke_color)

    def fill(self) -> None:
        self._flush(self.fill_color, None)

    def fill_stroke(self) -> None:
        self._flush(self.fill_color, self.stroke_color)

    def draw_text(self, x: float, y: float, font: FontHandle, text: str, align: Align) -> None:
        if not text or font.color.is_transparent:
            return
        px, py = self.ctm.apply(x, y)
        self._text(px, py, self.ctm.angle, font, text, align)

    # Transform stack --------------------------------------------------------
    def push_transform(self) -> None:
        self._stack.append(self.ctm)

    def pop_transform(self) -> None:
        if not self._stack:
            raise ExportError("pop_transform without matching push_transform")
        self.ctm = self._stack.pop()

    def translate(self, dx: float, dy: float) -> None:
        self.ctm = self.ctm @ Affine.translation(dx, dy)

    def rotate(self, degrees: float) -> None:
        self.ctm = self.ctm @ Affine.rotation(degrees)

    # Backend hooks ----------------------------------------------------------
    def _paint(
        self,
        path: List[SubPath],
        fill: Optional[RGBA],
        stroke: Optional[RGBA],
        width: float,
    ) -> None:
        raise NotImplementedError

    def _text(
        self, x: float, y: float, angle: float, font: FontHandle, text: str, align: Align
    ) -> None:
        raise NotImplementedError

    def to_bytes(self) -> bytes:
        raise NotImplementedError
