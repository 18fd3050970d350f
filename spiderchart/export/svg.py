"""SVG output.

A small deterministic scene graph plus a drawing surface that writes into it.
Chart coordinates are millimetres with y up; the document uses a millimetre
viewBox with y down, so every point is flipped on the way in.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..colors import RGBA
from ..drawing import Align, SubPath, TransformSurface
from ..fonts import FontHandle

__all__ = ["SVG_NS", "SvgDocument", "SvgElement", "SvgSurface"]

SVG_NS = "http://www.w3.org/2000/svg"

_ANCHORS = {"left": "start", "center": "middle", "right": "end"}


def _num(value: float) -> str:
    """Fixed precision number formatting, independent of locale."""

    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def _escape(value: str) -> str:
    return (
        value.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&apos;")
    )


@dataclass
class SvgElement:
    """A minimal SVG node.

    Children keep insertion order and attributes are serialised sorted, so
    the same drawing always produces the same bytes.
    """

    tag: str
    attributes: Dict[str, str] = field(default_factory=dict)
    children: List["SvgElement"] = field(default_factory=list)
    text: Optional[str] = None

    def set(self, **attrs: object) -> "SvgElement":
        for key, value in attrs.items():
            if value is None:
                continue
            name = key.rstrip("_").replace("_", "-")
            self.attributes[name] = _num(value) if isinstance(value, float) else str(value)
        return self

    def add(self, *children: "SvgElement") -> "SvgElement":
        self.children.extend(children)
        return self

    def to_string(self, indent: int = 0, pretty: bool = True) -> str:
        pad = "  " * indent if pretty else ""
        attrs = "".join(
            f' {name}="{_escape(value)}"' for name, value in sorted(self.attributes.items())
        )
        if not self.children and self.text is None:
            return f"{pad}<{self.tag}{attrs}/>"
        if self.text is not None and not self.children:
            return f"{pad}<{self.tag}{attrs}>{_escape(self.text)}</{self.tag}>"
        separator = "\n" if pretty else ""
        parts = [f"{pad}<{self.tag}{attrs}>"]
        parts.extend(child.to_string(indent + 1, pretty=pretty) for child in self.children)
        parts.append(f"{pad}</{self.tag}>")
        return separator.join(parts)


@dataclass
class SvgDocument:
    """Scene container sized in millimetres."""

    width: float
    height: float
    root: SvgElement = field(init=False)

    def __post_init__(self) -> None:
        self.root = SvgElement("svg").set(
            xmlns=SVG_NS,
            width=f"{_num(self.width)}mm",
            height=f"{_num(self.height)}mm",
            viewBox=f"0 0 {_num(self.width)} {_num(self.height)}",
        )

    def add(self, element: SvgElement) -> SvgElement:
        self.root.add(element)
        return element

    def to_string(self, pretty: bool = True) -> str:
        header = '<?xml version="1.0" encoding="UTF-8"?>'
        return header + "\n" + self.root.to_string(indent=0, pretty=pretty) + "\n"

    def to_bytes(self, pretty: bool = True) -> bytes:
        return self.to_string(pretty=pretty).encode("utf-8")


def _paint_attrs(prefix: str, color: Optional[RGBA]) -> Dict[str, object]:
    if color is None:
        return {prefix: "none"}
    attrs: Dict[str, object] = {prefix: color.to_hex()}
    if color.a < 255:
        attrs[f"{prefix}_opacity"] = round(color.opacity, 4)
    return attrs


def _font_family(font: FontHandle) -> str:
    if not font.source:
        return "sans-serif"
    stem = os.path.splitext(os.path.basename(font.source))[0]
    return f"{stem}, sans-serif"


class SvgSurface(TransformSurface):
    """Drawing surface that builds an :class:`SvgDocument`."""

    def __init__(self, width: float, height: float) -> None:
        super().__init__(width, height)
        self.document = SvgDocument(width, height)

    def _y(self, y: float) -> float:
        return self.height - y

    def _paint(
        self,
        path: List[SubPath],
        fill: Optional[RGBA],
        stroke: Optional[RGBA],
        width: float,
    ) -> None:
        commands: List[str] = []
        for sub in path:
            (x0, y0), *rest = sub.points
            commands.append(f"M{_num(x0)} {_num(self._y(y0))}")
            commands.extend(f"L{_num(x)} {_num(self._y(y))}" for x, y in rest)
            if sub.closed:
                commands.append("Z")
        element = SvgElement("path").set(d=" ".join(commands))
        element.set(**_paint_attrs("fill", fill))
        element.set(**_paint_attrs("stroke", stroke))
        if stroke is not None:
            element.set(stroke_width=float(width), stroke_linejoin="round")
        self.document.add(element)

    def _text(
        self, x: float, y: float, angle: float, font: FontHandle, text: str, align: Align
    ) -> None:
        sx, sy = x, self._y(y)
        element = SvgElement("text", text=text).set(
            x=float(sx),
            y=float(sy),
            font_family=_font_family(font),
            font_size=float(font.size_mm),
            text_anchor=_ANCHORS[align],
        )
        element.set(**_paint_attrs("fill", font.color))
        if abs(angle) > 1e-9:
            # SVG rotates clockwise in a y-down space.
            element.set(transform=f"rotate({_num(-angle)} {_num(sx)} {_num(sy)})")
        self.document.add(element)

    def to_bytes(self) -> bytes:
        return self.document.to_bytes()
