"""PNG output through Pillow."""

from __future__ import annotations

import math
from io import BytesIO
from typing import Dict, List, Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

from ..colors import RGBA
from ..constants import DEFAULT_DPI, MM_PER_INCH
from ..drawing import Align, SubPath, TransformSurface
from ..fonts import FontHandle, pillow_face

__all__ = ["PngSurface"]

_ANCHORS = {"left": "ls", "center": "ms", "right": "rs"}


class PngSurface(TransformSurface):
    """Rasterise drawing commands onto an RGBA image at ``dpi``."""

    def __init__(self, width: float, height: float, dpi: float = DEFAULT_DPI) -> None:
        super().__init__(width, height)
        self.dpi = dpi
        self.scale = dpi / MM_PER_INCH
        size = (max(1, math.ceil(width * self.scale)), max(1, math.ceil(height * self.scale)))
        self.image = Image.new("RGBA", size, (0, 0, 0, 0))
        self.draw = ImageDraw.Draw(self.image, "RGBA")
        self._faces: Dict[Tuple[Optional[str], int], ImageFont.ImageFont] = {}

    def _px(self, x: float, y: float) -> Tuple[float, float]:
        return (x * self.scale, (self.height - y) * self.scale)

    def _face(self, font: FontHandle) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
        pixels = max(1, int(round(font.size_mm * self.scale)))
        key = (font.source, pixels)
        if key not in self._faces:
            self._faces[key] = pillow_face(font.source, pixels)
        return self._faces[key]

    def _paint(
        self,
        path: List[SubPath],
        fill: Optional[RGBA],
        stroke: Optional[RGBA],
        width: float,
    ) -> None:
        line_width = max(1, int(round(width * self.scale)))
        for sub in path:
            points = [self._px(x, y) for x, y in sub.points]
            if fill is not None and len(points) > 2:
                self.draw.polygon(points, fill=fill.to_tuple())
            if stroke is not None:
                if sub.closed:
                    points = points + points[:1]
                self.draw.line(points, fill=stroke.to_tuple(), width=line_width, joint="curve")

    def _text(
        self, x: float, y: float, angle: float, font: FontHandle, text: str, align: Align
    ) -> None:
        face = self._face(font)
        anchor = _ANCHORS[align]
        px, py = self._px(x, y)
        if abs(angle) < 1e-9:
            self.draw.text((px, py), text, fill=font.color.to_tuple(), font=face, anchor=anchor)
            return

        # Draw on a separate layer, rotate it, then paste it so the anchor
        # point lands on (px, py).
        left, top, right, bottom = self.draw.textbbox((0, 0), text, font=face, anchor=anchor)
        size = (max(1, math.ceil(right - left)), max(1, math.ceil(bottom - top)))
        layer = Image.new("RGBA", size, (0, 0, 0, 0))
        ImageDraw.Draw(layer).text(
            (-left, -top), text, fill=font.color.to_tuple(), font=face, anchor=anchor
        )
        ax = -left - layer.width / 2
        ay = -top - layer.height / 2
        rotated = layer.rotate(angle, resample=Image.Resampling.BICUBIC, expand=True)
        theta = math.radians(angle)
        rx = ax * math.cos(theta) + ay * math.sin(theta) + rotated.width / 2
        ry = -ax * math.sin(theta) + ay * math.cos(theta) + rotated.height / 2
        self.image.paste(rotated, (int(round(px - rx)), int(round(py - ry))), rotated)

    def to_image(self) -> Image.Image:
        return self.image

    def to_bytes(self) -> bytes:
        buffer = BytesIO()
        self.image.save(buffer, format="PNG", dpi=(self.dpi, self.dpi))
        return buffer.getvalue()
