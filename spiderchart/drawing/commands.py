"""Abstract drawing primitives emitted by the renderer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Literal, Protocol, Tuple

from ..colors import RGBA
from ..fonts import FontHandle

__all__ = ["Align", "CommandRecorder", "DrawCommand", "DrawingSurface", "replay"]

Align = Literal["left", "center", "right"]


class DrawingSurface(Protocol):
    """Target of the renderer.

    Path methods build the current path in the current transform;
    ``stroke``, ``fill`` and ``fill_stroke`` paint it and start a new one.
    Calls must be applied in the order they are made.
    """

    def set_fill_color(self, color: RGBA) -> None: ...

    def set_stroke_color(self, color: RGBA) -> None: ...

    def set_stroke_width(self, width: float) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def close(self) -> None: ...

    def stroke(self) -> None: ...

    def fill(self) -> None: ...

    def fill_stroke(self) -> None: ...

    def draw_text(self, x: float, y: float, font: FontHandle, text: str, align: Align) -> None: ...

    def push_transform(self) -> None: ...

    def translate(self, dx: float, dy: float) -> None: ...

    def rotate(self, degrees: float) -> None: ...

    def pop_transform(self) -> None: ...


@dataclass(frozen=True, slots=True)
class DrawCommand:
    """A recorded surface call: the method name and its positional arguments."""

    op: str
    args: Tuple[Any, ...] = ()

    def apply(self, surface: DrawingSurface) -> None:
        getattr(surface, self.op)(*self.args)


class CommandRecorder:
    """A :class:`DrawingSurface` that keeps every call as a :class:`DrawCommand`."""

    def __init__(self) -> None:
        self.commands: List[DrawCommand] = []

    def _record(self, op: str, *args: Any) -> None:
        self.commands.append(DrawCommand(op, args))

    def set_fill_color(self, color: RGBA) -> None:
        self._record("set_fill_color", color)

    def set_stroke_color(self, color: RGBA) -> None:
        self._record("set_stroke_color", color)

    def set_stroke_width(self, width: float) -> None:
        self._record("set_stroke_width", width)

    def move_to(self, x: float, y: float) -> None:
        self._record("move_to", x, y)

    def line_to(self, x: float, y: float) -> None:
        self._record("line_to", x, y)

    def close(self) -> None:
        self._record("close")

    def stroke(self) -> None:
        self._record("stroke")

    def fill(self) -> None:
        self._record("fill")

    def fill_stroke(self) -> None:
        self._record("fill_stroke")

    def draw_text(self, x: float, y: float, font: FontHandle, text: str, align: Align) -> None:
        self._record("draw_text", x, y, font, text, align)

    def push_transform(self) -> None:
        self._record("push_transform")

    def translate(self, dx: float, dy: float) -> None:
        self._record("translate", dx, dy)

    def rotate(self, degrees: float) -> None:
        self._record("rotate", degrees)

    def pop_transform(self) -> None:
        self._record("pop_transform")

    def ops(self) -> List[str]:
        return [command.op for command in self.commands]


def replay(commands: Iterable[DrawCommand], surface: DrawingSurface) -> None:
    """Apply recorded ``commands`` to ``surface`` in order."""

    for command in commands:
        command.apply(surface)
