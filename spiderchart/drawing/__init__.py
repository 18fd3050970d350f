"""Drawing surface protocol, command recording and the shared transform base."""

from __future__ import annotations

from .commands import Align, CommandRecorder, DrawCommand, DrawingSurface, replay
from .transform import Affine, SubPath, TransformSurface

__all__ = [
    "Affine",
    "Align",
    "CommandRecorder",
    "DrawCommand",
    "DrawingSurface",
    "SubPath",
    "TransformSurface",
    "replay",
]
