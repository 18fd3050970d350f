"""Logging helpers for the spiderchart CLI and embedding applications."""

from __future__ import annotations

import logging
import os
from typing import Any

__all__ = ["configure_logging"]

_DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"
_ENV_VARS = ("SPIDERCHART_LOG_LEVEL", "LOG_LEVEL")


def _coerce_level(value: str | int | None, default: int = logging.WARNING) -> int:
    """Return a logging level derived from ``value``.

    Accepts standard level names (case insensitive) or a numeric level.
    Anything else resolves to ``default``.
    """

    if value is None:
        return default

    if isinstance(value, int):
        return value

    candidate = value.strip()
    if not candidate:
        return default

    if candidate.isdigit():
        return int(candidate)

    resolved = logging.getLevelName(candidate.upper())
    if isinstance(resolved, int):
        return resolved

    return default


def _level_from_env() -> str | None:
    for name in _ENV_VARS:
        value = os.environ.get(name)
        if value:
            return value
    return None


def configure_logging(*, level: str | int | None = None, **kwargs: Any) -> int:
    """Configure ``logging`` for spiderchart entry points.

    Parameters
    ----------
    level:
        Optional log level override. When omitted ``SPIDERCHART_LOG_LEVEL``
        and then ``LOG_LEVEL`` are consulted, defaulting to WARNING.
        ``kwargs`` are forwarded to :func:`logging.basicConfig`.

    Returns
    -------
    int
        The effective logging level applied to the root logger.
    """

    effective_level = _coerce_level(level if level is not None else _level_from_env())

    logging.basicConfig(
        level=effective_level,
        format=kwargs.pop("format", _DEFAULT_FORMAT),
        datefmt=kwargs.pop("datefmt", _DEFAULT_DATEFMT),
        force=kwargs.pop("force", True),
        **kwargs,
    )

    return effective_level
