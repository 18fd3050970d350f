"""Exception hierarchy for chart validation, configuration and export."""

from __future__ import annotations

__all__ = [
    "ConfigError",
    "ExportError",
    "FontLoadError",
    "SpiderChartError",
    "ValidationError",
]


class SpiderChartError(RuntimeError):
    """Base class for every error raised by :mod:`spiderchart`."""


class ValidationError(SpiderChartError, ValueError):
    """Raised when a chart definition violates a structural rule.

    ``field`` names the offending part of the definition using the dotted
    configuration path (``axes``, ``series.data``, ``options.width`` ...).
    """

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        self.message = message
        super().__init__(f"validation error in {field}: {message}")


class FontLoadError(SpiderChartError):
    """Raised when a required font face cannot be resolved."""

    def __init__(self, role: str, reason: str) -> None:
        self.role = role
        self.reason = reason
        super().__init__(f"failed to load {role} font: {reason}")


class ConfigError(SpiderChartError):
    """Raised when a chart configuration file cannot be read or parsed."""

    def __init__(self, message: str, *, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class ExportError(SpiderChartError):
    """Raised when a rendered chart cannot be serialised or written."""
