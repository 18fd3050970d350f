"""Command line interface: render a chart definition to SVG or PNG."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence

import click
import typer
from typer.main import get_command

from .boot import configure_logging
from .config import load_chart
from .constants import DEFAULT_DPI
from .errors import SpiderChartError
from .export import format_for_path, save_chart_image
from .fonts import FixedMetricsFontOracle, FontOracle, PillowFontOracle

LOG = logging.getLogger(__name__)

__all__ = ["app", "console_main", "main"]

app = typer.Typer(
    help="Render spider (radar) charts from JSON or YAML definitions.",
    add_completion=False,
)


@app.command()
def render(
    config: Path = typer.Option(
        ..., "--config", "-c", help="Chart definition file (.json, .yaml or .yml)."
    ),
    output: Path = typer.Option(
        ..., "--output", "-o", help="Destination image; the extension selects .svg or .png."
    ),
    dpi: float = typer.Option(DEFAULT_DPI, "--dpi", min=1.0, help="Resolution for PNG output."),
    fixed_metrics: bool = typer.Option(
        False,
        "--fixed-metrics",
        help="Measure text with fixed advances instead of loading system fonts.",
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Logging level (overrides SPIDERCHART_LOG_LEVEL)."
    ),
) -> int:
    """Render CONFIG into OUTPUT."""

    configure_logging(level=log_level)
    oracle: FontOracle = FixedMetricsFontOracle() if fixed_metrics else PillowFontOracle()
    try:
        format_for_path(output)
        chart = load_chart(config)
        save_chart_image(chart, output, oracle=oracle, dpi=dpi)
    except SpiderChartError as exc:
        LOG.debug("render failed", exc_info=True)
        typer.echo(f"error: {exc}", err=True)
        return 1
    typer.echo(f"wrote {output}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return its exit status instead of exiting."""

    command = get_command(app)
    args = list(argv) if argv is not None else None
    try:
        result = command.main(args=args, prog_name="spiderchart", standalone_mode=False)
    except click.exceptions.Exit as exc:
        return int(exc.exit_code or 0)
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.exceptions.Abort:
        typer.echo("aborted", err=True)
        return 1
    return int(result or 0)


def console_main() -> None:
    """Invoke :func:`main` and terminate with its exit code."""

    raise SystemExit(main())
