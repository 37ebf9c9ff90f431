"""CLI utilities."""

from pathlib import Path

import click

from covgap import analyze_and_format
from covgap.config.models import CovgapConfig
from covgap.core.errors import CovgapError


def resolve_relative(ctx: click.Context, relative: bool | None) -> bool:
    """Command-line flag wins; otherwise use output.relative_paths from config."""
    if relative is not None:
        return relative
    config: CovgapConfig = ctx.obj["config"]
    return config.output.relative_paths


def emit_report(json_text: str, *, relative: bool) -> None:
    """Analyze export JSON and write the compact report to stdout.

    Raises:
        click.ClickException: If decoding or analysis fails.
    """
    try:
        output = analyze_and_format(json_text, relative_to=Path.cwd() if relative else None)
    except CovgapError as e:
        raise click.ClickException(e.message) from e
    # The summary line is not newline-terminated
    click.echo(output, nl=False)
