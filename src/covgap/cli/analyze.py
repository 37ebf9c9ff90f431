"""covgap analyze command - report gaps from an existing coverage JSON file."""

from pathlib import Path

import click

from covgap.cli.utils import emit_report, resolve_relative
from covgap.core.logging import get_logger

log = get_logger(__name__)


def read_input(path: Path | None) -> str:
    """Read export JSON from path, or from stdin when path is None or '-'."""
    if path is None or str(path) == "-":
        log.debug("input.stdin")
        try:
            return click.get_text_stream("stdin").read()
        except (OSError, UnicodeDecodeError) as e:
            raise click.ClickException(f"Failed to read stdin: {e}") from e
    log.debug("input.file", path=str(path))
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise click.ClickException(f"Failed to read {path}: {e}") from e


@click.command()
@click.argument(
    "path",
    required=False,
    type=click.Path(exists=True, dir_okay=False, allow_dash=True, path_type=Path),
)
@click.option(
    "--relative/--no-relative",
    default=None,
    help="Show file paths relative to the current directory",
)
@click.pass_context
def analyze_command(ctx: click.Context, path: Path | None, relative: bool | None) -> None:
    """Print compact coverage gaps from llvm-cov JSON.

    PATH is a file produced by `cargo llvm-cov --json` or `llvm-cov export`.
    Reads stdin when PATH is omitted or '-'.
    """
    emit_report(read_input(path), relative=resolve_relative(ctx, relative))
