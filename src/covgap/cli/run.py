"""covgap run command - run the coverage tool and report its gaps."""

import click

from covgap.cli.utils import emit_report, resolve_relative
from covgap.config.models import CovgapConfig
from covgap.core.errors import CommandError
from covgap.runner import run_coverage_command


@click.command(context_settings={"ignore_unknown_options": True, "allow_extra_args": True})
@click.option(
    "--relative/--no-relative",
    default=None,
    help="Show file paths relative to the current directory",
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def run_command(ctx: click.Context, relative: bool | None, args: tuple[str, ...]) -> None:
    """Run `cargo llvm-cov --json [ARGS]...` and print compact coverage gaps.

    ARGS are forwarded to the coverage command; use `--` before options
    that covgap itself would otherwise consume.
    """
    config: CovgapConfig = ctx.obj["config"]
    try:
        json_text = run_coverage_command(args, command=config.run.command)
    except CommandError as e:
        raise click.ClickException(e.message) from e
    emit_report(json_text, relative=resolve_relative(ctx, relative))
