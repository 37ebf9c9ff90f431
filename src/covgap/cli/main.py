"""covgap CLI - covgap command."""

import click

from covgap import __version__
from covgap.cli.analyze import analyze_command
from covgap.cli.run import run_command
from covgap.config import load_config
from covgap.core.errors import ConfigError
from covgap.core.logging import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="covgap")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """covgap - Compact coverage gaps from LLVM coverage JSON."""
    try:
        config = load_config()
    except ConfigError as e:
        raise click.ClickException(e.message) from e

    logging_config = config.logging
    if verbose:
        logging_config = logging_config.model_copy(update={"level": "DEBUG"})
    configure_logging(config=logging_config)

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config"] = config


cli.add_command(analyze_command, name="analyze")
cli.add_command(run_command, name="run")


if __name__ == "__main__":
    cli()
