"""Entry point for ``python -m covgap``."""

from covgap.cli.main import cli

if __name__ == "__main__":
    cli()
