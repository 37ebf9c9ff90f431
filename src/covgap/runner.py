"""Invocation of the external coverage command.

The command's stdout is captured as the export JSON. Its stderr is not
captured, so build and test progress from the tool reaches the terminal
unchanged.
"""

from __future__ import annotations

import shlex
import subprocess
from collections.abc import Sequence
from pathlib import Path

from covgap.core.errors import CommandError
from covgap.core.logging import get_logger

log = get_logger(__name__)

DEFAULT_COMMAND: tuple[str, ...] = ("cargo", "llvm-cov")
JSON_FLAG = "--json"


def build_command(args: Sequence[str], command: Sequence[str] = DEFAULT_COMMAND) -> list[str]:
    """Assemble the argv: the command, the JSON flag, then forwarded args."""
    return [*command, JSON_FLAG, *args]


def run_coverage_command(
    args: Sequence[str],
    *,
    command: Sequence[str] = DEFAULT_COMMAND,
    cwd: Path | None = None,
) -> str:
    """Run the coverage command and return its stdout as text.

    Args:
        args: Extra arguments forwarded after ``--json``.
        command: Executable and leading arguments (default ``cargo llvm-cov``).
        cwd: Working directory for the command.

    Raises:
        CommandError: If the command cannot be started, exits non-zero, or
                      writes non-UTF-8 output.
    """
    argv = build_command(args, command)
    cmdline = shlex.join(argv)
    log.info("command.start", command=cmdline)

    try:
        result = subprocess.run(argv, stdout=subprocess.PIPE, cwd=cwd, check=False)
    except OSError as e:
        raise CommandError.not_found(cmdline, str(e)) from e

    log.debug("command.exit", command=cmdline, status=result.returncode)
    if result.returncode != 0:
        raise CommandError.failed(cmdline, result.returncode)

    try:
        return result.stdout.decode("utf-8")
    except UnicodeDecodeError as e:
        raise CommandError.invalid_output(cmdline, str(e)) from e
