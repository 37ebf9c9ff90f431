"""Filename relativization for analysis results."""

from __future__ import annotations

import contextlib
from dataclasses import replace
from pathlib import Path

from covgap.analysis.models import AnalysisResult, FileGaps


def relativize_path(filename: str, base: Path) -> str:
    """Return filename relative to base when it is an absolute path under base.

    Relative filenames and absolute filenames outside base are returned as-is.
    """
    path = Path(filename)
    if not path.is_absolute():
        return filename
    with contextlib.suppress(ValueError):
        return path.relative_to(base).as_posix()
    return filename


def relativize(result: AnalysisResult, base: Path) -> AnalysisResult:
    """Return a copy of result with filenames made relative to base."""
    files = tuple(
        FileGaps(filename=relativize_path(f.filename, base), gaps=f.gaps) for f in result.files
    )
    return replace(result, files=files)
