"""covgap - compact coverage gaps from LLVM coverage exports.

Turns ``llvm.coverage.json.export`` data (e.g. ``cargo llvm-cov --json``)
into a short report of exactly which lines, regions and branches lack
coverage.

Usage:
    from covgap import analyze_and_format

    print(analyze_and_format(json_text))
"""

from __future__ import annotations

from pathlib import Path

from covgap.analysis import AnalysisResult, analyze, relativize
from covgap.export import decode_export
from covgap.report import format_result

__version__ = "0.1.0"

__all__ = ["analyze_json", "analyze_and_format", "__version__"]


def analyze_json(text: str) -> AnalysisResult:
    """Decode coverage JSON and analyze it for gaps.

    Raises:
        DecodeError: If the JSON is malformed or does not match the schema.
        AnalysisError: If the export has no data entries.
    """
    return analyze(decode_export(text))


def analyze_and_format(text: str, *, relative_to: Path | None = None) -> str:
    """Decode, analyze and format coverage JSON in one step.

    Args:
        text: Export JSON text.
        relative_to: If given, absolute filenames under this directory are
                     rewritten relative to it.
    """
    result = analyze_json(text)
    if relative_to is not None:
        result = relativize(result, relative_to)
    return format_result(result)
