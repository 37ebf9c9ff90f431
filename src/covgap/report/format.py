"""Compact text rendering of analysis results.

One gap per line, grouped by file in result order, followed by a summary
line. The summary line is always last and carries no trailing newline.

Output format:
    src/lib.rs:7 UNCOVERED
    src/lib.rs:8-9 UNCOVERED
    src/lib.rs:42:3-42:18 REGION hits:0
    src/lib.rs:50:5 BRANCH true:5 false:0
    Lines: 92.3% | Regions: 88.1% | Branches: 75.0% | Functions: 100.0%
"""

from __future__ import annotations

from covgap.analysis.models import (
    AnalysisResult,
    CoverageGap,
    CoverageSummary,
    UncoveredBranch,
    UncoveredLines,
    UncoveredRegion,
)


def format_result(result: AnalysisResult) -> str:
    """Render an analysis result as compact, greppable text."""
    lines = [format_gap(file.filename, gap) for file in result.files for gap in file.gaps]
    lines.append(format_summary(result.summary))
    return "\n".join(lines)


def format_gap(filename: str, gap: CoverageGap) -> str:
    """Render a single gap as one output line (without newline)."""
    if isinstance(gap, UncoveredLines):
        if gap.is_single_line:
            return f"{filename}:{gap.start_line} UNCOVERED"
        return f"{filename}:{gap.start_line}-{gap.end_line} UNCOVERED"
    if isinstance(gap, UncoveredRegion):
        return (
            f"{filename}:{gap.line_start}:{gap.col_start}-{gap.line_end}:{gap.col_end} "
            "REGION hits:0"
        )
    if isinstance(gap, UncoveredBranch):
        return f"{filename}:{gap.line}:{gap.col} BRANCH true:{gap.true_count} false:{gap.false_count}"
    raise TypeError(f"Unknown coverage gap: {gap!r}")


def format_summary(summary: CoverageSummary) -> str:
    """Render the summary line; Branches is omitted without branch data."""
    parts = [
        f"Lines: {format_percent(summary.lines_percent)}",
        f"Regions: {format_percent(summary.regions_percent)}",
    ]
    if summary.branches_percent is not None:
        parts.append(f"Branches: {format_percent(summary.branches_percent)}")
    parts.append(f"Functions: {format_percent(summary.functions_percent)}")
    return " | ".join(parts)


def format_percent(value: float) -> str:
    """Format a percentage with exactly one decimal place."""
    return f"{value:.1f}%"
