"""Coverage gap analysis over decoded LLVM exports.

Usage:
    from covgap.analysis import analyze

    result = analyze(export)
    for file in result.files:
        for gap in file.gaps:
            ...
"""

from covgap.analysis.gaps import (
    SegmentSpan,
    analyze,
    analyze_file,
    analyze_segments,
    branch_gaps,
    collapse_lines,
    segment_spans,
    summarize,
)
from covgap.analysis.models import (
    AnalysisResult,
    CoverageGap,
    CoverageSummary,
    FileGaps,
    UncoveredBranch,
    UncoveredLines,
    UncoveredRegion,
)
from covgap.analysis.paths import relativize, relativize_path

__all__ = [
    # Models
    "AnalysisResult",
    "CoverageGap",
    "CoverageSummary",
    "FileGaps",
    "UncoveredBranch",
    "UncoveredLines",
    "UncoveredRegion",
    # Analysis
    "SegmentSpan",
    "analyze",
    "analyze_file",
    "analyze_segments",
    "branch_gaps",
    "collapse_lines",
    "segment_spans",
    "summarize",
    # Paths
    "relativize",
    "relativize_path",
]
