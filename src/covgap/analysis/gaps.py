"""Coverage gap analysis.

Walks each file's segment sequence to find fully-uncovered lines and
uncovered sub-line regions, collects one-sided branches, and collapses
consecutive uncovered lines into ranges.

Segment semantics: the count carried by a segment applies from its own
position through the position of the next segment in the file. The last
segment has nothing to look ahead to, so its span closes on itself.

Per-line state is a running maximum because several segments can touch the
same line; a line is fully uncovered only when every span touching it had a
zero count.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from covgap.analysis.models import (
    AnalysisResult,
    CoverageGap,
    CoverageSummary,
    FileGaps,
    UncoveredBranch,
    UncoveredLines,
    UncoveredRegion,
)
from covgap.core.errors import AnalysisError
from covgap.core.logging import get_logger
from covgap.export.models import (
    Branch,
    CoverageCounts,
    CoverageExport,
    FileData,
    Segment,
    Summary,
)

log = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class SegmentSpan:
    """A counted segment together with where its count stops applying."""

    segment: Segment
    end_line: int
    end_col: int


def analyze(export: CoverageExport) -> AnalysisResult:
    """Analyze a coverage export and return all coverage gaps.

    Only the first data entry is analyzed; LLVM exports carry exactly one.

    Raises:
        AnalysisError: If the export has no data entries.
    """
    if not export.data:
        raise AnalysisError.empty_data()
    data = export.data[0]

    files: list[FileGaps] = []
    for file in data.files:
        gaps = analyze_file(file)
        if gaps:
            files.append(FileGaps(filename=file.filename, gaps=gaps))
            log.debug("analysis.file_gaps", filename=file.filename, gaps=len(gaps))

    result = AnalysisResult(files=tuple(files), summary=summarize(data.totals))
    log.debug(
        "analysis.complete",
        files=len(data.files),
        files_with_gaps=len(result.files),
        gaps=result.gap_count,
    )
    return result


def summarize(totals: Summary) -> CoverageSummary:
    """Read overall percentages from an entry's totals.

    A zero-total branch counter means no branch data, not 0% coverage.
    """
    branches = totals.branches
    return CoverageSummary(
        lines_percent=_percent(totals.lines),
        regions_percent=_percent(totals.regions),
        functions_percent=_percent(totals.functions),
        branches_percent=branches.percent if branches is not None and branches.count > 0 else None,
    )


def _percent(counts: CoverageCounts | None) -> float:
    return counts.percent if counts is not None else 0.0


def analyze_file(file: FileData) -> tuple[CoverageGap, ...]:
    """Return a file's gaps: line ranges, then regions, then branches."""
    gaps: list[CoverageGap] = []

    if file.segments:
        line_gaps, region_gaps = analyze_segments(file.segments)
        gaps.extend(line_gaps)
        gaps.extend(region_gaps)

    gaps.extend(branch_gaps(file.branches))
    return tuple(gaps)


def branch_gaps(branches: Iterable[Branch]) -> list[UncoveredBranch]:
    """One-sided branches, including branches never reached at all."""
    return [
        UncoveredBranch(
            line=branch.line_start,
            col=branch.col_start,
            true_count=branch.true_count,
            false_count=branch.false_count,
        )
        for branch in branches
        if branch.true_count == 0 or branch.false_count == 0
    ]


def segment_spans(segments: Sequence[Segment]) -> Iterator[SegmentSpan]:
    """Pair every counted segment with the end of its span.

    The end is the position of the next segment in sequence, whether or not
    that segment has a count. The last segment ends at its own position.
    """
    for index, segment in enumerate(segments):
        if not segment.has_count:
            continue
        if index + 1 < len(segments):
            following = segments[index + 1]
            end_line, end_col = following.line, following.col
        else:
            end_line, end_col = segment.line, segment.col
        yield SegmentSpan(segment=segment, end_line=end_line, end_col=end_col)


def analyze_segments(
    segments: Sequence[Segment],
) -> tuple[list[UncoveredLines], list[UncoveredRegion]]:
    """Find fully uncovered lines and uncovered sub-line regions.

    Returns:
        (line_range_gaps, region_gaps)
    """
    line_max_count: dict[int, int] = {}  # line -> max count over touching spans
    lines_with_coverage: set[int] = set()  # lines touched by a nonzero count
    zero_regions: list[SegmentSpan] = []

    for span in segment_spans(segments):
        segment = span.segment
        for line in range(segment.line, span.end_line + 1):
            line_max_count[line] = max(line_max_count.get(line, 0), segment.count)
            if segment.count > 0:
                lines_with_coverage.add(line)

        if segment.is_region_entry and segment.count == 0:
            zero_regions.append(span)

    uncovered_lines = sorted(line for line, count in line_max_count.items() if count == 0)
    uncovered_set = set(uncovered_lines)

    # A zero region on a fully uncovered line is already reported as UNCOVERED.
    # The touched check should always hold once that is excluded.
    region_gaps = [
        UncoveredRegion(
            line_start=span.segment.line,
            col_start=span.segment.col,
            line_end=span.end_line,
            col_end=span.end_col,
        )
        for span in zero_regions
        if span.segment.line not in uncovered_set and span.segment.line in lines_with_coverage
    ]

    return collapse_lines(uncovered_lines), region_gaps


def collapse_lines(lines: Iterable[int]) -> list[UncoveredLines]:
    """Collapse line numbers into ascending consecutive ranges.

    Input order does not matter and duplicates are ignored.

    Examples:
        [3, 4, 5, 10, 11, 15] -> 3-5, 10-11, 15
        [] -> []
    """
    ranges: list[UncoveredLines] = []
    start: int | None = None
    end = 0

    for line in sorted(set(lines)):
        if start is None:
            start = end = line
        elif line == end + 1:
            end = line
        else:
            ranges.append(UncoveredLines(start_line=start, end_line=end))
            start = end = line

    if start is not None:
        ranges.append(UncoveredLines(start_line=start, end_line=end))
    return ranges
