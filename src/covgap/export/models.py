"""Typed model of the ``llvm.coverage.json.export`` format.

Covers versions 2.0.1 and 3.1.0 of the export. Every record is an immutable
value built once by the decoder; sequences are tuples.

Three record kinds are stored in the JSON as fixed-arity positional arrays
rather than objects:

- Segment: [line, col, count, has_count, is_region_entry, is_gap_region]
- Branch:  [line_start, col_start, line_end, col_end, true_count, false_count,
            file_id, expanded_file_id, kind]
- Region:  [line_start, col_start, line_end, col_end, execution_count,
            file_id, expanded_file_id, kind]
"""

from __future__ import annotations

from dataclasses import dataclass

EXPORT_TYPE = "llvm.coverage.json.export"
SUPPORTED_VERSIONS = frozenset({"2.0.1", "3.1.0"})


@dataclass(frozen=True, slots=True)
class Segment:
    """A point where the coverage state changes.

    Segments form a state machine: the count set by one segment applies from
    its position up to the position of the next segment in the file.
    """

    line: int  # 1-based
    col: int  # 1-based
    count: int
    has_count: bool
    is_region_entry: bool
    is_gap_region: bool  # non-code span; kept for forward compatibility


@dataclass(frozen=True, slots=True)
class Branch:
    """A two-outcome decision point with independent execution counts."""

    line_start: int
    col_start: int
    line_end: int
    col_end: int
    true_count: int
    false_count: int
    file_id: int
    expanded_file_id: int
    kind: int


@dataclass(frozen=True, slots=True)
class Region:
    """A function-scoped source span with its execution count."""

    line_start: int
    col_start: int
    line_end: int
    col_end: int
    execution_count: int
    file_id: int
    expanded_file_id: int
    kind: int


@dataclass(frozen=True, slots=True)
class CoverageCounts:
    """Total/covered/percent triple for one coverage metric."""

    count: int
    covered: int
    percent: float


@dataclass(frozen=True, slots=True)
class Summary:
    """Coverage counters for a file or for a whole export.

    A counter is None when the metric was not measured (e.g. branches
    without ``--branch``), which is distinct from a zero counter.
    """

    branches: CoverageCounts | None = None
    functions: CoverageCounts | None = None
    instantiations: CoverageCounts | None = None
    lines: CoverageCounts | None = None
    regions: CoverageCounts | None = None


@dataclass(frozen=True, slots=True)
class FileData:
    """Coverage data for a single source file."""

    filename: str  # as it appears in the export, not resolved
    summary: Summary
    segments: tuple[Segment, ...] = ()
    branches: tuple[Branch, ...] = ()


@dataclass(frozen=True, slots=True)
class FunctionData:
    """Per-function coverage data. Decoded but not used by gap analysis."""

    name: str  # mangled
    count: int
    filenames: tuple[str, ...]
    regions: tuple[Region, ...]
    branches: tuple[Branch, ...] = ()


@dataclass(frozen=True, slots=True)
class ExportData:
    """One coverage data entry: files, functions and aggregate totals."""

    files: tuple[FileData, ...]
    totals: Summary
    functions: tuple[FunctionData, ...] = ()


@dataclass(frozen=True, slots=True)
class CoverageExport:
    """Root of a decoded coverage export."""

    data: tuple[ExportData, ...]
    export_type: str  # JSON key "type"
    version: str
