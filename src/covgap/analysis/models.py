"""Gap analysis result model.

File-centric: agents reason about files and line numbers, so every gap is
reported against the filename it was found in.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class UncoveredLines:
    """One or more consecutive fully-uncovered lines (1-based, inclusive)."""

    start_line: int
    end_line: int

    @property
    def is_single_line(self) -> bool:
        return self.start_line == self.end_line


@dataclass(frozen=True, slots=True)
class UncoveredRegion:
    """A zero-hit region starting on an otherwise covered line."""

    line_start: int
    col_start: int
    line_end: int
    col_end: int


@dataclass(frozen=True, slots=True)
class UncoveredBranch:
    """A branch where at least one direction was never taken."""

    line: int
    col: int
    true_count: int
    false_count: int


CoverageGap: TypeAlias = UncoveredLines | UncoveredRegion | UncoveredBranch


@dataclass(frozen=True, slots=True)
class FileGaps:
    """Gaps for one file, in discovery order: lines, regions, branches."""

    filename: str
    gaps: tuple[CoverageGap, ...]


@dataclass(frozen=True, slots=True)
class CoverageSummary:
    """Overall coverage percentages (0.0 to 100.0).

    branches_percent is None when the export carries no branch data.
    """

    lines_percent: float
    regions_percent: float
    functions_percent: float
    branches_percent: float | None = None


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """Complete analysis: files with at least one gap, plus the summary."""

    files: tuple[FileGaps, ...]
    summary: CoverageSummary

    @property
    def gap_count(self) -> int:
        return sum(len(f.gaps) for f in self.files)
