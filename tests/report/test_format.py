"""Tests for compact report formatting."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from covgap import analyze_and_format
from covgap.analysis import (
    AnalysisResult,
    CoverageSummary,
    FileGaps,
    UncoveredBranch,
    UncoveredLines,
    UncoveredRegion,
)
from covgap.core.errors import AnalysisError, DecodeError
from covgap.report import format_gap, format_percent, format_result, format_summary

SUMMARY = CoverageSummary(lines_percent=92.3, regions_percent=88.1, functions_percent=100.0)


class TestFormatGap:
    """One line per gap."""

    def test_single_uncovered_line(self) -> None:
        gap = UncoveredLines(start_line=7, end_line=7)
        assert format_gap("src/lib.rs", gap) == "src/lib.rs:7 UNCOVERED"

    def test_uncovered_range(self) -> None:
        gap = UncoveredLines(start_line=8, end_line=10)
        assert format_gap("src/lib.rs", gap) == "src/lib.rs:8-10 UNCOVERED"

    def test_region(self) -> None:
        gap = UncoveredRegion(line_start=42, col_start=3, line_end=42, col_end=18)
        assert format_gap("src/lib.rs", gap) == "src/lib.rs:42:3-42:18 REGION hits:0"

    def test_branch(self) -> None:
        gap = UncoveredBranch(line=50, col=5, true_count=5, false_count=0)
        assert format_gap("src/lib.rs", gap) == "src/lib.rs:50:5 BRANCH true:5 false:0"


class TestFormatSummary:
    """The trailing summary line."""

    def test_without_branches(self) -> None:
        assert format_summary(SUMMARY) == "Lines: 92.3% | Regions: 88.1% | Functions: 100.0%"

    def test_with_branches(self) -> None:
        summary = CoverageSummary(
            lines_percent=92.3,
            regions_percent=88.1,
            functions_percent=100.0,
            branches_percent=75.0,
        )
        assert (
            format_summary(summary)
            == "Lines: 92.3% | Regions: 88.1% | Branches: 75.0% | Functions: 100.0%"
        )

    def test_zero_branch_percent_still_shown(self) -> None:
        summary = CoverageSummary(
            lines_percent=0.0, regions_percent=0.0, functions_percent=0.0, branches_percent=0.0
        )
        assert "Branches: 0.0%" in format_summary(summary)

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(100.0, "100.0%"), (0.0, "0.0%"), (66.66666, "66.7%"), (50, "50.0%")],
    )
    def test_format_percent(self, value: float, expected: str) -> None:
        assert format_percent(value) == expected


class TestFormatResult:
    """Whole-report rendering."""

    def test_only_summary_when_no_gaps(self) -> None:
        result = AnalysisResult(files=(), summary=SUMMARY)
        assert format_result(result) == "Lines: 92.3% | Regions: 88.1% | Functions: 100.0%"

    def test_keeps_file_and_gap_order(self) -> None:
        result = AnalysisResult(
            files=(
                FileGaps(
                    filename="src/z.rs",
                    gaps=(
                        UncoveredLines(start_line=9, end_line=9),
                        UncoveredBranch(line=2, col=1, true_count=0, false_count=1),
                    ),
                ),
                FileGaps(filename="src/a.rs", gaps=(UncoveredLines(start_line=1, end_line=3),)),
            ),
            summary=SUMMARY,
        )
        assert format_result(result) == (
            "src/z.rs:9 UNCOVERED\n"
            "src/z.rs:2:1 BRANCH true:0 false:1\n"
            "src/a.rs:1-3 UNCOVERED\n"
            "Lines: 92.3% | Regions: 88.1% | Functions: 100.0%"
        )

    def test_no_trailing_newline(self) -> None:
        result = AnalysisResult(
            files=(FileGaps(filename="a.rs", gaps=(UncoveredLines(start_line=1, end_line=1),)),),
            summary=SUMMARY,
        )
        assert not format_result(result).endswith("\n")


class TestEndToEnd:
    """JSON in, compact text out."""

    def test_show_missing_lines(self, load_fixture: Callable[[str], str]) -> None:
        assert analyze_and_format(load_fixture("show-missing-lines.json")) == (
            "src/lib.rs:7-9 UNCOVERED\n"
            "src/lib.rs:11 UNCOVERED\n"
            "src/lib.rs:3:5-3:20 REGION hits:0\n"
            "Lines: 70.0% | Regions: 60.0% | Functions: 50.0%"
        )

    def test_with_branches(self, load_fixture: Callable[[str], str]) -> None:
        assert analyze_and_format(load_fixture("with-branches.json")) == (
            "src/a.rs:2:8 BRANCH true:5 false:0\n"
            "src/b.rs:10:4 BRANCH true:0 false:0\n"
            "Lines: 100.0% | Regions: 100.0% | Branches: 75.0% | Functions: 100.0%"
        )

    def test_all_covered(self, load_fixture: Callable[[str], str]) -> None:
        assert (
            analyze_and_format(load_fixture("all-covered.json"))
            == "Lines: 100.0% | Regions: 100.0% | Functions: 100.0%"
        )

    def test_summary_only(self, load_fixture: Callable[[str], str]) -> None:
        assert (
            analyze_and_format(load_fixture("summary-only.json"))
            == "Lines: 42.5% | Regions: 40.0% | Functions: 50.0%"
        )

    def test_relative_to(self, load_fixture: Callable[[str], str]) -> None:
        text = load_fixture("show-missing-lines.json").replace(
            '"src/lib.rs"', '"/work/project/src/lib.rs"', 1
        )
        output = analyze_and_format(text, relative_to=Path("/work/project"))
        assert output.startswith("src/lib.rs:7-9 UNCOVERED\n")

    def test_empty_data(self) -> None:
        with pytest.raises(AnalysisError) as exc_info:
            analyze_and_format('{"data":[],"type":"llvm.coverage.json.export","version":"2.0.1"}')
        assert exc_info.value.message == "coverage data is empty (no data entries)"

    def test_short_segment_aborts(self) -> None:
        doc = (
            '{"data":[{"files":[{"filename":"a.rs","segments":[[1,1,0]],"summary":{}}],'
            '"totals":{}}],"type":"llvm.coverage.json.export","version":"2.0.1"}'
        )
        with pytest.raises(DecodeError):
            analyze_and_format(doc)
