"""Compact report formatting."""

from covgap.report.format import format_gap, format_percent, format_result, format_summary

__all__ = [
    "format_gap",
    "format_percent",
    "format_result",
    "format_summary",
]
