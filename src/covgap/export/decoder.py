"""Decoder for ``llvm.coverage.json.export`` JSON text.

Objects decode field by field with absent-tolerant defaults for the optional
keys (function list, segment list, branch list, summary counters). Segments,
branches and regions are positional arrays: their arity is validated before
any field is extracted, so a short or long array is reported as such instead
of being coerced.

Any failure raises DecodeError carrying the JSON location of the offending
value, e.g. ``data[0].files[2].segments[5]``. Nothing partial is returned.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any, TypeVar

from covgap.core.errors import DecodeError
from covgap.core.logging import get_logger
from covgap.export.models import (
    EXPORT_TYPE,
    SUPPORTED_VERSIONS,
    Branch,
    CoverageCounts,
    CoverageExport,
    ExportData,
    FileData,
    FunctionData,
    Region,
    Segment,
    Summary,
)

log = get_logger(__name__)

T = TypeVar("T")

_SEGMENT_LAYOUT = (
    ("line", "uint"),
    ("col", "uint"),
    ("count", "uint"),
    ("has_count", "bool"),
    ("is_region_entry", "bool"),
    ("is_gap_region", "bool"),
)

_BRANCH_LAYOUT = (
    ("line_start", "uint"),
    ("col_start", "uint"),
    ("line_end", "uint"),
    ("col_end", "uint"),
    ("true_count", "uint"),
    ("false_count", "uint"),
    ("file_id", "uint"),
    ("expanded_file_id", "uint"),
    ("kind", "uint"),
)

_REGION_LAYOUT = (
    ("line_start", "uint"),
    ("col_start", "uint"),
    ("line_end", "uint"),
    ("col_end", "uint"),
    ("execution_count", "uint"),
    ("file_id", "uint"),
    ("expanded_file_id", "uint"),
    ("kind", "uint"),
)

_SUMMARY_COUNTERS = ("branches", "functions", "instantiations", "lines", "regions")

_UINT_MAX = 2**64 - 1


def decode_export(text: str) -> CoverageExport:
    """Decode JSON text into a CoverageExport.

    Args:
        text: The export document, as produced by ``llvm-cov export`` or
              ``cargo llvm-cov --json``.

    Returns:
        The decoded export. An empty ``data`` list is accepted here; it is
        only fatal to analysis.

    Raises:
        DecodeError: On malformed JSON, missing required keys, wrong value
                     types, or positional arrays of the wrong arity.
    """
    try:
        raw = json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise DecodeError.invalid_json(str(e)) from e

    root = _expect_object(raw, "$")
    export = CoverageExport(
        data=_decode_list(_require(root, "data", "$"), "data", _decode_data),
        export_type=_expect_str(_require(root, "type", "$"), "type"),
        version=_expect_str(_require(root, "version", "$"), "version"),
    )

    if export.export_type != EXPORT_TYPE:
        log.warning("export.unexpected_type", type=export.export_type)
    if export.version not in SUPPORTED_VERSIONS:
        log.warning("export.unsupported_version", version=export.version)

    log.debug(
        "export.decoded",
        version=export.version,
        entries=len(export.data),
        files=sum(len(entry.files) for entry in export.data),
    )
    return export


# =============================================================================
# Objects
# =============================================================================


def _decode_data(value: Any, location: str) -> ExportData:
    obj = _expect_object(value, location)
    return ExportData(
        files=_decode_list(_require(obj, "files", location), f"{location}.files", _decode_file),
        totals=_decode_summary(_require(obj, "totals", location), f"{location}.totals"),
        functions=_decode_optional_list(obj, "functions", location, _decode_function),
    )


def _decode_file(value: Any, location: str) -> FileData:
    obj = _expect_object(value, location)
    return FileData(
        filename=_expect_str(_require(obj, "filename", location), f"{location}.filename"),
        summary=_decode_summary(_require(obj, "summary", location), f"{location}.summary"),
        segments=_decode_optional_list(obj, "segments", location, decode_segment),
        branches=_decode_optional_list(obj, "branches", location, decode_branch),
    )


def _decode_function(value: Any, location: str) -> FunctionData:
    obj = _expect_object(value, location)
    return FunctionData(
        name=_expect_str(_require(obj, "name", location), f"{location}.name"),
        count=_expect_uint(_require(obj, "count", location), f"{location}.count"),
        filenames=_decode_list(
            _require(obj, "filenames", location), f"{location}.filenames", _expect_str
        ),
        regions=_decode_list(
            _require(obj, "regions", location), f"{location}.regions", decode_region
        ),
        branches=_decode_optional_list(obj, "branches", location, decode_branch),
    )


def _decode_summary(value: Any, location: str) -> Summary:
    obj = _expect_object(value, location)
    counters: dict[str, CoverageCounts | None] = {}
    for name in _SUMMARY_COUNTERS:
        counter = obj.get(name)
        counters[name] = (
            None if counter is None else _decode_counts(counter, f"{location}.{name}")
        )
    return Summary(**counters)


def _decode_counts(value: Any, location: str) -> CoverageCounts:
    obj = _expect_object(value, location)
    return CoverageCounts(
        count=_expect_uint(_require(obj, "count", location), f"{location}.count"),
        covered=_expect_uint(_require(obj, "covered", location), f"{location}.covered"),
        percent=_expect_number(_require(obj, "percent", location), f"{location}.percent"),
    )


# =============================================================================
# Positional arrays
# =============================================================================


def decode_segment(value: Any, location: str = "segment") -> Segment:
    """Decode a 6-element segment array."""
    return Segment(**_decode_positional(value, location, "segment", _SEGMENT_LAYOUT))


def decode_branch(value: Any, location: str = "branch") -> Branch:
    """Decode a 9-element branch array."""
    return Branch(**_decode_positional(value, location, "branch", _BRANCH_LAYOUT))


def decode_region(value: Any, location: str = "region") -> Region:
    """Decode an 8-element region array."""
    return Region(**_decode_positional(value, location, "region", _REGION_LAYOUT))


def _decode_positional(
    value: Any,
    location: str,
    kind: str,
    layout: tuple[tuple[str, str], ...],
) -> dict[str, Any]:
    """Check arity first, then element types, and return named fields."""
    if not isinstance(value, list):
        raise DecodeError.wrong_type(location, f"{kind} array", value)
    if len(value) != len(layout):
        raise DecodeError.wrong_arity(location, kind, len(layout), len(value))

    fields: dict[str, Any] = {}
    for index, (name, element_type) in enumerate(layout):
        check = _expect_uint if element_type == "uint" else _expect_bool
        fields[name] = check(value[index], f"{location}[{index}]")
    return fields


# =============================================================================
# Primitive checks
# =============================================================================


def _reject_constant(token: str) -> Any:
    # NaN, Infinity and -Infinity are not JSON
    raise DecodeError.invalid_json(f"invalid JSON token {token}")


def _require(obj: dict[str, Any], key: str, location: str) -> Any:
    if key not in obj:
        raise DecodeError.missing_field(location, key)
    return obj[key]


def _decode_list(value: Any, location: str, decode: Callable[[Any, str], T]) -> tuple[T, ...]:
    if not isinstance(value, list):
        raise DecodeError.wrong_type(location, "array", value)
    return tuple(decode(item, f"{location}[{index}]") for index, item in enumerate(value))


def _decode_optional_list(
    obj: dict[str, Any],
    key: str,
    location: str,
    decode: Callable[[Any, str], T],
) -> tuple[T, ...]:
    if key not in obj:
        return ()
    return _decode_list(obj[key], f"{location}.{key}", decode)


def _expect_object(value: Any, location: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise DecodeError.wrong_type(location, "object", value)
    return value


def _expect_str(value: Any, location: str) -> str:
    if not isinstance(value, str):
        raise DecodeError.wrong_type(location, "string", value)
    return value


def _expect_uint(value: Any, location: str) -> int:
    # bool is an int subclass; JSON true/false is never a count
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= _UINT_MAX:
        raise DecodeError.wrong_type(location, "unsigned integer", value)
    return value


def _expect_bool(value: Any, location: str) -> bool:
    if not isinstance(value, bool):
        raise DecodeError.wrong_type(location, "boolean", value)
    return value


def _expect_number(value: Any, location: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DecodeError.wrong_type(location, "number", value)
    return float(value)
