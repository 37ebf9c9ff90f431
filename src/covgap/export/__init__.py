"""Typed decoding of ``llvm.coverage.json.export`` documents.

Usage:
    from covgap.export import decode_export

    export = decode_export(json_text)
    for file in export.data[0].files:
        print(file.filename, len(file.segments))
"""

from covgap.export.decoder import decode_branch, decode_export, decode_region, decode_segment
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

__all__ = [
    # Decoder
    "decode_export",
    "decode_segment",
    "decode_branch",
    "decode_region",
    # Models
    "EXPORT_TYPE",
    "SUPPORTED_VERSIONS",
    "Branch",
    "CoverageCounts",
    "CoverageExport",
    "ExportData",
    "FileData",
    "FunctionData",
    "Region",
    "Segment",
    "Summary",
]
