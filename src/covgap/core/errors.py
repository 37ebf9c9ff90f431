"""covgap error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Decode (malformed export JSON)
- 4xxx: Analysis
- 5xxx: Command (external coverage tool)
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Decode (3xxx)
    DECODE_INVALID_JSON = 3001
    DECODE_WRONG_ARITY = 3002
    DECODE_WRONG_TYPE = 3003
    DECODE_MISSING_FIELD = 3004

    # Analysis (4xxx)
    ANALYSIS_EMPTY_DATA = 4001

    # Command (5xxx)
    COMMAND_FAILED = 5001
    COMMAND_NOT_FOUND = 5002
    COMMAND_INVALID_OUTPUT = 5003


@dataclass(frozen=True, slots=True)
class CovgapError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'DECODE_WRONG_ARITY')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(CovgapError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )


class DecodeError(CovgapError):
    """The coverage export could not be decoded.

    Fatal to the whole operation: no partial export is ever produced.
    """

    @classmethod
    def invalid_json(cls, reason: str) -> "DecodeError":
        return cls(
            code=ErrorCode.DECODE_INVALID_JSON,
            message=f"failed to parse coverage JSON: {reason}",
            details={"reason": reason},
        )

    @classmethod
    def wrong_arity(cls, location: str, kind: str, expected: int, actual: int) -> "DecodeError":
        return cls(
            code=ErrorCode.DECODE_WRONG_ARITY,
            message=(
                f"failed to parse coverage JSON: {kind} at {location} "
                f"must have {expected} elements, got {actual}"
            ),
            details={"location": location, "kind": kind, "expected": expected, "actual": actual},
        )

    @classmethod
    def wrong_type(cls, location: str, expected: str, value: Any) -> "DecodeError":
        actual = type(value).__name__
        return cls(
            code=ErrorCode.DECODE_WRONG_TYPE,
            message=(
                f"failed to parse coverage JSON: expected {expected} at {location}, got {actual}"
            ),
            details={"location": location, "expected": expected, "actual": actual},
        )

    @classmethod
    def missing_field(cls, location: str, name: str) -> "DecodeError":
        return cls(
            code=ErrorCode.DECODE_MISSING_FIELD,
            message=f"failed to parse coverage JSON: missing field '{name}' at {location}",
            details={"location": location, "field": name},
        )


class AnalysisError(CovgapError):
    """Gap analysis could not run on a decoded export."""

    @classmethod
    def empty_data(cls) -> "AnalysisError":
        return cls(
            code=ErrorCode.ANALYSIS_EMPTY_DATA,
            message="coverage data is empty (no data entries)",
        )


class CommandError(CovgapError):
    """The external coverage command failed."""

    @classmethod
    def failed(cls, cmdline: str, status: int) -> "CommandError":
        return cls(
            code=ErrorCode.COMMAND_FAILED,
            message=f"command `{cmdline}` exited with status {status}",
            details={"command": cmdline, "status": status},
        )

    @classmethod
    def not_found(cls, cmdline: str, reason: str) -> "CommandError":
        return cls(
            code=ErrorCode.COMMAND_NOT_FOUND,
            message=f"failed to run `{cmdline}`: {reason}",
            details={"command": cmdline, "reason": reason},
        )

    @classmethod
    def invalid_output(cls, cmdline: str, reason: str) -> "CommandError":
        return cls(
            code=ErrorCode.COMMAND_INVALID_OUTPUT,
            message=f"output of `{cmdline}` is not valid UTF-8: {reason}",
            details={"command": cmdline, "reason": reason},
        )
