"""Core module exports."""

from covgap.core.errors import (
    AnalysisError,
    CommandError,
    ConfigError,
    CovgapError,
    DecodeError,
    ErrorCode,
)
from covgap.core.logging import configure_logging, get_logger

__all__ = [
    # Errors
    "AnalysisError",
    "CommandError",
    "ConfigError",
    "CovgapError",
    "DecodeError",
    "ErrorCode",
    # Logging
    "configure_logging",
    "get_logger",
]
