"""Config module exports."""

from covgap.config.loader import load_config
from covgap.config.models import (
    CovgapConfig,
    LoggingConfig,
    LogOutputConfig,
    OutputConfig,
    RunConfig,
)

__all__ = [
    "load_config",
    "CovgapConfig",
    "LoggingConfig",
    "LogOutputConfig",
    "OutputConfig",
    "RunConfig",
]
