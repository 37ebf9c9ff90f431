"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (COVGAP__SECTION__KEY)
3. Project YAML (.covgap.yaml)
4. Global YAML (~/.config/covgap/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    COVGAP__<SECTION>__<KEY>=<VALUE>

Examples:
    COVGAP__LOGGING__LEVEL=DEBUG
    COVGAP__OUTPUT__RELATIVE_PATHS=true
    COVGAP__RUN__COMMAND='["cargo", "+nightly", "llvm-cov"]'
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        COVGAP__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. Logs go to stderr and never mix with the report.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class RunConfig(BaseModel):
    """Coverage command used by `covgap run`.

    Env vars:
        COVGAP__RUN__COMMAND: JSON list, e.g. '["cargo", "llvm-cov"]'
    """

    command: list[str] = Field(
        default_factory=lambda: ["cargo", "llvm-cov"],
        description="Command producing llvm.coverage.json.export on stdout. "
        "'--json' and forwarded arguments are appended.",
    )

    @field_validator("command")
    @classmethod
    def validate_command(cls, v: list[str]) -> list[str]:
        if not v or not v[0]:
            raise ValueError("Command must name an executable")
        return v


class OutputConfig(BaseModel):
    """Report output configuration.

    Env vars:
        COVGAP__OUTPUT__RELATIVE_PATHS: Rewrite absolute paths relative to cwd
    """

    relative_paths: bool = Field(
        default=False,
        description="Rewrite absolute file paths relative to the working directory.",
    )


class CovgapConfig(BaseModel):
    """Root configuration for covgap.

    All settings can be configured via:
    1. Environment variables: COVGAP__SECTION__KEY
    2. YAML config files (project or global)
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    run: RunConfig = Field(default_factory=RunConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
