"""Pydantic model for CLI application settings.

Settings describe the application (version, documentation, logging), never
the values of its flags.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from aliasargs.utils.logging_manager import LogLevel


class CliSettings(BaseModel):
    """Application-level settings for a Cli instance."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    version: str = Field(
        default="latest",
        description="Version string of the application, e.g. 2.1.3, beta, latest.",
    )
    documentation: str = Field(
        default="",
        description="Brief documentation printed at the top of the help message.",
    )
    strict: bool = Field(
        default=False,
        description="Fail a subcommand when a flag value cannot be converted to its type instead of skipping it.",
    )
    verbosity: str = Field(
        default="normal",
        description="Console log verbosity: silent, normal, verbose or debug.",
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Optional path of a file receiving every log record.",
    )

    @field_validator("version", mode="before")
    @classmethod
    def coerce_version(cls, v):
        """YAML reads versions like 1.2 as numbers."""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("verbosity")
    @classmethod
    def check_verbosity(cls, v: str) -> str:
        v = v.lower()
        valid = [level.name.lower() for level in LogLevel]
        if v not in valid:
            raise ValueError(f"verbosity must be one of {valid}, got '{v}'")
        return v

    @property
    def log_level(self) -> LogLevel:
        return LogLevel[self.verbosity.upper()]
