"""
Typed configuration models using Pydantic.

Defaults reproduce the standard table format, so an
``ExtractorConfig()`` with no arguments reads ordinary CSV files.
"""

import logging

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ParserConfig(BaseModel):
    """How raw text is split into cells."""

    model_config = ConfigDict(frozen=True)

    delimiter: str = Field(default=",", description="Single-character field separator")
    encoding: str = Field(default="utf-8", description="Text encoding of input files")

    @field_validator("delimiter")
    @classmethod
    def validate_delimiter(cls, v: str) -> str:
        """Ensure the delimiter is one character and not a line break or quote."""
        if len(v) != 1 or v in '\r\n"':
            msg = f"delimiter must be a single non-newline, non-quote character, got: {v!r}"
            raise ValueError(msg)
        return v


class LoggingConfig(BaseModel):
    """Log output settings."""

    model_config = ConfigDict(frozen=True)

    level: str = Field(default="INFO", description="Log level name")
    json_output: bool = Field(default=False, description="Emit JSON log lines")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Ensure the level is a standard logging level name."""
        upper = v.upper()
        if upper not in logging.getLevelNamesMapping():
            msg = f"Unknown log level: {v!r}"
            raise ValueError(msg)
        return upper


class ExtractorConfig(BaseModel):
    """Root configuration."""

    model_config = ConfigDict(frozen=True)

    parser: ParserConfig = Field(default_factory=ParserConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    default_payload_group: str | None = Field(
        default=None,
        description="Payload group used when a caller does not name one",
    )

    @field_validator("default_payload_group")
    @classmethod
    def validate_group(cls, v: str | None) -> str | None:
        """Reject group names that could never match a column."""
        if v is not None and (not v or "/" in v or "@" in v):
            msg = f"payload group must be non-empty and contain no '/' or '@', got: {v!r}"
            raise ValueError(msg)
        return v
