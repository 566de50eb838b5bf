"""Configuration settings for Polystation."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ReaderConfig(BaseModel):
    """Configuration for reading polyline vertices from a text file."""

    delimiter: str = Field(
        default=",",
        min_length=1,
        max_length=1,
        description="Column separator between the x and y values",
    )
    skip_header: bool = Field(
        default=False,
        description="Ignore the first line of the file",
    )
    strict: bool = Field(
        default=False,
        description="Treat any malformed line as an error instead of skipping it",
    )
    encoding: str = Field(
        default="utf-8-sig",
        description="Text encoding of the point file; utf-8-sig drops a leading BOM",
    )

    @field_validator("delimiter")
    @classmethod
    def _delimiter_not_blank(cls, value: str) -> str:
        if value.isspace() or value in "+-" or value.isdigit():
            raise ValueError("delimiter must not be whitespace, a sign or a digit")
        return value


class OutputConfig(BaseModel):
    """Configuration for presenting results."""

    precision: int = Field(
        default=4,
        ge=0,
        le=12,
        description="Decimal places printed for offset and station",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )

    @field_validator("log_level", "file_log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level '{value}'")
        return level


class PolystationSettings(BaseModel):
    """Main application settings."""

    reader: ReaderConfig = Field(default_factory=ReaderConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> PolystationSettings:
    """Get default application settings."""
    return PolystationSettings()
