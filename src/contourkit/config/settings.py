"""Configuration settings for contourkit."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from contourkit.domain import Winding

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class OutputConfig(BaseModel):
    """Configuration for reported results."""

    precision: int = Field(
        default=6,
        ge=0,
        le=15,
        description="Decimal places shown for areas and distances",
    )
    default_winding: Winding = Field(
        default=Winding.COUNTER_CLOCKWISE,
        description="Winding that normalize rewrites contours to",
    )

    def format_scalar(self, value: object) -> str:
        """Format a coordinate-typed value for display.

        Args:
            value: Area or distance value, or None

        Returns:
            Rounded decimal string, ``n/a`` for None, or ``str(value)`` for
            values that cannot be formatted as a float
        """
        if value is None:
            return "n/a"
        try:
            return f"{float(value):.{self.precision}f}"
        except (TypeError, ValueError):
            return str(value)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: LogLevel = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: LogLevel = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )

    @field_validator("log_level", "file_log_level", mode="before")
    @classmethod
    def normalize_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


class ContourKitSettings(BaseModel):
    """Main application settings."""

    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> ContourKitSettings:
    """Get default application settings."""
    return ContourKitSettings()
