"""Configuration settings for svgdoc."""

from pathlib import Path

from pydantic import BaseModel, Field


class RenderConfig(BaseModel):
    """Configuration for document rendering."""

    indent_step: int = Field(
        default=2,
        ge=0,
        le=16,
        description="Spaces added per nesting level",
    )
    indent: int = Field(
        default=0,
        ge=0,
        description="Indentation of top-level elements",
    )
    xml_declaration: bool = Field(
        default=False,
        description="Write an <?xml ...?> declaration before the elements",
    )
    standalone: bool = Field(
        default=False,
        description="Wrap the elements in an <svg> root element",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file (no file logging when unset)",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class SvgDocSettings(BaseModel):
    """Main application settings."""

    render: RenderConfig = Field(default_factory=RenderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> SvgDocSettings:
    """Get default application settings."""
    return SvgDocSettings()
