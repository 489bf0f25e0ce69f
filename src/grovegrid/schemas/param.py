"""ParamConfig: Expert defaults for the GroveGrid pipeline.

This module defines the complete default configuration. ALL pipeline
parameters must have defaults here. No runtime code should define
fallback values - this is the single source of truth for defaults.

Runtime code NEVER reads from ParamConfig directly - it only receives InternalConfig.
"""

from typing import Literal, Optional
from pydantic import Field, field_validator
from grovegrid.schemas.base import GroveBaseModel


# =============================================================================
# Nested Configuration Models
# =============================================================================

class ReaderConfig(GroveBaseModel):
    """CSV reader configuration."""
    file_pattern: str = Field("*.csv", min_length=1, description="Glob for input files")
    encoding: str = "utf-8-sig"
    strict: bool = Field(False, description="Raise on unparseable numeric fields")


class OutputConfig(GroveBaseModel):
    """Output artifact configuration."""
    out_dir: str = "./out"
    json_out: Optional[str] = None
    document_name: str = "index.html"
    template_path: Optional[str] = None
    json_indent: int = Field(2, ge=0)
    write_document: bool = True


class RenderConfig(GroveBaseModel):
    """Fixed color/size configuration handed to the document."""
    title: str = "GroveGrid"
    zero_color: str = "#555555"
    nodata_color: str = "#222222"
    grad_colors: list[str] = Field(
        default_factory=lambda: ["#d73027", "#fdae61", "#fee08b", "#a6d96a", "#1a9850"],
        min_length=1,
    )

    @field_validator("zero_color", "nodata_color", mode="before")
    @classmethod
    def normalize_color(cls, v):
        """Lowercase hex colors so outputs compare stably."""
        if isinstance(v, str):
            return v.strip().lower()
        return v


class LoggingConfig(GroveBaseModel):
    """Logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_file: Optional[str] = None

    @field_validator("level", mode="before")
    @classmethod
    def uppercase_level(cls, v):
        if isinstance(v, str):
            return v.strip().upper()
        return v


# =============================================================================
# Main ParamConfig
# =============================================================================

class ParamConfig(GroveBaseModel):
    """Complete expert configuration with all defaults.

    This config is NOT used directly by runtime code. It serves as the
    base layer in config resolution:

        internal_cfg = resolve_config(param_cfg, user_cfg, cli_cfg)

    Runtime code only sees InternalConfig.
    """

    input_dir: str = "./data"
    reader: ReaderConfig = Field(default_factory=ReaderConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
