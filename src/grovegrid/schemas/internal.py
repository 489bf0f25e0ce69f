"""InternalConfig: Authoritative runtime configuration.

This is the ONLY config schema that runtime code sees. It is fully validated,
normalized, and frozen.
"""

from typing import Literal, Optional
from pydantic import ConfigDict, Field
from grovegrid.schemas.base import GroveBaseModel


class InternalReaderConfig(GroveBaseModel):
    """Runtime reader configuration."""
    file_pattern: str
    encoding: str
    strict: bool


class InternalOutputConfig(GroveBaseModel):
    """Runtime output configuration."""
    out_dir: str
    json_out: Optional[str]
    document_name: str
    template_path: Optional[str]
    json_indent: int = Field(ge=0)
    write_document: bool


class InternalRenderConfig(GroveBaseModel):
    """Runtime render settings."""
    title: str
    zero_color: str
    nodata_color: str
    grad_colors: list[str]


class InternalLoggingConfig(GroveBaseModel):
    """Runtime logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    log_file: Optional[str]


class InternalConfig(GroveBaseModel):
    """Authoritative runtime configuration.

    Runtime modules receive InternalConfig and access fields directly:

        def __init__(self, config: InternalConfig):
            self.strict = config.reader.strict

    Rules
    -----
    - NO .get() calls
    - NO fallback defaults
    - NO validation in runtime code

    All of that happens during config resolution.
    """

    input_dir: str
    reader: InternalReaderConfig
    output: InternalOutputConfig
    render: InternalRenderConfig
    logging: InternalLoggingConfig

    model_config = ConfigDict(
        extra='forbid',
        validate_assignment=True,
        use_enum_values=True,
        str_strip_whitespace=True,
        frozen=True,
    )
