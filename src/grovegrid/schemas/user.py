"""UserConfig: Forgiving, minimal user-facing configuration.

This schema accepts user inputs in a variety of formats, with aliases
for common naming patterns (e.g., IN_DIR → input_dir, TITLE → title).

UserConfig is intentionally minimal - users only specify what they want
to override from the expert defaults.
"""

from typing import Optional
from pydantic import Field, field_validator
from grovegrid.schemas.base import GroveBaseModel


class UserReaderConfig(GroveBaseModel):
    """User-facing reader config."""
    file_pattern: Optional[str] = None
    encoding: Optional[str] = None
    strict: Optional[bool] = None


class UserOutputConfig(GroveBaseModel):
    """User-facing output config."""
    out_dir: Optional[str] = None
    json_out: Optional[str] = None
    document_name: Optional[str] = None
    template_path: Optional[str] = None
    json_indent: Optional[int] = None
    write_document: Optional[bool] = None


class UserRenderConfig(GroveBaseModel):
    """User-facing render config."""
    title: Optional[str] = None
    zero_color: Optional[str] = None
    nodata_color: Optional[str] = None
    grad_colors: Optional[list[str]] = None

    @field_validator("zero_color", "nodata_color", mode="before")
    @classmethod
    def normalize_color(cls, v):
        """Lowercase hex colors so outputs compare stably."""
        if isinstance(v, str):
            return v.strip().lower()
        return v


class UserConfig(GroveBaseModel):
    """User-facing configuration schema.

    Minimal, forgiving, and uses common aliases. Users only specify
    what they want to override from ParamConfig defaults.

    Usage
    -----
        user_cfg = UserConfig(
            IN_DIR="data/orchard",
            TITLE="Orchard 2025",
            JSON_OUT="out/data.json",
        )

        internal = resolve_config(param_cfg, user_cfg, cli_cfg)
    """

    input_dir: Optional[str] = Field(None, alias="IN_DIR")
    out_dir: Optional[str] = Field(None, alias="OUT_DIR")
    title: Optional[str] = Field(None, alias="TITLE")
    json_out: Optional[str] = Field(None, alias="JSON_OUT")
    template_path: Optional[str] = Field(None, alias="TEMPLATE")
    file_pattern: Optional[str] = Field(None, alias="FILE_PATTERN")
    strict: Optional[bool] = Field(None, alias="STRICT")
    log_level: Optional[str] = Field(None, alias="LOG_LEVEL")

    # Nested overrides (advanced users)
    reader: Optional[UserReaderConfig] = None
    output: Optional[UserOutputConfig] = None
    render: Optional[UserRenderConfig] = None

    model_config = GroveBaseModel.model_config.copy()
    # Allow forgiving input dictionaries (ignore unknown legacy keys)
    model_config.update({"populate_by_name": True, "extra": "ignore"})

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        if isinstance(v, str):
            return v.strip().upper()
        return v

    def to_internal_overrides(self) -> dict:
        """Convert flat UserConfig to nested InternalConfig structure.

        Returns
        -------
        dict
            Nested dictionary matching InternalConfig structure
        """
        overrides = {}

        if self.input_dir is not None:
            overrides["input_dir"] = self.input_dir

        reader = {}
        if self.file_pattern is not None:
            reader["file_pattern"] = self.file_pattern
        if self.strict is not None:
            reader["strict"] = self.strict
        if self.reader is not None:
            reader.update(self.reader.model_dump(exclude_none=True))
        if reader:
            overrides["reader"] = reader

        output = {}
        if self.out_dir is not None:
            output["out_dir"] = self.out_dir
        if self.json_out is not None:
            output["json_out"] = self.json_out
        if self.template_path is not None:
            output["template_path"] = self.template_path
        if self.output is not None:
            output.update(self.output.model_dump(exclude_none=True))
        if output:
            overrides["output"] = output

        render = {}
        if self.title is not None:
            render["title"] = self.title
        if self.render is not None:
            render.update(self.render.model_dump(exclude_none=True))
        if render:
            overrides["render"] = render

        if self.log_level is not None:
            overrides["logging"] = {"level": self.log_level}

        return overrides
