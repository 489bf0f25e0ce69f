"""CLIConfig: Command-line operational overrides.

Minimal configuration for parameters that commonly change between runs:
input and output paths, title, raw dump target, strictness, verbosity.
"""

from typing import Literal, Optional
from grovegrid.schemas.base import GroveBaseModel


class CLIConfig(GroveBaseModel):
    """Command-line configuration overrides.

    Highest priority in config resolution.

    Usage
    -----
        cli_cfg = CLIConfig(in_dir="./data", out_dir="./out", title="Orchard")
        internal = resolve_config(param_cfg, user_cfg, cli_cfg)
    """

    in_dir: Optional[str] = None
    out_dir: Optional[str] = None
    title: Optional[str] = None
    json_out: Optional[str] = None
    strict: Optional[bool] = None
    log_level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]] = None

    def to_internal_overrides(self) -> dict:
        """Convert CLI config to internal config structure."""
        overrides = {}

        if self.in_dir is not None:
            overrides["input_dir"] = self.in_dir

        if self.strict is not None:
            overrides["reader"] = {"strict": self.strict}

        output = {}
        if self.out_dir is not None:
            output["out_dir"] = self.out_dir
        if self.json_out is not None:
            output["json_out"] = self.json_out
        if output:
            overrides["output"] = output

        if self.title is not None:
            overrides["render"] = {"title": self.title}

        if self.log_level is not None:
            overrides["logging"] = {"level": self.log_level}

        return overrides
