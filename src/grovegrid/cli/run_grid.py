"""Core GroveGrid pipeline execution logic.

This module contains the actual pipeline runner, separated from argument parsing.
Scripts are thin wrappers; this is the real implementation.
"""

import argparse
import json
import importlib.util
import logging
from pathlib import Path
from typing import Optional, Dict, Any

from grovegrid.model import GridOutput
from grovegrid.pipeline.orchestrator import PipelineOrchestrator
from grovegrid.schemas import resolve_config, ParamConfig, UserConfig, CLIConfig


logger = logging.getLogger(__name__)


def load_user_config_dict(config_path: str) -> dict:
    """Load user config dict from Python file.

    Returns the raw dict before Pydantic validation.

    Raises
    ------
    FileNotFoundError
        If config file does not exist.
    ValueError
        If no CONFIG dict found in file.
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")

    spec = importlib.util.spec_from_file_location("config_module", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    for name in dir(module):
        if name.startswith('CONFIG'):
            obj = getattr(module, name)
            if isinstance(obj, dict):
                return obj

    raise ValueError(f"No CONFIG dict found in {path}")


def run_grid_pipeline(
    user_config_path: Optional[str] = None,
    cli_args: Optional[Dict[str, Any]] = None,
    verbose: bool = False,
) -> Optional[GridOutput]:
    """Execute the GroveGrid pipeline.

    1. Loads and resolves configuration (Param < User < CLI)
    2. Configures logging
    3. Ingests, aggregates, materializes and writes outputs

    Parameters
    ----------
    user_config_path : str, optional
        Path to user config file (Python file with CONFIG dict).
    cli_args : dict, optional
        CLI argument overrides. Keys: in_dir, out_dir, title, json_out,
        strict, log_level. None values are ignored.
    verbose : bool, optional
        If True, enable DEBUG logging and print full resolved config.

    Returns
    -------
    GridOutput or None
        The written record, or None when no input files matched.

    Raises
    ------
    FileNotFoundError
        If the user config or the input directory does not exist.
    FileStructureError
        If any input file is unreadable or structurally invalid.

    Examples
    --------
    ::

        run_grid_pipeline(cli_args={"in_dir": "data", "out_dir": "out"})
    """
    param_cfg = ParamConfig()

    user_cfg = None
    if user_config_path:
        user_cfg = UserConfig.model_validate(load_user_config_dict(user_config_path))

    cli_args = dict(cli_args or {})
    if verbose and "log_level" not in cli_args:
        cli_args["log_level"] = "DEBUG"
    cli_dict = {k: v for k, v in cli_args.items() if v is not None}
    cli_cfg = CLIConfig.model_validate(cli_dict) if cli_dict else CLIConfig()

    config = resolve_config(param_cfg, user_cfg, cli_cfg)

    orchestrator = PipelineOrchestrator(config)
    orchestrator.setup_logging()

    logger.info("Input:  %s (%s)", config.input_dir, config.reader.file_pattern)
    logger.info("Output: %s", config.output.out_dir)
    if verbose:
        logger.debug("Full internal configuration:\n%s", json.dumps(config.model_dump(), indent=2))

    output = orchestrator.run()
    if output is not None:
        logger.info("Done. Open: %s", Path(config.output.out_dir) / config.output.document_name)
    return output


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grovegrid",
        description="Merge time-sliced CSV grid files into a dataset and document",
    )
    parser.add_argument("config", nargs="?", help="Path to user config file (optional)")
    parser.add_argument("--in", dest="in_dir", help="Input directory with CSV files (e.g. 2025-01.csv)")
    parser.add_argument("--out", dest="out_dir", help="Output directory")
    parser.add_argument("--title", help="Page title")
    parser.add_argument("--json-out", dest="json_out", help="Write the JSON data to this path")
    parser.add_argument("--strict", action="store_true", default=None,
                        help="Fail on unparseable numeric fields")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    run_grid_pipeline(
        args.config,
        cli_args={
            "in_dir": args.in_dir,
            "out_dir": args.out_dir,
            "title": args.title,
            "json_out": args.json_out,
            "strict": args.strict,
        },
        verbose=args.verbose,
    )


if __name__ == "__main__":
    main()
