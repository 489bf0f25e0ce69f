"""
Directory setup for grid outputs.

All artifacts of a run go under one output directory:
- the rendered document (index.html by default)
- the optional raw JSON dump (anywhere, when json_out is set)
- the optional log file
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Union

if TYPE_CHECKING:
    from grovegrid.schemas import InternalConfig

logger = logging.getLogger(__name__)


def setup_output_directories(base_output_dir: Union[str, Path]) -> dict:
    """
    Create the output directory.

    Parameters
    ----------
    base_output_dir : str or Path
        Output directory (``~`` is expanded).

    Returns
    -------
    dict
        Dictionary with path: 'base'
    """
    base_output_dir = Path(base_output_dir).expanduser().resolve()
    base_output_dir.mkdir(parents=True, exist_ok=True)
    logger.debug("Output directory: %s", base_output_dir)
    return {"base": base_output_dir}


def get_output_paths(config: "InternalConfig", output_dirs: dict) -> dict:
    """
    Resolve artifact paths for a run.

    Returns
    -------
    dict
        'document': Path or None (None when document writing is disabled)
        'json': Path or None (None when the raw dump is disabled)

    Example
    -------
    >>> get_output_paths(config, {"base": Path("out")})
    {'document': PosixPath('out/index.html'), 'json': None}
    """
    document: Optional[Path] = None
    if config.output.write_document:
        document = output_dirs["base"] / config.output.document_name
    json_path = Path(config.output.json_out).expanduser() if config.output.json_out else None
    return {"document": document, "json": json_path}
