"""Read one delimited file into an ordered Slice of Observations.

File format: one header line, then data rows using a single
auto-detected delimiter (comma, semicolon or tab).
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Union

from grovegrid.ingest.errors import FileStructureError
from grovegrid.ingest.record_parser import is_blank_row, parse_record
from grovegrid.ingest.tokenizer import tokenize
from grovegrid.model import Slice

if TYPE_CHECKING:
    from grovegrid.schemas import InternalConfig

__all__ = ["SliceLoader", "slice_name"]

logger = logging.getLogger(__name__)


def slice_name(path: Union[str, Path]) -> str:
    """Slice name for a file: its filename without the last extension.

    >>> slice_name("data/2025-01.csv")
    '2025-01'
    """
    return Path(path).stem


class SliceLoader:
    """Ingest delimited text files into Slices.

    Each call to :meth:`load` reads a whole file, tokenizes it, and parses
    every non-blank row in file order. Structural problems raise
    FileStructureError; there is no partial-file recovery.

    Examples
    --------
    >>> loader = SliceLoader(config)
    >>> sl = loader.load("data/2025-01.csv")
    >>> sl.name, len(sl.observations)
    ('2025-01', 42)
    """

    def __init__(self, config: "InternalConfig"):
        self.encoding = config.reader.encoding
        self.strict = config.reader.strict

    def read_text(self, path: Path) -> str:
        """Read the raw file text, wrapping I/O and decode errors."""
        try:
            with open(path, "r", encoding=self.encoding, newline="") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise FileStructureError(f"unreadable file: {exc}", path) from exc

    def load(self, path: Union[str, Path]) -> Slice:
        """Ingest one file.

        Returns
        -------
        Slice
            Observations in file order plus the raw header fields.

        Raises
        ------
        FileStructureError
            Unreadable file, zero rows, or fewer than three header columns.
        FieldParseError
            Strict mode only, on the first unparseable numeric field.
        """
        path = Path(path)
        table = tokenize(self.read_text(path), source=str(path))

        observations = []
        skipped = 0
        # Row 1 is the header; completely empty lines are not counted.
        for line, row in enumerate(table.rows, start=2):
            if is_blank_row(row):
                skipped += 1
                continue
            observations.append(
                parse_record(row, table.header, strict=self.strict, line=line)
            )

        logger.debug(
            "Parsed %s: %d observations, %d blank rows skipped, delimiter=%r",
            path.name, len(observations), skipped, table.delimiter,
        )
        return Slice(
            name=slice_name(path),
            source=str(path),
            header=table.header,
            observations=observations,
        )
