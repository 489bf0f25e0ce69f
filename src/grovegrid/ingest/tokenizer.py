"""Delimiter detection and row splitting for one delimited text file.

The delimiter is chosen once from the header line and applied to every
row; rows with a different field count are passed through as-is.
"""

import csv
import io
import logging
import sys
from typing import NamedTuple, Optional

from grovegrid.ingest.errors import FileStructureError

__all__ = ["Table", "detect_delimiter", "tokenize", "MIN_HEADER_COLUMNS"]

logger = logging.getLogger(__name__)

# X, Y and Value are mandatory; Size and extras are optional.
MIN_HEADER_COLUMNS = 3

# The csv default (128 KiB per field) would reject long extras cells.
FIELD_SIZE_LIMIT = min(sys.maxsize, 2**31 - 1)
csv.field_size_limit(FIELD_SIZE_LIMIT)


class Table(NamedTuple):
    delimiter: str
    header: list[str]
    rows: list[list[str]]


def detect_delimiter(header_line: str) -> str:
    """Choose ``;``, tab or ``,`` for a file from its header line.

    Semicolons win when they outnumber commas; otherwise any tab selects
    tab; otherwise comma.
    """
    if header_line.count(";") > header_line.count(","):
        return ";"
    if "\t" in header_line:
        return "\t"
    return ","


def tokenize(text: str, source: Optional[str] = None) -> Table:
    """Split raw file text into a header and data rows.

    Completely empty lines are dropped; whitespace-only rows are kept so
    the record stage can skip them.

    Raises
    ------
    FileStructureError
        If the text holds no rows, has fewer than three header columns,
        or is not valid delimited text.
    """
    header_line = text.split("\n", 1)[0]
    delimiter = detect_delimiter(header_line)
    logger.debug("Delimiter %r detected for %s", delimiter, source or "<text>")

    reader = csv.reader(io.StringIO(text, newline=""), delimiter=delimiter)
    try:
        rows = [row for row in reader if row]
    except csv.Error as exc:
        raise FileStructureError(f"malformed delimited text: {exc}", source) from exc

    if not rows:
        raise FileStructureError("empty file", source)

    header = rows[0]
    if len(header) < MIN_HEADER_COLUMNS:
        raise FileStructureError(
            f"need at least {MIN_HEADER_COLUMNS} columns: X, Y, Value "
            f"(header has {len(header)})",
            source,
        )

    return Table(delimiter=delimiter, header=header, rows=rows[1:])
