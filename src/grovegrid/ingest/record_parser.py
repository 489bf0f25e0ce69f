"""Convert one row of string fields into an Observation.

Column layout is positional: X, Y, Value, optional Size, then any number
of extra string attributes keyed by their header name.
"""

from typing import Optional, Sequence

from grovegrid.ingest.errors import FieldParseError
from grovegrid.ingest.numbers import parse_float, parse_int
from grovegrid.model import NO_DATA, Observation

__all__ = ["is_blank_row", "parse_record", "EXTRAS_START"]

# Columns from this index on become extras.
EXTRAS_START = 4


def is_blank_row(row: Sequence[str]) -> bool:
    """True if every field of the row is empty or whitespace."""
    return not "".join(row).strip()


def parse_record(
    row: Sequence[str],
    header: Sequence[str],
    strict: bool = False,
    line: Optional[int] = None,
) -> Observation:
    """Parse one data row against its file header.

    Numeric fields degrade silently: bad or missing X/Y become ``0``, an
    unparseable Value or Size becomes ``0``. Only an empty Value cell maps
    to the no-data sentinel ``-1``. A row too short to hold a Value keeps
    ``0``. Size is never negative: a minus sign in front of it is ignored.

    Parameters
    ----------
    row : sequence of str
        Fields of one data row (may be shorter or longer than header).
    header : sequence of str
        Header fields of the file; names extras from column 5 on.
    strict : bool, optional
        Raise FieldParseError instead of degrading (see Raises).
    line : int, optional
        Row number used in error messages.

    Raises
    ------
    FieldParseError
        Strict mode only: X or Y present but not an integer, or a non-empty
        Value/Size with no number in it.
    """
    x = y = 0
    value = size = 0.0

    if len(row) > 0:
        x = _coordinate(row[0], "x", strict, line)
    if len(row) > 1:
        y = _coordinate(row[1], "y", strict, line)
    if len(row) > 2:
        if not row[2].strip():
            value = NO_DATA
        else:
            value = _measure(row[2], "value", strict, line)
    if len(row) > 3:
        size = _measure(row[3], "size", strict, line, signed=False)

    extras = {}
    for i in range(EXTRAS_START, min(len(header), len(row))):
        extras[header[i].strip()] = row[i].strip()

    return Observation(x=x, y=y, value=value, size=size, extras=extras)


def _coordinate(text: str, column: str, strict: bool, line: Optional[int]) -> int:
    parsed = parse_int(text)
    if strict and parsed.defaulted:
        raise FieldParseError(column, text, line)
    return parsed.value


def _measure(
    text: str, column: str, strict: bool, line: Optional[int], signed: bool = True
) -> float:
    parsed = parse_float(text, signed=signed)
    if strict and parsed.defaulted and text.strip():
        raise FieldParseError(column, text, line)
    return parsed.value
