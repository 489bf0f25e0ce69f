"""Tolerant numeric parsing.

These parsers never raise. Each returns a ParsedNumber whose ``defaulted``
flag tells the caller whether the value was actually read from the text or
fell back to zero, so strict callers can reject bad cells without changing
the lenient path.
"""

import math
import re
from typing import NamedTuple, Union

__all__ = ["ParsedNumber", "parse_int", "parse_float"]

# First number in a field: digits, optional "." or "," decimal part.
NUMBER_PATTERN = re.compile(r"[0-9]+(?:[.,][0-9]+)?")
# Same, keeping a minus sign directly attached to the digits.
SIGNED_NUMBER_PATTERN = re.compile(r"-?[0-9]+(?:[.,][0-9]+)?")
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


class ParsedNumber(NamedTuple):
    value: Union[int, float]
    defaulted: bool


def parse_int(text: str) -> ParsedNumber:
    """Parse a whole trimmed field as an integer, degrading to 0.

    >>> parse_int(" 12 ")
    ParsedNumber(value=12, defaulted=False)
    >>> parse_int("1.5")
    ParsedNumber(value=0, defaulted=True)
    """
    s = text.strip()
    if not INTEGER_PATTERN.fullmatch(s):
        return ParsedNumber(0, True)
    return ParsedNumber(int(s), False)


def parse_float(text: str, signed: bool = True) -> ParsedNumber:
    """Best-effort float parsing that ignores units and stray text.

    The first number found in the field is used and everything else is
    discarded; a comma decimal separator is read as a period. With
    ``signed=False`` a leading minus sign is ignored, so the result is never
    negative.

    >>> parse_float("12,5 cm").value
    12.5
    >>> parse_float("-5", signed=False).value
    5.0
    >>> parse_float("abc")
    ParsedNumber(value=0.0, defaulted=True)
    """
    s = text.strip()
    pattern = SIGNED_NUMBER_PATTERN if signed else NUMBER_PATTERN
    match = pattern.search(s)
    if match:
        s = match.group(0)
    s = s.replace(",", ".")
    try:
        value = float(s)
    except ValueError:
        return ParsedNumber(0.0, True)
    if not math.isfinite(value):
        return ParsedNumber(0.0, True)
    return ParsedNumber(value, False)
