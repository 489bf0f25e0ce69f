"""Ingestion modules.

- tokenizer: Delimiter detection and row splitting
- numbers: Tolerant numeric parsing
- record_parser: Row to Observation conversion
- loader: Whole-file ingestion into a Slice
"""

from grovegrid.ingest.errors import FieldParseError, FileStructureError
from grovegrid.ingest.loader import SliceLoader, slice_name
from grovegrid.ingest.numbers import ParsedNumber, parse_float, parse_int
from grovegrid.ingest.record_parser import parse_record
from grovegrid.ingest.tokenizer import detect_delimiter, tokenize

__all__ = [
    "FieldParseError",
    "FileStructureError",
    "SliceLoader",
    "slice_name",
    "ParsedNumber",
    "parse_float",
    "parse_int",
    "parse_record",
    "detect_delimiter",
    "tokenize",
]
