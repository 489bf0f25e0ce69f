"""Ingestion error types.

Key distinction:
- FileStructureError: the input file itself is unusable (fatal for the run)
- FieldParseError: a numeric cell could not be parsed (strict mode only)
- ContractViolation: pipeline bug (see grovegrid.contracts)
"""

from pathlib import Path
from typing import Optional, Union


class FileStructureError(ValueError):
    """Raised when a file is unreadable, empty, or has a short header."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        self.path = str(path) if path is not None else None
        if self.path:
            message = f"{self.path}: {message}"
        super().__init__(message)


class FieldParseError(ValueError):
    """Raised in strict mode when a numeric field fails to parse."""

    def __init__(self, column: str, text: str, line: Optional[int] = None):
        self.column = column
        self.text = text
        self.line = line
        where = f" (row {line})" if line is not None else ""
        super().__init__(f"Cannot parse {column} field {text!r}{where}")
