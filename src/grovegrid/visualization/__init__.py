"""Document rendering modules."""

from grovegrid.visualization.document import render_document, write_document, write_json

__all__ = ["render_document", "write_document", "write_json"]
