"""`GroveGrid` - merge time-sliced CSV grid observations for visualization.

Subpackages:
- ingest: Delimiter detection, tolerant parsing, per-file ingestion
- pipeline: Corpus aggregation, grid materialization, orchestration
- visualization: Document template substitution
"""

__version__ = "0.1.0"
