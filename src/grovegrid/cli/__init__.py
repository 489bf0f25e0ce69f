"""Command-line interface modules for GroveGrid pipeline execution.

This package contains core execution logic, making scripts/ optional and deletable.
"""

from grovegrid.cli.run_grid import run_grid_pipeline

__all__ = ['run_grid_pipeline']
