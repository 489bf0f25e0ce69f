"""Pipeline modules.

- aggregator: Corpus statistics and labels
- materializer: Dense grids and point lists
- orchestrator: Two-phase batch runner
"""

from grovegrid.pipeline.aggregator import CorpusAggregator
from grovegrid.pipeline.materializer import GridMaterializer
from grovegrid.pipeline.orchestrator import PipelineOrchestrator

__all__ = [
    "CorpusAggregator",
    "GridMaterializer",
    "PipelineOrchestrator",
]
