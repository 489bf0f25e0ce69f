"""Two-phase batch pipeline orchestration.

Ingests every input file, aggregates the corpus, materializes every slice,
and only then writes output. Any failure before the write phase aborts the
run with nothing written.
"""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from grovegrid.contracts import (
    FailurePolicy,
    assert_corpus,
    assert_grid,
    assert_gridded,
    assert_slice,
)
from grovegrid.ingest import FieldParseError, FileStructureError, SliceLoader
from grovegrid.model import Corpus, GridOutput, Meta, Slice, SliceDataset
from grovegrid.pipeline.aggregator import CorpusAggregator
from grovegrid.pipeline.materializer import GridMaterializer
from grovegrid.setup_directories import get_output_paths, setup_output_directories
from grovegrid.visualization.document import (
    load_template,
    output_json,
    render_document,
    write_text,
)

if TYPE_CHECKING:
    from grovegrid.schemas import InternalConfig

__all__ = ['PipelineOrchestrator']

logger = logging.getLogger(__name__)


class PipelineOrchestrator:
    """Runs the ingest → aggregate → materialize → write pipeline.

    **Phases:**

    1. **Ingest**: every file matching ``reader.file_pattern`` in
       ``input_dir`` is read in sorted path order into a Slice. The first
       unreadable or structurally invalid file aborts the run.

    2. **Aggregate**: slices are folded into a Corpus holding the global
       extents, positive value/size ranges, the sorted slice names and the
       labels of the first file.

    3. **Materialize**: each slice gets a dense ``x_max * y_max`` grid and a
       sparse point list, using the global extents from phase 2.

    4. **Write**: the raw JSON dump (if configured) and the rendered
       document are written under the output directory.

    Stage contracts are checked between phases (see ``grovegrid.contracts``).

    Example usage::

        config = resolve_config(ParamConfig(), UserConfig(IN_DIR="data"))
        orch = PipelineOrchestrator(config)
        output = orch.run()
    """

    def __init__(self, config: "InternalConfig"):
        self.config = config
        self.loader = SliceLoader(config)
        self.aggregator = CorpusAggregator()
        self.materializer = GridMaterializer()
        self.failure_policy = FailurePolicy.FAIL_FAST

    def setup_logging(self):
        """Configure the root logger with console and optional file handlers."""
        log_level = getattr(logging, self.config.logging.level, logging.INFO)

        formatter = logging.Formatter(
            fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        # Clear existing handlers and add new ones
        root = logging.getLogger()
        root.setLevel(log_level)
        for handler in root.handlers[:]:
            root.removeHandler(handler)

        ch = logging.StreamHandler()
        ch.setLevel(log_level)
        ch.setFormatter(formatter)
        root.addHandler(ch)

        if self.config.logging.log_file:
            log_path = Path(self.config.logging.log_file).expanduser()
            log_path.parent.mkdir(parents=True, exist_ok=True)
            fh = logging.FileHandler(log_path)
            fh.setLevel(log_level)
            fh.setFormatter(formatter)
            root.addHandler(fh)
            logger.info("Logging: level=%s, file=%s", self.config.logging.level, log_path)
        else:
            logger.debug("Logging: level=%s, console only", self.config.logging.level)

    def discover_files(self) -> list[Path]:
        """Sorted regular files in the input directory matching the pattern."""
        input_dir = Path(self.config.input_dir).expanduser()
        if not input_dir.is_dir():
            raise FileNotFoundError(f"Input directory not found: {input_dir}")
        files = sorted(p for p in input_dir.glob(self.config.reader.file_pattern) if p.is_file())
        logger.info("Found %d input files in %s", len(files), input_dir)
        return files

    def ingest(self, files: list[Path]) -> list[Slice]:
        slices = []
        for path in files:
            try:
                sl = self.loader.load(path)
            except (FileStructureError, FieldParseError) as exc:
                logger.error("Failed to ingest %s: %s", path, exc)
                raise
            assert_slice(sl)
            logger.info("Ingested %s: %d observations", path.name, len(sl.observations))
            slices.append(sl)
        return slices

    def aggregate(self, slices: list[Slice]) -> Corpus:
        corpus = self.aggregator.aggregate(slices)
        assert_corpus(corpus)
        return corpus

    def materialize(self, corpus: Corpus) -> dict[str, SliceDataset]:
        datasets = {}
        for name in corpus.slice_names:
            sl = corpus.slices[name]
            da = self.materializer.to_dataarray(sl, corpus.x_max, corpus.y_max)
            assert_gridded(da, corpus.x_max, corpus.y_max)
            dataset = self.materializer.from_dataarray(sl, da)
            assert_grid(dataset, corpus.x_max, corpus.y_max)
            datasets[name] = dataset
        return datasets

    def build_meta(self, corpus: Corpus, now: Optional[datetime] = None) -> Meta:
        """Global metadata: statistics, labels, render settings, timestamp."""
        render = self.config.render
        labels = corpus.labels
        generated = (now or datetime.now(timezone.utc)).isoformat(timespec="seconds")
        return Meta(
            x_max=corpus.x_max,
            y_max=corpus.y_max,
            value_min_pos=corpus.value_min_pos,
            value_max=corpus.value_max,
            zero_color=render.zero_color,
            nodata_color=render.nodata_color,
            grad_colors=list(render.grad_colors),
            size_min=corpus.size_min,
            size_max=corpus.size_max,
            months=list(corpus.slice_names),
            generated_at=generated,
            notes={
                "x_axis": f"{labels.x} (1..X)",
                "y_axis": f"{labels.y} (1..Y)",
                "value_info": f"{labels.value}: 0=zero, >0 better; <0 no data",
                "size_info": f"{labels.size}: circle size",
            },
            title=render.title,
            labels=labels,
        )

    def build(self, now: Optional[datetime] = None) -> Optional[GridOutput]:
        """Run phases 1-3 and return the output record without writing.

        Returns None when no input files match.
        """
        files = self.discover_files()
        if not files:
            logger.warning(
                "No files matching %s found in %s",
                self.config.reader.file_pattern, self.config.input_dir,
            )
            return None

        corpus = self.aggregate(self.ingest(files))
        datasets = self.materialize(corpus)
        return GridOutput(meta=self.build_meta(corpus, now), datasets=datasets)

    def write(self, output: GridOutput) -> dict:
        """Write the raw JSON dump and the document; returns written paths.

        Both texts are rendered (template included) before the output
        directory is created, so a bad template leaves nothing on disk.
        """
        out = self.config.output
        indent = out.json_indent

        json_text = output_json(output, indent) if out.json_out else None
        document_text = None
        if out.write_document:
            document_text = render_document(
                load_template(out.template_path), output,
                title=self.config.render.title, indent=indent,
            )

        output_dirs = setup_output_directories(out.out_dir)
        paths = get_output_paths(self.config, output_dirs)

        if json_text is not None:
            write_text(paths["json"], json_text)
            logger.info("Wrote data: %s", paths["json"])
        if document_text is not None:
            write_text(paths["document"], document_text)
            logger.info("Wrote document: %s", paths["document"])
        return paths

    def run(self, now: Optional[datetime] = None) -> Optional[GridOutput]:
        """Build the output record and write it. Returns None if there was no input."""
        logger.info("=" * 60)
        logger.info("Starting GroveGrid pipeline")
        logger.info("=" * 60)
        logger.info("Failure policy: %s", self.failure_policy.value)

        output = self.build(now)
        if output is None:
            return None
        self.write(output)
        return output
