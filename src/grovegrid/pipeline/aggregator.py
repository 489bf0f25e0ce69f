"""Merge per-file Slices into one Corpus.

Global extents and value/size ranges are computed as a fold over the
observation stream with an explicit accumulator; nothing is shared
between slices except that accumulator.
"""

import logging
from typing import Iterable, Optional, Sequence

from grovegrid.model import Corpus, Labels, Observation, Slice

__all__ = ["CorpusAccumulator", "CorpusAggregator", "labels_from_header"]

logger = logging.getLogger(__name__)

DEFAULT_LABELS = ("X", "Y", "Value", "Size")


def labels_from_header(header: Optional[Sequence[str]]) -> Labels:
    """Derive column labels from a header row.

    Columns 1-4 name X, Y, Value and Size, falling back to the default
    names when the header is shorter; columns 5+ become extras labels.
    """
    header = [h.strip() for h in (header or [])]
    names = [header[i] if i < len(header) else DEFAULT_LABELS[i] for i in range(4)]
    return Labels(
        x=names[0],
        y=names[1],
        value=names[2],
        size=names[3],
        extras=header[4:],
    )


class CorpusAccumulator:
    """Running maxima and positive-only min/max ranges.

    Ranges stay ``None`` until a qualifying observation arrives;
    :meth:`ranges` maps empty ranges to ``(0, 0)``.
    """

    def __init__(self):
        self.x_max = 0
        self.y_max = 0
        self.value_range: Optional[tuple[float, float]] = None
        self.size_range: Optional[tuple[float, float]] = None

    def add(self, obs: Observation) -> "CorpusAccumulator":
        self.x_max = max(self.x_max, obs.x)
        self.y_max = max(self.y_max, obs.y)
        if obs.value > 0:
            self.value_range = _widen(self.value_range, obs.value)
        if obs.size > 0:
            self.size_range = _widen(self.size_range, obs.size)
        return self

    def extend(self, observations: Iterable[Observation]) -> "CorpusAccumulator":
        for obs in observations:
            self.add(obs)
        return self

    def ranges(self) -> dict:
        value_min, value_max = self.value_range or (0.0, 0.0)
        size_min, size_max = self.size_range or (0.0, 0.0)
        return {
            "x_max": self.x_max,
            "y_max": self.y_max,
            "value_min_pos": value_min,
            "value_max": value_max,
            "size_min": size_min,
            "size_max": size_max,
        }


def _widen(bounds: Optional[tuple[float, float]], v: float) -> tuple[float, float]:
    if bounds is None:
        return (v, v)
    return (min(bounds[0], v), max(bounds[1], v))


class CorpusAggregator:
    """Fold Slices, in ingestion order, into an immutable Corpus.

    Labels come from the first slice's header. When two slices share a
    name the later one replaces the earlier one. Extents and ranges are
    folded only after duplicates are resolved, so a replaced slice never
    widens the grid or the colour scale of the slices that are shown.

    Examples
    --------
    >>> corpus = CorpusAggregator().aggregate([jan, feb])
    >>> corpus.slice_names
    ['2025-01', '2025-02']
    """

    def aggregate(self, slices: Iterable[Slice]) -> Corpus:
        by_name: dict[str, Slice] = {}
        first_header = None

        for sl in slices:
            if first_header is None:
                first_header = sl.header
            if sl.name in by_name:
                logger.warning(
                    "Slice '%s' from %s replaces %s",
                    sl.name, sl.source, by_name[sl.name].source,
                )
            by_name[sl.name] = sl

        names = sorted(by_name)
        acc = CorpusAccumulator()
        for name in names:
            acc.extend(by_name[name].observations)

        stats = acc.ranges()
        logger.info(
            "Corpus: %d slices, extent %dx%d, value [%s, %s], size [%s, %s]",
            len(names), stats["x_max"], stats["y_max"],
            stats["value_min_pos"], stats["value_max"],
            stats["size_min"], stats["size_max"],
        )
        return Corpus(
            **stats,
            slice_names=names,
            labels=labels_from_header(first_header),
            slices={name: by_name[name] for name in names},
        )
