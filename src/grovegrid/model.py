"""Data model for ingested slices, the merged corpus, and the output record.

Observation, Slice and Corpus are produced by the ingestion and aggregation
stages; Point, SliceDataset, Meta and GridOutput form the record handed to
the document renderer and the optional raw JSON dump.

All models are frozen: a Corpus is built once per run and read-only afterward.
"""

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "NO_DATA",
    "Observation",
    "Slice",
    "Labels",
    "Corpus",
    "Point",
    "SliceDataset",
    "Meta",
    "GridOutput",
]

# Value channel sentinel: no observation at this coordinate in this slice.
NO_DATA = -1.0


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class Observation(_FrozenModel):
    """One data point at integer grid coordinates within one slice.

    ``value`` is ``-1`` for no data; ``0`` and positive values are measured.
    ``x``/``y`` are 1-based but a degraded parse leaves them at ``0``.
    """
    x: int = 0
    y: int = 0
    value: float = 0.0
    size: float = 0.0
    extras: dict[str, str] = Field(default_factory=dict)


class Slice(_FrozenModel):
    """One input file: a named point on the timeline."""
    name: str
    source: str
    header: list[str]
    observations: list[Observation]


class Labels(_FrozenModel):
    """Column labels derived from the first ingested header."""
    x: str = "X"
    y: str = "Y"
    value: str = "Value"
    size: str = "Size"
    extras: list[str] = Field(default_factory=list)


class Corpus(_FrozenModel):
    """Merged ingestion result with global extents and value/size ranges."""
    x_max: int
    y_max: int
    value_min_pos: float
    value_max: float
    size_min: float
    size_max: float
    slice_names: list[str]
    labels: Labels
    slices: dict[str, Slice]


class Point(_FrozenModel):
    """A present observation, carried verbatim for point-level rendering."""
    x: int
    y: int
    value: float
    size: float
    extras: dict[str, str]


class SliceDataset(_FrozenModel):
    """Dense grid and sparse point list for one slice.

    ``heat`` holds ``(x, y, value)`` triples, x outer (1..x_max) and
    y inner (1..y_max), so position ``(x - 1) * y_max + (y - 1)`` is
    coordinate ``(x, y)``.
    """
    heat: list[tuple[int, int, float]]
    points: list[Point]


class Meta(_FrozenModel):
    x_max: int
    y_max: int
    value_min_pos: float
    value_max: float
    zero_color: str
    nodata_color: str
    grad_colors: list[str]
    size_min: float
    size_max: float
    months: list[str]
    generated_at: str
    notes: dict[str, str]
    title: str
    labels: Labels


class GridOutput(_FrozenModel):
    """Complete record consumed by the document renderer."""
    meta: Meta
    datasets: dict[str, SliceDataset]
