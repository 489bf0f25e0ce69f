"""Aggregation stage contract.

Enforces that global extents and ranges cover every observation of every
slice, and that the timeline is ordered.
"""

from grovegrid.contracts.base import require
from grovegrid.model import Corpus


def assert_corpus(corpus: Corpus) -> None:
    """Enforce aggregation stage contract.

    Raises
    ------
    ContractViolation
        If any invariant is violated
    """
    require(
        corpus.slice_names == sorted(corpus.slice_names),
        "Corpus contract violated: slice names are not sorted",
    )
    require(
        set(corpus.slice_names) == set(corpus.slices),
        "Corpus contract violated: slice names do not match slices",
    )
    require(
        corpus.x_max >= 0 and corpus.y_max >= 0,
        f"Corpus contract violated: negative extent ({corpus.x_max}, {corpus.y_max})",
    )
    require(
        corpus.value_min_pos <= corpus.value_max,
        f"Corpus contract violated: value range [{corpus.value_min_pos}, {corpus.value_max}] inverted",
    )
    require(
        corpus.size_min <= corpus.size_max,
        f"Corpus contract violated: size range [{corpus.size_min}, {corpus.size_max}] inverted",
    )

    for sl in corpus.slices.values():
        for obs in sl.observations:
            require(
                obs.x <= corpus.x_max and obs.y <= corpus.y_max,
                f"Corpus contract violated: ({obs.x}, {obs.y}) in '{sl.name}' "
                f"outside extent ({corpus.x_max}, {corpus.y_max})",
            )
