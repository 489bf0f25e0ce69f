"""Materialize per-slice dense grids and sparse point lists.

Requires the global extents of the whole Corpus, so it only runs after
every file has been ingested and aggregated.
"""

import logging
from typing import Iterable

import numpy as np
import xarray as xr

from grovegrid.model import NO_DATA, Observation, Point, Slice, SliceDataset

__all__ = ["GridMaterializer", "presence_map"]

logger = logging.getLogger(__name__)


def presence_map(observations: Iterable[Observation]) -> dict[tuple[int, int], Observation]:
    """Map each coordinate to its latest observation (last write wins)."""
    present = {}
    for obs in observations:
        present[(obs.x, obs.y)] = obs
    return present


class GridMaterializer:
    """Build the dense grid and sparse point list of a slice.

    The dense grid enumerates every ``(x, y)`` with ``1 <= x <= x_max`` and
    ``1 <= y <= y_max``, x outer and y inner, carrying the observed value or
    ``-1`` when the slice has nothing at that coordinate. Observations
    outside that range (e.g. a coordinate degraded to 0) still appear in
    the point list but never in the dense grid.

    Examples
    --------
    >>> ds = GridMaterializer().materialize(sl, x_max=2, y_max=2)
    >>> ds.heat
    [(1, 1, 0.0), (1, 2, 3.5), (2, 1, -1.0), (2, 2, -1.0)]
    """

    def dense_array(self, sl: Slice, x_max: int, y_max: int) -> np.ndarray:
        """Dense ``(x_max, y_max)`` value array; index ``[x - 1, y - 1]``."""
        grid = np.full((x_max, y_max), NO_DATA, dtype=np.float64)
        outside = 0
        for (x, y), obs in presence_map(sl.observations).items():
            if 1 <= x <= x_max and 1 <= y <= y_max:
                grid[x - 1, y - 1] = obs.value
            else:
                outside += 1
        if outside:
            logger.debug(
                "Slice '%s': %d coordinates outside 1..%d x 1..%d left out of dense grid",
                sl.name, outside, x_max, y_max,
            )
        return grid

    def to_dataarray(self, sl: Slice, x_max: int, y_max: int) -> xr.DataArray:
        """Dense grid as a labelled ``xarray.DataArray`` with dims ``(x, y)``."""
        return xr.DataArray(
            self.dense_array(sl, x_max, y_max),
            dims=("x", "y"),
            coords={"x": np.arange(1, x_max + 1), "y": np.arange(1, y_max + 1)},
            name=sl.name,
            attrs={"nodata": NO_DATA, "source": sl.source},
        )

    def materialize(self, sl: Slice, x_max: int, y_max: int) -> SliceDataset:
        return self.from_dataarray(sl, self.to_dataarray(sl, x_max, y_max))

    def from_dataarray(self, sl: Slice, da: xr.DataArray) -> SliceDataset:
        """Flatten a dense array into heat triples and attach the point list."""
        da = da.transpose("x", "y")
        xs, ys = np.meshgrid(da["x"].values, da["y"].values, indexing="ij")
        heat = [
            (int(x), int(y), float(v))
            for x, y, v in zip(xs.ravel(), ys.ravel(), da.values.ravel())
        ]
        points = [
            Point(x=obs.x, y=obs.y, value=obs.value, size=obs.size, extras=obs.extras)
            for obs in sl.observations
        ]
        return SliceDataset(heat=heat, points=points)
