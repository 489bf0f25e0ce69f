"""Grid stage contract.

Enforces the guarantee that after materialization every slice carries a
fully rectangular dense grid in x-outer, y-inner order.
"""

import xarray as xr

from grovegrid.contracts.base import require
from grovegrid.model import SliceDataset


def assert_grid(dataset: SliceDataset, x_max: int, y_max: int) -> None:
    """Enforce grid stage contract on one SliceDataset.

    Raises
    ------
    ContractViolation
        If the dense grid has the wrong size or order
    """
    require(
        len(dataset.heat) == x_max * y_max,
        f"Grid contract violated: {len(dataset.heat)} cells, expected {x_max * y_max}",
    )
    if dataset.heat:
        require(
            dataset.heat[0][:2] == (1, 1) and dataset.heat[-1][:2] == (x_max, y_max),
            "Grid contract violated: dense grid does not span (1, 1)..(x_max, y_max)",
        )
    if x_max > 0 and y_max > 1:
        require(
            dataset.heat[1][:2] == (1, 2),
            "Grid contract violated: dense grid is not x-outer, y-inner",
        )


def assert_gridded(da: xr.DataArray, x_max: int, y_max: int) -> None:
    """Enforce grid stage contract on the array view of a dense grid.

    Raises
    ------
    ContractViolation
        If dims, coordinates or shape are wrong
    """
    require(
        da.dims == ("x", "y"),
        f"Grid contract violated: dims {da.dims}, expected ('x', 'y')",
    )
    require(
        da.shape == (x_max, y_max),
        f"Grid contract violated: shape {da.shape}, expected {(x_max, y_max)}",
    )
    if x_max and y_max:
        require(
            int(da["x"][0]) == 1 and int(da["y"][0]) == 1,
            "Grid contract violated: coordinates must start at 1",
        )
