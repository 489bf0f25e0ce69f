import pytest

pytestmark = pytest.mark.unit

from grovegrid.model import Observation, Slice
from grovegrid.pipeline.materializer import GridMaterializer, presence_map


def make_slice(observations, name="s"):
    return Slice(
        name=name,
        source=f"{name}.csv",
        header=["X", "Y", "Value"],
        observations=[Observation(**o) for o in observations],
    )


def test_presence_map_last_write_wins():
    a = Observation(x=1, y=1, value=1)
    b = Observation(x=1, y=1, value=2)
    assert presence_map([a, b]) == {(1, 1): b}


def test_dense_grid_order_and_sentinel():
    sl = make_slice([{"x": 1, "y": 1, "value": 0}, {"x": 1, "y": 2, "value": 3.5}])
    ds = GridMaterializer().materialize(sl, x_max=2, y_max=2)
    assert ds.heat == [(1, 1, 0.0), (1, 2, 3.5), (2, 1, -1.0), (2, 2, -1.0)]


def test_dense_grid_is_rectangular_for_ragged_slice():
    sl = make_slice([{"x": 3, "y": 1, "value": 4}])
    ds = GridMaterializer().materialize(sl, x_max=3, y_max=4)
    assert len(ds.heat) == 12
    # position (x - 1) * y_max + (y - 1)
    assert ds.heat[(3 - 1) * 4 + (1 - 1)] == (3, 1, 4.0)
    assert sum(1 for _, _, v in ds.heat if v == -1) == 11


def test_duplicates_last_wins_in_grid_but_all_kept_as_points():
    sl = make_slice([
        {"x": 1, "y": 1, "value": 5, "size": 1, "extras": {"n": "first"}},
        {"x": 1, "y": 1, "value": 6, "size": 2, "extras": {"n": "second"}},
    ])
    ds = GridMaterializer().materialize(sl, x_max=1, y_max=1)
    assert ds.heat == [(1, 1, 6.0)]
    assert [p.extras["n"] for p in ds.points] == ["first", "second"]


def test_degraded_coordinates_only_in_points():
    sl = make_slice([{"x": 0, "y": 1, "value": 9}, {"x": 1, "y": 1, "value": 2}])
    ds = GridMaterializer().materialize(sl, x_max=1, y_max=1)
    assert ds.heat == [(1, 1, 2.0)]
    assert [(p.x, p.y) for p in ds.points] == [(0, 1), (1, 1)]


def test_points_carry_observations_verbatim():
    sl = make_slice([{"x": 2, "y": 1, "value": -1, "size": 3, "extras": {"k": "v"}}])
    (point,) = GridMaterializer().materialize(sl, x_max=2, y_max=1).points
    assert point.model_dump() == {"x": 2, "y": 1, "value": -1.0, "size": 3.0, "extras": {"k": "v"}}


def test_dataarray_view():
    sl = make_slice([{"x": 2, "y": 3, "value": 7}])
    da = GridMaterializer().to_dataarray(sl, x_max=2, y_max=3)
    assert da.dims == ("x", "y")
    assert da.shape == (2, 3)
    assert float(da.sel(x=2, y=3)) == 7.0
    assert float(da.sel(x=1, y=1)) == -1.0
    assert da.name == "s"


def test_zero_extent():
    ds = GridMaterializer().materialize(make_slice([]), x_max=0, y_max=0)
    assert ds.heat == []
    assert ds.points == []
