import pytest

from wavefront import OccupancyGrid, propagate
from wavefront.render import RenderConfig, render_gradient
from wavefront.utils import ascii_gradient


def test_visited_cells_scale_with_ring():
    grid = OccupancyGrid([[255, 255, 255, 255, 0]])
    result = propagate(grid, (0, 0), (0, 3))
    image = render_gradient(grid, result.max_gradient)
    assert image.tolist() == [[50, 100, 150, 200, 0]]


def test_obstacles_and_unvisited_cells_keep_raw_intensity():
    grid = OccupancyGrid([[255, 255, 7, 255, 255]])
    result = propagate(grid, (0, 0), (0, 1))
    image = render_gradient(grid, result.max_gradient)
    assert image.tolist() == [[100, 200, 7, 255, 255]]


def test_unreached_value_overrides_unvisited_free_cells():
    grid = OccupancyGrid([[255, 0, 255]])
    result = propagate(grid, (0, 0), (0, 2))
    assert not result.reachable
    image = render_gradient(grid, result.max_gradient, RenderConfig(unreached_value=30))
    assert image.tolist() == [[200, 0, 30]]


def test_zero_max_gradient_returns_raw_copy():
    grid = OccupancyGrid([[255, 0]])
    image = render_gradient(grid, 0)
    assert image.tolist() == [[255, 0]]
    image[0, 0] = 1
    assert grid.raw[0, 0] == 255


@pytest.mark.parametrize("scale", [0, 255])
def test_scale_must_stay_below_white(scale):
    with pytest.raises(ValueError):
        RenderConfig(scale=scale)


def test_ascii_gradient_marks_walls_rings_and_center():
    grid = OccupancyGrid.from_passable([[True, True, False], [True, True, True]])
    propagate(grid, (0, 0), (1, 1))
    assert ascii_gradient(grid) == "12#\n22."
    assert ascii_gradient(grid, center=(0, 0), radius=1) == "@2\n22"
