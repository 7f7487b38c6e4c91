import pytest

from voxelcraft.grid import Grid2D


def test_set_then_get_returns_value():
    grid = Grid2D(4)
    grid.set(1, 2, 7)
    assert grid.get(1, 2) == 7


def test_cells_are_independent():
    grid = Grid2D(4)
    grid.set(1, 2, 7)
    assert grid.get(2, 1) == 0


def test_fill_value_is_initial_content():
    grid = Grid2D(3, fill=5)
    assert all(grid.get(x, z) == 5 for x in range(3) for z in range(3))


def test_set_all_overwrites_every_cell():
    grid = Grid2D(3)
    grid.set(0, 0, 9)
    grid.set_all(4)
    assert all(grid.get(x, z) == 4 for x in range(3) for z in range(3))


def test_max_value_finds_largest():
    grid = Grid2D(5)
    grid.set(3, 4, 12)
    grid.set(0, 1, 8)
    assert grid.max_value() == 12


def test_last_cell_is_reachable():
    grid = Grid2D(16)
    grid.set(15, 15, 3)
    assert grid.get(15, 15) == 3


@pytest.mark.parametrize("x, z", [(-1, 0), (0, -1), (4, 0), (0, 4)])
def test_out_of_range_raises(x, z):
    grid = Grid2D(4)
    with pytest.raises(IndexError):
        grid.get(x, z)


def test_zero_width_rejected():
    with pytest.raises(ValueError):
        Grid2D(0)