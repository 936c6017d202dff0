import pytest

from maze.maze_core import (
    MazeGrid, OutOfBoundsError, InvalidDimensionsError, validate_dimensions, place_exit
)
from utils.constants import PATH, WALL, EXIT
from grid_builders import open_room


def test_new_grid_is_all_walls():
    grid = MazeGrid(7, 5)

    assert grid.cols == 7
    assert grid.rows == 5
    assert grid.count(WALL) == 35
    assert grid.count(PATH) == 0


def test_set_and_read_kind():
    grid = MazeGrid(7, 5)
    grid.set_kind(3, 2, PATH)

    assert grid.kind_at(3, 2) == PATH
    assert grid.kind_at(2, 3) == WALL


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (7, 0), (0, 5), (100, 100)])
def test_out_of_bounds_access_fails_loudly(x, y):
    grid = MazeGrid(7, 5)

    with pytest.raises(OutOfBoundsError):
        grid.kind_at(x, y)
    with pytest.raises(OutOfBoundsError):
        grid.set_kind(x, y, PATH)


def test_out_of_bounds_is_an_index_error():
    with pytest.raises(IndexError):
        MazeGrid(5, 5).kind_at(5, 0)


def test_is_walkable_never_raises():
    grid = open_room(5, 5)

    assert grid.is_walkable(2, 2)
    assert not grid.is_walkable(0, 0)
    assert not grid.is_walkable(-1, 2)
    assert not grid.is_walkable(2, 9)


def test_exit_counts_as_walkable():
    grid = MazeGrid(5, 5)
    grid.set_kind(3, 3, EXIT)

    assert grid.is_walkable(3, 3)


def test_walkable_neighbors():
    grid = open_room(5, 5)

    assert grid.walkable_neighbors(1, 1) == [(2, 1), (1, 2)]
    assert sorted(grid.walkable_neighbors(2, 2)) == [(1, 2), (2, 1), (2, 3), (3, 2)]


@pytest.mark.parametrize("cols, rows", [(5, 5), (41, 31), (7, 99)])
def test_valid_dimensions(cols, rows):
    validate_dimensions(cols, rows)


@pytest.mark.parametrize("cols, rows", [(4, 5), (5, 6), (3, 3), (1, 7), (40, 31)])
def test_invalid_dimensions(cols, rows):
    with pytest.raises(InvalidDimensionsError):
        validate_dimensions(cols, rows)


def test_place_exit_bottom_right_inner_corner():
    grid = MazeGrid(41, 31)

    assert place_exit(grid) == (39, 29)
    assert grid.kind_at(39, 29) == EXIT
    assert grid.count(EXIT) == 1
