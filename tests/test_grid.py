import random

import pytest

from pyrohex.grid import CellState, HexGrid


def all_positions(grid):
    return {
        (row, col) for row in range(grid.rows) for col in grid.row_bounds(row)
    }


def test_storage_shape():
    grid = HexGrid(4, 6)
    assert grid.rows == 6
    assert grid.columns == 7
    assert len(grid.cells) == 6
    assert all(len(row) == grid.columns for row in grid.cells)
    assert all(cell is CellState.EMPTY for row in grid.cells for cell in row)


def test_negative_dimensions_rejected():
    with pytest.raises(ValueError):
        HexGrid(-1, 3)


@pytest.mark.parametrize("q,r", [(4, 6), (5, 7), (3, 1), (10, 20)])
def test_row_bounds_hold_q_cells_within_storage(q, r):
    grid = HexGrid(q, r)
    for row in range(r):
        bounds = grid.row_bounds(row)
        assert len(bounds) == q
        assert bounds.start >= 0
        assert bounds.stop <= grid.columns


def test_row_bounds_out_of_range():
    grid = HexGrid(3, 3)
    with pytest.raises(IndexError):
        grid.row_bounds(3)


def test_full_density_fills_every_cell():
    grid = HexGrid(4, 6).plant_trees(1.0, random.Random(1))
    positions = all_positions(grid)
    assert grid.alive_trees == positions
    for row, col in positions:
        assert grid.cells[row][col] is CellState.TREE


def test_zero_density_plants_nothing():
    grid = HexGrid(4, 6).plant_trees(0.0, random.Random(1))
    assert grid.alive_trees == set()


def test_half_density_count_and_placement():
    grid = HexGrid(4, 6).plant_trees(0.5, random.Random(3))
    assert len(grid.alive_trees) == 12
    assert grid.alive_trees <= all_positions(grid)


def test_plant_trees_returns_self():
    grid = HexGrid(3, 3)
    assert grid.plant_trees(0.5, random.Random(0)) is grid


@pytest.mark.parametrize("density", [-0.1, 1.5])
def test_invalid_density(density):
    with pytest.raises(ValueError):
        HexGrid(3, 3).plant_trees(density, random.Random(0))


def test_planting_is_reproducible():
    first = HexGrid(6, 8).plant_trees(0.4, random.Random(42))
    second = HexGrid(6, 8).plant_trees(0.4, random.Random(42))
    assert first.alive_trees == second.alive_trees


def test_interior_cell_has_six_neighbours():
    grid = HexGrid(6, 6).plant_trees(1.0, random.Random(0))
    row = 3
    col = grid.row_bounds(row).start + 2
    neighbours = grid.alive_neighbors(row, col)
    assert len(neighbours) == 6
    assert len(set(neighbours)) == 6
    assert (row, col) not in neighbours


def test_neighbourhood_is_symmetric():
    grid = HexGrid(5, 5).plant_trees(1.0, random.Random(0))
    for cell in all_positions(grid):
        for other in grid.alive_neighbors(*cell):
            assert cell in grid.alive_neighbors(*other)


def test_neighbours_only_alive_trees():
    grid = HexGrid(5, 5)
    assert grid.alive_neighbors(2, 2) == []


def test_ignite_out_of_bounds():
    grid = HexGrid(3, 3)
    with pytest.raises(IndexError):
        grid.ignite(5, 0)


def test_single_update_spreads_to_neighbours():
    grid = HexGrid(6, 6).plant_trees(1.0, random.Random(0))
    row = 3
    col = grid.row_bounds(row).start + 2
    neighbours = grid.alive_neighbors(row, col)
    grid.ignite(row, col)
    assert grid.cells[row][col] is CellState.SMOLDERING
    grid.update()
    assert grid.cells[row][col] is CellState.BURNING
    assert grid.smoldering == set(neighbours)
    for n_row, n_col in neighbours:
        assert grid.cells[n_row][n_col] is CellState.SMOLDERING
        assert (n_row, n_col) not in grid.alive_trees
    grid.update()
    assert grid.cells[row][col] is CellState.BURNED
    assert grid.dead_trees == 1


def test_full_forest_burns_down():
    grid = HexGrid(5, 7).plant_trees(1.0, random.Random(0))
    capacity = len(all_positions(grid))
    grid.ignite(0, grid.row_bounds(0).start)
    while grid.is_burning():
        grid.update()
    assert grid.alive_trees == set()
    assert grid.dead_trees == capacity
    for row, col in all_positions(grid):
        assert grid.cells[row][col] is CellState.BURNED


def test_isolated_tree_does_not_spread():
    grid = HexGrid(5, 5)
    grid.cells[0][4] = CellState.TREE
    grid.alive_trees.add((0, 4))
    grid.ignite(4, 1)
    while grid.is_burning():
        grid.update()
    assert grid.alive_trees == {(0, 4)}
    assert grid.cells[0][4] is CellState.TREE
    assert grid.dead_trees == 1