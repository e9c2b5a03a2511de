"""Hexagonal forest grid and the fire-spreading rules."""

from __future__ import annotations

import random
from enum import IntEnum
from typing import Iterator

Cell = tuple[int, int]

# Axial neighbours of (row, col) in the row-major storage layout.
_NEIGHBOR_OFFSETS: tuple[Cell, ...] = (
    (0, -1),
    (1, -1),
    (1, 0),
    (0, 1),
    (-1, 1),
    (-1, 0),
)


class CellState(IntEnum):
    """State of a single hexagonal cell."""

    EMPTY = 0
    TREE = 1
    SMOLDERING = 2
    BURNING = 3
    BURNED = 4


class HexGrid:
    """A hexagonal map of ``r`` rows, each holding ``q`` usable cells.

    Rows are stored with axial coordinates, so every row is ``q + r // 2``
    cells wide and only the slice given by :meth:`row_bounds` is part of
    the map.
    """

    def __init__(self, q: int, r: int) -> None:
        if q < 0 or r < 0:
            raise ValueError("grid dimensions must be non-negative")
        self.rows = r
        self.columns = q + r // 2
        self.cells: list[list[CellState]] = [
            [CellState.EMPTY] * self.columns for _ in range(r)
        ]
        self.alive_trees: set[Cell] = set()
        self.smoldering: set[Cell] = set()
        self.burning: set[Cell] = set()
        self.dead_trees = 0

    def row_bounds(self, row: int) -> range:
        """Return the column range of ``row`` that lies on the map."""
        if not 0 <= row < self.rows:
            raise IndexError(f"row {row} is outside the grid")
        shift = row // 2
        return range(self.rows // 2 - shift, self.columns - shift)

    def _positions(self) -> Iterator[Cell]:
        for row in range(self.rows):
            for col in self.row_bounds(row):
                yield row, col

    def _in_storage(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.columns

    def alive_neighbors(self, row: int, col: int) -> list[Cell]:
        """Return the neighbours of a cell that hold a living tree."""
        result = []
        for d_row, d_col in _NEIGHBOR_OFFSETS:
            n_row, n_col = row + d_row, col + d_col
            if (
                self._in_storage(n_row, n_col)
                and self.cells[n_row][n_col] is CellState.TREE
            ):
                result.append((n_row, n_col))
        return result

    def plant_trees(
        self, density: float, rng: random.Random | None = None
    ) -> HexGrid:
        """Plant trees on a ``density`` fraction of the map and return self."""
        if not 0.0 <= density <= 1.0:
            raise ValueError("density must lie between 0 and 1")
        rng = rng if rng is not None else random.Random()
        capacity = (self.columns - self.rows // 2) * self.rows
        population = int(capacity * density)
        empty = [
            (row, col)
            for row, col in self._positions()
            if self.cells[row][col] is CellState.EMPTY
        ]
        if population > len(empty):
            raise ValueError("not enough empty cells for the requested density")
        for row, col in rng.sample(empty, population):
            self.cells[row][col] = CellState.TREE
            self.alive_trees.add((row, col))
        return self

    def ignite(self, row: int, col: int) -> None:
        """Set a cell smoldering; the fire spreads from it on the next update."""
        if not self._in_storage(row, col):
            raise IndexError(f"cell ({row}, {col}) is outside the grid")
        self.cells[row][col] = CellState.SMOLDERING
        self.smoldering.add((row, col))
        self.alive_trees.discard((row, col))

    def is_burning(self) -> bool:
        """Return True while any cell is smoldering or burning."""
        return bool(self.smoldering or self.burning)

    def update(self) -> None:
        """Advance the fire by one step."""
        new_smoldering: set[Cell] = set()
        new_burning: set[Cell] = set()

        for row, col in self.smoldering:
            for n_row, n_col in self.alive_neighbors(row, col):
                self.cells[n_row][n_col] = CellState.SMOLDERING
                new_smoldering.add((n_row, n_col))
                self.alive_trees.discard((n_row, n_col))
            self.cells[row][col] = CellState.BURNING
            new_burning.add((row, col))

        for row, col in self.burning:
            self.cells[row][col] = CellState.BURNED
            self.dead_trees += 1

        self.smoldering = new_smoldering
        self.burning = new_burning