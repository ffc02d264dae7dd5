"""Grid state of the forest fire automaton."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from .cell import Cell

if TYPE_CHECKING:
    from .config import Configuration

logger = logging.getLogger(__name__)

TREE = Cell.Tree.value
FIRE = Cell.Fire.value
ASH = Cell.Ash.value


class OutOfRangeError(IndexError):
    """Raised when a cell outside the grid is addressed."""


class Grid:
    """
    Fixed-size 2-D array of cells addressed as (row, col).

    The underlying array is read-only, so a Grid never changes once built.
    A step produces a new Grid instead.
    """

    def __init__(self, cells: NDArray[np.int8]):
        """
        Wrap an array of cell codes.

        Args:
            cells: 2-D array holding ``Cell`` values; it is copied
        """
        arr = np.array(cells, dtype=np.int8, copy=True)
        if arr.ndim != 2:
            raise ValueError(f"Expected 2D array, got shape={arr.shape}")
        arr.setflags(write=False)
        self._cells = arr

    @classmethod
    def filled(cls, height: int, width: int, cell: Cell = Cell.Tree) -> "Grid":
        return cls(np.full((height, width), cell.value, dtype=np.int8))

    @classmethod
    def create(cls, config: "Configuration") -> "Grid":
        """
        Build the initial grid for a configuration.

        Every cell starts as a tree; in-bounds ignition points are set on
        fire and the rest are dropped without error.
        """
        cells = np.full((config.height, config.width), TREE, dtype=np.int8)
        for row, col in config.ignition_points:
            if 0 <= row < config.height and 0 <= col < config.width:
                cells[row, col] = FIRE
            else:
                logger.debug(
                    f"Ignition point ({row}, {col}) outside {config.height}x{config.width} grid, skipped"
                )
        return cls(cells)

    @property
    def cells(self) -> NDArray[np.int8]:
        """Read-only view of the cell codes."""
        return self._cells

    @property
    def height(self) -> int:
        return self._cells.shape[0]

    @property
    def width(self) -> int:
        return self._cells.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return self._cells.shape

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def cell_at(self, row: int, col: int) -> Cell:
        """
        Read a single cell.

        Raises:
            OutOfRangeError: if (row, col) lies outside the grid
        """
        if not self.in_bounds(row, col):
            raise OutOfRangeError(
                f"Cell ({row}, {col}) outside {self.height}x{self.width} grid"
            )
        return Cell(int(self._cells[row, col]))

    def has_fire(self) -> bool:
        return bool(np.any(self._cells == FIRE))

    def count(self, cell: Cell) -> int:
        return int(np.count_nonzero(self._cells == cell.value))

    def counts(self) -> dict[str, int]:
        """Number of cells in each state, keyed by state name."""
        return {cell.name: self.count(cell) for cell in Cell}

    def labels(self) -> list[list[str]]:
        """Rows of state labels (``TREE``, ``FIRE``, ``ASH``)."""
        return [[Cell(int(v)).label for v in row] for row in self._cells]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return np.array_equal(self._cells, other._cells)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Grid(height={self.height}, width={self.width}, counts={self.counts()})"

    def __str__(self) -> str:
        return "\n".join(
            " ".join(Cell(int(v)).symbol for v in row) for row in self._cells
        )
