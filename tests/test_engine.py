"""Unit tests for the advance transition rule."""

import random

import numpy as np
import pytest

from forest_fire.cell import Cell
from forest_fire.engine import advance
from forest_fire.grid import Grid


def random_grid(seed: int, height: int = 8, width: int = 9) -> Grid:
    rng = np.random.default_rng(seed)
    return Grid(rng.integers(0, 3, size=(height, width), dtype=np.int8))


def fire_neighbour_trees(grid: Grid) -> set[tuple[int, int]]:
    cells = set()
    for row in range(grid.height):
        for col in range(grid.width):
            if grid.cell_at(row, col) != Cell.Fire:
                continue
            for r, c in ((row - 1, col), (row, col + 1), (row + 1, col), (row, col - 1)):
                if grid.in_bounds(r, c) and grid.cell_at(r, c) == Cell.Tree:
                    cells.add((r, c))
    return cells


class TestAdvanceInvariants:
    """Properties that hold for any grid and probability."""

    @pytest.mark.parametrize("seed", range(5))
    @pytest.mark.parametrize("p", [0.0, 0.3, 1.0])
    def test_ash_stays_ash_and_fire_decays(self, seed, p):
        grid = random_grid(seed)
        nxt, _ = advance(grid, p, random.Random(seed))
        old, new = grid.cells, nxt.cells
        assert np.all(new[old == Cell.Ash.value] == Cell.Ash.value)
        assert np.all(new[old == Cell.Fire.value] == Cell.Ash.value)

    @pytest.mark.parametrize("seed", range(5))
    def test_trees_only_ignite_next_to_fire(self, seed):
        grid = random_grid(seed)
        nxt, _ = advance(grid, 0.7, random.Random(seed))
        candidates = fire_neighbour_trees(grid)
        for row in range(grid.height):
            for col in range(grid.width):
                if grid.cell_at(row, col) == Cell.Tree and nxt.cell_at(row, col) == Cell.Fire:
                    assert (row, col) in candidates
                if grid.cell_at(row, col) == Cell.Tree:
                    assert nxt.cell_at(row, col) in (Cell.Tree, Cell.Fire)

    @pytest.mark.parametrize("seed", range(5))
    def test_input_grid_not_mutated(self, seed):
        grid = random_grid(seed)
        before = grid.cells.copy()
        advance(grid, 1.0, random.Random(seed))
        assert np.array_equal(grid.cells, before)

    @pytest.mark.parametrize("seed", range(5))
    def test_fire_remains_flag(self, seed):
        grid = random_grid(seed)
        nxt, fire_remains = advance(grid, 0.5, random.Random(seed))
        assert fire_remains == nxt.has_fire()

    def test_same_seed_same_result(self):
        grid = random_grid(3)
        a, _ = advance(grid, 0.5, random.Random(11))
        b, _ = advance(grid, 0.5, random.Random(11))
        assert a == b

    def test_accepts_numpy_generator(self):
        grid = random_grid(1)
        nxt, _ = advance(grid, 0.5, np.random.default_rng(0))
        assert nxt.shape == grid.shape


class TestAdvanceProbabilityBounds:
    """Test cases for the extreme probabilities."""

    @pytest.mark.parametrize("seed", range(5))
    def test_zero_probability_never_ignites(self, seed):
        grid = random_grid(seed)
        nxt, _ = advance(grid, 0.0, random.Random(seed))
        assert nxt.count(Cell.Fire) == 0
        assert nxt.count(Cell.Tree) == grid.count(Cell.Tree)

    @pytest.mark.parametrize("seed", range(5))
    def test_full_probability_ignites_every_neighbour(self, seed):
        grid = random_grid(seed)
        nxt, _ = advance(grid, 1.0, random.Random(seed))
        candidates = fire_neighbour_trees(grid)
        assert {
            (r, c) for r in range(grid.height) for c in range(grid.width)
            if nxt.cell_at(r, c) == Cell.Fire
        } == candidates

    @pytest.mark.parametrize("p", [-0.1, 1.5, float("nan")])
    def test_invalid_probability(self, p):
        with pytest.raises(ValueError):
            advance(Grid.filled(5, 5), p, random.Random(0))


class TestAdvanceWithoutFire:
    """A grid without fire is a fixed point."""

    def test_no_fire_is_noop(self, make_config, sequence_random):
        grid = Grid.create(make_config(points=()))
        rng = sequence_random([0.0])
        nxt, fire_remains = advance(grid, 1.0, rng)
        assert nxt == grid
        assert fire_remains is False
        assert rng.calls == 0

    def test_all_ash_is_noop(self):
        grid = Grid.filled(5, 5, Cell.Ash)
        nxt, fire_remains = advance(grid, 1.0, random.Random(0))
        assert nxt == grid
        assert not fire_remains


class TestAdvanceScenarios:
    """Step-by-step scenarios with known outcomes."""

    def test_corner_ignition_full_probability(self, make_config):
        """5x5 grid ignited at (0, 0) with p=1 spreads one ring per step."""
        grid = Grid.create(make_config(points=[(0, 0)], p=1.0))
        rng = random.Random(0)

        grid, fire_remains = advance(grid, 1.0, rng)
        assert fire_remains
        assert grid.cell_at(0, 0) == Cell.Ash
        assert grid.cell_at(0, 1) == Cell.Fire
        assert grid.cell_at(1, 0) == Cell.Fire
        assert grid.count(Cell.Fire) == 2

        grid, fire_remains = advance(grid, 1.0, rng)
        assert fire_remains
        assert grid.cell_at(0, 0) == Cell.Ash
        assert grid.cell_at(0, 1) == Cell.Ash
        assert grid.cell_at(1, 0) == Cell.Ash
        for point in [(0, 2), (1, 1), (2, 0)]:
            assert grid.cell_at(*point) == Cell.Fire
        assert grid.count(Cell.Fire) == 3

    def test_corner_ignition_burns_whole_grid(self, make_config):
        grid = Grid.create(make_config(points=[(0, 0)]))
        rng = random.Random(0)
        steps = 0
        fire_remains = True
        while fire_remains:
            grid, fire_remains = advance(grid, 1.0, rng)
            steps += 1
        # Farthest cell (4, 4) ignites at step 8 and burns out at step 9
        assert steps == 9
        assert grid.count(Cell.Ash) == 25

    def test_one_draw_per_burning_neighbour(self, sequence_random):
        """A tree next to two fires gets a draw from each, in row-major order."""
        cells = np.zeros((5, 5), dtype=np.int8)
        cells[0, 1] = Cell.Fire.value
        cells[1, 0] = Cell.Fire.value
        grid = Grid(cells)
        # (0, 1): right (0,2), down (1,1), left (0,0); (1, 0): up (0,0), right (1,1), down (2,0)
        rng = sequence_random([0.9, 0.9, 0.9, 0.9, 0.1, 0.9])

        nxt, _ = advance(grid, 0.5, rng)

        assert rng.calls == 6
        assert nxt.cell_at(1, 1) == Cell.Fire
        assert nxt.count(Cell.Fire) == 1

    def test_newly_ignited_tree_does_not_spread_same_step(self, sequence_random):
        cells = np.zeros((5, 5), dtype=np.int8)
        cells[2, 2] = Cell.Fire.value
        grid = Grid(cells)
        rng = sequence_random([0.0])

        nxt, _ = advance(grid, 1.0, rng)

        assert rng.calls == 4
        assert nxt.count(Cell.Fire) == 4
        assert nxt.cell_at(0, 2) == Cell.Tree
