"""Tests for seed scattering."""

import numpy as np
import pytest

from jfa_voronoi.errors import ConfigurationError
from jfa_voronoi.grid import Grid
from jfa_voronoi.seeds import randomColour, scatterSeeds


class ScriptedRng:
    """Stand-in generator replaying fixed colour draws."""

    def __init__(self, draws):
        self.draws = list(draws)

    def integers(self, low, high, size=None):
        return np.array(self.draws.pop(0))


class TestRandomColour:
    """Test colour selection."""

    def test_never_black(self, rng):
        colours = [randomColour(rng) for _ in range(2000)]
        assert (0, 0, 0) not in colours
        assert all(0 <= c < 255 for colour in colours for c in colour)

    def test_redraws_black(self):
        rng = ScriptedRng([[0, 0, 0], [0, 0, 0], [0, 7, 0]])
        assert randomColour(rng) == (0, 7, 0)


class TestScatterSeeds:
    """Test jittered lattice placement."""

    def test_seed_count(self, rng):
        """A 100x100 grid with density 10 has a 9x9 lattice."""
        grid = Grid(100, 100)
        placed = scatterSeeds(grid, rng, n=10)

        assert len(placed) == 81
        assert len(set(placed)) == 81
        assert sorted(grid.seedPositions()) == sorted(placed)

    def test_jitter_bounds(self, rng):
        """Each seed sits on or up to step - 2 cells before its lattice point."""
        grid = Grid(100, 60)
        placed = scatterSeeds(grid, rng, n=10)

        lattice = [(x, y) for x in range(10, 100, 10) for y in range(6, 60, 6)]
        for (lx, ly), (sx, sy) in zip(lattice, placed):
            assert lx - 8 <= sx <= lx
            assert ly - 4 <= sy <= ly

    def test_seeds_are_coloured(self, rng):
        grid = Grid(50, 50)
        for x, y in scatterSeeds(grid, rng, n=5):
            assert grid.isAssigned(x, y)
            assert grid.getSeed(x, y) == (x, y)
            assert any(grid.getColor(x, y))

    def test_unselected_cells_untouched(self, rng):
        grid = Grid(50, 50)
        placed = scatterSeeds(grid, rng, n=5)

        assert grid.assigned.sum() == len(placed)
        assert np.count_nonzero(grid.colors.any(axis=2)) == len(placed)

    def test_unit_step_has_no_jitter(self, rng):
        grid = Grid(10, 10)
        placed = scatterSeeds(grid, rng, n=10)

        assert placed == [(x, y) for x in range(1, 10) for y in range(1, 10)]

    def test_reproducible(self):
        first = Grid(80, 80)
        second = Grid(80, 80)
        scatterSeeds(first, np.random.default_rng(7), n=8)
        scatterSeeds(second, np.random.default_rng(7), n=8)

        np.testing.assert_array_equal(first.colors, second.colors)
        np.testing.assert_array_equal(first.seeds, second.seeds)

    def test_different_seeds(self):
        first = Grid(80, 80)
        second = Grid(80, 80)
        scatterSeeds(first, np.random.default_rng(1), n=8)
        scatterSeeds(second, np.random.default_rng(2), n=8)

        assert not np.array_equal(first.colors, second.colors)

    @pytest.mark.parametrize("width, height, n", [(5, 100, 10), (100, 5, 10), (100, 100, 0)])
    def test_degenerate_lattice(self, rng, width, height, n):
        with pytest.raises(ConfigurationError):
            scatterSeeds(Grid(width, height), rng, n=n)
