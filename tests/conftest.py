"""Shared test fixtures."""

import matplotlib
import numpy as np
import pytest

matplotlib.use("Agg")

from jfa_voronoi.grid import Grid

RED = (255, 0, 0)
BLUE = (0, 0, 255)
GREEN = (0, 200, 0)


@pytest.fixture
def rng():
    return np.random.default_rng(12345)


@pytest.fixture
def two_seed_grid():
    """4x4 grid seeded red at (1, 1) and blue at (2, 2)."""
    grid = Grid(4, 4)
    grid.setSeed(1, 1, RED)
    grid.setSeed(2, 2, BLUE)
    return grid


@pytest.fixture
def single_seed_grid():
    grid = Grid(16, 16)
    grid.setSeed(5, 9, GREEN)
    return grid
