"""Tests for the CUDA flood and its seed encoding."""

import numpy as np
import pytest

from jfa_voronoi import gpu
from jfa_voronoi.errors import GPUUnavailableError
from jfa_voronoi.flood import JFAVoronoiDiagram
from jfa_voronoi.grid import Grid
from jfa_voronoi.seeds import scatterSeeds

from .conftest import BLUE, RED


def gpu_available():
    try:
        gpu._cupy()
    except GPUUnavailableError:
        return False
    return True


requires_gpu = pytest.mark.skipif(not gpu_available(), reason="no usable CUDA device")


class TestSeedEncoding:
    """Test flat index conversion, no device required."""

    def test_encode(self):
        grid = Grid(4, 3)
        grid.setSeed(1, 2, RED)
        flat = gpu.encodeSeeds(grid)

        assert flat.shape == (12,)
        assert flat[2 * 4 + 1] == 2 * 4 + 1
        assert (np.delete(flat, 9) == -1).all()

    def test_decode(self):
        grid = Grid(4, 3)
        grid.setSeed(1, 2, RED)
        grid.setSeed(3, 0, BLUE)
        owners = np.full(12, 9, dtype=np.int64)
        owners[:4] = 3
        owners[5] = -1
        gpu.decodeSeeds(grid, owners)

        assert grid.getSeed(0, 0) == (3, 0)
        assert grid.getColor(0, 0) == BLUE
        assert grid.getSeed(2, 2) == (1, 2)
        assert grid.getColor(2, 2) == RED
        assert not grid.isAssigned(1, 1)
        assert grid.getColor(1, 1) == (0, 0, 0)


@requires_gpu
class TestGPUVoronoiDiagram:

    def test_matches_cpu_closely(self, rng):
        grid = Grid(128, 128)
        scatterSeeds(grid, rng, n=8)
        cpu = JFAVoronoiDiagram(grid.copy())
        gpu.gpuVoronoiDiagram(grid)

        assert grid.assigned.all()
        same = (grid.seeds == cpu.seeds).all(axis=2)
        assert same.mean() > 0.99
