"""
Raster the diagram is computed on.

@author yisiox
@version October 2026
"""

import numpy as np

from .errors import ConfigurationError


class Grid:
    """
    Dense row-major raster of cells. Every cell carries a colour, the
    coordinate of the seed it currently believes is nearest, and a flag
    recording whether that seed is meaningful yet.

    All arrays are indexed [y, x]; seed coordinates are stored as (x, y).
    """

    def __init__(self, width, height):
        if isinstance(width, bool) or isinstance(height, bool) \
                or not isinstance(width, (int, np.integer)) \
                or not isinstance(height, (int, np.integer)):
            raise ConfigurationError(f"Grid dimensions must be integers, got {width!r}x{height!r}.")
        if width <= 0 or height <= 0:
            raise ConfigurationError(f"Grid dimensions must be positive, got {width}x{height}.")
        self.width = int(width)
        self.height = int(height)
        self.colors = np.zeros((self.height, self.width, 3), dtype=np.uint8)
        self.seeds = np.zeros((self.height, self.width, 2), dtype=np.int64)
        self.assigned = np.zeros((self.height, self.width), dtype=np.bool_)

    def __repr__(self):
        return f"Grid({self.width}x{self.height}, seeds={len(self.seedPositions())})"

    def contains(self, x, y):
        return 0 <= x < self.width and 0 <= y < self.height

    def getColor(self, x, y):
        return tuple(int(c) for c in self.colors[y, x])

    def getSeed(self, x, y):
        return int(self.seeds[y, x, 0]), int(self.seeds[y, x, 1])

    def isAssigned(self, x, y):
        return bool(self.assigned[y, x])

    def setSeed(self, x, y, colour):
        """
        Function to mark a cell as an original seed.

        @param x, y   Coordinate of the seed cell.
        @param colour RGB triple the seed's region is painted with.
        """
        self.colors[y, x] = colour
        self.seeds[y, x] = (x, y)
        self.assigned[y, x] = True

    def seedPositions(self):
        """
        Function to list the cells that own themselves, i.e. the original seeds.
        """
        xs = np.arange(self.width)[np.newaxis, :]
        ys = np.arange(self.height)[:, np.newaxis]
        own = self.assigned & (self.seeds[..., 0] == xs) & (self.seeds[..., 1] == ys)
        return [(int(x), int(y)) for y, x in zip(*np.nonzero(own))]

    def copy(self):
        other = Grid(self.width, self.height)
        other.colors[...] = self.colors
        other.seeds[...] = self.seeds
        other.assigned[...] = self.assigned
        return other

    def asImage(self):
        """
        Function to expose the colour channels as an (height, width, 3) uint8 array.
        """
        return self.colors
