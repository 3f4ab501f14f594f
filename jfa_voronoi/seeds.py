"""
Scattering of the initial seed cells.

@author yisiox
@version October 2026
"""

import structlog

from .errors import ConfigurationError

logger = structlog.get_logger()

# n * n = approximate number of seeds
DEFAULT_DENSITY = 10


def randomColour(rng):
    """
    Function to draw a random RGB colour, never pure black.

    @param rng numpy Generator supplying the randomness.
    """
    while True:
        colour = tuple(int(c) for c in rng.integers(0, 255, size=3))
        if any(colour):
            return colour


def _jitter(rng, step):
    # sign is either 0 or -1, magnitude in [0, step - 1)
    sign = -int(rng.integers(0, 2))
    if step - 1 <= 0:
        return 0
    return sign * int(rng.integers(0, step - 1))


def scatterSeeds(grid, rng, n=DEFAULT_DENSITY):
    """
    Function to place roughly n * n seeds on a jittered lattice.

    Lattice points start one step in from the origin; each one is pulled
    back towards the origin by a random amount on each axis and the
    resulting cell becomes a seed with a random colour.

    @param grid The grid to seed, modified in place.
    @param rng  numpy Generator supplying the randomness.
    @param n    Lattice density along each axis.
    @return     List of (x, y) seed positions in placement order.
    """
    if n <= 0:
        raise ConfigurationError(f"Seed density must be positive, got {n}.")
    x_step = grid.width // n
    y_step = grid.height // n
    if x_step == 0 or y_step == 0:
        raise ConfigurationError(
            f"Grid {grid.width}x{grid.height} is too small for a seed density of {n}.")

    placed = []
    for x in range(x_step, grid.width, x_step):
        for y in range(y_step, grid.height, y_step):
            nx = min(max(x + _jitter(rng, x_step), 0), grid.width - 1)
            ny = min(max(y + _jitter(rng, y_step), 0), grid.height - 1)
            grid.setSeed(nx, ny, randomColour(rng))
            placed.append((nx, ny))

    logger.debug("Seeds scattered", count=len(placed), density=n,
                 x_step=x_step, y_step=y_step)
    return placed
