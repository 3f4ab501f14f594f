"""
Post-pass drawing cell borders and corners onto a flooded grid.

@author yisiox
@version October 2026
"""

import numba
import numpy as np
import structlog

logger = structlog.get_logger()

BORDER_COLOUR = (255, 255, 255)
BACKGROUND_COLOUR = (0, 0, 0)
CORNER_COLOUR = (251, 72, 196)

# own seed plus at most 8 neighbours
SEEN_CAPACITY = 9


@numba.njit(cache=True)
def _seen(seen, count, sx, sy):
    for k in range(count):
        if seen[k, 0] == sx and seen[k, 1] == sy:
            return True
    return False


@numba.njit(cache=True)
def _paint(colors, x, y, colour):
    colors[y, x, 0] = colour[0]
    colors[y, x, 1] = colour[1]
    colors[y, x, 2] = colour[2]


@numba.njit(cache=True)
def bordersPass(colors, seeds, border, background, corner):
    height, width = seeds.shape[0], seeds.shape[1]
    seen = np.zeros((SEEN_CAPACITY, 2), dtype=np.int64)
    for y in range(1, height - 1):
        for x in range(1, width - 1):
            sx = seeds[y, x, 0]
            sy = seeds[y, x, 1]
            seen[0, 0] = sx
            seen[0, 1] = sy
            count = 1
            is_border = False

            for i in range(-1, 2):
                for j in range(-1, 2):
                    qx = seeds[y + j, x + i, 0]
                    qy = seeds[y + j, x + i, 1]
                    if qx != sx or qy != sy:
                        is_border = True
                        if not _seen(seen, count, qx, qy):
                            seen[count, 0] = qx
                            seen[count, 1] = qy
                            count += 1

            if is_border:
                _paint(colors, x, y, border)
            else:
                _paint(colors, x, y, background)

            # three or more distinct seeds meet here
            if count > 2:
                _paint(colors, x, y, corner)


def makeBorders(grid):
    """
    Function to recolour the interior of a flooded grid.

    Cells whose 3x3 neighbourhood spans more than one seed become white
    borders, cells touching three or more seeds become corners, the rest
    are cleared to black. Seed fields and the outer one-cell frame are
    left untouched.

    @param grid A fully flooded grid, recoloured in place.
    """
    bordersPass(grid.colors, grid.seeds,
                np.array(BORDER_COLOUR, dtype=np.uint8),
                np.array(BACKGROUND_COLOUR, dtype=np.uint8),
                np.array(CORNER_COLOUR, dtype=np.uint8))
    logger.debug("Borders drawn", width=grid.width, height=grid.height)
    return grid
