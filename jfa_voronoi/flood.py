"""
Jump flooding of seed ownership across the grid.

@author yisiox
@version October 2026
"""

import numba
import structlog

logger = structlog.get_logger()


def stepSchedule(size):
    """
    Function to compute the step sizes of 1+JFA for a grid of the given size.

    A single step-1 pass comes first, followed by the classic halving
    sequence size/2, size/4, ..., size/size.

    @param size The larger of the grid dimensions.
    """
    steps = []
    kd = 1
    while kd <= size:
        steps.append(1 if kd == 1 else size // kd)
        kd *= 2
    return steps


@numba.njit(cache=True)
def squaredDistance(x1, y1, x2, y2):
    dx = x1 - x2
    dy = y1 - y2
    return dx * dx + dy * dy


@numba.njit(cache=True)
def _adopt(colors, seeds, assigned, x, y, qx, qy):
    colors[y, x, 0] = colors[qy, qx, 0]
    colors[y, x, 1] = colors[qy, qx, 1]
    colors[y, x, 2] = colors[qy, qx, 2]
    seeds[y, x, 0] = seeds[qy, qx, 0]
    seeds[y, x, 1] = seeds[qy, qx, 1]
    assigned[y, x] = True


@numba.njit(cache=True)
def voronoiPass(step, colors, seeds, assigned):
    """
    Single in-place pass of JFA at the given step.

    Cells are visited in row-major order and every write is visible to
    the comparisons that follow it, within this pass as well as later ones.
    """
    height, width = assigned.shape
    for y in range(height):
        for x in range(width):
            # neighbours, including the cell itself
            for i in range(-step, step + 1, step):
                if x + i < 0 or x + i >= width:
                    continue
                for j in range(-step, step + 1, step):
                    if y + j < 0 or y + j >= height:
                        continue
                    qx = x + i
                    qy = y + j
                    if not assigned[qy, qx]:
                        continue

                    # populate an empty cell from its neighbour
                    if not assigned[y, x]:
                        _adopt(colors, seeds, assigned, x, y, qx, qy)

                    # take over the neighbour's seed if it is strictly closer
                    curr_dist = squaredDistance(x, y, seeds[y, x, 0], seeds[y, x, 1])
                    jump_dist = squaredDistance(x, y, seeds[qy, qx, 0], seeds[qy, qx, 1])
                    if jump_dist < curr_dist:
                        _adopt(colors, seeds, assigned, x, y, qx, qy)


def JFAVoronoiDiagram(grid, on_pass=None):
    """
    Function to flood every cell of the grid with its (approximately) nearest seed.

    The 1+JFA schedule is built from the larger grid dimension. Should any
    cell still be unreached afterwards, step-1 passes follow until none is.

    @param grid    Grid with its seed cells set, modified in place.
    @param on_pass Optional callback on_pass(frame, step, grid) invoked after each pass.
    """
    steps = stepSchedule(max(grid.width, grid.height))
    logger.info("Flooding grid", width=grid.width, height=grid.height, passes=len(steps))
    frame = 0
    for frame, step in enumerate(steps, start=1):
        voronoiPass(step, grid.colors, grid.seeds, grid.assigned)
        logger.debug("Flood pass complete", frame=frame, step=step,
                     unassigned=int((~grid.assigned).sum()))
        if on_pass is not None:
            on_pass(frame, step, grid)

    # halved strides of a non power of two size cannot reach every offset
    while grid.assigned.any() and not grid.assigned.all():
        frame += 1
        voronoiPass(1, grid.colors, grid.seeds, grid.assigned)
        logger.debug("Completion pass", frame=frame,
                     unassigned=int((~grid.assigned).sum()))
        if on_pass is not None:
            on_pass(frame, 1, grid)
    return grid
