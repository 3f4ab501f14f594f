"""
Rendering of intermediate flooding frames.

@author yisiox
@version October 2026
"""

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
import structlog

logger = structlog.get_logger()


def displayDiagram(frame, grid, directory, show=False):
    """
    Function to display and save the current state of the diagram.

    Cells that have not been reached yet are drawn black.

    @param frame     The current frame.
    @param grid      The grid being flooded.
    @param directory Directory the frame is saved into.
    @param show      Also open the frame in an interactive window.
    """
    output = np.where(grid.assigned[..., np.newaxis], grid.colors, 0).astype(np.uint8)
    path = Path(directory) / f"voronoi_frame_{frame}.png"

    fig, ax = plt.subplots()
    ax.imshow(output, interpolation="none")
    ax.set_axis_off()
    fig.savefig(path)
    if show:
        plt.show()
    plt.close(fig)

    logger.debug("Frame saved", frame=frame, path=str(path))
    return path


def frameRecorder(directory, show=False):
    """
    Function to build an on_pass callback saving one frame per flood pass.

    @param directory Directory the frames are saved into, created if missing.
    """
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)

    def record(frame, step, grid):
        displayDiagram(frame, grid, directory, show=show)

    return record
