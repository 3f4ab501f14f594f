"""
Command line driver: seed, flood, draw borders, encode.

@author yisiox
@version October 2026
"""

import argparse
import sys
import time

import matplotlib
import numpy as np
import structlog

from .borders import makeBorders
from .config import BACKENDS, FORMATS, VoronoiConfig
from .errors import VoronoiError
from .flood import JFAVoronoiDiagram
from .grid import Grid
from .log import configureLogging
from .ppm import savePNG, writePPM
from .seeds import scatterSeeds

logger = structlog.get_logger()


def buildParser():
    defaults = VoronoiConfig()
    parser = argparse.ArgumentParser(
        prog="jfa-voronoi",
        description="Generate a Voronoi diagram with the Jump Flooding Algorithm.")
    parser.add_argument("--width", type=int, default=defaults.width)
    parser.add_argument("--height", type=int, default=defaults.height)
    parser.add_argument("-n", "--density", type=int, default=defaults.density,
                        help="seeds per axis of the jittered lattice")
    parser.add_argument("--format", choices=FORMATS, default=defaults.format)
    parser.add_argument("-o", "--output", default=defaults.output,
                        help="output path, '-' for stdout")
    parser.add_argument("--seed", type=int, default=None,
                        help="random seed, defaults to the current time")
    parser.add_argument("--frames", default=None, metavar="DIR",
                        help="save a PNG of every flood pass into DIR")
    parser.add_argument("--backend", choices=BACKENDS, default=defaults.backend)
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def generate(config, rng):
    """
    Function to produce a finished diagram for the given configuration.

    @param config A validated VoronoiConfig.
    @param rng    numpy Generator used for seed placement and colours.
    """
    grid = Grid(config.width, config.height)
    scatterSeeds(grid, rng, config.density)

    on_pass = None
    if config.frames:
        from .display import frameRecorder
        on_pass = frameRecorder(config.frames)

    if config.backend == "gpu":
        from .gpu import gpuVoronoiDiagram
        gpuVoronoiDiagram(grid, on_pass)
    else:
        JFAVoronoiDiagram(grid, on_pass)

    makeBorders(grid)
    return grid


def write(grid, config):
    if config.format == "png":
        savePNG(grid, config.output)
    elif config.output == "-":
        writePPM(grid, sys.stdout.buffer, binary=config.binary)
        sys.stdout.buffer.flush()
    else:
        with open(config.output, "wb") as f:
            writePPM(grid, f, binary=config.binary)


# driver code
def main(argv=None):
    parser = buildParser()
    args = parser.parse_args(argv)
    configureLogging(args.verbose)
    # frames and PNGs are only ever written to files
    matplotlib.use("Agg")

    seed = args.seed if args.seed is not None else time.time_ns()
    config = VoronoiConfig(
        width=args.width, height=args.height, density=args.density,
        format=args.format, output=args.output, seed=seed,
        frames=args.frames, backend=args.backend)

    try:
        config.validate()
        grid = generate(config, np.random.default_rng(seed))
        write(grid, config)
    except VoronoiError as e:
        logger.error("Generation failed", error=str(e))
        return 2

    logger.info("Diagram written", output=config.output, format=config.format, seed=seed)
    return 0


if __name__ == "__main__":
    sys.exit(main())
