"""
Voronoi diagrams computed with the Jump Flooding Algorithm.

@author yisiox
@version October 2026
"""

from .borders import makeBorders
from .config import VoronoiConfig
from .errors import ConfigurationError, GPUUnavailableError, PPMFormatError, VoronoiError
from .flood import JFAVoronoiDiagram, stepSchedule
from .grid import Grid
from .ppm import readPPM, savePNG, writePPM
from .seeds import randomColour, scatterSeeds

__all__ = [
    "ConfigurationError",
    "GPUUnavailableError",
    "Grid",
    "JFAVoronoiDiagram",
    "PPMFormatError",
    "VoronoiConfig",
    "VoronoiError",
    "makeBorders",
    "randomColour",
    "readPPM",
    "savePNG",
    "scatterSeeds",
    "stepSchedule",
    "writePPM",
]
