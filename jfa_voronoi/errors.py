"""
Exceptions raised by the Voronoi pipeline.

@author yisiox
@version October 2026
"""


class VoronoiError(Exception):
    """Base class for all errors raised by jfa_voronoi."""


class ConfigurationError(VoronoiError, ValueError):
    """Raised when grid dimensions or seed density cannot produce a diagram."""


class PPMFormatError(VoronoiError, ValueError):
    """Raised when a PPM stream cannot be parsed."""


class GPUUnavailableError(VoronoiError, RuntimeError):
    """Raised when the CUDA backend is requested but cupy cannot run."""
