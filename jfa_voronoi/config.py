"""
Run configuration for the Voronoi generator.

@author yisiox
@version October 2026
"""

from typing import NamedTuple, Optional

from .errors import ConfigurationError
from .seeds import DEFAULT_DENSITY

# global defaults
x_dim = 2000
y_dim = 2000

FORMATS = ("p3", "p6", "png")
BACKENDS = ("cpu", "gpu")


class VoronoiConfig(NamedTuple):
    """Configuration for a single diagram."""
    width: int = x_dim
    height: int = y_dim
    density: int = DEFAULT_DENSITY
    format: str = "p6"
    output: str = "-"
    seed: Optional[int] = None
    frames: Optional[str] = None
    backend: str = "cpu"

    @property
    def binary(self) -> bool:
        return self.format == "p6"

    def validate(self) -> "VoronoiConfig":
        """Reject configurations that cannot produce a non-degenerate lattice."""
        if self.width <= 0 or self.height <= 0:
            raise ConfigurationError(
                f"Grid dimensions must be positive, got {self.width}x{self.height}.")
        if self.density <= 0:
            raise ConfigurationError(f"Seed density must be positive, got {self.density}.")
        if self.width // self.density == 0 or self.height // self.density == 0:
            raise ConfigurationError(
                f"Grid {self.width}x{self.height} is too small for a seed density of {self.density}.")
        if self.format not in FORMATS:
            raise ConfigurationError(f"Unknown output format {self.format!r}.")
        if self.format == "png" and self.output == "-":
            raise ConfigurationError("PNG output needs a file path, not stdout.")
        if self.backend not in BACKENDS:
            raise ConfigurationError(f"Unknown backend {self.backend!r}.")
        return self
