"""
ascii-galaxy - animated ASCII spiral galaxy for the terminal.

The simulation core lives in `ascii_galaxy.core` and has no terminal side
effects; `ascii_galaxy.runtime` drives it against a real terminal.
"""

from .__version__ import __version__

from .core_types import GalaxyConfig, Frame
from .core import Vector2, OrbitingParticle, TwinklingStar, GalaxyField

__all__ = [
    "__version__",
    "GalaxyConfig",
    "Frame",
    "Vector2",
    "OrbitingParticle",
    "TwinklingStar",
    "GalaxyField",
]
