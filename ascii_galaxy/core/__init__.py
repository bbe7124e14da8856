"""Simulation core: bodies, layout, and frame compositing."""

from .vector import Vector2
from .bodies import OrbitingParticle, TwinklingStar
from .galaxy import GalaxyField

__all__ = ["Vector2", "OrbitingParticle", "TwinklingStar", "GalaxyField"]
