"""Core lightweight types shared across modules.
Provides simple dataclasses so the core and runtime layers can interoperate.
"""
from dataclasses import dataclass

import numpy as np

from .constants import (
    ASPECT_RATIO,
    CORE_PARTICLES,
    DEFAULT_SEED,
    NUM_ARMS,
    NUM_STARS,
    PARTICLES_PER_ARM,
)


@dataclass
class GalaxyConfig:
    num_arms: int = NUM_ARMS
    particles_per_arm: int = PARTICLES_PER_ARM
    core_particles: int = CORE_PARTICLES
    num_stars: int = NUM_STARS
    seed: int = DEFAULT_SEED
    aspect_ratio: float = ASPECT_RATIO


@dataclass
class Frame:
    """A rasterized frame: glyph grid plus the intensity it was built from."""
    glyphs: np.ndarray
    intensity: np.ndarray

    @property
    def height(self) -> int:
        return self.glyphs.shape[0]

    @property
    def width(self) -> int:
        return self.glyphs.shape[1]

    def rows(self):
        return ["".join(row) for row in self.glyphs]


__all__ = ["GalaxyConfig", "Frame"]
