"""
Galaxy field
Owns the particle and star populations, generates their initial layout from a
seeded generator, advances simulation time and rasterizes the current state.
"""
import logging
import math
from typing import List, Optional

import numpy as np

from ..constants import (
    ARM_ANGLE_JITTER,
    ARM_INNER_RADIUS,
    ARM_ORBIT_SPEED,
    ARM_RADIAL_EXTENT,
    ARM_WINDING,
    CORE_BRIGHTNESS_RANGE,
    CORE_ORBIT_SPEED,
    CORE_RADIUS_RANGE,
    MIN_RADIUS,
    STAR_BRIGHTNESS_RANGE,
    STAR_SPEED_RANGE,
    TWO_PI,
)
from ..core_types import Frame, GalaxyConfig
from . import compositor
from .bodies import OrbitingParticle, TwinklingStar, normalize_angle
from .vector import Vector2

logger = logging.getLogger(__name__)


class GalaxyField:
    """A two-armed spiral galaxy on a fixed-size character grid."""

    def __init__(self, width: int, height: int, config: Optional[GalaxyConfig] = None):
        self.config = config if config else GalaxyConfig()
        self.width = max(1, int(width))
        self.height = max(1, int(height))
        self.center = Vector2(self.width / 2.0, self.height / 2.0)
        self.aspect_ratio = self.config.aspect_ratio
        self.particles: List[OrbitingParticle] = []
        self.stars: List[TwinklingStar] = []
        self._time = 0.0
        self._rng = np.random.default_rng(self.config.seed)

        # draw order matters: arms, then core, then stars
        self._init_spiral_arms()
        self._init_core()
        self._init_background_stars()
        logger.debug(
            "Galaxy field %dx%d: %d particles, %d stars (seed=%s)",
            self.width, self.height, len(self.particles), len(self.stars), self.config.seed,
        )

    @property
    def time(self) -> float:
        """Accumulated simulation time."""
        return self._time

    def _uniform(self, low: float, high: float) -> float:
        return float(self._rng.uniform(low, high))

    def _init_spiral_arms(self):
        n = self.config.particles_per_arm
        for arm in range(self.config.num_arms):
            arm_offset = arm * math.pi
            for i in range(n):
                t = i / float(n)
                base_radius = ARM_INNER_RADIUS + ARM_RADIAL_EXTENT * t
                spiral_angle = arm_offset + ARM_WINDING * t

                # spread widens towards the rim
                radius_variation = self._uniform(-1.0, 1.0) * (0.5 + 1.5 * t)
                angle_variation = self._uniform(-ARM_ANGLE_JITTER, ARM_ANGLE_JITTER)

                radius = max(MIN_RADIUS, base_radius + radius_variation)
                self.particles.append(OrbitingParticle(
                    radius=radius,
                    angle=normalize_angle(spiral_angle + angle_variation),
                    angular_velocity=ARM_ORBIT_SPEED / math.sqrt(radius),
                    brightness=0.3 + 0.7 * (1.0 - 0.6 * t),
                ))

    def _init_core(self):
        for _ in range(self.config.core_particles):
            radius = self._uniform(*CORE_RADIUS_RANGE)
            angle = self._uniform(0.0, TWO_PI)
            self.particles.append(OrbitingParticle(
                radius=radius,
                angle=normalize_angle(angle),
                angular_velocity=CORE_ORBIT_SPEED / math.sqrt(radius + 0.5),
                brightness=self._uniform(*CORE_BRIGHTNESS_RANGE),
            ))

    def _init_background_stars(self):
        for _ in range(self.config.num_stars):
            x = self._uniform(0.0, self.width)
            y = self._uniform(0.0, self.height)
            self.stars.append(TwinklingStar(
                position=Vector2(x, y),
                phase=normalize_angle(self._uniform(0.0, TWO_PI)),
                speed=self._uniform(*STAR_SPEED_RANGE),
                base_brightness=self._uniform(*STAR_BRIGHTNESS_RANGE),
            ))

    def update(self, dt: float):
        self._time += dt
        for p in self.particles:
            p.advance(dt)
        for s in self.stars:
            s.advance(dt)

    def rasterize(self) -> Frame:
        """Composite the current state into a fresh frame."""
        frame = compositor.blank_frame(self.width, self.height)
        compositor.draw_stars(frame, self.stars)
        compositor.accumulate_particles(frame, self.particles, self.center, self.aspect_ratio)
        compositor.apply_intensity(frame)
        compositor.draw_core(frame, self.center)
        return frame

    def render(self, elapsed_real_seconds: float = 0.0) -> str:
        return compositor.serialize(self.rasterize(), elapsed_real_seconds)


__all__ = ["GalaxyField"]
