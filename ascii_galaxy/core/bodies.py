"""
Moving bodies of the galaxy field.

Orbiting particles make up the arms and the core; twinkling stars are the
fixed background. Both carry an angle-like value that is kept wrapped into
[0, 2*pi) so it never grows without bound over long runs.
"""
import math
from dataclasses import dataclass

from ..constants import TWO_PI, TWINKLE_FLOOR
from .vector import Vector2


def wrap_angle(angle: float) -> float:
    # single turn; values more than one turn out go through normalize_angle
    if angle >= TWO_PI:
        angle -= TWO_PI
    elif angle < 0.0:
        angle += TWO_PI
        if angle >= TWO_PI:  # -tiny + 2*pi rounds up to 2*pi
            angle = 0.0
    return angle


def normalize_angle(angle: float) -> float:
    """Bring any angle into [0, 2*pi), however many turns away it is."""
    return wrap_angle(math.fmod(angle, TWO_PI))


@dataclass
class OrbitingParticle:
    radius: float
    angle: float
    angular_velocity: float
    brightness: float

    def advance(self, dt: float) -> None:
        self.angle = normalize_angle(self.angle + self.angular_velocity * dt)

    def project(self, center: Vector2, aspect_ratio: float) -> Vector2:
        """Screen position, with x stretched to undo the cell aspect."""
        return center + Vector2(
            self.radius * math.cos(self.angle) * aspect_ratio,
            self.radius * math.sin(self.angle),
        )


@dataclass
class TwinklingStar:
    position: Vector2
    phase: float
    speed: float
    base_brightness: float

    def advance(self, dt: float) -> None:
        self.phase = normalize_angle(self.phase + self.speed * dt)

    def brightness(self) -> float:
        wave = 0.5 + 0.5 * math.sin(self.phase)
        return self.base_brightness * (TWINKLE_FLOOR + (1.0 - TWINKLE_FLOOR) * wave)


__all__ = ["wrap_angle", "normalize_angle", "OrbitingParticle", "TwinklingStar"]
