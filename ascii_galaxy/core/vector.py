"""Minimal 2D vector value type."""
import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector2:
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, s: float) -> "Vector2":
        return Vector2(self.x * s, self.y * s)

    def __rmul__(self, s: float) -> "Vector2":
        return self.__mul__(s)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalized(self) -> "Vector2":
        """Unit vector in the same direction, or the zero vector."""
        n = self.length()
        if n == 0:
            return Vector2(0.0, 0.0)
        return Vector2(self.x / n, self.y / n)

    def perpendicular(self) -> "Vector2":
        return Vector2(-self.y, self.x)

    def as_tuple(self):
        return (self.x, self.y)


__all__ = ["Vector2"]
