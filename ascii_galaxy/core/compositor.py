"""
Frame compositor
Turns simulation state into a glyph grid and serializes it to a text buffer.

Passes run in a fixed order and each may overwrite the previous one:
background stars, particle intensity accumulation, intensity-to-glyph
mapping, and finally the core marker, which always wins.
"""
import math
from typing import Iterable, Sequence

import numpy as np

from ..constants import (
    BLANK,
    CORE_GLYPH,
    CORE_LEFT,
    CORE_RIGHT,
    GRADIENT,
    INTENSITY_SCALE,
    INTENSITY_THRESHOLD,
    STAR_GLYPHS,
)
from ..core_types import Frame
from .bodies import OrbitingParticle, TwinklingStar
from .vector import Vector2


def blank_frame(width: int, height: int) -> Frame:
    glyphs = np.full((height, width), BLANK, dtype="<U1")
    intensity = np.zeros((height, width), dtype=np.float64)
    return Frame(glyphs=glyphs, intensity=intensity)


def star_glyph(brightness: float) -> str:
    """Glyph for a star of the given brightness, or blank when too dim."""
    for threshold, glyph in STAR_GLYPHS:
        if brightness > threshold:
            return glyph
    return BLANK


def draw_stars(frame: Frame, stars: Iterable[TwinklingStar]) -> None:
    for star in stars:
        sx = math.floor(star.position.x)
        sy = math.floor(star.position.y)
        if 0 <= sx < frame.width and 0 <= sy < frame.height:
            glyph = star_glyph(star.brightness())
            if glyph != BLANK:
                frame.glyphs[sy, sx] = glyph


def accumulate_particles(
    frame: Frame,
    particles: Sequence[OrbitingParticle],
    center: Vector2,
    aspect_ratio: float,
) -> None:
    """Add each particle's brightness into the cell it projects onto."""
    if not particles:
        return
    points = [p.project(center, aspect_ratio) for p in particles]
    xs = np.floor([pt.x for pt in points]).astype(np.int64)
    ys = np.floor([pt.y for pt in points]).astype(np.int64)
    weights = np.array([p.brightness for p in particles], dtype=np.float64)

    inside = (xs >= 0) & (xs < frame.width) & (ys >= 0) & (ys < frame.height)
    # unbuffered add so several particles on one cell all count
    np.add.at(frame.intensity, (ys[inside], xs[inside]), weights[inside])


def ramp_indices(intensity: np.ndarray) -> np.ndarray:
    """Gradient index per cell: intensity * 3 rounded half-up, clamped to the ramp."""
    idx = np.floor(intensity * INTENSITY_SCALE + 0.5)
    return np.clip(idx, 0, len(GRADIENT) - 1).astype(np.int64)


def apply_intensity(frame: Frame) -> None:
    lit = frame.intensity > INTENSITY_THRESHOLD
    if not lit.any():
        return
    ramp = np.array(list(GRADIENT), dtype="<U1")
    frame.glyphs[lit] = ramp[ramp_indices(frame.intensity[lit])]


def draw_core(frame: Frame, center: Vector2) -> None:
    cx = math.floor(center.x)
    cy = math.floor(center.y)
    if not 0 <= cy < frame.height:
        return
    for x, glyph in ((cx - 1, CORE_LEFT), (cx, CORE_GLYPH), (cx + 1, CORE_RIGHT)):
        if 0 <= x < frame.width:
            frame.glyphs[cy, x] = glyph


def serialize(frame: Frame, elapsed_seconds: float) -> str:
    """Rows, a blank line and the clock footer. Seconds are truncated."""
    body = "".join(row + "\n" for row in frame.rows())
    return f"{body}\n Time: {int(elapsed_seconds)}s"


__all__ = [
    "blank_frame",
    "star_glyph",
    "draw_stars",
    "accumulate_particles",
    "ramp_indices",
    "apply_intensity",
    "draw_core",
    "serialize",
]
