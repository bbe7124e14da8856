"""Project constants for the galaxy simulation."""

import math

TWO_PI = 2.0 * math.pi

# Glyph ramp, darkest to brightest
GRADIENT = " .:-=+*#%@"
BLANK = " "
INTENSITY_THRESHOLD = 0.1
INTENSITY_SCALE = 3.0

# Star glyphs as (threshold, glyph), checked in order
STAR_GLYPHS = (
    (0.7, "*"),
    (0.4, "+"),
    (0.2, "."),
)

# Core marker drawn over the center cell and its neighbours
CORE_GLYPH = "@"
CORE_LEFT = "("
CORE_RIGHT = ")"

# Layout generation
DEFAULT_SEED = 42
ASPECT_RATIO = 2.0  # terminal cells are about twice as tall as wide

NUM_ARMS = 2
PARTICLES_PER_ARM = 150
ARM_INNER_RADIUS = 2.0
ARM_RADIAL_EXTENT = 14.0
ARM_WINDING = 2.5 * math.pi
ARM_ANGLE_JITTER = 0.2
ARM_ORBIT_SPEED = 0.15
MIN_RADIUS = 0.1

CORE_PARTICLES = 60
CORE_RADIUS_RANGE = (0.5, 3.0)
CORE_ORBIT_SPEED = 0.3
CORE_BRIGHTNESS_RANGE = (0.8, 1.0)

NUM_STARS = 80
STAR_SPEED_RANGE = (0.5, 2.0)
STAR_BRIGHTNESS_RANGE = (0.3, 1.0)

# Twinkle floor: stars never drop below 30% of their base brightness
TWINKLE_FLOOR = 0.3

# Terminal sizing policy
MAX_WIDTH = 120
MAX_HEIGHT = 35
STATUS_LINES = 3
FALLBACK_TERMINAL_SIZE = (120, 40)

__all__ = [
    "TWO_PI",
    "GRADIENT",
    "BLANK",
    "INTENSITY_THRESHOLD",
    "INTENSITY_SCALE",
    "STAR_GLYPHS",
    "CORE_GLYPH",
    "CORE_LEFT",
    "CORE_RIGHT",
    "DEFAULT_SEED",
    "ASPECT_RATIO",
    "NUM_ARMS",
    "PARTICLES_PER_ARM",
    "ARM_INNER_RADIUS",
    "ARM_RADIAL_EXTENT",
    "ARM_WINDING",
    "ARM_ANGLE_JITTER",
    "ARM_ORBIT_SPEED",
    "MIN_RADIUS",
    "CORE_PARTICLES",
    "CORE_RADIUS_RANGE",
    "CORE_ORBIT_SPEED",
    "CORE_BRIGHTNESS_RANGE",
    "NUM_STARS",
    "STAR_SPEED_RANGE",
    "STAR_BRIGHTNESS_RANGE",
    "TWINKLE_FLOOR",
    "MAX_WIDTH",
    "MAX_HEIGHT",
    "STATUS_LINES",
    "FALLBACK_TERMINAL_SIZE",
]
