"""Configuration for the ascii-galaxy process environment."""

import os
from pathlib import Path

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent

# Paths
LOGS_DIR = Path(os.getenv("ASCII_GALAXY_LOGS_DIR", PROJECT_ROOT / "logs"))

# Loop settings
TIMESTEP = 0.1  # simulation seconds per frame
FRAME_DURATION = 0.05  # wall-clock seconds between frames

# Logging settings
LOG_LEVEL = os.getenv("ASCII_GALAXY_LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv(
    "ASCII_GALAXY_LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

__all__ = [
    "PROJECT_ROOT",
    "LOGS_DIR",
    "TIMESTEP",
    "FRAME_DURATION",
    "LOG_LEVEL",
    "LOG_FORMAT",
]
