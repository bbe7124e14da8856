"""Pytest configuration and shared fixtures."""

import pytest
import sys
from pathlib import Path

# Add the project root to the path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from ascii_galaxy.core_types import GalaxyConfig
from ascii_galaxy.core.galaxy import GalaxyField


@pytest.fixture
def empty_config():
    """A layout with no particles and no stars."""
    return GalaxyConfig(num_arms=0, particles_per_arm=0, core_particles=0, num_stars=0)


@pytest.fixture
def default_field():
    """Full-size galaxy with the default seeded layout."""
    return GalaxyField(120, 35)


@pytest.fixture
def empty_field(empty_config):
    return GalaxyField(10, 6, empty_config)
