"""Pytest configuration and shared fixtures."""

import pytest
import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from gearing.models.inputs import TaxConfig
from tests.fixtures.test_inputs import (
    get_seed_inputs,
    get_delayed_inputs,
)


@pytest.fixture
def seed_inputs():
    """Get the one-year seed scenario inputs."""
    return get_seed_inputs()


@pytest.fixture
def delayed_inputs():
    """Get a five-year scenario with a two-year investment delay."""
    return get_delayed_inputs()


@pytest.fixture
def default_config():
    """Get default Stage 3 brackets, LMI tiers and 2% Medicare levy."""
    return TaxConfig()
