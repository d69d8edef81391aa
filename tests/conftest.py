"""
Pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Reproducible random number generator."""
    return np.random.default_rng(seed=42)


@pytest.fixture
def radius():
    """The default band radii: rmin=0.04, rmax=0.4."""
    from plife.core import AttractionRadius
    return AttractionRadius(rmin=0.04, rmax=0.4)


@pytest.fixture
def single_color_config(radius):
    """One color that attracts itself with peak 0.3."""
    from plife.core import SimulationConfig
    return SimulationConfig(matrix=[[0.3]], radius=radius)


@pytest.fixture
def random_config(rng, radius):
    """Four colors with a random asymmetric matrix."""
    from plife.core import AttractionMatrix, SimulationConfig
    return SimulationConfig(matrix=AttractionMatrix.random(4, rng), radius=radius)
