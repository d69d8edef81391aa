"""
Core physics kernel.

This layer knows NOTHING about windows, colors on screen, or random scenes.
It only knows:
- The toroidal domain [-1, 1)² and shortest-path differences
- The color-dependent attraction law
- The two-pass integrator (velocities from all pairs, then positions)
- SimulationState: particles + configuration + advance(dt)

Initial state comes from the host (see plife.scenes); rendering reads the
state back after each tick (see plife.viz).
"""

from plife.core.errors import ConfigurationError
from plife.core.torus import wrap, difference, distance, direction
from plife.core.attraction import AttractionMatrix, AttractionRadius, attraction_factor
from plife.core.particle import Particle
from plife.core.integrator import Integrator, IntegratorConfig
from plife.core.simulation import SimulationConfig, SimulationState

__all__ = [
    "ConfigurationError",
    "wrap",
    "difference",
    "distance",
    "direction",
    "AttractionMatrix",
    "AttractionRadius",
    "attraction_factor",
    "Particle",
    "Integrator",
    "IntegratorConfig",
    "SimulationConfig",
    "SimulationState",
]
