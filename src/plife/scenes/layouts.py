"""
Scene construction: initial particles and attraction rules for the host.

Scenes live outside the core. They only produce data the core consumes
(a list of Particle and a SimulationConfig) and never touch the
integrator.

The default scene has six colors laid out as adjacent vertical bands
just below the x axis. Each color clumps with itself, drifts toward the
next color in the ring and is mildly pushed away from the rest.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Literal

import numpy as np

from plife.core import (
    AttractionMatrix,
    AttractionRadius,
    IntegratorConfig,
    Particle,
    SimulationConfig,
    SimulationState,
)

# Display colors for color classes 0..5 (matplotlib color names)
DEFAULT_PALETTE = ["red", "green", "blue", "yellow", "pink", "cyan"]

SELF_ATTRACTION = 0.3
NEXT_ATTRACTION = 0.002
PREVIOUS_ATTRACTION = -0.001
OTHER_ATTRACTION = -0.05

BAND_WIDTH = 0.25
BAND_Y_RANGE = (-0.25, 0.0)


@dataclass
class SceneConfig:
    """Configuration for a generated scene."""

    n_colors: int = 6
    particles_per_color: int = 200
    layout: Literal["bands", "uniform"] = "bands"
    radius: AttractionRadius = field(default_factory=AttractionRadius)


def default_attraction_matrix(n_colors: int = 6) -> AttractionMatrix:
    """Ring matrix used by the default scene."""
    return AttractionMatrix.ring(
        n_colors,
        self_attraction=SELF_ATTRACTION,
        next_attraction=NEXT_ATTRACTION,
        previous_attraction=PREVIOUS_ATTRACTION,
        other_attraction=OTHER_ATTRACTION,
    )


def create_banded_scene(
    n_colors: int = 6,
    particles_per_color: int = 200,
    rng: np.random.Generator | None = None,
) -> list[Particle]:
    """
    Place each color in its own vertical band.

    Color k fills x ∈ [-1 + 0.25k, -0.75 + 0.25k), y ∈ [-0.25, 0).
    Bands past the right edge wrap around. All velocities start at zero.

    Args:
        n_colors: Number of color classes
        particles_per_color: Particles generated for each color
        rng: Random generator (fresh one if None)

    Returns:
        Particles ordered by color
    """
    if rng is None:
        rng = np.random.default_rng()

    particles = []
    for color in range(n_colors):
        x_low = -1.0 + BAND_WIDTH * color
        xs = rng.uniform(x_low, x_low + BAND_WIDTH, size=particles_per_color)
        ys = rng.uniform(*BAND_Y_RANGE, size=particles_per_color)
        # Keep generated coordinates inside [-1, 1)
        xs = (xs + 1.0) % 2.0 - 1.0
        particles.extend(
            Particle(position=(float(x), float(y)), color=color)
            for x, y in zip(xs, ys)
        )
    return particles


def create_uniform_scene(
    n_particles: int = 1200,
    n_colors: int = 6,
    rng: np.random.Generator | None = None,
) -> list[Particle]:
    """Scatter particles uniformly over the domain with random colors."""
    if rng is None:
        rng = np.random.default_rng()

    positions = rng.uniform(-1.0, 1.0, size=(n_particles, 2))
    colors = rng.integers(0, n_colors, size=n_particles)
    return [
        Particle(position=(float(p[0]), float(p[1])), color=int(c))
        for p, c in zip(positions, colors)
    ]


def create_simulation(
    scene: SceneConfig | None = None,
    rng: np.random.Generator | None = None,
    method: Literal["pairwise", "vectorized"] = "vectorized",
    matrix: AttractionMatrix | None = None,
) -> SimulationState:
    """
    Build a ready-to-run simulation from a scene description.

    Args:
        scene: Layout and sizes (defaults to the six-color banded scene)
        rng: Random generator for particle placement
        method: Integrator strategy
        matrix: Attraction matrix (ring matrix if None)

    Returns:
        SimulationState at tick 0
    """
    if scene is None:
        scene = SceneConfig()

    if scene.layout == "bands":
        particles = create_banded_scene(scene.n_colors, scene.particles_per_color, rng)
    elif scene.layout == "uniform":
        particles = create_uniform_scene(
            scene.n_colors * scene.particles_per_color, scene.n_colors, rng
        )
    else:
        raise ValueError(f"Unknown layout: {scene.layout}")

    if matrix is None:
        matrix = default_attraction_matrix(scene.n_colors)

    config = SimulationConfig(
        matrix=matrix,
        radius=scene.radius,
        integrator=IntegratorConfig(method=method),
        n_colors=scene.n_colors,
    )
    return SimulationState(particles, config)
