"""
Motion and clustering diagnostics.

These summarize a state for logs, plots and tests. They never feed back
into the simulation.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np
from scipy.spatial import cKDTree

from plife.core.torus import DOMAIN_MIN, DOMAIN_WIDTH

if TYPE_CHECKING:
    from plife.core.simulation import SimulationState


@dataclass
class SpeedStatistics:
    """Summary of particle speeds."""

    mean: float
    max: float
    std: float


def kinetic_energy(velocities: np.ndarray) -> float:
    """Total kinetic energy, with unit mass per particle."""
    velocities = np.asarray(velocities, dtype=np.float64).reshape(-1, 2)
    return float(0.5 * np.sum(velocities ** 2))


def speed_statistics(velocities: np.ndarray) -> SpeedStatistics:
    """Mean, maximum and spread of particle speeds."""
    velocities = np.asarray(velocities, dtype=np.float64).reshape(-1, 2)
    if len(velocities) == 0:
        return SpeedStatistics(mean=0.0, max=0.0, std=0.0)

    speeds = np.linalg.norm(velocities, axis=1)
    return SpeedStatistics(
        mean=float(speeds.mean()),
        max=float(speeds.max()),
        std=float(speeds.std()),
    )


def mean_neighbor_count(state: "SimulationState", radius: float) -> float:
    """
    Mean number of other particles within a periodic distance of radius.

    High values mean the particles have gathered into clusters.
    Uses minimum-image distances on the torus.
    """
    positions = state.positions
    n = len(positions)
    if n < 2:
        return 0.0

    # cKDTree wants periodic coordinates in [0, boxsize)
    shifted = np.mod(positions - DOMAIN_MIN, DOMAIN_WIDTH)
    tree = cKDTree(shifted, boxsize=DOMAIN_WIDTH)
    n_pairs = len(tree.query_pairs(radius))
    return 2.0 * n_pairs / n
