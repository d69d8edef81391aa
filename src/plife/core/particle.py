"""
Particle: the unit of initial state exchanged with the host.

The simulation stores particles as packed numpy arrays. Particle objects
are what the host hands in at startup and what it gets back as
snapshots for rendering.
"""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Particle:
    """A point particle on the torus."""

    position: tuple[float, float]  # Components in [-1, 1)
    velocity: tuple[float, float] = (0.0, 0.0)
    color: int = 0  # Color class, indexes the attraction matrix

    @property
    def x(self) -> float:
        return self.position[0]

    @property
    def y(self) -> float:
        return self.position[1]
