"""
Integrator: advances particle velocities and positions by one tick.

Each tick runs two passes, never interleaved:
1. Velocity pass: every unordered pair (A, B) is scored once. A is pushed
   along the A→B direction by dt · F(A by B), B along the same direction by
   -dt · F(B by A). Positions are only read in this pass.
2. Position pass: position += dt · velocity, then wrap into the domain.

Two strategies for the velocity pass:
- "pairwise": sequential loop over pairs i < j, one pair at a time
- "vectorized": all pairs scored with numpy on the position snapshot,
  contributions summed into a private per-particle accumulator and added
  to the velocities once every pair has been evaluated

Both give the same velocities up to floating-point summation order.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Literal, TYPE_CHECKING

import numpy as np

from plife.core.attraction import attraction_factor
from plife.core.errors import ConfigurationError
from plife.core.torus import difference, direction, distance, wrap

if TYPE_CHECKING:
    from plife.core.attraction import AttractionMatrix, AttractionRadius


METHODS = ("pairwise", "vectorized")


def pair_blocks(n: int, chunk: int):
    """
    Yield every unordered pair i < j in row-major order, one block at a time.

    A block covers whole rows of the upper triangle and holds about chunk
    pairs, never more than max(chunk, n - 1). Only one block's index
    arrays exist at a time.

    Yields:
        (index_a, index_b) int arrays of equal length
    """
    i0 = 0
    while i0 < n - 1:
        i1 = i0
        count = 0
        while i1 < n - 1 and (count == 0 or count + (n - 1 - i1) <= chunk):
            count += n - 1 - i1
            i1 += 1

        rows = np.arange(i0, i1)
        row_counts = n - 1 - rows
        row_starts = np.cumsum(row_counts) - row_counts

        index_a = np.repeat(rows, row_counts)
        index_b = index_a + 1 + np.arange(count) - np.repeat(row_starts, row_counts)
        yield index_a, index_b
        i0 = i1


@dataclass
class IntegratorConfig:
    """Configuration for the integrator."""

    min_distance: float = 0.01  # Distance floor for coincident particles
    method: Literal["pairwise", "vectorized"] = "vectorized"
    pair_chunk_size: int = 262_144  # Pairs per numpy block (vectorized only)

    def validate(self) -> None:
        if self.method not in METHODS:
            raise ConfigurationError(
                f"Unknown integrator method: {self.method!r} (expected one of {METHODS})"
            )
        if not self.min_distance > 0:
            raise ConfigurationError(
                f"min_distance must be positive, got {self.min_distance}"
            )
        if self.pair_chunk_size < 1:
            raise ConfigurationError(
                f"pair_chunk_size must be positive, got {self.pair_chunk_size}"
            )


@dataclass
class Integrator:
    """
    Two-pass integrator over packed particle arrays.

    Arrays are updated in place:
    - positions: [n, 2] float64
    - velocities: [n, 2] float64
    - colors: [n] int
    """

    config: IntegratorConfig = field(default_factory=IntegratorConfig)

    def __post_init__(self):
        self.config.validate()

    def step(
        self,
        positions: np.ndarray,
        velocities: np.ndarray,
        colors: np.ndarray,
        matrix: "AttractionMatrix",
        radius: "AttractionRadius",
        dt: float,
    ) -> None:
        """Run one full tick: velocity pass, then position pass."""
        self.velocity_pass(positions, velocities, colors, matrix, radius, dt)
        self.position_pass(positions, velocities, dt)

    def velocity_pass(
        self,
        positions: np.ndarray,
        velocities: np.ndarray,
        colors: np.ndarray,
        matrix: "AttractionMatrix",
        radius: "AttractionRadius",
        dt: float,
    ) -> None:
        """Update velocities from all pairwise attractions."""
        if len(positions) < 2:
            return

        if self.config.method == "pairwise":
            self._velocity_pass_pairwise(positions, velocities, colors, matrix, radius, dt)
        elif self.config.method == "vectorized":
            self._velocity_pass_vectorized(positions, velocities, colors, matrix, radius, dt)

    def _velocity_pass_pairwise(self, positions, velocities, colors, matrix, radius, dt):
        n = len(positions)
        rmin, rmax = radius.rmin, radius.rmax
        min_distance = self.config.min_distance

        for i in range(n - 1):
            position_a = positions[i]
            color_a = colors[i]
            for j in range(i + 1, n):
                position_b = positions[j]

                d = max(distance(position_a, position_b), min_distance)
                a_by_b, b_by_a = attraction_factor(
                    d, color_a, colors[j], matrix, rmin, rmax
                )
                if a_by_b == 0.0 and b_by_a == 0.0:
                    continue

                diff = difference(position_a, position_b)
                length = np.hypot(diff[0], diff[1])
                a_to_b = diff / length if length > 0.0 else np.array([1.0, 0.0])

                velocities[i] += dt * a_by_b * a_to_b
                velocities[j] -= dt * b_by_a * a_to_b

    def _velocity_pass_vectorized(self, positions, velocities, colors, matrix, radius, dt):
        n = len(positions)
        rmin, rmax = radius.rmin, radius.rmax
        chunk = self.config.pair_chunk_size

        # Private accumulator, reduced into velocities after every pair is scored
        delta_v = np.zeros_like(velocities)
        for ia, ib in pair_blocks(n, chunk):
            position_a = positions[ia]
            position_b = positions[ib]

            d = np.maximum(distance(position_a, position_b), self.config.min_distance)
            a_by_b, b_by_a = attraction_factor(d, colors[ia], colors[ib], matrix, rmin, rmax)
            a_to_b = direction(position_a, position_b)

            np.add.at(delta_v, ia, (dt * a_by_b)[:, None] * a_to_b)
            np.add.at(delta_v, ib, -(dt * b_by_a)[:, None] * a_to_b)

        velocities += delta_v

    def position_pass(self, positions: np.ndarray, velocities: np.ndarray, dt: float) -> None:
        """Move particles by their velocities and wrap them into the domain."""
        positions += dt * velocities
        positions[...] = wrap(positions)
