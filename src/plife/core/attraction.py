"""
Attraction law: how strongly particle A is pulled toward particle B.

Three distance bands, bounded by rmin and rmax:
- d <= rmin: repulsive core, F = d/rmin - 1 for both particles
- rmin < d <= rmax: color-dependent band, F = |d - (rmin+rmax)/2| · peak
- d > rmax: no interaction

Positive F attracts, negative F repels. The matrix is asymmetric:
A may chase B while B flees A.

NOTE: the band factor |d - peak_distance| is zero at the band midpoint and
largest at the band edges. It jumps from 0 to about (rmax-rmin)/2 · peak
right after rmin.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from plife.core.errors import ConfigurationError


@dataclass(frozen=True)
class AttractionRadius:
    """Radii bounding the repulsion, attraction and neutral bands."""

    rmin: float = 0.04  # Repulsive core radius
    rmax: float = 0.4   # Interaction cutoff

    @property
    def peak_distance(self) -> float:
        """Midpoint of the attraction band."""
        return (self.rmin + self.rmax) / 2.0

    def validate(self) -> None:
        """Raise ConfigurationError unless 0 < rmin < rmax."""
        if not (np.isfinite(self.rmin) and np.isfinite(self.rmax)):
            raise ConfigurationError(
                f"Radii must be finite, got rmin={self.rmin}, rmax={self.rmax}"
            )
        if self.rmin <= 0:
            raise ConfigurationError(f"rmin must be positive, got {self.rmin}")
        if self.rmax <= self.rmin:
            raise ConfigurationError(
                f"rmax must exceed rmin, got rmin={self.rmin}, rmax={self.rmax}"
            )


class AttractionMatrix:
    """
    Peak attraction between color classes.

    Particles of color i are attracted by particles of color j by
    ``values[i, j]``. Entries are signed and need not be symmetric.
    """

    def __init__(self, values: Sequence[Sequence[float]] | np.ndarray):
        """
        Create a matrix from nested rows.

        Args:
            values: Square table of peak attractions, values[i][j] = i attracted by j
        """
        try:
            self.values = np.array(values, dtype=np.float64)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Attraction matrix is not a numeric table: {e}") from e

        if self.values.ndim != 2 or self.values.shape[0] != self.values.shape[1]:
            raise ConfigurationError(
                f"Attraction matrix must be square, got shape {self.values.shape}"
            )
        if self.values.shape[0] == 0:
            raise ConfigurationError("Attraction matrix must have at least one color")
        if not np.all(np.isfinite(self.values)):
            raise ConfigurationError("Attraction matrix entries must be finite")

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> AttractionMatrix:
        """Build a matrix from a list of rows."""
        return cls(rows)

    @classmethod
    def ring(
        cls,
        n_colors: int,
        self_attraction: float = 0.3,
        next_attraction: float = 0.002,
        previous_attraction: float = -0.001,
        other_attraction: float = -0.05,
    ) -> AttractionMatrix:
        """
        Ring of colors: each color sticks to itself and chases the next one.

        Row i has self_attraction on the diagonal, next_attraction in column
        i+1, previous_attraction in column i-1 (both modulo n_colors) and
        other_attraction everywhere else.
        """
        if n_colors < 1:
            raise ConfigurationError(f"n_colors must be positive, got {n_colors}")

        values = np.full((n_colors, n_colors), other_attraction, dtype=np.float64)
        for i in range(n_colors):
            values[i, (i - 1) % n_colors] = previous_attraction
            values[i, (i + 1) % n_colors] = next_attraction
            values[i, i] = self_attraction
        return cls(values)

    @classmethod
    def random(
        cls,
        n_colors: int,
        rng: np.random.Generator | None = None,
        low: float = -1.0,
        high: float = 1.0,
    ) -> AttractionMatrix:
        """Matrix with entries drawn uniformly from [low, high)."""
        if n_colors < 1:
            raise ConfigurationError(f"n_colors must be positive, got {n_colors}")
        if rng is None:
            rng = np.random.default_rng()
        return cls(rng.uniform(low, high, size=(n_colors, n_colors)))

    @property
    def n_colors(self) -> int:
        """Number of color classes (matrix dimension)."""
        return self.values.shape[0]

    def peak(self, color_a: int, color_b: int) -> float:
        """Peak attraction of color_a by color_b."""
        return float(self.values[color_a, color_b])

    def copy(self) -> AttractionMatrix:
        """Create a copy of this matrix."""
        return AttractionMatrix(self.values.copy())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AttractionMatrix):
            return NotImplemented
        return self.values.shape == other.values.shape and bool(
            np.all(self.values == other.values)
        )

    def __repr__(self) -> str:
        return f"AttractionMatrix(n_colors={self.n_colors})"


def attraction_factor(
    distance,
    color_a,
    color_b,
    matrix: AttractionMatrix | np.ndarray,
    rmin: float,
    rmax: float,
):
    """
    Attraction of A by B and of B by A at the given distance.

    Accepts scalars or equally shaped arrays of distances and colors, so
    the vectorized integrator can score every pair in one call.

    Args:
        distance: Separation between the particles
        color_a, color_b: Color classes of A and B
        matrix: Peak attractions, matrix[i, j] = i attracted by j
        rmin, rmax: Band radii

    Returns:
        (attraction of A by B, attraction of B by A). Floats for scalar input.
    """
    values = matrix.values if isinstance(matrix, AttractionMatrix) else np.asarray(matrix)
    d = np.asarray(distance, dtype=np.float64)

    peak_ab = values[color_a, color_b]
    peak_ba = values[color_b, color_a]

    peak_distance = (rmin + rmax) / 2.0
    distance_scalar = np.abs(d - peak_distance)
    repulsion = d / rmin - 1.0

    in_core = d <= rmin
    in_band = (d > rmin) & (d <= rmax)

    a_by_b = np.where(in_core, repulsion, np.where(in_band, distance_scalar * peak_ab, 0.0))
    b_by_a = np.where(in_core, repulsion, np.where(in_band, distance_scalar * peak_ba, 0.0))

    if a_by_b.ndim == 0:
        return float(a_by_b), float(b_by_a)
    return a_by_b, b_by_a
