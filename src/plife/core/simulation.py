"""
SimulationState: the particle population plus its configuration.

The host creates one state at startup and calls advance(dt) from its
update loop. All validation happens in the constructor; a tick never
raises.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field, replace
from typing import Sequence

import numpy as np

from plife.core.attraction import AttractionMatrix, AttractionRadius
from plife.core.errors import ConfigurationError
from plife.core.integrator import Integrator, IntegratorConfig
from plife.core.particle import Particle
from plife.core.torus import DOMAIN_MAX, DOMAIN_MIN, wrap

logger = logging.getLogger(__name__)


@dataclass
class SimulationConfig:
    """
    Configuration shared by every pairwise computation.

    The matrix dimension is the number of color classes. Colors that no
    particle uses are allowed; particle colors outside the matrix are not.
    """

    matrix: AttractionMatrix | Sequence[Sequence[float]]
    radius: AttractionRadius = field(default_factory=AttractionRadius)
    integrator: IntegratorConfig = field(default_factory=IntegratorConfig)
    n_colors: int | None = None  # Defaults to the matrix dimension


class SimulationState:
    """
    Owns the particles and advances them one tick at a time.

    Particle data is packed into arrays:
    - positions: [n, 2], always inside [-1, 1)² after a tick
    - velocities: [n, 2]
    - colors: [n] color classes, fixed for the run

    The population never changes: no particle is created or removed.
    """

    def __init__(self, particles: Sequence[Particle], config: SimulationConfig):
        """
        Validate the configuration and pack the particles.

        Args:
            particles: Initial particles supplied by the host
            config: Attraction matrix, radii and integrator settings

        Raises:
            ConfigurationError: if the matrix, radii, integrator settings or
                any particle's color class are invalid
        """
        particles = list(particles)
        positions = [p.position for p in particles]
        velocities = [p.velocity for p in particles]
        colors = [p.color for p in particles]
        self._setup(positions, velocities, colors, config)

    @classmethod
    def from_arrays(
        cls,
        positions,
        colors,
        config: SimulationConfig,
        velocities=None,
    ) -> SimulationState:
        """
        Create a state directly from arrays.

        Args:
            positions: [n, 2] initial positions
            colors: [n] color classes
            config: Simulation configuration
            velocities: [n, 2] initial velocities (zero if None)
        """
        state = cls.__new__(cls)
        if velocities is None:
            velocities = np.zeros((len(positions), 2), dtype=np.float64)
        state._setup(positions, velocities, colors, config)
        return state

    def _setup(self, positions, velocities, colors, config: SimulationConfig) -> None:
        # Keep private copies so later edits by the host cannot skip validation
        self.matrix = _validate_matrix(config)
        self.radius = config.radius
        self.radius.validate()
        self.integrator = Integrator(replace(config.integrator))
        self.config = replace(config, matrix=self.matrix, integrator=self.integrator.config)

        self._positions = _as_vectors(positions, "positions")
        self._velocities = _as_vectors(velocities, "velocities")
        if len(self._velocities) != len(self._positions):
            raise ConfigurationError(
                f"Got {len(self._positions)} positions but {len(self._velocities)} velocities"
            )
        self._colors = _validate_colors(colors, len(self._positions), self.matrix.n_colors)

        outside = ~np.all(
            (self._positions >= DOMAIN_MIN) & (self._positions < DOMAIN_MAX), axis=1
        )
        if np.any(outside):
            logger.warning(
                "%d particle(s) start outside the domain; wrapping them", int(outside.sum())
            )
            self._positions[...] = wrap(self._positions)

        self.current_tick = 0
        self.elapsed_time = 0.0

        logger.info(
            "SimulationState created: %d particles, %d colors, rmin=%g, rmax=%g, method=%s",
            self.n_particles,
            self.n_colors,
            self.radius.rmin,
            self.radius.rmax,
            self.integrator.config.method,
        )

    # ─────────────────────────────────────────────────────────────────
    # Host entry points
    # ─────────────────────────────────────────────────────────────────

    def advance(self, dt: float) -> None:
        """
        Advance the simulation by one tick of length dt.

        Runs the velocity pass over all pairs, then the position pass.
        """
        self.integrator.step(
            self._positions,
            self._velocities,
            self._colors,
            self.matrix,
            self.radius,
            dt,
        )
        self.current_tick += 1
        self.elapsed_time += dt

    def run(self, n_ticks: int, dt: float = 1.0 / 60.0) -> dict:
        """
        Run n_ticks ticks of length dt.

        Returns:
            Statistics dictionary
        """
        from plife.analysis.dynamics import kinetic_energy, speed_statistics

        for _ in range(n_ticks):
            self.advance(dt)

        speeds = speed_statistics(self._velocities)
        stats = {
            "n_ticks": n_ticks,
            "current_tick": self.current_tick,
            "elapsed_time": self.elapsed_time,
            "mean_speed": speeds.mean,
            "max_speed": speeds.max,
            "kinetic_energy": kinetic_energy(self._velocities),
        }
        logger.debug("Ran %d ticks: %s", n_ticks, stats)
        return stats

    # ─────────────────────────────────────────────────────────────────
    # Read access for rendering and analysis
    # ─────────────────────────────────────────────────────────────────

    @property
    def n_particles(self) -> int:
        return len(self._positions)

    @property
    def n_colors(self) -> int:
        return self.matrix.n_colors

    @property
    def positions(self) -> np.ndarray:
        """Copy of the [n, 2] positions."""
        return self._positions.copy()

    @property
    def velocities(self) -> np.ndarray:
        """Copy of the [n, 2] velocities."""
        return self._velocities.copy()

    @property
    def colors(self) -> np.ndarray:
        """Copy of the [n] color classes."""
        return self._colors.copy()

    @property
    def particles(self) -> list[Particle]:
        """Snapshot of every particle in their original order."""
        return [
            Particle(
                position=(float(p[0]), float(p[1])),
                velocity=(float(v[0]), float(v[1])),
                color=int(c),
            )
            for p, v, c in zip(self._positions, self._velocities, self._colors)
        ]

    def __len__(self) -> int:
        return self.n_particles


def _validate_matrix(config: SimulationConfig) -> AttractionMatrix:
    matrix = config.matrix
    if isinstance(matrix, AttractionMatrix):
        matrix = matrix.copy()
    else:
        matrix = AttractionMatrix(matrix)

    if config.n_colors is not None and config.n_colors != matrix.n_colors:
        raise ConfigurationError(
            f"Attraction matrix is {matrix.n_colors}x{matrix.n_colors} "
            f"but n_colors={config.n_colors}"
        )
    return matrix


def _as_vectors(values, name: str) -> np.ndarray:
    try:
        array = np.array(values, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"{name} must be numeric 2D vectors: {e}") from e

    if array.size == 0:
        return np.zeros((0, 2), dtype=np.float64)
    if array.ndim != 2 or array.shape[1] != 2:
        raise ConfigurationError(f"{name} must have shape (n, 2), got {array.shape}")
    if not np.all(np.isfinite(array)):
        raise ConfigurationError(f"{name} must be finite")
    return array


def _validate_colors(colors, n_particles: int, n_colors: int) -> np.ndarray:
    array = np.asarray(colors)
    if array.size == 0:
        array = np.zeros(0, dtype=np.int64)

    if array.ndim != 1 or len(array) != n_particles:
        raise ConfigurationError(
            f"Expected {n_particles} color classes, got shape {array.shape}"
        )
    if array.dtype.kind not in "iu":
        raise ConfigurationError(f"Color classes must be integers, got dtype {array.dtype}")

    out_of_range = (array < 0) | (array >= n_colors)
    if np.any(out_of_range):
        first = int(np.argmax(out_of_range))
        raise ConfigurationError(
            f"Particle {first} has color class {int(array[first])}, "
            f"outside [0, {n_colors})"
        )
    return array.astype(np.int64)
