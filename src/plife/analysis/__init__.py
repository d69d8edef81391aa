"""
Analysis layer: derived quantities for visualization and diagnostics.

IMPORTANT: This is NOT seen by the core. One-way derivation only.

- density_field / color_density_fields: smoothed occupancy grids
- kinetic_energy / speed_statistics: how fast things move
- mean_neighbor_count: how clustered the particles are
"""

from plife.analysis.density import density_field, color_density_fields
from plife.analysis.dynamics import (
    SpeedStatistics,
    kinetic_energy,
    speed_statistics,
    mean_neighbor_count,
)

__all__ = [
    "density_field",
    "color_density_fields",
    "SpeedStatistics",
    "kinetic_energy",
    "speed_statistics",
    "mean_neighbor_count",
]
