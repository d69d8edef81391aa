"""
Visualization utilities.

- Particle scatter plots colored by color class
- Density heatmaps
- Animation driving advance(dt) once per frame
"""

from plife.viz.particles import (
    CMAP_DENSITY,
    plot_particles,
    plot_density,
    animate,
    save_figure,
)

__all__ = [
    "CMAP_DENSITY",
    "plot_particles",
    "plot_density",
    "animate",
    "save_figure",
]
