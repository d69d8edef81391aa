"""
Density fields: where the particles are, binned on a grid.

IMPORTANT: This is a DERIVED quantity for visualization only.
The core never reads it.

Fields have shape [bins, bins] with rows along y and columns along x,
covering the domain [-1, 1)². Smoothing wraps around the edges like the
domain itself.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

import numpy as np
from scipy.ndimage import gaussian_filter

from plife.core.torus import DOMAIN_MAX, DOMAIN_MIN, DOMAIN_WIDTH

if TYPE_CHECKING:
    from plife.core.simulation import SimulationState


def density_field(
    positions: np.ndarray,
    bins: int = 64,
    sigma: float = 1.0,
    normalize: bool = True,
) -> np.ndarray:
    """
    Smoothed particle density on a bins x bins grid.

    Args:
        positions: [n, 2] particle positions
        bins: Grid cells per axis
        sigma: Gaussian smoothing in cells (0 disables smoothing)
        normalize: If True, divide by n · cell area so the field integrates to 1

    Returns:
        [bins, bins] field indexed [y, x]
    """
    positions = np.asarray(positions, dtype=np.float64).reshape(-1, 2)
    counts, _, _ = np.histogram2d(
        positions[:, 0],
        positions[:, 1],
        bins=bins,
        range=[[DOMAIN_MIN, DOMAIN_MAX], [DOMAIN_MIN, DOMAIN_MAX]],
    )
    # histogram2d indexes [x, y]
    field = counts.T

    if normalize and len(positions) > 0:
        cell_area = (DOMAIN_WIDTH / bins) ** 2
        field = field / (len(positions) * cell_area)

    if sigma > 0:
        field = gaussian_filter(field, sigma=sigma, mode="wrap")

    return field


def color_density_fields(
    state: "SimulationState",
    bins: int = 64,
    sigma: float = 1.0,
    normalize: bool = True,
) -> np.ndarray:
    """
    One density field per color class.

    Returns:
        [n_colors, bins, bins] stack; colors with no particles give zeros
    """
    positions = state.positions
    colors = state.colors

    fields = np.zeros((state.n_colors, bins, bins), dtype=np.float64)
    for color in range(state.n_colors):
        mask = colors == color
        if np.any(mask):
            fields[color] = density_field(positions[mask], bins, sigma, normalize)
    return fields
