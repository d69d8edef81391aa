"""
Rendering of particle states with matplotlib.

The host side of the loop: read positions and colors after each tick and
draw them. The core dictates no visual mapping; color classes are mapped
to display colors here through a palette.
"""

from __future__ import annotations
from pathlib import Path
from typing import TYPE_CHECKING, Sequence

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from plife.core.torus import DOMAIN_MAX, DOMAIN_MIN

if TYPE_CHECKING:
    from plife.core.simulation import SimulationState


def _create_density_cmap():
    """Create a colormap from black through deep blue to warm white."""
    from matplotlib.colors import LinearSegmentedColormap

    colors = [
        (0.0, 0.0, 0.0),        # Empty space
        (0.078, 0.098, 0.318),  # Deep blue
        (0.192, 0.407, 0.556),  # Blue
        (0.127, 0.566, 0.550),  # Teal
        (0.993, 0.978, 0.925),  # Warm white (dense clusters)
    ]
    return LinearSegmentedColormap.from_list("density", colors)


CMAP_DENSITY = _create_density_cmap()

BACKGROUND = "black"


def _palette_colors(palette: Sequence[str] | None, n_colors: int) -> list:
    if palette is None:
        cmap = plt.get_cmap("tab10")
        return [cmap(i % 10) for i in range(n_colors)]
    if len(palette) < n_colors:
        raise ValueError(
            f"Palette has {len(palette)} colors but the state uses {n_colors}"
        )
    return list(palette)


def _setup_domain_axes(ax: Axes, title: str) -> None:
    ax.set_xlim(DOMAIN_MIN, DOMAIN_MAX)
    ax.set_ylim(DOMAIN_MIN, DOMAIN_MAX)
    ax.set_aspect("equal")
    ax.set_facecolor(BACKGROUND)
    ax.set_xticks([])
    ax.set_yticks([])
    if title:
        ax.set_title(title)


def plot_particles(
    state: "SimulationState",
    palette: Sequence[str] | None = None,
    title: str = "",
    ax: Axes | None = None,
    figsize: tuple[float, float] = (7.5, 7.5),
    marker_size: float = 4.0,
) -> tuple[Figure, Axes]:
    """
    Draw every particle as a dot colored by its color class.

    Args:
        state: Simulation to draw
        palette: Display color per color class (tab10 if None)
        title: Plot title
        ax: Existing axes (creates new if None)
        figsize: Figure size when creating new axes
        marker_size: Scatter marker size

    Returns:
        (fig, ax) tuple
    """
    colors = _palette_colors(palette, state.n_colors)

    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    _setup_domain_axes(ax, title)

    positions = state.positions
    classes = state.colors
    for color_class in range(state.n_colors):
        mask = classes == color_class
        ax.scatter(
            positions[mask, 0],
            positions[mask, 1],
            s=marker_size,
            color=colors[color_class],
            linewidths=0,
        )

    return fig, ax


def plot_density(
    field: np.ndarray,
    title: str = "Particle density",
    cmap=None,
    ax: Axes | None = None,
    figsize: tuple[float, float] = (8, 7),
    colorbar: bool = True,
) -> tuple[Figure, Axes]:
    """
    Plot a density field over the domain.

    Args:
        field: [ny, nx] field, e.g. from plife.analysis.density_field
        title: Plot title
        cmap: Colormap (density map if None)
        ax: Existing axes (creates new if None)
        colorbar: Add a colorbar

    Returns:
        (fig, ax) tuple
    """
    if cmap is None:
        cmap = CMAP_DENSITY

    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    im = ax.imshow(
        field,
        origin="lower",
        extent=(DOMAIN_MIN, DOMAIN_MAX, DOMAIN_MIN, DOMAIN_MAX),
        cmap=cmap,
        aspect="equal",
    )
    if colorbar:
        plt.colorbar(im, ax=ax, fraction=0.046, pad=0.04)

    ax.set_title(title)
    ax.set_xlabel("x")
    ax.set_ylabel("y")

    return fig, ax


def animate(
    state: "SimulationState",
    n_frames: int,
    dt: float = 1.0 / 60.0,
    palette: Sequence[str] | None = None,
    ticks_per_frame: int = 1,
    interval: float = 1000.0 / 60.0,
    figsize: tuple[float, float] = (7.5, 7.5),
    marker_size: float = 4.0,
) -> FuncAnimation:
    """
    Animate the simulation: each frame advances the state and redraws.

    The state is advanced while the animation is played or saved.

    Args:
        state: Simulation to animate
        n_frames: Number of frames
        dt: Time step per tick
        palette: Display color per color class
        ticks_per_frame: Ticks run between two frames
        interval: Delay between frames in milliseconds

    Returns:
        FuncAnimation; call .save(path) or plt.show() to drive it
    """
    colors = _palette_colors(palette, state.n_colors)

    fig, ax = plt.subplots(figsize=figsize)
    _setup_domain_axes(ax, "")

    classes = state.colors
    point_colors = [colors[c] for c in classes]
    scatter = ax.scatter(
        state.positions[:, 0],
        state.positions[:, 1],
        s=marker_size,
        c=point_colors,
        linewidths=0,
    )

    def draw():
        scatter.set_offsets(state.positions)
        ax.set_title(f"tick {state.current_tick}")
        return (scatter,)

    def update(frame: int):
        for _ in range(ticks_per_frame):
            state.advance(dt)
        return draw()

    # init_func only draws, so every frame costs exactly ticks_per_frame ticks
    return FuncAnimation(
        fig, update, frames=n_frames, init_func=draw, interval=interval, blit=False
    )


def save_figure(fig: Figure, path: str | Path, dpi: int = 150, **kwargs) -> None:
    """Save figure to file, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path, dpi=dpi, bbox_inches="tight", **kwargs)
