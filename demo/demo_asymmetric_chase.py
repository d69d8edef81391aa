#!/usr/bin/env python3
"""
Demo: Asymmetric Attraction

Two colors with opposite rules: red is attracted by blue, blue is
repelled by red. The pair never settles; blue keeps running and red
keeps chasing.

Output: output/demo_chase/chase.png
"""

from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from plife.core import AttractionMatrix, AttractionRadius, SimulationConfig, SimulationState
from plife.scenes import create_uniform_scene
from plife.viz import plot_particles, save_figure


def main():
    print("=" * 60)
    print("  ASYMMETRIC CHASE")
    print("=" * 60)

    output_dir = Path("output/demo_chase")
    output_dir.mkdir(parents=True, exist_ok=True)

    matrix = AttractionMatrix.from_rows([
        [0.2, 0.5],    # red: likes red, chases blue
        [-0.5, 0.2],   # blue: likes blue, flees red
    ])
    config = SimulationConfig(matrix=matrix, radius=AttractionRadius(rmin=0.04, rmax=0.3))

    rng = np.random.default_rng(seed=3)
    state = SimulationState(create_uniform_scene(400, n_colors=2, rng=rng), config)

    fig, axes = plt.subplots(1, 3, figsize=(12, 4))
    for ax in axes:
        stats = state.run(120)
        print(f"   tick {stats['current_tick']:4d}: kinetic energy={stats['kinetic_energy']:.4f}")
        plot_particles(state, palette=["red", "blue"], title=f"tick {state.current_tick}", ax=ax)

    fig.tight_layout()
    save_figure(fig, output_dir / "chase.png")
    plt.close(fig)
    print(f"\n   Saved figure to {output_dir}/chase.png")


if __name__ == "__main__":
    main()
