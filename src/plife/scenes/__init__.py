"""
Scenes: host-side glue that produces initial state.

- create_banded_scene: six colored bands, the classic starting layout
- create_uniform_scene: particles scattered over the whole torus
- default_attraction_matrix: ring rules (self, next, previous, other)
- create_simulation: scene + rules → SimulationState
"""

from plife.scenes.layouts import (
    DEFAULT_PALETTE,
    SceneConfig,
    default_attraction_matrix,
    create_banded_scene,
    create_uniform_scene,
    create_simulation,
)

__all__ = [
    "DEFAULT_PALETTE",
    "SceneConfig",
    "default_attraction_matrix",
    "create_banded_scene",
    "create_uniform_scene",
    "create_simulation",
]
