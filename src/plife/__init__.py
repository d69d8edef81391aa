"""
plife: Particle Life on a 2D torus

Point particles of several color classes attract or repel each other
depending on their colors and separation. Simple pairwise rules produce
clusters, orbits and flows.

Layers:
- core: toroidal geometry, attraction law, integrator, simulation state
- scenes: initial particle layouts and attraction matrices (host glue)
- analysis: derived diagnostics (density fields, energy, clustering)
- viz: matplotlib rendering and animation
"""

__version__ = "0.1.0"
