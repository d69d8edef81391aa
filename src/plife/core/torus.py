"""
Toroidal geometry of the simulation domain.

The domain is the square [-1, 1) x [-1, 1). Leaving one side re-enters
from the opposite side.

All functions accept scalars or numpy arrays. Points are arrays whose last
axis holds (x, y), so the same code serves one pair or every pair at once.
"""

from __future__ import annotations

import numpy as np

DOMAIN_MIN = -1.0
DOMAIN_MAX = 1.0
DOMAIN_WIDTH = DOMAIN_MAX - DOMAIN_MIN


def wrap(x):
    """
    Map coordinates into [-1, 1).

    Out-of-domain values use x - 2·round(x/2) with halves rounded up.
    Values already inside the domain are returned unchanged, so
    wrap(wrap(x)) == wrap(x) holds exactly.

    Args:
        x: Scalar or array of finite coordinates

    Returns:
        Float for scalar input, array otherwise
    """
    x = np.asarray(x, dtype=np.float64)

    wrapped = x - DOMAIN_WIDTH * np.floor(x / DOMAIN_WIDTH + 0.5)
    # Rounding can land exactly on the open edge
    wrapped = np.where(wrapped >= DOMAIN_MAX, wrapped - DOMAIN_WIDTH, wrapped)
    wrapped = np.where(wrapped < DOMAIN_MIN, wrapped + DOMAIN_WIDTH, wrapped)

    inside = (x >= DOMAIN_MIN) & (x < DOMAIN_MAX)
    result = np.where(inside, x, wrapped)

    if result.ndim == 0:
        return float(result)
    return result


def difference(base, tip) -> np.ndarray:
    """
    Shortest-path vector from base to tip.

    Computes tip - base, then subtracts 2 from every component whose
    magnitude exceeds 1. A component below -1 also has 2 subtracted
    (-1.5 becomes -3.5), which moves it away from the wrapped value. Such
    a pair looks farther apart than any interaction radius below 2, so it
    does not interact across that edge in that base/tip order.

    Args:
        base, tip: Points, shape [..., 2]

    Returns:
        Difference vectors, shape [..., 2]
    """
    diff = np.asarray(tip, dtype=np.float64) - np.asarray(base, dtype=np.float64)
    return np.where(np.abs(diff) > 1.0, diff - DOMAIN_WIDTH, diff)


def distance(a, b):
    """Euclidean length of difference(a, b)."""
    d = np.linalg.norm(difference(a, b), axis=-1)
    if np.ndim(d) == 0:
        return float(d)
    return d


def direction(base, tip, fallback=(1.0, 0.0)) -> np.ndarray:
    """
    Unit vector from base to tip.

    Coincident points get the fallback direction (1, 0).

    Args:
        base, tip: Points, shape [..., 2]
        fallback: Direction used where the difference has zero length

    Returns:
        Unit vectors, shape [..., 2]
    """
    diff = difference(base, tip)
    length = np.linalg.norm(diff, axis=-1, keepdims=True)

    with np.errstate(divide="ignore", invalid="ignore"):
        unit = diff / length

    return np.where(length > 0.0, unit, np.asarray(fallback, dtype=np.float64))
