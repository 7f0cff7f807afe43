# MIT License (see LICENSE)
"""
Numeric helpers shared by the core and the renderer adapters.

Particle state is stored as immutable Vector2 values; these helpers export
it as float64 numpy arrays for analysis, plotting and bulk comparisons.
"""
from __future__ import annotations
from typing import TYPE_CHECKING, Iterable

import numpy as np

if TYPE_CHECKING:
    from .types import Particle


def f64(x) -> np.ndarray:
    """Convert any array-like to a float64 numpy array."""
    return np.array(x, dtype=np.float64)


def clamp_distance(d: float, min_distance: float) -> float:
    """Return d, raised to min_distance when the particles nearly coincide."""
    return d if d > min_distance else min_distance


def positions_array(particles: Iterable["Particle"]) -> np.ndarray:
    """Positions as an [N, 2] float64 array, in collection order."""
    return f64([(p.position.x, p.position.y) for p in particles]).reshape(-1, 2)


def velocities_array(particles: Iterable["Particle"]) -> np.ndarray:
    """Velocities as an [N, 2] float64 array, in collection order."""
    return f64([(p.velocity.x, p.velocity.y) for p in particles]).reshape(-1, 2)
