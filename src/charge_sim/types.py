# MIT License (see LICENSE)
"""
Core type definitions for the charged particle simulation.

Defines the two fundamental data structures:
- Vector2: an immutable 2D vector value.
- Particle: a charged point particle with position, velocity and radius.

The charge of a particle doubles as its inertial mass, so the equations of
motion read:
  - Force:        F = k · qa · qb / d²   (pure repulsion, all charges > 0)
  - Acceleration: a = F / q
  - Kinetic:      T = ½ · q · |v|²
  - Potential:    U = k · qa · qb / d
"""
from __future__ import annotations
import math
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from .constants import DEFAULT_MIN_DISTANCE, FORCE_CONSTANT
from .util import clamp_distance, f64


# =============================================================================
# Vector
# =============================================================================

@dataclass(frozen=True)
class Vector2:
    """
    Immutable 2D vector.

    Every operation returns a new instance; particle state changes by
    reassigning whole vectors, never by mutating one.

    Attributes:
        x: Horizontal component.
        y: Vertical component.
    """
    x: float = 0.0
    y: float = 0.0

    def add(self, other: Vector2) -> Vector2:
        """Component-wise sum."""
        return Vector2(self.x + other.x, self.y + other.y)

    def difference(self, other: Vector2) -> Vector2:
        """
        Vector pointing from self to other, i.e. other - self.

        Note the operand order: this is NOT self - other.
        """
        return Vector2(other.x - self.x, other.y - self.y)

    def scale(self, factor: float) -> Vector2:
        """Multiply both components by a scalar."""
        return Vector2(self.x * factor, self.y * factor)

    @property
    def magnitude(self) -> float:
        """Euclidean length; 0 for the zero vector."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def __add__(self, other: Vector2) -> Vector2:
        return self.add(other)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __mul__(self, factor: float) -> Vector2:
        return self.scale(factor)

    __rmul__ = __mul__

    def to_array(self) -> np.ndarray:
        """Return the vector as a float64 array of shape (2,)."""
        return f64((self.x, self.y))

    @classmethod
    def from_array(cls, v: Any) -> Vector2:
        """Build a vector from any length-2 sequence or array."""
        return cls(float(v[0]), float(v[1]))


ZERO = Vector2(0.0, 0.0)


def _as_vector(v: Vector2 | tuple[float, float] | np.ndarray) -> Vector2:
    return v if isinstance(v, Vector2) else Vector2.from_array(v)


# =============================================================================
# Particle
# =============================================================================

@dataclass(eq=False)
class Particle:
    """
    A charged point particle.

    Particles compare and hash by identity: two particles with identical
    state are still distinct and each exerts force on the other.

    Attributes:
        charge: Charge, also used as inertial mass. Must be > 0.
        radius: Collision extent in world units. Must be >= 0.
        color: Opaque display attribute for renderers.
        position: Position in pixels.
        velocity: Velocity in pixels per unit time.

    Note:
        Tuples and numpy arrays passed for position/velocity are converted
        to Vector2 on init.
        charge and radius are validated on every assignment, not only on init.
    """
    charge: float
    radius: float = 1.0
    color: Any = "red"
    position: Vector2 | tuple[float, float] = field(default=ZERO)
    velocity: Vector2 | tuple[float, float] = field(default=ZERO)

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "charge" and not value > 0:
            raise ValueError(f"Particle charge must be positive, got {value}")
        if name == "radius" and not value >= 0:
            raise ValueError(f"Particle radius must be non-negative, got {value}")
        object.__setattr__(self, name, value)

    def __post_init__(self) -> None:
        self.charge = float(self.charge)
        self.radius = float(self.radius)
        self.position = _as_vector(self.position)
        self.velocity = _as_vector(self.velocity)

    def distance_to(self, other: Particle) -> float:
        """Distance between the two particle centres."""
        return self.position.difference(other.position).magnitude

    def force_from(
        self,
        other: Particle,
        force_constant: float = FORCE_CONSTANT,
        min_distance: float = DEFAULT_MIN_DISTANCE,
    ) -> Vector2:
        """
        Force exerted on this particle by another.

        Magnitude k·qa·qb/d², directed from other towards self, so the force
        always pushes this particle away. A particle exerts no force on itself.

        Coincident particles have their distance clamped to min_distance. With
        no direction to follow, the pair is pushed apart along the x axis, the
        sign chosen by object id so that a.force_from(b) == -b.force_from(a).
        """
        if self is other:
            return ZERO

        d = clamp_distance(self.distance_to(other), min_distance)
        length = force_constant * self.charge * other.charge / (d * d)
        if self.position == other.position:
            return Vector2(length if id(self) < id(other) else -length, 0.0)
        angle = math.atan2(
            self.position.y - other.position.y,
            self.position.x - other.position.x,
        )
        return Vector2(length * math.cos(angle), length * math.sin(angle))

    def kinetic_energy(self) -> float:
        """½ q |v|²."""
        v = self.velocity.magnitude
        return 0.5 * self.charge * v * v

    def potential_energy(
        self,
        other: Particle,
        force_constant: float = FORCE_CONSTANT,
        min_distance: float = DEFAULT_MIN_DISTANCE,
    ) -> float:
        """Pairwise potential k·qa·qb/d, with the same distance clamp as force_from."""
        d = clamp_distance(self.distance_to(other), min_distance)
        return force_constant * self.charge * other.charge / d
