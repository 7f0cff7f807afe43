# MIT License (see LICENSE)
"""
Default simulation parameters.

Lengths are measured in pixels of the display surface; particle radii are
given in world units and converted with PIXELS_PER_UNIT_LENGTH. The force
constant plays the role of Coulomb's constant but is tuned for visual effect
rather than physical accuracy.
"""
from __future__ import annotations

# Scale between a particle's radius (world units) and the boundary (pixels).
PIXELS_PER_UNIT_LENGTH: float = 10.0

# Inverse-square repulsion strength: F = k * q1 * q2 / d².
FORCE_CONSTANT: float = 25000.0

# Fixed integration step.
TIME_STEP: float = 0.1

# Delay between ticks for an interactive driver, in milliseconds.
SLEEP_TIME_MS: int = 22

# Charge range used by the random particle factory.
MINIMUM_PARTICLE_CHARGE: float = 10.0
MAXIMUM_PARTICLE_CHARGE: float = 30.0

# Upper bound (exclusive) of each initial velocity component.
MAXIMUM_INITIAL_VELOCITY: float = 1.0

DEFAULT_NUMBER_OF_PARTICLES: int = 10

# Default boundary extents in pixels.
DEFAULT_WIDTH: float = 800.0
DEFAULT_HEIGHT: float = 600.0

# Distances below this are clamped before computing force and potential,
# so coincident particles yield finite values.
DEFAULT_MIN_DISTANCE: float = 1e-3
