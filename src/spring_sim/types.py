# MIT License (see LICENSE)
"""
Core type definitions for the mass-spring simulation.

Defines the fundamental data structures:
- Ball: a point mass with position, velocity and accumulated force.
- Spring: a Hookean link between two balls.
- EnergyReport: kinetic/potential energy snapshot for diagnostics.

Equations of motion for a mobile ball:
  dx/dt = v
  dv/dt = F/m
"""
from __future__ import annotations
from dataclasses import dataclass, field

import numpy as np

from .util import f64, norm


# =============================================================================
# Ball
# =============================================================================

@dataclass(eq=False)
class Ball:
    """
    A point mass.

    Attributes:
        mass: Mass in kg. Must be positive.
        anchor: Anchor reference count. The ball is immobile while this is
                non-zero. A permanent anchor holds one reference and every
                active grab holds another, so releasing a grab never frees
                a ball that was anchored to begin with.
        position: Position [x, y] in meters.
        velocity: Velocity [vx, vy] in m/s.
        force: Accumulated force [Fx, Fy] in newtons (rebuilt every step).
        id: Identifier assigned by Simulation.add_ball().

    Note:
        Balls compare by identity; two balls at the same spot are still
        different balls.
    """
    mass: float
    anchor: int = 0
    position: np.ndarray | tuple[float, float] = (0.0, 0.0)
    velocity: np.ndarray | tuple[float, float] = (0.0, 0.0)

    # Runtime state (not user-specified)
    force: np.ndarray = field(default_factory=lambda: np.zeros(2, dtype=np.float64))
    id: int = -1

    def __post_init__(self) -> None:
        """Normalize vectors to float64 arrays and the anchor flag to a count."""
        self.anchor = int(self.anchor)
        self.position = f64(self.position)
        self.velocity = f64(self.velocity)
        self.force = f64(self.force)

    @property
    def is_anchored(self) -> bool:
        """True if the ball is excluded from integration."""
        return self.anchor > 0

    @property
    def inv_mass(self) -> float:
        """Inverse mass (1/m)."""
        return 1.0 / self.mass

    def clear_forces(self) -> None:
        """Reset accumulated force to zero."""
        self.force[:] = 0.0


# =============================================================================
# Spring
# =============================================================================

@dataclass(eq=False)
class Spring:
    """
    Linear spring between two balls (Hooke's law).

    The spring does not own its endpoints; a ball may be shared by any
    number of springs.

    Attributes:
        ball1: First endpoint.
        ball2: Second endpoint.
        rest_length: Length at which the spring exerts no force (m).
        spring_const: Stiffness k (N/m).
    """
    ball1: Ball
    ball2: Ball
    rest_length: float
    spring_const: float

    def length(self) -> float:
        """Current distance between the two endpoints."""
        return norm(self.ball2.position - self.ball1.position)

    def endpoints(self) -> tuple[np.ndarray, np.ndarray]:
        """Copies of both endpoint positions, for rendering."""
        return self.ball1.position.copy(), self.ball2.position.copy()


# =============================================================================
# Diagnostics
# =============================================================================

@dataclass(frozen=True)
class EnergyReport:
    """Energy of the whole system in joules."""
    kinetic: float
    potential: float

    @property
    def total(self) -> float:
        return self.kinetic + self.potential
