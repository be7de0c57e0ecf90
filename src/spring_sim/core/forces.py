# MIT License (see LICENSE)
"""
Force generators for the mass-spring system.

Both functions modify ball.force in-place and are called during the force
accumulation pass of Simulation.update(), before any ball moves.

Key concepts:
- Gravity contributes F = m * g to every ball, anchored or not.
- A spring contributes equal and opposite forces to its two endpoints, so
  its net contribution to the system's momentum is zero.
"""
from __future__ import annotations

import numpy as np

from ..constants import SPRING_EPS
from ..types import Ball, Spring


def apply_gravity(ball: Ball, g: np.ndarray) -> None:
    """
    Apply gravitational force to a ball.

    Implements F = m * g.

    Args:
        ball: The ball to apply gravity to.
        g: Gravitational acceleration vector as [gx, gy] in m/s².
    """
    ball.force += ball.mass * g


def apply_spring_force(spring: Spring, eps: float = SPRING_EPS) -> float:
    """
    Apply Hooke's law force to both endpoints of a spring.

    With d = p2 - p1, len = |d| and stretch Δ = len - rest_length, the force
    magnitude is F = k * Δ along u = d / len. ball1 receives +F*u and ball2
    receives -F*u: a stretched spring (Δ > 0) pulls the endpoints together,
    a compressed one pushes them apart.

    Args:
        spring: The spring to evaluate.
        eps: Minimum length for a well-defined direction. Shorter springs
             apply no force this step.

    Returns:
        The spring's potential energy F*Δ/2 (always, even if skipped).
    """
    b1, b2 = spring.ball1, spring.ball2
    dx = b2.position[0] - b1.position[0]
    dy = b2.position[1] - b1.position[1]
    length = float(np.sqrt(dx * dx + dy * dy))

    stretch = length - spring.rest_length
    magnitude = spring.spring_const * stretch
    energy = 0.5 * magnitude * stretch

    if length < eps:
        return energy

    fx = magnitude * (dx / length)
    fy = magnitude * (dy / length)

    # Newton's third law
    b1.force[0] += fx
    b1.force[1] += fy
    b2.force[0] -= fx
    b2.force[1] -= fy
    return energy
