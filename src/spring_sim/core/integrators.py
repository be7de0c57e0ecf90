# MIT License (see LICENSE)
"""
Time integration for point masses.

The engine uses a midpoint (semi-implicit) Euler step with exponential
velocity damping:

    dv = dt * F / m
    x(t+dt) = x(t) + dt * (v(t) + dv/2)
    v(t+dt) = damping(dt) * v(t) + dv

The position update uses the mean of the old and new (undamped) velocity,
which is second order in dt and far better behaved than forward Euler for
stiff, oscillating springs.

Damping is configured as a half-life τ: the time after which a free ball's
velocity has decayed to half. The per-step factor 0.5^(dt/τ) gives the same
decay per unit time whatever the sub-step size.

Reference:
    Midpoint method: https://en.wikipedia.org/wiki/Midpoint_method
"""
from __future__ import annotations

import math

from ..types import Ball


def damping_factor(dt: float, half_life: float | None) -> float:
    """
    Fraction of velocity retained over a step of length dt.

    Args:
        dt: Step length in seconds.
        half_life: Velocity half-life in seconds. None or inf disables damping.

    Returns:
        0.5 ** (dt / half_life), or exactly 1.0 without damping.
    """
    if half_life is None or math.isinf(half_life):
        return 1.0
    return 0.5 ** (dt / half_life)


def half_life_from_factor(factor: float, dt: float) -> float:
    """
    Convert a fixed per-step retention factor into a half-life.

    Older tunings express damping as "keep `factor` of the velocity every
    step of length dt". This returns the half-life that reproduces that
    factor at that dt.

    Args:
        factor: Retained fraction per step, in (0, 1].
        dt: The step length the factor was tuned for.

    Raises:
        ValueError: If factor is outside (0, 1] or dt is non-positive.
    """
    if not 0.0 < factor <= 1.0:
        raise ValueError(f"Damping factor must be in (0, 1], got {factor}")
    if dt <= 0:
        raise ValueError(f"Time step must be positive, got {dt}")
    if factor == 1.0:
        return math.inf
    return dt * math.log(0.5) / math.log(factor)


def midpoint_step(ball: Ball, dt: float, damping: float = 1.0) -> None:
    """
    Advance a single ball by dt using its accumulated force.

    Anchored balls (including grabbed ones) are left untouched.

    Args:
        ball: Ball to integrate (modified in-place).
        dt: Timestep in seconds.
        damping: Velocity retention factor for this step, see damping_factor().
    """
    if ball.is_anchored:
        return

    # F = ma  =>  dv = dt * F/m
    dv = dt * ball.force / ball.mass

    ball.position += dt * (ball.velocity + dv / 2.0)
    ball.velocity = damping * ball.velocity + dv
