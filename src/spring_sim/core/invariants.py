# MIT License (see LICENSE)
"""
Utilities for calculating energy and momentum of the ball/spring system.

Used for verifying simulation correctness and debugging stability issues.
Without damping, total energy should stay constant within integration error.

Gravitational potential energy is measured from y = 0 (more precisely, from
the line through the origin perpendicular to gravity). Only differences are
meaningful.
"""
from __future__ import annotations
from typing import Iterable

import numpy as np

from ..types import Ball, Spring


def kinetic_energy(balls: Iterable[Ball]) -> float:
    """
    Total kinetic energy, T = Σ 0.5 * m * v².

    Anchored balls are included; their velocity is zero unless set by hand.
    """
    ke = 0.0
    for b in balls:
        v_sq = float(np.dot(b.velocity, b.velocity))
        ke += 0.5 * b.mass * v_sq
    return ke


def gravitational_potential_energy(balls: Iterable[Ball], g: np.ndarray) -> float:
    """
    Gravitational potential energy, U = -Σ x · (m g).

    For g = (0, -9.8) this is Σ m * 9.8 * y.
    """
    pe = 0.0
    for b in balls:
        pe -= float(np.dot(b.position, b.mass * g))
    return pe


def spring_potential_energy(spring: Spring) -> float:
    """Elastic energy stored in one spring, 0.5 * k * (len - rest)²."""
    stretch = spring.length() - spring.rest_length
    return 0.5 * spring.spring_const * stretch * stretch


def linear_momentum(balls: Iterable[Ball]) -> np.ndarray:
    """
    Total linear momentum P = Σ m * v in kg·m/s.
    """
    p = np.zeros(2, dtype=np.float64)
    for b in balls:
        p += b.mass * b.velocity
    return p
