# MIT License (see LICENSE)
"""
Core physics components.

This subpackage provides:
    - Force generators: gravity and Hookean springs.
    - Integrator: midpoint Euler step with half-life velocity damping.
    - Invariants: energy and momentum bookkeeping.

Typical usage:
    from spring_sim.core import apply_spring_force, midpoint_step

    apply_spring_force(spring)
    midpoint_step(ball, dt=1e-4, damping=damping_factor(1e-4, 0.35))
"""
from .forces import apply_gravity, apply_spring_force
from .integrators import damping_factor, half_life_from_factor, midpoint_step
from .invariants import (
    kinetic_energy,
    gravitational_potential_energy,
    spring_potential_energy,
    linear_momentum,
)

__all__ = [
    # Forces
    "apply_gravity",
    "apply_spring_force",
    # Integrator
    "damping_factor",
    "half_life_from_factor",
    "midpoint_step",
    # Invariants
    "kinetic_energy",
    "gravitational_potential_energy",
    "spring_potential_energy",
    "linear_momentum",
]
