# MIT License (see LICENSE)
"""
Default physical and numerical constants for the mass-spring simulation.

All values use SI units. They are only defaults: every one of them can be
overridden through SimConfig (see config.py) or the Simulation fields.
"""
from __future__ import annotations

# Standard gravity, pointing straight down (m/s²).
GRAVITY: tuple[float, float] = (0.0, -9.8)

# Chain fixture defaults.
BALL_MASS: float = 0.1                      # kg
SPRING_REST_LENGTH: float = 0.04            # m
SPRING_CONST: float = 1000.0                # N/m
CHAIN_SEGMENTS: int = 10
CHAIN_OFFSET: tuple[float, float] = (0.01, -0.05)   # m, per link

# Frame pacing. One frame is split into STEPS_PER_FRAME integration sub-steps.
FRAME_DELAY: float = 0.010                  # s
STEPS_PER_FRAME: int = 100

# Velocity half-life. Equivalent to retaining 0.9998 of the velocity per
# 1e-4 s sub-step: 1e-4 * ln(0.5) / ln(0.9998).
DAMPING_HALF_LIFE: float = 0.34654

# Maximum cursor distance for a grab to catch a ball (m).
GRAB_DISTANCE_LIMIT: float = 0.05

# Springs shorter than this have no defined direction and apply no force.
SPRING_EPS: float = 1e-6
