# MIT License (see LICENSE)
"""
Ready-made worlds.

build_chain() creates the standard fixture: a chain of balls hanging from a
fixed anchor at the origin. Anything more elaborate (trees, meshes) can be
assembled directly with Simulation.add_ball() and Simulation.add_spring().
"""
from __future__ import annotations
import logging

from .config import SimConfig
from .simulation import Simulation

logger = logging.getLogger(__name__)


def build_chain(config: SimConfig | None = None, segments: int | None = None) -> Simulation:
    """
    Build a chain of balls linked by springs, hanging from an anchor.

    Ball 0 is anchored at (0, 0). Ball i (1..segments) starts at
    (i * dx, i * dy) where (dx, dy) = config.chain_offset, and is linked to
    ball i-1 by a spring with the configured rest length and constant.

    Args:
        config: Parameters to use (defaults to SimConfig()).
        segments: Number of mobile balls; overrides config.chain_segments.

    Returns:
        A new Simulation holding segments + 1 balls and segments springs.

    Raises:
        ValueError: If segments is less than 1.
    """
    config = config or SimConfig()
    n = config.chain_segments if segments is None else segments
    if n < 1:
        raise ValueError(f"Chain needs at least one segment, got {n}")

    sim = Simulation.from_config(config)
    dx, dy = config.chain_offset

    prev = sim.add_ball(config.ball_mass, anchor=1, x=0.0, y=0.0)
    for i in range(1, n + 1):
        ball = sim.add_ball(config.ball_mass, anchor=0, x=dx * i, y=dy * i)
        sim.add_spring(ball, prev, config.spring_rest_length, config.spring_const)
        prev = ball

    logger.info("Built chain with %d segments", n)
    return sim
