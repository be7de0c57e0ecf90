# MIT License (see LICENSE)
"""
Simulation configuration.

SimConfig gathers every tunable of the engine, the chain fixture and the
frame driver in one immutable object. Values are validated on construction
so that a bad mass or spring constant fails here rather than turning into
NaN somewhere inside the integrator.
"""
from __future__ import annotations
import logging
import math
from dataclasses import dataclass, fields, asdict
from typing import Any

from . import constants
from .util import pair

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimConfig:
    """
    Tunable parameters.

    Attributes:
        gravity: Gravitational acceleration [gx, gy] in m/s².
        ball_mass: Mass of every chain ball (kg).
        spring_rest_length: Rest length of every chain spring (m).
        spring_const: Stiffness of every chain spring (N/m).
        damping_half_life: Velocity half-life in seconds. None or math.inf disables damping.
        steps_per_frame: Integration sub-steps per rendered frame.
        frame_delay: Simulated time per frame (s).
        grab_distance_limit: Maximum cursor-to-ball distance for a grab (m).
        chain_segments: Number of mobile balls hanging from the anchor.
        chain_offset: Initial offset [dx, dy] between consecutive chain balls (m).
    """
    gravity: tuple[float, float] = constants.GRAVITY
    ball_mass: float = constants.BALL_MASS
    spring_rest_length: float = constants.SPRING_REST_LENGTH
    spring_const: float = constants.SPRING_CONST
    damping_half_life: float | None = constants.DAMPING_HALF_LIFE
    steps_per_frame: int = constants.STEPS_PER_FRAME
    frame_delay: float = constants.FRAME_DELAY
    grab_distance_limit: float = constants.GRAB_DISTANCE_LIMIT
    chain_segments: int = constants.CHAIN_SEGMENTS
    chain_offset: tuple[float, float] = constants.CHAIN_OFFSET

    def __post_init__(self) -> None:
        """Coerce vector fields to tuples, map None half-life to inf, reject invalid values."""
        object.__setattr__(self, "gravity", pair(self.gravity, "gravity"))
        object.__setattr__(self, "chain_offset", pair(self.chain_offset, "chain_offset"))
        if self.damping_half_life is None:
            object.__setattr__(self, "damping_half_life", math.inf)

        if not self.ball_mass > 0:
            raise ValueError(f"Ball mass must be positive, got {self.ball_mass}")
        if not self.spring_const > 0:
            raise ValueError(f"Spring constant must be positive, got {self.spring_const}")
        if not self.spring_rest_length >= 0:
            raise ValueError(f"Spring rest length must be non-negative, got {self.spring_rest_length}")
        if not self.damping_half_life > 0:
            raise ValueError(f"Damping half-life must be positive, got {self.damping_half_life}")
        if int(self.steps_per_frame) != self.steps_per_frame or self.steps_per_frame < 1:
            raise ValueError(f"Steps per frame must be a positive integer, got {self.steps_per_frame}")
        if not self.frame_delay > 0:
            raise ValueError(f"Frame delay must be positive, got {self.frame_delay}")
        if not self.grab_distance_limit >= 0:
            raise ValueError(f"Grab distance limit must be non-negative, got {self.grab_distance_limit}")
        if int(self.chain_segments) != self.chain_segments or self.chain_segments < 1:
            raise ValueError(f"Chain needs at least one segment, got {self.chain_segments}")

    @property
    def sub_step(self) -> float:
        """Length of one integration sub-step in seconds."""
        return self.frame_delay / self.steps_per_frame


def config_from_dict(d: dict[str, Any]) -> SimConfig:
    """
    Build a SimConfig from a plain dictionary (e.g. parsed JSON).

    Missing keys fall back to defaults. Unknown keys are logged and ignored
    so that older or newer files still load.
    """
    known = {f.name for f in fields(SimConfig)}
    unknown = sorted(set(d) - known)
    if unknown:
        logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))

    # JSON has no infinity literal; null means "no damping" and SimConfig maps it
    kwargs = {k: v for k, v in d.items() if k in known}
    return SimConfig(**kwargs)


def config_to_dict(config: SimConfig) -> dict[str, Any]:
    """Serialize a SimConfig to a JSON-compatible dictionary."""
    data = asdict(config)
    data["gravity"] = list(config.gravity)
    data["chain_offset"] = list(config.chain_offset)
    if math.isinf(config.damping_half_life):
        data["damping_half_life"] = None
    return data
