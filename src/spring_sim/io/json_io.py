# MIT License (see LICENSE)
"""
JSON serialization and deserialization for simulations and configuration.

JSON Schema Overview (simulation file):
---------------------------------------
{
  "gravity": [float, float],          # Default: [0.0, -9.8]
  "damping_half_life": float | null,  # Seconds; null = no damping
  "grab_distance_limit": float,       # Meters
  "balls": [
    {
      "mass": float,                  # Required, > 0
      "anchor": int,                  # Anchor count, default 0
      "position": [x, y],             # Default: [0, 0]
      "velocity": [vx, vy]            # Default: [0, 0]
    }
  ],
  "springs": [
    {
      "ball1": int, "ball2": int,     # Indices in balls list
      "rest_length": float,
      "spring_const": float
    }
  ]
}

A configuration file is a flat object with the SimConfig field names, see
config.py. Grab state is transient and never written.
"""
from __future__ import annotations
import json
import logging
import math
from typing import TYPE_CHECKING, Any

from .. import constants
from ..config import SimConfig, config_from_dict, config_to_dict
from ..simulation import Simulation
from ..types import Ball

if TYPE_CHECKING:
    from os import PathLike

logger = logging.getLogger(__name__)

_SPRING_KEYS = ("ball1", "ball2", "rest_length", "spring_const")


def load_raw(path: "str | PathLike[str]") -> dict[str, Any]:
    """
    Load raw JSON data from a file without object construction.

    Args:
        path: Absolute or relative path to the JSON file.
    """
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _dump(data: dict[str, Any], path: "str | PathLike[str]", indent: int) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent)


# =============================================================================
# Simulation
# =============================================================================

def simulation_from_json(data: dict[str, Any]) -> Simulation:
    """
    Construct a Simulation from a parsed JSON dictionary.

    Raises:
        ValueError: If a ball is missing its mass, a spring is missing a
                    required field or references a ball index that does
                    not exist, or any value fails the Simulation's own
                    validation.
    """
    half_life = data.get("damping_half_life", constants.DAMPING_HALF_LIFE)
    sim = Simulation(
        gravity=tuple(data.get("gravity", constants.GRAVITY)),
        damping_half_life=math.inf if half_life is None else float(half_life),
        grab_distance_limit=float(data.get("grab_distance_limit", constants.GRAB_DISTANCE_LIMIT)),
    )

    for i, b in enumerate(data.get("balls", [])):
        if "mass" not in b:
            raise ValueError(f"Ball {i} is missing required 'mass' field")
        x, y = b.get("position", [0.0, 0.0])
        ball = sim.add_ball(float(b["mass"]), anchor=int(b.get("anchor", 0)), x=float(x), y=float(y))
        vx, vy = b.get("velocity", [0.0, 0.0])
        ball.velocity[0] = float(vx)
        ball.velocity[1] = float(vy)

    balls = sim.balls
    for i, s in enumerate(data.get("springs", [])):
        missing = [k for k in _SPRING_KEYS if k not in s]
        if missing:
            raise ValueError(f"Spring {i} is missing required field(s): {', '.join(missing)}")
        i1, i2 = s["ball1"], s["ball2"]
        if not (0 <= i1 < len(balls) and 0 <= i2 < len(balls)):
            raise ValueError(f"Spring references invalid ball index: {i1} or {i2}")
        sim.add_spring(balls[i1], balls[i2], float(s["rest_length"]), float(s["spring_const"]))

    return sim


def simulation_to_json(sim: Simulation) -> dict[str, Any]:
    """
    Serialize a Simulation to a JSON-compatible dictionary.

    A ball held by an active grab is written with the anchor count it had
    before the grab.
    """
    index = {id(b): i for i, b in enumerate(sim.balls)}
    half_life = sim.damping_half_life

    return {
        "gravity": list(sim.gravity),
        "damping_half_life": None if math.isinf(half_life) else half_life,
        "grab_distance_limit": sim.grab_distance_limit,
        "balls": [_ball_to_json(b, grabbed=b is sim.grabbed) for b in sim.balls],
        "springs": [
            {
                "ball1": index[id(s.ball1)],
                "ball2": index[id(s.ball2)],
                "rest_length": s.rest_length,
                "spring_const": s.spring_const,
            }
            for s in sim.springs
        ],
    }


def _ball_to_json(ball: Ball, grabbed: bool = False) -> dict[str, Any]:
    return {
        "mass": ball.mass,
        "anchor": ball.anchor - 1 if grabbed else ball.anchor,
        "position": ball.position.tolist(),
        "velocity": ball.velocity.tolist(),
    }


def load_simulation(path: "str | PathLike[str]") -> Simulation:
    """
    Load a Simulation from a JSON file.

    Raises:
        FileNotFoundError: If the file cannot be found.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If the contents are invalid.
    """
    sim = simulation_from_json(load_raw(path))
    logger.info("Loaded simulation with %d balls, %d springs from %s",
                len(sim.balls), len(sim.springs), path)
    return sim


def save_simulation(sim: Simulation, path: "str | PathLike[str]", indent: int = 2) -> None:
    """Save a Simulation to a JSON file on disk."""
    _dump(simulation_to_json(sim), path, indent)
    logger.info("Saved simulation to %s", path)


# =============================================================================
# Configuration
# =============================================================================

def load_config(path: "str | PathLike[str]") -> SimConfig:
    """Load a SimConfig from a JSON file. Missing keys take their defaults."""
    config = config_from_dict(load_raw(path))
    logger.info("Loaded configuration from %s", path)
    return config


def save_config(config: SimConfig, path: "str | PathLike[str]", indent: int = 2) -> None:
    """Save a SimConfig to a JSON file on disk."""
    _dump(config_to_dict(config), path, indent)
