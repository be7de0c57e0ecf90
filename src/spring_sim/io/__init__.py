# MIT License (see LICENSE)
"""
Input/Output utilities.

Typical usage:
    from spring_sim.io import load_simulation, save_simulation, load_config

    sim = load_simulation("chain.json")
    save_simulation(sim, "snapshot.json")
    config = load_config("settings.json")
"""
from .json_io import (
    load_raw,
    load_simulation,
    save_simulation,
    simulation_from_json,
    simulation_to_json,
    load_config,
    save_config,
)

__all__ = [
    "load_raw",
    "load_simulation",
    "save_simulation",
    "simulation_from_json",
    "simulation_to_json",
    "load_config",
    "save_config",
]
