# MIT License (see LICENSE)
"""
spring_sim - A 2D mass-spring simulation engine.

Point masses ("balls") linked by Hookean springs, pulled by gravity and
integrated with a damped midpoint Euler scheme. One ball at a time can be
grabbed and dragged by an external controller.

Main entry points:
    - Simulation: The world containing balls and springs.
    - Ball, Spring: The simulated entities.
    - SimConfig: All tunable parameters in one place.
    - build_chain: The standard hanging-chain fixture.
    - FrameDriver: Runs sub-steps per frame and feeds a renderer.

Submodules:
    - core: Force generators, integrator and energy bookkeeping.
    - io: JSON serialization/deserialization.
    - renderer: Optional visualization adapters.

Example:
    from spring_sim import build_chain, FrameDriver

    sim = build_chain()
    driver = FrameDriver(sim)
    driver.run(100)
    print(sim.compute_energy())
"""
from .config import SimConfig
from .driver import FrameDriver
from .simulation import Simulation
from .types import Ball, Spring, EnergyReport
from .world import build_chain

__all__ = [
    # Core simulation
    "Simulation",
    "Ball",
    "Spring",
    "EnergyReport",
    # Setup
    "SimConfig",
    "build_chain",
    "FrameDriver",
]
