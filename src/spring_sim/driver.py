# MIT License (see LICENSE)
"""
Frame driver.

A FrameDriver owns the cadence of a running simulation: every frame it runs
a fixed number of small integration sub-steps and then hands the result to
a renderer. Keeping the sub-step small (frame_delay / steps_per_frame) is
what keeps stiff springs stable.

Input handlers should go through grab()/pull()/release() here, between
frames, so that interaction never interleaves with a step. Wall-clock
pacing (timers, vsync) is left to the caller.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field

from . import constants
from .config import SimConfig
from .renderer.adapter import RendererAdapter
from .simulation import Simulation
from .types import Ball

logger = logging.getLogger(__name__)


@dataclass
class FrameDriver:
    """
    Attributes:
        simulation: The simulation to advance.
        steps_per_frame: Integration sub-steps per frame.
        frame_delay: Simulated time per frame in seconds.
        renderer: Optional renderer called after every frame.
        frames: Number of frames completed.
    """
    simulation: Simulation
    steps_per_frame: int = constants.STEPS_PER_FRAME
    frame_delay: float = constants.FRAME_DELAY
    renderer: RendererAdapter | None = None
    frames: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        if int(self.steps_per_frame) != self.steps_per_frame or self.steps_per_frame < 1:
            raise ValueError(f"Steps per frame must be a positive integer, got {self.steps_per_frame}")
        if not self.frame_delay > 0:
            raise ValueError(f"Frame delay must be positive, got {self.frame_delay}")
        self.steps_per_frame = int(self.steps_per_frame)

    @classmethod
    def from_config(
        cls,
        simulation: Simulation,
        config: SimConfig,
        renderer: RendererAdapter | None = None,
    ) -> "FrameDriver":
        return cls(
            simulation=simulation,
            steps_per_frame=config.steps_per_frame,
            frame_delay=config.frame_delay,
            renderer=renderer,
        )

    @property
    def dt(self) -> float:
        """Sub-step length in seconds."""
        return self.frame_delay / self.steps_per_frame

    def advance_frame(self) -> None:
        """Run one frame worth of sub-steps, then render."""
        dt = self.dt
        sim = self.simulation
        for _ in range(self.steps_per_frame):
            sim.update(dt)
        if self.renderer is not None:
            self.renderer.render_simulation(sim)
        self.frames += 1

    def run(self, frames: int) -> None:
        """Advance a number of frames back to back."""
        for _ in range(frames):
            self.advance_frame()
        logger.debug("Ran %d frames (t=%.4f s)", frames, self.simulation.time)

    # Interaction, forwarded between frames

    def grab(self, x: float, y: float) -> Ball | None:
        return self.simulation.grab(x, y)

    def pull(self, x: float, y: float) -> None:
        self.simulation.pull(x, y)

    def release(self) -> None:
        self.simulation.release()
