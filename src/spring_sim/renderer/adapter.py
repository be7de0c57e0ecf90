# MIT License (see LICENSE)
"""
Renderer adapters for simulation visualization.

This module provides an abstract base class for rendering and a few simple
implementations. The engine itself never draws anything and knows nothing
about screen coordinates; a concrete adapter is responsible for mapping
world units to pixels.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO
import sys

from ..types import Ball, Spring

if TYPE_CHECKING:
    from ..simulation import Simulation


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Usage:
        renderer.begin_frame(sim.time)
        for spring in sim.springs:
            renderer.draw_spring(spring)
        for ball in sim.balls:
            renderer.draw_ball(ball)
        renderer.end_frame()

    Or use the convenience method:
        renderer.render_simulation(sim)
    """

    @abstractmethod
    def begin_frame(self, time: float) -> None:
        """
        Begin a new frame.

        Args:
            time: Current simulation time in seconds.
        """
        ...

    @abstractmethod
    def draw_ball(self, ball: Ball) -> None:
        """Draw a single ball."""
        ...

    @abstractmethod
    def draw_spring(self, spring: Spring) -> None:
        """Draw a single spring."""
        ...

    @abstractmethod
    def end_frame(self) -> None:
        """Finalize the current frame."""
        ...

    def render_simulation(self, sim: "Simulation") -> None:
        """
        Render a whole simulation: springs first, then balls on top.
        """
        self.begin_frame(sim.time)
        for spring in sim.springs:
            self.draw_spring(spring)
        for ball in sim.balls:
            self.draw_ball(ball)
        self.end_frame()


class DebugRenderer(RendererAdapter):
    """
    Text renderer for development and testing.

    Output:
        === Frame t=0.0100 ===
        spring 2-1 len=0.0510
        [1] anchor @ (0.0000, 0.0000)
        [2] ball @ (0.0100, -0.0500) v=(0.0000, -0.0049)
    """

    def __init__(self, output: TextIO | None = None, verbose: bool = True):
        """
        Args:
            output: Output stream (defaults to sys.stdout).
            verbose: If True, include springs and velocities.
        """
        self.output = output or sys.stdout
        self.verbose = verbose

    def begin_frame(self, time: float) -> None:
        self.output.write(f"=== Frame t={time:.4f} ===\n")

    def draw_ball(self, ball: Ball) -> None:
        pos = ball.position
        kind = "anchor" if ball.is_anchored else "ball"
        line = f"[{ball.id}] {kind} @ ({pos[0]:.4f}, {pos[1]:.4f})"
        if self.verbose:
            vel = ball.velocity
            line += f" v=({vel[0]:.4f}, {vel[1]:.4f})"
        self.output.write(line + "\n")

    def draw_spring(self, spring: Spring) -> None:
        if not self.verbose:
            return
        self.output.write(f"spring {spring.ball1.id}-{spring.ball2.id} len={spring.length():.4f}\n")

    def end_frame(self) -> None:
        self.output.write("\n")
        self.output.flush()


class NullRenderer(RendererAdapter):
    """
    No-op renderer, for benchmarks and headless runs.
    """

    def begin_frame(self, time: float) -> None:
        pass

    def draw_ball(self, ball: Ball) -> None:
        pass

    def draw_spring(self, spring: Spring) -> None:
        pass

    def end_frame(self) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Renderer that records every frame in memory.

    Example:
        renderer = BufferedRenderer()
        driver = FrameDriver(sim, renderer=renderer)
        driver.run(50)

        for frame in renderer.frames:
            print(frame["time"], frame["balls"][-1]["position"])
    """

    def __init__(self):
        self.frames: list[dict] = []
        self._current_frame: dict | None = None

    def begin_frame(self, time: float) -> None:
        self._current_frame = {
            "time": time,
            "balls": [],
            "springs": [],
        }

    def draw_ball(self, ball: Ball) -> None:
        if self._current_frame is None:
            return
        self._current_frame["balls"].append({
            "id": ball.id,
            "position": ball.position.tolist(),
            "anchored": ball.is_anchored,
        })

    def draw_spring(self, spring: Spring) -> None:
        if self._current_frame is None:
            return
        p1, p2 = spring.endpoints()
        self._current_frame["springs"].append((p1.tolist(), p2.tolist()))

    def end_frame(self) -> None:
        if self._current_frame is not None:
            self.frames.append(self._current_frame)
            self._current_frame = None

    def clear(self) -> None:
        """Clear all buffered frames."""
        self.frames.clear()
