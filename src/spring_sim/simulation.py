# MIT License (see LICENSE)
"""
The simulation container and step loop.

The Simulation class owns every ball and spring and drives them forward:
- Force accumulation (gravity + springs) for the whole system.
- Integration of every mobile ball (midpoint Euler with damping).
- The grab/pull/release protocol that lets an external controller pin one
  ball to a cursor position.

Structure:
    - User creates a Simulation (or calls world.build_chain()).
    - User adds balls via add_ball() and links them via add_spring().
    - A driver calls update(dt) many times per rendered frame.
    - Input handlers call grab()/pull()/release() between updates.

The engine is single-threaded and holds no locks. Callers sharing one
instance across threads must serialize every call themselves.
"""
from __future__ import annotations
import logging
import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from . import constants
from .types import Ball, Spring, EnergyReport
from .util import f64, distance, pair
from .core.forces import apply_gravity, apply_spring_force
from .core.integrators import damping_factor, midpoint_step
from .core.invariants import (
    kinetic_energy,
    gravitational_potential_energy,
    spring_potential_energy,
)

if TYPE_CHECKING:
    from .config import SimConfig

logger = logging.getLogger(__name__)


@dataclass
class Simulation:
    """
    Mass-spring world.

    Attributes:
        gravity: Global gravity vector (default [0, -9.8]).
        damping_half_life: Velocity half-life in seconds. None or math.inf
                           disables damping.
        grab_distance_limit: A grab only succeeds if some ball lies within
                             this distance of the cursor.
        spring_eps: Springs shorter than this apply no force.
        grabbed: The ball currently held by grab(), or None.
        time: Simulated time elapsed through update().
        step_count: Number of update() calls so far.
    """
    gravity: tuple[float, float] = constants.GRAVITY
    damping_half_life: float | None = constants.DAMPING_HALF_LIFE
    grab_distance_limit: float = constants.GRAB_DISTANCE_LIMIT
    spring_eps: float = constants.SPRING_EPS

    # Internal state
    grabbed: Ball | None = field(default=None, init=False)
    time: float = field(default=0.0, init=False)
    step_count: int = field(default=0, init=False)
    _balls: list[Ball] = field(default_factory=list, init=False, repr=False)
    _springs: list[Spring] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate parameters and cache gravity as an array."""
        if self.damping_half_life is None:
            self.damping_half_life = math.inf
        if not self.damping_half_life > 0:
            raise ValueError(f"Damping half-life must be positive, got {self.damping_half_life}")
        if not self.grab_distance_limit >= 0:
            raise ValueError(f"Grab distance limit must be non-negative, got {self.grab_distance_limit}")

        self.gravity = pair(self.gravity, "gravity")
        self._g = f64(self.gravity)
        self._next_id = 1

    @classmethod
    def from_config(cls, config: "SimConfig") -> "Simulation":
        """Create an empty simulation using the engine fields of a SimConfig."""
        return cls(
            gravity=config.gravity,
            damping_half_life=config.damping_half_life,
            grab_distance_limit=config.grab_distance_limit,
        )

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @property
    def balls(self) -> tuple[Ball, ...]:
        """All balls in insertion order."""
        return tuple(self._balls)

    @property
    def springs(self) -> tuple[Spring, ...]:
        """All springs in insertion order."""
        return tuple(self._springs)

    def add_ball(self, mass: float, anchor: int | bool = 0, x: float = 0.0, y: float = 0.0) -> Ball:
        """
        Add a ball to the simulation.

        Args:
            mass: Mass in kg, must be positive.
            anchor: Anchor count (or bool). Non-zero means fixed in place.
            x, y: Initial position in meters.

        Returns:
            The new ball, with its id assigned.

        Raises:
            ValueError: If mass is not positive or anchor is negative.
        """
        if not mass > 0:
            raise ValueError(f"Ball mass must be positive, got {mass}")
        if int(anchor) < 0:
            raise ValueError(f"Anchor count must be non-negative, got {anchor}")

        ball = Ball(mass=float(mass), anchor=int(anchor), position=(x, y))
        ball.id = self._next_id
        self._next_id += 1
        self._balls.append(ball)
        logger.debug("Added ball %d (mass=%g, anchor=%d) at (%g, %g)", ball.id, mass, ball.anchor, x, y)
        return ball

    def add_spring(self, ball1: Ball, ball2: Ball, rest_length: float, spring_const: float) -> Spring:
        """
        Link two balls of this simulation with a spring.

        Raises:
            ValueError: If either ball belongs elsewhere, both ends are the
                        same ball, rest_length < 0 or spring_const <= 0.
        """
        for b in (ball1, ball2):
            if not self._owns(b):
                raise ValueError(f"Ball {b.id} does not belong to this simulation")
        if ball1 is ball2:
            raise ValueError(f"Spring endpoints must be distinct balls, got ball {ball1.id} twice")
        if not rest_length >= 0:
            raise ValueError(f"Spring rest length must be non-negative, got {rest_length}")
        if not spring_const > 0:
            raise ValueError(f"Spring constant must be positive, got {spring_const}")

        spring = Spring(ball1, ball2, float(rest_length), float(spring_const))
        self._springs.append(spring)
        logger.debug("Added spring %d-%d (rest=%g, k=%g)", ball1.id, ball2.id, rest_length, spring_const)
        return spring

    def _owns(self, ball: Ball) -> bool:
        idx = ball.id - 1
        return 0 <= idx < len(self._balls) and self._balls[idx] is ball

    # -------------------------------------------------------------------------
    # Stepping
    # -------------------------------------------------------------------------

    def accumulate_forces(self) -> float:
        """
        Rebuild every ball's force from scratch.

        Each force is reset to m * g, then every spring adds its pair of
        equal and opposite forces.

        Returns:
            Total elastic energy stored in the springs.
        """
        for b in self._balls:
            b.clear_forces()
            apply_gravity(b, self._g)

        energy = 0.0
        for s in self._springs:
            energy += apply_spring_force(s, self.spring_eps)
        return energy

    def update(self, dt: float) -> None:
        """
        Advance the simulation by one sub-step.

        All forces are computed against the current state before any ball
        moves. Anchored and grabbed balls keep their position and velocity.

        Args:
            dt: Sub-step length in seconds.

        Raises:
            ValueError: If dt is not positive.
        """
        if not dt > 0:
            raise ValueError(f"Time step must be positive, got {dt}")

        self.accumulate_forces()

        damping = damping_factor(dt, self.damping_half_life)
        for b in self._balls:
            midpoint_step(b, dt, damping)

        self.time += dt
        self.step_count += 1

    # -------------------------------------------------------------------------
    # Interaction
    # -------------------------------------------------------------------------

    @property
    def is_grabbing(self) -> bool:
        return self.grabbed is not None

    def nearest_ball(self, x: float, y: float) -> tuple[Ball | None, float]:
        """
        Find the ball closest to a world point.

        Ties go to the ball added first.

        Returns:
            (ball, distance), or (None, inf) for an empty simulation.
        """
        best: Ball | None = None
        best_dist = math.inf
        for b in self._balls:
            d = distance(b.position, (x, y))
            if d < best_dist:
                best, best_dist = b, d
        return best, best_dist

    def grab(self, x: float, y: float) -> Ball | None:
        """
        Pin the ball nearest to (x, y) to the cursor.

        Does nothing if a ball is already grabbed or no ball lies within
        grab_distance_limit. On success the ball's anchor count goes up by
        one and the ball snaps to (x, y) at once.

        Returns:
            The grabbed ball, or None if nothing was grabbed.
        """
        if self.grabbed is not None:
            logger.debug("Grab at (%g, %g) ignored: ball %d already grabbed", x, y, self.grabbed.id)
            return None

        ball, dist = self.nearest_ball(x, y)
        if ball is None or dist > self.grab_distance_limit:
            logger.debug("Grab at (%g, %g) ignored: no ball within %g m", x, y, self.grab_distance_limit)
            return None

        ball.anchor += 1
        self.grabbed = ball
        logger.info("Grabbed ball %d at (%g, %g)", ball.id, x, y)
        self.pull(x, y)
        return ball

    def pull(self, x: float, y: float) -> None:
        """
        Move the grabbed ball to (x, y) and stop it.

        The velocity is zeroed so the jump does not carry into the next
        integration step. Does nothing when no ball is grabbed.
        """
        ball = self.grabbed
        if ball is None:
            logger.debug("Pull to (%g, %g) ignored: nothing grabbed", x, y)
            return
        ball.position[0] = x
        ball.position[1] = y
        ball.velocity.fill(0.0)

    def release(self) -> None:
        """
        Let go of the grabbed ball, restoring its previous anchor count.

        Does nothing when no ball is grabbed.
        """
        ball = self.grabbed
        if ball is None:
            logger.debug("Release ignored: nothing grabbed")
            return
        ball.anchor -= 1
        self.grabbed = None
        logger.info("Released ball %d", ball.id)

    # -------------------------------------------------------------------------
    # Diagnostics
    # -------------------------------------------------------------------------

    def compute_energy(self) -> EnergyReport:
        """
        Kinetic and potential energy of the whole system.

        Potential energy is gravitational (zero at y = 0) plus elastic.
        Reads state only.
        """
        ke = kinetic_energy(self._balls)
        pe = gravitational_potential_energy(self._balls, self._g)
        for s in self._springs:
            pe += spring_potential_energy(s)
        return EnergyReport(kinetic=ke, potential=pe)
