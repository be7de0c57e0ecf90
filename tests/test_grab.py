import logging

import numpy as np
from spring_sim.simulation import Simulation
from spring_sim.world import build_chain


def _two_balls():
    sim = Simulation(gravity=(0.0, 0.0), grab_distance_limit=0.05)
    a = sim.add_ball(0.1, anchor=1, x=0.0, y=0.0)
    b = sim.add_ball(0.1, x=0.2, y=0.0)
    sim.add_spring(a, b, 0.2, 500.0)
    return sim, a, b


def test_grab_out_of_range_is_ignored():
    sim, a, b = _two_balls()
    assert sim.grab(1.0, 1.0) is None
    assert sim.grabbed is None
    assert a.anchor == 1
    assert b.anchor == 0


def test_grab_empty_simulation():
    sim = Simulation()
    assert sim.grab(0.0, 0.0) is None
    assert not sim.is_grabbing


def test_grab_snaps_to_cursor():
    sim, a, b = _two_balls()
    b.velocity[:] = (3.0, -1.0)

    got = sim.grab(0.23, 0.01)

    assert got is b
    assert sim.grabbed is b
    assert b.anchor == 1
    assert np.allclose(b.position, [0.23, 0.01])
    assert np.all(b.velocity == 0.0)


def test_grab_at_exact_limit_succeeds():
    sim, a, b = _two_balls()
    assert sim.grab(0.25, 0.0) is b


def test_grab_is_exclusive():
    sim, a, b = _two_balls()
    assert sim.grab(0.2, 0.0) is b
    # Second grab near the other ball is ignored
    assert sim.grab(0.0, 0.0) is None
    assert sim.grabbed is b
    assert a.anchor == 1
    assert b.anchor == 1
    anchored_by_grab = [x for x in sim.balls if x is sim.grabbed]
    assert len(anchored_by_grab) == 1


def test_grab_ties_go_to_first_ball():
    sim = Simulation(grab_distance_limit=1.0)
    first = sim.add_ball(0.1, x=-0.1, y=0.0)
    sim.add_ball(0.1, x=0.1, y=0.0)
    assert sim.grab(0.0, 0.0) is first


def test_pull_moves_grabbed_ball():
    sim, a, b = _two_balls()
    sim.grab(0.2, 0.0)
    sim.pull(0.5, -0.3)
    assert np.allclose(b.position, [0.5, -0.3])
    assert np.all(b.velocity == 0.0)


def test_pull_and_release_without_grab_are_ignored():
    sim, a, b = _two_balls()
    before = b.position.copy()
    sim.pull(0.9, 0.9)
    sim.release()
    assert np.all(b.position == before)
    assert a.anchor == 1 and b.anchor == 0
    assert sim.grabbed is None


def test_ignored_pull_and_release_are_logged(caplog):
    sim, a, b = _two_balls()
    with caplog.at_level(logging.DEBUG, logger="spring_sim.simulation"):
        sim.pull(0.9, 0.9)
        sim.release()
    messages = [r.getMessage() for r in caplog.records]
    assert any(m.startswith("Pull to (0.9, 0.9) ignored") for m in messages)
    assert any(m.startswith("Release ignored") for m in messages)
    assert all(r.levelno == logging.DEBUG for r in caplog.records)


def test_release_restores_mobility():
    sim, a, b = _two_balls()
    sim.grab(0.2, 0.0)
    sim.release()
    assert b.anchor == 0
    assert not b.is_anchored
    assert sim.grabbed is None

    # The ball moves again under the spring
    sim.pull(0.5, 0.0)
    b.position[:] = (0.3, 0.0)
    sim.update(1e-4)
    assert b.velocity[0] < 0


def test_release_keeps_permanent_anchor():
    sim, a, b = _two_balls()
    assert sim.grab(0.01, 0.0) is a
    assert a.anchor == 2
    sim.pull(0.02, 0.02)
    sim.release()
    assert a.anchor == 1
    assert a.is_anchored

    for _ in range(10):
        sim.update(1e-4)
    assert np.allclose(a.position, [0.02, 0.02])


def test_grabbed_ball_is_not_integrated():
    sim = build_chain()
    last = sim.balls[-1]
    x, y = last.position
    sim.grab(x, y)
    for _ in range(500):
        sim.update(1e-4)
    assert np.all(last.position == [x, y])
    assert np.all(last.velocity == 0.0)


def test_grab_drag_release_cycle():
    """Drag the end of a chain sideways and let go; it swings back."""
    sim = build_chain()
    last = sim.balls[-1]
    sim.grab(*last.position)
    for i in range(1, 11):
        sim.pull(0.1 + 0.02 * i, -0.4)
        for _ in range(100):
            sim.update(1e-4)
    sim.release()
    assert last.anchor == 0

    # The end ball oscillates on its spring, so judge the swing by its mean
    # position over 0.05 s rather than by an instantaneous velocity.
    xs = []
    for _ in range(500):
        sim.update(1e-4)
        xs.append(last.position[0])
    assert np.all(np.isfinite(xs))
    assert np.mean(xs) < 0.3
