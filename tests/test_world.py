import numpy as np
import pytest
from spring_sim.config import SimConfig
from spring_sim.world import build_chain


def test_default_chain_layout():
    sim = build_chain()
    assert len(sim.balls) == 11
    assert len(sim.springs) == 10

    anchor = sim.balls[0]
    assert anchor.anchor == 1
    assert np.all(anchor.position == [0.0, 0.0])

    for i, b in enumerate(sim.balls[1:], start=1):
        assert b.anchor == 0
        assert b.mass == 0.1
        assert np.allclose(b.position, [0.01 * i, -0.05 * i])

    for i, s in enumerate(sim.springs, start=1):
        assert s.ball1 is sim.balls[i]
        assert s.ball2 is sim.balls[i - 1]
        assert s.rest_length == 0.04
        assert s.spring_const == 1000.0


def test_chain_uses_config():
    config = SimConfig(ball_mass=0.5, spring_const=200.0, spring_rest_length=0.1,
                       chain_segments=3, chain_offset=(0.0, -0.1), gravity=(0.0, -1.0),
                       grab_distance_limit=0.2)
    sim = build_chain(config)
    assert len(sim.balls) == 4
    assert all(b.mass == 0.5 for b in sim.balls)
    assert all(s.spring_const == 200.0 for s in sim.springs)
    assert np.allclose(sim.balls[-1].position, [0.0, -0.3])
    assert sim.gravity == (0.0, -1.0)
    assert sim.grab_distance_limit == 0.2


def test_segments_override():
    sim = build_chain(segments=1)
    assert len(sim.balls) == 2
    assert len(sim.springs) == 1


def test_rejects_empty_chain():
    with pytest.raises(ValueError):
        build_chain(segments=0)


def test_chain_hangs_stably():
    """Half a second of default settings: the chain stays finite and below the anchor."""
    sim = build_chain()
    for _ in range(5000):
        sim.update(1e-4)
    for b in sim.balls[1:]:
        assert np.all(np.isfinite(b.position))
        assert b.position[1] < 0.0
    for s in sim.springs:
        assert s.length() < 0.2
