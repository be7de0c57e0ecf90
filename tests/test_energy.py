import numpy as np
from spring_sim.simulation import Simulation
from spring_sim.core.invariants import linear_momentum
from spring_sim.world import build_chain


def _oscillator(damping_half_life=None):
    sim = Simulation(gravity=(0.0, 0.0), damping_half_life=damping_half_life)
    anchor = sim.add_ball(0.1, anchor=1, x=0.0, y=0.0)
    bob = sim.add_ball(0.1, x=0.03, y=-0.04)  # length 0.05
    sim.add_spring(anchor, bob, rest_length=0.04, spring_const=500.0)
    return sim, bob


def test_energy_bounded_without_damping():
    sim, bob = _oscillator()
    e0 = sim.compute_energy().total
    assert np.isclose(e0, 0.5 * 500.0 * 0.01 ** 2)

    worst = 0.0
    for i in range(10000):
        sim.update(1e-5)
        if i % 100 == 0:
            worst = max(worst, abs(sim.compute_energy().total - e0))

    e1 = sim.compute_energy().total
    print("energy", e0, "->", e1, "worst drift", worst)
    assert abs(e1 - e0) / e0 < 1e-2
    assert worst / e0 < 1e-2


def test_energy_decays_with_damping():
    sim, bob = _oscillator(damping_half_life=0.05)
    e0 = sim.compute_energy().total
    for _ in range(2000):
        sim.update(1e-4)
    assert sim.compute_energy().total < 0.5 * e0


def test_compute_energy_is_read_only():
    sim = build_chain()
    for _ in range(100):
        sim.update(1e-4)
    snapshot = [(b.position.copy(), b.velocity.copy(), b.force.copy()) for b in sim.balls]

    sim.compute_energy()

    for b, (p, v, f) in zip(sim.balls, snapshot):
        assert np.all(b.position == p)
        assert np.all(b.velocity == v)
        assert np.all(b.force == f)


def test_gravitational_potential_zero_at_origin():
    sim = Simulation(gravity=(0.0, -9.8))
    sim.add_ball(0.1, x=0.5, y=-1.0)
    report = sim.compute_energy()
    assert report.kinetic == 0.0
    assert np.isclose(report.potential, 0.1 * 9.8 * -1.0)


def test_kinetic_energy():
    sim = Simulation()
    b = sim.add_ball(2.0)
    b.velocity[:] = (3.0, 4.0)
    assert np.isclose(sim.compute_energy().kinetic, 25.0)


def test_free_springs_conserve_momentum():
    sim = Simulation(gravity=(0.0, 0.0), damping_half_life=None)
    a = sim.add_ball(0.1, x=0.0, y=0.0)
    b = sim.add_ball(0.3, x=0.07, y=0.02)
    c = sim.add_ball(0.2, x=0.01, y=0.09)
    sim.add_spring(a, b, 0.04, 800.0)
    sim.add_spring(b, c, 0.04, 800.0)
    a.velocity[:] = (0.5, 0.0)

    p0 = linear_momentum(sim.balls)
    for _ in range(1000):
        sim.update(1e-4)
    assert np.allclose(linear_momentum(sim.balls), p0, atol=1e-12)
