from spring_sim import Simulation


def oscillator() -> Simulation:
    """Undamped, weightless mass on a spring: total energy should stay put."""
    sim = Simulation(gravity=(0.0, 0.0), damping_half_life=None)
    anchor = sim.add_ball(0.1, anchor=1, x=0.0, y=0.0)
    bob = sim.add_ball(0.1, x=0.0, y=-0.06)
    sim.add_spring(anchor, bob, rest_length=0.04, spring_const=500.0)
    return sim


for dt in (1e-4, 1e-5):
    sim = oscillator()
    e0 = sim.compute_energy().total
    for _ in range(int(0.1 / dt)):
        sim.update(dt)
    e1 = sim.compute_energy().total
    print(f"dt={dt:g}  E0={e0:.6f}  E1={e1:.6f}  rel drift={(e1 - e0) / e0:+.2e}")
