"""
Microbenchmark: time per update vs chain length.
Run:
  python benchmarks/bench_steps.py
"""
import time
from spring_sim import SimConfig, build_chain


def run(n: int, steps: int = 2000):
    config = SimConfig(chain_segments=n)
    sim = build_chain(config)
    dt = config.sub_step

    # warmup
    for _ in range(100):
        sim.update(dt)

    t0 = time.perf_counter()
    for _ in range(steps):
        sim.update(dt)
    t1 = time.perf_counter()

    return (t1 - t0) / steps, config.steps_per_frame


if __name__ == "__main__":
    for n in [10, 50, 100, 250, 500]:
        per_step, steps_per_frame = run(n)
        print(f"N={n:4d}  update={1e6*per_step:9.1f} us  frames/s={1/(steps_per_frame*per_step):8.1f}")
