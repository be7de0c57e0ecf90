# examples/hanging_chain.py
import logging

from spring_sim import build_chain, FrameDriver
from spring_sim.renderer import DebugRenderer

logging.basicConfig(level=logging.INFO)

sim = build_chain()
driver = FrameDriver(sim, steps_per_frame=100, frame_delay=0.010)

driver.run(99)
driver.renderer = DebugRenderer(verbose=False)
driver.advance_frame()

print("t:", sim.time)
print("energy:", sim.compute_energy())
