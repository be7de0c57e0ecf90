import logging

import numpy as np
from spring_sim import build_chain, FrameDriver

logging.basicConfig(level=logging.INFO)

sim = build_chain()
driver = FrameDriver(sim)

# Let the chain settle a little
driver.run(50)

# Grab the free end and swing it out to the right over half a second
end = sim.balls[-1]
driver.grab(*end.position)
for i in range(50):
    driver.pull(0.1 + 0.004 * i, -0.45)
    driver.advance_frame()
driver.release()

for _ in range(100):
    driver.advance_frame()

print("end position:", end.position, "distance from anchor:",
      float(np.linalg.norm(end.position - sim.balls[0].position)))
