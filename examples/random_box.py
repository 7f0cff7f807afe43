import logging
import time

import numpy as np

from charge_sim.constants import DEFAULT_NUMBER_OF_PARTICLES, SLEEP_TIME_MS
from charge_sim.factory import random_particles
from charge_sim.renderer import DebugRenderer
from charge_sim.simulation import Simulation

logging.basicConfig(level=logging.INFO)

rng = np.random.default_rng(2024)
sim = Simulation(random_particles(DEFAULT_NUMBER_OF_PARTICLES, 800, 600, rng), width=800, height=600)
renderer = DebugRenderer(verbose=False)

# Fixed-rate driver; Ctrl-C stops issuing ticks.
try:
    while sim.steps < 200:
        sim.step()
        if sim.steps % 20 == 0:
            renderer.render_simulation(sim)
        time.sleep(SLEEP_TIME_MS / 1000)
except KeyboardInterrupt:
    pass
