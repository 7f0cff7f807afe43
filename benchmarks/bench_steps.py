"""
Microbenchmark: time per step vs number of particles.
Run:
  python benchmarks/bench_steps.py
"""
import time
import numpy as np
from charge_sim.simulation import Simulation
from charge_sim.factory import random_particles
from charge_sim.profiler import Profiler

def run(n: int, steps: int = 200):
    prof = Profiler()
    rng = np.random.default_rng(12345)  # determinism
    sim = Simulation(random_particles(n, 800, 600, rng), width=800, height=600, profiler=prof)

    # warmup
    for _ in range(10):
        sim.step()
    prof.stats.clear()

    t0 = time.perf_counter()
    for _ in range(steps):
        sim.step()
    t1 = time.perf_counter()

    per_step = (t1 - t0) / steps
    return per_step, prof.stats.summary()

if __name__ == "__main__":
    # Force field is O(N²): expect ~4x per doubling
    for n in [10, 20, 40, 80]:
        per_step, summary = run(n)
        print(f"N={n:4d}  step={1e3*per_step:8.3f} ms  steps/s={1/per_step:8.1f}")
        for k in ["forces", "integrate", "walls", "normalize"]:
            if k in summary:
                print(" ", k, summary[k])
        print()
