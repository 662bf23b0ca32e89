"""
Microbenchmark: time per leapfrog step vs dimension and reporting cadence.
Run:
  python benchmarks/bench_steps.py
"""
import time

import numpy as np

from orbit_sim import LeapfrogIntegrator, Particle, SnapshotRecorder
from orbit_sim.profiler import Profiler


def run(dim: int, report_every: int, steps: int = 50_000):
    prof = Profiler()
    position = np.zeros(dim)
    position[0] = 9.0
    velocity = np.zeros(dim)
    if dim > 1:
        velocity[1] = 1.0 / 3.0
    planet = Particle.from_velocity(position, velocity)
    integrator = LeapfrogIntegrator(
        planet,
        dt=1e-3,
        steps=steps,
        report_every=report_every,
        sink=SnapshotRecorder() if report_every else None,
        profiler=prof,
    )

    t0 = time.perf_counter()
    integrator.run()
    t1 = time.perf_counter()

    per_step = (t1 - t0) / steps
    return per_step, prof.stats.summary()


if __name__ == "__main__":
    for dim in [1, 2, 3]:
        for every in [0, 5]:
            per_step, summary = run(dim, every)
            print(f"D={dim}  report_every={every}  step={1e6*per_step:8.2f} us  steps/s={1/per_step:10.1f}")
            for k in ["step", "report"]:
                if k in summary:
                    print(" ", k, summary[k])
            print()
