# examples/elliptic_orbit_3d.py
import logging

import numpy as np

from orbit_sim import LeapfrogIntegrator, Particle, SnapshotRecorder
from orbit_sim.core.invariants import angular_momentum, relative_drift

logging.basicConfig(level=logging.INFO)

# Inclined ellipse starting at aphelion
planet = Particle.from_velocity(position=(6.0, 0.0, 0.0), velocity=(0.0, 0.25, 0.15))
L0 = angular_momentum(planet)

rec = SnapshotRecorder()
LeapfrogIntegrator(planet, dt=0.005, steps=60_000, report_every=20, sink=rec).run()

r = np.linalg.norm(rec.positions(), axis=1)
print("snapshots:", len(rec))
print("perihelion ~", r.min(), "aphelion ~", r.max())
print("relative energy drift:", relative_drift(rec.energies()))
print("angular momentum change:", np.linalg.norm(angular_momentum(planet) - L0))
