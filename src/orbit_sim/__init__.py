# MIT License (see LICENSE)
"""
orbit_sim - Leapfrog integration of a point mass around a fixed center.

The particle moves under an inverse-square attraction F = -GMm x / |x|³
toward the origin, in any fixed number of dimensions D >= 1. Integration
uses the symplectic leapfrog (Störmer-Verlet) scheme, which keeps the
energy error bounded over arbitrarily long runs.

Main entry points:
    - Particle: Position, momentum, inverse mass and coupling constant.
    - LeapfrogIntegrator: Fixed-step run loop with periodic snapshots.
    - TabularReporter, SnapshotRecorder: Snapshot sinks.

Submodules:
    - core: Force law, kinematic conversions, step primitive, invariants.
    - io: Snapshot reporting and JSON run files.

Example:
    import sys
    from orbit_sim import Particle, LeapfrogIntegrator, TabularReporter

    planet = Particle.from_velocity(position=(9.0, 0.0), velocity=(0.0, 1 / 3))
    LeapfrogIntegrator(planet, dt=1e-3, steps=500_000, report_every=5,
                       sink=TabularReporter(sys.stdout)).run()
"""
from .errors import OrbitSimError, ConfigurationError, DomainError
from .types import Particle
from .simulation import LeapfrogIntegrator, SimulationClock
from .io.report import Snapshot, SnapshotRecorder, TabularReporter

__all__ = [
    # Simulation
    "Particle",
    "LeapfrogIntegrator",
    "SimulationClock",
    # Reporting
    "Snapshot",
    "SnapshotRecorder",
    "TabularReporter",
    # Errors
    "OrbitSimError",
    "ConfigurationError",
    "DomainError",
]
