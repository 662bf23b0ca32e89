# MIT License (see LICENSE)
"""
Core numerics: force law, kinematics, leapfrog stepping, invariants.

Typical usage:
    from orbit_sim.core import apply_inverse_square, leapfrog_step

    apply_inverse_square(particle)
    leapfrog_step(particle, dt=1e-3)
"""
from .forces import inverse_square, apply_inverse_square
from .kinematics import velocity_to_momentum, momentum_to_velocity, kinetic_energy
from .integrators import position_step, momentum_step, leapfrog_step
from .invariants import total_energy, angular_momentum, relative_drift

__all__ = [
    # Forces
    "inverse_square",
    "apply_inverse_square",
    # Kinematics
    "velocity_to_momentum",
    "momentum_to_velocity",
    "kinetic_energy",
    # Integrators
    "position_step",
    "momentum_step",
    "leapfrog_step",
    # Invariants
    "total_energy",
    "angular_momentum",
    "relative_drift",
]
