# MIT License (see LICENSE)
"""
Conversions between velocity and canonical momentum, and kinetic energy.

Velocity is never stored on a Particle: it is derived from momentum every
time it is read, so these helpers are called on every report and every
kinetic-energy evaluation. All functions return new arrays.
"""
from __future__ import annotations

import numpy as np


def velocity_to_momentum(velocity: np.ndarray, inverse_mass: float) -> np.ndarray:
    """
    Canonical momentum from velocity: p = v / m⁻¹.

    Used once, when a particle is seeded from a velocity initial condition.
    """
    return np.asarray(velocity, dtype=np.float64) / inverse_mass


def momentum_to_velocity(momentum: np.ndarray, inverse_mass: float) -> np.ndarray:
    """Velocity from canonical momentum: v = p * m⁻¹."""
    return np.asarray(momentum, dtype=np.float64) * inverse_mass


def kinetic_energy(velocity: np.ndarray, momentum: np.ndarray) -> float:
    """
    Kinetic energy in momentum/velocity form.

    T = ½ Σ vᵢ pᵢ, which equals ½ m v² when p = m v.
    """
    return float(0.5 * np.dot(velocity, momentum))
