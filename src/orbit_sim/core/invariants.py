# MIT License (see LICENSE)
"""
Conserved quantities used to check integration quality.

For a central force, total energy and angular momentum are conserved by the
exact dynamics. Leapfrog conserves angular momentum up to rounding and keeps
the energy error bounded (oscillating, not drifting).
"""
from __future__ import annotations
from typing import TYPE_CHECKING, Iterable

import numpy as np

from ..constants import SINGULARITY_EPS
from ..errors import ConfigurationError
from .forces import apply_inverse_square

if TYPE_CHECKING:
    from ..types import Particle


def total_energy(particle: "Particle", eps: float = SINGULARITY_EPS) -> float:
    """
    Total mechanical energy T + V at the current position.

    Refreshes the particle's force/potential cache first.
    """
    apply_inverse_square(particle, eps)
    return particle.kinetic_energy + particle.potential_energy


def angular_momentum(particle: "Particle") -> float | np.ndarray:
    """
    Angular momentum L = x × p about the force center.

    Returns:
        0.0 for D=1, the scalar z-component x0 p1 - x1 p0 for D=2,
        and the vector x × p for D=3.

    Raises:
        ConfigurationError: For D > 3, where no cross product is defined.
    """
    x, p = particle.position, particle.momentum
    if particle.dim == 1:
        return 0.0
    if particle.dim == 2:
        return float(x[0] * p[1] - x[1] * p[0])
    if particle.dim == 3:
        return np.cross(x, p)
    raise ConfigurationError(f"angular momentum is not defined for D={particle.dim}")


def relative_drift(values: Iterable[float]) -> float:
    """
    Largest relative deviation of a series from its first value.

    max_i |e_i - e_0| / |e_0|, or the absolute deviation if e_0 == 0.
    """
    arr = np.asarray(list(values), dtype=np.float64)
    if arr.size == 0:
        return 0.0
    ref = arr[0]
    dev = float(np.max(np.abs(arr - ref)))
    return dev / abs(ref) if ref != 0.0 else dev
