# MIT License (see LICENSE)
"""
Inverse-square central force toward a fixed origin.

For a particle at x with coupling GMm:
    r = |x|
    F = -GMm x / r³
    V = -GMm / r

The law is singular at r = 0. Evaluations with r <= eps raise DomainError
instead of producing Inf/NaN; the caller decides whether to abort (the
integrator always does).
"""
from __future__ import annotations
from typing import TYPE_CHECKING

import numpy as np

from ..constants import SINGULARITY_EPS
from ..errors import DomainError
from ..util import norm

if TYPE_CHECKING:
    from ..types import Particle


def inverse_square(
    position: np.ndarray,
    gravitational_parameter: float,
    eps: float = SINGULARITY_EPS,
) -> tuple[np.ndarray, float, float]:
    """
    Evaluate force, potential energy and radius at a position.

    Pure function of its arguments.

    Args:
        position: Position vector of shape (D,).
        gravitational_parameter: GMm (> 0 for attraction).
        eps: Radii <= eps are treated as the singularity.

    Returns:
        Tuple (force, potential_energy, radius).

    Raises:
        DomainError: If r <= eps, r is not finite, or the force overflows
            (r so small that GMm / r² exceeds the float64 range).
    """
    r = norm(position)
    if not np.isfinite(r) or r <= eps:
        raise DomainError(position, r)
    potential = -gravitational_parameter / r
    # Divide by r one factor at a time; r³ alone leaves the float64 range.
    with np.errstate(over="ignore"):
        force = (potential * (position / r)) / r
    if not np.all(np.isfinite(force)):
        raise DomainError(position, r)
    return force, potential, r


def apply_inverse_square(particle: "Particle", eps: float = SINGULARITY_EPS) -> None:
    """
    Refresh particle.force, particle.potential_energy and particle.radius.

    Note:
        On DomainError the particle is left untouched.
    """
    force, potential, r = inverse_square(
        particle.position, particle.gravitational_parameter, eps
    )
    particle.force = force
    particle.potential_energy = potential
    particle.radius = r
