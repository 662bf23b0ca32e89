# MIT License (see LICENSE)
"""
Exception hierarchy for orbit_sim.

Two failure modes exist:
- ConfigurationError: invalid construction parameters, raised before any
  stepping takes place.
- DomainError: a force evaluation at (or within eps of) the force center,
  where the inverse-square law is singular.

Neither is recoverable; both propagate to the caller of the run.
"""
from __future__ import annotations

import numpy as np


class OrbitSimError(Exception):
    """Base class for all orbit_sim errors."""


class ConfigurationError(OrbitSimError, ValueError):
    """Invalid particle or integrator parameters."""


class DomainError(OrbitSimError, ArithmeticError):
    """
    Force law evaluated outside its domain (radius <= eps or non-finite).

    Attributes:
        position: Copy of the offending position vector.
        radius: Distance from the origin at the failed evaluation.
    """

    def __init__(self, position: np.ndarray, radius: float) -> None:
        self.position = np.array(position, dtype=np.float64)
        self.radius = float(radius)
        super().__init__(
            f"inverse-square force is singular at position {self.position.tolist()} "
            f"(radius={self.radius!r})"
        )
