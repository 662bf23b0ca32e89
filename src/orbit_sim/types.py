# MIT License (see LICENSE)
"""
Particle state for the central-force problem.

A Particle stores position and canonical momentum in a D-dimensional
Cartesian frame centred on the (fixed) force center. Everything else is
either a parameter (inverse mass, gravitational parameter), a cache written
by the force law (force, potential energy, radius), or derived on demand
(velocity, kinetic energy).

Equations of motion (Hamiltonian form):
  dx/dt = p * m⁻¹
  dp/dt = F(x) = -GMm x / |x|³
"""
from __future__ import annotations
import math
from dataclasses import dataclass, field

import numpy as np

from .core.kinematics import kinetic_energy, momentum_to_velocity, velocity_to_momentum
from .errors import ConfigurationError
from .util import vector


def _positive(value, name: str) -> float:
    try:
        v = float(value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"{name} must be a real number, got {value!r}") from exc
    if not math.isfinite(v) or v <= 0.0:
        raise ConfigurationError(f"{name} must be finite and > 0, got {value!r}")
    return v


@dataclass
class Particle:
    """
    A point mass orbiting the origin under an inverse-square attraction.

    Attributes:
        position: Coordinates [x0, ..., x(D-1)] relative to the force center.
        momentum: Canonical momentum, same shape as position.
        inverse_mass: Reciprocal of the particle mass. Must be > 0.
        gravitational_parameter: GMm, the coupling strength. Must be > 0.
        force: Force at the position of the last force evaluation.
        potential_energy: V = -GMm / r at the last force evaluation.
        radius: |position| at the last force evaluation.

    Note:
        force, potential_energy and radius go stale as soon as position
        changes; the integrator refreshes them before every use. A position
        at the origin is accepted here and rejected by the force law.
    """
    position: np.ndarray | tuple[float, ...]
    momentum: np.ndarray | tuple[float, ...] | None = None
    inverse_mass: float = 1.0
    gravitational_parameter: float = 1.0

    # Runtime state (written by core.forces)
    force: np.ndarray = field(init=False, repr=False)
    potential_energy: float = field(default=math.nan, init=False, repr=False)
    radius: float = field(default=math.nan, init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate parameters and convert vectors to float64 arrays."""
        self.inverse_mass = _positive(self.inverse_mass, "inverse_mass")
        self.gravitational_parameter = _positive(
            self.gravitational_parameter, "gravitational_parameter"
        )
        self.position = vector(self.position, "position")
        dim = self.position.shape[0]
        if self.momentum is None:
            self.momentum = np.zeros(dim, dtype=np.float64)
        else:
            self.momentum = vector(self.momentum, "momentum", dim)
        self.force = np.zeros(dim, dtype=np.float64)

    @classmethod
    def from_velocity(
        cls,
        position,
        velocity,
        inverse_mass: float = 1.0,
        gravitational_parameter: float = 1.0,
    ) -> "Particle":
        """
        Build a particle from a velocity initial condition.

        The velocity is converted to momentum once; afterwards only momentum
        is integrated.
        """
        inv_m = _positive(inverse_mass, "inverse_mass")
        pos = vector(position, "position")
        vel = vector(velocity, "velocity", pos.shape[0])
        return cls(
            position=pos,
            momentum=velocity_to_momentum(vel, inv_m),
            inverse_mass=inv_m,
            gravitational_parameter=gravitational_parameter,
        )

    @property
    def dim(self) -> int:
        """Number of spatial dimensions D."""
        return int(self.position.shape[0])

    @property
    def mass(self) -> float:
        return 1.0 / self.inverse_mass

    @property
    def velocity(self) -> np.ndarray:
        """Velocity p * m⁻¹, recomputed on every access."""
        return momentum_to_velocity(self.momentum, self.inverse_mass)

    @property
    def kinetic_energy(self) -> float:
        """T = ½ v·p, recomputed on every access."""
        return kinetic_energy(self.velocity, self.momentum)

    @property
    def total_energy(self) -> float:
        """
        T + V using the cached potential energy.

        Only meaningful immediately after a force evaluation at the current
        position; see core.invariants.total_energy for a fresh value.
        """
        return self.kinetic_energy + self.potential_energy

    def copy(self) -> "Particle":
        """Independent copy, including the cached force-law outputs."""
        other = Particle(
            position=self.position.copy(),
            momentum=self.momentum.copy(),
            inverse_mass=self.inverse_mass,
            gravitational_parameter=self.gravitational_parameter,
        )
        other.force = self.force.copy()
        other.potential_energy = self.potential_energy
        other.radius = self.radius
        return other
