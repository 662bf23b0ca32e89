# MIT License (see LICENSE)
"""
Leapfrog (Störmer-Verlet) stepping in position-momentum form.

One step of size dt is the symmetric drift-kick-drift sequence:
    x ← x + (dt/2) p m⁻¹        (half drift)
    t ← t + dt/2
    F ← F(x)                    (force at the half-stepped position)
    p ← p + dt F                (full kick)
    x ← x + (dt/2) p m⁻¹        (half drift with the new momentum)
    t ← t + dt/2

The sequence is time-symmetric and symplectic. The force must be evaluated
at the half-stepped position, and the clock moves in two half-increments
around the kick, never one full dt.

Reference:
    https://en.wikipedia.org/wiki/Leapfrog_integration
"""
from __future__ import annotations
from typing import TYPE_CHECKING, Protocol

from ..constants import SINGULARITY_EPS
from .forces import apply_inverse_square

if TYPE_CHECKING:
    from ..types import Particle


class HalfStepClock(Protocol):
    """Anything that can be advanced by half a step."""

    def advance_half(self, dt: float) -> None: ...


def position_step(particle: "Particle", dt: float) -> None:
    """Drift: x ← x + dt p m⁻¹ (modified in-place)."""
    particle.position += dt * particle.momentum * particle.inverse_mass


def momentum_step(particle: "Particle", dt: float) -> None:
    """
    Kick: p ← p + dt F.

    Uses particle.force as-is; the caller must have refreshed it at the
    current position.
    """
    particle.momentum += dt * particle.force


def leapfrog_step(
    particle: "Particle",
    dt: float,
    clock: HalfStepClock | None = None,
    eps: float = SINGULARITY_EPS,
) -> None:
    """
    Advance a particle by one leapfrog step of size dt.

    This is the single-step primitive; LeapfrogIntegrator.run calls it once
    per iteration, and hosts with their own scheduling can call it directly.

    Args:
        particle: Particle to advance (modified in-place).
        dt: Step size. Negative values integrate backward in time.
        clock: Optional clock, advanced by dt/2 twice.
        eps: Singularity radius passed to the force law.

    Raises:
        DomainError: If the half-stepped position hits the singularity. The
            particle is left at the half-stepped position in that case.
    """
    half = 0.5 * dt
    position_step(particle, half)
    if clock is not None:
        clock.advance_half(dt)
    apply_inverse_square(particle, eps)
    momentum_step(particle, dt)
    position_step(particle, half)
    if clock is not None:
        clock.advance_half(dt)
