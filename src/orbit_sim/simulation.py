# MIT License (see LICENSE)
"""
The leapfrog run loop.

LeapfrogIntegrator owns one Particle and one SimulationClock for the whole
run and performs a fixed number of equal steps. Each iteration:
    1. If reporting is due (i % report_every == 0), refresh force and
       potential at the current position and emit a Snapshot to the sink.
       The snapshot describes the state at the start of the step.
    2. Perform one leapfrog step (core.integrators.leapfrog_step).

Structure:
    - User builds a Particle (usually with Particle.from_velocity).
    - User creates a LeapfrogIntegrator with dt, steps and an optional sink.
    - User calls run(), or step() repeatedly under their own control.
"""
from __future__ import annotations
import logging
import math
from contextlib import nullcontext
from dataclasses import dataclass, field

from .constants import DEFAULT_DT, DEFAULT_REPORT_EVERY, DEFAULT_STEPS, SINGULARITY_EPS
from .core.forces import apply_inverse_square
from .core.integrators import leapfrog_step
from .errors import ConfigurationError, DomainError
from .io.report import Sink, Snapshot
from .profiler import Profiler
from .types import Particle
from .util import non_negative_int

logger = logging.getLogger(__name__)


@dataclass
class SimulationClock:
    """
    Simulation time, advanced only in half-steps.

    Attributes:
        time: Current time.
        half_steps: Number of half-increments applied so far.
    """
    time: float = 0.0
    half_steps: int = 0

    def advance_half(self, dt: float) -> None:
        self.time += 0.5 * dt
        self.half_steps += 1


@dataclass
class LeapfrogIntegrator:
    """
    Fixed-step leapfrog integration of a single particle.

    Attributes:
        particle: State to advance (modified in-place).
        dt: Step size. Negative values run time backward; the clock then
            decreases.
        steps: Number of iterations performed by run().
        report_every: Emit a snapshot every this many iterations; 0 disables
                      reporting.
        sink: Callable receiving each Snapshot. Required if report_every > 0.
        clock: Simulation clock (starts at t=0 by default).
        singularity_eps: Radii <= this value raise DomainError.
        profiler: Optional Profiler timing the "report" and "step" sections.

    Raises:
        ConfigurationError: On construction, for a non-finite dt, negative
            or non-integer steps/report_every, or reporting without a sink.
    """
    particle: Particle
    dt: float = DEFAULT_DT
    steps: int = DEFAULT_STEPS
    report_every: int = DEFAULT_REPORT_EVERY
    sink: Sink | None = None
    clock: SimulationClock = field(default_factory=SimulationClock)
    singularity_eps: float = SINGULARITY_EPS
    profiler: Profiler | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.particle, Particle):
            raise ConfigurationError(f"particle must be a Particle, got {type(self.particle).__name__}")
        try:
            self.dt = float(self.dt)
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"dt must be a real number, got {self.dt!r}") from exc
        if not math.isfinite(self.dt):
            raise ConfigurationError(f"dt must be finite, got {self.dt!r}")
        self.steps = non_negative_int(self.steps, "steps")
        self.report_every = non_negative_int(self.report_every, "report_every")
        if self.report_every and self.sink is None:
            raise ConfigurationError("report_every > 0 requires a sink")

    def _section(self, name: str):
        if self.profiler is None:
            return nullcontext()
        return self.profiler.section(name)

    def snapshot(self) -> Snapshot:
        """
        Capture the current state, refreshing force-law outputs first.

        Velocity and kinetic energy are recomputed from momentum.

        Raises:
            DomainError: If the particle sits at the singularity.
        """
        p = self.particle
        apply_inverse_square(p, self.singularity_eps)
        velocity = p.velocity
        kinetic = p.kinetic_energy
        return Snapshot(
            time=self.clock.time,
            position=p.position.copy(),
            velocity=velocity,
            kinetic_energy=kinetic,
            potential_energy=p.potential_energy,
            total_energy=kinetic + p.potential_energy,
        )

    def step(self) -> None:
        """Advance the owned particle and clock by one leapfrog step."""
        leapfrog_step(self.particle, self.dt, self.clock, self.singularity_eps)

    def run(self) -> SimulationClock:
        """
        Perform `steps` iterations, reporting at the configured cadence.

        Returns:
            The clock after the last iteration.

        Raises:
            DomainError: Propagated from the force law. The run stops at the
                failing iteration; snapshots already emitted are kept.
        """
        logger.info(
            "leapfrog run: D=%d dt=%g steps=%d report_every=%d t0=%g",
            self.particle.dim, self.dt, self.steps, self.report_every, self.clock.time,
        )
        i = 0
        try:
            for i in range(self.steps):
                if self.report_every and i % self.report_every == 0:
                    with self._section("report"):
                        snap = self.snapshot()
                        logger.debug("step %d t=%g E=%.12g", i, snap.time, snap.total_energy)
                        self.sink(snap)
                with self._section("step"):
                    self.step()
        except DomainError as exc:
            logger.error("leapfrog run halted at step %d (t=%g): %s", i, self.clock.time, exc)
            raise
        logger.info("leapfrog run finished: t=%g half_steps=%d", self.clock.time, self.clock.half_steps)
        return self.clock
