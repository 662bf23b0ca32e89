import math

import numpy as np
import pytest

from orbit_sim import DomainError, LeapfrogIntegrator, Particle, SimulationClock, SnapshotRecorder
from orbit_sim.core.forces import inverse_square
from orbit_sim.core.integrators import leapfrog_step, position_step, momentum_step
from orbit_sim.core.invariants import angular_momentum, relative_drift


def reference_planet() -> Particle:
    """Circular orbit: r = 9, v = sqrt(GMm/r) = 1/3."""
    return Particle.from_velocity((9.0, 0.0), (0.0, 1.0 / 3.0), inverse_mass=1.0, gravitational_parameter=1.0)


def eccentric_planet() -> Particle:
    """
    Bound ellipse starting at aphelion:
      E = ½ (1/4)² - 1/9 ≈ -0.0799,  a = -1/(2E) ≈ 6.26,  period ≈ 98.4
    """
    return Particle.from_velocity((9.0, 0.0), (0.0, 0.25))


def test_single_step_by_hand():
    """Drift half, force at the drifted position, kick full, drift half."""
    dt, inv_m, G = 0.1, 0.5, 3.0
    x0 = np.array([2.0, 0.0])
    p0 = np.array([0.0, 1.0])
    a = Particle(position=x0, momentum=p0, inverse_mass=inv_m, gravitational_parameter=G)
    clock = SimulationClock()

    leapfrog_step(a, dt, clock)

    x_half = x0 + 0.5 * dt * p0 * inv_m
    F_half = -G * x_half / np.linalg.norm(x_half) ** 3
    p1 = p0 + dt * F_half
    x1 = x_half + 0.5 * dt * p1 * inv_m

    np.testing.assert_allclose(a.momentum, p1, rtol=1e-14)
    np.testing.assert_allclose(a.position, x1, rtol=1e-14)
    # The cached force is the one evaluated at the half-stepped position
    np.testing.assert_allclose(a.force, F_half, rtol=1e-14)
    assert not np.allclose(a.force, inverse_square(a.position, G)[0], rtol=1e-6)
    assert clock.time == pytest.approx(dt)
    assert clock.half_steps == 2


def test_position_and_momentum_steps():
    a = Particle(position=(1.0, 2.0), momentum=(4.0, -2.0), inverse_mass=0.5)
    position_step(a, 0.25)
    np.testing.assert_allclose(a.position, [1.5, 1.75])

    a.force = np.array([1.0, 3.0])
    momentum_step(a, 0.5)
    np.testing.assert_allclose(a.momentum, [4.5, -0.5])


def test_clock_advances_in_half_steps():
    N, dt = 1000, 0.01
    integ = LeapfrogIntegrator(reference_planet(), dt=dt, steps=N, report_every=0)
    clock = integ.run()

    print("t", clock.time, "expected", N * dt)
    assert clock is integ.clock
    assert clock.time == pytest.approx(N * dt, rel=1e-12)
    assert clock.half_steps == 2 * N


def test_zero_steps_does_nothing():
    rec = SnapshotRecorder()
    a = reference_planet()
    clock = LeapfrogIntegrator(a, dt=0.01, steps=0, report_every=1, sink=rec).run()
    assert clock.time == 0.0
    assert clock.half_steps == 0
    assert len(rec) == 0
    np.testing.assert_array_equal(a.position, [9.0, 0.0])


def test_energy_bounded_circular_orbit():
    """Relative energy error stays below 1e-3 over more than one full orbit."""
    rec = SnapshotRecorder()
    integ = LeapfrogIntegrator(reference_planet(), dt=0.01, steps=20_000, report_every=50, sink=rec)
    integ.run()

    E = rec.energies()
    assert E[0] == pytest.approx(-1.0 / 18.0, rel=1e-14)
    drift = relative_drift(E)
    print("circular orbit: snapshots", len(E), "relative energy drift", drift)
    assert len(E) == 400
    assert drift < 1e-3


def test_energy_oscillates_without_secular_drift():
    """
    Over ~4 orbits of an eccentric ellipse, the worst energy error in the
    last orbit is no larger than in the first (leapfrog error is periodic).
    """
    rec = SnapshotRecorder()
    integ = LeapfrogIntegrator(eccentric_planet(), dt=0.01, steps=40_000, report_every=10, sink=rec)
    integ.run()

    E = rec.energies()
    err = np.abs(E - E[0])
    per_orbit = 984  # snapshots per orbit (period ≈ 98.4, sampled every 0.1)
    first = err[:per_orbit].max()
    last = err[-per_orbit:].max()
    print("eccentric orbit: first-orbit err", first, "last-orbit err", last)

    assert relative_drift(E) < 1e-3
    assert last <= 2.0 * first + 1e-12


def test_time_reversal():
    """N steps with +dt followed by N steps with -dt return to the start."""
    a = eccentric_planet()
    x0, p0 = a.position.copy(), a.momentum.copy()

    forward = LeapfrogIntegrator(a, dt=0.01, steps=5000, report_every=0)
    forward.run()
    assert np.linalg.norm(a.position - x0) > 1.0

    backward = LeapfrogIntegrator(a, dt=-0.01, steps=5000, report_every=0, clock=forward.clock)
    clock = backward.run()

    print("reversal error x", np.abs(a.position - x0).max(), "p", np.abs(a.momentum - p0).max())
    np.testing.assert_allclose(a.position, x0, atol=1e-8)
    np.testing.assert_allclose(a.momentum, p0, atol=1e-8)
    assert clock.time == pytest.approx(0.0, abs=1e-9)
    assert clock.half_steps == 20_000


def test_angular_momentum_conserved():
    """Drift keeps x × p (p ∥ dx) and a central kick keeps it (F ∥ x)."""
    a = eccentric_planet()
    L0 = angular_momentum(a)
    LeapfrogIntegrator(a, dt=0.01, steps=5000, report_every=0).run()
    assert L0 == pytest.approx(2.25)
    assert angular_momentum(a) == pytest.approx(L0, abs=1e-10)


def test_report_cadence_and_start_of_step_state():
    rec = SnapshotRecorder()
    dt = 0.01
    integ = LeapfrogIntegrator(reference_planet(), dt=dt, steps=10, report_every=5, sink=rec)
    integ.run()

    assert len(rec) == 2
    np.testing.assert_allclose(rec.times(), [0.0, 5 * dt], atol=1e-15)
    # The first snapshot is taken before any motion
    first = rec.snapshots[0]
    np.testing.assert_array_equal(first.position, [9.0, 0.0])
    np.testing.assert_array_equal(first.velocity, [0.0, 1.0 / 3.0])
    assert first.kinetic_energy == pytest.approx(1.0 / 18.0)
    assert first.potential_energy == pytest.approx(-1.0 / 9.0)
    assert first.total_energy == pytest.approx(first.kinetic_energy + first.potential_energy)


def test_snapshots_do_not_alias_particle():
    rec = SnapshotRecorder()
    a = reference_planet()
    LeapfrogIntegrator(a, dt=0.01, steps=3, report_every=1, sink=rec).run()
    assert not np.shares_memory(rec.snapshots[-1].position, a.position)
    assert rec.positions().shape == (3, 2)
    assert rec.positions()[0, 0] == 9.0


def test_reporting_disabled():
    integ = LeapfrogIntegrator(reference_planet(), dt=0.01, steps=100, report_every=0)
    integ.run()
    assert integ.clock.half_steps == 200


def test_domain_error_halts_run_and_keeps_partial_output():
    """
    1D, x0 = 1, p0 = 0, dt = 1, GMm = 1 (all exact in binary):
      step 0: x_half = 1, F = -1, p = -1, x = 0.5
      step 1: x_half = 0.5 - 0.5 = 0  ->  singular
    """
    rec = SnapshotRecorder()
    a = Particle(position=(1.0,), momentum=(0.0,))
    integ = LeapfrogIntegrator(a, dt=1.0, steps=10, report_every=1, sink=rec)

    with pytest.raises(DomainError):
        integ.run()

    assert len(rec) == 2
    np.testing.assert_array_equal(rec.snapshots[1].position, [0.5])
    assert integ.clock.half_steps == 3
    np.testing.assert_array_equal(a.position, [0.0])


def test_one_and_three_dimensions():
    # 1D: free fall from rest toward the center, energy conserved before impact
    rec = SnapshotRecorder()
    LeapfrogIntegrator(Particle(position=(10.0,)), dt=1e-3, steps=2000, report_every=100, sink=rec).run()
    assert rec.positions()[-1, 0] < 10.0
    assert relative_drift(rec.energies()) < 1e-6

    # 3D: inclined circular orbit stays on its sphere and in its plane
    r, v = 4.0, 0.5
    s = np.sqrt(0.5)
    a = Particle.from_velocity((r, 0.0, 0.0), (0.0, v * s, v * s))
    L0 = angular_momentum(a)
    LeapfrogIntegrator(a, dt=0.01, steps=3000, report_every=0).run()
    assert np.linalg.norm(a.position) == pytest.approx(r, rel=1e-3)
    np.testing.assert_allclose(angular_momentum(a), L0, atol=1e-10)
    assert abs(a.position[1] - a.position[2]) < 1e-9


def test_snapshot_recomputes_potential_at_current_position():
    """
    After a step, the cached V belongs to the half-stepped position.
    A snapshot must evaluate V = -GMm / |x| at the end-of-step position.
    """
    G = 2.0
    rec = SnapshotRecorder()
    a = Particle.from_velocity((3.0, 0.0), (0.0, 0.5), gravitational_parameter=G)
    integ = LeapfrogIntegrator(a, dt=0.1, steps=4, report_every=2, sink=rec)
    integ.run()

    second = rec.snapshots[1]
    assert second.potential_energy == -G / math.hypot(*second.position)

    integ.step()
    stale = a.potential_energy
    snap = integ.snapshot()
    assert snap.potential_energy == -G / math.hypot(*a.position)
    assert snap.potential_energy != stale
    assert snap.total_energy == snap.kinetic_energy + snap.potential_energy
