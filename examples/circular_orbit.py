# examples/circular_orbit.py
"""
Reference run: a planet on a circular orbit of radius 9.

Usage:
  mkdir -p output
  python examples/circular_orbit.py > output/1

gnuplot:
  set size ratio -1
  plot   'output/1' u 2:3 w linesp lt 3 pt 4
  replot 'output/1' u 2:3:4:5 w vector lt 5
"""
import logging
import sys

from orbit_sim import LeapfrogIntegrator, Particle, TabularReporter

logging.basicConfig(level=logging.INFO, stream=sys.stderr, format="%(asctime)s %(levelname)s %(message)s")

planet = Particle.from_velocity(
    position=(9.0, 0.0),
    velocity=(0.0, 1.0 / 3.0),
    inverse_mass=1.0,
    gravitational_parameter=1.0,
)

integrator = LeapfrogIntegrator(
    planet,
    dt=0.001,
    steps=500_000,
    report_every=5,
    sink=TabularReporter(sys.stdout),
)
integrator.run()
