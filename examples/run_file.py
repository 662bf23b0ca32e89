# examples/run_file.py
"""
Run an orbit described by a JSON run file.

Run:
  python examples/run_file.py examples/orbit.json > orbit.dat
"""
import logging
import sys

from orbit_sim import TabularReporter
from orbit_sim.io import load_run

logging.basicConfig(level=logging.INFO, stream=sys.stderr)

path = sys.argv[1] if len(sys.argv) > 1 else "examples/orbit.json"
integrator = load_run(path, sink=TabularReporter(sys.stdout))
clock = integrator.run()
print(f"# finished at t={clock.time:g}", file=sys.stdout)
