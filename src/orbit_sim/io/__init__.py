# MIT License (see LICENSE)
"""
Input/Output for orbit_sim.

This subpackage provides:
    - Reporting: Snapshot records and sinks (tab-separated text, in-memory).
    - JSON run files: initial conditions and integrator parameters.

Typical usage:
    import sys
    from orbit_sim.io import TabularReporter, load_run

    integrator = load_run("orbit.json", sink=TabularReporter(sys.stdout))
    integrator.run()
"""
from .report import (
    Snapshot,
    Sink,
    SnapshotRecorder,
    TabularReporter,
    column_names,
)
from .json_io import (
    load_run,
    load_run_raw,
    save_run,
    run_to_json,
    particle_to_json,
    particle_from_json,
)

__all__ = [
    # Reporting
    "Snapshot",
    "Sink",
    "SnapshotRecorder",
    "TabularReporter",
    "column_names",
    # Run files
    "load_run",
    "load_run_raw",
    "save_run",
    "run_to_json",
    "particle_to_json",
    "particle_from_json",
]
