# MIT License (see LICENSE)
"""
JSON run files: initial conditions plus integrator parameters.

JSON Schema Overview:
---------------------
{
  "particle": {
    "position": [x0, x1, ...],          # Required, D >= 1 components
    "velocity": [v0, v1, ...],          # Default: zeros; or give "momentum"
    "momentum": [p0, p1, ...],          # Alternative to "velocity"
    "inverse_mass": float,              # Default: 1.0, must be > 0
    "gravitational_parameter": float    # GMm, default: 1.0, must be > 0
  },
  "dt": float,                          # Default: 1e-3
  "steps": int,                         # Default: 500000
  "report_every": int                   # Default: 5, 0 disables reporting
}

Saved files always store momentum, so a load/save cycle reproduces the
particle exactly.
"""
from __future__ import annotations
import json
from typing import TYPE_CHECKING, Any

import numpy as np

from ..constants import (
    DEFAULT_DT,
    DEFAULT_GRAVITATIONAL_PARAMETER,
    DEFAULT_INVERSE_MASS,
    DEFAULT_REPORT_EVERY,
    DEFAULT_STEPS,
)
from ..errors import ConfigurationError
from ..types import Particle
from ..util import non_negative_int, vector
from .report import Sink

if TYPE_CHECKING:
    from ..simulation import LeapfrogIntegrator


def load_run_raw(path: str) -> dict[str, Any]:
    """
    Load raw JSON data from a run file without building any objects.

    Raises:
        FileNotFoundError: If the file cannot be found.
        json.JSONDecodeError: If the file is not valid JSON.
    """
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def particle_from_json(d: dict[str, Any]) -> Particle:
    """
    Build a Particle from its JSON dictionary.

    Raises:
        ConfigurationError: If 'position' is missing, both 'velocity' and
            'momentum' are given, or any value is invalid.
    """
    if "position" not in d:
        raise ConfigurationError("particle definition missing required 'position' field")
    if "velocity" in d and "momentum" in d:
        raise ConfigurationError("particle definition may give 'velocity' or 'momentum', not both")

    position = vector(d["position"], "position")
    inverse_mass = d.get("inverse_mass", DEFAULT_INVERSE_MASS)
    gmm = d.get("gravitational_parameter", DEFAULT_GRAVITATIONAL_PARAMETER)

    if "momentum" in d:
        return Particle(
            position=position,
            momentum=d["momentum"],
            inverse_mass=inverse_mass,
            gravitational_parameter=gmm,
        )
    velocity = d.get("velocity")
    if velocity is None:
        velocity = np.zeros(position.shape[0], dtype=np.float64)
    return Particle.from_velocity(position, velocity, inverse_mass, gmm)


def particle_to_json(particle: Particle) -> dict[str, Any]:
    """Serialize a Particle (momentum form) to a dictionary."""
    return {
        "position": _to_list(particle.position),
        "momentum": _to_list(particle.momentum),
        "inverse_mass": particle.inverse_mass,
        "gravitational_parameter": particle.gravitational_parameter,
    }


def load_run(path: str, sink: Sink | None = None) -> "LeapfrogIntegrator":
    """
    Load a run file and construct a ready-to-run LeapfrogIntegrator.

    Args:
        path: Path to the JSON run file.
        sink: Snapshot sink. If None, reporting is disabled; the file's
              report_every is still validated.

    Raises:
        ConfigurationError: If the particle or parameters are invalid.
    """
    # Import locally to avoid circular import (simulation imports io.report)
    from ..simulation import LeapfrogIntegrator

    data = load_run_raw(path)
    if "particle" not in data:
        raise ConfigurationError(f"run file {path!r} missing required 'particle' section")

    particle = particle_from_json(data["particle"])
    report_every = non_negative_int(data.get("report_every", DEFAULT_REPORT_EVERY), "report_every")
    return LeapfrogIntegrator(
        particle=particle,
        dt=data.get("dt", DEFAULT_DT),
        steps=data.get("steps", DEFAULT_STEPS),
        report_every=report_every if sink is not None else 0,
        sink=sink,
    )


def run_to_json(integrator: "LeapfrogIntegrator") -> dict[str, Any]:
    """Serialize the integrator's current particle and parameters."""
    return {
        "particle": particle_to_json(integrator.particle),
        "dt": integrator.dt,
        "steps": integrator.steps,
        "report_every": integrator.report_every,
    }


def save_run(integrator: "LeapfrogIntegrator", path: str, indent: int = 2) -> None:
    """Save the integrator's current state and parameters to a JSON file."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(run_to_json(integrator), f, indent=indent)


def _to_list(arr: Any) -> list[float]:
    """Convert numpy array or tuple to a plain list of floats."""
    if isinstance(arr, np.ndarray):
        return arr.tolist()
    return [float(x) for x in arr]
