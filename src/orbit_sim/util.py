# MIT License (see LICENSE)
"""
Vector helpers shared by the force law and the integrator.

Vectors are float64 numpy arrays of shape (D,) for any fixed D >= 1.
"""
from __future__ import annotations
import math

import numpy as np

from .errors import ConfigurationError


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Allows tuple/list inputs for positions, velocities and momenta.
    """
    return np.array(x, dtype=np.float64)


def vector(x, name: str, dim: int | None = None) -> np.ndarray:
    """
    Convert x to a finite 1-D float64 vector, validating its shape.

    Args:
        x: Array-like input.
        name: Field name used in error messages.
        dim: Required length, or None to accept any length >= 1.

    Raises:
        ConfigurationError: If x is not 1-D, is empty, has the wrong length,
            or contains NaN/Inf.
    """
    try:
        v = f64(x)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"{name} must be a numeric vector, got {x!r}") from exc
    if v.ndim != 1 or v.shape[0] < 1:
        raise ConfigurationError(f"{name} must be a 1-D vector with at least one component, got shape {v.shape}")
    if dim is not None and v.shape[0] != dim:
        raise ConfigurationError(f"{name} must have {dim} components, got {v.shape[0]}")
    if not np.all(np.isfinite(v)):
        raise ConfigurationError(f"{name} must be finite, got {v.tolist()}")
    return v


def norm(v: np.ndarray) -> float:
    """
    Magnitude (length) of a vector.

    math.hypot scales internally, so the result stays finite and nonzero for
    components near the float64 range limits where v·v over- or underflows.
    """
    return math.hypot(*v)


def non_negative_int(value, name: str) -> int:
    """
    Validate an iteration count.

    Raises:
        ConfigurationError: If value is not an int (bool excluded) or is < 0.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise ConfigurationError(f"{name} must be >= 0, got {value}")
    return value
