# MIT License (see LICENSE)
"""
Default run parameters and numerical thresholds.

The defaults reproduce the reference circular orbit: a unit-mass planet at
(9, 0) moving with speed 1/3 around a sun with GMm = 1, for which the
circular-orbit speed sqrt(GMm/r) is exactly 1/3.
"""
from __future__ import annotations

# Leapfrog step size and step count for the reference run.
# One orbit takes 2*pi*9 / (1/3) ≈ 169.6 time units ≈ 170k steps.
DEFAULT_DT: float = 1e-3
DEFAULT_STEPS: int = 500_000

# Emit a snapshot every this many iterations (0 disables reporting).
DEFAULT_REPORT_EVERY: int = 5

DEFAULT_INVERSE_MASS: float = 1.0
DEFAULT_GRAVITATIONAL_PARAMETER: float = 1.0

# Force evaluations require |x| > SINGULARITY_EPS. Zero means only the
# exact origin is rejected.
SINGULARITY_EPS: float = 0.0

# Significant digits used by the tab-separated reporter (matches the
# default precision of C++ ostreams, which the plotting scripts expect).
DEFAULT_PRECISION: int = 6
