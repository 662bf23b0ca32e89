# MIT License (see LICENSE)
"""
Snapshot records and the sinks that consume them.

The integrator does not format or store anything itself: on every reporting
iteration it builds a Snapshot and hands it to a sink, which is any callable
taking one Snapshot. Two sinks are provided:

- TabularReporter: writes tab-separated lines suitable for gnuplot, e.g.
      plot 'orbit.dat' u 2:3 w linesp
- SnapshotRecorder: keeps the snapshots in memory.

Column order: t, x[0..D-1], v[0..D-1], T, V, T+V.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, TextIO

import numpy as np

from ..constants import DEFAULT_PRECISION


@dataclass(frozen=True, eq=False)
class Snapshot:
    """
    State of the particle at the start of a reported iteration.

    Snapshots hold arrays, so they compare and hash by identity; compare
    values() to test two snapshots for equal contents.

    Attributes:
        time: Simulation clock value.
        position: Copy of the position vector.
        velocity: Velocity derived from momentum.
        kinetic_energy: T = ½ v·p.
        potential_energy: V = -GMm / r at this position.
        total_energy: T + V.
    """
    time: float
    position: np.ndarray
    velocity: np.ndarray
    kinetic_energy: float
    potential_energy: float
    total_energy: float

    @property
    def dim(self) -> int:
        return int(self.position.shape[0])

    def values(self) -> list[float]:
        """Flatten to the reporting column order."""
        return [
            self.time,
            *self.position.tolist(),
            *self.velocity.tolist(),
            self.kinetic_energy,
            self.potential_energy,
            self.total_energy,
        ]


Sink = Callable[[Snapshot], None]


def column_names(dim: int) -> list[str]:
    """Column labels for a D-dimensional snapshot."""
    return (
        ["t"]
        + [f"x[{i}]" for i in range(dim)]
        + [f"v[{i}]" for i in range(dim)]
        + ["T", "V", "T+V"]
    )


class TabularReporter:
    """
    Sink writing one tab-separated line per snapshot.

    Args:
        stream: Text stream to write to (e.g. sys.stdout or an open file).
        header: Write a '#'-prefixed line of column names before the first
                record. Gnuplot treats it as a comment.
        precision: Significant digits per value ('%g' formatting).
    """

    def __init__(self, stream: TextIO, header: bool = True, precision: int = DEFAULT_PRECISION) -> None:
        self.stream = stream
        self.header = header
        self.precision = precision
        self.lines_written = 0
        self._header_done = False

    def format(self, snap: Snapshot) -> str:
        return "\t".join(f"{v:.{self.precision}g}" for v in snap.values())

    def __call__(self, snap: Snapshot) -> None:
        if self.header and not self._header_done:
            self.stream.write("# " + "\t".join(column_names(snap.dim)) + "\n")
            self._header_done = True
        self.stream.write(self.format(snap) + "\n")
        self.lines_written += 1


@dataclass
class SnapshotRecorder:
    """Sink that appends every snapshot to a list."""
    snapshots: list[Snapshot] = field(default_factory=list)

    def __call__(self, snap: Snapshot) -> None:
        self.snapshots.append(snap)

    def __len__(self) -> int:
        return len(self.snapshots)

    def times(self) -> np.ndarray:
        return np.array([s.time for s in self.snapshots], dtype=np.float64)

    def energies(self) -> np.ndarray:
        """Total energy of every recorded snapshot."""
        return np.array([s.total_energy for s in self.snapshots], dtype=np.float64)

    def positions(self) -> np.ndarray:
        """Positions stacked into an array of shape (n, D)."""
        return np.array([s.position for s in self.snapshots], dtype=np.float64)
