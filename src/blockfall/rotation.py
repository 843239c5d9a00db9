"""Orientation matrices for quarter-turn rotations.

An orientation is a 2x2 integer matrix with entries in ``{-1, 0, 1}``.  Only
forward rotation is exposed: the next orientation is obtained by multiplying
the current matrix by :data:`QUARTER_TURN`, and four steps return to the
starting matrix exactly.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

from .geometry import Matrix

Orientation = Matrix

IDENTITY: Orientation = ((1, 0), (0, 1))
QUARTER_TURN: Orientation = ((0, -1), (1, 0))

_QUARTER_TURN_ARRAY = np.array(QUARTER_TURN, dtype=np.int8)


def next_orientation(orientation: Orientation) -> Orientation:
    """Return ``orientation · QUARTER_TURN``."""

    product = np.asarray(orientation, dtype=np.int8) @ _QUARTER_TURN_ARRAY
    (a, b), (c, d) = product.tolist()
    return ((a, b), (c, d))


def _generate_orientations(start: Orientation) -> Tuple[Orientation, ...]:
    """Generate the four orientations reachable from ``start``."""

    orientations = [start]
    for _ in range(3):
        orientations.append(next_orientation(orientations[-1]))
    return tuple(orientations)


# Identity, 90, 180 and 270 degrees, in the order repeated rotation visits them.
ORIENTATIONS: Tuple[Orientation, ...] = _generate_orientations(IDENTITY)


__all__ = ["Orientation", "IDENTITY", "QUARTER_TURN", "ORIENTATIONS", "next_orientation"]
