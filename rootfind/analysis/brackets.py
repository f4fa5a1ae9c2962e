"""
Bracket scanning: locate sub-intervals of [lo, hi] across which a
function changes sign, ready to hand to bisection.
"""

import logging
from typing import List, Tuple

import numpy as np

from rootfind.core.function import ContinuousFunction, describe

logger = logging.getLogger(__name__)


def scan_brackets(
    func: ContinuousFunction,
    lo: float,
    hi: float,
    samples: int = 100,
) -> List[Tuple[float, float]]:
    """
    Evaluate ``func`` on an evenly spaced grid and return every
    neighbouring pair of grid points that brackets a root.

    A pair qualifies when the values have strictly opposite signs or
    when its right value is exactly zero (the left value too, for the
    first pair), so an exact zero on the grid is reported once. Roots
    of even multiplicity, such as the double root of a parabola
    touching the axis, produce no sign change and are missed unless a
    grid point lands on them. Grid points where ``func`` is NaN never
    form a bracket.
    """
    if samples < 2:
        raise ValueError(f"samples must be at least 2, got {samples}")
    if not lo < hi:
        raise ValueError(f"empty interval [{lo}, {hi}]")

    grid = np.linspace(lo, hi, samples)
    values = np.array([func(float(x)) for x in grid], dtype=float)
    signs = np.sign(values)

    left, right = signs[:-1], signs[1:]
    crossing = (left * right < 0) | (right == 0)
    crossing[0] |= left[0] == 0
    crossing &= ~(np.isnan(values[:-1]) | np.isnan(values[1:]))

    brackets = [(float(grid[i]), float(grid[i + 1])) for i in np.flatnonzero(crossing)]
    logger.debug(
        "scanned %s on [%s, %s] with %d samples: %d bracket(s)",
        describe(func), lo, hi, samples, len(brackets),
    )
    return brackets
