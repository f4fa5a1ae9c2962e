"""
Interval Bisection
==================

Finds a root of a continuous function F on a bracket [a, b] across
which F changes sign.

Algorithm:
    m = (a + b) / 2
    F(m) == 0              -> m is returned immediately
    sign F(m) == sign F(a) -> a := m
    otherwise              -> b := m
    repeat while b - a > ε, then return the midpoint of [a, b]

Each step halves the interval, so reaching a tolerance ε from an
initial width W takes exactly ⌈log₂(W/ε)⌉ steps unless a midpoint hits
the root exactly. The sign of F(a) is fixed for the whole run: only
the endpoint whose sign matches F(m) is ever replaced, so the bracket
invariant holds by construction and is checked once, up front.
"""

import logging
import math
from dataclasses import replace

from rootfind.core.function import ContinuousFunction, describe, sign
from rootfind.search.result import BisectionResult, SearchStatus
from rootfind.utils.helpers import Timer

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE = 1e-6


class BisectionSolver:
    """
    Interval-bisection root finder.

    Usage:
        solver = BisectionSolver(tolerance=1e-6)
        result = solver.solve(lambda x: x * x - 2, 0.0, 2.0)
        if result.ok:
            print(result.root, result.steps)
    """

    def __init__(self, tolerance: float = DEFAULT_TOLERANCE):
        if not tolerance > 0:
            raise ValueError(f"tolerance must be positive, got {tolerance}")
        self.tolerance = tolerance

    def solve(self, func: ContinuousFunction, a: float, b: float) -> BisectionResult:
        """
        Bisect [a, b] until its width is at most the tolerance.

        Args:
            func: Continuous function, computable on the whole bracket
            a: Lower bound
            b: Upper bound, with a <= b

        Returns:
            BisectionResult; status INVALID_BRACKET when F(a) and F(b)
            share a sign (no bisection is performed in that case)
        """
        a, b = float(a), float(b)
        if not (math.isfinite(a) and math.isfinite(b)):
            raise ValueError(f"bracket bounds must be finite, got [{a}, {b}]")
        if a > b:
            raise ValueError(f"bracket lower bound {a} exceeds upper bound {b}")

        with Timer() as t:
            result = self._bisect(func, a, b)
        result = replace(result, wall_time_seconds=t.elapsed_s)

        logger.debug(
            "bisection of %s on [%s, %s]: %s after %d steps, root=%s",
            describe(func), a, b, result.status.name, result.steps, result.root,
        )
        return result

    def _bisect(self, func: ContinuousFunction, a: float, b: float) -> BisectionResult:
        fa, fb = func(a), func(b)

        if fa == 0:
            return BisectionResult(SearchStatus.EXACT_ROOT, a, 0, (a, b), fa, (fa, fb))
        if fb == 0:
            return BisectionResult(SearchStatus.EXACT_ROOT, b, 0, (a, b), fb, (fa, fb))

        sign_a, sign_b = sign(fa), sign(fb)
        if sign_a == 0 or sign_b == 0 or sign_a == sign_b:
            return BisectionResult(SearchStatus.INVALID_BRACKET, None, 0, (a, b), None, (fa, fb))

        steps = 0
        while b - a > self.tolerance:
            m = (a + b) / 2
            # Adjacent floats: the interval cannot shrink any further.
            if m <= a or m >= b:
                break
            fm = func(m)
            steps += 1
            if fm == 0:
                return BisectionResult(SearchStatus.EXACT_ROOT, m, steps, (a, b), fm, (fa, fb))
            if sign(fm) == sign_a:
                a = m
            else:
                b = m

        root = (a + b) / 2
        return BisectionResult(SearchStatus.CONVERGED, root, steps, (a, b), func(root), (fa, fb))


def binary_search(
    func: ContinuousFunction,
    a: float,
    b: float,
    epsilon: float = DEFAULT_TOLERANCE,
) -> BisectionResult:
    """Bisect ``func`` on [a, b] down to width ``epsilon``."""
    return BisectionSolver(tolerance=epsilon).solve(func, a, b)
