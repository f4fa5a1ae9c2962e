"""
Fixed-Point Iteration
=====================

Computes x_{k+1} = f(x_k) from a caller-supplied x_0 until two
successive iterates are within ε of each other, or until the iteration
cap N_max is reached.

Theoretical Foundation:
    If f is a contraction on an interval I containing x_0 and the fixed
    point x*, i.e. |f'(x)| ≤ L < 1 on I, then by Banach's Fixed-Point
    Theorem the sequence converges to x* and

        |x_n - x*| ≤ L^n · |x_0 - x*|

    so the number of iterations needed is at most
    ⌈log(ε / |x_0 - x*|) / log L⌉.

The stopping test is the absolute step |x_{k+1} - x_k|; callers pick ε
relative to the magnitude of the expected fixed point. Evaluation
errors raised by f (e.g. ZeroDivisionError from a Newton-Raphson map
where F'(x) = 0) propagate unchanged.
"""

import logging
import math
from typing import List, Optional

from rootfind.core.function import ContinuousFunction, describe
from rootfind.search.result import FixedPointResult, SearchStatus
from rootfind.utils.helpers import Timer

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE = 1e-6
DEFAULT_MAX_ITERATIONS = 100


class FixedPointEngine:
    """
    Fixed-point iteration with an absolute-step stopping test.
    
    By default the engine runs until convergence or the cap, with no
    attempt to spot divergence early. Passing ``divergence_threshold``
    stops the run as DIVERGING once an iterate's magnitude exceeds it
    or becomes non-finite.
    
    Usage:
        engine = FixedPointEngine(tolerance=1e-8, max_iterations=50)
        result = engine.iterate(1.0, math.cos)
        print(result.status, result.root, result.iterations)
    """
    
    def __init__(
        self,
        tolerance: float = DEFAULT_TOLERANCE,
        max_iterations: int = DEFAULT_MAX_ITERATIONS,
        divergence_threshold: Optional[float] = None,
    ):
        if not tolerance > 0:
            raise ValueError(f"tolerance must be positive, got {tolerance}")
        if max_iterations < 1:
            raise ValueError(f"max_iterations must be at least 1, got {max_iterations}")
        if divergence_threshold is not None and not divergence_threshold > 0:
            raise ValueError(
                f"divergence_threshold must be positive, got {divergence_threshold}"
            )
        self.tolerance = tolerance
        self.max_iterations = max_iterations
        self.divergence_threshold = divergence_threshold
    
    def iterate(self, initial_value: float, func: ContinuousFunction) -> FixedPointResult:
        """
        Perform fixed-point iteration.
        
        Args:
            initial_value: Starting point x_0
            func: The iteration map f
        
        Returns:
            FixedPointResult holding the full iterate sequence
        """
        with Timer() as t:
            status, values, accelerated = self._run(float(initial_value), func)
        
        root = self._root(values, accelerated) if status.ok else None
        logger.debug(
            "%s of %s from %s: %s after %d iterations, root=%s",
            type(self).__name__, describe(func), initial_value, status.name,
            len(values) - 1, root,
        )
        return FixedPointResult(
            status=status,
            root=root,
            iterates=tuple(values),
            accelerated=tuple(accelerated),
            wall_time_seconds=t.elapsed_s,
        )
    
    def _run(self, initial_value: float, func: ContinuousFunction):
        values = [initial_value]
        accelerated: List[float] = []
        current = initial_value
        
        for _ in range(self.max_iterations):
            new_value = func(current)
            values.append(new_value)
            
            if self._accelerate(values, accelerated):
                return SearchStatus.CONVERGED, values, accelerated
            
            if abs(new_value - current) <= self.tolerance:
                return SearchStatus.CONVERGED, values, accelerated
            
            if self._is_diverging(new_value):
                return SearchStatus.DIVERGING, values, accelerated
            
            current = new_value
        
        return SearchStatus.MAX_ITERATIONS, values, accelerated
    
    def _accelerate(self, values: List[float], accelerated: List[float]) -> bool:
        """Per-step hook; returning True stops the run as converged."""
        return False
    
    def _root(self, values: List[float], accelerated: List[float]) -> float:
        return values[-1]
    
    def _is_diverging(self, value: float) -> bool:
        if self.divergence_threshold is None:
            return False
        return not math.isfinite(value) or abs(value) > self.divergence_threshold


class AcceleratedFixedPointEngine(FixedPointEngine):
    """
    Fixed-point iteration accelerated with Aitken's Δ² method.
    
    Given iterates x_n, x_{n+1}, x_{n+2} of a linearly convergent
    sequence, the accelerated estimate
    
        x'_n = x_n - (x_{n+1} - x_n)² / (x_{n+2} - 2x_{n+1} + x_n)
    
    converges superlinearly to the same limit. The run stops when two
    successive accelerated estimates (or two raw iterates) are within
    the tolerance. ``iterates`` still records the raw sequence; the
    accelerated estimates are kept in ``accelerated`` and the last one
    is reported as the root.
    """
    
    def _accelerate(self, values: List[float], accelerated: List[float]) -> bool:
        if len(values) < 3:
            return False
        x0, x1, x2 = values[-3], values[-2], values[-1]
        denominator = x2 - 2 * x1 + x0
        if not abs(denominator) > 1e-15:
            return False
        accelerated.append(x0 - (x1 - x0) ** 2 / denominator)
        return (len(accelerated) >= 2
                and abs(accelerated[-1] - accelerated[-2]) <= self.tolerance)
    
    def _root(self, values: List[float], accelerated: List[float]) -> float:
        return accelerated[-1] if accelerated else values[-1]


def fixed_point(
    func: ContinuousFunction,
    x0: float,
    epsilon: float = DEFAULT_TOLERANCE,
    max_iter: int = DEFAULT_MAX_ITERATIONS,
) -> FixedPointResult:
    """Iterate ``func`` from ``x0`` until successive iterates are within ``epsilon``."""
    return FixedPointEngine(tolerance=epsilon, max_iterations=max_iter).iterate(x0, func)
