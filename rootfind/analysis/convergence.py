"""
Convergence Analysis
====================

Inspects the iterate sequences produced by the searches and reports how
they converge: the contraction rate, the direction of approach
(monotonic or oscillatory), the estimated order, and whether the
sequence is diverging.

Mathematical Background:
    For a fixed-point iteration x_{k+1} = f(x_k) converging linearly to
    x*, the successive step ratios

        k_n = |x_{n+1} - x_n| / |x_n - x_{n-1}|

    approach |f'(x*)|. If f is a contraction with factor k < 1 the
    a-posteriori Banach bound holds:

        |x_n - x*| ≤ k / (1 - k) · |x_n - x_{n-1}|

    The order of convergence q is estimated from three successive steps:

        q ≈ log(d_{n+1} / d_n) / log(d_n / d_{n-1})

    which is ≈ 1 for linear convergence and ≈ 2 for Newton-Raphson near
    a simple root.

The a-priori iteration bound ⌈log(ε / |x_0 - x*|) / log L⌉ and the
bisection step count ⌈log₂(W / ε)⌉ are provided as plain functions.
"""

import math
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional, Sequence

import numpy as np

from rootfind.core.function import ContinuousFunction


class ConvergenceBehaviour(Enum):
    """Qualitative shape of an iterate sequence."""
    MONOTONIC = auto()          # Steps keep one direction
    OSCILLATORY = auto()        # Steps alternate direction
    IRREGULAR = auto()          # Neither of the above
    DIVERGENT = auto()          # Steps grow, or iterates left the reals
    STALLED = auto()            # Steps neither shrink nor grow
    INSUFFICIENT_DATA = auto()  # Fewer than three iterates


@dataclass
class ConvergenceReport:
    """Result of analysing one iterate sequence."""
    behaviour: ConvergenceBehaviour
    contraction_factor: float
    contraction_factors: List[float]
    order: Optional[float]
    a_posteriori_bound: float
    steps: List[float] = field(default_factory=list)
    
    @property
    def convergence_rate(self) -> str:
        """Human-readable convergence rate."""
        if self.behaviour in (ConvergenceBehaviour.DIVERGENT, ConvergenceBehaviour.STALLED):
            return "Non-convergent"
        if self.behaviour == ConvergenceBehaviour.INSUFFICIENT_DATA:
            return "Unknown"
        if self.order is not None and self.order > 1.5:
            return "Superlinear"
        if self.contraction_factor < 0.1:
            return "Fast linear convergence"
        elif self.contraction_factor < 0.5:
            return "Linear convergence"
        elif self.contraction_factor < 0.9:
            return "Moderate linear convergence"
        elif self.contraction_factor < 1.0:
            return "Slow linear convergence"
        else:
            return "Non-convergent"
    
    def summary(self) -> str:
        order = f"{self.order:.2f}" if self.order is not None else "n/a"
        return (
            f"{self.behaviour.name.lower()}, k={self.contraction_factor:.4g}, "
            f"order={order}, bound={self.a_posteriori_bound:.3g} "
            f"({self.convergence_rate})"
        )


@dataclass
class ContractionEstimate:
    """Sampled Lipschitz constant of a map on an interval."""
    interval: tuple
    lipschitz: float
    samples: int
    
    @property
    def is_contraction(self) -> bool:
        return self.lipschitz < 1.0
    
    def __str__(self):
        status = "✓ CONTRACTION" if self.is_contraction else "✗ NOT CONTRACTION"
        a, b = self.interval
        return f"ContractionEstimate([{a}, {b}]: L={self.lipschitz:.4f} [{status}], n={self.samples})"


class ConvergenceAnalyzer:
    """
    Classifies iterate sequences and estimates their convergence rate.
    
    Usage:
        analyzer = ConvergenceAnalyzer()
        report = analyzer.analyse(result.iterates)
        print(report.summary())
    """
    
    def __init__(self, window: int = 5, stall_tolerance: float = 1e-3):
        if window < 2:
            raise ValueError(f"window must be at least 2, got {window}")
        self.window = window
        self.stall_tolerance = stall_tolerance
    
    def analyse(self, iterates: Sequence[float]) -> ConvergenceReport:
        values = np.asarray(iterates, dtype=float)
        if values.size < 3:
            steps = np.abs(np.diff(values)).tolist()
            return ConvergenceReport(
                behaviour=ConvergenceBehaviour.INSUFFICIENT_DATA,
                contraction_factor=float('nan'),
                contraction_factors=[],
                order=None,
                a_posteriori_bound=float('inf'),
                steps=steps,
            )
        
        # overflowed runs carry inf/nan iterates; their steps are nan
        with np.errstate(invalid='ignore', over='ignore'):
            diffs = np.diff(values)
            steps = np.abs(diffs)
            factors = self._contraction_factors(steps)
        recent = factors[-self.window:]
        k = float(np.median(recent)) if recent.size else 0.0
        
        behaviour = self._classify(values, diffs, k)
        return ConvergenceReport(
            behaviour=behaviour,
            contraction_factor=k,
            contraction_factors=factors.tolist(),
            order=self._order(steps),
            a_posteriori_bound=self._error_bound(float(steps[-1]), k),
            steps=steps.tolist(),
        )
    
    def _contraction_factors(self, steps: np.ndarray) -> np.ndarray:
        previous, current = steps[:-1], steps[1:]
        mask = previous > 0
        return current[mask] / previous[mask]
    
    def _classify(self, values: np.ndarray, diffs: np.ndarray, k: float) -> ConvergenceBehaviour:
        if not np.all(np.isfinite(values)):
            return ConvergenceBehaviour.DIVERGENT
        if k > 1.0 + self.stall_tolerance:
            return ConvergenceBehaviour.DIVERGENT
        if abs(k - 1.0) <= self.stall_tolerance:
            return ConvergenceBehaviour.STALLED
        
        directions = np.sign(diffs[-self.window:])
        directions = directions[directions != 0]
        if directions.size < 2:
            return ConvergenceBehaviour.MONOTONIC
        if np.all(directions == directions[0]):
            return ConvergenceBehaviour.MONOTONIC
        if np.all(directions[1:] != directions[:-1]):
            return ConvergenceBehaviour.OSCILLATORY
        return ConvergenceBehaviour.IRREGULAR
    
    def _order(self, steps: np.ndarray) -> Optional[float]:
        positive = steps[steps > 0]
        if positive.size < 3:
            return None
        d0, d1, d2 = positive[-3:]
        if not np.all(np.isfinite((d0, d1, d2))):
            return None
        denominator = math.log(d1 / d0)
        if denominator == 0:
            return None
        return math.log(d2 / d1) / denominator
    
    def _error_bound(self, last_step: float, k: float) -> float:
        """
        A-posteriori Banach bound |x_n - x*| ≤ k / (1-k) · |x_n - x_{n-1}|.
        """
        if not 0.0 <= k < 1.0:
            return float('inf')
        return k / (1.0 - k) * last_step
    
    def check_contraction(
        self,
        func: ContinuousFunction,
        a: float,
        b: float,
        samples: int = 201,
    ) -> ContractionEstimate:
        """
        Estimate the Lipschitz constant of ``func`` on [a, b].
        
        Takes the largest difference quotient between neighbouring
        points of an evenly spaced grid. The estimate is a lower bound
        on the true constant; a value below 1 is evidence, not proof,
        of a contraction.
        """
        if samples < 2:
            raise ValueError(f"samples must be at least 2, got {samples}")
        if not a < b:
            raise ValueError(f"empty interval [{a}, {b}]")
        grid = np.linspace(a, b, samples)
        image = np.array([func(float(x)) for x in grid])
        quotients = np.abs(np.diff(image)) / np.diff(grid)
        return ContractionEstimate(
            interval=(a, b),
            lipschitz=float(np.max(quotients)),
            samples=samples,
        )


def iterations_bound(contraction: float, initial_distance: float, epsilon: float) -> int:
    """
    Iterations a contraction with factor L needs to get within ε of
    its fixed point: ⌈log(ε / |x_0 - x*|) / log L⌉.
    """
    if not 0.0 <= contraction < 1.0:
        raise ValueError(f"contraction factor must lie in [0, 1), got {contraction}")
    if not epsilon > 0:
        raise ValueError(f"epsilon must be positive, got {epsilon}")
    initial_distance = abs(initial_distance)
    if initial_distance <= epsilon:
        return 0
    if contraction == 0.0:
        return 1
    return math.ceil(math.log(epsilon / initial_distance) / math.log(contraction))


def bisection_steps(width: float, epsilon: float) -> int:
    """Bisections needed to shrink a bracket of ``width`` to ε: ⌈log₂(W / ε)⌉."""
    if not epsilon > 0:
        raise ValueError(f"epsilon must be positive, got {epsilon}")
    if width <= epsilon:
        return 0
    return math.ceil(math.log2(width / epsilon))
