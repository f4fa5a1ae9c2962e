"""
rootfind: Iterative Root Finding for Scalar Functions
=====================================================

Locates roots of a continuous real function F(x) = 0 and exposes the
convergence behaviour of the methods used.

Core Components:
    - search: interval bisection and fixed-point iteration
    - functional: transforms turning F(x) = 0 into x = f(x)
    - analysis: convergence diagnostics and bracket scanning
    - report: iterate tables and plots

Usage:
    >>> import math
    >>> from rootfind import binary_search, fixed_point, functional_frac, x_minus
    >>> F = lambda x: 2 * x - 3 * math.sin(x) + 5
    >>> binary_search(F, -3.0, -2.0, 1e-6).root
    -2.88323...
    >>> result = fixed_point(math.cos, 1.0, 1e-8, 100)
    >>> result.status
    <SearchStatus.CONVERGED: 1>
"""

__version__ = "1.0.0"

from rootfind.core.function import ContinuousFunction
from rootfind.core.errors import RootFindingError, InvalidBracketError, DidNotConvergeError
from rootfind.search.result import SearchStatus, BisectionResult, FixedPointResult
from rootfind.search.bisection import BisectionSolver, binary_search
from rootfind.search.fixed_point import (
    FixedPointEngine,
    AcceleratedFixedPointEngine,
    fixed_point,
)
from rootfind.functional.library import (
    x_minus,
    identity,
    functional_frac,
    functional_newton_raphson,
    iteration_map,
)
from rootfind.analysis import (
    ConvergenceAnalyzer,
    ConvergenceBehaviour,
    ConvergenceReport,
    iterations_bound,
    bisection_steps,
    scan_brackets,
)
