"""Bisection and fixed-point root searches."""

from rootfind.search.result import SearchStatus, BisectionResult, FixedPointResult
from rootfind.search.bisection import BisectionSolver, binary_search
from rootfind.search.fixed_point import (
    FixedPointEngine,
    AcceleratedFixedPointEngine,
    fixed_point,
)

__all__ = [
    'SearchStatus',
    'BisectionResult',
    'FixedPointResult',
    'BisectionSolver',
    'binary_search',
    'FixedPointEngine',
    'AcceleratedFixedPointEngine',
    'fixed_point',
]
