"""
Search Results
==============

Tagged result types for the two searches. An invalid bracket or an
exhausted iteration cap is an expected outcome the caller branches on,
so it is reported through ``status`` rather than raised. ``unwrap()``
converts a result into the plain success tuple, raising the matching
``RootFindingError`` subclass when the search failed.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Tuple

from rootfind.core.errors import DidNotConvergeError, InvalidBracketError


class SearchStatus(Enum):
    """Outcome of a root search."""
    CONVERGED = auto()         # Tolerance satisfied
    EXACT_ROOT = auto()        # F evaluated to exactly zero
    INVALID_BRACKET = auto()   # No sign change at the endpoints
    MAX_ITERATIONS = auto()    # Iteration cap reached first
    DIVERGING = auto()         # Opt-in divergence guard tripped

    @property
    def ok(self) -> bool:
        return self in (SearchStatus.CONVERGED, SearchStatus.EXACT_ROOT)


@dataclass(frozen=True)
class BisectionResult:
    """Result of an interval-bisection search."""
    status: SearchStatus
    root: Optional[float]
    steps: int
    interval: Tuple[float, float]
    f_root: Optional[float] = None
    f_endpoints: Tuple[float, float] = (float('nan'), float('nan'))
    wall_time_seconds: float = 0.0

    @property
    def ok(self) -> bool:
        return self.status.ok

    @property
    def width(self) -> float:
        return self.interval[1] - self.interval[0]

    def unwrap(self) -> Tuple[float, int]:
        """Return ``(root, steps)`` or raise ``InvalidBracketError``."""
        if not self.ok:
            a, b = self.interval
            fa, fb = self.f_endpoints
            raise InvalidBracketError(a, b, fa, fb)
        return self.root, self.steps


@dataclass(frozen=True)
class FixedPointResult:
    """
    Result of a fixed-point iteration.

    ``iterates`` always holds the full sequence x_0, x_1, ..., x_N,
    so ``iterations == len(iterates) - 1``.
    """
    status: SearchStatus
    root: Optional[float]
    iterates: Tuple[float, ...]
    accelerated: Tuple[float, ...] = field(default_factory=tuple)
    wall_time_seconds: float = 0.0

    @property
    def ok(self) -> bool:
        return self.status.ok

    @property
    def iterations(self) -> int:
        return len(self.iterates) - 1

    @property
    def last_step(self) -> float:
        """|x_N - x_{N-1}|, or inf before the first step."""
        if len(self.iterates) < 2:
            return float('inf')
        return abs(self.iterates[-1] - self.iterates[-2])

    def unwrap(self) -> Tuple[float, Tuple[float, ...]]:
        """Return ``(root, iterates)`` or raise ``DidNotConvergeError``."""
        if not self.ok:
            reason = (
                "divergence detected"
                if self.status == SearchStatus.DIVERGING
                else "iteration cap reached"
            )
            raise DidNotConvergeError(self.iterates, reason)
        return self.root, self.iterates
