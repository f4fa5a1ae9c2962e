"""Exceptions raised when a search result is unwrapped."""

from typing import Sequence, Tuple


class RootFindingError(Exception):
    """Base class for expected search failures."""


class InvalidBracketError(RootFindingError):
    """F(a) and F(b) do not have opposite signs."""

    def __init__(self, a: float, b: float, fa: float, fb: float):
        self.a = a
        self.b = b
        self.fa = fa
        self.fb = fb
        super().__init__(
            f"no sign change on [{a}, {b}]: F(a)={fa}, F(b)={fb}"
        )


class DidNotConvergeError(RootFindingError):
    """Fixed-point iteration hit its cap before the tolerance was met."""

    def __init__(self, iterates: Sequence[float], reason: str = "iteration cap reached"):
        self.iterates: Tuple[float, ...] = tuple(iterates)
        self.reason = reason
        last = self.iterates[-1] if self.iterates else float('nan')
        super().__init__(
            f"did not converge after {len(self.iterates) - 1} iterations "
            f"({reason}); last iterate {last}"
        )
