"""Functionals: turn F(x) = 0 into an equivalent fixed-point problem x = f(x)."""

from rootfind.functional.library import (
    FUNCTIONALS,
    x_minus,
    identity,
    functional_frac,
    functional_newton_raphson,
    iteration_map,
)

__all__ = [
    'FUNCTIONALS',
    'x_minus',
    'identity',
    'functional_frac',
    'functional_newton_raphson',
    'iteration_map',
]
