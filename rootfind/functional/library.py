"""
Functional Library
==================

A functional Γ maps a function F to another function Γ(F). If Γ(F)
vanishes exactly where F does, then the roots of F are the fixed
points of

    f(x) = x - Γ(F)(x)

which is what ``x_minus`` builds. The library only performs the
pointwise arithmetic; the equivalence Γ(F)(x) = 0 ⟺ F(x) = 0 is the
caller's responsibility.

Available functionals:

    identity          Γ(F) = F
    frac              Γ(F) = F / (2 + k)
    newton_raphson    Γ(F) = F / F'

Every built function is a closure holding its inputs for its own
lifetime. Building the same functional twice yields two distinct
functions that agree pointwise.
"""

from typing import Callable, Dict, Optional

from rootfind.core.function import ContinuousFunction, describe, named


def x_minus(func: ContinuousFunction) -> ContinuousFunction:
    """Build f(x) = x - g(x)."""
    def fixed_point_map(x: float) -> float:
        return x - func(x)
    return named(fixed_point_map, f"x - {describe(func)}")


def identity(func: ContinuousFunction) -> ContinuousFunction:
    """Γ(F) = F."""
    def gamma(x: float) -> float:
        return func(x)
    return named(gamma, describe(func))


def functional_frac(func: ContinuousFunction, k: float) -> ContinuousFunction:
    """
    Γ(F) = F / (2 + k).

    For k = -2 the quotient is undefined everywhere; the constant
    function 1 is returned instead. Its map x - 1 has no fixed point,
    so an iteration built from it reports non-convergence.
    """
    k = float(k)
    if k == -2.0:
        def gamma(x: float) -> float:
            return 1.0
        return named(gamma, "1")

    scale = 2.0 + k

    def gamma(x: float) -> float:
        return func(x) / scale
    return named(gamma, f"{describe(func)} / {scale:g}")


def functional_newton_raphson(
    func: ContinuousFunction,
    derivative: ContinuousFunction,
) -> ContinuousFunction:
    """
    Γ(F) = F / F'.

    Undefined where F'(x) = 0: evaluating there raises
    ZeroDivisionError at the point of evaluation.
    """
    def gamma(x: float) -> float:
        slope = derivative(x)
        if slope == 0:
            raise ZeroDivisionError(
                f"derivative {describe(derivative)} vanishes at x={x}"
            )
        return func(x) / slope
    return named(gamma, f"{describe(func)} / {describe(derivative)}")


FUNCTIONALS: Dict[str, Callable[..., ContinuousFunction]] = {
    'identity': identity,
    'frac': functional_frac,
    'newton': functional_newton_raphson,
}


def iteration_map(
    name: str,
    func: ContinuousFunction,
    *,
    k: float = 0.0,
    derivative: Optional[ContinuousFunction] = None,
) -> ContinuousFunction:
    """
    Build the fixed-point map x - Γ(F) for the functional ``name``.

    Args:
        name: One of ``FUNCTIONALS``
        func: The target function F
        k: Scale parameter for ``frac``
        derivative: F', required for ``newton``
    """
    if name not in FUNCTIONALS:
        raise ValueError(
            f"unknown functional '{name}', expected one of {sorted(FUNCTIONALS)}"
        )
    if name == 'frac':
        gamma = functional_frac(func, k)
    elif name == 'newton':
        if derivative is None:
            raise ValueError("the newton functional needs the derivative of F")
        gamma = functional_newton_raphson(func, derivative)
    else:
        gamma = identity(func)
    return x_minus(gamma)
