"""
Continuous Functions
====================

A continuous function is any callable mapping a real number to a real
number. Plain functions, lambdas, closures built by the functional
library and objects defining ``__call__`` all qualify; nothing in the
package inspects them beyond calling them.

Functions are treated as immutable values: searches only evaluate them,
and composed functions capture their constituents for their whole
lifetime.
"""

from typing import Callable

ContinuousFunction = Callable[[float], float]


def sign(value: float) -> int:
    """Sign of a real value: -1, 0 or +1. NaN maps to 0."""
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def describe(func: ContinuousFunction) -> str:
    """Human-readable name of a function, for logs and reports."""
    name = getattr(func, '__rootfind_name__', None)
    if name:
        return name
    name = getattr(func, '__name__', None)
    if name and name != '<lambda>':
        return name
    return repr(func)


def named(func: ContinuousFunction, name: str) -> ContinuousFunction:
    """
    Attach a display name to ``func``.

    Builtins such as ``math.cos`` reject new attributes; those are
    wrapped in a forwarding function that carries the name instead.
    """
    try:
        func.__rootfind_name__ = name
        return func
    except (AttributeError, TypeError):
        def wrapper(x: float) -> float:
            return func(x)
        wrapper.__rootfind_name__ = name
        return wrapper
