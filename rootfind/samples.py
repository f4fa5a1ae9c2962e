"""
Sample functions for exercising the root finders.

    identity   x                          root at 0
    polynom    x³ - 8.5x² + 20x - 8       roots at 0.5 and 4
    trig       2x - 3 sin(x) + 5          root at -2.8832...

Each comes with its derivative for the Newton-Raphson functional.
"""

import math
from dataclasses import dataclass
from typing import Dict, Tuple

from rootfind.core.function import ContinuousFunction


def identity(x: float) -> float:
    return x


def identity_derivative(x: float) -> float:
    return 1.0


def polynom(x: float) -> float:
    return x * x * x - 8.5 * x * x + 20.0 * x - 8.0


def polynom_derivative(x: float) -> float:
    return 3.0 * x * x - 17.0 * x + 20.0


def trig(x: float) -> float:
    return 2.0 * x - 3.0 * math.sin(x) + 5.0


def trig_derivative(x: float) -> float:
    return 2.0 - 3.0 * math.cos(x)


@dataclass(frozen=True)
class Sample:
    """A test function, its derivative and its known roots."""
    name: str
    func: ContinuousFunction
    derivative: ContinuousFunction
    formula: str
    roots: Tuple[float, ...]


SAMPLES: Dict[str, Sample] = {
    'identity': Sample('identity', identity, identity_derivative, "x", (0.0,)),
    'polynom': Sample(
        'polynom', polynom, polynom_derivative,
        "x^3 - 8.5x^2 + 20x - 8", (0.5, 4.0),
    ),
    'trig': Sample(
        'trig', trig, trig_derivative,
        "2x - 3sin(x) + 5", (-2.883237,),
    ),
}


def get_sample(name: str) -> Sample:
    try:
        return SAMPLES[name]
    except KeyError:
        raise ValueError(
            f"unknown sample '{name}', expected one of {sorted(SAMPLES)}"
        ) from None
