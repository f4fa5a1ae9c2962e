"""Function contract and error types shared by every search."""

from rootfind.core.function import ContinuousFunction, describe, named, sign
from rootfind.core.errors import (
    RootFindingError,
    InvalidBracketError,
    DidNotConvergeError,
)

__all__ = [
    'ContinuousFunction',
    'describe',
    'named',
    'sign',
    'RootFindingError',
    'InvalidBracketError',
    'DidNotConvergeError',
]
