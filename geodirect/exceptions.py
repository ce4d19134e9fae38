"""
Errors raised by geodirect
"""

__all__ = [
    'GeodesicError', 'InvalidCoordinateError', 'InvalidEllipsoidError',
    'InvalidInputError', 'InvalidRequestError', 'InvalidUnitError',
    'NonConvergenceError'
]

from typing import Any


class GeodesicError(Exception):
    """Base class for all geodirect errors"""


class InvalidUnitError(GeodesicError, ValueError):
    """A distance unit tag that cannot be converted to meters"""

    def __init__(self, tag: Any):
        self.tag = tag
        super().__init__(
            f"Unknown distance unit '{tag}'. "
            "Options: 'miles', 'kilometers', 'meters', 'feet' or None"
        )


class NonConvergenceError(GeodesicError, ArithmeticError):
    """
    Vincenty's iteration on sigma did not settle within the permitted number of passes.

    Attributes:
        iterations:
            The number of passes performed

        last_delta:
            The absolute change in sigma (radians) on the final pass
    """

    def __init__(self, iterations: int, last_delta: float):
        self.iterations = iterations
        self.last_delta = last_delta
        super().__init__(
            f'Vincenty direct solution failed to converge after {iterations} iterations '
            f'(last delta {last_delta!r} radians)'
        )


class InvalidInputError(GeodesicError, ValueError):
    """Degenerate input that the solver cannot work with"""


class InvalidCoordinateError(InvalidInputError):
    """Latitude out of range or non-finite coordinate values"""


class InvalidEllipsoidError(InvalidInputError):
    """Ellipsoid parameters that do not describe an oblate ellipsoid (or a sphere)"""


class InvalidRequestError(InvalidInputError):
    """Negative or non-finite distance, or non-finite bearing"""
