"""
Reference ellipsoids for geodesic calculations
"""

__all__ = ['Ellipsoid', 'WGS84']

import math
from typing import Optional

from geodirect._const import WGS84_A, WGS84_B, WGS84_F
from geodirect.exceptions import InvalidEllipsoidError


class Ellipsoid:
    """
    An ellipsoid of revolution described by its semi-major axis, semi-minor axis and
    flattening. Instances are immutable.

    Args:
        a:
            The semi-major axis (equatorial radius), in meters

        b:
            The semi-minor axis (polar radius), in meters

        f: (Optional)
            The flattening. Defaults to (a - b) / a. Published ellipsoids frequently
            round b, so both are accepted as given.
    """

    __slots__ = ('a', 'b', 'f')

    a: float
    b: float
    f: float

    def __init__(self, a: float, b: float, f: Optional[float] = None):
        a, b = float(a), float(b)
        if not (math.isfinite(a) and math.isfinite(b)):
            raise InvalidEllipsoidError(f'Ellipsoid axes must be finite; received a={a}, b={b}')

        if a <= 0 or b <= 0:
            raise InvalidEllipsoidError(f'Ellipsoid axes must be positive; received a={a}, b={b}')

        if b > a:
            raise InvalidEllipsoidError(
                f'Semi-minor axis ({b}) must not exceed the semi-major axis ({a})'
            )

        f = (a - b) / a if f is None else float(f)
        if not (math.isfinite(f) and 0 <= f < 1):
            raise InvalidEllipsoidError(f'Flattening ({f}) must be within [0, 1)')

        object.__setattr__(self, 'a', a)
        object.__setattr__(self, 'b', b)
        object.__setattr__(self, 'f', f)

    def __setattr__(self, key, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __delattr__(self, key):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __eq__(self, other):
        if not isinstance(other, Ellipsoid):
            return False

        return (self.a, self.b, self.f) == (other.a, other.b, other.f)

    def __hash__(self):
        return hash((self.a, self.b, self.f))

    def __repr__(self):
        return f'<Ellipsoid(a={self.a}, b={self.b}, f={self.f})>'

    @classmethod
    def from_flattening(cls, a: float, f: float) -> 'Ellipsoid':
        """
        Creates an Ellipsoid from its semi-major axis and flattening, deriving the
        semi-minor axis as a * (1 - f).

        Args:
            a:
                The semi-major axis, in meters

            f:
                The flattening, e.g. 1 / 298.257223563

        Returns:
            Ellipsoid
        """
        if not math.isfinite(f) or not 0 <= f < 1:
            raise InvalidEllipsoidError(f'Flattening ({f}) must be within [0, 1)')

        return cls(a, a * (1 - f), f)

    @property
    def second_eccentricity_squared(self) -> float:
        """(a² - b²) / b², the factor scaling cos²(alpha) into Vincenty's u²"""
        return (self.a ** 2 - self.b ** 2) / self.b ** 2


WGS84 = Ellipsoid(WGS84_A, WGS84_B, WGS84_F)
