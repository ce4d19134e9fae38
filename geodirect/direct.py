"""
Vincenty's direct geodesic solution: the destination reached by travelling a given
distance along a given initial bearing from a known point on an ellipsoid.

Reference:
    T. Vincenty, "Direct and Inverse Solutions of Geodesics on the Ellipsoid with
    Application of Nested Equations", Survey Review XXIII (176), 1975.
"""

__all__ = [
    'DirectRequest', 'DirectResult', 'GeodesicDirectSolver',
    'destination', 'vincenty_direct'
]

import json
import math
from typing import Any, Dict, Optional, Union, overload

from geodirect._const import CONVERGENCE_TOLERANCE, MAX_ITERATIONS
from geodirect.conversion import DistanceUnit, convert_to_meters
from geodirect.coordinates import GeoPoint
from geodirect.ellipsoid import Ellipsoid, WGS84
from geodirect.exceptions import InvalidRequestError, NonConvergenceError
from geodirect.utils.mixins import LoggingMixin


class DirectRequest:
    """
    The inputs to a direct geodesic problem.

    Args:
        start:
            The starting point

        distance:
            The distance to travel, in meters. Must be finite and non-negative.

        bearing:
            The initial bearing, in degrees clockwise from true north. Any finite value
            is accepted and interpreted modulo 360.

        ellipsoid: (Default WGS84)
            The reference ellipsoid
    """

    __slots__ = ('start', 'distance', 'bearing', 'ellipsoid')

    start: GeoPoint
    distance: float
    bearing: float
    ellipsoid: Ellipsoid

    def __init__(
        self,
        start: GeoPoint,
        distance: float,
        bearing: float,
        ellipsoid: Ellipsoid = WGS84,
    ):
        distance, bearing = float(distance), float(bearing)
        if not math.isfinite(distance) or distance < 0:
            raise InvalidRequestError(
                f'Distance must be a finite, non-negative number of meters; received {distance}'
            )

        if not math.isfinite(bearing):
            raise InvalidRequestError(f'Bearing must be finite; received {bearing}')

        object.__setattr__(self, 'start', start)
        object.__setattr__(self, 'distance', distance)
        object.__setattr__(self, 'bearing', bearing)
        object.__setattr__(self, 'ellipsoid', ellipsoid)

    def __setattr__(self, key, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __eq__(self, other):
        if not isinstance(other, DirectRequest):
            return False

        return (
            self.start == other.start and
            self.distance == other.distance and
            self.bearing == other.bearing and
            self.ellipsoid == other.ellipsoid
        )

    def __hash__(self):
        return hash((self.start, self.distance, self.bearing, self.ellipsoid))

    def __repr__(self):
        return (
            f'<DirectRequest({self.start!r}, distance={self.distance}, '
            f'bearing={self.bearing})>'
        )


class DirectResult:
    """
    The solution to a direct geodesic problem.

    Attributes:
        destination:
            The point reached

        final_bearing:
            The azimuth of the geodesic at the destination, in degrees within [0, 360).
            Adding 180 degrees gives the bearing that leads back to the start.

        iterations:
            The number of refinement passes the solver took
    """

    __slots__ = ('destination', 'final_bearing', 'iterations')

    destination: GeoPoint
    final_bearing: float
    iterations: int

    def __init__(self, destination: GeoPoint, final_bearing: float, iterations: int = 0):
        object.__setattr__(self, 'destination', destination)
        object.__setattr__(self, 'final_bearing', final_bearing)
        object.__setattr__(self, 'iterations', iterations)

    def __setattr__(self, key, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __eq__(self, other):
        if not isinstance(other, DirectResult):
            return False

        return (
            self.destination == other.destination and
            self.final_bearing == other.final_bearing
        )

    def __hash__(self):
        return hash((self.destination, self.final_bearing))

    def __repr__(self):
        return f'<DirectResult({self.destination!r}, final_bearing={self.final_bearing})>'

    @property
    def reverse_azimuth(self) -> float:
        """Alias of final_bearing, after the name used in Vincenty's formulation"""
        return self.final_bearing


def _normalize_bearing(degrees: float) -> float:
    bearing = degrees % 360
    # -1e-17 % 360 rounds up to 360.0
    return 0. if bearing == 360 else bearing


class GeodesicDirectSolver(LoggingMixin):
    """
    Solves the direct geodesic problem with Vincenty's iterative formula.

    Solvers hold no state beyond their (immutable) settings and can be shared freely.

    Args:
        tolerance: (Default 1e-12)
            Successive estimates of sigma (radians) closer than this are considered
            converged

        max_iterations: (Default 200)
            The number of refinement passes after which NonConvergenceError is raised
    """

    def __init__(
        self,
        tolerance: float = CONVERGENCE_TOLERANCE,
        max_iterations: int = MAX_ITERATIONS,
    ):
        super().__init__()
        if not tolerance > 0:
            raise ValueError(f'Convergence tolerance must be positive; received {tolerance}')

        if max_iterations < 1:
            raise ValueError(f'max_iterations must be at least 1; received {max_iterations}')

        self.tolerance = tolerance
        self.max_iterations = max_iterations

    def solve(self, request: DirectRequest) -> DirectResult:
        """
        Calculate the destination and final bearing for a direct request.

        Args:
            request:
                The start point, distance (meters), initial bearing and ellipsoid

        Returns:
            DirectResult

        Raises:
            NonConvergenceError:
                If sigma has not settled within max_iterations passes
        """
        start = request.start
        if request.distance == 0:
            return DirectResult(start, _normalize_bearing(request.bearing), 0)

        b, f = request.ellipsoid.b, request.ellipsoid.f
        s = request.distance

        alpha1 = math.radians(request.bearing)
        sinAlpha1, cosAlpha1 = math.sin(alpha1), math.cos(alpha1)

        # Reduced latitude on the auxiliary sphere
        tanU1 = (1 - f) * math.tan(math.radians(start.latitude))
        cosU1 = 1 / math.sqrt(1 + tanU1 ** 2)
        sinU1 = tanU1 * cosU1

        sigma1 = math.atan2(tanU1, cosAlpha1)
        sinAlpha = cosU1 * sinAlpha1
        cosSqAlpha = 1 - sinAlpha ** 2
        uSq = cosSqAlpha * request.ellipsoid.second_eccentricity_squared

        A = 1 + uSq / 16384 * (4096 + uSq * (-768 + uSq * (320 - 175 * uSq)))
        B = uSq / 1024 * (256 + uSq * (-128 + uSq * (74 - 47 * uSq)))

        sigma_0 = s / (b * A)
        sigma = sigma_0
        delta = math.inf
        for iteration in range(1, self.max_iterations + 1):
            cos2SigmaM = math.cos(2 * sigma1 + sigma)
            sinSigma, cosSigma = math.sin(sigma), math.cos(sigma)
            deltaSigma = B * sinSigma * (
                cos2SigmaM + B / 4 * (
                    cosSigma * (-1 + 2 * cos2SigmaM ** 2) -
                    B / 6 * cos2SigmaM * (-3 + 4 * sinSigma ** 2) * (-3 + 4 * cos2SigmaM ** 2)
                )
            )
            sigma_prev = sigma
            sigma = sigma_0 + deltaSigma
            delta = abs(sigma - sigma_prev)
            # NaN never compares below the tolerance, so it runs out the iteration cap
            if delta <= self.tolerance:
                break
        else:
            raise NonConvergenceError(self.max_iterations, delta)

        self.logger.debug(
            'Converged after %d iterations (delta %.3e radians)', iteration, delta
        )

        sinSigma, cosSigma = math.sin(sigma), math.cos(sigma)
        cos2SigmaM = math.cos(2 * sigma1 + sigma)

        tmp = sinU1 * sinSigma - cosU1 * cosSigma * cosAlpha1
        lat2 = math.atan2(
            sinU1 * cosSigma + cosU1 * sinSigma * cosAlpha1,
            (1 - f) * math.sqrt(sinAlpha ** 2 + tmp ** 2)
        )
        lambda_val = math.atan2(
            sinSigma * sinAlpha1,
            cosU1 * cosSigma - sinU1 * sinSigma * cosAlpha1
        )
        C = f / 16 * cosSqAlpha * (4 + f * (4 - 3 * cosSqAlpha))
        L = lambda_val - (1 - C) * f * sinAlpha * (
            sigma + C * sinSigma * (cos2SigmaM + C * cosSigma * (-1 + 2 * cos2SigmaM ** 2))
        )
        final_bearing = math.atan2(sinAlpha, -tmp)

        return DirectResult(
            GeoPoint(math.degrees(lat2), start.longitude + math.degrees(L)),
            _normalize_bearing(math.degrees(final_bearing)),
            iteration,
        )


_DEFAULT_SOLVER = GeodesicDirectSolver()


def vincenty_direct(
    start: GeoPoint,
    distance: float,
    bearing: float,
    units: Optional[Union[DistanceUnit, str]] = None,
    ellipsoid: Ellipsoid = WGS84,
) -> DirectResult:
    """
    Calculate the destination and final bearing reached by travelling a distance along
    an initial bearing, using Vincenty's direct formula.

    Args:
        start:
            The starting point

        distance:
            The distance to travel, in the given units

        bearing:
            The initial bearing, in degrees clockwise from true north

        units: (Default None)
            One of 'miles', 'kilometers', 'meters', 'feet' (or the matching
            DistanceUnit). None means meters.

        ellipsoid: (Default WGS84)
            The reference ellipsoid

    Returns:
        DirectResult
    """
    return _DEFAULT_SOLVER.solve(
        DirectRequest(start, convert_to_meters(distance, units), bearing, ellipsoid)
    )


@overload
def destination(
    point: GeoPoint,
    distance: float,
    bearing: float,
    units: Optional[Union[DistanceUnit, str]] = ...,
    ellipsoid: Ellipsoid = ...,
) -> GeoPoint:
    ...


@overload
def destination(
    point: Union[str, Dict[str, Any]],
    distance: float,
    bearing: float,
    units: Optional[Union[DistanceUnit, str]] = ...,
    ellipsoid: Ellipsoid = ...,
) -> Dict[str, Any]:
    ...


def destination(point, distance, bearing, units=None, ellipsoid=WGS84):
    """
    Takes a point and calculates the location of a destination point given a distance
    and a bearing, accounting for the curvature of the ellipsoid.

    The point may be a GeoPoint, in which case a GeoPoint is returned, or a GeoJSON
    Point geometry / Point Feature (dict or string), in which case a Point Feature is
    returned carrying over the input feature's properties.

    Args:
        point:
            The starting point

        distance:
            The distance from the starting point, in the given units

        bearing:
            The initial bearing in degrees, conventionally within [-180, 180]

        units: (Default None)
            One of 'miles', 'kilometers', 'meters', 'feet'. None means meters.

        ellipsoid: (Default WGS84)
            The reference ellipsoid

    Returns:
        GeoPoint or GeoJSON Feature (dict)

    Example:
        >>> dest = destination(
        ...     {'type': 'Feature', 'properties': {'marker-color': '#0f0'},
        ...      'geometry': {'type': 'Point', 'coordinates': [-75.343, 39.984]}},
        ...     50, 90, 'miles'
        ... )
        >>> dest['geometry']['type']
        'Point'
    """
    if isinstance(point, GeoPoint):
        return vincenty_direct(point, distance, bearing, units, ellipsoid).destination

    if isinstance(point, str):
        point = json.loads(point)

    start = GeoPoint.from_geojson(point)
    result = vincenty_direct(start, distance, bearing, units, ellipsoid)
    return result.destination.to_geojson(point.get('properties'))
