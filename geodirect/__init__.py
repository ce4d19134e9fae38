"""Vincenty's direct geodesic solution on a configurable ellipsoid"""

from geodirect._version import __version__  # noqa: F401
from geodirect.utils.logging import LOGGER
from geodirect.conversion import DistanceUnit, convert_to_meters
from geodirect.coordinates import GeoPoint
from geodirect.direct import (
    DirectRequest, DirectResult, GeodesicDirectSolver, destination, vincenty_direct
)
from geodirect.ellipsoid import Ellipsoid, WGS84
from geodirect.exceptions import (
    GeodesicError, InvalidCoordinateError, InvalidEllipsoidError, InvalidInputError,
    InvalidRequestError, InvalidUnitError, NonConvergenceError
)

__all__ = [
    'DirectRequest',
    'DirectResult',
    'DistanceUnit',
    'Ellipsoid',
    'GeoPoint',
    'GeodesicDirectSolver',
    'GeodesicError',
    'InvalidCoordinateError',
    'InvalidEllipsoidError',
    'InvalidInputError',
    'InvalidRequestError',
    'InvalidUnitError',
    'LOGGER',
    'NonConvergenceError',
    'WGS84',
    'convert_to_meters',
    'destination',
    'vincenty_direct',
]
