"""
Module for unit conversions
"""
__all__ = ['DistanceUnit', 'convert_to_meters']

from enum import Enum
from typing import Optional, Union

from geodirect.exceptions import InvalidUnitError
from geodirect.utils.logging import warn_once


class DistanceUnit(Enum):
    """The distance units accepted by the solver, valued by their string tag"""
    MILES = 'miles'
    KILOMETERS = 'kilometers'
    METERS = 'meters'
    FEET = 'feet'

    @property
    def meters(self) -> float:
        """The length of one unit, in meters"""
        return _METERS_PER_UNIT[self]


_METERS_PER_UNIT = {
    DistanceUnit.MILES: 1609.34,
    DistanceUnit.KILOMETERS: 1000.,
    DistanceUnit.METERS: 1.,
    DistanceUnit.FEET: 0.3048,
}


def convert_to_meters(
    distance: float,
    unit: Optional[Union[DistanceUnit, str]] = None
) -> float:
    """
    Converts distance to meters.

    Args:
        distance (float): The distance value.
        unit (DistanceUnit or str): The unit of distance ('miles', 'kilometers',
        'meters' or 'feet'). When None, the distance is taken to be in meters.

    Returns:
        float: The distance in meters.
    """
    if unit is None:
        warn_once(
            'No distance unit was specified; meters assumed. '
            '(this warning will not repeat)'
        )
        return float(distance)

    if not isinstance(unit, DistanceUnit):
        try:
            unit = DistanceUnit(unit)
        except ValueError as e:
            raise InvalidUnitError(unit) from e

    if unit is DistanceUnit.METERS:
        return float(distance)

    return distance * unit.meters
