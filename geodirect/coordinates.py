"""
Representation of a specific point on earth
"""

__all__ = ['GeoPoint', 'normalize_longitude']

import copy
import json
import math
from typing import Any, Dict, Optional, Tuple, Union, cast

from geodirect.exceptions import InvalidCoordinateError


def normalize_longitude(lon: float) -> float:
    """
    Wraps a longitude, in degrees, into the half-open interval (-180, 180].

    Args:
        lon:
            Longitude in degrees. Any finite value is accepted.

    Returns:
        (float)
    """
    if -180 < lon <= 180:
        return lon

    lon = math.fmod(lon, 360.)
    if lon > 180:
        lon -= 360
    elif lon <= -180:
        lon += 360

    return lon


class GeoPoint:
    """
    Representation of a coordinate on the globe (i.e., a lat/lon pair). Instances are
    immutable; longitudes are normalized to (-180, 180].
    """

    __slots__ = ('latitude', 'longitude')

    latitude: float
    longitude: float

    def __init__(
        self,
        latitude: Union[float, int, str],
        longitude: Union[float, int, str],
    ):
        lat, lon = float(latitude), float(longitude)
        if not (math.isfinite(lat) and math.isfinite(lon)):
            raise InvalidCoordinateError(
                f'Coordinates must be finite; received ({latitude}, {longitude})'
            )

        if not -90 <= lat <= 90:
            raise InvalidCoordinateError(f'Latitude {lat} must be within [-90, 90]')

        object.__setattr__(self, 'latitude', lat)
        object.__setattr__(self, 'longitude', normalize_longitude(lon))

    def __setattr__(self, key, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __delattr__(self, key):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __eq__(self, other):
        if not isinstance(other, GeoPoint):
            return False

        return (
            self.latitude == other.latitude and
            self.longitude == other.longitude
        )

    def __hash__(self):
        return hash((self.latitude, self.longitude))

    def __repr__(self):
        return f'<GeoPoint({self.latitude}, {self.longitude})>'

    @classmethod
    def from_geojson(cls, gjson: Union[str, Dict[str, Any]]) -> 'GeoPoint':
        """
        Creates a GeoPoint from a GeoJSON Point geometry, or from a Feature whose geometry
        is a Point.

        Args:
            gjson:
                A GeoJSON structure (as a string or python dict)

        Returns:
            GeoPoint
        """
        if isinstance(gjson, str):
            gjson = json.loads(gjson)

        if not isinstance(gjson, dict):
            raise ValueError('Malformed GeoJSON; expected a JSON object')

        gjson = cast(Dict[str, Any], gjson)
        geom = gjson.get('geometry') if gjson.get('type') == 'Feature' else gjson
        if not isinstance(geom, dict) or geom.get('type') != 'Point':
            raise ValueError('Malformed GeoJSON; expected a Point geometry or Point Feature')

        coords = geom.get('coordinates')
        if not isinstance(coords, (list, tuple)) or len(coords) < 2:
            raise ValueError('Malformed GeoJSON; Point coordinates must be [longitude, latitude]')

        # GeoJSON positions are ordered longitude, latitude
        return cls(coords[1], coords[0])

    def to_float(self, reverse: bool = False) -> Tuple[float, float]:
        """
        Converts the point to a tuple of floats (latitude, longitude).

        Args:
            reverse: (bool)
                (Default False) If True, reverses the order to (longitude, latitude)

        Returns:
            Tuple[float, float]
        """
        if reverse:
            return self.longitude, self.latitude

        return self.latitude, self.longitude

    def to_geojson(self, properties: Optional[Dict] = None) -> Dict:
        """
        Convert the point to a GeoJSON Point Feature.

        Args:
            properties: (dict)
                Any number of properties to be included in the feature properties.
                The mapping is deep-copied.

        Returns:
            (dict)
        """
        return {
            'type': 'Feature',
            'geometry': {
                'type': 'Point',
                'coordinates': list(self.to_float(reverse=True)),
            },
            'properties': copy.deepcopy(properties) if properties else {},
        }
