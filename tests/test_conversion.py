import pytest

from geodirect import DistanceUnit, InvalidUnitError
from geodirect.conversion import convert_to_meters
from geodirect.utils import logging as gd_logging


def test_convert_to_meters():
    # Test cases: (distance, unit, expected_result)
    test_data = [
        (1.0, 'kilometers', 1000.0),
        (1.0, 'miles', 1609.34),
        (1.0, 'feet', 0.3048),
        (1.0, 'meters', 1.0),
        (2.5, DistanceUnit.KILOMETERS, 2500.0),
        (2.0, DistanceUnit.MILES, 3218.68),
        (10.0, DistanceUnit.FEET, 3.048),
        (7.0, DistanceUnit.METERS, 7.0),
    ]

    for distance, unit, expected_result in test_data:
        result = convert_to_meters(distance, unit)
        assert result == pytest.approx(expected_result, rel=1e-12)


def test_convert_to_meters_exact_factors():
    assert convert_to_meters(12.3, 'kilometers') == 12.3 * 1000
    assert convert_to_meters(12.3, 'miles') == 12.3 * 1609.34
    assert convert_to_meters(12.3, 'feet') == 12.3 * 0.3048
    assert convert_to_meters(12.3, 'meters') == 12.3


def test_convert_to_meters_unspecified(caplog, monkeypatch):
    monkeypatch.setattr(gd_logging, '_WARNINGS', set())

    assert convert_to_meters(42, None) == 42.
    assert convert_to_meters(42) == 42.
    assert caplog.text.count('meters assumed') == 1


def test_convert_to_meters_invalid_unit():
    with pytest.raises(InvalidUnitError) as exc:
        convert_to_meters(1., 'furlongs')

    assert exc.value.tag == 'furlongs'
    assert 'furlongs' in str(exc.value)
    assert isinstance(exc.value, ValueError)

    # Tags are matched exactly
    with pytest.raises(InvalidUnitError):
        convert_to_meters(1., 'KILOMETERS')

    with pytest.raises(InvalidUnitError):
        convert_to_meters(1., 'km')


def test_distance_unit():
    assert DistanceUnit('miles') is DistanceUnit.MILES
    assert DistanceUnit.MILES.meters == 1609.34
    assert DistanceUnit.KILOMETERS.meters == 1000.
    assert DistanceUnit.FEET.meters == 0.3048
    assert DistanceUnit.METERS.meters == 1.
    assert {x.value for x in DistanceUnit} == {'miles', 'kilometers', 'meters', 'feet'}
