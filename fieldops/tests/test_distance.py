"""
Tests for the great-circle distance accumulator
"""
import math
from types import SimpleNamespace

import pytest

from fieldops.core.errors import InvalidInput
from fieldops.services.distance_service import accumulate, great_circle_distance, validate_coordinates
from fieldops.utils.rounding import round_half_up

CONNAUGHT_PLACE = SimpleNamespace(latitude=28.6139, longitude=77.2090)
MODEL_TOWN = SimpleNamespace(latitude=28.7041, longitude=77.1025)


def fix(lat, lng):
    return SimpleNamespace(latitude=lat, longitude=lng)


def test_accumulate_empty_and_single_fix_is_zero():
    assert accumulate([]) == 0
    assert accumulate([CONNAUGHT_PLACE]) == 0


def test_same_coordinates_contribute_nothing():
    fixes = [fix(28.6139, 77.2090) for _ in range(5)]
    assert accumulate(fixes) == 0


def test_delhi_reference_distance():
    """Known pair inside Delhi is about 14.44 km apart"""
    d = great_circle_distance(CONNAUGHT_PLACE, MODEL_TOWN)
    assert abs(d - 14.44) <= 0.01


def test_distance_is_rounded_to_two_decimals():
    d = great_circle_distance(CONNAUGHT_PLACE, MODEL_TOWN)
    assert d == round_half_up(d)
    assert round(d * 100) == pytest.approx(d * 100)


def test_distance_is_symmetric():
    assert great_circle_distance(CONNAUGHT_PLACE, MODEL_TOWN) == great_circle_distance(MODEL_TOWN, CONNAUGHT_PLACE)


def test_accumulate_sums_rounded_legs():
    leg = great_circle_distance(CONNAUGHT_PLACE, MODEL_TOWN)
    total = accumulate([CONNAUGHT_PLACE, MODEL_TOWN, CONNAUGHT_PLACE])
    assert total == round_half_up(leg + leg)


def test_reversed_path_has_same_total():
    path = [CONNAUGHT_PLACE, fix(28.65, 77.15), MODEL_TOWN]
    assert accumulate(path) == accumulate(list(reversed(path)))


def test_accumulate_is_idempotent():
    path = [CONNAUGHT_PLACE, fix(28.65, 77.15), MODEL_TOWN, fix(28.70, 77.20)]
    first = accumulate(path)
    second = accumulate(path)
    assert first == second


def test_one_degree_of_latitude_on_equator():
    """One degree along a meridian is R * pi / 180"""
    expected = round_half_up(6371.0 * math.pi / 180)
    assert great_circle_distance(fix(0, 0), fix(1, 0)) == expected


def test_antipodal_points_do_not_fail():
    d = great_circle_distance(fix(0, 0), fix(0, 180))
    assert d == round_half_up(6371.0 * math.pi)


@pytest.mark.parametrize("lat,lng", [
    (90.5, 0),
    (-91, 10),
    (10, 180.01),
    (10, -181),
    (float("nan"), 77.2),
    (28.6, float("nan")),
])
def test_invalid_coordinates_raise_invalid_input(lat, lng):
    with pytest.raises(InvalidInput):
        great_circle_distance(fix(lat, lng), MODEL_TOWN)


def test_none_coordinate_raises_invalid_input():
    with pytest.raises(InvalidInput):
        validate_coordinates(fix(None, 77.2))


def test_boundary_coordinates_are_valid():
    validate_coordinates(fix(90, 180))
    validate_coordinates(fix(-90, -180))
