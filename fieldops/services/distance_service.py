"""
Distance accumulator - great-circle distance over a day's GPS fixes

Pure functions: no database access, no clock, no logging side effects that
change results. Callers pass fixes already ordered by timestamp.
"""
import math
from typing import Protocol, Sequence

from fieldops.constants import EARTH_RADIUS_KM
from fieldops.core.errors import InvalidInput
from fieldops.utils.rounding import round_half_up


class Coordinates(Protocol):
    latitude: float
    longitude: float


def validate_coordinates(fix: Coordinates) -> None:
    lat, lng = fix.latitude, fix.longitude
    if lat is None or lng is None or math.isnan(lat) or math.isnan(lng):
        raise InvalidInput(f"Coordinates must be numeric, got ({lat}, {lng})")
    if not -90 <= lat <= 90:
        raise InvalidInput(f"Latitude {lat} outside [-90, 90]")
    if not -180 <= lng <= 180:
        raise InvalidInput(f"Longitude {lng} outside [-180, 180]")


def great_circle_distance(fix_a: Coordinates, fix_b: Coordinates) -> float:
    """
    Haversine distance in km between two fixes, rounded to 2 decimals

    Args:
        fix_a: first fix (decimal degrees)
        fix_b: second fix (decimal degrees)

    Returns:
        Distance in kilometers on a sphere of radius 6371 km

    Raises:
        InvalidInput: If a coordinate is NaN or out of range
    """
    validate_coordinates(fix_a)
    validate_coordinates(fix_b)

    lat1 = math.radians(fix_a.latitude)
    lat2 = math.radians(fix_b.latitude)
    d_lat = math.radians(fix_b.latitude - fix_a.latitude)
    d_lng = math.radians(fix_b.longitude - fix_a.longitude)

    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(d_lng / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return round_half_up(EARTH_RADIUS_KM * c)


def accumulate(fixes: Sequence[Coordinates]) -> float:
    """
    Cumulative distance along consecutive fixes

    Fewer than two fixes yield exactly 0. Legs are rounded individually
    (see great_circle_distance) and the total is rounded again.
    """
    if len(fixes) < 2:
        return 0.0

    total = 0.0
    for previous, current in zip(fixes, fixes[1:]):
        total += great_circle_distance(previous, current)

    return round_half_up(total)
