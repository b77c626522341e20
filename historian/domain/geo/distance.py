"""Great-circle distance between coordinates."""

import math

from historian.domain.geo.coordinate import Coordinate

EARTH_RADIUS_METERS = 6378137.0  # WGS84 equatorial radius


def degrees_to_radians(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return degrees * math.pi / 180


def get_distance(point1: Coordinate, point2: Coordinate) -> float:
    """Distance in meters between two coordinates using the haversine formula.

    Args:
        point1: First coordinate.
        point2: Second coordinate.

    Returns:
        The great-circle distance in meters on a sphere of radius
        EARTH_RADIUS_METERS.
    """
    phi_1 = degrees_to_radians(point1.latitude)
    phi_2 = degrees_to_radians(point2.latitude)
    delta_phi = degrees_to_radians(point1.latitude - point2.latitude)
    delta_lambda = degrees_to_radians(point1.longitude - point2.longitude)

    a = (
        math.sin(delta_phi / 2) ** 2
        + math.cos(phi_1) * math.cos(phi_2) * math.sin(delta_lambda / 2) ** 2
    )
    return 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a)) * EARTH_RADIUS_METERS
