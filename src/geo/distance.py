"""
Distance Calculator
-----------------
Great-circle distance between two coordinates using the spherical law of cosines.
The result is scaled with the statute-mile constants (60 * 1.1515 miles per degree,
1609.344 meters per mile), so it is an approximation, not WGS84 geodesy.
"""
import math

from src.models.geo import GeoCoordinate

MILES_PER_DEGREE = 60 * 1.1515
METERS_PER_MILE = 1609.344


def deg2rad(deg: float) -> float:
    return deg * math.pi / 180.0


def rad2deg(rad: float) -> float:
    return rad / math.pi * 180.0


def _arc_degrees(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    if lat1 == lat2 and lon1 == lon2:
        # sin^2 + cos^2 can land one ulp below 1.0, which acos turns into a few centimeters
        return 0.0
    theta = lon1 - lon2
    cos_term = (
        math.sin(deg2rad(lat1)) * math.sin(deg2rad(lat2))
        + math.cos(deg2rad(lat1)) * math.cos(deg2rad(lat2)) * math.cos(deg2rad(theta))
    )
    # Rounding can push the term just past +/-1 for identical or antipodal points
    cos_term = max(-1.0, min(1.0, cos_term))
    return rad2deg(math.acos(cos_term))


def distance_meters(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Distance in meters between (lat1, lon1) and (lat2, lon2), in degrees."""
    return _arc_degrees(lat1, lon1, lat2, lon2) * MILES_PER_DEGREE * METERS_PER_MILE


def distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Distance in kilometers between (lat1, lon1) and (lat2, lon2), in degrees."""
    return _arc_degrees(lat1, lon1, lat2, lon2) * MILES_PER_DEGREE * METERS_PER_MILE / 1000


def distance_between(origin: GeoCoordinate, destination: GeoCoordinate, unit: str = "km") -> float:
    if unit == "km":
        return distance_km(origin.latitude, origin.longitude, destination.latitude, destination.longitude)
    if unit == "m":
        return distance_meters(origin.latitude, origin.longitude, destination.latitude, destination.longitude)
    raise ValueError(f"Unsupported distance unit: {unit}")
