"""Deterministic location masking.

Each entity is displaced by a fixed offset derived from its identifier, so
it always shows at the same apparent position without any stored state.
The offset lies in a ring between the configured min and max radius around
the true point.

This is a UX obfuscation, not a security boundary: anyone who knows the
algorithm and an identifier can recompute the exact offset and recover the
true location.
"""

import logging
import math
from collections.abc import Iterable

from pawmap_geo.config import settings
from pawmap_geo.seeding import hash_to_unit_interval, lcg_stream
from pawmap_geo.types import GeoPoint, MaskedLocation
from pawmap_geo.validation import (
    MAX_LATITUDE,
    sanitize_point,
    sanitize_radius_bounds,
    wrap_longitude,
)

logger = logging.getLogger(__name__)

METERS_PER_DEGREE_LAT = 111_320.0

# Keeps the longitude scale finite near the poles
MIN_COS_LATITUDE = 1e-6

# Rings reaching within this many degrees of a pole are offset on the sphere
POLAR_CAP_DEGREES = 1.0

EARTH_RADIUS_METERS = METERS_PER_DEGREE_LAT * 180.0 / math.pi


def meters_to_latitude(meters: float) -> float:
    """Convert a north-south distance in meters to degrees of latitude."""
    return meters / METERS_PER_DEGREE_LAT


def meters_to_longitude(meters: float, latitude: float) -> float:
    """Convert an east-west distance in meters to degrees of longitude at a latitude."""
    cos_lat = max(math.cos(math.radians(latitude)), MIN_COS_LATITUDE)
    return meters / (METERS_PER_DEGREE_LAT * cos_lat)


def _great_circle_destination(point: GeoPoint, radius: float, angle: float) -> GeoPoint:
    """Destination after travelling ``radius`` meters on bearing ``angle``.

    Uses the sphere implied by METERS_PER_DEGREE_LAT so it agrees with the
    planar conversion away from the poles.
    """
    distance = radius / EARTH_RADIUS_METERS
    lat1 = math.radians(point.latitude)
    lng1 = math.radians(point.longitude)

    sin_lat2 = math.sin(lat1) * math.cos(distance) + math.cos(lat1) * math.sin(distance) * math.cos(
        angle
    )
    lat2 = math.asin(max(-1.0, min(1.0, sin_lat2)))
    lng2 = lng1 + math.atan2(
        math.sin(angle) * math.sin(distance) * math.cos(lat1),
        math.cos(distance) - math.sin(lat1) * sin_lat2,
    )
    return GeoPoint(math.degrees(lat2), wrap_longitude(math.degrees(lng2)))


def offset_point(point: GeoPoint, radius: float, angle: float) -> GeoPoint:
    """Move a point by a polar offset (meters, radians clockwise from north).

    Uses the small-angle conversion, except where the ring reaches into the
    polar cap: there longitude degrees stop measuring distance, so the
    great-circle destination is used instead. The result is always a valid
    GeoPoint at ``radius`` meters from ``point``.
    """
    if abs(point.latitude) + meters_to_latitude(radius) >= MAX_LATITUDE - POLAR_CAP_DEGREES:
        return _great_circle_destination(point, radius, angle)

    d_lat = meters_to_latitude(radius * math.cos(angle))
    d_lng = meters_to_longitude(radius * math.sin(angle), point.latitude)
    return GeoPoint(point.latitude + d_lat, wrap_longitude(point.longitude + d_lng))


def mask_location(
    identifier: object,
    true_latitude: float,
    true_longitude: float,
    min_radius_meters: float | None = None,
    max_radius_meters: float | None = None,
) -> MaskedLocation:
    """Mask a true location with an offset keyed by ``identifier``.

    Args:
        identifier: Entity id; the only entropy source
        true_latitude, true_longitude: Exact location in degrees
        min_radius_meters: Inner ring radius (defaults from settings)
        max_radius_meters: Outer ring radius (defaults from settings)

    Returns:
        The masked point and its privacy radius. The privacy radius equals
        the applied offset, which is never below ``privacy_floor_meters``.
    """
    if min_radius_meters is None:
        min_radius_meters = settings.default_min_radius_meters
    if max_radius_meters is None:
        max_radius_meters = settings.default_max_radius_meters

    low, high = sanitize_radius_bounds(
        min_radius_meters,
        max_radius_meters,
        default_min=settings.default_min_radius_meters,
        default_max=settings.default_max_radius_meters,
        floor=settings.privacy_floor_meters,
    )
    true_point = sanitize_point(true_latitude, true_longitude)

    stream = lcg_stream(hash_to_unit_interval(identifier))
    radius = low + next(stream) * (high - low)
    angle = next(stream) * 2 * math.pi

    return MaskedLocation(
        point=offset_point(true_point, radius, angle),
        privacy_radius_meters=radius,
    )


def mask_pet_location(
    pet_id: object,
    point: GeoPoint,
    min_radius_meters: float | None = None,
    max_radius_meters: float | None = None,
) -> MaskedLocation:
    """Mask a pet's location. Pets are keyed as ``pet_<id>``."""
    return mask_location(
        f"pet_{pet_id}", point.latitude, point.longitude, min_radius_meters, max_radius_meters
    )


def mask_user_location(
    user_id: object,
    point: GeoPoint,
    min_radius_meters: float | None = None,
    max_radius_meters: float | None = None,
) -> MaskedLocation:
    """Mask a user's location. Users are keyed as ``user_<id>``."""
    return mask_location(
        f"user_{user_id}", point.latitude, point.longitude, min_radius_meters, max_radius_meters
    )


def mask_locations(
    items: Iterable[tuple[object, float, float]],
    min_radius_meters: float | None = None,
    max_radius_meters: float | None = None,
) -> list[MaskedLocation]:
    """Mask many ``(identifier, latitude, longitude)`` records, keeping input order."""
    masked = [
        mask_location(identifier, latitude, longitude, min_radius_meters, max_radius_meters)
        for identifier, latitude, longitude in items
    ]
    logger.debug("Masked %d locations", len(masked))
    return masked
