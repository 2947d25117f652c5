"""Input sanitizing for geographic values.

Map rendering must never fail because one record carries a bad
coordinate, so malformed values are clamped to the nearest valid value
and reported through the module logger instead of raising.
"""

import logging
import math

import numpy as np
from numpy.typing import NDArray

from pawmap_geo.types import GeoPoint

logger = logging.getLogger(__name__)

MAX_LATITUDE = 90.0
MAX_LONGITUDE = 180.0

# Smallest offset ever applied, whatever bounds the caller passes
MIN_OFFSET_METERS = 1.0


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def clamp_latitude(latitude: float) -> float:
    """Clamp a latitude into [-90, 90]. NaN becomes 0.0."""
    if math.isnan(latitude):
        logger.warning("Latitude is NaN, using 0.0")
        return 0.0
    if not -MAX_LATITUDE <= latitude <= MAX_LATITUDE:
        clamped = _clamp(latitude, -MAX_LATITUDE, MAX_LATITUDE)
        logger.warning("Latitude %s out of range, clamped to %s", latitude, clamped)
        return clamped
    return latitude


def clamp_longitude(longitude: float) -> float:
    """Clamp a longitude into [-180, 180]. NaN becomes 0.0."""
    if math.isnan(longitude):
        logger.warning("Longitude is NaN, using 0.0")
        return 0.0
    if not -MAX_LONGITUDE <= longitude <= MAX_LONGITUDE:
        clamped = _clamp(longitude, -MAX_LONGITUDE, MAX_LONGITUDE)
        logger.warning("Longitude %s out of range, clamped to %s", longitude, clamped)
        return clamped
    return longitude


def wrap_longitude(longitude: float) -> float:
    """Wrap a finite longitude into [-180, 180].

    Used for computed longitudes (offsets, pans) that legitimately cross
    the antimeridian, as opposed to malformed input.
    """
    if -MAX_LONGITUDE <= longitude <= MAX_LONGITUDE:
        return longitude
    return (longitude + 180.0) % 360.0 - 180.0


def sanitize_point(latitude: float, longitude: float) -> GeoPoint:
    """Return a valid GeoPoint for possibly malformed coordinates."""
    return GeoPoint(clamp_latitude(latitude), clamp_longitude(longitude))


def sanitize_radius_bounds(
    min_radius: float,
    max_radius: float,
    default_min: float,
    default_max: float,
    floor: float = 0.0,
) -> tuple[float, float]:
    """Turn caller-supplied ring bounds into a usable (low, high) pair.

    Args:
        min_radius, max_radius: Requested ring bounds in meters
        default_min, default_max: Replacements for non-finite bounds
        floor: Lowest allowed inner radius (privacy floor)

    Returns:
        (low, high) with MIN_OFFSET_METERS <= low <= high
    """
    if not math.isfinite(min_radius):
        logger.warning("Non-finite min radius %s, using default %s", min_radius, default_min)
        min_radius = default_min
    if not math.isfinite(max_radius):
        logger.warning("Non-finite max radius %s, using default %s", max_radius, default_max)
        max_radius = default_max

    if min_radius <= 0 or max_radius <= 0:
        logger.warning(
            "Non-positive radius bounds (%s, %s), raising to %s m",
            min_radius,
            max_radius,
            MIN_OFFSET_METERS,
        )

    if min_radius > max_radius:
        logger.warning("Min radius %s exceeds max radius %s, swapping", min_radius, max_radius)
        min_radius, max_radius = max_radius, min_radius

    low = max(min_radius, floor, MIN_OFFSET_METERS)
    high = max(max_radius, low)
    return low, high


def sanitize_delta(delta: float, minimum: float) -> float:
    """Replace a degenerate viewport span with a minimum epsilon."""
    if not math.isfinite(delta) or delta <= 0:
        logger.warning("Degenerate viewport delta %s, using %s", delta, minimum)
        return minimum
    return max(delta, minimum)


def sanitize_coordinate_arrays(
    latitudes: NDArray[np.float64],
    longitudes: NDArray[np.float64],
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Vectorised sanitize_point: NaN becomes 0.0, the rest is clamped."""
    clean_lats = np.clip(np.nan_to_num(latitudes, nan=0.0), -MAX_LATITUDE, MAX_LATITUDE)
    clean_lngs = np.clip(np.nan_to_num(longitudes, nan=0.0), -MAX_LONGITUDE, MAX_LONGITUDE)
    adjusted = int(
        np.count_nonzero(clean_lats != latitudes) + np.count_nonzero(clean_lngs != longitudes)
    )
    if adjusted:
        logger.warning("Clamped %d malformed coordinates", adjusted)
    return clean_lats, clean_lngs
