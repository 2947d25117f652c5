"""Viewport navigation for the fallback map (zoom and pan)."""

import logging
import math

from pawmap_geo.types import GeoPoint, Region
from pawmap_geo.validation import clamp_latitude, wrap_longitude

logger = logging.getLogger(__name__)

MIN_ZOOM_DELTA = 0.001
MAX_ZOOM_DELTA = 100.0


def _clamp_zoom_delta(delta: float) -> float:
    return max(MIN_ZOOM_DELTA, min(MAX_ZOOM_DELTA, delta))


def zoom(region: Region, factor: float) -> Region:
    """Scale both spans by ``factor`` (< 1 zooms in, > 1 zooms out)."""
    if not math.isfinite(factor) or factor <= 0:
        logger.warning("Ignoring invalid zoom factor %s", factor)
        return region
    return Region(
        center=region.center,
        latitude_delta=_clamp_zoom_delta(region.latitude_delta * factor),
        longitude_delta=_clamp_zoom_delta(region.longitude_delta * factor),
    )


def pan(region: Region, north_fraction: float, east_fraction: float) -> Region:
    """Move the center by a fraction of the current spans.

    Negative values pan south / west.
    """
    center = GeoPoint(
        clamp_latitude(region.center.latitude + north_fraction * region.latitude_delta),
        wrap_longitude(region.center.longitude + east_fraction * region.longitude_delta),
    )
    return Region(
        center=center,
        latitude_delta=region.latitude_delta,
        longitude_delta=region.longitude_delta,
    )
