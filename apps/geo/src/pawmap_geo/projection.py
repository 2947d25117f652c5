"""Geo-to-screen projection for custom marker overlays.

Used where the native map view exposes no pin layer (the web fallback
map): markers are positioned absolutely over the map from their
projected screen fraction.
"""

import logging

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pawmap_geo.config import settings
from pawmap_geo.types import PixelPosition, Region, ScreenFraction
from pawmap_geo.validation import sanitize_coordinate_arrays, sanitize_delta, sanitize_point

logger = logging.getLogger(__name__)


def _spans(region: Region) -> tuple[float, float]:
    minimum = settings.min_viewport_delta
    return (
        sanitize_delta(region.latitude_delta, minimum),
        sanitize_delta(region.longitude_delta, minimum),
    )


def project_to_screen(
    region: Region,
    point_latitude: float,
    point_longitude: float,
) -> ScreenFraction:
    """Project a point to a fraction of the viewport.

    Screen y grows downward while latitude grows northward, hence the
    inverted y term. Off-screen points are returned as-is (outside [0, 1]);
    culling is left to the caller.
    """
    latitude_delta, longitude_delta = _spans(region)
    center = sanitize_point(region.center.latitude, region.center.longitude)
    point = sanitize_point(point_latitude, point_longitude)
    x = (point.longitude - center.longitude) / longitude_delta + 0.5
    y = (center.latitude - point.latitude) / latitude_delta + 0.5
    return ScreenFraction(x, y)


def _clamp_axis(value: float, size: float, inset: float) -> float:
    if size <= 2 * inset:
        return size / 2
    return max(inset, min(size - inset, value))


def to_pixels(
    fraction: ScreenFraction,
    width: float,
    height: float,
    inset: float | None = None,
) -> PixelPosition:
    """Convert a screen fraction to pixels, clamped inside the viewport.

    Markers beyond the edge are pinned ``inset`` pixels inside it so they
    stay visible and tappable.
    """
    if inset is None:
        inset = settings.marker_inset_px
    return PixelPosition(
        left=_clamp_axis(fraction.x * width, width, inset),
        top=_clamp_axis(fraction.y * height, height, inset),
    )


def is_within_viewport(fraction: ScreenFraction, margin: float = 0.0) -> bool:
    """Whether a projected point falls inside the viewport grown by ``margin``."""
    return (
        -margin <= fraction.x <= 1.0 + margin
        and -margin <= fraction.y <= 1.0 + margin
    )


def project_many(
    region: Region,
    latitudes: ArrayLike,
    longitudes: ArrayLike,
) -> NDArray[np.float64]:
    """Vectorised project_to_screen.

    Args:
        region: Viewport region
        latitudes, longitudes: Same-length sequences of degrees

    Returns:
        (N, 2) array of (x, y) screen fractions
    """
    lats = np.asarray(latitudes, dtype=np.float64)
    lngs = np.asarray(longitudes, dtype=np.float64)
    if lats.shape != lngs.shape:
        raise ValueError(
            f"latitudes and longitudes differ in shape: {lats.shape} vs {lngs.shape}"
        )

    latitude_delta, longitude_delta = _spans(region)
    center = sanitize_point(region.center.latitude, region.center.longitude)
    lats, lngs = sanitize_coordinate_arrays(lats.ravel(), lngs.ravel())
    result = np.empty((lats.size, 2), dtype=np.float64)
    result[:, 0] = (lngs - center.longitude) / longitude_delta + 0.5
    result[:, 1] = (center.latitude - lats) / latitude_delta + 0.5
    return result


def visible_mask(fractions: NDArray[np.float64], margin: float = 0.0) -> NDArray[np.bool_]:
    """Boolean mask of rows from project_many that fall inside the viewport."""
    fractions = np.asarray(fractions, dtype=np.float64).reshape(-1, 2)
    low = -margin
    high = 1.0 + margin
    inside = (fractions >= low) & (fractions <= high)
    mask = inside.all(axis=1)
    logger.debug("%d of %d markers visible", int(mask.sum()), len(mask))
    return mask
