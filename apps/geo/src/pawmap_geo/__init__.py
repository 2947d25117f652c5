"""Location-privacy masking and map projection for PawMap."""

from pawmap_geo.distance import format_distance, haversine_meters
from pawmap_geo.geojson import privacy_circle
from pawmap_geo.masking import (
    mask_location,
    mask_locations,
    mask_pet_location,
    mask_user_location,
)
from pawmap_geo.projection import (
    is_within_viewport,
    project_many,
    project_to_screen,
    to_pixels,
    visible_mask,
)
from pawmap_geo.seeding import hash_to_unit_interval, lcg_stream
from pawmap_geo.types import GeoPoint, MaskedLocation, PixelPosition, Region, ScreenFraction
from pawmap_geo.viewport import pan, zoom

__version__ = "0.1.0"
__all__ = [
    "GeoPoint",
    "MaskedLocation",
    "PixelPosition",
    "Region",
    "ScreenFraction",
    "format_distance",
    "hash_to_unit_interval",
    "haversine_meters",
    "is_within_viewport",
    "lcg_stream",
    "mask_location",
    "mask_locations",
    "mask_pet_location",
    "mask_user_location",
    "pan",
    "privacy_circle",
    "project_many",
    "project_to_screen",
    "to_pixels",
    "visible_mask",
    "zoom",
]
