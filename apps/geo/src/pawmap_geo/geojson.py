"""GeoJSON export of the disclosed privacy circle."""

from typing import Any

from shapely.affinity import scale, translate
from shapely.geometry import Point, Polygon

from pawmap_geo.masking import meters_to_latitude, meters_to_longitude
from pawmap_geo.types import MaskedLocation


def _circle_polygon(masked: MaskedLocation, segments: int) -> Polygon:
    # Buffer in a local metric frame, then scale meters to degrees around the
    # masked point with the same conversion the masking step uses.
    quad_segs = max(1, segments // 4)
    circle = Point(0.0, 0.0).buffer(masked.privacy_radius_meters, quad_segs)
    in_degrees = scale(
        circle,
        xfact=meters_to_longitude(1.0, masked.latitude),
        yfact=meters_to_latitude(1.0),
        origin=(0.0, 0.0),
    )
    return translate(in_degrees, xoff=masked.longitude, yoff=masked.latitude)


def privacy_circle(masked: MaskedLocation, segments: int = 32) -> dict[str, Any]:
    """Build a GeoJSON Feature for the uncertainty circle around a masked point.

    Coordinates are [longitude, latitude] pairs per GeoJSON.
    """
    polygon = _circle_polygon(masked, segments)
    return {
        "type": "Feature",
        "geometry": {
            "type": "Polygon",
            "coordinates": [[list(coord) for coord in polygon.exterior.coords]],
        },
        "properties": {
            "privacy_radius_meters": masked.privacy_radius_meters,
            "center": [masked.longitude, masked.latitude],
        },
    }
