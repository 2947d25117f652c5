"""Type definitions for location masking and projection."""

from dataclasses import dataclass
from typing import Any, NamedTuple


class GeoPoint(NamedTuple):
    """A WGS84 coordinate in degrees."""

    latitude: float
    longitude: float


class ScreenFraction(NamedTuple):
    """Position relative to a viewport.

    (0, 0) is the top-left corner and (1, 1) the bottom-right. Values
    outside [0, 1] are off-screen.
    """

    x: float
    y: float


class PixelPosition(NamedTuple):
    """A marker position in viewport pixels."""

    left: float
    top: float


@dataclass(frozen=True)
class MaskedLocation:
    """An obfuscated location and the uncertainty radius to disclose."""

    point: GeoPoint
    privacy_radius_meters: float

    @property
    def latitude(self) -> float:
        return self.point.latitude

    @property
    def longitude(self) -> float:
        return self.point.longitude

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        return {
            "latitude": self.point.latitude,
            "longitude": self.point.longitude,
            "privacy_radius_meters": self.privacy_radius_meters,
        }


@dataclass(frozen=True)
class Region:
    """A map viewport: a center and its angular spans in degrees."""

    center: GeoPoint
    latitude_delta: float
    longitude_delta: float

    @classmethod
    def from_center(
        cls,
        center_latitude: float,
        center_longitude: float,
        latitude_delta: float,
        longitude_delta: float,
    ) -> "Region":
        """Create a region from flat center coordinates."""
        return cls(
            center=GeoPoint(center_latitude, center_longitude),
            latitude_delta=latitude_delta,
            longitude_delta=longitude_delta,
        )

    @classmethod
    def for_viewport(
        cls,
        center: GeoPoint,
        latitude_delta: float,
        width: float,
        height: float,
    ) -> "Region":
        """Create a region whose longitude span follows the viewport aspect ratio."""
        aspect_ratio = width / height if height > 0 else 1.0
        return cls(
            center=center,
            latitude_delta=latitude_delta,
            longitude_delta=latitude_delta * aspect_ratio,
        )
