"""Tests for privacy circle GeoJSON export."""

import pytest

from pawmap_geo.distance import haversine_meters
from pawmap_geo.geojson import privacy_circle
from pawmap_geo.masking import mask_location
from pawmap_geo.types import GeoPoint


@pytest.fixture
def masked(paris):
    return mask_location("pet-42", paris.latitude, paris.longitude)


class TestPrivacyCircle:
    """Tests for privacy_circle."""

    def test_feature_structure(self, masked):
        """Result should be a GeoJSON Polygon feature."""
        feature = privacy_circle(masked)
        assert feature["type"] == "Feature"
        assert feature["geometry"]["type"] == "Polygon"
        assert feature["properties"]["privacy_radius_meters"] == masked.privacy_radius_meters
        assert feature["properties"]["center"] == [masked.longitude, masked.latitude]

    def test_ring_is_closed(self, masked):
        """Polygon exterior ring should start and end on the same vertex."""
        ring = privacy_circle(masked)["geometry"]["coordinates"][0]
        assert ring[0] == ring[-1]
        assert len(ring) == 33  # 32 segments + closing vertex

    def test_vertices_at_privacy_radius(self, masked):
        """Every vertex should sit about privacy_radius_meters from the center."""
        ring = privacy_circle(masked)["geometry"]["coordinates"][0]
        for lng, lat in ring:
            distance = haversine_meters(masked.point, GeoPoint(lat, lng))
            assert distance == pytest.approx(masked.privacy_radius_meters, rel=0.01)

    def test_segment_count(self, masked):
        """Segment count should control vertex density."""
        ring = privacy_circle(masked, segments=8)["geometry"]["coordinates"][0]
        assert len(ring) == 9
