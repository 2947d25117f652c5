"""Tests for deterministic location masking."""

import logging
import math

import numpy as np
import pytest

from pawmap_geo.config import settings
from pawmap_geo.distance import haversine_meters
from pawmap_geo.masking import (
    METERS_PER_DEGREE_LAT,
    mask_location,
    mask_locations,
    mask_pet_location,
    mask_user_location,
    meters_to_longitude,
    offset_point,
)
from pawmap_geo.types import GeoPoint

SAMPLE_SIZE = 10_000


def _offset_angle(true_point: GeoPoint, masked_point: GeoPoint) -> float:
    """Bearing of the applied offset in [0, 2*pi), clockwise from north."""
    north = (masked_point.latitude - true_point.latitude) * METERS_PER_DEGREE_LAT
    east = (masked_point.longitude - true_point.longitude) * METERS_PER_DEGREE_LAT * math.cos(
        math.radians(true_point.latitude)
    )
    return math.atan2(east, north) % (2 * math.pi)


class TestDeterminism:
    """Same identifier, same output."""

    def test_repeated_calls_identical(self, paris):
        """Two calls with identical arguments should be bit-identical."""
        first = mask_location("pet-42", paris.latitude, paris.longitude, 100, 300)
        second = mask_location("pet-42", paris.latitude, paris.longitude, 100, 300)
        assert first == second

    def test_different_identifiers_differ(self, paris):
        """Different identifiers should land on different points."""
        a = mask_location("pet-42", paris.latitude, paris.longitude)
        b = mask_location("pet-43", paris.latitude, paris.longitude)
        assert a.point != b.point

    def test_empty_identifier(self, paris):
        """Empty identifier should still produce a defined masked location."""
        masked = mask_location("", paris.latitude, paris.longitude)
        assert masked == mask_location("", paris.latitude, paris.longitude)
        assert math.isfinite(masked.latitude)
        assert math.isfinite(masked.longitude)


class TestExampleScenario:
    """The reference pet-42 scenario in Paris."""

    def test_distance_within_ring(self, paris):
        """pet-42 should land between 100 and 300 meters away."""
        masked = mask_location("pet-42", 48.8566, 2.3522, 100, 300)
        distance = haversine_meters(paris, masked.point)
        assert 100 <= distance <= 300

    def test_privacy_radius_matches_offset(self, paris):
        """Disclosed radius should equal the applied offset distance."""
        masked = mask_location("pet-42", 48.8566, 2.3522, 100, 300)
        distance = haversine_meters(paris, masked.point)
        assert distance == pytest.approx(masked.privacy_radius_meters, rel=0.01)


class TestBoundedness:
    """Radius bounds and the privacy floor."""

    def test_default_ring(self, paris):
        """Default bounds should give privacy radii in [120, 300]."""
        for i in range(2000):
            masked = mask_location(str(i), paris.latitude, paris.longitude)
            assert 120 <= masked.privacy_radius_meters <= 300

    def test_custom_ring_above_floor(self, paris):
        """Bounds above the floor should be honoured exactly."""
        for i in range(2000):
            masked = mask_location(str(i), paris.latitude, paris.longitude, 150, 250)
            assert 150 <= masked.privacy_radius_meters <= 250

    def test_ring_is_spread(self, paris):
        """Radii should cover the whole ring, not cluster."""
        radii = [
            mask_location(str(i), paris.latitude, paris.longitude, 100, 300).privacy_radius_meters
            for i in range(2000)
        ]
        assert min(radii) < 130
        assert max(radii) > 290

    def test_ring_below_floor_uses_floor(self, paris):
        """A ring entirely below the floor collapses onto the floor."""
        masked = mask_location("pet-1", paris.latitude, paris.longitude, 50, 80)
        assert masked.privacy_radius_meters == 120
        assert haversine_meters(paris, masked.point) == pytest.approx(120, rel=0.01)

    def test_swapped_bounds(self, paris):
        """min > max should behave like the swapped bounds."""
        swapped = mask_location("pet-7", paris.latitude, paris.longitude, 300, 150)
        ordered = mask_location("pet-7", paris.latitude, paris.longitude, 150, 300)
        assert swapped == ordered

    def test_equal_bounds(self, paris):
        """min == max should give a constant radius."""
        for i in range(50):
            masked = mask_location(str(i), paris.latitude, paris.longitude, 200, 200)
            assert masked.privacy_radius_meters == 200

    def test_non_positive_bounds_without_floor(self, paris, monkeypatch):
        """Without a floor, non-positive bounds are raised to the 1 m minimum."""
        monkeypatch.setattr(settings, "privacy_floor_meters", 0.0)
        masked = mask_location("pet-9", paris.latitude, paris.longitude, -5, 0)
        assert masked.privacy_radius_meters == 1.0
        assert masked.point != paris

    def test_non_finite_bounds_use_defaults(self, paris, caplog):
        """NaN / inf bounds fall back to the configured defaults."""
        with caplog.at_level(logging.WARNING, logger="pawmap_geo.validation"):
            masked = mask_location("pet-3", paris.latitude, paris.longitude, math.nan, math.inf)
        assert masked == mask_location("pet-3", paris.latitude, paris.longitude, 100, 300)
        assert "Non-finite" in caplog.text


class TestNonDisclosure:
    """The true point is never returned."""

    def test_masked_point_differs(self, paris):
        """Masked point should never equal the true point."""
        for i in range(2000):
            masked = mask_location(f"user-{i}", paris.latitude, paris.longitude)
            assert masked.point != paris
            assert haversine_meters(paris, masked.point) > 0


class TestDistribution:
    """Offsets of sequential identifiers look uniform."""

    @pytest.fixture(scope="class")
    def angles(self):
        origin = GeoPoint(48.8566, 2.3522)
        return np.array(
            [
                _offset_angle(origin, mask_location(str(i), origin.latitude, origin.longitude).point)
                for i in range(SAMPLE_SIZE)
            ]
        )

    def test_angles_uniform_chi_squared(self, angles):
        """Angles should pass a chi-squared test against 16 uniform bins."""
        bins = 16
        observed, _ = np.histogram(angles, bins=bins, range=(0.0, 2 * math.pi))
        expected = SAMPLE_SIZE / bins
        chi_squared = float(((observed - expected) ** 2 / expected).sum())
        # Critical value for 15 degrees of freedom at p = 0.001
        assert chi_squared < 37.70

    def test_no_compass_bias(self, angles):
        """Mean offset direction should be close to zero."""
        assert abs(float(np.cos(angles).mean())) < 0.05
        assert abs(float(np.sin(angles).mean())) < 0.05


class TestEdgeCoordinates:
    """Poles, antimeridian and malformed coordinates."""

    def test_north_pole_stays_valid(self):
        """Masking at the pole should return a finite, in-range point."""
        masked = mask_location("pet-42", 90.0, 10.0)
        assert -90.0 <= masked.latitude <= 90.0
        assert -180.0 <= masked.longitude <= 180.0

    @pytest.mark.parametrize("latitude", [90.0, 89.9995, -90.0, -89.9995])
    def test_polar_offsets_stay_in_ring(self, latitude):
        """Near the poles the offset should still keep the full ring distance."""
        true_point = GeoPoint(latitude, 10.0)
        for i in range(200):
            masked = mask_location(str(i), latitude, 10.0, 100, 300)
            distance = haversine_meters(true_point, masked.point)
            assert distance >= 100
            assert distance == pytest.approx(masked.privacy_radius_meters, rel=0.01)

    def test_wide_ring_crossing_pole(self):
        """A ring large enough to cross the pole should keep its distance."""
        true_point = GeoPoint(89.0, 0.0)
        for i in range(50):
            masked = mask_location(str(i), 89.0, 0.0, 150_000, 200_000)
            assert -90.0 <= masked.latitude <= 90.0
            assert haversine_meters(true_point, masked.point) == pytest.approx(
                masked.privacy_radius_meters, rel=0.01
            )

    def test_antimeridian_wraps(self):
        """Offsets across the antimeridian should wrap the longitude."""
        for i in range(200):
            masked = mask_location(str(i), 0.0, 179.9999)
            assert -180.0 <= masked.longitude <= 180.0

    def test_nan_latitude_is_clamped(self, caplog):
        """NaN input should be replaced and logged, not raised."""
        with caplog.at_level(logging.WARNING, logger="pawmap_geo.validation"):
            masked = mask_location("pet-42", math.nan, 2.3522)
        assert math.isfinite(masked.latitude)
        assert "NaN" in caplog.text

    def test_out_of_range_latitude_is_clamped(self):
        """Latitude beyond 90 should mask like latitude 90."""
        assert mask_location("pet-42", 123.0, 2.0) == mask_location("pet-42", 90.0, 2.0)

    def test_offset_point_north(self):
        """An angle of zero should move the point due north."""
        moved = offset_point(GeoPoint(0.0, 0.0), 111_320.0, 0.0)
        assert moved.latitude == pytest.approx(1.0)
        assert moved.longitude == pytest.approx(0.0)

    def test_longitude_scale_clamped_at_pole(self):
        """Meters to longitude should stay finite at the pole."""
        assert math.isfinite(meters_to_longitude(100.0, 90.0))


class TestEntityHelpers:
    """Namespaced pet/user masking and batch masking."""

    def test_pet_namespace(self, paris):
        """Pets should be keyed as pet_<id>."""
        assert mask_pet_location("42", paris) == mask_location(
            "pet_42", paris.latitude, paris.longitude
        )

    def test_user_namespace(self, paris):
        """Users should be keyed as user_<id>."""
        assert mask_user_location("42", paris) == mask_location(
            "user_42", paris.latitude, paris.longitude
        )

    def test_pet_and_user_with_same_id_differ(self, paris):
        """A pet and a user sharing a raw id should get different offsets."""
        assert mask_pet_location("42", paris).point != mask_user_location("42", paris).point

    def test_batch_preserves_order(self, paris):
        """Batch masking should match individual calls in input order."""
        items = [(f"pet-{i}", paris.latitude + i * 0.01, paris.longitude) for i in range(5)]
        batch = mask_locations(items, 100, 300)
        assert batch == [mask_location(*item, 100, 300) for item in items]

    def test_to_dict(self, paris):
        """to_dict should expose flat JSON fields."""
        masked = mask_location("pet-42", paris.latitude, paris.longitude)
        data = masked.to_dict()
        assert data == {
            "latitude": masked.latitude,
            "longitude": masked.longitude,
            "privacy_radius_meters": masked.privacy_radius_meters,
        }
