"""
Unit tests for search query invariants and metadata lookups
"""
import pytest

from wikinearby.core.exceptions import InvalidSearchQueryError
from wikinearby.models.geometry import Point, WEB_MERCATOR, WGS84
from wikinearby.models.nearby import (
    EMPTY_METADATA,
    MAX_SEARCH_RADIUS_M,
    MIN_SEARCH_RADIUS_M,
    PageMetadata,
    SearchQuery,
    metadata_for,
)

CENTER = Point(2.2945, 48.8584, WGS84)


class TestSearchQuery:
    @pytest.mark.parametrize("radius", [MIN_SEARCH_RADIUS_M, 500, MAX_SEARCH_RADIUS_M])
    def test_radius_bounds_inclusive(self, radius):
        assert SearchQuery(CENTER, radius, 10).radius_meters == radius

    @pytest.mark.parametrize("radius", [0, 9, 10001])
    def test_radius_out_of_range(self, radius):
        with pytest.raises(InvalidSearchQueryError, match="out of range"):
            SearchQuery(CENTER, radius, 10)

    def test_max_results_positive(self):
        with pytest.raises(InvalidSearchQueryError, match="max_results"):
            SearchQuery(CENTER, 100, 0)

    def test_center_must_be_geographic(self):
        with pytest.raises(InvalidSearchQueryError, match="geographic"):
            SearchQuery(Point(255422.0, 6250168.0, WEB_MERCATOR), 100, 10)

    def test_coordinate_is_lat_then_lon(self):
        assert SearchQuery(CENTER, 100, 10).coordinate == "48.8584|2.2945"

    def test_invalid_query_maps_to_bad_request(self):
        with pytest.raises(InvalidSearchQueryError) as exc_info:
            SearchQuery(CENTER, 5, 10)
        assert exc_info.value.status_code == 400
        assert exc_info.value.details == {"radius_meters": 5}


def test_metadata_for_present_entry():
    entry = PageMetadata(thumbnail_url="t.jpg")
    assert metadata_for({1: entry}, 1) is entry


def test_metadata_for_missing_entry():
    assert metadata_for({}, 1) is EMPTY_METADATA
    assert EMPTY_METADATA.thumbnail_url is None
    assert EMPTY_METADATA.canonical_url is None
