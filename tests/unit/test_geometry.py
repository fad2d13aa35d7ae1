"""
Unit tests for spatial references, distances and reprojection
"""
import pytest

from wikinearby.core.exceptions import UnsupportedSpatialReferenceError
from wikinearby.core.geometry import GeometryService, get_geometry_service
from wikinearby.models.geometry import Extent, Point, SpatialReference, WEB_MERCATOR, WGS84


@pytest.fixture
def geometry():
    return GeometryService()


def test_esri_web_mercator_alias():
    assert SpatialReference(102100) == WEB_MERCATOR
    assert SpatialReference(102100).epsg == "EPSG:3857"


def test_extent_center_and_recentering():
    extent = Extent(0.0, 0.0, 100.0, 50.0, WEB_MERCATOR)
    assert extent.center == Point(50.0, 25.0, WEB_MERCATOR)

    moved = extent.centered_at(Point(1000.0, 1000.0, WEB_MERCATOR))
    assert (moved.xmin, moved.ymin, moved.xmax, moved.ymax) == (950.0, 975.0, 1050.0, 1025.0)


def test_is_geographic(geometry):
    assert geometry.is_geographic(WGS84)
    assert not geometry.is_geographic(WEB_MERCATOR)


def test_project_origin(geometry):
    projected = geometry.project(Point(0.0, 0.0, WGS84), WEB_MERCATOR)
    assert projected.spatial_reference == WEB_MERCATOR
    assert projected.x == pytest.approx(0.0, abs=1e-6)
    assert projected.y == pytest.approx(0.0, abs=1e-6)


def test_project_antimeridian(geometry):
    projected = geometry.project(Point(180.0, 0.0, WGS84), WEB_MERCATOR)
    assert projected.x == pytest.approx(20037508.34, abs=0.01)


def test_to_geographic(geometry):
    point = geometry.to_geographic(Point(255422.57, 6250000.0, WEB_MERCATOR))
    assert point.spatial_reference == WGS84
    assert point.longitude == pytest.approx(2.2945, abs=1e-4)
    assert 48.8 < point.latitude < 48.9


def test_project_same_reference_is_identity(geometry):
    point = Point(1.0, 2.0, WEB_MERCATOR)
    assert geometry.project(point, WEB_MERCATOR) is point


def test_planar_distance(geometry):
    a = Point(0.0, 0.0, WEB_MERCATOR)
    b = Point(300.0, 400.0, WEB_MERCATOR)
    assert geometry.distance(a, b) == pytest.approx(500.0)


def test_geodesic_distance_one_degree_of_latitude(geometry):
    a = Point(0.0, 0.0, WGS84)
    b = Point(0.0, 1.0, WGS84)
    assert geometry.distance(a, b) == pytest.approx(110574.4, abs=1.0)


def test_distance_across_references(geometry):
    a = Point(0.0, 0.0, WEB_MERCATOR)
    b = Point(0.0, 0.0, WGS84)
    assert geometry.distance(a, b) == pytest.approx(0.0, abs=1e-6)


def test_unknown_wkid(geometry):
    with pytest.raises(UnsupportedSpatialReferenceError):
        geometry.project(Point(0.0, 0.0, WGS84), SpatialReference(999999))


def test_singleton():
    assert get_geometry_service() is get_geometry_service()
