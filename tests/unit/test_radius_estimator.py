"""
Unit tests for deriving a search radius from a map view's extent
"""
import pytest

from wikinearby.models.geometry import Extent, WEB_MERCATOR, WGS84
from wikinearby.services.map_view import InMemoryMapView
from wikinearby.services.radius_estimator import RadiusEstimator, clamp


class FixedDistanceGeometry:
    """Geometry stand-in that reports a preset distance."""

    def __init__(self, distance):
        self._distance = distance
        self.calls = []

    def distance(self, a, b):
        self.calls.append((a, b))
        return self._distance


def _view(xmin=0.0, ymin=0.0, xmax=0.0, ymax=0.0, sr=WEB_MERCATOR):
    return InMemoryMapView(Extent(xmin, ymin, xmax, ymax, sr))


@pytest.mark.parametrize("sr", [WEB_MERCATOR, WGS84])
def test_degenerate_extent_yields_min_radius(sr):
    """A zero-area extent clamps to the minimum radius"""
    estimator = RadiusEstimator(min_radius_m=10, max_radius_m=10000)
    assert estimator.estimate_radius(_view(1.0, 1.0, 1.0, 1.0, sr)) == 10


def test_measures_along_bottom_edge():
    """Distance is taken between (xmin, ymin) and (xmax, ymin) in the view's reference"""
    geometry = FixedDistanceGeometry(500.0)
    estimator = RadiusEstimator(geometry, 10, 10000)
    estimator.estimate_radius(_view(100.0, 200.0, 700.0, 900.0))

    a, b = geometry.calls[0]
    assert (a.x, a.y) == (100.0, 200.0)
    assert (b.x, b.y) == (700.0, 200.0)
    assert a.spatial_reference == b.spatial_reference == WEB_MERCATOR


@pytest.mark.parametrize("distance,expected", [
    (0.0, 10),
    (9.99, 10),
    (10.2, 11),
    (1234.0, 1234),
    (9999.5, 10000),
    (25000.0, 10000),
])
def test_rounding_and_clamping(distance, expected):
    estimator = RadiusEstimator(FixedDistanceGeometry(distance), 10, 10000)
    radius = estimator.estimate_radius(_view())
    assert radius == expected
    assert isinstance(radius, int)


def test_radius_is_bounded_and_monotonic():
    """Output stays within bounds and never decreases as the distance grows"""
    estimator = RadiusEstimator(FixedDistanceGeometry(0), 10, 10000)
    distances = [0, 0.5, 5, 9.2, 10, 47.1, 999.9, 5000, 9999.01, 10000, 10001, 1e7]
    radii = [estimator.radius_for_distance(d) for d in distances]

    assert all(10 <= r <= 10000 for r in radii)
    assert radii == sorted(radii)


def test_planar_distance_in_web_mercator():
    estimator = RadiusEstimator(min_radius_m=10, max_radius_m=10000)
    assert estimator.estimate_radius(_view(0.0, 0.0, 2000.0, 1000.0)) == 2000


def test_geodesic_distance_in_geographic_view():
    """0.01 degrees of longitude on the equator is about 1113.2m"""
    estimator = RadiusEstimator(min_radius_m=10, max_radius_m=10000)
    assert estimator.estimate_radius(_view(0.0, 0.0, 0.01, 0.01, WGS84)) == 1114


def test_defaults_come_from_settings():
    estimator = RadiusEstimator()
    assert estimator.min_radius_m == 10
    assert estimator.max_radius_m == 10000


def test_clamp():
    assert clamp(5, 10, 20) == 10
    assert clamp(15, 10, 20) == 15
    assert clamp(25, 10, 20) == 20
