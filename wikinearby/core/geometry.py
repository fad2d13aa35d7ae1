"""
Coordinate utilities backed by pyproj.

Distances are geodesic (WGS84 ellipsoid) between points in a geographic
reference and planar in projected ones, mirroring how a map view measures
its own extent.
"""
from __future__ import annotations

import logging
import math
from functools import lru_cache

from pyproj import CRS, Geod, Transformer
from pyproj.exceptions import CRSError

from wikinearby.core.exceptions import UnsupportedSpatialReferenceError
from wikinearby.models.geometry import Point, SpatialReference, WGS84

logger = logging.getLogger(__name__)

_GEOD = Geod(ellps="WGS84")


@lru_cache(maxsize=32)
def _crs(wkid: int) -> CRS:
    try:
        return CRS.from_epsg(wkid)
    except CRSError as e:
        raise UnsupportedSpatialReferenceError(wkid) from e


@lru_cache(maxsize=64)
def _transformer(source_wkid: int, target_wkid: int) -> Transformer:
    logger.debug(f"Building transformer EPSG:{source_wkid} -> EPSG:{target_wkid}")
    return Transformer.from_crs(_crs(source_wkid), _crs(target_wkid), always_xy=True)


class GeometryService:
    """Distance and reprojection between spatial references."""

    def is_geographic(self, spatial_reference: SpatialReference) -> bool:
        return _crs(spatial_reference.wkid).is_geographic

    def project(self, point: Point, target: SpatialReference) -> Point:
        if point.spatial_reference == target:
            return point
        transformer = _transformer(point.spatial_reference.wkid, target.wkid)
        x, y = transformer.transform(point.x, point.y)
        return Point(x, y, target)

    def to_geographic(self, point: Point) -> Point:
        return self.project(point, WGS84)

    def distance(self, a: Point, b: Point) -> float:
        """Meters between ``a`` and ``b``, measured in ``a``'s spatial reference."""
        b = self.project(b, a.spatial_reference)
        if self.is_geographic(a.spatial_reference):
            _, _, dist = _GEOD.inv(a.x, a.y, b.x, b.y)
            return abs(dist)
        return math.hypot(b.x - a.x, b.y - a.y)


_service: GeometryService | None = None


def get_geometry_service() -> GeometryService:
    """Get the geometry service singleton."""
    global _service
    if _service is None:
        _service = GeometryService()
    return _service
