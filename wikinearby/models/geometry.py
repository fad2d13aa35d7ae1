"""Geometry value types shared by the map view, geometry service and results."""
from __future__ import annotations

from dataclasses import dataclass

# Esri well-known ids that denote Web Mercator
_WKID_ALIASES = {102100: 3857, 102113: 3857, 900913: 3857}


@dataclass(frozen=True)
class SpatialReference:
    """A coordinate reference system identified by its well-known id."""
    wkid: int

    def __post_init__(self):
        object.__setattr__(self, "wkid", _WKID_ALIASES.get(self.wkid, self.wkid))

    @property
    def epsg(self) -> str:
        return f"EPSG:{self.wkid}"


WGS84 = SpatialReference(4326)
WEB_MERCATOR = SpatialReference(3857)


@dataclass(frozen=True)
class Point:
    """A point in some spatial reference; geographic points store lon as x, lat as y."""
    x: float
    y: float
    spatial_reference: SpatialReference = WGS84

    @property
    def longitude(self) -> float:
        return self.x

    @property
    def latitude(self) -> float:
        return self.y


@dataclass(frozen=True)
class Extent:
    """Axis-aligned visible area of a map view."""
    xmin: float
    ymin: float
    xmax: float
    ymax: float
    spatial_reference: SpatialReference = WEB_MERCATOR

    @property
    def width(self) -> float:
        return self.xmax - self.xmin

    @property
    def height(self) -> float:
        return self.ymax - self.ymin

    @property
    def center(self) -> Point:
        return Point(
            (self.xmin + self.xmax) / 2,
            (self.ymin + self.ymax) / 2,
            self.spatial_reference,
        )

    def centered_at(self, point: Point) -> Extent:
        """Same-size extent moved so that ``point`` is its center."""
        half_w, half_h = self.width / 2, self.height / 2
        return Extent(
            point.x - half_w, point.y - half_h,
            point.x + half_w, point.y + half_h,
            self.spatial_reference,
        )
