"""Search radius derived from what the map view currently shows."""
import logging
import math
from typing import Optional

from wikinearby.config.settings import get_settings
from wikinearby.core.geometry import GeometryService, get_geometry_service
from wikinearby.models.geometry import Point
from wikinearby.services.map_view import MapView

logger = logging.getLogger(__name__)


def clamp(value: float, minimum: float, maximum: float) -> float:
    return min(max(value, minimum), maximum)


class RadiusEstimator:
    """
    Converts a view's visible width into a search radius in meters.

    The width is measured along the extent's bottom edge; a zero-width
    extent yields the minimum radius.
    """

    def __init__(
        self,
        geometry: Optional[GeometryService] = None,
        min_radius_m: Optional[int] = None,
        max_radius_m: Optional[int] = None
    ):
        wiki = get_settings().wiki
        self.geometry = geometry or get_geometry_service()
        self.min_radius_m = min_radius_m if min_radius_m is not None else wiki.min_search_radius_m
        self.max_radius_m = max_radius_m if max_radius_m is not None else wiki.max_search_radius_m

    def estimate_radius(self, view: MapView) -> int:
        extent = view.extent
        spatial_ref = view.spatial_reference
        left = Point(extent.xmin, extent.ymin, spatial_ref)
        right = Point(extent.xmax, extent.ymin, spatial_ref)
        distance = self.geometry.distance(left, right)
        radius = self.radius_for_distance(distance)
        logger.debug(f"Visible width {distance:.1f}m -> search radius {radius}m")
        return radius

    def radius_for_distance(self, distance: float) -> int:
        # ceil first so a fractional width never shrinks below what is visible
        return math.floor(
            clamp(math.ceil(distance), self.min_radius_m, self.max_radius_m)
        )
