"""Nearby article endpoints."""
from fastapi import APIRouter, Depends, Query

from wikinearby.core.dependencies import get_nearby_service
from wikinearby.models.geometry import Extent, Point, SpatialReference, WGS84
from wikinearby.models.nearby import MAX_SEARCH_RADIUS_M, MIN_SEARCH_RADIUS_M
from wikinearby.schemas.base import Envelope
from wikinearby.schemas.nearby import ExtentSearchRequest, NearbyListResponse
from wikinearby.services.map_view import InMemoryMapView
from wikinearby.services.nearby_service import NearbyItemsService

router = APIRouter(prefix="/nearby", tags=["nearby"])


@router.get("", response_model=Envelope[NearbyListResponse])
async def get_nearby(
    lat: float = Query(..., ge=-90, le=90),
    lon: float = Query(..., ge=-180, le=180),
    radius: int = Query(1000, ge=MIN_SEARCH_RADIUS_M, le=MAX_SEARCH_RADIUS_M),
    limit: int = Query(10, ge=1, le=500),
    service: NearbyItemsService = Depends(get_nearby_service),
):
    """Articles within ``radius`` meters of a geographic point."""
    result = await service.find_nearby_items(
        center=Point(lon, lat, WGS84),
        search_radius=radius,
        max_results=limit,
    )
    return Envelope(status="ok", data=NearbyListResponse.from_result(result))


@router.post("/extent", response_model=Envelope[NearbyListResponse])
async def get_nearby_in_extent(
    request: ExtentSearchRequest,
    service: NearbyItemsService = Depends(get_nearby_service),
):
    """
    Articles around the center of a visible map extent.

    The radius follows the extent's width; results come back in the
    extent's spatial reference.
    """
    view = InMemoryMapView(Extent(
        request.xmin, request.ymin, request.xmax, request.ymax,
        SpatialReference(request.wkid),
    ))
    result = await service.find_nearby_items(view=view, max_results=request.limit)
    return Envelope(status="ok", data=NearbyListResponse.from_result(result))
