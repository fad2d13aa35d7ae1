from .geometry import SpatialReference, Point, Extent, WGS84, WEB_MERCATOR
from .nearby import (
    ItemId,
    SearchQuery,
    RawSpatialHit,
    PageMetadata,
    RawMetadata,
    EMPTY_METADATA,
    ResultItem,
    NearbySearchResult,
    metadata_for,
    MIN_SEARCH_RADIUS_M,
    MAX_SEARCH_RADIUS_M,
)
from .overlay import MarkerSymbol, PopupTemplate, MarkerRecord

__all__ = [
    "SpatialReference",
    "Point",
    "Extent",
    "WGS84",
    "WEB_MERCATOR",
    "ItemId",
    "SearchQuery",
    "RawSpatialHit",
    "PageMetadata",
    "RawMetadata",
    "EMPTY_METADATA",
    "ResultItem",
    "NearbySearchResult",
    "metadata_for",
    "MIN_SEARCH_RADIUS_M",
    "MAX_SEARCH_RADIUS_M",
    "MarkerSymbol",
    "PopupTemplate",
    "MarkerRecord",
]
