# Nearby discovery pipeline and overlay services

from .wiki_transport import WikiTransport
from .map_view import MapView, InMemoryMapView, GraphicsCollection, Popup
from .radius_estimator import RadiusEstimator
from .spatial_search import SpatialSearchClient
from .metadata_enrichment import MetadataEnrichmentClient
from .result_assembler import ResultAssembler
from .overlay_manager import OverlayManager, get_marker_symbol
from .nearby_service import NearbyItemsService

__all__ = [
    "WikiTransport",
    "MapView",
    "InMemoryMapView",
    "GraphicsCollection",
    "Popup",
    "RadiusEstimator",
    "SpatialSearchClient",
    "MetadataEnrichmentClient",
    "ResultAssembler",
    "OverlayManager",
    "get_marker_symbol",
    "NearbyItemsService",
]
