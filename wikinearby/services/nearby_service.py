"""
Nearby article discovery pipeline.

Stages run strictly in order: radius/center derivation, geosearch,
page metadata for the ids just found, then assembly. Concurrent calls are
independent; nothing de-duplicates or cancels an in-flight search.
"""

import logging
from typing import Optional

from wikinearby.config.settings import get_settings
from wikinearby.core.exceptions import InvalidSearchQueryError
from wikinearby.core.geometry import GeometryService, get_geometry_service
from wikinearby.models.geometry import Point, SpatialReference
from wikinearby.models.nearby import NearbySearchResult, SearchQuery
from wikinearby.services.map_view import MapView
from wikinearby.services.metadata_enrichment import MetadataEnrichmentClient
from wikinearby.services.radius_estimator import RadiusEstimator
from wikinearby.services.result_assembler import ResultAssembler
from wikinearby.services.spatial_search import SpatialSearchClient
from wikinearby.services.wiki_transport import WikiTransport

logger = logging.getLogger(__name__)


class NearbyItemsService:
    """Finds Wikipedia articles near a point or within a map view."""

    def __init__(
        self,
        transport: WikiTransport,
        geometry: Optional[GeometryService] = None,
        radius_estimator: Optional[RadiusEstimator] = None
    ):
        self.settings = get_settings().wiki
        self.transport = transport
        self.geometry = geometry or get_geometry_service()
        self.radius_estimator = radius_estimator or RadiusEstimator(self.geometry)
        self.spatial_search = SpatialSearchClient(transport)
        self.enrichment = MetadataEnrichmentClient(transport)
        self.assembler = ResultAssembler(self.geometry)

    async def find_nearby_items(
        self,
        view: Optional[MapView] = None,
        center: Optional[Point] = None,
        search_radius: Optional[int] = None,
        max_results: Optional[int] = None
    ) -> NearbySearchResult:
        """
        Search around ``view``'s extent, or around ``center`` within ``search_radius``.

        A view takes precedence: its width sets the radius, its center the
        search point and its spatial reference the results' coordinates.

        Raises:
            InvalidSearchQueryError: no view and no center/radius, or bounds violated
            TransportFailure: either remote stage failed
        """
        if view is not None:
            search_radius = self.radius_estimator.estimate_radius(view)
            center = view.extent.center
            working_sr = view.spatial_reference
        else:
            if center is None or search_radius is None:
                raise InvalidSearchQueryError(
                    "Either a view or both center and search_radius are required"
                )
            low, high = self.settings.min_search_radius_m, self.settings.max_search_radius_m
            if not low <= search_radius <= high:
                raise InvalidSearchQueryError(
                    f"Search radius {search_radius}m out of range ({low}-{high}m)",
                    details={"radius_meters": search_radius},
                )
            working_sr = SpatialReference(self.settings.working_wkid)

        query = SearchQuery(
            center=self.geometry.to_geographic(center),
            radius_meters=search_radius,
            max_results=(
                max_results if max_results is not None
                else self.settings.default_max_results
            ),
        )

        hits = await self.spatial_search.search(query)
        metadata = await self.enrichment.enrich([hit.id for hit in hits], query.max_results)
        items = self.assembler.assemble(hits, metadata, working_sr)

        logger.info(
            f"Found {len(items)} nearby articles",
            extra={"radius_m": query.radius_meters, "wkid": working_sr.wkid}
        )
        return NearbySearchResult(query=query, items=items)
