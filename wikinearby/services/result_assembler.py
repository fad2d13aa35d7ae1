"""Merges geosearch hits with page metadata into display-ready results."""
from typing import Optional, Sequence

from wikinearby.core.geometry import GeometryService, get_geometry_service
from wikinearby.models.geometry import Point, SpatialReference, WGS84
from wikinearby.models.nearby import RawMetadata, RawSpatialHit, ResultItem, metadata_for


class ResultAssembler:
    """
    Pure, synchronous merge step. Output order and length follow the
    spatial hits; a hit without metadata gets ``url=None`` and ``image=None``.
    """

    def __init__(self, geometry: Optional[GeometryService] = None):
        self.geometry = geometry or get_geometry_service()

    def assemble(
        self,
        hits: Sequence[RawSpatialHit],
        metadata: RawMetadata,
        spatial_reference: SpatialReference
    ) -> list[ResultItem]:
        return [self._to_result_item(hit, metadata, spatial_reference) for hit in hits]

    def _to_result_item(
        self,
        hit: RawSpatialHit,
        metadata: RawMetadata,
        spatial_reference: SpatialReference
    ) -> ResultItem:
        page = metadata_for(metadata, hit.id)
        return ResultItem(
            id=hit.id,
            title=hit.title,
            point=self.geometry.project(Point(hit.lon, hit.lat, WGS84), spatial_reference),
            url=page.canonical_url,
            image=page.thumbnail_url or None,
        )
