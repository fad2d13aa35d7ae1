"""Nearby search value types: the query, both remote stages' raw output and the merged result."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from wikinearby.core.exceptions import InvalidSearchQueryError
from wikinearby.models.geometry import Point, WGS84

MIN_SEARCH_RADIUS_M = 10
MAX_SEARCH_RADIUS_M = 10000

ItemId = int


@dataclass(frozen=True)
class SearchQuery:
    """Validated input to the spatial search; ``center`` is always geographic."""
    center: Point
    radius_meters: int
    max_results: int

    def __post_init__(self):
        if self.center.spatial_reference != WGS84:
            raise InvalidSearchQueryError(
                "Search center must be geographic (WGS84)",
                details={"wkid": self.center.spatial_reference.wkid},
            )
        if not MIN_SEARCH_RADIUS_M <= self.radius_meters <= MAX_SEARCH_RADIUS_M:
            raise InvalidSearchQueryError(
                f"Search radius {self.radius_meters}m out of range "
                f"({MIN_SEARCH_RADIUS_M}-{MAX_SEARCH_RADIUS_M}m)",
                details={"radius_meters": self.radius_meters},
            )
        if self.max_results <= 0:
            raise InvalidSearchQueryError(
                "max_results must be positive",
                details={"max_results": self.max_results},
            )

    @property
    def coordinate(self) -> str:
        """``lat|lon`` pair as the geosearch endpoint expects it."""
        return f"{self.center.latitude}|{self.center.longitude}"


@dataclass(frozen=True)
class RawSpatialHit:
    id: ItemId
    title: str
    lat: float
    lon: float


@dataclass(frozen=True)
class PageMetadata:
    thumbnail_url: Optional[str] = None
    canonical_url: Optional[str] = None


EMPTY_METADATA = PageMetadata()

RawMetadata = Mapping[ItemId, PageMetadata]


def metadata_for(metadata: RawMetadata, item_id: ItemId) -> PageMetadata:
    """Entry for ``item_id``, or the empty record when the service returned none."""
    return metadata.get(item_id, EMPTY_METADATA)


@dataclass(frozen=True)
class ResultItem:
    """
    One nearby article, ready for display.

    ``url`` and ``image`` are ``None`` when the enrichment stage had nothing
    for this page (deleted, restricted, or simply no thumbnail).
    """
    id: ItemId
    title: str
    point: Point
    url: Optional[str] = None
    image: Optional[str] = None

    def attributes(self) -> dict[str, Any]:
        """Everything but the geometry, as carried by a map marker."""
        return {
            "id": self.id,
            "title": self.title,
            "url": self.url,
            "image": self.image,
        }

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for API response."""
        return {
            **self.attributes(),
            "x": self.point.x,
            "y": self.point.y,
            "wkid": self.point.spatial_reference.wkid,
        }


@dataclass(frozen=True)
class NearbySearchResult:
    query: SearchQuery
    items: list[ResultItem] = field(default_factory=list)
