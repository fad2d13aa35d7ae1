"""Stage two of a nearby lookup: thumbnails and canonical URLs for a batch of pages."""
import logging
from typing import Optional, Sequence

from wikinearby.config.settings import get_settings
from wikinearby.core.exceptions import MalformedResponseError
from wikinearby.models.nearby import ItemId, PageMetadata, RawMetadata
from wikinearby.services.wiki_transport import WikiTransport

logger = logging.getLogger(__name__)


class MetadataEnrichmentClient:
    def __init__(self, transport: WikiTransport, thumbnail_size: Optional[int] = None):
        self.transport = transport
        if thumbnail_size is None:
            thumbnail_size = get_settings().wiki.thumbnail_size
        if thumbnail_size <= 0:
            raise ValueError(f"thumbnail_size must be positive, got {thumbnail_size}")
        self.thumbnail_size = thumbnail_size

    async def enrich(self, ids: Sequence[ItemId], max_results: int) -> RawMetadata:
        """
        Fetch page images and info for all ``ids`` in one round trip.

        An empty batch still issues the request; the service answers
        without a ``query`` block and the result is an empty mapping.
        """
        response = await self.transport.get({
            "action": "query",
            "pageids": "|".join(str(i) for i in ids),
            "prop": "pageimages|info",
            "piprop": "thumbnail",
            "pithumbsize": self.thumbnail_size,
            "pilimit": max_results,
            "inprop": "url",
            "format": "json",
        })
        metadata = self._parse(response["data"])
        logger.info(f"Fetched metadata for {len(metadata)} of {len(ids)} pages")
        return metadata

    @staticmethod
    def _parse(payload: dict) -> dict[ItemId, PageMetadata]:
        query = payload.get("query")
        if query is None:
            return {}
        pages = query.get("pages", {}) if isinstance(query, dict) else None
        if not isinstance(pages, dict):
            raise MalformedResponseError("Page info response has no query.pages object")

        metadata: dict[ItemId, PageMetadata] = {}
        for key, page in pages.items():
            # missing and invalid ids come back keyed by negative placeholders
            if not isinstance(page, dict) or "missing" in page or "invalid" in page:
                continue
            try:
                page_id = int(page.get("pageid", key))
            except (TypeError, ValueError) as e:
                raise MalformedResponseError(f"Unreadable page id {key!r}") from e
            thumbnail = page.get("thumbnail") or {}
            metadata[page_id] = PageMetadata(
                thumbnail_url=thumbnail.get("source"),
                canonical_url=page.get("canonicalurl"),
            )
        return metadata
