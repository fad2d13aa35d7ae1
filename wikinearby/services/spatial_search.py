"""Stage one of a nearby lookup: articles within a radius of a coordinate."""
import logging

from wikinearby.core.exceptions import MalformedResponseError
from wikinearby.models.nearby import RawSpatialHit, SearchQuery
from wikinearby.services.wiki_transport import WikiTransport

logger = logging.getLogger(__name__)


class SpatialSearchClient:
    def __init__(self, transport: WikiTransport):
        self.transport = transport

    async def search(self, query: SearchQuery) -> list[RawSpatialHit]:
        """
        Run a geosearch around ``query.center``.

        The remote service only understands geographic coordinates, so the
        query's center must already be in WGS84.
        """
        response = await self.transport.get({
            "action": "query",
            "list": "geosearch",
            "gslimit": query.max_results,
            "gsradius": query.radius_meters,
            "gscoord": query.coordinate,
            "format": "json",
        })
        hits = self._parse(response["data"])
        logger.info(
            f"Geosearch found {len(hits)} articles within {query.radius_meters}m",
            extra={"coordinate": query.coordinate, "radius_m": query.radius_meters}
        )
        return hits

    @staticmethod
    def _parse(payload: dict) -> list[RawSpatialHit]:
        geosearch = (payload.get("query") or {}).get("geosearch")
        if not isinstance(geosearch, list):
            raise MalformedResponseError("Geosearch response has no query.geosearch list")
        try:
            return [
                RawSpatialHit(
                    id=int(entry["pageid"]),
                    title=entry["title"],
                    lat=float(entry["lat"]),
                    lon=float(entry["lon"]),
                )
                for entry in geosearch
            ]
        except (KeyError, TypeError, ValueError) as e:
            raise MalformedResponseError(
                f"Unreadable geosearch entry: {e}",
                details={"entries": len(geosearch)}
            ) from e
