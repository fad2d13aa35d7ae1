"""
Wikipedia query transport - issues GET requests against the MediaWiki API.
"""

import logging
from typing import Any, Optional

import httpx

from wikinearby.config.settings import get_settings
from wikinearby.core.exceptions import (
    MalformedResponseError,
    RemoteServiceError,
    TransportFailure,
)

logger = logging.getLogger(__name__)


class WikiTransport:
    """
    Thin async client for the MediaWiki action API.

    Every call returns the decoded body wrapped as ``{"data": payload}``.
    Network, HTTP and decoding failures are raised as ``TransportFailure``;
    nothing is retried and no timeout is added beyond the client's own.
    """
    
    def __init__(self, client: Optional[httpx.AsyncClient] = None):
        self.settings = get_settings().wiki
        self.query_url = self.settings.query_url
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=self.settings.timeout_seconds)
    
    def _get_headers(self) -> dict:
        """Get headers for MediaWiki API requests."""
        return {
            "User-Agent": self.settings.user_agent,
            "Accept": "application/json",
        }
    
    async def get(self, params: dict[str, Any]) -> dict[str, Any]:
        """
        Run one query against the API.
        
        Args:
            params: Query string parameters (``format=json`` is expected)
            
        Returns:
            ``{"data": <decoded JSON body>}``
        """
        logger.debug(
            f"MediaWiki request: {params.get('list') or params.get('prop')}",
            extra={"params": params}
        )
        
        try:
            response = await self._client.get(
                self.query_url, params=params, headers=self._get_headers()
            )
            response.raise_for_status()
        except httpx.TimeoutException as e:
            logger.warning(f"Timeout querying {self.query_url}")
            raise TransportFailure(
                "Timed out querying Wikipedia",
                details={"url": self.query_url}
            ) from e
        except httpx.HTTPStatusError as e:
            logger.error(f"MediaWiki API returned {e.response.status_code}")
            raise TransportFailure(
                f"Wikipedia returned HTTP {e.response.status_code}",
                details={"url": self.query_url, "status_code": e.response.status_code}
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"Error querying MediaWiki API: {e}")
            raise TransportFailure(
                f"Error querying Wikipedia: {e}",
                details={"url": self.query_url}
            ) from e
        
        try:
            payload = response.json()
        except ValueError as e:
            raise MalformedResponseError(
                "Wikipedia response is not valid JSON",
                details={"url": self.query_url}
            ) from e
        
        if not isinstance(payload, dict):
            raise MalformedResponseError(
                "Wikipedia response is not a JSON object",
                details={"url": self.query_url}
            )
        
        error = payload.get("error")
        if error:
            if not isinstance(error, dict):
                error = {"info": error}
            raise RemoteServiceError(
                str(error.get("code", "unknown")),
                str(error.get("info", "")),
            )
        
        return {"data": payload}
    
    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
