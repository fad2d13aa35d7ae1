"""
Dependency injection setup for FastAPI.
Owns the shared MediaWiki transport and the nearby service built on it.
"""

import logging
from typing import Optional

from fastapi import Request

from wikinearby.services.nearby_service import NearbyItemsService
from wikinearby.services.wiki_transport import WikiTransport

logger = logging.getLogger(__name__)


class ServiceContainer:
    """Container for application services with startup/shutdown hooks."""
    
    def __init__(self):
        self._transport: Optional[WikiTransport] = None
        self._nearby_service: Optional[NearbyItemsService] = None
    
    async def initialize_services(self) -> None:
        if self._nearby_service is not None:
            return
        logger.info("Initializing service container")
        self._transport = WikiTransport()
        self._nearby_service = NearbyItemsService(self._transport)
    
    async def cleanup_services(self) -> None:
        if self._transport is not None:
            await self._transport.aclose()
        self._transport = None
        self._nearby_service = None
        logger.info("Service container cleaned up")
    
    def get_nearby_service(self) -> NearbyItemsService:
        if self._nearby_service is None:
            raise RuntimeError("Service container not initialized")
        return self._nearby_service


def get_nearby_service(request: Request) -> NearbyItemsService:
    """FastAPI dependency resolving the nearby service from app state."""
    return request.app.state.service_container.get_nearby_service()
