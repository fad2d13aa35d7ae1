# API endpoints and routers

from .nearby_endpoints import router as nearby_router

__all__ = [
    "nearby_router",
]
