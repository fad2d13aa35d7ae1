"""
FastAPI application setup for the Wiki Nearby service.
"""

from fastapi import FastAPI
import logging
from datetime import datetime, timezone
from contextlib import asynccontextmanager

from wikinearby.config import get_settings
from wikinearby.core.logging import configure_logging
from wikinearby.core.dependencies import ServiceContainer
from wikinearby.core.error_handlers import setup_error_handlers, error_handler
from wikinearby.middleware import RequestContextMiddleware

settings = get_settings()

configure_logging(settings.log_level.value, settings.log_format)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan: opens the shared MediaWiki client on startup
    and closes it on shutdown.
    """
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    
    service_container = ServiceContainer()
    try:
        await service_container.initialize_services()
        app.state.service_container = service_container
        logger.info("Application startup complete")
        
        yield
        
    except Exception as e:
        logger.error(f"Application startup failed: {e}", exc_info=True)
        raise
    
    finally:
        logger.info("Shutting down application")
        await service_container.cleanup_services()
        logger.info("Application shutdown complete")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.
    
    Returns:
        FastAPI: Configured application instance
    """
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan
    )
    
    app.add_middleware(RequestContextMiddleware)
    
    setup_error_handlers(app)
    
    from wikinearby.api import nearby_router
    app.include_router(nearby_router)
    
    @app.get("/")
    async def root():
        """Root endpoint for basic health check."""
        return {
            "message": f"Welcome to {settings.app_name}",
            "version": settings.app_version,
            "status": "running"
        }
    
    @app.get("/health")
    async def health_check():
        """Health check with service container state and error statistics."""
        container = getattr(app.state, "service_container", None)
        return {
            "status": "healthy" if container is not None else "starting",
            "version": settings.app_version,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "error_statistics": error_handler.get_error_statistics(),
        }
    
    return app


# Create application instance
app = create_app()
