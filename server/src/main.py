"""
Main server entrypoint.
Initializes the FastAPI application and includes the API routers.
"""

from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Response

from server.src.api import fashion
from server.src.core.config import settings
from server.src.core.logging_config import setup_logging, get_logger
from server.src.core.metrics import init_metrics, get_metrics, get_metrics_content_type
from server.src.services.catalog_service import CatalogResolver

VERSION = "0.1.0"

# Initialize logging and metrics as early as possible
setup_logging()
init_metrics(version=VERSION, environment=settings.ENVIRONMENT)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    logger.info("Fashion template server starting up", extra={"version": VERSION})

    async with httpx.AsyncClient(
        timeout=settings.CATALOG_REQUEST_TIMEOUT,
        headers={"Accept": "application/json"},
    ) as http_client:
        app.state.catalog_resolver = CatalogResolver(http_client)
        logger.info(
            "Catalog resolver ready",
            extra={
                "base_url": settings.GW2_API_BASE_URL,
                "batch_size": settings.CATALOG_BATCH_SIZE,
                "cache_ttl": settings.CATALOG_CACHE_TTL,
            },
        )
        yield

    # Shutdown
    logger.info("Fashion template server shutting down")


app_description = """
Decodes Guild Wars 2 fashion template chat links and resolves them into
skin and dye descriptions.

## Features
- **Decode**: `POST /fashion/decode` returns skin and dye ids per slot.
- **Resolve**: `POST /fashion/resolve` adds skin names, icons and dye colors
  from the public GW2 API (batched, cached for an hour).
- **Skin links**: `GET /skins/{skin_id}/chat-link` builds a wardrobe skin
  chat link for pasting into the game chat.
"""

app = FastAPI(
    title="Fashion Template Server", description=app_description, version=VERSION, lifespan=lifespan
)


@app.get("/metrics", summary="Prometheus metrics endpoint", tags=["Monitoring"])
def get_metrics_endpoint():
    """
    Prometheus metrics endpoint.
    Returns decode and catalog metrics in Prometheus format.
    """
    logger.debug("Metrics endpoint accessed")
    return Response(content=get_metrics(), media_type=get_metrics_content_type())


@app.get("/", summary="Health check endpoint", tags=["Status"])
def read_root():
    """Root endpoint for health checks."""
    logger.debug("Health check endpoint accessed")
    return {"status": "ok"}


@app.get("/version", summary="Get server version", tags=["Status"])
def read_version():
    """Returns the current version of the server application."""
    logger.debug("Version endpoint accessed")
    return {"version": VERSION}


# Include API routers
app.include_router(fashion.router, tags=["Fashion Templates"])
