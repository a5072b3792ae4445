"""Main FastAPI application entry point."""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from infrastructure.dependencies import get_cache_client, get_database_pool_provider
from infrastructure.logging import configure_logging
from infrastructure.settings import get_settings
from infrastructure.version import __version__
from status.presentation import routes as status_routes


@asynccontextmanager
async def status_lifespan(app: FastAPI):
    """Application lifespan context.

    Manages:
    - Cache client creation at startup and close on shutdown
    - Connection pool lifecycle (created lazily, disposed on shutdown)
    """
    configure_logging(debug=get_settings().debug)
    cache = get_cache_client()

    yield

    await cache.close()
    await get_database_pool_provider().close()


app = FastAPI(
    title="Status Service",
    description="Connectivity check for the Redis cache and the Cloud SQL database",
    version=__version__,
    lifespan=status_lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(status_routes.router)


@app.get("/health")
def health():
    """Basic health check endpoint."""
    return {"status": "ok"}


def run() -> None:
    """Serve the application on the configured port."""
    settings = get_settings()
    uvicorn.run(app, host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    run()
