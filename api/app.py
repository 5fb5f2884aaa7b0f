"""
Agent Settings REST API

FastAPI application guarded by the x-api-key gate.

Usage:
    uvicorn api.app:app --reload --port 8000
"""

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.auth import APIKeyMiddleware, KeyProvider
from api.config import APIConfig
from api.routers import health, settings
from envsettings import __version__

PREFIX = "/api/v1"
HEALTH_PATH = f"{PREFIX}/health"


def create_app(key_provider: Optional[KeyProvider] = None) -> FastAPI:
    """
    Build the API application.

    Args:
        key_provider: Callable returning the expected API key per request
            (default: the API_KEY environment variable)
    """
    config = APIConfig.load()

    app = FastAPI(
        title="Agent Settings API",
        description="Settings introspection behind a static API key.",
        version=__version__,
        debug=config.debug,
    )

    # CORS is added last so it wraps the gate
    app.add_middleware(
        APIKeyMiddleware,
        key_provider=key_provider,
        exempt_paths=(HEALTH_PATH,),
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router, prefix=PREFIX, tags=["Health"])
    app.include_router(settings.router, prefix=PREFIX, tags=["Settings"])

    @app.get("/")
    async def root():
        """Root endpoint with API info."""
        return {
            "name": "Agent Settings API",
            "version": __version__,
            "docs": "/docs",
            "health": HEALTH_PATH,
        }

    return app


app = create_app()
