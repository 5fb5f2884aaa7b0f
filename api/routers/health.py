"""Health and info endpoints."""

from fastapi import APIRouter

from api.models import HealthResponse
from envsettings import __version__ as VERSION

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health():
    """Health check endpoint."""
    return HealthResponse(status="ok", version=VERSION)


@router.get("/version")
async def version():
    """Return API version."""
    return {"version": VERSION}
