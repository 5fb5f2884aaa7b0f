"""Settings introspection endpoints."""

from fastapi import APIRouter

import envsettings
from api.models import NamespacesResponse

router = APIRouter()


@router.get("/settings/namespaces", response_model=NamespacesResponse)
async def list_namespaces():
    """List namespace names in the loaded settings."""
    if not envsettings.is_initialized():
        envsettings.initialize()
    settings = envsettings.get_settings()
    return NamespacesResponse(
        source=str(settings.source) if settings.source else None,
        namespaces=sorted(settings.namespaces),
    )
