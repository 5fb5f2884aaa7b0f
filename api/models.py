"""Pydantic response models for the REST API."""

from typing import List, Optional

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str


class NamespacesResponse(BaseModel):
    """Namespace names found in the loaded settings; values are never exposed."""
    source: Optional[str] = Field(None, description="Path of the .env file that was loaded")
    namespaces: List[str] = Field(default_factory=list)
