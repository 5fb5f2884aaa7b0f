"""API configuration with env var support."""

import os
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

from envsettings.schema import parse_bool


@dataclass
class APIConfig:
    """REST API configuration."""
    host: str = "127.0.0.1"
    port: int = 8000
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    api_key: Optional[str] = None
    debug: bool = False

    @classmethod
    def load(cls, environ: Optional[Mapping[str, str]] = None) -> "APIConfig":
        """Read the API settings from the environment (default: os.environ)."""
        env = os.environ if environ is None else environ
        config = cls()
        if env.get("API_HOST"):
            config.host = env["API_HOST"]
        if env.get("API_PORT"):
            config.port = int(env["API_PORT"])
        if env.get("API_KEY"):
            config.api_key = env["API_KEY"]
        if env.get("API_DEBUG"):
            config.debug = bool(parse_bool(env["API_DEBUG"]))
        if env.get("API_CORS_ORIGINS"):
            config.cors_origins = [o.strip() for o in env["API_CORS_ORIGINS"].split(",") if o.strip()]
        return config
