"""API key authentication middleware."""

import hmac
import logging
import os
from typing import Callable, Iterable, Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response
from starlette.types import ASGIApp

logger = logging.getLogger(__name__)

API_KEY_HEADER = "x-api-key"

KeyProvider = Callable[[], Optional[str]]


def configured_api_key() -> Optional[str]:
    """Expected API key, read from the environment on every call."""
    return os.environ.get("API_KEY") or None


def api_key_matches(provided: Optional[str], expected: Optional[str]) -> bool:
    if not provided or not expected:
        return False
    return hmac.compare_digest(provided.encode("utf-8"), expected.encode("utf-8"))


class APIKeyMiddleware(BaseHTTPMiddleware):
    """Reject requests whose x-api-key header does not match the configured key.

    The expected key is fetched per request, so a changed API_KEY takes effect
    without a restart. When no key is configured every request is rejected.
    """

    def __init__(self,
                 app: ASGIApp,
                 key_provider: Optional[KeyProvider] = None,
                 exempt_paths: Iterable[str] = ()):
        super().__init__(app)
        self.key_provider = key_provider or configured_api_key
        self.exempt_paths = frozenset(exempt_paths)

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if request.url.path in self.exempt_paths:
            return await call_next(request)

        provided = request.headers.get(API_KEY_HEADER)
        if not api_key_matches(provided, self.key_provider()):
            logger.warning(f"Rejected {request.method} {request.url.path}: invalid or missing API key")
            return PlainTextResponse("Unauthorized", status_code=401)

        return await call_next(request)
