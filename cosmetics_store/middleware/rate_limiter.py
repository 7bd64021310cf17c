# ==============================================================================
# RATE LIMITER MIDDLEWARE
# ==============================================================================
# Per-client token bucket; rejections use the standard error envelope
# ==============================================================================

from __future__ import annotations

import time
from typing import Callable, Dict, Optional, Tuple

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse
import logging

from cosmetics_store.core.constants import APIConstants, ErrorMessages
from cosmetics_store.core.exceptions import RateLimitError
from cosmetics_store.core.settings import settings

logger = logging.getLogger(__name__)

# Paths never throttled
EXEMPT_PATHS = frozenset({"/health", "/"})


class RateLimitMiddleware(BaseHTTPMiddleware):
    """
    Rate limiting middleware using a token bucket per client IP.

    Each bucket holds ``requests_limit`` tokens and refills linearly
    over ``window_seconds``.
    """

    def __init__(
        self,
        app,
        requests_limit: Optional[int] = None,
        window_seconds: Optional[int] = None,
        enabled: Optional[bool] = None,
    ):
        super().__init__(app)
        self.requests_limit = requests_limit or settings.RATE_LIMIT_REQUESTS
        self.window_seconds = window_seconds or settings.RATE_LIMIT_WINDOW
        self.enabled = settings.RATE_LIMIT_ENABLED if enabled is None else enabled
        self._buckets: Dict[str, Tuple[float, float]] = {}

    @staticmethod
    def _client_id(request: Request) -> str:
        forwarded = request.headers.get("X-Forwarded-For")
        if forwarded:
            return forwarded.split(",")[0].strip()
        if request.client:
            return request.client.host
        return "unknown"

    def _take_token(self, client_id: str) -> Tuple[bool, int, int]:
        """
        Consume one token for the client.

        Returns:
            Tuple of (allowed, remaining, seconds until full)
        """
        now = time.monotonic()
        tokens, last = self._buckets.get(client_id, (float(self.requests_limit), now))

        rate = self.requests_limit / self.window_seconds
        tokens = min(float(self.requests_limit), tokens + (now - last) * rate)

        allowed = tokens >= 1
        if allowed:
            tokens -= 1
        self._buckets[client_id] = (tokens, now)

        reset = int((self.requests_limit - tokens) / rate) if rate else self.window_seconds
        return allowed, int(tokens), max(1, reset)

    def _headers(self, remaining: int, reset: int) -> Dict[str, str]:
        return {
            APIConstants.RATE_LIMIT_HEADER: str(self.requests_limit),
            APIConstants.RATE_LIMIT_REMAINING_HEADER: str(remaining),
            APIConstants.RATE_LIMIT_RESET_HEADER: str(reset),
        }

    async def dispatch(
        self,
        request: Request,
        call_next: Callable,
    ) -> Response:
        """Process request through rate limiter."""
        if not self.enabled or request.url.path in EXEMPT_PATHS:
            return await call_next(request)

        client_id = self._client_id(request)
        allowed, remaining, reset = self._take_token(client_id)

        if not allowed:
            logger.warning(f"Rate limit exceeded for {client_id} on {request.url.path}")
            error = RateLimitError(
                message=ErrorMessages.RATE_LIMIT_EXCEEDED,
                retry_after=reset,
            )
            return JSONResponse(
                status_code=error.status_code,
                content=error.to_dict(),
                headers={**self._headers(0, reset), "Retry-After": str(reset)},
            )

        response = await call_next(request)
        response.headers.update(self._headers(remaining, reset))
        return response
