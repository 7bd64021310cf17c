# ==============================================================================
# MIDDLEWARE TESTS
# ==============================================================================

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from cosmetics_store.middleware import RateLimitMiddleware


def throttled_app(limit: int) -> FastAPI:
    app = FastAPI()
    app.add_middleware(
        RateLimitMiddleware,
        requests_limit=limit,
        window_seconds=3600,
        enabled=True,
    )

    @app.get("/ping")
    async def ping() -> dict:
        return {"pong": True}

    @app.get("/health")
    async def health() -> dict:
        return {"status": "healthy"}

    return app


class TestRateLimit:

    @pytest.mark.asyncio
    async def test_rejects_after_limit(self):
        transport = ASGITransport(app=throttled_app(limit=2))
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            first = await client.get("/ping")
            await client.get("/ping")
            rejected = await client.get("/ping")

        assert first.status_code == 200
        assert first.headers["X-RateLimit-Limit"] == "2"
        assert rejected.status_code == 429
        body = rejected.json()
        assert body["success"] is False
        assert body["error"]["code"] == "RATE_LIMIT_EXCEEDED"
        assert "Retry-After" in rejected.headers

    @pytest.mark.asyncio
    async def test_health_is_exempt(self):
        transport = ASGITransport(app=throttled_app(limit=1))
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            responses = [await client.get("/health") for _ in range(3)]

        assert all(r.status_code == 200 for r in responses)
