"""Tests that concurrent requests keep codes unique and counts exact.

The app is async (FastAPI + asyncpg pool) and handles many requests at once;
the store's atomic increment is what keeps click counts exact.
"""

import asyncio

import pytest
from shortit.auth import ANONYMOUS


@pytest.mark.asyncio
class TestConcurrentRequests:
    """Many simultaneous requests against one app instance."""

    async def test_concurrent_shorten_requests(self, client):
        """Concurrent POST /shorten calls all succeed with distinct codes."""
        concurrency = 30
        urls = [f"https://example.com/page_{i}" for i in range(concurrency)]
        tasks = [client.post("/shorten", json={"originalUrl": url}) for url in urls]
        responses = await asyncio.gather(*tasks, return_exceptions=True)

        short_codes = []
        for i, r in enumerate(responses):
            if isinstance(r, Exception):
                pytest.fail(f"Request {i} raised: {r}")
            assert r.status_code == 201, f"Request {i}: status {r.status_code} body={r.text}"
            data = r.json()["data"]
            assert data["originalUrl"] == urls[i]
            short_codes.append(data["shortCode"])

        assert len(short_codes) == len(set(short_codes)), "All short codes must be unique"

    async def test_concurrent_redirects_count_every_click(self, client):
        """N concurrent redirects of one code leave clickCount == N."""
        create_resp = await client.post(
            "/shorten",
            json={"originalUrl": "https://example.com/redirect-target"},
        )
        assert create_resp.status_code == 201
        short_code = create_resp.json()["data"]["shortCode"]

        concurrency = 40
        tasks = [
            client.get(f"/{short_code}", follow_redirects=False)
            for _ in range(concurrency)
        ]
        responses = await asyncio.gather(*tasks, return_exceptions=True)

        for i, r in enumerate(responses):
            if isinstance(r, Exception):
                pytest.fail(f"Request {i} raised: {r}")
            assert r.status_code == 302, f"Request {i}: status {r.status_code}"
            assert r.headers.get("location") == "https://example.com/redirect-target"

        stats = await client.get(f"/urls/stats/{short_code}")
        assert stats.json()["data"]["clickCount"] == concurrency

    async def test_concurrent_service_resolves(self, service, store):
        """Direct service calls racing on one record lose no increments."""
        record = await service.create_link("https://example.com/direct", ANONYMOUS)

        await asyncio.gather(*(service.resolve(record.short_code) for _ in range(100)))

        stored = await store.get_by_short_code(record.short_code)
        assert stored.click_count == 100
