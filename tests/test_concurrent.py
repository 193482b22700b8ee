"""Tests that the server handles many simultaneous requests correctly.

Resolves of one short link must be serialized by the store: N concurrent
redirects leave exactly N visits and a click count of N.
"""

import asyncio
import pytest


@pytest.mark.asyncio
class TestConcurrentConnections:
    """Prove the server handles many simultaneous requests."""

    async def test_concurrent_shorten_requests(self, client):
        """Many concurrent POST /shorten with different URLs; all succeed and ids are unique."""
        concurrency = 30
        urls = [f"https://example.com/page_{i}" for i in range(concurrency)]
        tasks = [
            client.post("/shorten", json={"originalUrl": url})
            for url in urls
        ]
        responses = await asyncio.gather(*tasks, return_exceptions=True)

        short_ids = []
        for i, r in enumerate(responses):
            if isinstance(r, Exception):
                pytest.fail(f"Request {i} raised: {r}")
            assert r.status_code == 200, f"Request {i}: status {r.status_code} body={r.text}"
            short_ids.append(r.json()["shortId"])

        assert len(short_ids) == len(set(short_ids)), "All short ids must be unique under concurrency"

        for short_id, url in zip(short_ids, urls):
            r = await client.get(f"/{short_id}")
            assert r.headers["location"] == url

    async def test_concurrent_redirect_requests(self, client):
        """N concurrent redirects of one link produce exactly N visits."""
        create_resp = await client.post(
            "/shorten",
            json={"originalUrl": "https://example.com/redirect-target"},
        )
        assert create_resp.status_code == 200
        short_id = create_resp.json()["shortId"]

        concurrency = 50
        tasks = [
            client.get(f"/{short_id}", headers={"User-Agent": f"agent-{i}"})
            for i in range(concurrency)
        ]
        responses = await asyncio.gather(*tasks, return_exceptions=True)

        for i, r in enumerate(responses):
            if isinstance(r, Exception):
                pytest.fail(f"Request {i} raised: {r}")
            assert r.status_code == 302, f"Request {i}: status {r.status_code}"
            assert r.headers.get("location") == "https://example.com/redirect-target"

        data = (await client.get(f"/analytics/{short_id}")).json()
        assert data["clickCount"] == concurrency
        assert len(data["visits"]) == concurrency
        assert sorted(v["useragent"] for v in data["visits"]) == sorted(f"agent-{i}" for i in range(concurrency))

    async def test_concurrent_reads_during_redirects(self, client):
        """Every analytics snapshot taken mid-traffic has clickCount == len(visits)."""
        create_resp = await client.post(
            "/shorten",
            json={"originalUrl": "https://example.com/mixed"},
        )
        short_id = create_resp.json()["shortId"]

        tasks = []
        for _ in range(25):
            tasks.append(client.get(f"/{short_id}"))
            tasks.append(client.get(f"/analytics/{short_id}"))
        responses = await asyncio.gather(*tasks, return_exceptions=True)

        for i, r in enumerate(responses):
            if isinstance(r, Exception):
                pytest.fail(f"Request {i} raised: {r}")
            if "analytics" in str(r.request.url):
                assert r.status_code == 200
                data = r.json()
                assert data["clickCount"] == len(data["visits"])
            else:
                assert r.status_code == 302

        final = (await client.get(f"/analytics/{short_id}")).json()
        assert final["clickCount"] == 25

    async def test_concurrent_health_requests(self, client):
        """Many concurrent GET /health requests all succeed."""
        concurrency = 50
        tasks = [client.get("/health") for _ in range(concurrency)]
        responses = await asyncio.gather(*tasks, return_exceptions=True)

        for i, r in enumerate(responses):
            if isinstance(r, Exception):
                pytest.fail(f"Request {i} raised: {r}")
            assert r.status_code == 200, f"Request {i}: status {r.status_code}"
            assert r.json()["status"] == "healthy"
