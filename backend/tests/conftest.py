"""Pytest configuration and fixtures for backend tests."""

import os

# settings are read at import time
os.environ.setdefault("NEWS_API_KEY", "test-key")
os.environ.setdefault("NEWS_API_URL", "https://news.test/v2")
os.environ.setdefault("ENV", "test")

import asyncio
from datetime import datetime, timezone

import httpx
import pytest

from utils.news import NewsClient


NOW = datetime(2024, 9, 13, 1, 0, 49, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    """Fixed evaluation instant used across tests."""
    return NOW


@pytest.fixture
def sample_articles() -> list:
    """Return a NewsAPI-shaped list of articles."""
    return [
        {
            "source": {"id": None, "name": "Example Times"},
            "author": "Jane Doe",
            "title": "Markets rally",
            "description": "Stocks up.",
            "url": "https://example.com/a",
            "urlToImage": "https://example.com/a.jpg",
            "publishedAt": "2024-09-13T00:55:49.000Z",
            "content": "...",
        },
        {
            "source": {"id": "wire", "name": "Wire"},
            "author": None,
            "title": "[Removed]",
            "description": "[Removed]",
            "url": "https://removed.com",
            "urlToImage": None,
            "publishedAt": "1970-01-01T00:00:00Z",
            "content": "[Removed]",
        },
        {
            "source": {"id": None, "name": "Daily"},
            "author": None,
            "title": "Old story",
            "description": None,
            "url": "https://example.com/b",
            "urlToImage": None,
            "publishedAt": "2024-09-10T00:00:49Z",
            "content": None,
        },
    ]


@pytest.fixture
def make_client():
    """Build a NewsClient whose transport is served by ``handler``.

    Every request seen by the transport is appended to the returned list.
    The underlying httpx clients are closed on teardown.
    """
    opened = []

    def _make(handler):
        seen = []

        def _handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return handler(request)

        http = httpx.AsyncClient(transport=httpx.MockTransport(_handler))
        opened.append(http)
        client = NewsClient(http, api_key="test-key", base_url="https://news.test/v2/")
        return client, seen

    yield _make

    for http in opened:
        asyncio.run(http.aclose())
