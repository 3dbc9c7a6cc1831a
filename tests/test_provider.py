"""Tests for the content provider and content sources."""

import asyncio
from pathlib import Path
from typing import Any

import httpx

from docs_site_search.loader import DocumentContentLoader
from docs_site_search.models import NavigationItem
from docs_site_search.navigation import static_nav_items
from docs_site_search.provider import ContentProvider, HttpContentSource, LocalContentSource


class CountingSource:
    """Content source that records how often it is fetched."""

    def __init__(self, payload: dict[str, Any], delay: float = 0.0) -> None:
        self.payload = payload
        self.delay = delay
        self.calls = 0

    async def fetch(self) -> dict[str, Any]:
        self.calls += 1
        await asyncio.sleep(self.delay)
        return self.payload


class FailingSource:
    async def fetch(self) -> dict[str, Any]:
        raise httpx.ConnectError("connection refused")


ENRICHED_PAYLOAD = {
    "navItems": [{"title": "Introduction", "url": "/", "content": "Welcome."}],
    "success": True,
}


def test_initial_state_without_event_loop() -> None:
    """Test that the provider serves the static list before loading."""
    provider = ContentProvider(CountingSource(ENRICHED_PAYLOAD))

    items, is_loading = provider.get_nav_items()

    assert is_loading is True
    assert items == static_nav_items()


def test_first_access_starts_load() -> None:
    """Test that get_nav_items triggers the load inside an event loop."""
    source = CountingSource(ENRICHED_PAYLOAD)
    provider = ContentProvider(source)

    async def scenario() -> tuple[list[NavigationItem], bool]:
        first_items, first_loading = provider.get_nav_items()
        assert first_loading is True
        assert first_items == static_nav_items()
        await provider.load()
        return provider.get_nav_items()

    items, is_loading = asyncio.run(scenario())

    assert is_loading is False
    assert items == [NavigationItem(title="Introduction", url="/", content="Welcome.")]
    assert source.calls == 1


def test_concurrent_consumers_share_one_load() -> None:
    """Test at-most-once loading with concurrent consumers."""
    source = CountingSource(ENRICHED_PAYLOAD, delay=0.01)
    provider = ContentProvider(source)

    async def scenario() -> list[list[NavigationItem]]:
        provider.get_nav_items()
        return await asyncio.gather(provider.load(), provider.load(), provider.load())

    results = asyncio.run(scenario())

    assert source.calls == 1
    assert all(result == results[0] for result in results)


def test_failed_fetch_keeps_fallback() -> None:
    """Test that a raising source leaves the static list in place."""
    provider = ContentProvider(FailingSource())

    items = asyncio.run(provider.load())

    assert items == static_nav_items()
    assert provider.get_nav_items() == (static_nav_items(), False)


def test_error_payload_keeps_fallback() -> None:
    """Test that an unsuccessful payload leaves the static list in place."""
    provider = ContentProvider(CountingSource({"error": "Failed to load search content", "success": False}))

    items = asyncio.run(provider.load())

    assert items == static_nav_items()
    _, is_loading = provider.get_nav_items()
    assert is_loading is False


def test_missing_document_resolves_to_static_list(tmp_path: Path) -> None:
    """Test the local source when the documentation file is missing."""
    loader = DocumentContentLoader(tmp_path / "DOCS.md")
    provider = ContentProvider(LocalContentSource(loader))

    asyncio.run(provider.load())
    items, is_loading = provider.get_nav_items()

    assert is_loading is False
    assert items == static_nav_items()
    assert all(item.content is None for item in items)


def test_local_source_enriches(tmp_path: Path) -> None:
    """Test the local source end to end."""
    docs_path = tmp_path / "DOCS.md"
    docs_path.write_text("# Custom Hooks\nuseSearch debounces queries.\n", encoding="utf-8")
    provider = ContentProvider(LocalContentSource(DocumentContentLoader(docs_path)))

    items = asyncio.run(provider.load())

    by_url = {item.url: item for item in items}
    assert by_url["/custom-hooks"].content == "useSearch debounces queries."
    assert by_url["/"].content == ""


def test_http_source_fetches_search_content() -> None:
    """Test the HTTP source against a mocked transport."""
    requested: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requested.append(request.url.path)
        return httpx.Response(200, json=ENRICHED_PAYLOAD)

    async def scenario() -> list[NavigationItem]:
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            provider = ContentProvider(HttpContentSource("http://docs.test/", client=client))
            return await provider.load()

    items = asyncio.run(scenario())

    assert requested == ["/api/search-content"]
    assert items[0].content == "Welcome."


def test_http_source_server_error_keeps_fallback() -> None:
    """Test that a 500 error payload keeps the static list."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"error": "Failed to load search content", "success": False})

    async def scenario() -> list[NavigationItem]:
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            provider = ContentProvider(HttpContentSource("http://docs.test", client=client))
            return await provider.load()

    assert asyncio.run(scenario()) == static_nav_items()
