"""Lazily loaded cache of indexed navigation items."""

import asyncio
import logging
from collections.abc import Iterable
from typing import Any, Protocol

import httpx

from docs_site_search.api import get_search_content
from docs_site_search.loader import DocumentContentLoader
from docs_site_search.models import NavigationItem
from docs_site_search.navigation import NAV_ITEMS

logger = logging.getLogger(__name__)

SEARCH_CONTENT_PATH = "/api/search-content"


class ContentSource(Protocol):
    async def fetch(self) -> dict[str, Any]: ...


class LocalContentSource:
    """Calls the in-process content endpoint."""

    def __init__(self, loader: DocumentContentLoader) -> None:
        self.loader = loader

    async def fetch(self) -> dict[str, Any]:
        return await asyncio.to_thread(get_search_content, self.loader)


class HttpContentSource:
    """Fetches the content endpoint of an HTTP-hosted site."""

    def __init__(self, base_url: str, client: httpx.AsyncClient | None = None) -> None:
        """Initialise HTTP source.

        Args:
            base_url: Site root, e.g. ``http://127.0.0.1:8000``.
            client: Optional client to reuse; a short-lived one is created otherwise.
        """
        self.base_url = base_url.rstrip("/")
        self.client = client

    async def fetch(self) -> dict[str, Any]:
        url = f"{self.base_url}{SEARCH_CONTENT_PATH}"
        if self.client is not None:
            response = await self.client.get(url)
        else:
            async with httpx.AsyncClient() as client:
                response = await client.get(url)
        # Error payloads come back with status 500 and still carry JSON
        return response.json()


class ContentProvider:
    """Serves navigation items, enriched with content once loaded.

    Until the single load finishes, consumers get the static navigation list
    and ``is_loading`` is True. The load runs at most once per provider; every
    consumer awaits the same task.
    """

    def __init__(self, source: ContentSource, fallback: Iterable[NavigationItem] = NAV_ITEMS) -> None:
        """Initialise provider.

        Args:
            source: Where to fetch the content payload from.
            fallback: Items served before and after a failed load.
        """
        self.source = source
        self._items = list(fallback)
        self._is_loading = True
        self._task: asyncio.Task[list[NavigationItem]] | None = None

    def get_nav_items(self) -> tuple[list[NavigationItem], bool]:
        """Return the current items and whether the load is still running.

        Starts the load on first call when an event loop is running.

        Returns:
            Tuple of (items, is_loading).
        """
        if self._task is None:
            try:
                asyncio.get_running_loop()
            except RuntimeError:
                logger.debug("No running event loop; content load deferred")
            else:
                self._start()
        return list(self._items), self._is_loading

    async def load(self) -> list[NavigationItem]:
        """Start the load if needed and wait for it to finish.

        Returns:
            Enriched items, or the fallback list if the load failed.
        """
        task = self._task if self._task is not None else self._start()
        return await asyncio.shield(task)

    def _start(self) -> asyncio.Task[list[NavigationItem]]:
        self._task = asyncio.get_running_loop().create_task(self._load())
        return self._task

    async def _load(self) -> list[NavigationItem]:
        try:
            payload = await self.source.fetch()
            nav_items = payload.get("navItems")
            if not payload.get("success") or not isinstance(nav_items, list):
                logger.warning("Search content unavailable: %s", payload.get("error", "no navItems in payload"))
            else:
                self._items = [NavigationItem.from_dict(entry) for entry in nav_items]
                logger.info("Loaded search content for %d pages", len(self._items))
        except Exception:
            logger.exception("Failed to load search content")
        finally:
            self._is_loading = False
        return list(self._items)
