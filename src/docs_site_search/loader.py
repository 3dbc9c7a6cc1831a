"""Loader that indexes the documentation file by navigation item."""

import logging
from collections.abc import Iterable
from pathlib import Path

from docs_site_search.models import NavigationItem
from docs_site_search.navigation import NAV_ITEMS
from docs_site_search.parser import DocumentParser

logger = logging.getLogger(__name__)


class DocumentContentLoader:
    """Reads the documentation file once and attaches section bodies to pages."""

    def __init__(self, docs_path: Path, nav_items: Iterable[NavigationItem] = NAV_ITEMS) -> None:
        """Initialise loader for a documentation file.

        Args:
            docs_path: Path to the documentation text file.
            nav_items: Navigation items to enrich, in sidebar order.
        """
        self.docs_path = docs_path
        self.nav_items = list(nav_items)
        self.parser = DocumentParser()
        self._loaded: list[NavigationItem] | None = None

    def load(self) -> list[NavigationItem]:
        """Return navigation items enriched with document content.

        The file is read on the first call only. If it cannot be read or
        parsed, the bare navigation items are returned with no content.

        Returns:
            Navigation items in sidebar order.
        """
        if self._loaded is None:
            self._loaded = self._load_from_file()
        return list(self._loaded)

    def _load_from_file(self) -> list[NavigationItem]:
        """Read and parse the documentation file.

        Returns:
            Enriched items, or the bare navigation items on failure.
        """
        try:
            text = self.docs_path.read_text(encoding="utf-8")
            items = self.parser.enrich(self.nav_items, text)
        except Exception:
            logger.exception("Error reading documentation from %s", self.docs_path)
            return list(self.nav_items)

        indexed = sum(1 for item in items if item.content)
        logger.info("Indexed %d of %d pages from %s", indexed, len(items), self.docs_path)
        for item in items:
            if not item.content:
                logger.debug("No section found for: %s", item.title)
        return items
