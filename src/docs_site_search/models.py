"""Data models for documentation site search."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class NavigationItem:
    """A documentation page in the sidebar navigation.

    ``content`` is ``None`` until the page has been indexed and ``""`` when the
    document has no section for the page.
    """

    title: str
    url: str
    content: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialise to the content endpoint payload shape.

        Returns:
            Dictionary with ``title``, ``url`` and, when indexed, ``content``.
        """
        data: dict[str, Any] = {"title": self.title, "url": self.url}
        if self.content is not None:
            data["content"] = self.content
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "NavigationItem":
        """Build an item from a content endpoint payload entry.

        Args:
            data: Mapping with ``title``, ``url`` and optional ``content``.

        Returns:
            NavigationItem instance.
        """
        return cls(title=data["title"], url=data["url"], content=data.get("content"))


@dataclass(frozen=True)
class DocumentSection:
    """A top-level section of the documentation file."""

    title: str
    body: str


@dataclass
class SearchResult:
    """Represents a search result."""

    title: str
    url: str
    excerpt: str
    score: int
