"""Parser for the single-file documentation source."""

import re
from collections.abc import Iterable

from docs_site_search.models import DocumentSection, NavigationItem


class DocumentParser:
    """Splits the documentation file into sections and maps them to pages."""

    # A top-level heading is "# " at the start of a line; "## " never matches.
    SECTION_PATTERN = re.compile(r"^# ", re.MULTILINE)
    SUBHEADING_PREFIX = "## "

    def split_sections(self, text: str) -> list[DocumentSection]:
        """Split raw document text on top-level heading lines.

        Text before the first top-level heading is kept as a section of its
        own, titled by its first line.

        Args:
            text: Raw document text.

        Returns:
            Sections in document order.
        """
        sections = []
        for chunk in self.SECTION_PATTERN.split(text):
            if not chunk:
                continue
            title, _, body = chunk.partition("\n")
            sections.append(DocumentSection(title=title.strip(), body=body.strip()))
        return sections

    def match_section(self, item: NavigationItem, sections: Iterable[DocumentSection]) -> DocumentSection | None:
        """Find the section holding the content for a navigation item.

        A section matches when its title starts with the item title, or when
        its body has a second-level heading starting with the item title.
        Both comparisons ignore case, so "Custom Hooks" also claims a
        "Custom Hooks Reference" section.

        Args:
            item: Navigation item to look up.
            sections: Parsed document sections.

        Returns:
            First matching section or None.
        """
        wanted = item.title.lower()
        for section in sections:
            if section.title.lower().startswith(wanted) or self._has_subheading(section.body, wanted):
                return section
        return None

    def enrich(self, items: Iterable[NavigationItem], text: str) -> list[NavigationItem]:
        """Attach section bodies from the document to navigation items.

        Args:
            items: Navigation items in sidebar order.
            text: Raw document text.

        Returns:
            New items with ``content`` set; empty string when nothing matched.
        """
        sections = self.split_sections(text)
        enriched = []
        for item in items:
            section = self.match_section(item, sections)
            enriched.append(
                NavigationItem(
                    title=item.title,
                    url=item.url,
                    content=section.body if section else "",
                )
            )
        return enriched

    def _has_subheading(self, body: str, wanted: str) -> bool:
        """Check whether a section body has a given second-level heading.

        Args:
            body: Section body text.
            wanted: Lowercased heading text.

        Returns:
            True if a ``## `` line begins with the heading text.
        """
        prefix = self.SUBHEADING_PREFIX + wanted
        return any(line.lower().startswith(prefix) for line in body.splitlines())
