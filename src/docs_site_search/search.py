"""In-memory search over documentation navigation items."""

from collections.abc import Iterable

from docs_site_search.models import NavigationItem, SearchResult

QUICK_FILTER_LIMIT = 5


class SearchEngine:
    """Scores navigation items against a query by title and content."""

    TITLE_SCORE = 10
    CONTENT_SCORE = 5
    EXCERPT_LENGTH = 100
    EXCERPT_LEAD = 30
    ELLIPSIS = "..."

    def search(self, query: str, items: Iterable[NavigationItem]) -> list[SearchResult]:
        """Search navigation items by case-insensitive substring.

        Title matches score higher than content matches and both add up.
        Items matching neither are left out.

        Args:
            query: Raw user query.
            items: Navigation items, optionally carrying content.

        Returns:
            Results ordered by descending score; ties keep ``items`` order.
        """
        if not query.strip():
            return []

        needle = query.lower()
        results = []
        for item in items:
            score = 0
            matched = False
            excerpt = ""

            if needle in item.title.lower():
                score += self.TITLE_SCORE
                matched = True

            if item.content and needle in item.content.lower():
                score += self.CONTENT_SCORE
                matched = True
                excerpt = self.generate_excerpt(item.content, query)

            if matched:
                results.append(
                    SearchResult(
                        title=item.title,
                        url=item.url,
                        excerpt=excerpt or f"Navigate to {item.title}",
                        score=score,
                    )
                )

        # sorted() is stable with reverse=True, so ties keep input order
        return sorted(results, key=lambda result: result.score, reverse=True)

    def generate_excerpt(self, content: str, query: str) -> str:
        """Cut a snippet of content around the first match of the query.

        Args:
            content: Page content.
            query: Raw user query.

        Returns:
            Snippet with ellipses marking trimmed ends.
        """
        if not content:
            return ""

        position = content.lower().find(query.lower())
        if position == -1:
            return content[: self.EXCERPT_LENGTH] + self.ELLIPSIS

        start = max(0, position - self.EXCERPT_LEAD)
        end = min(len(content), position + self.EXCERPT_LENGTH - self.EXCERPT_LEAD)

        excerpt = content[start:end]
        if start > 0:
            excerpt = self.ELLIPSIS + excerpt
        if end < len(content):
            excerpt = excerpt + self.ELLIPSIS
        return excerpt


def quick_filter(query: str, items: Iterable[NavigationItem], limit: int = QUICK_FILTER_LIMIT) -> list[NavigationItem]:
    """Filter navigation items by title for the sidebar search box.

    Args:
        query: Raw user query.
        items: Navigation items in sidebar order.
        limit: Maximum number of items to return.

    Returns:
        Matching items in sidebar order, unscored.
    """
    if not query:
        return []
    needle = query.lower()
    return [item for item in items if needle in item.title.lower()][:limit]
