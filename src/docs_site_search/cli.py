"""Command line entry point for documentation site search."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from docs_site_search.config import Settings
from docs_site_search.loader import DocumentContentLoader
from docs_site_search.models import NavigationItem
from docs_site_search.provider import ContentProvider, LocalContentSource
from docs_site_search.search import SearchEngine, quick_filter

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Search the documentation site.")
    parser.add_argument("--docs", help="Path to the documentation file (overrides DOCS_SITE_DOCS_PATH)")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    search_parser = subparsers.add_parser("search", help="Ranked search over titles and content")
    search_parser.add_argument("query")

    quick_parser = subparsers.add_parser("quick", help="Title-only quick filter")
    quick_parser.add_argument("query")

    serve_parser = subparsers.add_parser("serve", help="Serve the content endpoint over HTTP")
    serve_parser.add_argument("--host", help="Bind host (overrides DOCS_SITE_HOST)")
    serve_parser.add_argument("--port", type=int, help="Bind port (overrides DOCS_SITE_PORT)")
    return parser.parse_args(argv)


def _load_items(loader: DocumentContentLoader) -> list[NavigationItem]:
    provider = ContentProvider(LocalContentSource(loader))
    return asyncio.run(provider.load())


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    settings = Settings.from_env()
    if args.docs:
        settings.docs_path = Path(args.docs)
    loader = DocumentContentLoader(settings.docs_path)

    if args.command == "serve":
        import uvicorn

        from docs_site_search.api import create_app

        host = args.host or settings.host
        port = args.port or settings.port
        logger.info("Serving search content from %s on %s:%d", settings.docs_path, host, port)
        uvicorn.run(create_app(loader), host=host, port=port)
        return 0

    items = _load_items(loader)
    if args.command == "quick":
        for item in quick_filter(args.query, items):
            print(f"{item.title}\t{item.url}")
        return 0

    results = SearchEngine().search(args.query, items)
    if not results:
        print("No results found")
        return 1
    for result in results:
        print(f"{result.score:>3}  {result.title} ({result.url})")
        print(f"     {' '.join(result.excerpt.split())}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
