"""Tests for the documentation content loader."""

import logging
from pathlib import Path

import pytest

from docs_site_search.loader import DocumentContentLoader
from docs_site_search.navigation import NAV_ITEMS, static_nav_items


@pytest.fixture
def docs_file(tmp_path: Path) -> Path:
    """Create a documentation file covering two pages.

    Args:
        tmp_path: Pytest temporary directory fixture.

    Returns:
        Path to the documentation file.
    """
    path = tmp_path / "DOCS.md"
    path.write_text(
        """# Introduction

CFS UI is the internal operations console.

# API Integration

Requests go through the shared Axios client.
""",
        encoding="utf-8",
    )
    return path


def test_load_enriches_nav_items(docs_file: Path) -> None:
    """Test loading content for matching pages."""
    loader = DocumentContentLoader(docs_file)

    items = loader.load()

    assert [item.url for item in items] == [item.url for item in NAV_ITEMS]
    by_url = {item.url: item for item in items}
    assert by_url["/"].content == "CFS UI is the internal operations console."
    assert by_url["/api-integration"].content == "Requests go through the shared Axios client."
    assert by_url["/custom-hooks"].content == ""


def test_load_missing_file_falls_back(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    """Test that a missing file yields the bare navigation list."""
    loader = DocumentContentLoader(tmp_path / "missing.md")

    with caplog.at_level(logging.ERROR):
        items = loader.load()

    assert items == static_nav_items()
    assert all(item.content is None for item in items)
    assert "Error reading documentation" in caplog.text


def test_load_invalid_encoding_falls_back(tmp_path: Path) -> None:
    """Test that an undecodable file yields the bare navigation list."""
    path = tmp_path / "DOCS.md"
    path.write_bytes(b"\xff\xfe# Intro")

    items = DocumentContentLoader(path).load()

    assert items == static_nav_items()


def test_load_reads_file_once(docs_file: Path) -> None:
    """Test that the result is cached after the first load."""
    loader = DocumentContentLoader(docs_file)
    first = loader.load()

    docs_file.unlink()
    second = loader.load()

    assert second == first
    assert second is not first


def test_load_custom_nav_items(tmp_path: Path) -> None:
    """Test enriching a caller supplied navigation list."""
    from docs_site_search.models import NavigationItem

    path = tmp_path / "DOCS.md"
    path.write_text("# Setup\nRun the install script first.\n", encoding="utf-8")
    loader = DocumentContentLoader(path, nav_items=[NavigationItem(title="Setup", url="/setup")])

    assert loader.load() == [NavigationItem(title="Setup", url="/setup", content="Run the install script first.")]
