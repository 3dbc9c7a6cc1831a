"""Headless controllers for the sidebar and full search boxes.

The page layer forwards input, focus and key events to a controller and
renders its ``query``, ``is_open``, ``active_index`` and ``results``.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from typing import Generic, TypeVar

from docs_site_search.config import DEFAULT_BLUR_GRACE_MS, DEFAULT_DEBOUNCE_MS
from docs_site_search.debounce import Debouncer
from docs_site_search.models import NavigationItem, SearchResult
from docs_site_search.navigation import static_nav_items
from docs_site_search.provider import ContentProvider
from docs_site_search.search import SearchEngine, quick_filter

logger = logging.getLogger(__name__)

KEY_DOWN = "ArrowDown"
KEY_UP = "ArrowUp"
KEY_ENTER = "Enter"
KEY_ESCAPE = "Escape"

SHORTCUT_KEY = "k"
SHORTCUT_KEYMAP = "ctrl+k"

_KEY_LABELS = {
    "cmd": "⌘",
    "command": "⌘",
    "meta": "⌘",
    "ctrl": "Ctrl",
    "alt": "Alt",
    "shift": "Shift",
    "esc": "Esc",
    "tab": "Tab",
    "enter": "Enter",
    "space": "Space",
    "up": "↑",
    "down": "↓",
}


def format_keymap(keymap: str) -> str:
    """Render a keymap such as ``ctrl+k`` for display as ``Ctrl+K``."""
    return "+".join(_KEY_LABELS.get(key.lower(), key.upper()) for key in keymap.split("+"))


ResultT = TypeVar("ResultT", NavigationItem, SearchResult)


class _SearchBoxController(ABC, Generic[ResultT]):
    """Dropdown, highlight and keyboard handling shared by both search boxes."""

    def __init__(
        self,
        navigate: Callable[[str], None],
        focus_input: Callable[[], None] | None = None,
        blur_input: Callable[[], None] | None = None,
        blur_grace_ms: int = DEFAULT_BLUR_GRACE_MS,
    ) -> None:
        self.navigate = navigate
        self.focus_input = focus_input or (lambda: None)
        self.blur_input = blur_input or (lambda: None)
        self.query = ""
        self.is_open = False
        self.active_index = -1
        self._blur_timer = Debouncer(blur_grace_ms / 1000)

    @property
    @abstractmethod
    def results(self) -> Sequence[ResultT]: ...

    @property
    def show_empty_state(self) -> bool:
        """True when the open dropdown should say "No results found"."""
        return self.is_open and bool(self.query) and not self.results

    @abstractmethod
    def on_input(self, value: str) -> None: ...

    def on_focus(self) -> None:
        self._blur_timer.cancel()
        self.is_open = bool(self.query)

    def on_blur(self) -> None:
        """Close the dropdown after the grace delay so a click can still select.

        Without a running event loop there is no timer, so it closes at once.
        """
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            self.close()
        else:
            self._blur_timer.call(self.close)

    def close(self) -> None:
        self.is_open = False

    def clear(self) -> None:
        """Empty the query, close the dropdown and keep focus in the input."""
        self._reset()
        self.focus_input()

    def select(self, result: ResultT) -> None:
        """Navigate to a result, then reset the search box.

        Args:
            result: Chosen result, by click or keyboard.
        """
        logger.debug("Navigating to %s", result.url)
        self.navigate(result.url)
        self._reset()

    def handle_key(self, key: str) -> bool:
        """Handle a key press inside the search input.

        Args:
            key: Key name as reported by the input, e.g. ``ArrowDown``.

        Returns:
            True if the default action for the key should be prevented.
        """
        results = self.results
        if key == KEY_DOWN:
            if self.active_index < len(results) - 1:
                self.active_index += 1
            return True
        if key == KEY_UP:
            self.active_index = self.active_index - 1 if self.active_index > 0 else 0
            return True
        if key == KEY_ENTER and self.active_index >= 0:
            if self.active_index < len(results):
                self.select(results[self.active_index])
            return True
        if key == KEY_ESCAPE:
            self.is_open = False
            self.blur_input()
        return False

    def handle_global_key(self, key: str, *, ctrl: bool = False, meta: bool = False) -> bool:
        """Focus the input on Ctrl+K or Meta+K from anywhere on the page.

        Args:
            key: Key name of the document-level key press.
            ctrl: Whether Ctrl was held.
            meta: Whether Meta (Cmd) was held.

        Returns:
            True if the shortcut was handled and the default action must be prevented.
        """
        if (ctrl or meta) and key.lower() == SHORTCUT_KEY:
            self.focus_input()
            return True
        return False

    def _reset(self) -> None:
        self.query = ""
        self.is_open = False
        self.active_index = -1


class QuickFilterController(_SearchBoxController[NavigationItem]):
    """Sidebar search box filtering page titles on every keystroke."""

    def __init__(
        self,
        provider: ContentProvider,
        navigate: Callable[[str], None],
        focus_input: Callable[[], None] | None = None,
        blur_input: Callable[[], None] | None = None,
        blur_grace_ms: int = DEFAULT_BLUR_GRACE_MS,
    ) -> None:
        super().__init__(navigate, focus_input, blur_input, blur_grace_ms)
        self.provider = provider

    @property
    def results(self) -> list[NavigationItem]:
        items, _ = self.provider.get_nav_items()
        return quick_filter(self.query, items or static_nav_items())

    def on_input(self, value: str) -> None:
        self.query = value
        self.is_open = bool(value)
        self.active_index = -1


class SearchController(_SearchBoxController[SearchResult]):
    """Full search box running scored searches once typing pauses."""

    def __init__(
        self,
        provider: ContentProvider,
        navigate: Callable[[str], None],
        engine: SearchEngine | None = None,
        debounce_ms: int = DEFAULT_DEBOUNCE_MS,
        focus_input: Callable[[], None] | None = None,
        blur_input: Callable[[], None] | None = None,
        blur_grace_ms: int = DEFAULT_BLUR_GRACE_MS,
    ) -> None:
        super().__init__(navigate, focus_input, blur_input, blur_grace_ms)
        self.provider = provider
        self.engine = engine or SearchEngine()
        self.debouncer = Debouncer(debounce_ms / 1000)
        self._results: list[SearchResult] = []

    @property
    def results(self) -> list[SearchResult]:
        return self._results

    @property
    def is_searching(self) -> bool:
        return self.debouncer.pending

    def on_input(self, value: str) -> None:
        """Record the query now and search once the input is quiet.

        Must be called from inside a running event loop.

        Args:
            value: Current input value.
        """
        self.query = value
        self.active_index = -1
        self.debouncer.call(self._run_search, value)

    def _run_search(self, query: str) -> None:
        if not query:
            self._results = []
            self.is_open = False
            return
        items, is_loading = self.provider.get_nav_items()
        if is_loading:
            logger.debug("Searching titles only while content loads")
        self._results = self.engine.search(query, items)
        self.is_open = True

    def _reset(self) -> None:
        self.debouncer.cancel()
        self._results = []
        super()._reset()
