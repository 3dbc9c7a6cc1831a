"""Runtime settings for documentation site search."""

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_DOCS_PATH = Path("DOCS.md")
DEFAULT_DEBOUNCE_MS = 300
DEFAULT_BLUR_GRACE_MS = 200
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000


def _int_from_env(name: str, default: int) -> int:
    """Read a non-negative integer environment variable.

    Args:
        name: Environment variable name.
        default: Value used when the variable is unset or empty.

    Returns:
        Parsed integer.

    Raises:
        ValueError: If the value is not a non-negative integer.
    """
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        msg = f"{name} must be an integer, got {raw!r}"
        raise ValueError(msg) from None
    if value < 0:
        msg = f"{name} must not be negative, got {value}"
        raise ValueError(msg)
    return value


@dataclass
class Settings:
    """Settings for the loader, controllers and HTTP endpoint."""

    docs_path: Path = DEFAULT_DOCS_PATH
    debounce_ms: int = DEFAULT_DEBOUNCE_MS
    blur_grace_ms: int = DEFAULT_BLUR_GRACE_MS
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT

    @property
    def debounce_seconds(self) -> float:
        return self.debounce_ms / 1000

    @property
    def blur_grace_seconds(self) -> float:
        return self.blur_grace_ms / 1000

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from ``DOCS_SITE_*`` environment variables.

        Returns:
            Settings instance with defaults for unset variables.
        """
        docs_path = os.getenv("DOCS_SITE_DOCS_PATH")
        return cls(
            docs_path=Path(docs_path) if docs_path else DEFAULT_DOCS_PATH,
            debounce_ms=_int_from_env("DOCS_SITE_DEBOUNCE_MS", DEFAULT_DEBOUNCE_MS),
            blur_grace_ms=_int_from_env("DOCS_SITE_BLUR_GRACE_MS", DEFAULT_BLUR_GRACE_MS),
            host=os.getenv("DOCS_SITE_HOST") or DEFAULT_HOST,
            port=_int_from_env("DOCS_SITE_PORT", DEFAULT_PORT),
        )
