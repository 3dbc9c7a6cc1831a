"""Content endpoint serving indexed navigation items."""

import logging
from typing import Any, Optional

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from docs_site_search.config import Settings
from docs_site_search.loader import DocumentContentLoader

logger = logging.getLogger(__name__)

CONTENT_ERROR = "Failed to load search content"


class NavItemModel(BaseModel):
    title: str
    url: str
    content: Optional[str] = None


class SearchContentResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    nav_items: list[NavItemModel] = Field(..., alias="navItems")
    success: bool = True


class ErrorResponse(BaseModel):
    error: str
    success: bool = False


def get_search_content(loader: DocumentContentLoader) -> dict[str, Any]:
    """Return the indexed navigation items as an endpoint payload.

    Args:
        loader: Loader for the documentation file.

    Returns:
        ``{"navItems": [...], "success": True}`` or an error payload with
        ``success`` set to False.
    """
    try:
        nav_items = loader.load()
    except Exception:
        logger.exception("Error in search content endpoint")
        return {"error": CONTENT_ERROR, "success": False}
    return {"navItems": [item.to_dict() for item in nav_items], "success": True}


def create_app(loader: DocumentContentLoader | None = None) -> FastAPI:
    """Create the HTTP app exposing the content endpoint.

    Args:
        loader: Loader to serve; built from environment settings when omitted.

    Returns:
        FastAPI application.
    """
    if loader is None:
        loader = DocumentContentLoader(Settings.from_env().docs_path)

    app = FastAPI(title="Documentation Search Content")

    @app.get("/api/health")
    def health() -> dict:
        return {"ok": True}

    @app.get(
        "/api/search-content",
        response_model=SearchContentResponse,
        response_model_exclude_none=True,
        responses={500: {"model": ErrorResponse}},
    )
    def search_content() -> Any:
        payload = get_search_content(loader)
        if not payload["success"]:
            return JSONResponse(status_code=500, content=ErrorResponse(error=payload["error"]).model_dump())
        return SearchContentResponse.model_validate(payload)

    return app
