"""FastAPI dependencies for the catalog and query dispatcher."""

from __future__ import annotations

from collections.abc import AsyncGenerator

from sopassist.agents.backend import GeminiBackend
from sopassist.agents.dispatcher import QueryDispatcher
from sopassist.catalog.lookup import Catalog, default_catalog
from sopassist.core.config import settings


def get_catalog() -> Catalog:
    return default_catalog


async def get_dispatcher() -> AsyncGenerator[QueryDispatcher, None]:
    """FastAPI dependency that yields a dispatcher bound to the configured Gemini key."""
    dispatcher = QueryDispatcher(GeminiBackend(api_key=settings.gemini_api_key))
    try:
        yield dispatcher
    finally:
        await dispatcher.aclose()
