from __future__ import annotations

from fastapi import Request

from .diagnostics.request_log import RequestLog
from .recipes.catalog import RecipeCatalog, get_catalog


def get_recipe_catalog() -> RecipeCatalog:
    return get_catalog()


def get_request_log(request: Request) -> RequestLog:
    """Return the request log held on ``app.state``."""
    return request.app.state.request_log
