from __future__ import annotations

import logging

from fastapi import Depends, FastAPI, Form, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import DEFAULT_APP_CONFIG
from .dependencies import get_recipe_catalog, get_request_log
from .diagnostics.request_log import RequestLog
from .errors import InvalidInput, RecipeFinderError, UnsupportedMethod
from .recipes.catalog import RecipeCatalog
from .recipes.details import get_recipe_details
from .recipes.matching import find_recipes_by_ingredients, parse_ingredients_payload
from .recipes.models import ErrorResponse, Recipe, RecipeMatchOut

logger = logging.getLogger(__name__)

app = FastAPI(title=DEFAULT_APP_CONFIG.title, version=DEFAULT_APP_CONFIG.version)
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(DEFAULT_APP_CONFIG.cors_origins),
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type"],
)
app.state.request_log = RequestLog(DEFAULT_APP_CONFIG.request_log_path)

# Messages for requests FastAPI rejects before the endpoint runs
_INVALID_REQUEST_MESSAGES = {
    "/find-recipes": "Invalid ingredients format",
    "/recipe-details": "Recipe ID is required",
}

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    405: {"model": ErrorResponse},
}


# ── Error handling ───────────────────────────────────────────────────────


def _error_response(
    request: Request,
    status_code: int,
    message: str,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    logger.warning("%s %s -> %d %s", request.method, request.url.path, status_code, message)
    request.app.state.request_log.record("error", {
        "method": request.method,
        "path": request.url.path,
        "status": status_code,
        "error": message,
    })
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
        headers=headers,
    )


@app.exception_handler(RecipeFinderError)
async def handle_recipe_error(request: Request, exc: RecipeFinderError) -> JSONResponse:
    return _error_response(request, exc.status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = _INVALID_REQUEST_MESSAGES.get(request.url.path, "Invalid request")
    return _error_response(request, InvalidInput.status_code, message)


@app.exception_handler(StarletteHTTPException)
async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Route-level verb mismatches surface here before any endpoint runs
    if exc.status_code == UnsupportedMethod.status_code:
        error = UnsupportedMethod()
        return _error_response(request, error.status_code, error.message, exc.headers)
    return _error_response(request, exc.status_code, str(exc.detail), exc.headers)


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/recipes", response_model=list[Recipe])
def list_recipes(catalog: RecipeCatalog = Depends(get_recipe_catalog)) -> list[Recipe]:
    return list(catalog.list_all())


@app.post(
    "/find-recipes",
    response_model=list[RecipeMatchOut],
    responses=_ERROR_RESPONSES,
)
def find_recipes(
    ingredients: str | None = Form(default=None),
    catalog: RecipeCatalog = Depends(get_recipe_catalog),
    request_log: RequestLog = Depends(get_request_log),
) -> list[RecipeMatchOut]:
    request_log.record("find_recipes", {"ingredients": ingredients})
    if ingredients is None:
        raise InvalidInput("No ingredients provided")

    query = parse_ingredients_payload(ingredients)
    matches = find_recipes_by_ingredients(query, catalog)

    request_log.record("find_recipes_result", {
        "query": query,
        "results_returned": len(matches),
        "recipe_ids": [m.recipe.id for m in matches],
    })
    return [RecipeMatchOut.from_match(m) for m in matches]


@app.get(
    "/recipe-details",
    response_model=Recipe,
    responses=_ERROR_RESPONSES,
)
def recipe_details(
    recipe_id: str | None = Query(default=None, alias="id"),
    catalog: RecipeCatalog = Depends(get_recipe_catalog),
    request_log: RequestLog = Depends(get_request_log),
) -> Recipe:
    request_log.record("recipe_details", {"id": recipe_id})
    if recipe_id is None:
        raise InvalidInput("Recipe ID is required")

    recipe = get_recipe_details(recipe_id, catalog)
    request_log.record("recipe_details_result", {"id": recipe.id, "name": recipe.name})
    return recipe
