from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from recipe_finder.app import app
from recipe_finder.diagnostics.request_log import RequestLog
from recipe_finder.recipes.catalog import RecipeCatalog
from recipe_finder.recipes.models import Recipe


def make_recipe(recipe_id: str, ingredients: list[str], **overrides) -> Recipe:
    fields = {
        "id": recipe_id,
        "name": f"Recipe {recipe_id}",
        "description": "",
        "image": "/placeholder.svg",
        "cook_time": 10,
        "difficulty": "Easy",
        "servings": 1,
        "category": "Test",
        "ingredients": tuple(ingredients),
        "instructions": ("Cook.",),
    }
    fields.update(overrides)
    return Recipe(**fields)


def read_entries(path: Path) -> list[dict[str, Any]]:
    """Parse a request log file back into a list of entries."""
    if not path.exists():
        return []
    with path.open(encoding="utf-8") as fh:
        return [json.loads(line) for line in fh if line.strip()]


@pytest.fixture
def small_catalog() -> RecipeCatalog:
    return RecipeCatalog([
        make_recipe("a", ["egg", "flour"]),
        make_recipe("b", ["eggs", "milk", "flour", "sugar"]),
        make_recipe("c", ["tofu"]),
    ])


@pytest.fixture
def request_log_path(tmp_path: Path):
    previous = app.state.request_log
    path = tmp_path / "requests.log"
    app.state.request_log = RequestLog(path)
    yield path
    app.state.request_log = previous
