from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path

from pydantic import TypeAdapter

from ..config import DEFAULT_APP_CONFIG
from .models import Recipe

_RECIPE_LIST = TypeAdapter(list[Recipe])

_catalog: RecipeCatalog | None = None


class RecipeCatalog:
    """Read-only recipe table, kept in definition order."""

    def __init__(self, recipes: Iterable[Recipe]) -> None:
        self._recipes = tuple(recipes)
        self._by_id: dict[str, Recipe] = {}
        for recipe in self._recipes:
            if recipe.id in self._by_id:
                raise ValueError(f"Duplicate recipe id: {recipe.id!r}")
            self._by_id[recipe.id] = recipe

    def __len__(self) -> int:
        return len(self._recipes)

    def __iter__(self) -> Iterator[Recipe]:
        return iter(self._recipes)

    def list_all(self) -> tuple[Recipe, ...]:
        return self._recipes

    def find_by_id(self, recipe_id: str) -> Recipe | None:
        """Return the recipe with exactly this id, or ``None``."""
        return self._by_id.get(recipe_id)


def load_catalog(path: Path) -> RecipeCatalog:
    return RecipeCatalog(_RECIPE_LIST.validate_json(path.read_bytes()))


def get_catalog() -> RecipeCatalog:
    """Return the process-wide catalog, loading it on first call."""
    global _catalog
    if _catalog is None:
        _catalog = load_catalog(DEFAULT_APP_CONFIG.catalog_path)
    return _catalog
