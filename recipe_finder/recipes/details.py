from __future__ import annotations

from ..errors import NotFound
from .catalog import RecipeCatalog, get_catalog
from .models import Recipe


def get_recipe_details(recipe_id: str, catalog: RecipeCatalog | None = None) -> Recipe:
    """Return the catalog record for ``recipe_id`` unmodified, or raise ``NotFound``."""
    if catalog is None:
        catalog = get_catalog()
    recipe = catalog.find_by_id(recipe_id)
    if recipe is None:
        raise NotFound("Recipe not found")
    return recipe
