"""
Ingredient matching and ranking.

A recipe ingredient counts as "on hand" when it and any query ingredient
contain one another, ignoring case. The rule is intentionally loose:
"rice" matches "basmati rice", and "rice" also matches "ice" because the
query contains the recipe ingredient. Recipes are ranked by the share of
their ingredients on hand, then by how few are missing.
"""
from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from pydantic import TypeAdapter, ValidationError

from ..errors import InvalidInput
from .catalog import RecipeCatalog
from .models import Recipe

logger = logging.getLogger(__name__)

MAX_RESULTS = 8

_INGREDIENT_LIST = TypeAdapter(list[str])


@dataclass(frozen=True)
class MatchResult:
    recipe: Recipe
    matched_ingredients: tuple[str, ...]
    missing_ingredients: tuple[str, ...]

    @property
    def match_ratio(self) -> float:
        return len(self.matched_ingredients) / len(self.recipe.ingredients)

    @property
    def missing_count(self) -> int:
        return len(self.missing_ingredients)


def contains_match(recipe_ingredient: str, query: str) -> bool:
    """True if either string contains the other, case-insensitively."""
    a = recipe_ingredient.lower()
    b = query.lower()
    return b in a or a in b


def match_recipe(recipe: Recipe, query: Sequence[str]) -> MatchResult | None:
    """Split the recipe's ingredients into matched/missing; ``None`` if nothing matched."""
    matched: list[str] = []
    missing: list[str] = []
    for ingredient in recipe.ingredients:
        if any(contains_match(ingredient, q) for q in query):
            matched.append(ingredient)
        else:
            missing.append(ingredient)

    if not matched:
        return None
    return MatchResult(recipe, tuple(matched), tuple(missing))


def _rank_key(match: MatchResult) -> tuple[float, int]:
    return (-match.match_ratio, match.missing_count)


def find_recipes_by_ingredients(
    query: Sequence[str],
    catalog: RecipeCatalog,
    *,
    limit: int = MAX_RESULTS,
) -> list[MatchResult]:
    """
    Return up to ``limit`` recipes that use at least one of ``query``.

    Query strings are used as given; callers normalise them. An empty
    query is rejected with ``InvalidInput``, while a query that matches
    nothing yields an empty list.
    """
    if not query:
        raise InvalidInput("No ingredients provided")

    matches: list[MatchResult] = []
    for recipe in catalog:
        match = match_recipe(recipe, query)
        if match is not None:
            matches.append(match)

    # sorted() is stable, so ties keep catalog order
    ranked = sorted(matches, key=_rank_key)
    logger.debug("Matched %d of %d recipes for %d ingredients", len(matches), len(catalog), len(query))
    return ranked[:limit]


def parse_ingredients_payload(raw: str) -> list[str]:
    """Decode the ``ingredients`` form field: a non-empty JSON array of strings."""
    try:
        ingredients = _INGREDIENT_LIST.validate_json(raw)
    except ValidationError:
        raise InvalidInput("Invalid ingredients format") from None
    if not ingredients:
        raise InvalidInput("Invalid ingredients format")
    return ingredients
