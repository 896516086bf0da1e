from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

if TYPE_CHECKING:
    from .matching import MatchResult


class Recipe(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str = Field(..., min_length=1)
    name: str
    description: str
    image: str
    cook_time: int = Field(..., ge=0, description="Minutes")
    difficulty: str
    servings: int = Field(..., gt=0)
    category: str
    ingredients: tuple[str, ...] = Field(..., min_length=1)
    instructions: tuple[str, ...]


class RecipeMatchOut(Recipe):
    matched_ingredients: list[str]
    missing_ingredients: list[str]

    @classmethod
    def from_match(cls, match: MatchResult) -> RecipeMatchOut:
        return cls(
            **match.recipe.model_dump(),
            matched_ingredients=list(match.matched_ingredients),
            missing_ingredients=list(match.missing_ingredients),
        )


class ErrorResponse(BaseModel):
    error: str
