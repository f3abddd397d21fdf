"""Recipe catalog and match models."""

from typing import Optional

from pydantic import Field

from src.schemas.base import EngineModel
from src.schemas.enums import ModelSlug, RecipeSlug


class Recipe(EngineModel):
    """A reusable task template with keywords for free-text matching.

    Attributes:
        slug: Catalog key
        name: Display name
        description: What the recipe helps with
        default_model: Recommended model
        alternative_models: Other suitable models
        keywords: Lowercase phrases matched as substrings of user input
        follow_up_questions: Questions that fill in the template
        template: Fill-in-the-blank prompt, if the recipe has one
    """

    slug: RecipeSlug
    name: str
    description: str
    default_model: ModelSlug
    alternative_models: tuple[ModelSlug, ...] = ()
    keywords: tuple[str, ...]
    follow_up_questions: tuple[str, ...] = ()
    template: Optional[str] = None


class RecipeMatch(EngineModel):
    """A recipe scored against user input.

    Attributes:
        recipe: Matched recipe
        confidence: Score in [0, 1]
        matched_keywords: Keywords found in the input, in catalog order
    """

    recipe: Recipe
    confidence: float = Field(..., ge=0.0, le=1.0)
    matched_keywords: tuple[str, ...]
