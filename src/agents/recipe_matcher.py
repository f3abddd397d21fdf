"""Recipe Matcher - free-text input to catalog recipes.

Scores every recipe in the catalog against the user's text by keyword
presence. Longer keywords are more specific and weigh more.

Scoring:
    raw   = sum(len(keyword) / 10 for matched keywords)
    max   = sum(len(keyword) / 10 for all of the recipe's keywords)
    bonus = min(matched_count * 0.1, 0.3)
    score = min(raw / max + bonus, 1.0)

Inputs with fewer than 3 non-whitespace characters never match.

Example:
    >>> match = match_recipe("Please review this code for bugs")
    >>> match.recipe.slug.value
    'code-review'
"""

from typing import Final, Optional

from src.agents.recipes import RECIPES
from src.schemas.enums import enum_value
from src.schemas.recipes import Recipe, RecipeMatch
from src.utils.config import get_settings
from src.utils.logging_config import get_logger

MIN_INPUT_CHARS: Final = 3
BEST_MATCH_THRESHOLD: Final = 0.1
KEYWORD_WEIGHT_DIVISOR: Final = 10
MULTI_MATCH_STEP: Final = 0.1
MULTI_MATCH_CAP: Final = 0.3


def _get_logger():
    """Get logger lazily to avoid configuring logging at import time."""
    return get_logger(__name__)


def _has_enough_text(text: str) -> bool:
    return len("".join(text.split())) >= MIN_INPUT_CHARS


def calculate_match_score(text: str, recipe: Recipe) -> tuple[float, tuple[str, ...]]:
    """Score a recipe against free text.

    Args:
        text: User input
        recipe: Recipe to score

    Returns:
        Tuple of (score in [0, 1], matched keywords in catalog order)

    Examples:
        >>> from src.agents.recipes import RECIPES
        >>> score, matched = calculate_match_score("translate this", RECIPES["translation"])
        >>> matched
        ('translate',)
    """
    normalized = text.lower().strip()
    matched = tuple(keyword for keyword in recipe.keywords if keyword.lower() in normalized)

    score = sum(len(keyword) / KEYWORD_WEIGHT_DIVISOR for keyword in matched)
    max_score = sum(len(keyword) / KEYWORD_WEIGHT_DIVISOR for keyword in recipe.keywords)
    normalized_score = score / max_score if max_score > 0 else 0.0
    bonus = min(len(matched) * MULTI_MATCH_STEP, MULTI_MATCH_CAP)

    return min(normalized_score + bonus, 1.0), matched


def _score_all(text: str) -> list[RecipeMatch]:
    matches = []
    for recipe in RECIPES.values():
        score, matched = calculate_match_score(text, recipe)
        if matched:
            matches.append(RecipeMatch(recipe=recipe, confidence=score, matched_keywords=matched))
    return matches


def match_recipe(text: str) -> Optional[RecipeMatch]:
    """Find the best recipe for free text.

    Args:
        text: User input

    Returns:
        Highest-scoring match with confidence above 0.1, or None when the
        input is too short or nothing scores high enough. Ties keep catalog
        order.
    """
    if not text or not _has_enough_text(text):
        return None

    candidates = [m for m in _score_all(text) if m.confidence > BEST_MATCH_THRESHOLD]
    if not candidates:
        _get_logger().debug("No recipe matched input of %d characters", len(text))
        return None

    best = max(candidates, key=lambda m: m.confidence)
    _get_logger().debug(
        "Matched recipe %s (confidence %.3f, keywords %s)",
        best.recipe.slug.value,
        best.confidence,
        ", ".join(best.matched_keywords),
    )
    return best


def find_matching_recipes(text: str, threshold: Optional[float] = None) -> list[RecipeMatch]:
    """Find every recipe scoring at least the threshold.

    Args:
        text: User input
        threshold: Minimum confidence; defaults to Settings.RECIPE_MATCH_THRESHOLD

    Returns:
        Matches sorted by descending confidence; ties keep catalog order
    """
    if not text or not _has_enough_text(text):
        return []

    if threshold is None:
        threshold = get_settings().RECIPE_MATCH_THRESHOLD

    matches = [m for m in _score_all(text) if m.confidence >= threshold]
    # sorted() is stable, so equal scores stay in catalog order
    return sorted(matches, key=lambda m: m.confidence, reverse=True)


def get_all_recipes() -> list[Recipe]:
    """List every recipe in catalog order."""
    return list(RECIPES.values())


def get_recipe_by_slug(slug: str) -> Optional[Recipe]:
    """Get a recipe by slug, or None if it is not catalogued."""
    return RECIPES.get(enum_value(slug))


def get_recipes_by_model(model: str) -> list[Recipe]:
    """List recipes whose default or alternative model is the given one."""
    key = enum_value(model)
    return [
        recipe
        for recipe in RECIPES.values()
        if recipe.default_model.value == key
        or any(alternative.value == key for alternative in recipe.alternative_models)
    ]
