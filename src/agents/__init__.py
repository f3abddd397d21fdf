"""Agent modules for prompt engineering.

This package contains the engines that generate, optimize and match prompts.
"""

from src.agents.prompt_generator import (
    estimate_tokens,
    generate_from_request,
    generate_prompt,
    generate_single_version,
    infer_task_type,
)
from src.agents.prompt_optimizer import analyze_prompt, optimize_from_request, optimize_prompt
from src.agents.recipe_matcher import (
    calculate_match_score,
    find_matching_recipes,
    get_all_recipes,
    get_recipe_by_slug,
    get_recipes_by_model,
    match_recipe,
)
from src.agents.recipes import RECIPES

__all__ = [
    "generate_prompt",
    "generate_from_request",
    "generate_single_version",
    "infer_task_type",
    "estimate_tokens",
    "optimize_prompt",
    "optimize_from_request",
    "analyze_prompt",
    "match_recipe",
    "find_matching_recipes",
    "calculate_match_score",
    "get_all_recipes",
    "get_recipe_by_slug",
    "get_recipes_by_model",
    "RECIPES",
]
