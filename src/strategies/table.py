"""Strategy Table - the per-model behavior the agents dispatch on.

One ModelStrategy per model slug bundles its builder, detector, rewriter
and technique labels. Agents never branch on the model themselves; they
look the strategy up here.
"""

from dataclasses import dataclass
from typing import Final

from src.schemas.enums import ModelSlug, enum_value
from src.strategies.builders import (
    PromptBuilder,
    build_claude_prompt,
    build_gemini_prompt,
    build_gpt_prompt,
    build_grok_aurora_prompt,
    build_grok_imagine_prompt,
    build_grok_prompt,
    build_nano_banana_prompt,
    build_perplexity_prompt,
)
from src.strategies.detectors import (
    IssueDetector,
    detect_claude_issues,
    detect_gemini_issues,
    detect_gpt_issues,
    detect_grok_visual_issues,
    detect_length_only,
    detect_nano_banana_issues,
    detect_perplexity_issues,
)
from src.strategies.rewriters import (
    PromptRewriter,
    rewrite_claude_prompt,
    rewrite_gemini_prompt,
    rewrite_gpt_prompt,
    rewrite_identity,
    rewrite_perplexity_prompt,
)


@dataclass(frozen=True)
class ModelStrategy:
    """Everything model-specific about generating and optimizing prompts.

    Attributes:
        build: Renders a PromptSpec at a given version
        detect_issues: Finds defects in an existing prompt
        rewrite: Applies deterministic fixes to an existing prompt
        techniques: Labels of the techniques the builder always applies
    """

    build: PromptBuilder
    detect_issues: IssueDetector
    rewrite: PromptRewriter
    techniques: tuple[str, ...]


STRATEGIES: Final[dict[str, ModelStrategy]] = {
    ModelSlug.CLAUDE.value: ModelStrategy(
        build=build_claude_prompt,
        detect_issues=detect_claude_issues,
        rewrite=rewrite_claude_prompt,
        techniques=("XML tags for structure",),
    ),
    ModelSlug.GPT.value: ModelStrategy(
        build=build_gpt_prompt,
        detect_issues=detect_gpt_issues,
        rewrite=rewrite_gpt_prompt,
        techniques=("Role-based prompting", "Markdown structure"),
    ),
    ModelSlug.GROK.value: ModelStrategy(
        build=build_grok_prompt,
        detect_issues=detect_length_only,
        rewrite=rewrite_identity,
        techniques=("Goal-first structure", "Iterative refinement"),
    ),
    ModelSlug.GEMINI.value: ModelStrategy(
        build=build_gemini_prompt,
        detect_issues=detect_gemini_issues,
        rewrite=rewrite_gemini_prompt,
        techniques=("Shortened prompt (30-50% less)", "Critical instructions at end"),
    ),
    ModelSlug.PERPLEXITY.value: ModelStrategy(
        build=build_perplexity_prompt,
        detect_issues=detect_perplexity_issues,
        rewrite=rewrite_perplexity_prompt,
        techniques=("Search-style query", "Source and time-range scoping"),
    ),
    ModelSlug.NANO_BANANA.value: ModelStrategy(
        build=build_nano_banana_prompt,
        detect_issues=detect_nano_banana_issues,
        rewrite=rewrite_identity,
        techniques=("Natural-language scene description",),
    ),
    ModelSlug.GROK_AURORA.value: ModelStrategy(
        build=build_grok_aurora_prompt,
        detect_issues=detect_grok_visual_issues,
        rewrite=rewrite_identity,
        techniques=("Subject-first description", "Photographic vocabulary"),
    ),
    ModelSlug.GROK_IMAGINE.value: ModelStrategy(
        build=build_grok_imagine_prompt,
        detect_issues=detect_grok_visual_issues,
        rewrite=rewrite_identity,
        techniques=("Subject + motion + camera layout",),
    ),
}


def get_strategy(slug: str) -> ModelStrategy:
    """Get the strategy registered for a model.

    Args:
        slug: Model slug

    Returns:
        The model's ModelStrategy

    Raises:
        KeyError: If no strategy is registered for the slug
    """
    key = enum_value(slug)
    if key not in STRATEGIES:
        available = ", ".join(sorted(STRATEGIES)) or "none"
        raise KeyError(f"Strategy '{key}' not registered. Available strategies: {available}")
    return STRATEGIES[key]


def list_strategies() -> list[str]:
    """List the slugs that have a strategy, sorted."""
    return sorted(STRATEGIES)
