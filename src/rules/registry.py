"""Model Registry - static descriptors of the supported AI models.

Eight fixed entries keyed by slug. Each model points to exactly one
knowledge document; Grok Aurora (image) and Grok Imagine (video) share
theirs.

The cross-model comparison table is static data as well: no caching,
no I/O.
"""

from dataclasses import dataclass
from typing import Final, Optional

from src.schemas.enums import ModelCategory, ModelSlug, enum_value


@dataclass(frozen=True)
class ModelDescriptor:
    """Immutable description of a supported model.

    Attributes:
        slug: Registry key
        name: Display name
        producer: Company behind the model
        category: llm, image, video or search
        specialization: What the model is best at
        document: Knowledge document file name, relative to the knowledge directory
    """

    slug: ModelSlug
    name: str
    producer: str
    category: ModelCategory
    specialization: str
    document: str


MODEL_REGISTRY: Final[dict[str, ModelDescriptor]] = {
    descriptor.slug.value: descriptor
    for descriptor in (
        ModelDescriptor(
            slug=ModelSlug.CLAUDE,
            name="Claude 4.5 Opus/Sonnet",
            producer="Anthropic",
            category=ModelCategory.LLM,
            specialization="Highest quality, complex tasks",
            document="claude-4.md",
        ),
        ModelDescriptor(
            slug=ModelSlug.GPT,
            name="ChatGPT 5.2",
            producer="OpenAI",
            category=ModelCategory.LLM,
            specialization="Precise, multi-step",
            document="gpt-5.md",
        ),
        ModelDescriptor(
            slug=ModelSlug.GROK,
            name="Grok 4.1",
            producer="xAI",
            category=ModelCategory.LLM,
            specialization="Current information, iterative",
            document="grok-4.md",
        ),
        ModelDescriptor(
            slug=ModelSlug.GEMINI,
            name="Gemini 3 Pro",
            producer="Google",
            category=ModelCategory.LLM,
            specialization="Multimodal, long context",
            document="gemini-3.md",
        ),
        ModelDescriptor(
            slug=ModelSlug.NANO_BANANA,
            name="Nano Banana 2.5",
            producer="Google DeepMind",
            category=ModelCategory.IMAGE,
            specialization="Image generation and editing",
            document="nano-banana.md",
        ),
        ModelDescriptor(
            slug=ModelSlug.GROK_AURORA,
            name="Grok Aurora",
            producer="xAI",
            category=ModelCategory.IMAGE,
            specialization="Photorealism, text in images",
            document="grok-aurora.md",
        ),
        ModelDescriptor(
            slug=ModelSlug.GROK_IMAGINE,
            name="Grok Imagine",
            producer="xAI",
            category=ModelCategory.VIDEO,
            specialization="6-15 s video clips with audio",
            document="grok-aurora.md",  # shared with grok-aurora
        ),
        ModelDescriptor(
            slug=ModelSlug.PERPLEXITY,
            name="Perplexity Pro",
            producer="Perplexity AI",
            category=ModelCategory.SEARCH,
            specialization="Search + Deep Research",
            document="perplexity-pro.md",
        ),
    )
}

MODEL_COMPARISON: Final[dict[str, dict[str, str]]] = {
    "literalness": {
        "claude-4.5": "Very high",
        "gpt-5.2": "High",
        "grok-4.1": "Medium",
        "gemini-3-pro": "High",
        "nano-banana": "N/A",
        "grok-aurora": "N/A",
        "grok-imagine": "N/A",
        "perplexity-pro": "High",
    },
    "structure": {
        "claude-4.5": "XML tags",
        "gpt-5.2": "Markdown",
        "grok-4.1": "Markdown/XML",
        "gemini-3-pro": "Role+Goal+Constraints",
        "nano-banana": "Natural description",
        "grok-aurora": "Subject-first",
        "grok-imagine": "Subject+Motion",
        "perplexity-pro": "Search query",
    },
    "temperature": {
        "claude-4.5": "Default",
        "gpt-5.2": "Default",
        "grok-4.1": "Default",
        "gemini-3-pro": "1.0 (DO NOT CHANGE!)",
        "nano-banana": "N/A",
        "grok-aurora": "N/A",
        "grok-imagine": "N/A",
        "perplexity-pro": "N/A",
    },
}


def is_valid_model(slug: str) -> bool:
    """Check whether a slug names a registered model."""
    return isinstance(slug, str) and enum_value(slug) in MODEL_REGISTRY


def get_model_info(slug: str) -> Optional[ModelDescriptor]:
    """Get the descriptor for a slug, or None if it is not registered."""
    if not isinstance(slug, str):
        return None
    return MODEL_REGISTRY.get(enum_value(slug))


def get_all_models() -> list[ModelDescriptor]:
    """Get all registered models in registry order."""
    return list(MODEL_REGISTRY.values())


def get_models_by_category(category: str) -> list[ModelDescriptor]:
    """Get registered models of one category, in registry order."""
    return [m for m in MODEL_REGISTRY.values() if m.category == category]


def get_comparison_table() -> dict[str, dict[str, str]]:
    """Get the cross-model quick reference, attribute -> model slug -> text.

    Returns a fresh copy; callers may mutate it freely.
    """
    return {attribute: dict(values) for attribute, values in MODEL_COMPARISON.items()}
