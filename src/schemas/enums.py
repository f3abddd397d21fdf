"""Enumerations shared by the engine and its boundary.

All enums mix in ``str`` so members compare equal to their slug and
serialize as plain strings.
"""

from enum import Enum


class ModelSlug(str, Enum):
    """Supported AI models."""

    CLAUDE = "claude-4.5"
    GPT = "gpt-5.2"
    GROK = "grok-4.1"
    GEMINI = "gemini-3-pro"
    NANO_BANANA = "nano-banana"
    GROK_AURORA = "grok-aurora"
    GROK_IMAGINE = "grok-imagine"
    PERPLEXITY = "perplexity-pro"


class ModelCategory(str, Enum):
    """Kind of output a model produces."""

    LLM = "llm"
    IMAGE = "image"
    VIDEO = "video"
    SEARCH = "search"


class TaskType(str, Enum):
    """Category of the user's goal."""

    CODE_GENERATION = "code-generation"
    CODE_REVIEW = "code-review"
    ANALYSIS = "analysis"
    CREATIVE_WRITING = "creative-writing"
    TRANSLATION = "translation"
    SUMMARIZATION = "summarization"
    SYSTEM_PROMPT = "system-prompt"
    IMAGE_GENERATION = "image-generation"
    VIDEO_GENERATION = "video-generation"
    RESEARCH = "research"
    GENERAL = "general"


class ToneType(str, Enum):
    """Requested tone of the generated prompt."""

    FORMAL = "formal"
    CASUAL = "casual"
    TECHNICAL = "technical"
    CONCISE = "concise"


class VersionKind(str, Enum):
    """Level of detail of a generated prompt variant.

    Attributes:
        EXTENDED: Every section the strategy knows about
        STANDARD: The core sections
        MINIMAL: Little more than the goal itself
    """

    EXTENDED = "extended"
    STANDARD = "standard"
    MINIMAL = "minimal"


class IssueSeverity(str, Enum):
    """Severity of a detected prompt issue."""

    CRITICAL = "critical"
    WARNING = "warning"
    SUGGESTION = "suggestion"


class ChangeKind(str, Enum):
    """What a rewrite step did to the prompt."""

    ADDED = "added"
    REMOVED = "removed"
    MODIFIED = "modified"


class RecipeSlug(str, Enum):
    """Catalogued task recipes."""

    CODE_REVIEW = "code-review"
    SYSTEM_PROMPT = "system-prompt"
    IMAGE_GENERATION = "image-generation"
    RESEARCH = "research"
    VIDEO_GENERATION = "video-generation"
    PORTRAIT = "portrait"
    TRANSLATION = "translation"
    SUMMARIZATION = "summarization"
    DEBUGGING = "debugging"
    FACT_CHECK = "fact-check"


def enum_value(value: "str | Enum") -> str:
    """Return the plain string behind an enum member (or the string itself).

    Registries are keyed by plain strings: ``str`` enums compare equal to
    their value but do not hash like it.

    Examples:
        >>> enum_value(ModelSlug.CLAUDE)
        'claude-4.5'
        >>> enum_value("gpt-5.2")
        'gpt-5.2'
    """
    return value.value if isinstance(value, Enum) else value
