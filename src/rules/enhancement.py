"""Rule Enhancement - mandatory per-model rules added after parsing.

Knowledge documents are hand-written and may omit rules the engine relies
on. Each model has a fixed list of mandatory entries; an entry is appended
to ``avoid`` or ``tips`` only when no existing entry of that list already
mentions one of its keywords (case-insensitive substring, English and
Polish).

Enhancement is additive and idempotent: parsed content is never removed or
edited, and enhancing an already enhanced result changes nothing.
"""

from dataclasses import dataclass, replace
from typing import Final, Literal

from src.knowledge.parser import ExtractedRules
from src.schemas.enums import ModelSlug, enum_value


@dataclass(frozen=True)
class MandatoryRule:
    """A rule that must be present in one list of a model's rules.

    Attributes:
        target: Which list receives the rule
        keywords: Any of these (lowercase) in an existing entry counts as present
        text: Rule appended when none of the keywords is found
    """

    target: Literal["avoid", "tips"]
    keywords: tuple[str, ...]
    text: str


_GROK_VISUAL_RULES: Final[tuple[MandatoryRule, ...]] = (
    MandatoryRule(
        target="tips",
        keywords=("600-700",),
        text="Optimal prompt length: 600-700 characters",
    ),
    MandatoryRule(
        target="avoid",
        keywords=("hand", "rąk", "dłoni"),
        text="Avoid hands in the frame; they are often distorted",
    ),
)

MANDATORY_RULES: Final[dict[str, tuple[MandatoryRule, ...]]] = {
    ModelSlug.CLAUDE.value: (
        MandatoryRule(
            target="avoid",
            keywords=("think",),
            text=(
                'Avoid the word "think" without extended thinking; '
                'use "consider", "evaluate" or "assess"'
            ),
        ),
        MandatoryRule(
            target="tips",
            keywords=("xml",),
            text="Use XML tags for structure (<task>, <context>, <output_format>)",
        ),
    ),
    ModelSlug.GEMINI.value: (
        MandatoryRule(
            target="avoid",
            keywords=("temperature", "temperatur"),
            text="Do NOT lower the temperature below 1.0; it causes looping and degraded output",
        ),
        MandatoryRule(
            target="tips",
            keywords=("30-50%",),
            text="Shorten the prompt by 30-50% compared to other models",
        ),
    ),
    ModelSlug.GPT.value: (
        MandatoryRule(
            target="avoid",
            keywords=("mixed signal", "mieszan"),
            text='Avoid mixed signals ("prefer X, but Y is fine too"); choose one option',
        ),
    ),
    ModelSlug.PERPLEXITY.value: (
        MandatoryRule(
            target="avoid",
            keywords=("few-shot", "example", "przykład", "przyklad"),
            text="Do NOT use few-shot examples; they confuse the search engine",
        ),
        MandatoryRule(
            target="avoid",
            keywords=("role", "expert", "ekspert"),
            text='Do NOT use role-playing ("You are an expert..."); it does not work with search',
        ),
    ),
    ModelSlug.NANO_BANANA.value: (
        MandatoryRule(
            target="avoid",
            keywords=("technical", "techniczn"),
            text=(
                "Avoid technical render parameters (octane render, unreal engine); "
                "use natural language"
            ),
        ),
    ),
    ModelSlug.GROK_AURORA.value: _GROK_VISUAL_RULES,
    ModelSlug.GROK_IMAGINE.value: _GROK_VISUAL_RULES,
}


def _mentions_any(entries: tuple[str, ...], keywords: tuple[str, ...]) -> bool:
    return any(keyword in entry.lower() for entry in entries for keyword in keywords)


def enhance_rules(model: str, rules: ExtractedRules) -> ExtractedRules:
    """Append the model's missing mandatory rules.

    Args:
        model: Model slug
        rules: Rules extracted from the model's knowledge document

    Returns:
        New ExtractedRules; the input is returned unchanged when nothing is missing

    Examples:
        >>> from src.knowledge.parser import ExtractedRules
        >>> empty = ExtractedRules((), (), (), (), "")
        >>> len(enhance_rules("gpt-5.2", empty).avoid)
        1
        >>> once = enhance_rules("gpt-5.2", empty)
        >>> enhance_rules("gpt-5.2", once) == once
        True
    """
    enhanced = rules
    for mandatory in MANDATORY_RULES.get(enum_value(model), ()):
        current = getattr(enhanced, mandatory.target)
        if not _mentions_any(current, mandatory.keywords):
            enhanced = replace(enhanced, **{mandatory.target: current + (mandatory.text,)})
    return enhanced
