"""Prompt Generator Agent - goal to three model-tuned prompt variants.

Builds an extended, a standard and a minimal prompt for one target model
from the user's goal, using the model's strategy and its enhanced rules.

Public API:
    generate_prompt: Generate all three variants from keyword arguments
    generate_from_request: Same, from a validated GenerationRequest
    generate_single_version: Generate one variant only
    infer_task_type: Guess the task type from the goal text
    estimate_tokens: Rough token count of a text

Design Principles:
- Deterministic: same inputs and same rules give the same result
- No I/O except the rule store's document read on cache miss
- Model-specific layout lives in the strategy table, not here
- Fully testable with a RuleStore pointed at a temporary knowledge directory

Example:
    >>> result = generate_prompt("Write code to implement binary search", "claude-4.5")
    >>> result.task_type.value
    'code-generation'
    >>> "<task>" in result.versions.minimal.content
    True
"""

import math
from typing import Final, Optional

from src.rules.store import ModelRules, RuleStore, get_rule_store
from src.schemas.enums import TaskType, ToneType, VersionKind, enum_value
from src.schemas.generation import (
    GeneratedVersions,
    GenerationRequest,
    GenerationResult,
    PromptVariant,
)
from src.strategies.builders import CODE_TASKS, PromptSpec
from src.strategies.table import ModelStrategy, get_strategy
from src.utils.error_handling import UnknownModelError
from src.utils.logging_config import get_logger

CHARS_PER_TOKEN: Final = 4
TIPS_LIMIT: Final = 5

# Checked in order; the first group with a match wins
TASK_TYPE_KEYWORDS: Final[tuple[tuple[TaskType, tuple[str, ...]], ...]] = (
    (TaskType.CODE_REVIEW, ("code review", "review kodu", "przegla")),
    (TaskType.CODE_GENERATION, ("napisz kod", "write code", "funkcj", "implement")),
    (TaskType.ANALYSIS, ("analiz", "analy", "research", "badanie")),
    (TaskType.TRANSLATION, ("przetlumacz", "translat", "tlumaczenie")),
    (TaskType.SUMMARIZATION, ("podsumuj", "summariz", "streszcz")),
    (TaskType.SYSTEM_PROMPT, ("system prompt", "chatbot", "asystent")),
    (TaskType.IMAGE_GENERATION, ("obraz", "image", "grafik", "zdjeci")),
    (TaskType.VIDEO_GENERATION, ("wideo", "video", "animacj", "film")),
    (TaskType.CREATIVE_WRITING, ("pisz", "creat", "write", "story")),
)

FEW_SHOT_TECHNIQUE: Final = "Few-shot examples"
CONSTRAINTS_TECHNIQUE: Final = "Explicit constraints"
ANTI_OVERENGINEERING_TECHNIQUE: Final = "Anti-overengineering directive"


def _get_logger():
    """Get logger lazily to avoid configuring logging at import time."""
    return get_logger(__name__)


def estimate_tokens(text: str) -> int:
    """Estimate the token count of a text as ceil(characters / 4).

    Examples:
        >>> estimate_tokens("")
        0
        >>> estimate_tokens("abcde")
        2
    """
    return math.ceil(len(text) / CHARS_PER_TOKEN)


def infer_task_type(goal: str) -> TaskType:
    """Guess the task type from keywords in the goal.

    Keyword groups are checked in a fixed order and the first group with a
    match wins, even when a later group also matches.

    Args:
        goal: User's goal text

    Returns:
        Inferred TaskType, GENERAL when nothing matches

    Examples:
        >>> infer_task_type("Write code to implement binary search").value
        'code-generation'
        >>> infer_task_type("Hola, ¿qué tal?").value
        'general'
    """
    lowered = goal.lower()
    for task_type, keywords in TASK_TYPE_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return task_type
    return TaskType.GENERAL


def _techniques(strategy: ModelStrategy, spec: PromptSpec) -> tuple[str, ...]:
    techniques = list(strategy.techniques)
    if spec.examples:
        techniques.append(FEW_SHOT_TECHNIQUE)
    if spec.constraints:
        techniques.append(CONSTRAINTS_TECHNIQUE)
    if spec.task_type in CODE_TASKS:
        techniques.append(ANTI_OVERENGINEERING_TECHNIQUE)
    return tuple(techniques)


def _variant(strategy: ModelStrategy, spec: PromptSpec, version: VersionKind) -> PromptVariant:
    content = strategy.build(spec, version)
    return PromptVariant(version=version, content=content, token_estimate=estimate_tokens(content))


def _prepare(
    goal: str,
    model: str,
    task_type: Optional[TaskType],
    context: Optional[str],
    tone: Optional[ToneType],
    constraints: tuple[str, ...],
    examples: tuple[str, ...],
    rule_store: Optional[RuleStore],
) -> tuple[ModelStrategy, PromptSpec, ModelRules]:
    if not goal or not goal.strip():
        raise ValueError("goal cannot be empty")

    store = rule_store if rule_store is not None else get_rule_store()
    if not store.is_valid_model(model):
        raise UnknownModelError(str(enum_value(model)))

    resolved_task = TaskType(task_type) if task_type is not None else infer_task_type(goal)
    rules = store.get_rules(model)

    spec = PromptSpec(
        goal=goal,
        task_type=resolved_task,
        context=context,
        tone=ToneType(tone) if tone is not None else None,
        constraints=tuple(constraints),
        examples=tuple(examples),
    )
    return get_strategy(model), spec, rules


def generate_prompt(
    goal: str,
    model: str,
    *,
    task_type: Optional[TaskType] = None,
    context: Optional[str] = None,
    tone: Optional[ToneType] = None,
    constraints: tuple[str, ...] = (),
    examples: tuple[str, ...] = (),
    rule_store: Optional[RuleStore] = None,
) -> GenerationResult:
    """Generate extended, standard and minimal prompts for a model.

    The function:
    1. Validates the model against the registry
    2. Resolves the task type (explicit, or inferred from the goal)
    3. Fetches the model's enhanced rules
    4. Renders each version with the model's builder
    5. Collects technique labels and the top 5 tips

    Args:
        goal: What the prompt should achieve
        model: Target model slug
        task_type: Explicit task type; inferred from the goal when None
        context: Background information
        tone: Requested tone (extended variant only)
        constraints: Explicit requirements
        examples: Few-shot example inputs
        rule_store: Rule store to use (default: the shared instance)

    Returns:
        GenerationResult with all three variants

    Raises:
        ValueError: If the goal is empty
        UnknownModelError: If the model is not registered
        RulesLoadError: If the model's knowledge document cannot be loaded

    Examples:
        >>> result = generate_prompt("Summarize this article", "gpt-5.2")
        >>> result.versions.extended.token_estimate >= result.versions.minimal.token_estimate
        True
    """
    strategy, spec, rules = _prepare(
        goal, model, task_type, context, tone, constraints, examples, rule_store
    )

    versions = GeneratedVersions(
        extended=_variant(strategy, spec, VersionKind.EXTENDED),
        standard=_variant(strategy, spec, VersionKind.STANDARD),
        minimal=_variant(strategy, spec, VersionKind.MINIMAL),
    )

    _get_logger().debug(
        "Generated prompt for %s (task %s, tokens %d/%d/%d)",
        rules.model.value,
        spec.task_type.value,
        versions.extended.token_estimate,
        versions.standard.token_estimate,
        versions.minimal.token_estimate,
    )

    return GenerationResult(
        versions=versions,
        techniques=_techniques(strategy, spec),
        tips=rules.tips[:TIPS_LIMIT],
        model=rules.model,
        task_type=spec.task_type,
    )


def generate_from_request(
    request: GenerationRequest, *, rule_store: Optional[RuleStore] = None
) -> GenerationResult:
    """Generate all three variants from a validated request."""
    return generate_prompt(
        request.goal,
        request.model,
        task_type=request.task_type,
        context=request.context,
        tone=request.tone,
        constraints=request.constraints,
        examples=request.examples,
        rule_store=rule_store,
    )


def generate_single_version(
    request: GenerationRequest,
    version: VersionKind,
    *,
    rule_store: Optional[RuleStore] = None,
) -> PromptVariant:
    """Generate only one variant of the prompt.

    Args:
        request: Validated generation request
        version: Which variant to render
        rule_store: Rule store to use (default: the shared instance)

    Returns:
        PromptVariant identical to the matching variant of generate_from_request

    Raises:
        UnknownModelError: If the model is not registered
        RulesLoadError: If the model's knowledge document cannot be loaded
    """
    strategy, spec, _ = _prepare(
        request.goal,
        request.model,
        request.task_type,
        request.context,
        request.tone,
        request.constraints,
        request.examples,
        rule_store,
    )
    return _variant(strategy, spec, VersionKind(version))
