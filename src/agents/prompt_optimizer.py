"""Prompt Optimizer Agent - detect and fix model-specific prompt defects.

Runs the target model's issue detector over an existing prompt, then its
rewriter, and reports both along with the change in estimated tokens.

Public API:
    optimize_prompt: Detect issues and rewrite a prompt
    optimize_from_request: Same, from a validated OptimizationRequest
    analyze_prompt: Detect issues only

Design Principles:
- Issues always describe the ORIGINAL prompt
- A change is reported only when its rewrite step altered the text
- Optimizing an already optimized prompt finds nothing the rewriter fixed
- No I/O: the rule store is consulted only to validate the model

Example:
    >>> result = optimize_prompt("Think about this problem and solve it", "claude-4.5")
    >>> result.issues[0].code
    'CLAUDE_THINK_WORD'
    >>> result.optimized_prompt
    'Consider this problem and solve it'
"""

from typing import Optional

from src.agents.prompt_generator import estimate_tokens
from src.rules.store import RuleStore, get_rule_store
from src.schemas.enums import enum_value
from src.schemas.optimization import (
    BeforeAfter,
    OptimizationIssue,
    OptimizationRequest,
    OptimizationResult,
)
from src.strategies.detectors import user_reported_issues
from src.strategies.table import ModelStrategy, get_strategy
from src.utils.error_handling import UnknownModelError
from src.utils.logging_config import get_logger


def _get_logger():
    """Get logger lazily to avoid configuring logging at import time."""
    return get_logger(__name__)


def _resolve_strategy(model: str, rule_store: Optional[RuleStore]) -> ModelStrategy:
    store = rule_store if rule_store is not None else get_rule_store()
    if not store.is_valid_model(model):
        raise UnknownModelError(str(enum_value(model)))
    return get_strategy(model)


def analyze_prompt(
    prompt: str, model: str, *, rule_store: Optional[RuleStore] = None
) -> list[OptimizationIssue]:
    """Find defects in a prompt without rewriting it.

    Args:
        prompt: Prompt to check
        model: Target model slug
        rule_store: Rule store used to validate the model

    Returns:
        Issues in detector order

    Raises:
        UnknownModelError: If the model is not registered
    """
    strategy = _resolve_strategy(model, rule_store)
    return strategy.detect_issues(prompt)


def optimize_prompt(
    original_prompt: str,
    target_model: str,
    *,
    issues: tuple[str, ...] = (),
    rule_store: Optional[RuleStore] = None,
) -> OptimizationResult:
    """Detect issues in a prompt and apply the model's rewrites.

    The function:
    1. Validates the model against the registry
    2. Runs the model's detector and appends user-reported issues
    3. Runs the model's rewriter
    4. Computes the signed token delta

    Args:
        original_prompt: Prompt to improve
        target_model: Model the prompt is meant for
        issues: Problems the user noticed, reported as warnings
        rule_store: Rule store used to validate the model

    Returns:
        OptimizationResult with the rewritten prompt, changes and issues

    Raises:
        ValueError: If the prompt is empty
        UnknownModelError: If the model is not registered
    """
    if not original_prompt or not original_prompt.strip():
        raise ValueError("original_prompt cannot be empty")

    strategy = _resolve_strategy(target_model, rule_store)

    detected = strategy.detect_issues(original_prompt)
    detected.extend(user_reported_issues(tuple(issues)))

    optimized, changes = strategy.rewrite(original_prompt)
    token_delta = estimate_tokens(optimized) - estimate_tokens(original_prompt)

    _get_logger().debug(
        "Optimized prompt for %s (%d issues, %d changes, token delta %+d)",
        enum_value(target_model),
        len(detected),
        len(changes),
        token_delta,
    )

    return OptimizationResult(
        optimized_prompt=optimized,
        changes=tuple(changes),
        issues=tuple(detected),
        before_after=BeforeAfter(before=original_prompt, after=optimized),
        token_delta=token_delta,
    )


def optimize_from_request(
    request: OptimizationRequest, *, rule_store: Optional[RuleStore] = None
) -> OptimizationResult:
    """Optimize a prompt from a validated request."""
    return optimize_prompt(
        request.original_prompt,
        request.target_model,
        issues=request.issues,
        rule_store=rule_store,
    )
