"""Optimization request and result models."""

from typing import Annotated, Optional

from pydantic import Field, StringConstraints

from src.schemas.base import EngineModel
from src.schemas.enums import ChangeKind, IssueSeverity, ModelSlug

ReportedIssue = Annotated[str, StringConstraints(min_length=1, max_length=500)]


class OptimizationRequest(EngineModel):
    """Validated input for prompt optimization.

    Attributes:
        original_prompt: Prompt to improve (5-20000 characters)
        target_model: Model the prompt is meant for
        issues: Problems the user noticed (up to 10, 500 characters each)
    """

    original_prompt: str = Field(..., min_length=5, max_length=20000)
    target_model: ModelSlug
    issues: tuple[ReportedIssue, ...] = Field(default=(), max_length=10)


class OptimizationIssue(EngineModel):
    """A defect found in a prompt.

    Attributes:
        severity: critical, warning or suggestion
        code: Stable machine-readable code
        message: Human-readable description
        location: Where in the prompt the issue was found, if known
        fix: How to fix it
    """

    severity: IssueSeverity
    code: str
    message: str
    location: Optional[str] = None
    fix: Optional[str] = None


class OptimizationChange(EngineModel):
    """A change the rewriter applied."""

    kind: ChangeKind
    description: str
    reason: str


class BeforeAfter(EngineModel):
    """Original and optimized prompt side by side."""

    before: str
    after: str


class OptimizationResult(EngineModel):
    """Output of prompt optimization.

    Attributes:
        optimized_prompt: Rewritten prompt
        changes: Changes applied, in order
        issues: Issues detected in the original prompt, plus user-reported ones
        before_after: Original and optimized text
        token_delta: estimate(optimized) - estimate(original), signed
    """

    optimized_prompt: str
    changes: tuple[OptimizationChange, ...]
    issues: tuple[OptimizationIssue, ...]
    before_after: BeforeAfter
    token_delta: int
