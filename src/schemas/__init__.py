"""Typed inputs and outputs of the prompt engine."""

from src.schemas.enums import (
    ChangeKind,
    IssueSeverity,
    ModelCategory,
    ModelSlug,
    RecipeSlug,
    TaskType,
    ToneType,
    VersionKind,
)
from src.schemas.generation import (
    GeneratedVersions,
    GenerationRequest,
    GenerationResult,
    PromptVariant,
)
from src.schemas.optimization import (
    BeforeAfter,
    OptimizationChange,
    OptimizationIssue,
    OptimizationRequest,
    OptimizationResult,
)
from src.schemas.recipes import Recipe, RecipeMatch

__all__ = [
    "ChangeKind",
    "IssueSeverity",
    "ModelCategory",
    "ModelSlug",
    "RecipeSlug",
    "TaskType",
    "ToneType",
    "VersionKind",
    "GenerationRequest",
    "GenerationResult",
    "GeneratedVersions",
    "PromptVariant",
    "OptimizationRequest",
    "OptimizationResult",
    "OptimizationIssue",
    "OptimizationChange",
    "BeforeAfter",
    "Recipe",
    "RecipeMatch",
]
