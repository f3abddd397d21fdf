"""Generation request and result models."""

from typing import Annotated, Optional

from pydantic import Field, StringConstraints

from src.schemas.base import EngineModel
from src.schemas.enums import ModelSlug, TaskType, ToneType, VersionKind

Constraint = Annotated[str, StringConstraints(min_length=1, max_length=500)]
Example = Annotated[str, StringConstraints(min_length=1, max_length=2000)]


class GenerationRequest(EngineModel):
    """Validated input for prompt generation.

    Attributes:
        goal: What the prompt should achieve (5-5000 characters)
        model: Target model
        task_type: Explicit task type; inferred from the goal when omitted
        context: Background information (up to 10000 characters)
        tone: Requested tone
        constraints: Explicit requirements (up to 20)
        examples: Few-shot example inputs (up to 10)
    """

    goal: str = Field(..., min_length=5, max_length=5000)
    model: ModelSlug
    task_type: Optional[TaskType] = None
    context: Optional[str] = Field(default=None, max_length=10000)
    tone: Optional[ToneType] = None
    constraints: tuple[Constraint, ...] = Field(default=(), max_length=20)
    examples: tuple[Example, ...] = Field(default=(), max_length=10)


class PromptVariant(EngineModel):
    """One generated prompt at a given level of detail."""

    version: VersionKind
    content: str
    token_estimate: int


class GeneratedVersions(EngineModel):
    """The three variants of a generated prompt."""

    extended: PromptVariant
    standard: PromptVariant
    minimal: PromptVariant

    def get(self, version: VersionKind) -> PromptVariant:
        """Get the variant for a version kind."""
        return getattr(self, VersionKind(version).value)


class GenerationResult(EngineModel):
    """Output of prompt generation.

    Attributes:
        versions: Extended, standard and minimal variants
        techniques: Prompting techniques the variants apply
        tips: Top tips for the model
        model: Model the prompt was built for
        task_type: Explicit or inferred task type
    """

    versions: GeneratedVersions
    techniques: tuple[str, ...]
    tips: tuple[str, ...]
    model: ModelSlug
    task_type: TaskType
