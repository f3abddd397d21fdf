"""Prompt Builders - one construction strategy per model.

Each builder is a pure function ``build(spec, version) -> str``. Layouts
differ per model (XML tags, Markdown headers, Role/Goal/Format lines, a bare
search query, descriptive image fragments, subject+motion+camera video
fragments), but every builder satisfies the same contract:

- every variant contains the goal text verbatim
- MINIMAL carries no information STANDARD lacks, and STANDARD none that
  EXTENDED lacks
- placeholders in square brackets are left for the user to fill in
"""

from dataclasses import dataclass
from typing import Callable, Final, Optional

from src.schemas.enums import TaskType, ToneType, VersionKind

CODE_TASKS: Final[tuple[TaskType, ...]] = (TaskType.CODE_GENERATION, TaskType.CODE_REVIEW)

TONE_DESCRIPTIONS: Final[dict[str, str]] = {
    ToneType.FORMAL.value: "Formal and professional",
    ToneType.CASUAL.value: "Casual and friendly",
    ToneType.TECHNICAL.value: "Technical and precise",
    ToneType.CONCISE.value: "Concise, no filler",
}


@dataclass(frozen=True)
class PromptSpec:
    """Everything a builder needs to know about the request.

    Attributes:
        goal: What the user wants the model to do
        task_type: Resolved task type
        context: Optional background information
        tone: Optional requested tone
        constraints: Explicit requirements
        examples: Few-shot example inputs
    """

    goal: str
    task_type: TaskType = TaskType.GENERAL
    context: Optional[str] = None
    tone: Optional[ToneType] = None
    constraints: tuple[str, ...] = ()
    examples: tuple[str, ...] = ()


PromptBuilder = Callable[[PromptSpec, VersionKind], str]


def _bullets(items: tuple[str, ...]) -> str:
    return "\n".join(f"- {item}" for item in items)


def _tone(spec: PromptSpec) -> Optional[str]:
    if spec.tone is None:
        return None
    tone = spec.tone.value if isinstance(spec.tone, ToneType) else spec.tone
    return TONE_DESCRIPTIONS.get(tone, tone)


def build_claude_prompt(spec: PromptSpec, version: VersionKind) -> str:
    """XML-tagged sections; extended adds constraints, tone, examples and scope guard."""
    if version == VersionKind.MINIMAL:
        return f"<task>\n{spec.goal}\n</task>"

    parts = []
    if spec.context:
        parts.append(f"<context>\n{spec.context}\n</context>")
    parts.append(f"<task>\n{spec.goal}\n</task>")

    if version == VersionKind.STANDARD:
        parts.append("<output_format>\n[Response format]\n</output_format>")
        return "\n\n".join(parts)

    if spec.constraints:
        parts.append(f"<constraints>\n{_bullets(spec.constraints)}\n</constraints>")
    tone = _tone(spec)
    if tone:
        parts.append(f"<tone>\n{tone}\n</tone>")
    parts.append("<output_format>\n[Response format: describe the expected shape]\n</output_format>")
    if spec.examples:
        examples = "\n\n".join(f"Example: {example}" for example in spec.examples)
        parts.append(f"<examples>\n{examples}\n</examples>")
    if spec.task_type in CODE_TASKS:
        parts.append(
            "<avoid_overengineering>\n"
            "Avoid over-engineering. Make only the changes that are directly requested.\n"
            "Do not add features beyond the scope of the task.\n"
            "</avoid_overengineering>"
        )
    return "\n\n".join(parts)


def build_gpt_prompt(spec: PromptSpec, version: VersionKind) -> str:
    """Markdown headers with a role; minimal is the goal plus inline requirements."""
    if version == VersionKind.MINIMAL:
        parts = [spec.goal]
        if spec.constraints:
            parts.append(f"Requirements: {', '.join(spec.constraints)}")
        return "\n\n".join(parts)

    parts = []
    if version == VersionKind.EXTENDED:
        parts.append("## Role\nYou are an expert specializing in the task below.")
    if spec.context:
        parts.append(f"## Context\n{spec.context}")
    parts.append(f"## Task\n{spec.goal}")
    if spec.constraints:
        parts.append(f"## Requirements\n{_bullets(spec.constraints)}")

    if version == VersionKind.STANDARD:
        parts.append("## Response format\n[Specify the format]")
        return "\n\n".join(parts)

    tone = _tone(spec)
    if tone:
        parts.append(f"## Tone\n{tone}")
    parts.append("## Response format\n[Specify the expected format]")
    if spec.examples:
        examples = "\n\n".join(
            f"Input: {example}\nOutput: [expected result]" for example in spec.examples
        )
        parts.append(f"## Examples\n{examples}")
    return "\n\n".join(parts)


def build_gemini_prompt(spec: PromptSpec, version: VersionKind) -> str:
    """Short Role/Goal/Constraints lines with the format instruction last."""
    if version == VersionKind.MINIMAL:
        return spec.goal

    if version == VersionKind.STANDARD:
        return f"Goal: {spec.goal}\n\nFormat: [Specify format]"

    parts = ["Role: Expert in completing the task", f"Goal: {spec.goal}"]
    if spec.context:
        parts.append(f"Context: {spec.context}")
    if spec.constraints:
        parts.append(f"Constraints:\n{_bullets(spec.constraints)}")
    tone = _tone(spec)
    if tone:
        parts.append(f"Tone: {tone}")
    # Gemini weighs the end of the prompt most
    parts.append("Format: [Specify the response format]")
    return "\n\n".join(parts)


def build_grok_prompt(spec: PromptSpec, version: VersionKind) -> str:
    """Goal-first Markdown; minimal is the bare goal, to be refined by iteration."""
    if version == VersionKind.MINIMAL:
        return spec.goal

    parts = [f"## Goal\n{spec.goal}"]
    if spec.context:
        parts.append(f"## Context\n{spec.context}")
    if version == VersionKind.STANDARD:
        return "\n\n".join(parts)

    if spec.constraints:
        parts.append(f"## Task details\n{_bullets(spec.constraints)}")
    tone = _tone(spec)
    if tone:
        parts.append(f"## Tone\n{tone}")
    parts.append("## Expected output\n[Specify the format]")
    return "\n\n".join(parts)


def build_perplexity_prompt(spec: PromptSpec, version: VersionKind) -> str:
    """Search-style query: no role, no few-shot examples."""
    if version == VersionKind.MINIMAL:
        return spec.goal

    if version == VersionKind.STANDARD:
        return f"{spec.goal}\nFormat: [specify the response format]"

    parts = [spec.goal]
    if spec.context:
        parts.append(f"Context: {spec.context}")
    parts.extend(
        [
            "Time range: [e.g. 2024-2025]",
            "Sources: [e.g. official documentation, peer-reviewed]",
            "Format: [table/list/report]",
        ]
    )
    return "\n".join(parts)


def build_nano_banana_prompt(spec: PromptSpec, version: VersionKind) -> str:
    """Natural-language scene description, one aspect per line."""
    if version == VersionKind.MINIMAL:
        return spec.goal

    if version == VersionKind.STANDARD:
        return f"{spec.goal}.\n[Lighting and atmosphere]. [Style: photorealism/other]."

    parts = [
        f"[Main subject]: {spec.goal}",
        "[Action/pose]: [what the subject is doing]",
        "[Location]: [where the scene takes place]",
        "[Lighting]: [e.g. golden hour, studio light]",
        "[Style]: [e.g. photorealism, watercolor, anime]",
        "[Mood]: [atmosphere of the image]",
    ]
    if spec.constraints:
        parts.append(f"[Details]: {', '.join(spec.constraints)}")
    return "\n".join(parts)


def build_grok_aurora_prompt(spec: PromptSpec, version: VersionKind) -> str:
    """Subject-first photographic fragments joined by commas."""
    if version == VersionKind.MINIMAL:
        return spec.goal

    if version == VersionKind.STANDARD:
        return f"{spec.goal}, [lighting], [style], sharp focus, [aspect ratio e.g. 16:9]"

    parts = [
        f"[Subject]: {spec.goal}",
        "[Style]: [photorealistic / editorial / cinematic]",
        "[Mood]: [peaceful / dramatic / mysterious]",
        "[Lighting]: [golden hour / studio lighting / neon]",
        "[Composition]: [close-up / wide shot / rule of thirds]",
        "sharp focus",
        "[aspect ratio e.g. 16:9]",
    ]
    if spec.constraints:
        parts.append(f"[Details]: {', '.join(spec.constraints)}")
    return ", ".join(parts)


def build_grok_imagine_prompt(spec: PromptSpec, version: VersionKind) -> str:
    """Subject + motion, background + motion, camera + motion fragments."""
    if version == VersionKind.MINIMAL:
        return spec.goal

    if version == VersionKind.STANDARD:
        return f"{spec.goal}, [camera motion], [style], [atmosphere]"

    parts = [
        f"[Subject + motion]: {spec.goal}",
        "[Background + motion]: [background with moving elements]",
        "[Camera + motion]: [slow pan right / tracking shot / static]",
        "[Style]: [cinematic / documentary / ASMR]",
        "[Atmosphere]: [emotional mood]",
    ]
    if spec.constraints:
        parts.append(f"[Details]: {', '.join(spec.constraints)}")
    return ", ".join(parts)
