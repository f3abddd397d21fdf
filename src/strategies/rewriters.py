"""Prompt Rewriters - per-model deterministic prompt fixes.

Each rewriter is a pure function ``rewrite(prompt) -> (text, changes)``.
A change is recorded only when its step actually altered the text, so a
rewriter applied to its own output returns it unchanged with no changes.
"""

import re
from typing import Callable, Final

from src.schemas.enums import ChangeKind
from src.schemas.optimization import OptimizationChange

PromptRewriter = Callable[[str], tuple[str, list[OptimizationChange]]]

# Longer phrases first so "think about" is not consumed by "think"
THINK_REPLACEMENTS: Final[tuple[tuple[str, str], ...]] = (
    ("think about", "consider"),
    ("think through", "work through"),
    ("thinking", "evaluating"),
    ("think", "assess"),
)
OPENING_TAG_PATTERN: Final = re.compile(r"<\w+>")
CLAUDE_WRAP_MIN_LENGTH: Final = 200
CONTEXT_MARKERS: Final[tuple[str, ...]] = ("context", "kontekst")

GPT_STRUCTURE_MIN_LENGTH: Final = 300
GPT_STRUCTURE_MIN_LINES: Final = 3

GEMINI_VERBOSE_PHRASES: Final[tuple[str, ...]] = (
    "Prosze, ",
    "Czy moglbys ",
    "Bylbym wdzieczny gdybys ",
    "Pamietaj, ze ",
    "Nalezy pamietac, ze ",
)
FORMAT_BLOCK_PATTERN: Final = re.compile(r"Format:[\s\S]*?(?=\n\n|\Z)", re.IGNORECASE)
BLANK_RUN_PATTERN: Final = re.compile(r"\n{3,}")

ROLE_PATTERNS: Final[tuple[re.Pattern, ...]] = (
    re.compile(r"Jestes\s+\w+[\w\s]*\.\s*", re.IGNORECASE),
    re.compile(r"You are\s+\w+[\w\s]*\.\s*", re.IGNORECASE),
    re.compile(r"As a\s+\w+[\w\s]*,\s*", re.IGNORECASE),
)
EXAMPLE_PATTERNS: Final[tuple[re.Pattern, ...]] = (
    re.compile(r"Przyklad:[\s\S]*?(?=\n\n|\Z)", re.IGNORECASE),
    re.compile(r"Przykład:[\s\S]*?(?=\n\n|\Z)", re.IGNORECASE),
    re.compile(r"Example:[\s\S]*?(?=\n\n|\Z)", re.IGNORECASE),
)


def _match_case(source: str, replacement: str) -> str:
    if source[:1].isupper():
        return replacement[:1].upper() + replacement[1:]
    return replacement


def rewrite_claude_prompt(prompt: str) -> tuple[str, list[OptimizationChange]]:
    """Replace "think" wording, then wrap long untagged prompts in <task>."""
    changes = []
    text = prompt

    replaced = text
    for phrase, replacement in THINK_REPLACEMENTS:
        pattern = re.compile(rf"\b{phrase}\b", re.IGNORECASE)
        replaced = pattern.sub(lambda m, r=replacement: _match_case(m.group(0), r), replaced)
    if replaced != text:
        text = replaced
        changes.append(
            OptimizationChange(
                kind=ChangeKind.MODIFIED,
                description='Replaced "think" with alternatives',
                reason="Claude 4.5 without extended thinking is sensitive to the word think",
            )
        )

    lowered = text.lower()
    if (
        not OPENING_TAG_PATTERN.search(text)
        and len(text) > CLAUDE_WRAP_MIN_LENGTH
        and not any(marker in lowered for marker in CONTEXT_MARKERS)
    ):
        text = f"<task>\n{text}\n</task>"
        changes.append(
            OptimizationChange(
                kind=ChangeKind.ADDED,
                description="Added XML <task> tags",
                reason="Claude 4.5 handles XML structure better",
            )
        )

    return text, changes


def rewrite_gpt_prompt(prompt: str) -> tuple[str, list[OptimizationChange]]:
    """Add Markdown headers to long multi-line prompts without any."""
    lines = prompt.split("\n")
    if (
        len(prompt) > GPT_STRUCTURE_MIN_LENGTH
        and "##" not in prompt
        and len(lines) > GPT_STRUCTURE_MIN_LINES
    ):
        text = f"## Task\n{prompt}\n\n## Response format\n[Specify the expected format]"
        return text, [
            OptimizationChange(
                kind=ChangeKind.ADDED,
                description="Added Markdown structure",
                reason="GPT-5.2 responds better to structured prompts",
            )
        ]
    return prompt, []


def rewrite_gemini_prompt(prompt: str) -> tuple[str, list[OptimizationChange]]:
    """Drop verbose courtesy phrases and move the Format block to the end."""
    changes = []
    text = prompt

    for phrase in GEMINI_VERBOSE_PHRASES:
        if phrase in text:
            text = text.replace(phrase, "", 1)
            changes.append(
                OptimizationChange(
                    kind=ChangeKind.REMOVED,
                    description=f'Removed "{phrase.strip()}"',
                    reason="Gemini 3 prefers concise prompts",
                )
            )

    # Settled once the last Format block ends the prompt
    blocks = list(FORMAT_BLOCK_PATTERN.finditer(text))
    if blocks and not text.rstrip().endswith(blocks[-1].group(0).rstrip()):
        match = blocks[0]
        block = match.group(0).strip()
        remainder = (text[: match.start()] + text[match.end() :]).strip()
        remainder = BLANK_RUN_PATTERN.sub("\n\n", remainder)
        moved = f"{remainder}\n\n{block}" if remainder else block
        if moved != text:
            text = moved
            changes.append(
                OptimizationChange(
                    kind=ChangeKind.MODIFIED,
                    description="Moved the format instruction to the end",
                    reason="Gemini 3 pays the most attention to the end of the prompt",
                )
            )

    return text, changes


def rewrite_perplexity_prompt(prompt: str) -> tuple[str, list[OptimizationChange]]:
    """Strip role-playing sentences and few-shot examples."""
    changes = []
    text = prompt

    for pattern in ROLE_PATTERNS:
        stripped = pattern.sub("", text)
        if stripped != text:
            text = stripped
            changes.append(
                OptimizationChange(
                    kind=ChangeKind.REMOVED,
                    description="Removed role-playing",
                    reason="Perplexity does not support role-playing",
                )
            )

    for pattern in EXAMPLE_PATTERNS:
        stripped = pattern.sub("", text)
        if stripped != text:
            text = stripped
            changes.append(
                OptimizationChange(
                    kind=ChangeKind.REMOVED,
                    description="Removed few-shot examples",
                    reason="Few-shot examples confuse the Perplexity search engine",
                )
            )

    return text.strip() if changes else text, changes


def rewrite_identity(prompt: str) -> tuple[str, list[OptimizationChange]]:
    """No model-specific rewrites."""
    return prompt, []
