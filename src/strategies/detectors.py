"""Issue Detectors - per-model prompt defect checks.

Each detector is a pure function ``detect(prompt) -> list[OptimizationIssue]``
running a fixed, ordered list of substring/regex checks. Every check yields
at most one issue with a stable code.

The phrase lists encode product judgment about each model and are kept
exactly as curated (Polish and English phrasings side by side).
"""

import re
from typing import Callable, Final

from src.schemas.enums import IssueSeverity
from src.schemas.optimization import OptimizationIssue

IssueDetector = Callable[[str], list[OptimizationIssue]]

THINK_PATTERN: Final = re.compile(r"\b(?:think|thinking)\b", re.IGNORECASE)
XML_BLOCK_PATTERN: Final = re.compile(r"<\w+>[\s\S]*</\w+>")
CLAUDE_XML_MIN_LENGTH: Final = 200
VAGUE_PHRASES: Final[tuple[str, ...]] = ("mozesz", "sprobuj", "jesli chcesz")

MIXED_SIGNAL_PATTERNS: Final[tuple[re.Pattern, ...]] = (
    re.compile(r"preferuj[^,]*,?\s*(?:ale|jednak|chociaz)", re.IGNORECASE),
    re.compile(r"uzyj[^,]*,?\s*(?:ale mozesz|opcjonalnie)", re.IGNORECASE),
    re.compile(r"domyslnie[^,]*,?\s*(?:ale|jednak)", re.IGNORECASE),
)
GPT_STRUCTURE_MIN_LENGTH: Final = 300

GEMINI_MAX_LENGTH: Final = 500
MANUAL_COT_PHRASES: Final[tuple[str, ...]] = ("krok po kroku", "step by step")
CLOSING_INSTRUCTION_MARKERS: Final[tuple[str, ...]] = ("format", "output", "odpowiedz")

# Plain substrings: "as a" also matches inside "has a"
ROLE_PLAY_PHRASES: Final[tuple[str, ...]] = ("jestes ekspertem", "you are an expert", "as a")
URL_REQUEST_PHRASES: Final[tuple[str, ...]] = ("podaj link", "url", "podaj adres")

NANO_BANANA_TECHNICAL_TERMS: Final[tuple[str, ...]] = (
    "octane render",
    "unreal engine",
    "8k uhd",
    "hyperdetailed",
    "volumetric lighting",
    "f/1.8",
    "35mm lens",
)
NEGATIVE_PHRASES: Final[tuple[str, ...]] = ("no ", "bez ", "without")

GROK_VISUAL_MAX_LENGTH: Final = 700
GENERIC_MAX_LENGTH: Final = 1000


def detect_claude_issues(prompt: str) -> list[OptimizationIssue]:
    """Claude 4.5: "think" wording, missing XML structure, vague permissions."""
    issues = []

    think_matches = THINK_PATTERN.findall(prompt)
    if think_matches:
        issues.append(
            OptimizationIssue(
                severity=IssueSeverity.CRITICAL,
                code="CLAUDE_THINK_WORD",
                message=(
                    f'Found the word "think" ({len(think_matches)}x); it can misfire '
                    "without extended thinking"
                ),
                fix='Replace "think" with "consider", "evaluate" or "assess"',
            )
        )

    if not XML_BLOCK_PATTERN.search(prompt) and len(prompt) > CLAUDE_XML_MIN_LENGTH:
        issues.append(
            OptimizationIssue(
                severity=IssueSeverity.SUGGESTION,
                code="CLAUDE_NO_XML",
                message="No XML structure; Claude 4.5 responds better to XML tags",
                fix="Add tags such as <context>, <task>, <output_format>",
            )
        )

    if any(phrase in prompt for phrase in VAGUE_PHRASES):
        issues.append(
            OptimizationIssue(
                severity=IssueSeverity.WARNING,
                code="CLAUDE_VAGUE_INSTRUCTIONS",
                message="Vague instructions; Claude 4.5 needs explicit directions",
                fix='Replace "you can / try" phrasing with concrete commands',
            )
        )

    return issues


def detect_gpt_issues(prompt: str) -> list[OptimizationIssue]:
    """GPT-5.2: mixed signals, long prompts without Markdown structure."""
    issues = []

    if any(pattern.search(prompt) for pattern in MIXED_SIGNAL_PATTERNS):
        issues.append(
            OptimizationIssue(
                severity=IssueSeverity.CRITICAL,
                code="GPT_MIXED_SIGNALS",
                message="Mixed signals detected; GPT-5.2 may get confused",
                fix='Pick one option instead of "prefer X, but Y is fine too"',
            )
        )

    if len(prompt) > GPT_STRUCTURE_MIN_LENGTH and "#" not in prompt:
        issues.append(
            OptimizationIssue(
                severity=IssueSeverity.SUGGESTION,
                code="GPT_NO_STRUCTURE",
                message="Long prompt without Markdown structure",
                fix="Add ## headers to organize the prompt",
            )
        )

    return issues


def detect_gemini_issues(prompt: str) -> list[OptimizationIssue]:
    """Gemini 3: length, manual chain-of-thought, instructions not at the end."""
    issues = []
    lowered = prompt.lower()

    if len(prompt) > GEMINI_MAX_LENGTH:
        issues.append(
            OptimizationIssue(
                severity=IssueSeverity.WARNING,
                code="GEMINI_TOO_LONG",
                message="Prompt may be too long for Gemini 3; 30-50% shorter is recommended",
                fix="Shorten the prompt by removing redundancy",
            )
        )

    if any(phrase in lowered for phrase in MANUAL_COT_PHRASES):
        issues.append(
            OptimizationIssue(
                severity=IssueSeverity.SUGGESTION,
                code="GEMINI_MANUAL_COT",
                message="Manual chain-of-thought; Gemini has a built-in thinking_level",
                fix='Use the API parameter thinking_level: "high" instead of "step by step"',
            )
        )

    lines = [line for line in prompt.split("\n") if line.strip()]
    last_line = lines[-1].lower() if lines else ""
    if not any(marker in last_line for marker in CLOSING_INSTRUCTION_MARKERS):
        issues.append(
            OptimizationIssue(
                severity=IssueSeverity.SUGGESTION,
                code="GEMINI_INSTRUCTIONS_POSITION",
                message="Key instructions should come at the end",
                fix="Move the response format and constraints to the end of the prompt",
            )
        )

    return issues


def detect_perplexity_issues(prompt: str) -> list[OptimizationIssue]:
    """Perplexity: role-playing, few-shot examples, requests for URLs."""
    issues = []
    lowered = prompt.lower()

    if any(phrase in lowered for phrase in ROLE_PLAY_PHRASES):
        issues.append(
            OptimizationIssue(
                severity=IssueSeverity.CRITICAL,
                code="PERPLEXITY_ROLE_PLAYING",
                message="Role-playing does not work with Perplexity; it is a search engine, not a chatbot",
                fix='Remove "You are an expert..." and phrase the prompt as a search question',
            )
        )

    if (
        "Przykład:" in prompt
        or "Przyklad:" in prompt
        or "Example:" in prompt
        or ("Input:" in prompt and "Output:" in prompt)
    ):
        issues.append(
            OptimizationIssue(
                severity=IssueSeverity.CRITICAL,
                code="PERPLEXITY_FEW_SHOT",
                message="Few-shot examples mislead Perplexity; it searches for the examples instead of answering",
                fix="Remove the examples and ask the question directly",
            )
        )

    if any(phrase in lowered for phrase in URL_REQUEST_PHRASES):
        issues.append(
            OptimizationIssue(
                severity=IssueSeverity.WARNING,
                code="PERPLEXITY_URL_REQUEST",
                message="Request for URLs; the model may hallucinate links",
                fix="Do not ask for URLs; sources are attached automatically",
            )
        )

    return issues


def detect_nano_banana_issues(prompt: str) -> list[OptimizationIssue]:
    """Nano Banana: technical render terms, negative phrasing."""
    issues = []
    lowered = prompt.lower()

    term = next((t for t in NANO_BANANA_TECHNICAL_TERMS if t in lowered), None)
    if term:
        issues.append(
            OptimizationIssue(
                severity=IssueSeverity.WARNING,
                code="NANO_BANANA_TECHNICAL",
                message=f'Technical term "{term}" used; Nano Banana prefers natural language',
                fix="Replace technical parameters with descriptive wording",
            )
        )

    if any(phrase in prompt for phrase in NEGATIVE_PHRASES):
        issues.append(
            OptimizationIssue(
                severity=IssueSeverity.SUGGESTION,
                code="NANO_BANANA_NEGATIVE",
                message='Negative prompts (e.g. "no blur") do not work with Nano Banana',
                fix="Describe what you WANT to see instead of what to avoid",
            )
        )

    return issues


def detect_grok_visual_issues(prompt: str) -> list[OptimizationIssue]:
    """Grok Aurora / Imagine: length, hands, text in the image."""
    issues = []
    lowered = prompt.lower()

    if len(prompt) > GROK_VISUAL_MAX_LENGTH:
        issues.append(
            OptimizationIssue(
                severity=IssueSeverity.WARNING,
                code="GROK_IMAGE_TOO_LONG",
                message=f"Prompt too long ({len(prompt)} characters); 600-700 is optimal",
                fix="Shorten the prompt to 600-700 characters",
            )
        )

    if "hand" in lowered or "ręk" in lowered:
        issues.append(
            OptimizationIssue(
                severity=IssueSeverity.SUGGESTION,
                code="GROK_IMAGE_HANDS",
                message="Hands are often distorted in AI art",
                fix="Consider hiding the hands or framing without them",
            )
        )

    if "text" in lowered or "napis" in lowered:
        issues.append(
            OptimizationIssue(
                severity=IssueSeverity.SUGGESTION,
                code="GROK_IMAGE_TEXT",
                message="Text in images often contains mistakes",
                fix="Add the text in post-production or accept possible errors",
            )
        )

    return issues


def detect_length_only(prompt: str) -> list[OptimizationIssue]:
    """Generic check for models without a dedicated detector."""
    if len(prompt) <= GENERIC_MAX_LENGTH:
        return []
    return [
        OptimizationIssue(
            severity=IssueSeverity.SUGGESTION,
            code="GROK_ITERATE",
            message="Long prompt; consider an iterative approach",
            fix="Start short and iterate instead of writing everything at once",
        )
    ]


def user_reported_issues(reports: tuple[str, ...]) -> list[OptimizationIssue]:
    """Turn user-reported problems into warning issues."""
    return [
        OptimizationIssue(severity=IssueSeverity.WARNING, code="USER_REPORTED", message=report)
        for report in reports
    ]
