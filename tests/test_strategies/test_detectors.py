"""Tests for per-model issue detectors."""

import pytest

from src.schemas.enums import IssueSeverity
from src.strategies.detectors import (
    detect_claude_issues,
    detect_gemini_issues,
    detect_gpt_issues,
    detect_grok_visual_issues,
    detect_length_only,
    detect_nano_banana_issues,
    detect_perplexity_issues,
    user_reported_issues,
)


def _codes(issues) -> list[str]:
    return [issue.code for issue in issues]


class TestClaudeDetector:
    """Test Claude 4.5 checks."""

    def test_think_word_is_critical(self):
        """Test the think-word check and its count."""
        issues = detect_claude_issues("Think about this problem and solve it")

        assert _codes(issues) == ["CLAUDE_THINK_WORD"]
        assert issues[0].severity == IssueSeverity.CRITICAL
        assert "(1x)" in issues[0].message
        assert issues[0].fix

    def test_think_counts_every_occurrence(self):
        """Test that think and thinking are both counted."""
        issues = detect_claude_issues("think, then keep thinking")

        assert "(2x)" in issues[0].message

    def test_think_must_be_a_whole_word(self):
        """Test that words merely containing think are ignored."""
        assert detect_claude_issues("Rethink the design; thinker notes") == []

    def test_long_prompt_without_xml(self):
        """Test the XML suggestion for long prompts."""
        issues = detect_claude_issues("Summarize the report. " * 10)

        assert _codes(issues) == ["CLAUDE_NO_XML"]
        assert issues[0].severity == IssueSeverity.SUGGESTION

    def test_long_prompt_with_xml(self):
        """Test that tagged prompts are not flagged."""
        prompt = "<task>" + "Summarize the report. " * 10 + "</task>"

        assert detect_claude_issues(prompt) == []

    def test_vague_instructions(self):
        """Test the vague-permission warning."""
        issues = detect_claude_issues("Popraw tekst, jesli chcesz dodaj tytul")

        assert _codes(issues) == ["CLAUDE_VAGUE_INSTRUCTIONS"]
        assert issues[0].severity == IssueSeverity.WARNING


class TestGptDetector:
    """Test GPT-5.2 checks."""

    @pytest.mark.parametrize(
        "prompt",
        [
            "Preferuj TypeScript, ale JavaScript tez jest ok",
            "Uzyj tabel, opcjonalnie wykresow",
            "Domyslnie zwroc JSON, jednak YAML tez",
        ],
    )
    def test_mixed_signals(self, prompt):
        """Test the mixed-signal phrasings."""
        issues = detect_gpt_issues(prompt)

        assert _codes(issues) == ["GPT_MIXED_SIGNALS"]
        assert issues[0].severity == IssueSeverity.CRITICAL

    @pytest.mark.parametrize(
        "prompt",
        [
            "Return the result as JSON.",
            "List the user accounts and optionally their roles.",
            "Summarize user preferences but skip the outliers.",
            "Prefer tabs, but spaces are fine too",
        ],
    )
    def test_ordinary_instructions_are_not_mixed_signals(self, prompt):
        """Test that plain English instructions raise no issue."""
        assert detect_gpt_issues(prompt) == []

    def test_long_prompt_without_headers(self):
        """Test the structure suggestion."""
        assert _codes(detect_gpt_issues("x" * 301)) == ["GPT_NO_STRUCTURE"]
        assert detect_gpt_issues("# Task\n" + "x" * 301) == []


class TestGeminiDetector:
    """Test Gemini 3 checks."""

    def test_short_prompt_with_format_last(self):
        """Test a prompt with no issues."""
        assert detect_gemini_issues("Summarize the text.\nFormat: bullet list") == []

    def test_too_long(self):
        """Test the length warning."""
        issues = detect_gemini_issues("word " * 120 + "\nOutput: table")

        assert _codes(issues) == ["GEMINI_TOO_LONG"]
        assert issues[0].severity == IssueSeverity.WARNING

    def test_manual_chain_of_thought_and_position(self):
        """Test the step-by-step and instruction position suggestions."""
        issues = detect_gemini_issues("Solve the equation step by step")

        assert _codes(issues) == ["GEMINI_MANUAL_COT", "GEMINI_INSTRUCTIONS_POSITION"]

    def test_polish_closing_instruction(self):
        """Test that a Polish closing instruction satisfies the position check."""
        assert detect_gemini_issues("Opisz zjawisko\nOdpowiedz w trzech zdaniach") == []


class TestPerplexityDetector:
    """Test Perplexity checks."""

    @pytest.mark.parametrize(
        "prompt",
        [
            "You are an expert historian. What caused WW1?",
            "Jestes ekspertem. Jakie sa trendy AI?",
            "As a doctor, list flu symptoms",
        ],
    )
    def test_role_playing(self, prompt):
        """Test role-play detection."""
        issues = detect_perplexity_issues(prompt)

        assert "PERPLEXITY_ROLE_PLAYING" in _codes(issues)
        assert issues[0].severity == IssueSeverity.CRITICAL

    def test_as_a_matches_inside_words(self):
        """Test that "as a" is a plain substring check, so "has a" counts too."""
        issues = detect_perplexity_issues("Which laptop has a better battery, X or Y?")

        assert _codes(issues) == ["PERPLEXITY_ROLE_PLAYING"]

    @pytest.mark.parametrize(
        "prompt",
        ["Example: Q1 sales", "Przykład: sprzedaz", "Input: 2\nOutput: 4\nWhat is 3?"],
    )
    def test_few_shot(self, prompt):
        """Test few-shot example detection."""
        assert "PERPLEXITY_FEW_SHOT" in _codes(detect_perplexity_issues(prompt))

    def test_url_request(self):
        """Test the URL warning."""
        issues = detect_perplexity_issues("Latest EU AI Act news, give me the URL")

        assert _codes(issues) == ["PERPLEXITY_URL_REQUEST"]
        assert issues[0].severity == IssueSeverity.WARNING


class TestImageDetectors:
    """Test image and video model checks."""

    def test_nano_banana_first_technical_term(self):
        """Test that the first listed technical term is reported."""
        issues = detect_nano_banana_issues("A cat, 8k uhd, Octane Render")

        assert _codes(issues) == ["NANO_BANANA_TECHNICAL"]
        assert "octane render" in issues[0].message

    def test_nano_banana_negative_prompt(self):
        """Test the negative phrasing suggestion."""
        assert _codes(detect_nano_banana_issues("A cat with no blur")) == ["NANO_BANANA_NEGATIVE"]

    def test_grok_visual_checks(self):
        """Test length, hands and text checks in order."""
        prompt = "A woman raising her hand next to a sign with text, " + "x" * 700

        issues = detect_grok_visual_issues(prompt)

        assert _codes(issues) == ["GROK_IMAGE_TOO_LONG", "GROK_IMAGE_HANDS", "GROK_IMAGE_TEXT"]
        assert str(len(prompt)) in issues[0].message

    def test_grok_visual_clean_prompt(self):
        """Test a short subject-first prompt."""
        assert detect_grok_visual_issues("A lighthouse at dusk, cinematic, 16:9") == []


class TestGenericChecks:
    """Test the generic length check and user reports."""

    def test_length_only(self):
        """Test the iterate suggestion above 1000 characters."""
        assert detect_length_only("x" * 1000) == []
        assert _codes(detect_length_only("x" * 1001)) == ["GROK_ITERATE"]

    def test_user_reported_issues(self):
        """Test that each report becomes a warning."""
        issues = user_reported_issues(("Too verbose", "Ignores format"))

        assert _codes(issues) == ["USER_REPORTED", "USER_REPORTED"]
        assert [i.message for i in issues] == ["Too verbose", "Ignores format"]
        assert all(i.severity == IssueSeverity.WARNING for i in issues)
