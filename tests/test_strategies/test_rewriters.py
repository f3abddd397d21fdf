"""Tests for per-model prompt rewriters."""

import re

from src.schemas.enums import ChangeKind
from src.strategies.rewriters import (
    rewrite_claude_prompt,
    rewrite_gemini_prompt,
    rewrite_gpt_prompt,
    rewrite_identity,
    rewrite_perplexity_prompt,
)

LONG_PLAIN_PROMPT = "Summarize the quarterly report. " * 8


class TestClaudeRewriter:
    """Test think replacement and XML wrapping."""

    def test_think_about_becomes_consider(self):
        """Test replacement with capitalization preserved."""
        text, changes = rewrite_claude_prompt("Think about this problem and solve it")

        assert text == "Consider this problem and solve it"
        assert [c.kind for c in changes] == [ChangeKind.MODIFIED]

    def test_all_think_variants_replaced(self):
        """Test that no standalone think survives."""
        text, _ = rewrite_claude_prompt("I think thinking helps; think through it")

        assert text == "I assess evaluating helps; work through it"
        assert not re.search(r"\bthink", text, re.IGNORECASE)

    def test_long_untagged_prompt_is_wrapped(self):
        """Test the <task> wrapper."""
        text, changes = rewrite_claude_prompt(LONG_PLAIN_PROMPT)

        assert text == f"<task>\n{LONG_PLAIN_PROMPT}\n</task>"
        assert [c.kind for c in changes] == [ChangeKind.ADDED]

    def test_prompt_mentioning_context_is_not_wrapped(self):
        """Test that prompts already describing context are left alone."""
        prompt = "Context: finance team. " + LONG_PLAIN_PROMPT

        assert rewrite_claude_prompt(prompt) == (prompt, [])

    def test_idempotent(self):
        """Test that rewriting the output changes nothing."""
        once, _ = rewrite_claude_prompt("Think about it. " + LONG_PLAIN_PROMPT)

        assert rewrite_claude_prompt(once) == (once, [])


class TestGptRewriter:
    """Test Markdown structuring."""

    def test_long_multiline_prompt_gets_headers(self):
        """Test the task and response format headers."""
        prompt = "\n".join(["Describe the architecture of the system in detail."] * 7)

        text, changes = rewrite_gpt_prompt(prompt)

        assert text.startswith(f"## Task\n{prompt}\n\n## Response format")
        assert [c.kind for c in changes] == [ChangeKind.ADDED]
        assert rewrite_gpt_prompt(text) == (text, [])

    def test_single_line_prompt_unchanged(self):
        """Test that long single-line prompts are not restructured."""
        prompt = "x" * 400

        assert rewrite_gpt_prompt(prompt) == (prompt, [])


class TestGeminiRewriter:
    """Test verbose phrase removal and format placement."""

    def test_removes_courtesy_phrases(self):
        """Test that each removed phrase is reported."""
        prompt = "Prosze, podsumuj artykul. Pamietaj, ze czytelnicy to inzynierowie.\nFormat: 3 punkty"

        text, changes = rewrite_gemini_prompt(prompt)

        assert text == "podsumuj artykul. czytelnicy to inzynierowie.\nFormat: 3 punkty"
        assert [c.kind for c in changes] == [ChangeKind.REMOVED, ChangeKind.REMOVED]

    def test_polish_phrase(self):
        """Test a Polish courtesy phrase."""
        text, changes = rewrite_gemini_prompt("Czy moglbys opisac fotosynteze?")

        assert text == "opisac fotosynteze?"
        assert len(changes) == 1

    def test_format_moved_to_end(self):
        """Test that the format block ends the prompt."""
        text, changes = rewrite_gemini_prompt("Format: a table\n\nCompare Python and Go")

        assert text == "Compare Python and Go\n\nFormat: a table"
        assert [c.kind for c in changes] == [ChangeKind.MODIFIED]
        assert rewrite_gemini_prompt(text) == (text, [])

    def test_english_courtesy_is_kept(self):
        """Test that only the listed phrases are removed."""
        prompt = "Please, summarize this article.\nFormat: 3 bullets"

        assert rewrite_gemini_prompt(prompt) == (prompt, [])

    def test_format_block_in_the_middle(self):
        """Test that no blank-line run is left where the block was."""
        text, _ = rewrite_gemini_prompt("Compare Python and Go\n\nFormat: a table\n\nBe brief")

        assert text == "Compare Python and Go\n\nBe brief\n\nFormat: a table"

    def test_two_format_blocks_settle_after_one_pass(self):
        """Test that a second rewrite of a two-block prompt changes nothing."""
        prompt = "Format: a table\n\nCompare Python and Go\n\nFormat: in English\n\nBe brief"

        once, changes = rewrite_gemini_prompt(prompt)

        assert once == "Compare Python and Go\n\nFormat: in English\n\nBe brief\n\nFormat: a table"
        assert len(changes) == 1
        assert rewrite_gemini_prompt(once) == (once, [])
        assert "\n\n\n" not in once

    def test_format_already_last(self):
        """Test that a trailing format block stays put."""
        prompt = "Compare Python and Go\n\nFormat: a table"

        assert rewrite_gemini_prompt(prompt) == (prompt, [])


class TestPerplexityRewriter:
    """Test role and example removal."""

    def test_removes_role_sentence(self):
        """Test role-play removal."""
        text, changes = rewrite_perplexity_prompt(
            "You are an expert historian. What caused the First World War?"
        )

        assert text == "What caused the First World War?"
        assert [c.kind for c in changes] == [ChangeKind.REMOVED]

    def test_removes_examples(self):
        """Test few-shot removal."""
        text, changes = rewrite_perplexity_prompt("What is RAG?\n\nExample: RAG means retrieval")

        assert text == "What is RAG?"
        assert len(changes) == 1

    def test_clean_prompt_untouched(self):
        """Test a search-style prompt."""
        prompt = "EU AI Act obligations for startups, 2024-2025"

        assert rewrite_perplexity_prompt(prompt) == (prompt, [])


class TestIdentityRewriter:
    """Test models without rewrites."""

    def test_identity(self):
        """Test that the prompt is returned unchanged."""
        assert rewrite_identity("anything at all") == ("anything at all", [])
