"""Tests for engine error types and error context tracking."""

import logging

import pytest

from src.utils.error_handling import (
    ErrorContext,
    KnowledgeFileNotFoundError,
    KnowledgeReadError,
    PromptEngineError,
    RulesLoadError,
    UnknownModelError,
)
from src.utils.logging_config import setup_logging


class TestPromptEngineError:
    """Tests for the base error class."""

    def test_basic_error(self):
        """Test defaults of a bare engine error."""
        error = PromptEngineError("Something broke")

        assert str(error) == "Something broke"
        assert error.code == "ENGINE_ERROR"
        assert error.status_code == 500
        assert error.model is None
        assert error.timestamp > 0

    def test_error_with_model(self):
        """Test that the model slug prefixes the message."""
        error = PromptEngineError("Something broke", model="gpt-5.2")

        assert str(error) == "[gpt-5.2] Something broke"
        assert error.message == "Something broke"

    def test_code_and_status_overrides(self):
        """Test per-instance code and status overrides."""
        error = PromptEngineError("Teapot", code="TEAPOT", status_code=418, attempt=2)

        assert error.code == "TEAPOT"
        assert error.status_code == 418
        assert error.context == {"attempt": 2}
        # Class defaults are untouched
        assert PromptEngineError.code == "ENGINE_ERROR"

    def test_to_dict(self):
        """Test the serialized error shape."""
        error = PromptEngineError("Broke", model="grok-4.1", step="parse")

        assert error.to_dict() == {
            "code": "ENGINE_ERROR",
            "message": "Broke",
            "details": {"step": "parse", "model": "grok-4.1"},
        }

    def test_to_dict_without_details(self):
        """Test that empty details serialize as None."""
        assert PromptEngineError("Broke").to_dict()["details"] is None


class TestSpecificErrors:
    """Tests for the concrete error kinds."""

    def test_unknown_model(self):
        """Test UnknownModelError code, status and message."""
        error = UnknownModelError("gpt-2")

        assert error.code == "UNKNOWN_MODEL"
        assert error.status_code == 400
        assert error.model == "gpt-2"
        assert error.message == "Unknown model: gpt-2"
        assert isinstance(error, PromptEngineError)

    def test_file_not_found(self):
        """Test KnowledgeFileNotFoundError carries the path."""
        error = KnowledgeFileNotFoundError("/docs/missing.md")

        assert error.code == "FILE_NOT_FOUND"
        assert error.status_code == 404
        assert error.path == "/docs/missing.md"
        assert error.context["path"] == "/docs/missing.md"

    def test_read_error(self):
        """Test KnowledgeReadError includes the reason."""
        error = KnowledgeReadError("/docs/bad.md", "permission denied")

        assert error.code == "READ_ERROR"
        assert error.status_code == 500
        assert "permission denied" in error.message

    def test_rules_load_error_wraps_cause(self):
        """Test RulesLoadError keeps the cause and its status."""
        cause = KnowledgeFileNotFoundError("/docs/missing.md")
        error = RulesLoadError("claude-4.5", cause)

        assert error.code == "RULES_LOAD_ERROR"
        assert error.status_code == 404
        assert error.cause is cause
        assert error.model == "claude-4.5"
        assert error.context["cause_code"] == "FILE_NOT_FOUND"
        assert str(error).startswith("[claude-4.5] Failed to load rules for claude-4.5")


class TestErrorContext:
    """Tests for the ErrorContext context manager."""

    def test_successful_operation(self, caplog: pytest.LogCaptureFixture):
        """Test that a completed operation logs at debug with timing."""
        setup_logging()
        caplog.set_level(logging.DEBUG)

        with ErrorContext("load_rules", model="claude-4.5") as ctx:
            ctx.add_info("document", "claude-4.md")

        assert ctx.info == {"document": "claude-4.md"}
        completed = [r for r in caplog.records if "completed" in r.getMessage()]
        assert len(completed) == 1
        assert completed[0].operation == "load_rules"
        assert completed[0].model == "claude-4.5"
        assert completed[0].duration_ms >= 0

    def test_failure_is_logged_and_not_suppressed(self, caplog: pytest.LogCaptureFixture):
        """Test that errors are logged and re-raised unchanged."""
        setup_logging()
        caplog.set_level(logging.DEBUG)

        with pytest.raises(KnowledgeReadError):
            with ErrorContext("load_rules", model="gpt-5.2"):
                raise KnowledgeReadError("/docs/gpt-5.md", "boom")

        failed = [r for r in caplog.records if r.levelno == logging.ERROR]
        assert len(failed) == 1
        assert "load_rules" in failed[0].getMessage()
        assert failed[0].model == "gpt-5.2"
