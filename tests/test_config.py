"""Tests for environment configuration."""

from pathlib import Path
from typing import Any

import pytest
from pydantic import ValidationError

from src.utils.config import Settings, get_settings, reset_settings


class TestSettings:
    """Test the Settings class."""

    def test_defaults_without_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that every field has a usable default."""
        for name in ("APP_NAME", "ENVIRONMENT", "LOG_LEVEL", "DEBUG", "KNOWLEDGE_DIR"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.APP_NAME == "promptwright"
        assert settings.ENVIRONMENT == "development"
        assert settings.LOG_LEVEL == "INFO"
        assert settings.DEBUG is False
        assert settings.KNOWLEDGE_DIR is None
        assert settings.RULES_CACHE_TTL_SECONDS == 3600
        assert settings.RECIPE_MATCH_THRESHOLD == 0.1

    def test_fields_can_be_overridden(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        """Test that fields can be set via environment variables."""
        monkeypatch.setenv("APP_NAME", "test-app")
        monkeypatch.setenv("ENVIRONMENT", "staging")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("DEBUG", "true")
        monkeypatch.setenv("KNOWLEDGE_DIR", str(tmp_path))
        monkeypatch.setenv("RULES_CACHE_TTL_SECONDS", "60")
        monkeypatch.setenv("RECIPE_MATCH_THRESHOLD", "0.25")

        settings = Settings()

        assert settings.APP_NAME == "test-app"
        assert settings.ENVIRONMENT == "staging"
        assert settings.LOG_LEVEL == "DEBUG"
        assert settings.DEBUG is True
        assert settings.KNOWLEDGE_DIR == tmp_path
        assert settings.RULES_CACHE_TTL_SECONDS == 60
        assert settings.RECIPE_MATCH_THRESHOLD == 0.25

    def test_environment_validation(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that ENVIRONMENT field only accepts valid values."""
        monkeypatch.setenv("ENVIRONMENT", "invalid-env")

        with pytest.raises(ValidationError) as exc_info:
            Settings()

        assert "ENVIRONMENT" in str(exc_info.value)

    def test_valid_environment_values(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that all valid environment values are accepted."""
        for env in ["development", "staging", "production"]:
            monkeypatch.setenv("ENVIRONMENT", env)
            settings = Settings()
            assert settings.ENVIRONMENT == env

    def test_log_level_validation(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that LOG_LEVEL is validated and normalized to uppercase."""
        monkeypatch.setenv("LOG_LEVEL", "debug")  # lowercase

        settings = Settings()

        assert settings.LOG_LEVEL == "DEBUG"

    def test_invalid_log_level_raises_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that invalid log level raises ValidationError."""
        monkeypatch.setenv("LOG_LEVEL", "INVALID")

        with pytest.raises(ValidationError) as exc_info:
            Settings()

        assert "LOG_LEVEL" in str(exc_info.value)

    def test_cache_ttl_must_be_positive(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that RULES_CACHE_TTL_SECONDS must be greater than 0."""
        monkeypatch.setenv("RULES_CACHE_TTL_SECONDS", "0")

        with pytest.raises(ValidationError) as exc_info:
            Settings()

        assert "RULES_CACHE_TTL_SECONDS" in str(exc_info.value)

    @pytest.mark.parametrize("value", ["-0.1", "1.5"])
    def test_match_threshold_must_be_a_fraction(
        self, monkeypatch: pytest.MonkeyPatch, value: str
    ) -> None:
        """Test that RECIPE_MATCH_THRESHOLD is bounded to [0, 1]."""
        monkeypatch.setenv("RECIPE_MATCH_THRESHOLD", value)

        with pytest.raises(ValidationError):
            Settings()

    def test_extra_env_vars_are_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that extra environment variables are ignored."""
        monkeypatch.setenv("UNKNOWN_VAR", "should-be-ignored")

        settings = Settings()

        assert not hasattr(settings, "UNKNOWN_VAR")

    def test_env_file_is_read(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        """Test that values come from a .env file in the working directory."""
        monkeypatch.delenv("APP_NAME", raising=False)
        (tmp_path / ".env").write_text("APP_NAME=from-dotenv\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)

        settings = Settings()

        assert settings.APP_NAME == "from-dotenv"


class TestKnowledgeDir:
    """Test knowledge directory resolution."""

    def test_defaults_to_bundled_documents(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that an unset KNOWLEDGE_DIR resolves to the packaged documents."""
        monkeypatch.delenv("KNOWLEDGE_DIR", raising=False)

        knowledge_dir = Settings(_env_file=None).get_knowledge_dir()

        assert knowledge_dir.name == "documents"
        assert (knowledge_dir / "claude-4.md").is_file()

    def test_explicit_directory_wins(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        """Test that KNOWLEDGE_DIR overrides the bundled documents."""
        monkeypatch.setenv("KNOWLEDGE_DIR", str(tmp_path))

        assert Settings().get_knowledge_dir() == tmp_path


class TestGetSettings:
    """Test the get_settings singleton function."""

    def setup_method(self) -> None:
        """Reset settings before each test."""
        reset_settings()

    def teardown_method(self) -> None:
        """Clean up after each test."""
        reset_settings()

    def test_get_settings_returns_singleton(self) -> None:
        """Test that get_settings returns the same instance."""
        settings1 = get_settings()
        settings2 = get_settings()

        assert settings1 is settings2

    def test_reset_settings_clears_singleton(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that reset_settings clears the singleton."""
        monkeypatch.setenv("APP_NAME", "test-app")

        settings1 = get_settings()
        reset_settings()

        monkeypatch.setenv("APP_NAME", "different-app")
        settings2 = get_settings()

        assert settings1 is not settings2
        assert settings1.APP_NAME == "test-app"
        assert settings2.APP_NAME == "different-app"

    def test_get_settings_raises_error_on_invalid_value(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Any
    ) -> None:
        """Test that get_settings surfaces ValidationError for bad values."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("RULES_CACHE_TTL_SECONDS", "-5")

        with pytest.raises(ValidationError):
            get_settings()
