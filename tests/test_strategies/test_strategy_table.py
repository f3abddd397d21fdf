"""Tests for the per-model strategy table."""

import pytest

from src.rules.registry import MODEL_REGISTRY
from src.schemas.enums import ModelSlug
from src.strategies.table import STRATEGIES, ModelStrategy, get_strategy, list_strategies


class TestStrategyTable:
    """Test strategy lookup."""

    def test_every_model_has_a_strategy(self):
        """Test that the table covers the model registry exactly."""
        assert set(STRATEGIES) == {slug.value for slug in ModelSlug}
        assert set(list_strategies()) == set(MODEL_REGISTRY)

    def test_list_is_sorted(self):
        """Test that listed slugs are sorted."""
        assert list_strategies() == sorted(list_strategies())

    @pytest.mark.parametrize("slug", list(ModelSlug))
    def test_enum_and_string_lookup_agree(self, slug):
        """Test that enum members and plain slugs resolve to the same strategy."""
        assert get_strategy(slug) is get_strategy(slug.value)
        assert isinstance(get_strategy(slug), ModelStrategy)

    def test_unknown_slug(self):
        """Test that the error lists available strategies."""
        with pytest.raises(KeyError) as exc_info:
            get_strategy("gpt-4")

        message = str(exc_info.value)
        assert "gpt-4" in message
        assert "claude-4.5" in message

    @pytest.mark.parametrize("slug", list_strategies())
    def test_strategies_declare_techniques(self, slug):
        """Test that every strategy names at least one technique."""
        assert get_strategy(slug).techniques

    def test_models_without_rewrites_leave_prompts_alone(self):
        """Test the identity rewriter on image and video models."""
        for slug in ("grok-4.1", "nano-banana", "grok-aurora", "grok-imagine"):
            assert get_strategy(slug).rewrite("Think about it") == ("Think about it", [])
