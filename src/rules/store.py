"""Rule Store - cached, enhanced rules per model.

Loads a model's knowledge document on cache miss, extracts and enhances its
rules, and keeps the result for a fixed time-to-live.

Concurrency:
    The cache is the only shared mutable state. Two concurrent misses for
    the same model may both parse the document and both store the result;
    the value is deterministic, so the second write only wastes a parse.
    No locking is done here.

Error Handling:
    Parser failures are wrapped in RulesLoadError with the model slug;
    unknown slugs raise UnknownModelError. Nothing is retried: callers
    clear the cache and retry the whole operation if they want to.

Example:
    >>> store = RuleStore()
    >>> rules = store.get_rules("claude-4.5")
    >>> rules.model_info.producer
    'Anthropic'
"""

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from src.knowledge.parser import extract_rules, parse_file
from src.rules.cache import CacheEntry, Clock, ExpiringCache
from src.rules.enhancement import enhance_rules
from src.rules.registry import MODEL_REGISTRY, ModelDescriptor, is_valid_model
from src.schemas.enums import ModelSlug, enum_value
from src.utils.config import get_settings
from src.utils.error_handling import (
    ErrorContext,
    KnowledgeFileNotFoundError,
    KnowledgeReadError,
    RulesLoadError,
    UnknownModelError,
)
from src.utils.logging_config import get_logger


def _get_logger():
    """Get logger lazily to avoid configuring logging at import time."""
    return get_logger(__name__)


@dataclass(frozen=True)
class ModelRules:
    """Enhanced rules for one model, together with its descriptor.

    Attributes:
        model: Model slug
        model_info: Registry descriptor
        rules: Canonical rules from the TL;DR block
        avoid: Avoid list, including mandatory additions
        checklist: Checklist items
        tips: Tips, including mandatory additions
        quick_start: Quick start sample prompt
    """

    model: ModelSlug
    model_info: ModelDescriptor
    rules: tuple[str, ...]
    avoid: tuple[str, ...]
    checklist: tuple[str, ...]
    tips: tuple[str, ...]
    quick_start: str


class RuleStore:
    """Loads, enhances and caches per-model rules.

    Args:
        knowledge_dir: Directory that knowledge document names resolve against
            (default: Settings.KNOWLEDGE_DIR or the bundled documents)
        ttl_seconds: Lifetime of a cache entry (default: Settings.RULES_CACHE_TTL_SECONDS)
        clock: Monotonic time source, injectable for tests
    """

    def __init__(
        self,
        knowledge_dir: Optional[Path] = None,
        ttl_seconds: Optional[float] = None,
        clock: Clock = time.monotonic,
    ):
        self.knowledge_dir = (
            Path(knowledge_dir) if knowledge_dir is not None else get_settings().get_knowledge_dir()
        )
        if ttl_seconds is None:
            ttl_seconds = get_settings().RULES_CACHE_TTL_SECONDS
        self._cache: ExpiringCache[ModelRules] = ExpiringCache(ttl_seconds, clock)

    @staticmethod
    def is_valid_model(slug: str) -> bool:
        """Check whether a slug names a registered model."""
        return is_valid_model(slug)

    def document_path(self, descriptor: ModelDescriptor) -> Path:
        """Resolve a descriptor's knowledge document against the knowledge directory."""
        return self.knowledge_dir / descriptor.document

    def get_cached_entry(self, slug: str) -> Optional[CacheEntry[ModelRules]]:
        """Get the live cache entry for a model without loading anything."""
        return self._cache.get_entry(enum_value(slug))

    def get_rules(self, slug: str) -> ModelRules:
        """Get enhanced rules for a model, parsing its document on cache miss.

        Args:
            slug: Model slug

        Returns:
            ModelRules for the model; the cached instance while it is fresh

        Raises:
            UnknownModelError: If the slug is not registered
            RulesLoadError: If the knowledge document cannot be loaded
        """
        if not is_valid_model(slug):
            raise UnknownModelError(str(enum_value(slug)))

        key = enum_value(slug)
        cached = self._cache.get(key)
        if cached is not None:
            _get_logger().debug("Rules cache hit for %s", key)
            return cached

        _get_logger().debug("Rules cache miss for %s", key)
        descriptor = MODEL_REGISTRY[key]
        rules = self._load(descriptor)
        self._cache.set(key, rules)
        return rules

    def _load(self, descriptor: ModelDescriptor) -> ModelRules:
        path = self.document_path(descriptor)
        slug = descriptor.slug.value

        try:
            with ErrorContext("load_rules", model=slug) as ctx:
                ctx.add_info("document", str(path))
                parsed = parse_file(path)
        except (KnowledgeFileNotFoundError, KnowledgeReadError) as e:
            raise RulesLoadError(slug, e) from e

        extracted = enhance_rules(slug, extract_rules(parsed))
        _get_logger().info(
            "Loaded rules for %s from %s (%d rules, %d avoid, %d tips)",
            slug,
            descriptor.document,
            len(extracted.rules),
            len(extracted.avoid),
            len(extracted.tips),
        )

        return ModelRules(
            model=descriptor.slug,
            model_info=descriptor,
            rules=extracted.rules,
            avoid=extracted.avoid,
            checklist=extracted.checklist,
            tips=extracted.tips,
            quick_start=extracted.quick_start,
        )

    def get_rules_for_models(self, slugs: Iterable[str]) -> dict[str, ModelRules]:
        """Get rules for several models, keyed by slug.

        Raises:
            UnknownModelError: If any slug is not registered
            RulesLoadError: If any knowledge document cannot be loaded
        """
        return {enum_value(slug): self.get_rules(slug) for slug in slugs}

    def clear_cache(self, slug: Optional[str] = None) -> None:
        """Evict one model's cache entry, or every entry when no slug is given."""
        if slug is None:
            removed = self._cache.clear()
            _get_logger().debug("Cleared rules cache (%d entries)", removed)
        else:
            self._cache.invalidate(enum_value(slug))
            _get_logger().debug("Cleared rules cache for %s", enum_value(slug))


# Process-wide default instance
_rule_store: RuleStore | None = None


def get_rule_store() -> RuleStore:
    """
    Get the default rule store, configured from Settings on first call.

    Returns:
        RuleStore: Shared instance using KNOWLEDGE_DIR and RULES_CACHE_TTL_SECONDS
    """
    global _rule_store
    if _rule_store is None:
        settings = get_settings()
        _rule_store = RuleStore(
            knowledge_dir=settings.get_knowledge_dir(),
            ttl_seconds=settings.RULES_CACHE_TTL_SECONDS,
        )
    return _rule_store


def reset_rule_store() -> None:
    """Drop the default rule store (and its cache). Useful for testing."""
    global _rule_store
    _rule_store = None
