"""Model registry and the cached, enhanced rule store."""

from src.rules.cache import CacheEntry, ExpiringCache
from src.rules.enhancement import MANDATORY_RULES, enhance_rules
from src.rules.registry import (
    MODEL_COMPARISON,
    MODEL_REGISTRY,
    ModelDescriptor,
    get_all_models,
    get_comparison_table,
    get_model_info,
    get_models_by_category,
    is_valid_model,
)
from src.rules.store import ModelRules, RuleStore, get_rule_store, reset_rule_store

__all__ = [
    "CacheEntry",
    "ExpiringCache",
    "MANDATORY_RULES",
    "enhance_rules",
    "MODEL_COMPARISON",
    "MODEL_REGISTRY",
    "ModelDescriptor",
    "get_all_models",
    "get_comparison_table",
    "get_model_info",
    "get_models_by_category",
    "is_valid_model",
    "ModelRules",
    "RuleStore",
    "get_rule_store",
    "reset_rule_store",
]
