"""Per-model prompt strategies: builders, issue detectors and rewriters."""

from src.strategies.builders import CODE_TASKS, PromptSpec
from src.strategies.table import STRATEGIES, ModelStrategy, get_strategy, list_strategies

__all__ = [
    "CODE_TASKS",
    "PromptSpec",
    "STRATEGIES",
    "ModelStrategy",
    "get_strategy",
    "list_strategies",
]
