"""Error types and error context tracking for the prompt engine.

Every error raised by the engine carries a stable string code and an HTTP
status hint. The boundary layer is the only place where these errors are
translated into responses; inside the engine they are wrapped (parser →
rule store) or propagated unchanged (rule store → agents), never swallowed.

Key Components:
- PromptEngineError: base class with code, status hint, model and context
- UnknownModelError: slug not present in the model registry
- KnowledgeFileNotFoundError / KnowledgeReadError: knowledge document I/O
- RulesLoadError: rule store wrapper around a parser failure
- ErrorContext: context manager that logs operation timing and failures
"""

import time
from typing import Any, Optional

from src.utils.logging_config import get_logger


def _get_logger():
    """Get logger lazily to avoid configuring logging at import time."""
    return get_logger(__name__)


class PromptEngineError(Exception):
    """Base exception for prompt engine errors."""

    code: str = "ENGINE_ERROR"
    status_code: int = 500

    def __init__(
        self,
        message: str,
        *,
        code: Optional[str] = None,
        status_code: Optional[int] = None,
        model: Optional[str] = None,
        **context: Any,
    ):
        """Initialize engine error with context.

        Args:
            message: Error message
            code: Stable error code (defaults to the class code)
            status_code: HTTP status hint (defaults to the class status)
            model: Model slug the error relates to, if any
            **context: Additional context information
        """
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        if status_code is not None:
            self.status_code = status_code
        self.model = model
        self.context = context
        self.timestamp = time.time()

    def __str__(self):
        """String representation with model slug if available."""
        base = super().__str__()
        if self.model:
            return f"[{self.model}] {base}"
        return base

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the ``{code, message, details}`` error shape."""
        details: dict[str, Any] = dict(self.context)
        if self.model:
            details["model"] = self.model
        return {
            "code": self.code,
            "message": self.message,
            "details": details or None,
        }


class UnknownModelError(PromptEngineError):
    """Model slug is not registered."""

    code = "UNKNOWN_MODEL"
    status_code = 400

    def __init__(self, model: str, **context: Any):
        super().__init__(f"Unknown model: {model}", model=model, **context)


class KnowledgeFileNotFoundError(PromptEngineError):
    """Knowledge document does not exist."""

    code = "FILE_NOT_FOUND"
    status_code = 404

    def __init__(self, path: str, **context: Any):
        super().__init__(f"Knowledge document not found: {path}", path=str(path), **context)
        self.path = str(path)


class KnowledgeReadError(PromptEngineError):
    """Knowledge document exists but could not be read."""

    code = "READ_ERROR"
    status_code = 500

    def __init__(self, path: str, reason: str, **context: Any):
        super().__init__(
            f"Failed to read knowledge document {path}: {reason}", path=str(path), **context
        )
        self.path = str(path)


class RulesLoadError(PromptEngineError):
    """Rules for a model could not be loaded from its knowledge document."""

    code = "RULES_LOAD_ERROR"

    def __init__(self, model: str, cause: PromptEngineError, **context: Any):
        super().__init__(
            f"Failed to load rules for {model}: {cause.message}",
            status_code=cause.status_code,
            model=model,
            cause_code=cause.code,
            **context,
        )
        self.cause = cause


class ErrorContext:
    """Context manager for tracking error information during an operation.

    Usage:
        with ErrorContext("load_rules", model="claude-4.5") as ctx:
            ctx.add_info("document", "claude-4.md")
            ...
    """

    def __init__(self, operation: str, model: Optional[str] = None):
        """Initialize error context.

        Args:
            operation: Name of operation being performed
            model: Model slug the operation works on
        """
        self.operation = operation
        self.model = model
        self.info: dict[str, Any] = {}
        self.start_time: Optional[float] = None

    def __enter__(self):
        """Enter context, recording start time."""
        self.start_time = time.perf_counter()
        _get_logger().debug("Starting operation: %s", self.operation)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context, logging duration and any errors."""
        duration = time.perf_counter() - self.start_time if self.start_time else 0.0
        extra = {
            "operation": self.operation,
            "model": self.model,
            "duration_ms": round(duration * 1000, 2),
            "extra_fields": dict(self.info),
        }

        if exc_type is None:
            _get_logger().debug(
                "Operation '%s' completed in %.3fs", self.operation, duration, extra=extra
            )
        else:
            _get_logger().error(
                "Operation '%s' failed after %.3fs: %s",
                self.operation,
                duration,
                exc_val,
                extra=extra,
            )

        # Never suppress the exception
        return False

    def add_info(self, key: str, value: Any) -> None:
        """Add contextual information.

        Args:
            key: Information key
            value: Information value
        """
        self.info[key] = value
