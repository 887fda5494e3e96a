"""
Standardized Error Handling for deplint

Hierarchical exception classes with error codes and context.

Rules never raise for malformed documents; these errors only surface while
building a semantic model or loading configuration.
"""

from typing import Any


class DepLintError(Exception):
    """Base exception for all deplint errors.

    Example:
        raise DepLintError(
            code="SEMANTIC_MODEL_ERROR",
            message="Node is not part of the program",
            node_kind="ArraySyntax",
        )
    """

    def __init__(self, code: str, message: str, **context: Any) -> None:
        self.code = code
        self.message = message
        self.context = context
        super().__init__(f"[{code}] {message}")

    def __repr__(self) -> str:
        ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r}, {ctx_str})"


# ==============================================================================
# Semantic Model Errors
# ==============================================================================


class SemanticModelError(DepLintError):
    """Invalid semantic model construction."""

    CODE = "SEMANTIC_MODEL_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(code=self.CODE, message=message, **context)


class UnboundNodeError(SemanticModelError):
    """Binding targets a node outside the program tree."""

    CODE = "UNBOUND_NODE"


# ==============================================================================
# Configuration Errors
# ==============================================================================


class ConfigurationError(DepLintError):
    """Error in configuration."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(code="CONFIGURATION_ERROR", message=message, **context)


__all__ = [
    "DepLintError",
    "SemanticModelError",
    "UnboundNodeError",
    "ConfigurationError",
]
