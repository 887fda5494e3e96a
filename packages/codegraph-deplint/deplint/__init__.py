"""deplint - dependsOn linting for infrastructure documents.

Finds explicit ``dependsOn`` entries that duplicate dependencies the compiler
already infers from property references.

Quick Start:
    >>> from deplint import NoUnnecessaryDependsOnRule
    >>>
    >>> rule = NoUnnecessaryDependsOnRule(provider)   # DependencyInferenceProvider
    >>> diagnostics = rule.analyze(model)             # SemanticModel
    >>> diagnostics[0].message
    "Resource dependency 'plan' is redundant because it is already implied by a property reference."
"""

__version__ = "0.1.0"  # Keep in sync with pyproject.toml

# =============================================================================
# Rules
# =============================================================================
from deplint.rules import (
    LinterRule,
    NoUnnecessaryDependsOnRule,
    RedundantDependsOn,
    find_redundant_depends_on,
)

# =============================================================================
# Model
# =============================================================================
from deplint.diagnostics import CodeFix, CodeReplacement, Diagnostic, DiagnosticLevel
from deplint.ports import DependencyInferenceProvider, InferredDependencyMap, SemanticModelPort
from deplint.semantics import (
    DeclaredSymbol,
    ModuleSymbol,
    ResourceDependency,
    ResourceSymbol,
    SemanticModel,
)
from deplint.syntax import TextSpan

# =============================================================================
# Configuration, Errors & Logging
# =============================================================================
from deplint.config import DepLintConfig, RuleConfig, get_config
from deplint.errors import ConfigurationError, DepLintError, SemanticModelError
from deplint.logging import get_logger, setup_logging

__all__ = [
    # Version
    "__version__",
    # Rules
    "LinterRule",
    "NoUnnecessaryDependsOnRule",
    "RedundantDependsOn",
    "find_redundant_depends_on",
    # Model
    "CodeFix",
    "CodeReplacement",
    "Diagnostic",
    "DiagnosticLevel",
    "DependencyInferenceProvider",
    "InferredDependencyMap",
    "SemanticModelPort",
    "DeclaredSymbol",
    "ModuleSymbol",
    "ResourceDependency",
    "ResourceSymbol",
    "SemanticModel",
    "TextSpan",
    # Configuration
    "DepLintConfig",
    "RuleConfig",
    "get_config",
    # Errors
    "DepLintError",
    "SemanticModelError",
    "ConfigurationError",
    # Logging
    "get_logger",
    "setup_logging",
]
