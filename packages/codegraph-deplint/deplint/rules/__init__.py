"""Linter rules."""

from deplint.rules.base import LinterRule
from deplint.rules.no_unnecessary_depends_on import (
    NoUnnecessaryDependsOnRule,
    RedundantDependsOn,
    find_redundant_depends_on,
)

__all__ = [
    "LinterRule",
    "NoUnnecessaryDependsOnRule",
    "RedundantDependsOn",
    "find_redundant_depends_on",
]
