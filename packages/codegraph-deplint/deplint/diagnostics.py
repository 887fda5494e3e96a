"""Diagnostics - lint findings produced by rules.

A Diagnostic is anchored at a TextSpan of the analyzed document and may carry
code fixes that editors can offer as quick actions.
"""

from dataclasses import dataclass, field
from enum import Enum

from deplint.syntax import TextSpan


class DiagnosticLevel(str, Enum):
    """Configured severity of a rule. OFF disables the rule."""

    OFF = "off"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CodeReplacement:
    """Replace the text covered by ``span`` with ``text``."""

    span: TextSpan
    text: str


@dataclass(frozen=True)
class CodeFix:
    """A named set of replacements applied together."""

    title: str
    replacements: tuple[CodeReplacement, ...]
    is_preferred: bool = False


@dataclass(frozen=True)
class Diagnostic:
    """A lint finding.

    Attributes:
        span: Location in the document
        level: Severity (never OFF)
        code: Stable rule identifier, e.g. "no-unnecessary-dependson"
        message: Human-readable message
        doc_uri: Link to rule documentation
        fixes: Optional code fixes
    """

    span: TextSpan
    level: DiagnosticLevel
    code: str
    message: str
    doc_uri: str | None = None
    fixes: tuple[CodeFix, ...] = field(default_factory=tuple)

    @property
    def is_fixable(self) -> bool:
        return len(self.fixes) > 0

    def __str__(self) -> str:
        return f"{self.span}: {self.level.value} {self.code}: {self.message}"
