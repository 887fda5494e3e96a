"""Base class for linter rules."""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import ClassVar

from deplint.config import RuleConfig, get_config
from deplint.diagnostics import CodeFix, Diagnostic, DiagnosticLevel
from deplint.logging import get_logger
from deplint.ports import SemanticModelPort
from deplint.syntax import TextSpan

logger = get_logger(__name__)


class LinterRule(ABC):
    """Base class for all linter rules.

    Subclasses must define:
        - CODE: stable rule identifier (also the last segment of the doc URI)
        - DESCRIPTION: one-line summary
        - MESSAGE_TEMPLATE: str.format template for diagnostic messages

    Example:
        >>> rule = MyRule(RuleConfig(level="error"))
        >>> diagnostics = rule.analyze(model)
    """

    CODE: ClassVar[str] = ""
    DESCRIPTION: ClassVar[str] = ""
    MESSAGE_TEMPLATE: ClassVar[str] = ""

    def __init__(self, config: RuleConfig | None = None) -> None:
        if not self.CODE:
            raise ValueError(f"{self.__class__.__name__} must define CODE")
        if not self.MESSAGE_TEMPLATE:
            raise ValueError(f"{self.__class__.__name__} must define MESSAGE_TEMPLATE")
        self.config = config if config is not None else get_config().rule

    @property
    def level(self) -> DiagnosticLevel:
        return self.config.level

    @property
    def doc_uri(self) -> str:
        return f"{self.config.doc_uri_base.rstrip('/')}/{self.CODE}"

    def format_message(self, *values: object) -> str:
        return self.MESSAGE_TEMPLATE.format(*values)

    def create_diagnostic_for_span(
        self,
        span: TextSpan,
        *values: object,
        fixes: tuple[CodeFix, ...] = (),
    ) -> Diagnostic:
        return Diagnostic(
            span=span,
            level=self.level,
            code=self.CODE,
            message=self.format_message(*values),
            doc_uri=self.doc_uri,
            fixes=fixes,
        )

    def analyze(self, model: SemanticModelPort) -> tuple[Diagnostic, ...]:
        """Run the rule over a document.

        Returns an empty tuple without touching the model when the rule is off.
        """
        if self.level == DiagnosticLevel.OFF:
            return ()

        diagnostics = tuple(self.analyze_internal(model))
        logger.debug("rule_analyzed", rule=self.CODE, diagnostics=len(diagnostics))
        return diagnostics

    @abstractmethod
    def analyze_internal(self, model: SemanticModelPort) -> Iterable[Diagnostic]:
        """Produce diagnostics for ``model``. Must not raise on malformed input."""
        ...
