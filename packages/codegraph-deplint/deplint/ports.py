"""
deplint Ports

Interfaces of the external collaborators a rule consumes.
"""

from collections.abc import Iterator, Mapping
from typing import Protocol

from deplint.semantics import DeclaredSymbol, ResourceDependency
from deplint.syntax import ResourceDeclarationSyntax, SyntaxBase

InferredDependencyMap = Mapping[DeclaredSymbol, frozenset[ResourceDependency]]
"""Source entity -> inferred dependencies. Entities without any are absent."""


class SemanticModelPort(Protocol):
    """Read-only semantic queries."""

    def get_symbol_info(self, node: SyntaxBase) -> DeclaredSymbol | None:
        """Symbol the node resolves to, or None"""
        ...

    def is_resource_collection(self, symbol: DeclaredSymbol) -> bool:
        """True for resources/modules declared with ``for`` cardinality"""
        ...

    def resource_declarations(self) -> Iterator[ResourceDeclarationSyntax]:
        """Resource declarations in document order"""
        ...


class DependencyInferenceProvider(Protocol):
    """Infers dependencies from property references."""

    def compute_inferred_dependencies(
        self,
        model: SemanticModelPort,
        ignore_explicit_depends_on: bool,
    ) -> InferredDependencyMap:
        """Compute the mapping for the whole document.

        With ``ignore_explicit_depends_on`` set, ``dependsOn`` entries never
        contribute to the result.
        """
        ...
