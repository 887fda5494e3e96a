"""Semantic Model - Domain Layer.

Symbols, inferred dependency records, and an in-memory SemanticModel that
binds syntax nodes to symbols.

Building the model (scope resolution, type checking) belongs to the compiler
front end; this module only holds the result so rules can query it:

    model = SemanticModel(program)
    storage = model.declare(storage_decl)        # ResourceSymbol
    model.bind(depends_on_item.value, storage)   # reference -> symbol
    model.get_symbol_info(depends_on_item.value) is storage
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar

from deplint.errors import SemanticModelError, UnboundNodeError
from deplint.syntax import (
    ModuleDeclarationSyntax,
    OutputDeclarationSyntax,
    ParameterDeclarationSyntax,
    ProgramSyntax,
    ResourceDeclarationSyntax,
    SyntaxBase,
    VariableDeclarationSyntax,
    walk,
)


class SymbolKind(str, Enum):
    RESOURCE = "resource"
    MODULE = "module"
    VARIABLE = "variable"
    PARAMETER = "parameter"
    OUTPUT = "output"

    def __str__(self) -> str:
        return self.value


# ==============================================================================
# Symbols
# ==============================================================================


@dataclass(frozen=True, eq=False)
class DeclaredSymbol:
    """A named declaration. Symbols compare and hash by identity."""

    KIND: ClassVar[SymbolKind]

    name: str
    declaring_syntax: SyntaxBase

    @property
    def kind(self) -> SymbolKind:
        return self.KIND

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r})"


@dataclass(frozen=True, eq=False, repr=False)
class ResourceSymbol(DeclaredSymbol):
    KIND: ClassVar[SymbolKind] = SymbolKind.RESOURCE

    @property
    def is_collection(self) -> bool:
        """True when declared with ``for`` cardinality."""
        return isinstance(self.declaring_syntax, ResourceDeclarationSyntax) and self.declaring_syntax.is_collection


@dataclass(frozen=True, eq=False, repr=False)
class ModuleSymbol(DeclaredSymbol):
    KIND: ClassVar[SymbolKind] = SymbolKind.MODULE

    @property
    def is_collection(self) -> bool:
        return isinstance(self.declaring_syntax, ModuleDeclarationSyntax) and self.declaring_syntax.is_collection


@dataclass(frozen=True, eq=False, repr=False)
class VariableSymbol(DeclaredSymbol):
    KIND: ClassVar[SymbolKind] = SymbolKind.VARIABLE


@dataclass(frozen=True, eq=False, repr=False)
class ParameterSymbol(DeclaredSymbol):
    KIND: ClassVar[SymbolKind] = SymbolKind.PARAMETER


@dataclass(frozen=True, eq=False, repr=False)
class OutputSymbol(DeclaredSymbol):
    KIND: ClassVar[SymbolKind] = SymbolKind.OUTPUT


@dataclass(frozen=True)
class ResourceDependency:
    """Inferred dependency of ``source`` on ``target``.

    Records are deduplicated by (source, target); ``index_expression`` tells
    which collection member was referenced and does not take part in equality.
    """

    source: DeclaredSymbol
    target: DeclaredSymbol
    index_expression: SyntaxBase | None = field(default=None, compare=False)


# ==============================================================================
# Semantic Model
# ==============================================================================

_SYMBOL_TYPES: dict[type, type[DeclaredSymbol]] = {
    ResourceDeclarationSyntax: ResourceSymbol,
    ModuleDeclarationSyntax: ModuleSymbol,
    VariableDeclarationSyntax: VariableSymbol,
    ParameterDeclarationSyntax: ParameterSymbol,
    OutputDeclarationSyntax: OutputSymbol,
}


class SemanticModel:
    """Read-only view of a bound program once construction is done.

    Attributes:
        program: Root syntax node
    """

    def __init__(self, program: ProgramSyntax) -> None:
        self.program = program
        self._nodes: set[SyntaxBase] = set(walk(program))
        self._bindings: dict[SyntaxBase, DeclaredSymbol] = {}

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def bind(self, node: SyntaxBase, symbol: DeclaredSymbol) -> None:
        """Bind ``node`` to ``symbol``.

        Raises:
            UnboundNodeError: ``node`` is not part of the program
        """
        if node not in self._nodes:
            raise UnboundNodeError(
                "Cannot bind a node outside the program",
                node_kind=type(node).__name__,
                symbol=symbol.name,
            )
        self._bindings[node] = symbol

    def declare(self, declaration: SyntaxBase) -> DeclaredSymbol:
        """Create the symbol of a declaration and bind the declaration to it.

        Raises:
            SemanticModelError: ``declaration`` is not a declaration node
            UnboundNodeError: ``declaration`` is not part of the program
        """
        symbol_type = _SYMBOL_TYPES.get(type(declaration))
        if symbol_type is None:
            raise SemanticModelError(
                "Not a declaration",
                node_kind=type(declaration).__name__,
            )
        symbol = symbol_type(name=declaration.name.name, declaring_syntax=declaration)  # type: ignore[attr-defined]
        self.bind(declaration, symbol)
        return symbol

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_symbol_info(self, node: SyntaxBase) -> DeclaredSymbol | None:
        """Symbol bound to ``node``, or None when it does not resolve."""
        return self._bindings.get(node)

    def is_resource_collection(self, symbol: DeclaredSymbol) -> bool:
        if isinstance(symbol, (ResourceSymbol, ModuleSymbol)):
            return symbol.is_collection
        return False

    def resource_declarations(self) -> Iterator[ResourceDeclarationSyntax]:
        """All resource declarations in document order, nested ones included."""
        for node in walk(self.program):
            if isinstance(node, ResourceDeclarationSyntax):
                yield node
