"""Syntax Tree - Domain Layer.

Immutable syntax nodes of an infrastructure document, as produced by an
external parser. Nodes compare and hash by identity: two structurally equal
nodes at different places in the document are different nodes, which keeps
symbol bindings exact.

Node variants:
    - Declarations: ProgramSyntax, ResourceDeclarationSyntax, ModuleDeclarationSyntax,
      VariableDeclarationSyntax, ParameterDeclarationSyntax, OutputDeclarationSyntax
    - Structure: ObjectSyntax, ObjectPropertySyntax, ArraySyntax, ArrayItemSyntax
    - Wrappers: IfConditionSyntax, ForSyntax
    - Expressions: VariableAccessSyntax, PropertyAccessSyntax, ArrayAccessSyntax,
      StringSyntax, IntegerLiteralSyntax, BooleanLiteralSyntax
    - Errors: SkippedTriviaSyntax (unparseable text kept for spans)
"""

from collections.abc import Iterator
from dataclasses import dataclass, fields
from typing import Union

DEPENDS_ON_PROPERTY_NAME = "dependsOn"


@dataclass(frozen=True)
class TextSpan:
    """Half-open character range [position, position + length)."""

    position: int
    length: int

    def __post_init__(self) -> None:
        if self.position < 0 or self.length < 0:
            raise ValueError(f"Invalid span: position={self.position}, length={self.length}")

    @property
    def end(self) -> int:
        return self.position + self.length

    def __str__(self) -> str:
        return f"[{self.position}:{self.end}]"


class SyntaxBase:
    """Common base of all syntax nodes."""

    span: TextSpan


def iter_children(node: SyntaxBase) -> Iterator[SyntaxBase]:
    """Yield the direct child nodes of ``node`` in source order."""
    for f in fields(node):  # type: ignore[arg-type]
        value = getattr(node, f.name)
        if isinstance(value, SyntaxBase):
            yield value
        elif isinstance(value, tuple):
            for item in value:
                if isinstance(item, SyntaxBase):
                    yield item


# ==============================================================================
# Expressions
# ==============================================================================


@dataclass(frozen=True, eq=False)
class IdentifierSyntax(SyntaxBase):
    span: TextSpan
    name: str


@dataclass(frozen=True, eq=False)
class StringSyntax(SyntaxBase):
    span: TextSpan
    value: str


@dataclass(frozen=True, eq=False)
class IntegerLiteralSyntax(SyntaxBase):
    span: TextSpan
    value: int


@dataclass(frozen=True, eq=False)
class BooleanLiteralSyntax(SyntaxBase):
    span: TextSpan
    value: bool


@dataclass(frozen=True, eq=False)
class SkippedTriviaSyntax(SyntaxBase):
    """Text the parser could not make sense of."""

    span: TextSpan
    text: str


@dataclass(frozen=True, eq=False)
class VariableAccessSyntax(SyntaxBase):
    """Bare reference to a declared name, e.g. ``storage``."""

    span: TextSpan
    name: IdentifierSyntax


@dataclass(frozen=True, eq=False)
class PropertyAccessSyntax(SyntaxBase):
    """``base.property``, e.g. ``storage.properties``."""

    span: TextSpan
    base_expression: SyntaxBase
    property_name: IdentifierSyntax


@dataclass(frozen=True, eq=False)
class ArrayAccessSyntax(SyntaxBase):
    """``base[index]``, e.g. ``disks[0]``."""

    span: TextSpan
    base_expression: SyntaxBase
    index_expression: SyntaxBase


# ==============================================================================
# Structure
# ==============================================================================


@dataclass(frozen=True, eq=False)
class ObjectPropertySyntax(SyntaxBase):
    span: TextSpan
    key: Union[IdentifierSyntax, StringSyntax]
    value: SyntaxBase

    def try_get_key_text(self) -> str:
        if isinstance(self.key, IdentifierSyntax):
            return self.key.name
        return self.key.value


@dataclass(frozen=True, eq=False)
class ObjectSyntax(SyntaxBase):
    """Object literal. Resource bodies may also hold nested resource declarations."""

    span: TextSpan
    properties: tuple[ObjectPropertySyntax, ...] = ()
    resources: "tuple[ResourceDeclarationSyntax, ...]" = ()

    def get_property_by_name(self, name: str) -> ObjectPropertySyntax | None:
        """First property whose key equals ``name`` (ordinal comparison)."""
        for prop in self.properties:
            if prop.try_get_key_text() == name:
                return prop
        return None


@dataclass(frozen=True, eq=False)
class ArrayItemSyntax(SyntaxBase):
    span: TextSpan
    value: SyntaxBase


@dataclass(frozen=True, eq=False)
class ArraySyntax(SyntaxBase):
    span: TextSpan
    items: tuple[ArrayItemSyntax, ...] = ()


@dataclass(frozen=True, eq=False)
class IfConditionSyntax(SyntaxBase):
    """``if (condition) body``"""

    span: TextSpan
    condition_expression: SyntaxBase
    body: SyntaxBase


@dataclass(frozen=True, eq=False)
class ForSyntax(SyntaxBase):
    """``[for item in expression: body]``"""

    span: TextSpan
    item_variable: IdentifierSyntax
    expression: SyntaxBase
    body: SyntaxBase


def try_get_body(value: SyntaxBase | None) -> ObjectSyntax | None:
    """Unwrap ``if``/``for`` wrappers down to the object body.

    Accepted shapes: ``{...}``, ``if (c) {...}``, ``[for x in y: {...}]`` and
    ``[for x in y: if (c) {...}]``. Anything else has no body.
    """
    if isinstance(value, ForSyntax):
        value = value.body
    if isinstance(value, IfConditionSyntax):
        value = value.body
    if isinstance(value, ObjectSyntax):
        return value
    return None


# ==============================================================================
# Declarations
# ==============================================================================


@dataclass(frozen=True, eq=False)
class ResourceDeclarationSyntax(SyntaxBase):
    """``resource name 'type@version' = value``"""

    span: TextSpan
    name: IdentifierSyntax
    type_string: StringSyntax
    value: SyntaxBase

    def try_get_body(self) -> ObjectSyntax | None:
        return try_get_body(self.value)

    @property
    def is_collection(self) -> bool:
        return isinstance(self.value, ForSyntax)


@dataclass(frozen=True, eq=False)
class ModuleDeclarationSyntax(SyntaxBase):
    """``module name 'path' = value``"""

    span: TextSpan
    name: IdentifierSyntax
    path: StringSyntax
    value: SyntaxBase

    def try_get_body(self) -> ObjectSyntax | None:
        return try_get_body(self.value)

    @property
    def is_collection(self) -> bool:
        return isinstance(self.value, ForSyntax)


@dataclass(frozen=True, eq=False)
class VariableDeclarationSyntax(SyntaxBase):
    span: TextSpan
    name: IdentifierSyntax
    value: SyntaxBase


@dataclass(frozen=True, eq=False)
class ParameterDeclarationSyntax(SyntaxBase):
    span: TextSpan
    name: IdentifierSyntax
    type_name: IdentifierSyntax


@dataclass(frozen=True, eq=False)
class OutputDeclarationSyntax(SyntaxBase):
    span: TextSpan
    name: IdentifierSyntax
    type_name: IdentifierSyntax
    value: SyntaxBase


@dataclass(frozen=True, eq=False)
class ProgramSyntax(SyntaxBase):
    span: TextSpan
    declarations: tuple[SyntaxBase, ...] = ()


def walk(node: SyntaxBase) -> Iterator[SyntaxBase]:
    """Pre-order traversal of ``node`` and all descendants."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(list(iter_children(current))))
