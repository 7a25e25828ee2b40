"""
This module defines the synthetic declaration tree produced by the generator.

The tree is made of frozen dataclasses and is fully resolved: every type is a
rendered type name, every method body is a short list of statements built from
a handful of expression nodes. A renderer can walk it and emit source text
without any further analysis.

The tree includes:
-   Expressions: `IdentifierName`, `MemberAccess`, `Invocation`,
    `ObjectCreation`, `AsCast`, `Literal`.
-   Statements: `LocalDeclaration`, `ExpressionStatement`, `ReturnStatement`.
-   Declarations: `AttributeDecl`, `ParameterDecl`, `FieldDecl`,
    `PropertyDecl`, `ConstructorDecl`, `MethodDecl`, `ClassDecl` and
    `NamespaceDecl`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from mvc_codegen.core import constants as cs


@dataclass(frozen=True)
class IdentifierName:
    name: str


@dataclass(frozen=True)
class MemberAccess:
    target: Expression
    name: str


@dataclass(frozen=True)
class Invocation:
    target: Expression
    arguments: tuple[Expression, ...] = ()


@dataclass(frozen=True)
class ObjectCreation:
    type_name: str
    arguments: tuple[Expression, ...] = ()


@dataclass(frozen=True)
class AsCast:
    expression: Expression
    type_name: str


@dataclass(frozen=True)
class Literal:
    value: str | int | bool | None


Expression: TypeAlias = IdentifierName | MemberAccess | Invocation | ObjectCreation | AsCast | Literal


@dataclass(frozen=True)
class LocalDeclaration:
    name: str
    value: Expression


@dataclass(frozen=True)
class ExpressionStatement:
    expression: Expression


@dataclass(frozen=True)
class ReturnStatement:
    expression: Expression | None = None


Statement: TypeAlias = LocalDeclaration | ExpressionStatement | ReturnStatement


@dataclass(frozen=True)
class AttributeDecl:
    name: str
    arguments: tuple[Expression, ...] = ()


@dataclass(frozen=True)
class ParameterDecl:
    name: str
    type_name: str


@dataclass(frozen=True)
class FieldDecl:
    name: str
    type_name: str
    modifiers: tuple[cs.Modifier, ...] = ()
    initializer: Expression | None = None
    attributes: tuple[AttributeDecl, ...] = ()


@dataclass(frozen=True)
class PropertyDecl:
    """A read-only, expression-bodied property (`Type Name => getter;`)."""

    name: str
    type_name: str
    getter: Expression
    modifiers: tuple[cs.Modifier, ...] = ()
    attributes: tuple[AttributeDecl, ...] = ()


@dataclass(frozen=True)
class ConstructorInitializer:
    kind: cs.ConstructorInitializerKind
    arguments: tuple[Expression, ...] = ()


@dataclass(frozen=True)
class ConstructorDecl:
    name: str
    modifiers: tuple[cs.Modifier, ...] = ()
    parameters: tuple[ParameterDecl, ...] = ()
    initializer: ConstructorInitializer | None = None
    body: tuple[Statement, ...] = ()
    attributes: tuple[AttributeDecl, ...] = ()


@dataclass(frozen=True)
class MethodDecl:
    """A method; `body` is None for a bodiless (partial) declaration."""

    name: str
    return_type: str
    modifiers: tuple[cs.Modifier, ...] = ()
    parameters: tuple[ParameterDecl, ...] = ()
    body: tuple[Statement, ...] | None = ()
    attributes: tuple[AttributeDecl, ...] = ()

    @property
    def parameter_types(self) -> tuple[str, ...]:
        return tuple(parameter.type_name for parameter in self.parameters)


@dataclass(frozen=True)
class ClassDecl:
    name: str
    modifiers: tuple[cs.Modifier, ...] = ()
    type_parameters: tuple[str, ...] = ()
    base_types: tuple[str, ...] = ()
    attributes: tuple[AttributeDecl, ...] = ()
    members: tuple[Member, ...] = ()

    @property
    def constructors(self) -> list[ConstructorDecl]:
        return [m for m in self.members if isinstance(m, ConstructorDecl)]

    @property
    def fields(self) -> list[FieldDecl]:
        return [m for m in self.members if isinstance(m, FieldDecl)]

    @property
    def properties(self) -> list[PropertyDecl]:
        return [m for m in self.members if isinstance(m, PropertyDecl)]

    @property
    def methods(self) -> list[MethodDecl]:
        return [m for m in self.members if isinstance(m, MethodDecl)]

    @property
    def nested_classes(self) -> list[ClassDecl]:
        return [m for m in self.members if isinstance(m, ClassDecl)]

    @property
    def member_names(self) -> set[str]:
        return {m.name for m in self.members if not isinstance(m, ConstructorDecl)}

    def get_field(self, name: str) -> FieldDecl | None:
        return next((f for f in self.fields if f.name == name), None)

    def get_property(self, name: str) -> PropertyDecl | None:
        return next((p for p in self.properties if p.name == name), None)

    def get_methods(self, name: str) -> list[MethodDecl]:
        return [m for m in self.methods if m.name == name]

    def get_nested_class(self, name: str) -> ClassDecl | None:
        return next((c for c in self.nested_classes if c.name == name), None)

    def has_attribute(self, name: str) -> bool:
        return any(attribute.name == name for attribute in self.attributes)


Member: TypeAlias = FieldDecl | PropertyDecl | ConstructorDecl | MethodDecl | ClassDecl


@dataclass(frozen=True)
class NamespaceDecl:
    name: str
    members: tuple[ClassDecl, ...] = ()

    def get_class(self, name: str) -> ClassDecl | None:
        return next((c for c in self.members if c.name == name), None)
