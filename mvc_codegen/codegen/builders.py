"""
Stateless constructors for synthetic declarations.

Each function returns one node of the tree defined in `data_models.syntax`.
`ClassBuilder` strings these together for a whole class; the controller
generator uses both.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from mvc_codegen.core import constants as cs
from mvc_codegen.data_models.syntax import (
    AttributeDecl,
    ClassDecl,
    ConstructorDecl,
    ConstructorInitializer,
    Expression,
    ExpressionStatement,
    FieldDecl,
    IdentifierName,
    Invocation,
    Literal,
    LocalDeclaration,
    MemberAccess,
    MethodDecl,
    NamespaceDecl,
    ObjectCreation,
    ParameterDecl,
    PropertyDecl,
    ReturnStatement,
    Statement,
)


def identifier(name: str) -> IdentifierName:
    return IdentifierName(name)


def member_access(*names: str) -> Expression:
    """Builds `a.b.c` from `("a", "b", "c")`."""
    expression: Expression = IdentifierName(names[0])
    for name in names[1:]:
        expression = MemberAccess(expression, name)
    return expression


def invocation(target: Expression | str, *arguments: Expression) -> Invocation:
    if isinstance(target, str):
        target = IdentifierName(target)
    return Invocation(target, tuple(arguments))


def object_creation(type_name: str, *arguments: Expression) -> ObjectCreation:
    return ObjectCreation(type_name, tuple(arguments))


def string_literal(value: str) -> Literal:
    return Literal(value)


def local_variable(name: str, value: Expression) -> LocalDeclaration:
    return LocalDeclaration(name, value)


def expression_statement(expression: Expression) -> ExpressionStatement:
    return ExpressionStatement(expression)


def return_statement(expression: Expression | None = None) -> ReturnStatement:
    return ReturnStatement(expression)


def parameter(name: str, type_name: str) -> ParameterDecl:
    return ParameterDecl(name, type_name)


def attribute(name: str, *arguments: Expression) -> AttributeDecl:
    return AttributeDecl(name, tuple(arguments))


def generated_code_attribute(tool: str, version: str) -> AttributeDecl:
    return attribute(cs.ATTR_GENERATED_CODE, string_literal(tool), string_literal(version))


def debug_non_user_code_attribute() -> AttributeDecl:
    return attribute(cs.ATTR_DEBUGGER_NON_USER_CODE)


def non_action_attribute() -> AttributeDecl:
    return attribute(cs.ATTR_NON_ACTION)


def create_namespace(name: str, classes: Iterable[ClassDecl] = ()) -> NamespaceDecl:
    return NamespaceDecl(name=name, members=tuple(classes))


def field(
    name: str,
    type_name: str,
    modifiers: Sequence[cs.Modifier] = (),
    initializer: Expression | None = None,
    attributes: Sequence[AttributeDecl] = (),
) -> FieldDecl:
    return FieldDecl(
        name=name,
        type_name=type_name,
        modifiers=tuple(modifiers),
        initializer=initializer,
        attributes=tuple(attributes),
    )


def string_field(
    name: str,
    value: str,
    modifiers: Sequence[cs.Modifier] = (),
    attributes: Sequence[AttributeDecl] = (),
) -> FieldDecl:
    return field(name, cs.TYPE_STRING, modifiers, string_literal(value), attributes)


def property_decl(
    name: str,
    type_name: str,
    getter: Expression,
    modifiers: Sequence[cs.Modifier] = (),
    attributes: Sequence[AttributeDecl] = (),
) -> PropertyDecl:
    return PropertyDecl(
        name=name,
        type_name=type_name,
        getter=getter,
        modifiers=tuple(modifiers),
        attributes=tuple(attributes),
    )


def constructor(
    class_name: str,
    modifiers: Sequence[cs.Modifier] = (),
    parameters: Sequence[ParameterDecl] = (),
    initializer: ConstructorInitializer | None = None,
    body: Sequence[Statement] = (),
    attributes: Sequence[AttributeDecl] = (),
) -> ConstructorDecl:
    return ConstructorDecl(
        name=class_name,
        modifiers=tuple(modifiers),
        parameters=tuple(parameters),
        initializer=initializer,
        body=tuple(body),
        attributes=tuple(attributes),
    )


def default_constructor(
    class_name: str,
    modifiers: Sequence[cs.Modifier] = (),
    attributes: Sequence[AttributeDecl] = (),
) -> ConstructorDecl:
    return constructor(class_name, modifiers, attributes=attributes)


def dummy_constructor(
    class_name: str,
    dummy_type: str,
    modifiers: Sequence[cs.Modifier] = (),
    attributes: Sequence[AttributeDecl] = (),
) -> ConstructorDecl:
    """A constructor taking one marker argument and doing nothing with it."""
    return constructor(
        class_name,
        modifiers,
        parameters=(parameter(cs.PARAM_DUMMY, dummy_type),),
        attributes=attributes,
    )


def dummy_base_constructor(
    class_name: str,
    dummy_type: str,
    modifiers: Sequence[cs.Modifier] = (),
    attributes: Sequence[AttributeDecl] = (),
) -> ConstructorDecl:
    """A parameterless constructor chaining to `base(Dummy.Instance)`."""
    return constructor(
        class_name,
        modifiers,
        initializer=ConstructorInitializer(
            kind=cs.ConstructorInitializerKind.BASE,
            arguments=(member_access(dummy_type, cs.MEMBER_DUMMY_INSTANCE),),
        ),
        attributes=attributes,
    )


def method(
    name: str,
    return_type: str,
    modifiers: Sequence[cs.Modifier] = (),
    parameters: Sequence[ParameterDecl] = (),
    body: Sequence[Statement] | None = (),
    attributes: Sequence[AttributeDecl] = (),
) -> MethodDecl:
    return MethodDecl(
        name=name,
        return_type=return_type,
        modifiers=tuple(modifiers),
        parameters=tuple(parameters),
        body=None if body is None else tuple(body),
        attributes=tuple(attributes),
    )
