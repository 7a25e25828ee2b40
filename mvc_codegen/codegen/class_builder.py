from __future__ import annotations

from collections.abc import Sequence

from mvc_codegen.codegen import builders as b
from mvc_codegen.core import constants as cs
from mvc_codegen.data_models.syntax import (
    AttributeDecl,
    ClassDecl,
    Expression,
    Member,
)


class ClassBuilder:
    """
    Accumulates the members of one synthetic class.

    Every `with_*` method appends and returns the builder, so a class reads
    top to bottom as a chain. `build()` freezes the result into a `ClassDecl`
    with members in the order they were added.

    Args:
        name (str): The class name.
        type_parameters (Sequence[str]): Generic type parameter names.
        *modifiers (Modifier): Class modifiers, e.g. public and partial.
        generated_attributes (Sequence[AttributeDecl]): The attributes that mark
            a member as generated. Members added with `include_generated=True`
            carry them.
    """

    def __init__(
        self,
        name: str,
        type_parameters: Sequence[str] = (),
        *modifiers: cs.Modifier,
        generated_attributes: Sequence[AttributeDecl] = (),
    ) -> None:
        self.name = name
        self.type_parameters = tuple(type_parameters)
        self.modifiers = modifiers
        self.generated_attributes = tuple(generated_attributes)
        self.attributes: list[AttributeDecl] = []
        self.base_types: list[str] = []
        self.members: list[Member] = []

    def _marker(self, include_generated: bool) -> tuple[AttributeDecl, ...]:
        return self.generated_attributes if include_generated else ()

    def with_attributes(self, *attributes: AttributeDecl) -> ClassBuilder:
        self.attributes.extend(attributes)
        return self

    def with_base_types(self, *base_types: str) -> ClassBuilder:
        self.base_types.extend(base_types)
        return self

    def with_members(self, *members: Member) -> ClassBuilder:
        self.members.extend(members)
        return self

    def with_default_constructor(
        self, include_generated: bool, *modifiers: cs.Modifier
    ) -> ClassBuilder:
        return self.with_members(
            b.default_constructor(self.name, modifiers, self._marker(include_generated))
        )

    def with_dummy_constructor(
        self, dummy_type: str, include_generated: bool, *modifiers: cs.Modifier
    ) -> ClassBuilder:
        return self.with_members(
            b.dummy_constructor(
                self.name, dummy_type, modifiers, self._marker(include_generated)
            )
        )

    def with_dummy_base_constructor(
        self, dummy_type: str, include_generated: bool, *modifiers: cs.Modifier
    ) -> ClassBuilder:
        return self.with_members(
            b.dummy_base_constructor(
                self.name, dummy_type, modifiers, self._marker(include_generated)
            )
        )

    def with_field(
        self,
        name: str,
        type_name: str,
        *modifiers: cs.Modifier,
        initializer: Expression | None = None,
    ) -> ClassBuilder:
        return self.with_members(b.field(name, type_name, modifiers, initializer))

    def with_cached_instance_field(
        self, name: str, type_name: str, *modifiers: cs.Modifier
    ) -> ClassBuilder:
        """Adds `static readonly T name = new T();` with the given extra modifiers."""
        return self.with_field(
            name,
            type_name,
            *modifiers,
            cs.Modifier.STATIC,
            cs.Modifier.READONLY,
            initializer=b.object_creation(type_name),
        )

    def with_string_field(
        self,
        name: str,
        value: str,
        include_generated: bool,
        *modifiers: cs.Modifier,
    ) -> ClassBuilder:
        return self.with_members(
            b.string_field(name, value, modifiers, self._marker(include_generated))
        )

    def with_property(
        self,
        name: str,
        type_name: str,
        getter: Expression,
        *modifiers: cs.Modifier,
    ) -> ClassBuilder:
        return self.with_members(b.property_decl(name, type_name, getter, modifiers))

    def build(self) -> ClassDecl:
        return ClassDecl(
            name=self.name,
            modifiers=self.modifiers,
            type_parameters=self.type_parameters,
            base_types=tuple(self.base_types),
            attributes=tuple(self.attributes),
            members=tuple(self.members),
        )
