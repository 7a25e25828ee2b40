"""
Pydantic models describing the controller declarations handed to the generator.

These records are produced by an upstream declaration-model provider (a source
parser or compiler front end) and are never mutated here. Because they are
Pydantic models, a provider running out of process can hand them over as JSON
and have them validated with `ParsedController.model_validate`.

Every constructor and method carries an explicit `generated` flag. It is set on
members that an earlier generation pass produced, and the generator excludes
them from analysis so that re-running it never duplicates members.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from mvc_codegen.core import constants as cs
from mvc_codegen.infrastructure import exceptions as ex

_TYPE_DELIMITERS = frozenset("<>,")


def _coerce_type_ref(value: Any) -> Any:
    if isinstance(value, str):
        return TypeRef.from_string(value)
    return value


class TypeRef(BaseModel):
    """
    A structural reference to a type, e.g. `Task<IActionResult>`.

    Attributes:
        name (str): The (possibly qualified) type name without type arguments.
        type_arguments (tuple[TypeRef, ...]): Generic type arguments, in order.
        suffix (str): Array or nullable markers following the type arguments,
                      e.g. `[]` or `?`.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    type_arguments: tuple[TypeRef, ...] = ()
    suffix: str = ""

    @classmethod
    def from_string(cls, text: str) -> TypeRef:
        """
        Parses a type name such as `Dictionary<string, List<int>>`.

        Args:
            text (str): The type as written in source.

        Raises:
            InvalidTypeReferenceError: If the text is empty or its generic
                brackets are unbalanced.

        Returns:
            TypeRef: The parsed type reference.
        """
        cleaned = text.strip()
        if not cleaned:
            raise ex.InvalidTypeReferenceError(ex.TYPE_REF_EMPTY)
        type_ref, pos = cls._parse_at(cleaned, 0)
        if pos != len(cleaned):
            raise ex.InvalidTypeReferenceError(
                ex.TYPE_REF_TRAILING.format(token=cleaned[pos], text=cleaned)
            )
        return type_ref

    @classmethod
    def _parse_at(cls, text: str, pos: int) -> tuple[TypeRef, int]:
        start = pos
        while pos < len(text) and text[pos] not in _TYPE_DELIMITERS:
            pos += 1
        name = text[start:pos].strip()
        if not name:
            raise ex.InvalidTypeReferenceError(ex.TYPE_REF_UNBALANCED.format(text=text))

        arguments: list[TypeRef] = []
        suffix = ""
        if pos < len(text) and text[pos] == "<":
            pos += 1
            while True:
                argument, pos = cls._parse_at(text, pos)
                arguments.append(argument)
                if pos >= len(text):
                    raise ex.InvalidTypeReferenceError(
                        ex.TYPE_REF_UNBALANCED.format(text=text)
                    )
                if text[pos] == ",":
                    pos += 1
                    continue
                if text[pos] == ">":
                    pos += 1
                    break
                raise ex.InvalidTypeReferenceError(
                    ex.TYPE_REF_TRAILING.format(token=text[pos], text=text)
                )
            suffix_start = pos
            while pos < len(text) and text[pos] not in _TYPE_DELIMITERS:
                pos += 1
            suffix = text[suffix_start:pos].strip()
        return cls(name=name, type_arguments=tuple(arguments), suffix=suffix), pos

    @property
    def simple_name(self) -> str:
        return self.name.rsplit(cs.SEPARATOR_DOT, 1)[-1]

    def __str__(self) -> str:
        if not self.type_arguments:
            return f"{self.name}{self.suffix}"
        arguments = ", ".join(str(argument) for argument in self.type_arguments)
        return f"{self.name}<{arguments}>{self.suffix}"


class ParsedParameter(BaseModel):
    """A method parameter: its name and declared type."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: TypeRef

    @field_validator("type", mode="before")
    @classmethod
    def _parse_type(cls, v: Any) -> Any:
        return _coerce_type_ref(v)


class ParsedConstructor(BaseModel):
    """
    A constructor declared on a controller.

    Attributes:
        accessibility (Accessibility): The declared accessibility.
        parameter_count (int): The number of parameters it takes.
        generated (bool): True if a previous generation pass produced it.
    """

    model_config = ConfigDict(frozen=True)

    accessibility: cs.Accessibility = cs.Accessibility.PUBLIC
    parameter_count: int = 0
    generated: bool = False


class ParsedMethod(BaseModel):
    """
    A method declared on a controller.

    Attributes:
        name (str): The method name.
        parameters (tuple[ParsedParameter, ...]): Parameters in declaration order.
        return_type (TypeRef): The declared return type.
        accessibility (Accessibility): The declared accessibility.
        kind (MethodKind): Ordinary method, accessor, operator, etc.
        is_static (bool): True for static methods.
        generated (bool): True if a previous generation pass produced it.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    parameters: tuple[ParsedParameter, ...] = ()
    return_type: TypeRef
    accessibility: cs.Accessibility = cs.Accessibility.PUBLIC
    kind: cs.MethodKind = cs.MethodKind.ORDINARY
    is_static: bool = False
    generated: bool = False

    @field_validator("return_type", mode="before")
    @classmethod
    def _parse_return_type(cls, v: Any) -> Any:
        return _coerce_type_ref(v)


class ParsedController(BaseModel):
    """
    A controller class as seen by the declaration-model provider.

    Attributes:
        name (str): The simple class name, e.g. `HomeController`.
        namespace (str | None): The enclosing namespace, or None if the
                                provider could not resolve it.
        base_type (TypeRef | None): The declared base type.
        type_parameters (tuple[str, ...]): Generic type parameter names.
        constructors (tuple[ParsedConstructor, ...]): Declared constructors.
        methods (tuple[ParsedMethod, ...]): Declared methods, in order.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    namespace: str | None = None
    base_type: TypeRef | None = None
    type_parameters: tuple[str, ...] = ()
    constructors: tuple[ParsedConstructor, ...] = ()
    methods: tuple[ParsedMethod, ...] = ()

    @field_validator("base_type", mode="before")
    @classmethod
    def _parse_base_type(cls, v: Any) -> Any:
        return _coerce_type_ref(v)

    @property
    def qualified_name(self) -> str:
        if not self.namespace:
            return self.name
        return f"{self.namespace}{cs.SEPARATOR_DOT}{self.name}"
