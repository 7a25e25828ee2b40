"""
This module defines the interfaces the controller generator depends on.

The generator never inspects source text. Everything it needs to know about a
controller declaration goes through `DeclarationQueryProtocol`, and the view
files come from any `ViewLocatorProtocol`. Either can be swapped out, e.g. for a
compiler-backed query or an in-memory list of views in tests.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from mvc_codegen.data_models.declarations import ParsedController, ParsedMethod
from mvc_codegen.data_models.types_defs import QualifiedName
from mvc_codegen.data_models.views import View


@runtime_checkable
class ViewLocatorProtocol(Protocol):
    """A source of template files."""

    def find_views(self) -> list[View]:
        """
        Returns every recognised template file in a stable order.

        Raises:
            InvalidViewPathError: If a template path cannot be expressed as a
                virtual path.
        """
        ...


@runtime_checkable
class DeclarationQueryProtocol(Protocol):
    """Narrow, read-only questions the generator asks about a controller."""

    def resolve_namespace(self, controller: ParsedController) -> QualifiedName:
        """
        Returns the fully qualified namespace declaring the controller.

        Raises:
            NamespaceResolutionError: If the namespace is unknown.
        """
        ...

    def action_methods(self, controller: ParsedController) -> list[ParsedMethod]:
        """
        Returns the public, ordinary, non-static methods that were not produced
        by a previous generation pass, in declaration order.
        """
        ...

    def has_public_constructor(self, controller: ParsedController) -> bool:
        """True if the controller declares a public, non-generated constructor."""
        ...
