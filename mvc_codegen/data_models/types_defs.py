from typing import NamedTuple, TypeAlias

QualifiedName: TypeAlias = str
"""A dot-separated namespace or type name, e.g. 'App.Areas.Admin.Controllers'."""

VirtualPath: TypeAlias = str
"""An application-relative path of the form '~/Views/Home/Index.cshtml'."""


class IgnorePatterns(NamedTuple):
    """Directory patterns read from a .mvcgenignore file."""

    exclude: frozenset[str]
    unignore: frozenset[str]
