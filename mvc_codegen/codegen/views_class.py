"""
Builds the nested `ViewsClass` that mirrors the template folder tree.

Classic views and pages are kept in separate trees. Classic views nest directly
under `ViewsClass`; pages nest under its `Pages` class. Each directory segment
of a view's route path becomes a nested class, and each template becomes a
read-only string field on the class of its folder. Pages expose their route
path, classic views their virtual file path. Every level that holds templates
also gets a `_ViewNamesClass` with one constant per view name, reachable
through its `ViewNames` property.

No template is ever dropped. A member whose name is already taken at its level
is renamed with a suffix (`Admin` becomes `AdminClass` for a folder, `Index_`
for a view) and a warning is logged.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from loguru import logger

from mvc_codegen.codegen import builders as b
from mvc_codegen.codegen.class_builder import ClassBuilder
from mvc_codegen.core import constants as cs
from mvc_codegen.core import logs as ls
from mvc_codegen.data_models.syntax import AttributeDecl, ClassDecl
from mvc_codegen.data_models.views import View
from mvc_codegen.utils.identifiers import sanitize_identifier


@dataclass
class ViewFolder:
    name: str
    views: list[View] = field(default_factory=list)
    folders: dict[str, ViewFolder] = field(default_factory=dict)


def build_view_tree(views: Iterable[View], name: str = cs.CLASS_VIEWS) -> ViewFolder:
    root = ViewFolder(name)
    for view in views:
        folder = root
        for segment in view.segments:
            folder = folder.folders.setdefault(segment, ViewFolder(segment))
        folder.views.append(view)
    return root


def _view_value(view: View) -> str:
    return view.page_path if view.is_page else view.relative_path


def _claim_name(
    taken: set[str], name: str, suffix: str, owner: str, source: str
) -> str:
    """Reserves `name` at one class level, adding `suffix` (and a counter) if taken."""
    candidate = name
    index = 1
    while candidate in taken:
        candidate = f"{name}{suffix}{index if index > 1 else ''}"
        index += 1
    if candidate != name:
        logger.warning(
            ls.VIEW_MEMBER_RENAMED.format(
                name=name, renamed=candidate, owner=owner, path=source
            )
        )
    taken.add(candidate)
    return candidate


def _view_names_class(leaves: Sequence[tuple[str, View]]) -> ClassDecl:
    builder = ClassBuilder(cs.CLASS_VIEW_NAMES, (), cs.Modifier.PUBLIC)
    for name, view in leaves:
        builder.with_string_field(
            name, view.view_name, False, cs.Modifier.PUBLIC, cs.Modifier.CONST
        )
    return builder.build()


def _folder_class(
    folder: ViewFolder,
    class_name: str,
    attributes: Sequence[AttributeDecl],
    branches: Sequence[ViewFolder] = (),
) -> ClassDecl:
    taken = {class_name}
    if folder.views:
        taken.update(
            (cs.FIELD_VIEW_NAMES_CACHE, cs.MEMBER_VIEW_NAMES, cs.CLASS_VIEW_NAMES)
        )
    nested = [
        (
            _claim_name(
                taken, branch.name, cs.FOLDER_CLASS_SUFFIX, class_name, branch.name
            ),
            branch,
        )
        for branch in branches
    ]
    leaves = [
        (
            _claim_name(
                taken,
                sanitize_identifier(view.view_name),
                cs.VIEW_MEMBER_SUFFIX,
                class_name,
                view.relative_path,
            ),
            view,
        )
        for view in folder.views
    ]
    nested.extend(
        (
            _claim_name(
                taken,
                sanitize_identifier(sub_folder.name),
                cs.FOLDER_CLASS_SUFFIX,
                class_name,
                sub_folder.name,
            ),
            sub_folder,
        )
        for sub_folder in folder.folders.values()
    )

    builder = ClassBuilder(
        class_name, (), cs.Modifier.PUBLIC, cs.Modifier.PARTIAL
    ).with_attributes(*attributes)
    if leaves:
        builder.with_cached_instance_field(
            cs.FIELD_VIEW_NAMES_CACHE, cs.CLASS_VIEW_NAMES
        ).with_property(
            cs.MEMBER_VIEW_NAMES,
            cs.CLASS_VIEW_NAMES,
            b.identifier(cs.FIELD_VIEW_NAMES_CACHE),
            cs.Modifier.PUBLIC,
        ).with_members(_view_names_class(leaves))
    for name, view in leaves:
        builder.with_string_field(
            name, _view_value(view), False, cs.Modifier.PUBLIC, cs.Modifier.READONLY
        )
    for name, sub_folder in nested:
        builder.with_members(_folder_class(sub_folder, name, attributes))
    return builder.build()


def build_views_class(
    views: Sequence[View], attributes: Sequence[AttributeDecl] = ()
) -> ClassDecl:
    """
    Builds the `ViewsClass` declaration for a set of views.

    Args:
        views (Sequence[View]): The views, in discovery order.
        attributes (Sequence[AttributeDecl]): Attributes placed on every
            generated class, normally the generated-code markers.

    Returns:
        ClassDecl: The `ViewsClass` with one nested class per classic view
            folder, plus a `Pages` class holding the page tree when any
            pages were found.
    """
    pages = [view for view in views if view.is_page]
    branches = [build_view_tree(pages, cs.CLASS_PAGES)] if pages else []
    views_class = _folder_class(
        build_view_tree(view for view in views if not view.is_page),
        cs.CLASS_VIEWS,
        attributes,
        branches,
    )
    logger.debug(ls.VIEWS_CLASS_BUILT.format(count=len(views), pages=len(pages)))
    return views_class
