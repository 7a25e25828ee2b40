import re
from pathlib import Path

from ..core import constants as cs
from ..infrastructure import exceptions as ex

_INVALID_VIRTUAL_PATH_CHARS = re.compile(r"[\\:?#*\"<>|\x00-\x1f\x7f]")
_TRAVERSAL_PARTS = frozenset({".", ".."})


def to_posix(path: Path) -> str:
    return path.as_posix()


def to_virtual_path(relative_path: str) -> str:
    """Turns a project-relative slash path into an application virtual path.

    Raises:
        InvalidViewPathError: If the path is empty, climbs out of the project
            root, or contains characters a virtual path cannot carry.
    """
    parts = [part for part in relative_path.split(cs.SEPARATOR_SLASH) if part]
    if not parts:
        raise ex.InvalidViewPathError(ex.VIEW_PATH_EMPTY)
    if _INVALID_VIRTUAL_PATH_CHARS.search(relative_path):
        raise ex.InvalidViewPathError(
            ex.VIEW_PATH_INVALID_CHARS.format(path=relative_path)
        )
    if not _TRAVERSAL_PARTS.isdisjoint(parts):
        raise ex.InvalidViewPathError(ex.VIEW_PATH_TRAVERSAL.format(path=relative_path))
    return cs.VIRTUAL_PATH_ROOT + cs.SEPARATOR_SLASH + cs.SEPARATOR_SLASH.join(parts)


def is_virtual_path(path: str) -> bool:
    prefix = cs.VIRTUAL_PATH_ROOT + cs.SEPARATOR_SLASH
    if not path.startswith(prefix):
        return False
    try:
        return to_virtual_path(path[len(prefix) :]) == path
    except ex.InvalidViewPathError:
        return False


def split_segments(page_path: str) -> tuple[str, ...]:
    """Directory names of a page path, without the file's own name."""
    parts = [part for part in page_path.split(cs.SEPARATOR_SLASH) if part]
    return tuple(parts[:-1])


def should_skip_path(
    path: Path,
    root_path: Path,
    ignore_dirs: frozenset[str],
    exclude_paths: frozenset[str] | None = None,
    unignore_paths: frozenset[str] | None = None,
) -> bool:
    rel_path = path.relative_to(root_path)
    rel_path_str = rel_path.as_posix()
    dir_parts = rel_path.parent.parts if path.is_file() else rel_path.parts
    if exclude_paths and (
        not exclude_paths.isdisjoint(dir_parts)
        or rel_path_str in exclude_paths
        or any(rel_path_str.startswith(f"{p}/") for p in exclude_paths)
    ):
        return True
    if unignore_paths and any(
        rel_path_str == p or rel_path_str.startswith(f"{p}/") for p in unignore_paths
    ):
        return False
    return not ignore_dirs.isdisjoint(dir_parts)
