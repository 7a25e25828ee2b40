from __future__ import annotations

from pathlib import Path

from loguru import logger

from mvc_codegen.core import constants as cs
from mvc_codegen.core import logs as ls
from mvc_codegen.core.config import GeneratorSettings, load_ignore_patterns, settings
from mvc_codegen.data_models.views import View
from mvc_codegen.infrastructure.decorators import timing_decorator
from mvc_codegen.utils.path_utils import should_skip_path, to_posix


class ViewLocator:
    """
    Finds template files under a project root and describes each as a `View`.

    A template is a file with the configured suffix (`.cshtml` by default)
    living under a page-routing folder (`Pages`) or a classic view folder
    (`Views`), optionally inside an area (`Areas/<Area>/Views`). Its route
    path is the part below that folder, with the area name kept in front so
    area templates nest under their area.

    Args:
        root_path (Path | str): The project root to scan.
        config (GeneratorSettings | None): Folder conventions; defaults to the
                                           global settings.
    """

    def __init__(
        self, root_path: Path | str, config: GeneratorSettings | None = None
    ) -> None:
        self.root_path = Path(root_path)
        self.config = config or settings
        self.ignore_patterns = load_ignore_patterns(self.root_path)

    @timing_decorator
    def find_views(self) -> list[View]:
        """
        Scans the root once and returns one view per template, ordered by path.

        Raises:
            InvalidViewPathError: If a template's project-relative path cannot
                be expressed as a virtual path.

        Returns:
            list[View]: The views, sorted by their project-relative path.
        """
        if not self.root_path.is_dir():
            logger.warning(ls.VIEW_ROOT_MISSING.format(path=self.root_path))
            return []

        logger.debug(
            ls.VIEW_SCAN_START.format(
                path=self.root_path, suffix=self.config.TEMPLATE_SUFFIX
            )
        )
        views: list[View] = []
        for file_path in sorted(self._iter_templates(), key=self._relative_key):
            if view := self._create_view(file_path):
                views.append(view)

        logger.info(
            ls.VIEW_SCAN_DONE.format(
                count=len(views),
                pages=sum(1 for view in views if view.is_page),
                path=self.root_path,
            )
        )
        return views

    def _relative_key(self, file_path: Path) -> str:
        return to_posix(file_path.relative_to(self.root_path))

    def _skip(self, path: Path) -> bool:
        return should_skip_path(
            path,
            self.root_path,
            self.config.IGNORE_DIRS,
            self.ignore_patterns.exclude,
            self.ignore_patterns.unignore,
        )

    def _should_descend(self, dir_path: Path) -> bool:
        if not self._skip(dir_path):
            return True
        # An unignored path below an ignored directory still needs the walk.
        rel_prefix = f"{to_posix(dir_path.relative_to(self.root_path))}/"
        return any(p.startswith(rel_prefix) for p in self.ignore_patterns.unignore)

    def _iter_templates(self) -> list[Path]:
        templates: list[Path] = []
        for dir_path, dir_names, file_names in self.root_path.walk():
            dir_names[:] = [
                name for name in dir_names if self._should_descend(dir_path / name)
            ]
            templates.extend(
                dir_path / name
                for name in file_names
                if name.endswith(self.config.TEMPLATE_SUFFIX)
                and (dir_path / name).is_file()
                and not self._skip(dir_path / name)
            )
        return templates

    def _create_view(self, file_path: Path) -> View | None:
        rel_path = file_path.relative_to(self.root_path)
        view_name = file_path.name[: -len(self.config.TEMPLATE_SUFFIX)]
        if view_name in self.config.EXCLUDED_VIEW_STEMS:
            logger.debug(ls.VIEW_EXCLUDED.format(path=rel_path))
            return None

        classified = self._classify(rel_path.parent.parts)
        if classified is None:
            logger.debug(ls.VIEW_NOT_IN_CONVENTION_FOLDER.format(path=rel_path))
            return None

        is_page, route_dirs = classified
        page_path = cs.SEPARATOR_SLASH + cs.SEPARATOR_SLASH.join(
            (*route_dirs, view_name)
        )
        view = View.create(
            view_name=view_name,
            file_path=str(file_path),
            relative_path=cs.SEPARATOR_SLASH + to_posix(rel_path),
            page_path=page_path,
            is_page=is_page,
        )
        logger.debug(
            ls.VIEW_FOUND.format(
                kind="page" if is_page else "view", name=view_name, path=rel_path
            )
        )
        return view

    def _classify(self, dir_parts: tuple[str, ...]) -> tuple[bool, tuple[str, ...]] | None:
        """
        Finds the convention folder in a template's directory parts.

        Returns:
            tuple[bool, tuple[str, ...]] | None: Whether the template is a page
                and its route directories, or None if it lives under neither a
                pages nor a views folder.
        """
        pages_folder = self.config.PAGES_FOLDER.lower()
        views_folder = self.config.VIEWS_FOLDER.lower()
        areas_folder = self.config.AREAS_FOLDER.lower()
        lowered = [part.lower() for part in dir_parts]
        for index, part in enumerate(lowered):
            if part not in (pages_folder, views_folder):
                continue
            area_prefix: tuple[str, ...] = ()
            if index >= 2 and lowered[index - 2] == areas_folder:
                area_prefix = (dir_parts[index - 1],)
            return part == pages_folder, (*area_prefix, *dir_parts[index + 1 :])
        return None
