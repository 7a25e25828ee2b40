from __future__ import annotations

from dataclasses import dataclass, field

from mvc_codegen.data_models.types_defs import VirtualPath
from mvc_codegen.infrastructure import exceptions as ex
from mvc_codegen.utils.path_utils import is_virtual_path, split_segments, to_virtual_path


@dataclass(frozen=True)
class View:
    """
    A template file discovered under the project root.

    Attributes:
        view_name (str): The logical name of the view (the file name without
                         its template suffix).
        file_path (str): The absolute path of the template file.
        relative_path (str): The virtual application path, `~/` followed by
                             the project-relative slash path.
        page_path (str): The logical route path, e.g. `/Admin/Users/Index`.
        is_page (bool): True for page-style templates, False for classic views.
        segments (tuple[str, ...]): The directory names of `page_path`,
                                    without the file's own name.
    """

    view_name: str
    file_path: str
    relative_path: VirtualPath
    page_path: str
    is_page: bool
    segments: tuple[str, ...] = field(init=False)

    def __post_init__(self) -> None:
        if not is_virtual_path(self.relative_path):
            raise ex.InvalidViewPathError(
                ex.VIEW_PATH_NOT_VIRTUAL.format(path=self.relative_path)
            )
        object.__setattr__(self, "segments", split_segments(self.page_path))

    @classmethod
    def create(
        cls,
        view_name: str,
        file_path: str,
        relative_path: str,
        page_path: str,
        is_page: bool,
    ) -> View:
        """
        Builds a view from a project-relative slash path.

        Args:
            view_name (str): The logical view name.
            file_path (str): The absolute template path.
            relative_path (str): The path relative to the project root, e.g.
                                 `/Views/Home/Index.cshtml`.
            page_path (str): The logical route path.
            is_page (bool): Whether the template is page-style.

        Raises:
            InvalidViewPathError: If `relative_path` cannot be expressed as a
                virtual path.

        Returns:
            View: The new view.
        """
        return cls(
            view_name=view_name,
            file_path=file_path,
            relative_path=to_virtual_path(relative_path),
            page_path=page_path,
            is_page=is_page,
        )

    @property
    def template_kind(self) -> str | None:
        return None
