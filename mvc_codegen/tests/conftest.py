from __future__ import annotations

from pathlib import Path

import pytest

from mvc_codegen.core.config import GeneratorSettings
from mvc_codegen.data_models.declarations import (
    ParsedController,
    ParsedMethod,
    ParsedParameter,
)
from mvc_codegen.data_models.views import View
from mvc_codegen.services.controller_generator import ControllerGenerator


class StaticViewLocator:
    """An in-memory view locator that counts how often it is asked."""

    def __init__(self, views: list[View] | None = None) -> None:
        self.views = list(views or [])
        self.calls = 0

    def find_views(self) -> list[View]:
        self.calls += 1
        return list(self.views)


def make_method(
    name: str,
    *params: tuple[str, str],
    returns: str = "IActionResult",
    **kwargs,
) -> ParsedMethod:
    return ParsedMethod(
        name=name,
        parameters=[ParsedParameter(name=n, type=t) for n, t in params],
        return_type=returns,
        **kwargs,
    )


def make_controller(
    name: str = "HomeController",
    namespace: str | None = "App.Controllers",
    methods: list[ParsedMethod] | None = None,
    **kwargs,
) -> ParsedController:
    return ParsedController(
        name=name, namespace=namespace, methods=methods or [], **kwargs
    )


def write_template(root: Path, relative: str, content: str = "@{ }") -> Path:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def config() -> GeneratorSettings:
    return GeneratorSettings(_env_file=None)


@pytest.fixture
def view_locator() -> StaticViewLocator:
    return StaticViewLocator()


@pytest.fixture
def generator(
    view_locator: StaticViewLocator, config: GeneratorSettings
) -> ControllerGenerator:
    return ControllerGenerator(view_locator, config=config)
