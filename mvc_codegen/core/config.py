from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv
from loguru import logger
from pydantic_settings import BaseSettings, SettingsConfigDict

from mvc_codegen.core import constants as cs
from mvc_codegen.core import logs
from mvc_codegen.data_models.types_defs import IgnorePatterns

load_dotenv()


class GeneratorSettings(BaseSettings):
    """Generator settings, loaded from environment variables or a .env file.

    Every folder and type name the generator relies on is a convention of the
    host web framework, so each one can be overridden with an
    `MVC_CODEGEN_`-prefixed environment variable.
    """

    model_config = SettingsConfigDict(
        env_prefix="MVC_CODEGEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    TEMPLATE_SUFFIX: str = ".cshtml"
    PAGES_FOLDER: str = "Pages"
    VIEWS_FOLDER: str = "Views"
    AREAS_FOLDER: str = "Areas"
    CONTROLLERS_FOLDER: str = "Controllers"
    CONTROLLER_SUFFIX: str = "Controller"
    EXCLUDED_VIEW_STEMS: frozenset[str] = frozenset({"_ViewStart", "_ViewImports"})
    IGNORE_DIRS: frozenset[str] = frozenset(
        {
            ".git",
            ".vs",
            ".idea",
            "bin",
            "obj",
            "node_modules",
            "wwwroot",
            "packages",
        }
    )

    R4_CLASS_PREFIX: str = "R4MVC_"
    OVERRIDE_SUFFIX: str = "Override"
    ASYNC_WRAPPERS: frozenset[str] = frozenset({cs.TYPE_TASK, cs.TYPE_VALUE_TASK})

    CANONICAL_ROOT: str = "MVC"
    CALL_INFO_CLASS: str = "R4Mvc_Microsoft_AspNetCore_Mvc_ActionResult"
    ACTION_RESULT_TYPE: str = "IActionResult"
    REDIRECT_RESULT_TYPE: str = "RedirectToRouteResult"
    DUMMY_TYPE: str = "Dummy"

    GENERATED_CODE_TOOL: str = "R4Mvc"
    GENERATED_CODE_VERSION: str = "1.0"


settings = GeneratorSettings()

IGNORE_FILENAME = ".mvcgenignore"


EMPTY_IGNORE_PATTERNS = IgnorePatterns(exclude=frozenset(), unignore=frozenset())


def load_ignore_patterns(root_path: Path) -> IgnorePatterns:
    """Loads exclusion and inclusion patterns from a .mvcgenignore file.

    The file works like a minimal .gitignore: one directory name or
    root-relative path per line, `#` comments, and `!` to force a path back in
    that the default ignore set would skip.

    Args:
        root_path (Path): The directory scanned for templates.

    Returns:
        IgnorePatterns: Frozensets of exclude and unignore patterns. Both are
                        empty if the file doesn't exist or can't be read.
    """
    ignore_file = root_path / IGNORE_FILENAME
    if not ignore_file.is_file():
        return EMPTY_IGNORE_PATTERNS

    exclude: set[str] = set()
    unignore: set[str] = set()
    try:
        with ignore_file.open(encoding=cs.ENCODING_UTF8) as f:
            for line in f:
                line = line.strip()
                if not line or line.startswith("#"):
                    continue
                if line.startswith("!"):
                    unignore.add(line[1:].strip().strip("/"))
                else:
                    exclude.add(line.strip("/"))
        if exclude or unignore:
            logger.info(
                logs.IGNORE_PATTERNS_LOADED.format(
                    exclude_count=len(exclude),
                    unignore_count=len(unignore),
                    path=ignore_file,
                )
            )
        return IgnorePatterns(
            exclude=frozenset(exclude),
            unignore=frozenset(unignore),
        )
    except OSError as e:
        logger.warning(logs.IGNORE_PATTERNS_READ_FAILED.format(path=ignore_file, error=e))
        return EMPTY_IGNORE_PATTERNS
