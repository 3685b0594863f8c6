"""
Template Source Resolution

Maps a template identifier given by the user to where its text lives:
one of the two builtin templates, or a custom file under
``<config_dir>/templates``.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from typstgen.contexts.configuration.host import get_config_dir
from typstgen.contexts.templating.defaults import (
    BUILTIN_ARTICLE_NAME,
    BUILTIN_REPORT_NAME,
    TEMPLATE_DIRECTORY,
    TEMPLATE_EXTENSION,
)
from typstgen.contexts.templating.exceptions import (
    CouldNotFindCfgDir,
    NoTemplateDirectory,
    TemplateNotFound,
)
from typstgen.contexts.templating.logger import _log_debug


class TemplateSource:
    """Base class for the places template text can come from."""


@dataclass(frozen=True)
class BuiltinReport(TemplateSource):
    def __str__(self) -> str:
        return "builtin report template"


@dataclass(frozen=True)
class BuiltinArticle(TemplateSource):
    def __str__(self) -> str:
        return "builtin article template"


@dataclass(frozen=True)
class CustomSource(TemplateSource):
    """Custom template file on disk."""

    path: Path

    def __str__(self) -> str:
        return f"custom template {self.path}"


DEFAULT_TEMPLATE = BuiltinReport()


def builtin_source(name: str) -> Optional[TemplateSource]:
    """Return the builtin source for an exact builtin name, else None."""
    if name == BUILTIN_REPORT_NAME:
        return BuiltinReport()
    if name == BUILTIN_ARTICLE_NAME:
        return BuiltinArticle()
    return None


def template_file_name(name: str) -> str:
    """Append the template extension unless the name already carries it."""
    if name.endswith(TEMPLATE_EXTENSION):
        return name
    return f"{name}{TEMPLATE_EXTENSION}"


def templates_dir(config_dir: Path) -> Path:
    """Directory holding custom templates inside the typstgen config directory."""
    return config_dir / TEMPLATE_DIRECTORY


def resolve_template_source(
    name: Optional[str], config_dir: Optional[Path] = None
) -> Optional[TemplateSource]:
    """
    Resolve a user-given template name to a TemplateSource.

    Args:
        name: Template name from the command line, or None if not given
        config_dir: typstgen config directory (defaults to get_config_dir())

    Returns:
        TemplateSource, or None when no name was given (the configured default
        template is then chosen during option resolution)

    Raises:
        CouldNotFindCfgDir: Custom name given but no config directory exists
        NoTemplateDirectory: The templates directory is missing
        TemplateNotFound: No file for the name in the templates directory

    Examples:
        >>> resolve_template_source("report")
        BuiltinReport()

        >>> resolve_template_source("thesis")  # <config_dir>/templates/thesis.typ
        CustomSource(path=PosixPath('/home/me/.config/typstgen/templates/thesis.typ'))
    """
    if name is None:
        return None

    builtin = builtin_source(name)
    if builtin is not None:
        return builtin

    if config_dir is None:
        config_dir = get_config_dir()
    if config_dir is None:
        raise CouldNotFindCfgDir()

    template_dir = templates_dir(config_dir)
    if not template_dir.exists():
        raise NoTemplateDirectory(template_dir)

    template_path = template_dir / template_file_name(name)
    if not template_path.exists():
        raise TemplateNotFound(name)

    _log_debug(f"Resolved template '{name}' to {template_path}")
    return CustomSource(template_path)
