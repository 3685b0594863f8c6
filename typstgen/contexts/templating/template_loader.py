"""
Template Loading

Produces raw template text for a resolved TemplateSource. Builtin templates ship
inside the package under builtin/; custom templates are read from disk.
"""

from dataclasses import dataclass
from pathlib import Path

from typstgen.contexts.templating.defaults import ARTICLE_TEMPLATE_FILE, REPORT_TEMPLATE_FILE
from typstgen.contexts.templating.exceptions import CouldNotReadTemplateFile
from typstgen.contexts.templating.logger import _log_debug
from typstgen.contexts.templating.template_source import (
    BuiltinArticle,
    BuiltinReport,
    CustomSource,
    TemplateSource,
)


@dataclass(frozen=True)
class Template:
    """Loaded template text, tagged by where it came from."""

    text: str


class ReportTemplate(Template):
    pass


class ArticleTemplate(Template):
    pass


class CustomTemplate(Template):
    pass


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise CouldNotReadTemplateFile(path, original_error=e) from e


def load_template(source: TemplateSource) -> Template:
    """
    Load template text for a source.

    Args:
        source: Resolved TemplateSource

    Returns:
        ReportTemplate, ArticleTemplate or CustomTemplate carrying the text

    Raises:
        CouldNotReadTemplateFile: Template file missing or unreadable
    """
    if isinstance(source, BuiltinReport):
        return ReportTemplate(_read_text(REPORT_TEMPLATE_FILE))
    if isinstance(source, BuiltinArticle):
        return ArticleTemplate(_read_text(ARTICLE_TEMPLATE_FILE))
    if isinstance(source, CustomSource):
        _log_debug(f"Reading custom template {source.path}")
        return CustomTemplate(_read_text(source.path))
    raise TypeError(f"Unsupported template source: {source!r}")
