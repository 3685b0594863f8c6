"""
Placeholder Substitution

Turns raw template text into the final document by literal, global, case-sensitive
replacement of a fixed token vocabulary. Unknown tokens are left untouched.

Order of operations:
1. Library import prepended (if <config_dir>/<lib_file> exists)
2. {{AUTHOR_NAME}}
3. {{ORCID_ID}} / {{ORCID_ICON_DECLARATION}}
4. {{LANG}}
5. {{EMAIL}}
"""

from pathlib import Path
from typing import Optional

from typstgen.contexts.configuration.config_resolver import ResolvedOptions
from typstgen.contexts.configuration.host import get_config_dir
from typstgen.contexts.templating.defaults import (
    AUTHOR_TOKEN,
    EMAIL_TOKEN,
    LANG_TOKEN,
    ORCID_ICON_SIZE_PT,
    ORCID_ICON_SVG,
    ORCID_ICON_TOKEN,
    ORCID_ICON_VARIABLE,
    ORCID_TOKEN,
    ORCID_URL_PREFIX,
)
from typstgen.contexts.templating.exceptions import CouldNotFindCfgDir
from typstgen.contexts.templating.logger import _log_debug


def orcid_url(orcid: str) -> str:
    return f"{ORCID_URL_PREFIX}{orcid}"


def orcid_icon_declaration() -> str:
    """Typst declaration binding the ORCID icon to ``#orcid_icon``."""
    escaped_svg = ORCID_ICON_SVG.replace('"', '\\"')
    size = f"{ORCID_ICON_SIZE_PT}pt"
    return (
        f'#let {ORCID_ICON_VARIABLE} = box(image(bytes("{escaped_svg}"), '
        f"width: {size}, height: {size}), height: {size})"
    )


def orcid_icon_link(orcid: str) -> str:
    """Link fragment showing the icon in front of the ORCID URL."""
    url = orcid_url(orcid)
    return f' #link("{url}")[#{ORCID_ICON_VARIABLE} {url}]'


def orcid_plain_link(orcid: str) -> str:
    return f" | {orcid_url(orcid)}"


def include_library(text: str, lib_path: Path) -> str:
    """Prepend an import of the library file if it exists."""
    if not lib_path.is_file():
        return text
    _log_debug(f"Importing library file {lib_path}")
    return f'#import "{lib_path.resolve()}": *\n\n{text}'


def substitute_orcid(text: str, orcid: str) -> str:
    """
    Substitute the ORCID tokens.

    With an icon declaration token present the ID renders as an icon link and the
    declaration is filled in; otherwise it renders as `` | https://orcid.org/<id>``.
    """
    if ORCID_ICON_TOKEN in text:
        text = text.replace(ORCID_TOKEN, orcid_icon_link(orcid))
        return text.replace(ORCID_ICON_TOKEN, orcid_icon_declaration())
    return text.replace(ORCID_TOKEN, orcid_plain_link(orcid))


def substitute_template(
    text: str, options: ResolvedOptions, config_dir: Optional[Path] = None
) -> str:
    """
    Fill every placeholder token in template text.

    Args:
        text: Raw template text
        options: Fully resolved options
        config_dir: typstgen config directory holding the library file
            (defaults to get_config_dir())

    Returns:
        Final document text

    Raises:
        CouldNotFindCfgDir: No config directory to look for the library file in

    Example:
        >>> substitute_template("{{AUTHOR_NAME}}{{ORCID_ID}}", options)
        'John Doe | https://orcid.org/0000-0002-1825-0097'
    """
    if config_dir is None:
        config_dir = get_config_dir()
    if config_dir is None:
        raise CouldNotFindCfgDir()

    text = include_library(text, config_dir / options.lib_file_path)
    text = text.replace(AUTHOR_TOKEN, options.author)
    text = substitute_orcid(text, options.orcid)
    text = text.replace(LANG_TOKEN, options.lang)
    text = text.replace(EMAIL_TOKEN, options.email)

    return text
