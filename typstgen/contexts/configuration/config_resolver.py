"""
Option Resolution for Document Generation

Merges command-line flags, the user's config.toml and built-in defaults into a single
fully-resolved options record. Precedence is strictly CLI > config > default, one
"first present value wins" chain per field.

Examples:
    >>> config = load_config(config_path())
    >>> options = resolve_options(RawFlags(output="notes"), config)
    >>> options.output_name
    'notes'
"""

import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from typstgen.contexts.configuration.defaults import (
    AUTHOR_PLACEHOLDER,
    CONFIG_FILE_NAME,
    DEFAULT_EMAIL,
    DEFAULT_LANG,
    DEFAULT_LIB_FILE,
    DEFAULT_ORCID,
    DEFAULT_OUTPUT,
    INFERRED_NAME_REFORMAT_DEFAULT,
    NAME_INFERENCE_DEFAULT,
)
from typstgen.contexts.configuration.host import get_config_dir, get_real_name
from typstgen.contexts.configuration.logger import _log_debug, log_config_unavailable
from typstgen.contexts.templating.template_source import (
    DEFAULT_TEMPLATE,
    CustomSource,
    TemplateSource,
    builtin_source,
    template_file_name,
    templates_dir,
)


@dataclass
class PersistedConfig:
    """Schema of config.toml. Every key is optional."""

    default_output: Optional[str] = None
    default_template: Optional[str] = None
    name_inference: Optional[bool] = None
    inferred_name_reformat: Optional[bool] = None
    orcid: Optional[str] = None
    email: Optional[str] = None
    default_author: Optional[str] = None
    lib_file: Optional[str] = None


@dataclass(frozen=True)
class RawFlags:
    """
    Values given on the command line.

    A template of None means no template argument was given.
    """

    output: Optional[str] = None
    template: Optional[TemplateSource] = None
    author: Optional[str] = None
    orcid: Optional[str] = None
    lang: str = DEFAULT_LANG
    debug: bool = False


@dataclass(frozen=True)
class ResolvedOptions:
    """Options for one run with every field resolved to a concrete value."""

    output_name: str
    template: TemplateSource
    author: str
    orcid: str
    lang: str
    email: str
    lib_file_path: str
    debug: bool


def config_path(config_dir: Optional[Path] = None) -> Optional[Path]:
    """Location of config.toml, or None if there is no config directory."""
    if config_dir is None:
        config_dir = get_config_dir()
    if config_dir is None:
        return None
    return config_dir / CONFIG_FILE_NAME


def load_config(path: Optional[Path]) -> Optional[PersistedConfig]:
    """
    Load and validate config.toml.

    Unknown keys are ignored. A missing file, invalid TOML or a value of the wrong
    type all yield None so that resolution falls back to built-in defaults.

    Args:
        path: Path to config.toml (None if the config directory is unknown)

    Returns:
        PersistedConfig, or None if no usable config exists
    """
    if path is None:
        return None

    try:
        with open(path, "rb") as f:
            raw: Dict[str, Any] = tomllib.load(f)
    except FileNotFoundError:
        log_config_unavailable(path, "file not found")
        return None
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        log_config_unavailable(path, f"could not parse: {e}")
        return None

    schema_keys = {f.name for f in fields(PersistedConfig)}
    known = {key: value for key, value in raw.items() if key in schema_keys}
    ignored = sorted(set(raw) - schema_keys)
    if ignored:
        _log_debug(f"Ignoring unknown config keys: {ignored}")

    # Values are taken literally: "${...}" is never resolved as an interpolation
    try:
        merged = OmegaConf.merge(OmegaConf.structured(PersistedConfig), known)
        values = OmegaConf.to_container(merged, resolve=False)
    except OmegaConfBaseException as e:
        log_config_unavailable(path, f"invalid value: {e}")
        return None

    # Interpolation strings bypass OmegaConf's type checks on typed nodes
    for f in fields(PersistedConfig):
        if f.type == Optional[bool] and not isinstance(values[f.name], (bool, type(None))):
            log_config_unavailable(path, f"invalid value for {f.name}: {values[f.name]!r}")
            return None

    _log_debug(f"Loaded config from {path}")
    return PersistedConfig(**values)


def first_present(*values):
    """Return the first value that is not None (None if all are)."""
    for value in values:
        if value is not None:
            return value
    return None


def reformat_author_name(author: str) -> str:
    """
    Reformat a two-word name as "Last, First".

    Names with any other number of space-separated words are returned unchanged.

    Examples:
        >>> reformat_author_name("John Doe")
        'Doe, John'
        >>> reformat_author_name("Ada King Lovelace")
        'Ada King Lovelace'
    """
    parts = author.split(" ")
    if len(parts) == 2:
        return f"{parts[1]}, {parts[0]}"
    return author


def resolve_author(
    cli_author: Optional[str],
    config: PersistedConfig,
    real_name_provider: Callable[[], Optional[str]] = get_real_name,
) -> str:
    """
    Resolve the author name: CLI, then config default_author, then inference.

    Inference only runs when enabled (name_inference, default on). Inferred
    two-word names are reformatted when inferred_name_reformat is on (default on).
    """
    explicit = first_present(cli_author, config.default_author)
    if explicit is not None:
        return explicit

    if not first_present(config.name_inference, NAME_INFERENCE_DEFAULT):
        return AUTHOR_PLACEHOLDER

    inferred = real_name_provider()
    if not inferred:
        return AUTHOR_PLACEHOLDER

    if first_present(config.inferred_name_reformat, INFERRED_NAME_REFORMAT_DEFAULT):
        return reformat_author_name(inferred)
    return inferred


def resolve_default_template(
    name: Optional[str], config_dir: Optional[Path] = None
) -> TemplateSource:
    """
    Resolve the config's default_template name.

    Builtin names map to builtin sources; anything else points into the
    templates directory without checking that the file exists (reading it
    later reports the failure).
    """
    if name is None:
        return DEFAULT_TEMPLATE

    builtin = builtin_source(name)
    if builtin is not None:
        return builtin

    if config_dir is None:
        config_dir = get_config_dir()
    if config_dir is None:
        _log_debug(f"No config directory for default template '{name}'; using {DEFAULT_TEMPLATE}")
        return DEFAULT_TEMPLATE

    return CustomSource(templates_dir(config_dir) / template_file_name(name))


def resolve_options(
    flags: RawFlags,
    config: Optional[PersistedConfig] = None,
    real_name_provider: Callable[[], Optional[str]] = get_real_name,
    config_dir: Optional[Path] = None,
) -> ResolvedOptions:
    """
    Merge CLI flags, config and defaults into ResolvedOptions.

    A missing config behaves exactly like an empty one.

    Args:
        flags: Values from the command line
        config: Loaded config.toml, or None
        real_name_provider: Host lookup used for author-name inference
        config_dir: typstgen config directory for custom default templates
            (defaults to get_config_dir())

    Returns:
        ResolvedOptions with every field concrete
    """
    if config is None:
        config = PersistedConfig()

    template = flags.template
    if template is None:
        template = resolve_default_template(config.default_template, config_dir)

    return ResolvedOptions(
        output_name=first_present(flags.output, config.default_output, DEFAULT_OUTPUT),
        template=template,
        author=resolve_author(flags.author, config, real_name_provider),
        orcid=first_present(flags.orcid, config.orcid, DEFAULT_ORCID),
        lang=flags.lang.strip(),
        email=first_present(config.email, DEFAULT_EMAIL),
        lib_file_path=first_present(config.lib_file, DEFAULT_LIB_FILE),
        debug=flags.debug,
    )
