"""
Host system lookups used during option resolution.

Two providers, both returning None instead of raising when the host cannot answer:
- get_config_dir(): per-user typstgen configuration directory
- get_real_name(): display name of the person running typstgen
"""

import os
import subprocess
from pathlib import Path
from typing import Optional

import typer
from dotenv import find_dotenv, load_dotenv

from typstgen.contexts.configuration.defaults import APP_NAME
from typstgen.contexts.configuration.logger import _log_debug

CONFIG_DIR_ENV_VAR = "TYPSTGEN_CONFIG_DIR"
GIT_TIMEOUT_S = 5


def load_environment() -> None:
    """Load a .env file from the working directory or its parents."""
    load_dotenv(find_dotenv(usecwd=True))


load_environment()


def get_config_dir() -> Optional[Path]:
    """
    Locate the per-user typstgen configuration directory.

    TYPSTGEN_CONFIG_DIR wins when set. Otherwise the platform application
    directory is used (``~/.config/typstgen`` on Linux, honoring XDG_CONFIG_HOME).

    Returns:
        Directory path (not necessarily existing), or None if no home directory
        can be determined
    """
    override = os.getenv(CONFIG_DIR_ENV_VAR)
    if override:
        return Path(override).expanduser()

    app_dir = typer.get_app_dir(APP_NAME)
    # expanduser leaves "~" in place when HOME cannot be resolved
    if app_dir.startswith("~"):
        return None
    return Path(app_dir)


def _git_user_name() -> Optional[str]:
    """Return ``git config user.name``, or None if git is missing or unset."""
    try:
        completed = subprocess.run(
            ["git", "config", "user.name"],
            capture_output=True,
            text=True,
            timeout=GIT_TIMEOUT_S,
        )
    except (OSError, subprocess.SubprocessError) as e:
        _log_debug(f"git name lookup failed: {e}")
        return None

    if completed.returncode != 0:
        return None
    return completed.stdout.strip() or None


def _os_full_name() -> Optional[str]:
    """Return the full-name (GECOS) field of the current POSIX account."""
    if os.name != "posix":
        return None

    import pwd

    try:
        gecos = pwd.getpwuid(os.getuid()).pw_gecos
    except KeyError:
        return None
    return gecos.split(",")[0].strip() or None


def get_real_name() -> Optional[str]:
    """
    Infer the user's display name.

    Tries the git identity first, then the OS account.

    Returns:
        Name as found, or None if neither source has one
    """
    name = _git_user_name() or _os_full_name()
    _log_debug(f"Inferred real name: {name!r}")
    return name
