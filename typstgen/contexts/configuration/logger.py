"""
Configuration context logger.

Provides logging interface for the configuration context with automatic [config] prefix.
All configuration modules should import from this module, not from loguru directly.
"""

from pathlib import Path

from loguru import logger

CONTEXT_PREFIX = "[config]"


# Wrapper functions with automatic [config] prefix


def _log_debug(message: str) -> None:
    """Log debug message with [config] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level configuration-specific logging helpers


def log_config_unavailable(config_path: Path, reason: str) -> None:
    """Log that config.toml was skipped and built-in defaults apply."""
    _log_debug(f"No usable config at {config_path} ({reason}); using built-in defaults")


def log_resolved_options(options) -> None:
    """
    Log every field of the resolved options record.

    Args:
        options: ResolvedOptions from resolve_options()
    """
    _log_debug("Resolved options:")
    for key, value in vars(options).items():
        _log_debug(f"  {key}: {value}")
