"""
Templating context logger.

Provides logging interface for templating context with automatic [template] prefix.
All templating modules should import from this module, not from loguru directly.
"""

from pathlib import Path

from loguru import logger

CONTEXT_PREFIX = "[template]"


# Wrapper functions with automatic [template] prefix


def _log_info(message: str) -> None:
    """Log info message with [template] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [template] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [template] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [template] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level templating-specific logging helpers


def log_generation_start(template_source, output_path: Path) -> None:
    """Log start of document generation."""
    _log_info(f"Generating {output_path} from {template_source}")


def log_generation_result(result, elapsed_time: float) -> None:
    """
    Log a written document.

    Args:
        result: GenerationResult from generate_document()
        elapsed_time: Time taken
    """
    _log_success(f"Wrote {result.output_path} ({result.bytes_written} bytes, {elapsed_time:.2f}s)")


def log_generation_failure(output_path: Path, error: Exception, elapsed_time: float) -> None:
    """Log a generation that stopped before the output file was written."""
    _log_error(f"Failed to generate {output_path} ({elapsed_time:.2f}s)")
    _log_error(f"  Error: {error}")


def log_assembled_template(text: str) -> None:
    """Dump the fully substituted document at debug level."""
    logger.opt(raw=True).debug(f"\n\nTEMPLATE:\n{text}\n")
