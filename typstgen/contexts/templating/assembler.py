"""
Document Assembly

Orchestrates the pipeline: load template → substitute placeholders → write output.
The document is fully assembled in memory before anything is written, so a failed
run never leaves a partial output file behind.
"""

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from typstgen.contexts.configuration.config_resolver import ResolvedOptions
from typstgen.contexts.templating.defaults import TEMPLATE_EXTENSION
from typstgen.contexts.templating.exceptions import CouldNotWriteOutputFile, TemplatingError
from typstgen.contexts.templating.logger import (
    log_assembled_template,
    log_generation_failure,
    log_generation_result,
    log_generation_start,
)
from typstgen.contexts.templating.substitution import substitute_template
from typstgen.contexts.templating.template_loader import load_template


@dataclass
class GenerationResult:
    """
    Result of a successful generate_document() call.

    Attributes:
        output_path: Path of the written output file
        bytes_written: Size of the written file
    """

    output_path: Path
    bytes_written: int = 0


def output_file_path(output_name: str) -> Path:
    """Output file for a name, appending .typ unless already present."""
    if output_name.endswith(TEMPLATE_EXTENSION):
        return Path(output_name)
    return Path(f"{output_name}{TEMPLATE_EXTENSION}")


def assemble_template(options: ResolvedOptions, config_dir: Optional[Path] = None) -> str:
    """
    Load the template selected in options and fill its placeholders.

    Args:
        options: Fully resolved options
        config_dir: typstgen config directory (defaults to get_config_dir())

    Returns:
        Final document text

    Raises:
        TemplatingError: Template unreadable or config directory missing
    """
    template = load_template(options.template)
    return substitute_template(template.text, options, config_dir=config_dir)


def write_document(document: str, output_path: Path) -> int:
    """
    Write the document as UTF-8 without newline translation.

    Returns:
        Number of bytes written

    Raises:
        CouldNotWriteOutputFile: Output directory missing or not writable
    """
    try:
        output_path.write_text(document, encoding="utf-8", newline="")
    except OSError as e:
        raise CouldNotWriteOutputFile(output_path, original_error=e) from e
    return len(document.encode("utf-8"))


def generate_document(
    options: ResolvedOptions, config_dir: Optional[Path] = None
) -> GenerationResult:
    """
    Assemble the document and write it to <output_name>.typ.

    Errors propagate to the caller; the result is only returned on success.

    Args:
        options: Fully resolved options
        config_dir: typstgen config directory (defaults to get_config_dir())

    Returns:
        GenerationResult for the written file

    Raises:
        TemplatingError: Assembly or writing failed
    """
    output_path = output_file_path(options.output_name)
    log_generation_start(options.template, output_path)
    start_time = time.time()

    try:
        document = assemble_template(options, config_dir=config_dir)
        if options.debug:
            log_assembled_template(document)
        bytes_written = write_document(document, output_path)
    except TemplatingError as e:
        log_generation_failure(output_path, e, time.time() - start_time)
        raise

    result = GenerationResult(output_path=output_path, bytes_written=bytes_written)
    log_generation_result(result, time.time() - start_time)
    return result
