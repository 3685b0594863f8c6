"""Custom exceptions for the templating context with path and name references."""

from pathlib import Path


class TemplatingError(Exception):
    """
    Base exception for every failure that aborts document generation.

    Attributes:
        message: Human-readable error description
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class CouldNotFindCfgDir(TemplatingError):
    """Raised when the per-user configuration directory cannot be located."""

    def __init__(self):
        super().__init__("Could not find the user's configuration directory")


class NoTemplateDirectory(TemplatingError):
    """
    Raised when a custom template is requested but the templates directory is missing.

    Attributes:
        dir_path: Path to the expected templates directory
    """

    def __init__(self, dir_path: Path):
        self.dir_path = dir_path
        super().__init__(f"The {dir_path} directory does not exist")


class TemplateNotFound(TemplatingError):
    """
    Raised when a named custom template has no file in the templates directory.

    Attributes:
        name: Template name as given by the user
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Template with name {name} not found")


class CouldNotReadTemplateFile(TemplatingError):
    """
    Raised when a custom template file cannot be read.

    Attributes:
        template_path: Path to the template file
        original_error: The underlying OS or decoding error, if any
    """

    def __init__(self, template_path: Path, original_error: Exception = None):
        self.template_path = template_path
        self.original_error = original_error
        super().__init__(f"Could not read template file at {template_path}")


class CouldNotWriteOutputFile(TemplatingError):
    """
    Raised when the generated document cannot be written.

    Attributes:
        output_path: Path of the output file
        original_error: The underlying OS error
    """

    def __init__(self, output_path: Path, original_error: Exception = None):
        self.output_path = output_path
        self.original_error = original_error
        super().__init__(f"Could not write output file at {output_path}")
