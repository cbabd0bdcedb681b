"""Custom exceptions for templating context."""

from pathlib import Path
from typing import Optional

from gridpaper.exceptions import GridPaperError


class TemplateRenderError(GridPaperError):
    """
    Exception raised when template rendering fails.

    The template and the parameter schema are both fixed, so this always
    points at a defect in the package rather than at user input.

    Attributes:
        message: Error description
        template_path: Path to the template file
        original_error: The original Jinja2 error
    """

    def __init__(
        self,
        message: str,
        template_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.template_path = template_path
        self.original_error = original_error

        parts = [message]

        if template_path:
            parts.append(f"\nTemplate: {template_path}")

        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        super().__init__("\n".join(parts))


class ConfigurationError(GridPaperError):
    """
    Exception raised when a parameter config file cannot be loaded or merged.

    Attributes:
        message: Error description
        config_path: Path to the offending config file
    """

    def __init__(self, message: str, config_path: Optional[Path] = None):
        self.message = message
        self.config_path = config_path

        if config_path:
            message = f"{message}\nConfig file: {config_path}"

        super().__init__(message)
