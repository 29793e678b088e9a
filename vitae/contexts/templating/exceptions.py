"""Custom exceptions for templating context with file references."""

from pathlib import Path
from typing import Optional


class DocumentLoadError(Exception):
    """
    Exception raised when a personal or style JSON document cannot be loaded.

    Attributes:
        message: Error description
        path: Path of the document that failed to load
        original_error: The underlying OSError or JSONDecodeError
    """

    def __init__(
        self,
        message: str,
        path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.path = path
        self.original_error = original_error

        parts = [message]

        if path:
            parts.append(f"\nFile: {path}")

        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        super().__init__("\n".join(parts))


class TemplateRenderError(Exception):
    """
    Exception raised when HTML template loading or rendering fails.

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
