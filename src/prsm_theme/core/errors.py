"""
Error types for token loading, flattening, and artifact output.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


class ThemeError(Exception):
    """Base exception for all theme compiler errors."""

    def __init__(self, message: str, context: Optional["TokenContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}: {self.message}"
        return self.message


class MissingInputError(ThemeError):
    """
    Raised when the token document cannot be loaded.

    Examples:
    - File does not exist
    - File is unreadable
    - Invalid JSON / YAML
    - Top level is not a mapping
    """

    pass


class MalformedTokenError(ThemeError):
    """
    Raised when a token value has a shape the compiler cannot handle.

    Examples:
    - A list where a scalar is expected (e.g. a shadow list)
    - Booleans or nulls as token values
    - A font stack containing non-string entries
    - A required section missing from the document
    """

    pass


class WriteError(ThemeError):
    """
    Raised when a generated artifact cannot be written.

    Examples:
    - Output directory cannot be created
    - Destination file is not writable
    """

    pass


@dataclass
class TokenContext:
    """
    Location of an error inside a token document.

    Attributes:
        token_path: Dash-joined path of the offending token
        file: Optional path of the token document or output file
    """

    token_path: str | None = None
    file: Path | None = None

    def format(self) -> str:
        """
        Format the context as a human-readable string.

        Returns:
            Formatted string like: "variables.json @ colors-primary"
        """
        parts = []
        if self.file:
            parts.append(str(self.file))
        if self.token_path:
            parts.append(f"@ {self.token_path}")
        return " ".join(parts) or "<tokens>"


def make_malformed_token_error(
    message: str,
    token_path: str | None = None,
    file: Path | None = None,
) -> MalformedTokenError:
    """
    Helper to create a MalformedTokenError with optional context.

    Args:
        message: Error description
        token_path: Optional dash-joined token path
        file: Optional token document path

    Returns:
        MalformedTokenError with context if a location was provided
    """
    if token_path or file:
        return MalformedTokenError(message, TokenContext(token_path=token_path, file=file))
    return MalformedTokenError(message)


def make_write_error(message: str, file: Path) -> WriteError:
    """Helper to create a WriteError pointing at the destination file."""
    return WriteError(message, TokenContext(file=file))
