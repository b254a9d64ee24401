"""Exception types raised while compiling dictionaries and converting text."""

from __future__ import annotations


class DictionaryFormatError(ValueError):
    """A raw dictionary source line could not be parsed.

    Attributes:
        line_number: 1-based line number in the source, or ``0`` when unknown.
        line: Raw line text that failed to parse.
    """

    def __init__(self, message: str, line_number: int = 0, line: str = "") -> None:
        if line_number:
            message = f"Line {line_number}: {message} ({line.strip()!r})"
        super().__init__(message)
        self.line_number = line_number
        self.line = line


class DictionaryConsistencyError(RuntimeError):
    """Compiled dictionary data violates an invariant or cannot be decoded."""


class ConfigurationError(ValueError):
    """Conversion options were rejected at construction time."""
