"""Exception hierarchy for xmlindent.

Formatting violations are findings, not errors; they travel to a
``ViolationHandler``. The exceptions below stop processing.
"""

from __future__ import annotations

from xmlindent.models.location import SourceSpan


class XmlIndentError(Exception):
    """Base class for all errors raised by xmlindent."""


class FormatException(XmlIndentError):
    """Raised when the markup event sequence is structurally inconsistent.

    For example a closing tag arrives while no element is open. The event
    source broke its contract, so checking the rest of the document would only
    produce misleading violations.
    """


class MarkupSyntaxError(XmlIndentError):
    """Raised when the lexer cannot split a document into markup events."""

    def __init__(self, message: str, line: int, column: int) -> None:
        self.line = line
        self.column = column
        super().__init__(f"{message} at line {line}, column {column}")


class DocumentSafetyError(XmlIndentError):
    """Raised when an input document exceeds the configured safety limits."""


class ConfigError(XmlIndentError):
    """Raised for an invalid project configuration file."""

    def __init__(self, message: str, span: SourceSpan | None = None) -> None:
        self.span = span
        if span is not None:
            message = f"{span.file}:{span.line}:{span.column}: {message}"
        super().__init__(message)


class ViolationsFoundError(XmlIndentError):
    """Raised by a failing collector when formatting violations were found."""

    def __init__(self, count: int, files: int) -> None:
        self.count = count
        self.files = files
        super().__init__(f"Found {count} indentation violation(s) in {files} file(s)")
