"""The indentation state machine."""

from xmlindent.validator.indentation import (
    CLOSE_TAG_NAME_OFFSET,
    OPEN_TAG_NAME_OFFSET,
    ElementEntry,
    Indent,
    IndentationValidator,
    WhitespaceBuffer,
)

__all__ = [
    "CLOSE_TAG_NAME_OFFSET",
    "OPEN_TAG_NAME_OFFSET",
    "ElementEntry",
    "Indent",
    "IndentationValidator",
    "WhitespaceBuffer",
]
