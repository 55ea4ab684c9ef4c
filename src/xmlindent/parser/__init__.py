"""Markup tokenizing for xmlindent."""

from xmlindent.parser.events import (
    CharData,
    Comment,
    Declaration,
    EmptyTagEnd,
    EndTag,
    Event,
    ProcessingInstruction,
    StartTag,
)
from xmlindent.parser.lexer import MarkupLexer
from xmlindent.parser.lines import LineIndex
from xmlindent.parser.listener import MarkupListener

__all__ = [
    "CharData",
    "Comment",
    "Declaration",
    "EmptyTagEnd",
    "EndTag",
    "Event",
    "LineIndex",
    "MarkupLexer",
    "MarkupListener",
    "ProcessingInstruction",
    "StartTag",
]
