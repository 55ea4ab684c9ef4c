"""Immutable markup events. The lexer emits them, listeners consume them.

Lines are 1-based. Tag columns are 0-based and point at the first character
of the element name, not at the ``<``.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CharData:
    """Text between markup: whitespace, character data, CDATA sections, references.

    ``end_line`` is the line on which the text ends, i.e. where the markup that
    follows it starts.
    """

    text: str
    line: int
    end_line: int


@dataclass(frozen=True)
class Comment:
    """``<!-- ... -->``"""

    text: str
    line: int
    end_line: int


@dataclass(frozen=True)
class ProcessingInstruction:
    """``<?target data?>``"""

    target: str
    data: str
    line: int
    end_line: int


@dataclass(frozen=True)
class Declaration:
    """The XML declaration or a ``<!DOCTYPE ...>``-style declaration."""

    text: str
    line: int
    end_line: int


@dataclass(frozen=True)
class StartTag:
    """The name of an opening tag was recognized."""

    name: str
    line: int
    column: int


@dataclass(frozen=True)
class EmptyTagEnd:
    """The ``/>`` closing a self-closing tag; ``column`` points at the ``/``."""

    name: str
    line: int
    column: int


@dataclass(frozen=True)
class EndTag:
    """The name of a closing tag was recognized."""

    name: str
    line: int
    column: int


Event = CharData | Comment | ProcessingInstruction | Declaration | StartTag | EmptyTagEnd | EndTag
