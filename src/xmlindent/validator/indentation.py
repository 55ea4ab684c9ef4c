"""Indentation state machine driven by markup events."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from xmlindent.errors import FormatException
from xmlindent.format.edits import Delete, Edit, Insert
from xmlindent.models.location import Location
from xmlindent.models.options import IndentOptions
from xmlindent.models.resource import Resource
from xmlindent.models.violation import Violation, ViolationHandler
from xmlindent.parser.events import (
    CharData,
    Comment,
    Declaration,
    EmptyTagEnd,
    EndTag,
    ProcessingInstruction,
    StartTag,
)
from xmlindent.parser.listener import MarkupListener

# Distance from the first character of an element name back to the '<' of its tag.
OPEN_TAG_NAME_OFFSET = len("<")
CLOSE_TAG_NAME_OFFSET = len("</")


@dataclass(frozen=True)
class Indent:
    """An indent occurrence: ``size`` indent characters measured on ``line_number``."""

    line_number: int
    size: int

    START: ClassVar[Indent]


# The indent assumed before any whitespace has been seen.
Indent.START = Indent(1, 0)


@dataclass(frozen=True)
class ElementEntry:
    """A stack frame for an open element."""

    name: str
    found_indent: Indent
    expected_indent: Indent

    @classmethod
    def at(cls, name: str, indent: Indent) -> ElementEntry:
        return cls(name, indent, indent)

    def __str__(self) -> str:
        return f"<{self.name}> {self.found_indent}"


class WhitespaceBuffer:
    """Collects character data seen between tags and measures the indent it ends with."""

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._line_number = Indent.START.line_number

    def append(self, text: str, last_line: int) -> None:
        self._parts.append(text)
        self._line_number = last_line

    def flush(self, previous: Indent) -> Indent:
        """Measure and clear the buffer.

        Counts spaces and tabs from the end of the buffer back to the nearest
        line break. If something other than whitespace comes first, the text
        does not end at a line boundary and ``previous`` is returned unchanged.
        """
        text = "".join(self._parts)
        self._parts.clear()
        indent_length = 0
        for ch in reversed(text):
            if ch == "\n" or ch == "\r":
                return Indent(self._line_number, indent_length)
            if ch == " " or ch == "\t":
                indent_length += 1
                continue
            break
        return previous


class IndentationValidator(MarkupListener):
    """Detects indentation violations and reports them to a :class:`ViolationHandler`.

    Each element is expected at its parent's expected indent plus
    ``indent_size``; a closing tag is expected at the indent of its opening
    tag. Tags on the same line as the related opening tag are exempt.

    When an opening tag is misplaced, the frame pushed for it carries the
    corrected expected indent, so its descendants are judged against where the
    element should be rather than where it was found.

    One instance checks one document.
    """

    def __init__(
        self,
        resource: Resource,
        options: IndentOptions,
        violation_handler: ViolationHandler,
    ) -> None:
        self._resource = resource
        self._indent_char = options.indent_char
        self._indent_size = options.indent_size
        self._violation_handler = violation_handler
        self._buffer = WhitespaceBuffer()
        self._last_indent = Indent.START
        self._stack: list[ElementEntry] = []

    @property
    def depth(self) -> int:
        return len(self._stack)

    @property
    def last_indent(self) -> Indent:
        return self._last_indent

    # -- event callbacks ------------------------------------------------------

    def on_chardata(self, event: CharData) -> None:
        self._buffer.append(event.text, event.end_line)

    # Comment, PI and declaration bodies never enter the buffer, so flushing
    # before them also covers flushing after them.
    def on_comment(self, event: Comment) -> None:
        self.flush()

    def on_processinginstruction(self, event: ProcessingInstruction) -> None:
        self.flush()

    def on_declaration(self, event: Declaration) -> None:
        self.flush()

    def on_starttag(self, event: StartTag) -> None:
        self.open_tag(event.name, event.line, event.column)

    def on_emptytagend(self, event: EmptyTagEnd) -> None:
        self.close_empty_tag(event.name, event.line, event.column)

    def on_endtag(self, event: EndTag) -> None:
        self.close_tag(event.name, event.line, event.column)

    # -- state machine ------------------------------------------------------------

    def flush(self) -> Indent:
        self._last_indent = self._buffer.flush(self._last_indent)
        return self._last_indent

    def open_tag(self, name: str, line: int, column: int) -> None:
        """Handle an opening tag whose name starts at 0-based ``column``."""
        found = self.flush()
        entry = ElementEntry.at(name, found)
        if self._stack:
            parent = self._stack[-1]
            # parent.expected_indent rather than parent.found_indent: a misplaced
            # parent must not make all of its children look misplaced too
            indent_diff = found.size - parent.expected_indent.size
            expected = parent.expected_indent.size + self._indent_size
            # checked before indent_diff: a child on the line of a corrected parent
            # is not reported again in the middle of that line (see DESIGN.md)
            if found.line_number == parent.found_indent.line_number:
                pass  # nested on the parent's line, any column is fine
            elif indent_diff != self._indent_size:
                self._report(line, column + 1 - OPEN_TAG_NAME_OFFSET, expected, found.size)
                entry = ElementEntry(name, found, Indent(found.line_number, expected))
        self._stack.append(entry)

    def close_tag(self, name: str, line: int, column: int) -> None:
        """Handle a closing tag whose name starts at 0-based ``column``."""
        found = self.flush()
        start_entry = self._pop(name, line, column)
        # a closing tag on the line of its opening tag is exempt
        if (
            found.line_number != start_entry.found_indent.line_number
            and found.size != start_entry.expected_indent.size
        ):
            self._report(
                line,
                column + 1 - CLOSE_TAG_NAME_OFFSET,
                start_entry.expected_indent.size,
                found.size,
            )

    def close_empty_tag(self, name: str, line: int, column: int) -> None:
        """Handle the ``/>`` of a self-closing tag; it always shares the opening tag's line."""
        self._pop(name, line, column)

    def finish(self) -> None:
        """Check that every opened element was closed at the end of the document."""
        if self._stack:
            entry = self._stack[-1]
            raise FormatException(
                f"Element {entry.name} opened around line {entry.found_indent.line_number} "
                f"is not closed at the end of the document"
            )

    def _pop(self, name: str, line: int, column: int) -> ElementEntry:
        if not self._stack:
            raise FormatException(
                f"Stack must not be empty when closing the element {name} "
                f"around line {line} and column {column + 1}"
            )
        return self._stack.pop()

    def _report(self, line: int, column: int, expected_size: int, found_size: int) -> None:
        op_value = expected_size - found_size
        length = abs(op_value)
        fix: Edit
        if op_value > 0:
            fix = Insert.repeat(self._indent_char, length)
        else:
            fix = Delete(length)
            # the whitespace to delete precedes the tag
            column -= length
        violation = Violation(
            resource=self._resource,
            location=Location(line=line, column=column),
            fix=fix,
        )
        self._violation_handler.handle(violation)
