"""Markup tokenizer producing positioned events for indentation checking."""

from __future__ import annotations

import re
from collections.abc import Iterator

from xmlindent.errors import DocumentSafetyError, MarkupSyntaxError
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
from xmlindent.parser.lines import LineIndex

# ---------------------------------------------------------------------------
# Safety limits
# ---------------------------------------------------------------------------

MAX_DOCUMENT_SIZE = 5_000_000  # 5M characters

# XML names: a letter, underscore or colon followed by name characters.
_NAME_RE = re.compile(r"(?:[^\W\d]|:)[\w.:\-]*")


class MarkupLexer:
    """Splits nested-element markup into :mod:`xmlindent.parser.events`.

    The lexer only tokenizes. It does not check that tags are balanced or
    that names match; the consumer decides what an inconsistent sequence
    means. Entity and character references as well as CDATA sections are
    reported as character data.
    """

    def tokenize(self, content: str) -> Iterator[Event]:
        if len(content) > MAX_DOCUMENT_SIZE:
            raise DocumentSafetyError(
                f"Document exceeds maximum size "
                f"({len(content):,} chars > {MAX_DOCUMENT_SIZE:,} limit)"
            )
        return self._events(content, LineIndex(content))

    def _events(self, content: str, lines: LineIndex) -> Iterator[Event]:
        pos = 0
        end = len(content)
        while pos < end:
            lt = content.find("<", pos)
            if lt == -1:
                lt = end
            if lt > pos:
                yield CharData(
                    text=content[pos:lt],
                    line=lines.line_of(pos),
                    end_line=lines.line_of(lt),
                )
                pos = lt
                continue

            if content.startswith("<!--", pos):
                close = self._find(content, "-->", pos + 4, "Unterminated comment", pos, lines)
                stop = close + 3
                yield Comment(
                    text=content[pos + 4 : close],
                    line=lines.line_of(pos),
                    end_line=lines.line_of(stop),
                )
            elif content.startswith("<![CDATA[", pos):
                close = self._find(content, "]]>", pos + 9, "Unterminated CDATA section", pos, lines)
                stop = close + 3
                yield CharData(
                    text=content[pos:stop],
                    line=lines.line_of(pos),
                    end_line=lines.line_of(stop),
                )
            elif content.startswith("<?", pos):
                close = self._find(
                    content, "?>", pos + 2, "Unterminated processing instruction", pos, lines
                )
                stop = close + 2
                target = _NAME_RE.match(content, pos + 2)
                if target is None:
                    raise self._error("Processing instruction without a target", pos, lines)
                if target.group() == "xml":
                    yield Declaration(
                        text=content[pos:stop],
                        line=lines.line_of(pos),
                        end_line=lines.line_of(stop),
                    )
                else:
                    yield ProcessingInstruction(
                        target=target.group(),
                        data=content[target.end() : close].strip(),
                        line=lines.line_of(pos),
                        end_line=lines.line_of(stop),
                    )
            elif content.startswith("<!", pos):
                stop = self._declaration_end(content, pos, lines)
                yield Declaration(
                    text=content[pos:stop],
                    line=lines.line_of(pos),
                    end_line=lines.line_of(stop),
                )
            elif content.startswith("</", pos):
                name = _NAME_RE.match(content, pos + 2)
                if name is None:
                    raise self._error("Expected an element name after '</'", pos, lines)
                line, column = lines.position(name.start())
                yield EndTag(name=name.group(), line=line, column=column)
                close = self._find(content, ">", name.end(), "Unterminated end tag", pos, lines)
                if content[name.end() : close].strip():
                    raise self._error(
                        f"Unexpected content in end tag of '{name.group()}'", name.end(), lines
                    )
                stop = close + 1
            else:
                name = _NAME_RE.match(content, pos + 1)
                if name is None:
                    raise self._error("Expected an element name after '<'", pos, lines)
                line, column = lines.position(name.start())
                yield StartTag(name=name.group(), line=line, column=column)
                close, empty = self._tag_end(content, name.end(), pos, lines)
                if empty:
                    line, column = lines.position(close)
                    yield EmptyTagEnd(name=name.group(), line=line, column=column)
                    stop = close + 2
                else:
                    stop = close + 1
            pos = stop

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _error(message: str, offset: int, lines: LineIndex) -> MarkupSyntaxError:
        line, column = lines.position(offset)
        return MarkupSyntaxError(message, line, column + 1)

    def _find(
        self, content: str, needle: str, start: int, message: str, origin: int, lines: LineIndex
    ) -> int:
        index = content.find(needle, start)
        if index == -1:
            raise self._error(message, origin, lines)
        return index

    def _tag_end(self, content: str, start: int, origin: int, lines: LineIndex) -> tuple[int, bool]:
        """Skip attributes; return the offset of ``>`` or ``/>`` and whether the tag is empty."""
        i = start
        end = len(content)
        while i < end:
            ch = content[i]
            if ch == '"' or ch == "'":
                close = content.find(ch, i + 1)
                if close == -1:
                    raise self._error("Unterminated attribute value", i, lines)
                i = close + 1
            elif ch == ">":
                return i, False
            elif ch == "/" and content.startswith("/>", i):
                return i, True
            elif ch == "<":
                raise self._error("Unexpected '<' inside a tag", i, lines)
            else:
                i += 1
        raise self._error("Unterminated start tag", origin, lines)

    def _declaration_end(self, content: str, start: int, lines: LineIndex) -> int:
        """Find the end of a ``<!...>`` declaration, skipping an internal subset."""
        depth = 0
        quote: str | None = None
        for i in range(start + 2, len(content)):
            ch = content[i]
            if quote is not None:
                if ch == quote:
                    quote = None
            elif ch == '"' or ch == "'":
                quote = ch
            elif ch == "[":
                depth += 1
            elif ch == "]":
                depth -= 1
            elif ch == ">" and depth <= 0:
                return i + 1
        raise self._error("Unterminated declaration", start, lines)
