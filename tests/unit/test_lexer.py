"""Tests for the markup lexer and listener dispatch."""

from __future__ import annotations

import pytest

from xmlindent.errors import DocumentSafetyError, MarkupSyntaxError
from xmlindent.parser import lexer as lexer_module
from xmlindent.parser.events import (
    CharData,
    Comment,
    Declaration,
    EmptyTagEnd,
    EndTag,
    ProcessingInstruction,
    StartTag,
)
from xmlindent.parser.lexer import MarkupLexer
from xmlindent.parser.lines import LineIndex
from xmlindent.parser.listener import MarkupListener


class TestLineIndex:
    def test_position_of_offsets(self) -> None:
        index = LineIndex("ab\ncd\r\nef")
        assert index.position(0) == (1, 0)
        assert index.position(4) == (2, 1)
        assert index.position(7) == (3, 0)
        assert index.line_count == 3

    def test_offset_is_one_based(self) -> None:
        index = LineIndex("ab\r\ncd")
        assert index.offset(1, 1) == 0
        assert index.offset(2, 2) == 5

    def test_lone_carriage_return_breaks_line(self) -> None:
        index = LineIndex("a\rb")
        assert index.position(2) == (2, 0)

    def test_offset_out_of_range(self) -> None:
        index = LineIndex("a\nb")
        with pytest.raises(ValueError):
            index.offset(3, 1)


class TestMarkupLexer:
    def test_declaration_text_and_tags(self, lexer: MarkupLexer) -> None:
        events = list(lexer.tokenize("<?xml version='1.0'?>\n<a>text &amp; more</a>"))
        assert events == [
            Declaration(text="<?xml version='1.0'?>", line=1, end_line=1),
            CharData(text="\n", line=1, end_line=2),
            StartTag(name="a", line=2, column=1),
            CharData(text="text &amp; more", line=2, end_line=2),
            EndTag(name="a", line=2, column=20),
        ]

    def test_self_closing_tag_with_tricky_attribute(self, lexer: MarkupLexer) -> None:
        events = list(lexer.tokenize('<a x="1>2"/>'))
        assert events == [
            StartTag(name="a", line=1, column=1),
            EmptyTagEnd(name="a", line=1, column=10),
        ]

    def test_attributes_spanning_lines(self, lexer: MarkupLexer) -> None:
        events = list(lexer.tokenize('<a\n   x="1"\n   y=\'2\'>\n  <b/>\n</a>'))
        assert events[0] == StartTag(name="a", line=1, column=1)
        assert events[1] == CharData(text="\n  ", line=3, end_line=4)
        assert events[2] == StartTag(name="b", line=4, column=3)

    def test_namespaced_names(self, lexer: MarkupLexer) -> None:
        events = list(lexer.tokenize("<ns:root><x.y-z/></ns:root>"))
        assert events[0] == StartTag(name="ns:root", line=1, column=1)
        assert events[1] == StartTag(name="x.y-z", line=1, column=10)
        assert events[3] == EndTag(name="ns:root", line=1, column=19)

    def test_crlf_line_breaks(self, lexer: MarkupLexer) -> None:
        events = list(lexer.tokenize("<a>\r\n  <b/>\r\n</a>"))
        assert events[1] == CharData(text="\r\n  ", line=1, end_line=2)
        assert events[2] == StartTag(name="b", line=2, column=3)
        assert events[5] == EndTag(name="a", line=3, column=2)

    def test_multiline_comment(self, lexer: MarkupLexer) -> None:
        events = list(lexer.tokenize("<!--\nx\n-->"))
        assert events == [Comment(text="\nx\n", line=1, end_line=3)]

    def test_processing_instruction(self, lexer: MarkupLexer) -> None:
        events = list(lexer.tokenize("<?pi some data?>"))
        assert events == [ProcessingInstruction(target="pi", data="some data", line=1, end_line=1)]

    def test_doctype_with_internal_subset(self, lexer: MarkupLexer) -> None:
        content = "<!DOCTYPE a [\n<!ELEMENT a (#PCDATA)>\n]>\n<a/>"
        events = list(lexer.tokenize(content))
        assert events[0] == Declaration(
            text="<!DOCTYPE a [\n<!ELEMENT a (#PCDATA)>\n]>", line=1, end_line=3
        )
        assert events[1] == CharData(text="\n", line=3, end_line=4)
        assert events[2] == StartTag(name="a", line=4, column=1)

    def test_cdata_is_character_data(self, lexer: MarkupLexer) -> None:
        events = list(lexer.tokenize("<a><![CDATA[<b>]]></a>"))
        assert events == [
            StartTag(name="a", line=1, column=1),
            CharData(text="<![CDATA[<b>]]>", line=1, end_line=1),
            EndTag(name="a", line=1, column=20),
        ]

    def test_trailing_text(self, lexer: MarkupLexer) -> None:
        events = list(lexer.tokenize("<a/>\n"))
        assert events[-1] == CharData(text="\n", line=1, end_line=2)

    def test_lexer_does_not_check_balance(self, lexer: MarkupLexer) -> None:
        events = list(lexer.tokenize("</a>"))
        assert events == [EndTag(name="a", line=1, column=2)]

    def test_unterminated_comment(self, lexer: MarkupLexer) -> None:
        with pytest.raises(MarkupSyntaxError, match="Unterminated comment") as exc_info:
            list(lexer.tokenize("<a><!-- oops"))
        assert exc_info.value.line == 1
        assert exc_info.value.column == 4

    def test_missing_element_name(self, lexer: MarkupLexer) -> None:
        with pytest.raises(MarkupSyntaxError, match="Expected an element name"):
            list(lexer.tokenize("<a>\n< b/>"))

    def test_unterminated_start_tag(self, lexer: MarkupLexer) -> None:
        with pytest.raises(MarkupSyntaxError, match="Unterminated start tag"):
            list(lexer.tokenize('<a x="1"'))

    def test_unterminated_attribute_value(self, lexer: MarkupLexer) -> None:
        with pytest.raises(MarkupSyntaxError, match="Unterminated attribute value"):
            list(lexer.tokenize('<a x="1>'))

    def test_garbage_in_end_tag(self, lexer: MarkupLexer) -> None:
        with pytest.raises(MarkupSyntaxError, match="Unexpected content in end tag"):
            list(lexer.tokenize("<a></a b>"))

    def test_oversized_document_rejected(
        self, lexer: MarkupLexer, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(lexer_module, "MAX_DOCUMENT_SIZE", 10)
        with pytest.raises(DocumentSafetyError, match="maximum size"):
            lexer.tokenize("<a>" + " " * 20 + "</a>")


class TestMarkupListener:
    def test_dispatch_routes_by_event_type(self, lexer: MarkupLexer) -> None:
        seen: list[str] = []

        class TagNames(MarkupListener):
            def on_starttag(self, event: StartTag) -> None:
                seen.append(event.name)

            def on_endtag(self, event: EndTag) -> None:
                seen.append("/" + event.name)

        TagNames().feed(lexer.tokenize("<!-- c --><a><b/></a>"))
        assert seen == ["a", "b", "/a"]

    def test_unhandled_events_are_ignored(self, lexer: MarkupLexer) -> None:
        MarkupListener().feed(lexer.tokenize("<?xml version='1.0'?><a>x</a>"))
