"""Shared test fixtures for xmlindent."""

from __future__ import annotations

from pathlib import Path

import pytest

from xmlindent.format.document import EditableDocument
from xmlindent.models.options import IndentOptions, IndentStyle
from xmlindent.models.violation import Violation
from xmlindent.parser.lexer import MarkupLexer
from xmlindent.service.checker import IndentationChecker

FIXTURES_DIR = Path(__file__).parent / "fixtures"
POM_GOOD = FIXTURES_DIR / "pom_good.xml"
POM_BAD = FIXTURES_DIR / "pom_bad.xml"
POM_BAD_FIXED = FIXTURES_DIR / "pom_bad_fixed.xml"


class RecordingHandler:
    """A ViolationHandler that keeps everything it receives."""

    def __init__(self) -> None:
        self.violations: list[Violation] = []

    def handle(self, violation: Violation) -> None:
        self.violations.append(violation)


@pytest.fixture
def lexer() -> MarkupLexer:
    return MarkupLexer()


@pytest.fixture
def checker() -> IndentationChecker:
    return IndentationChecker()


@pytest.fixture
def options() -> IndentOptions:
    return IndentOptions()


@pytest.fixture
def tab_options() -> IndentOptions:
    return IndentOptions(indent_style=IndentStyle.TAB, indent_size=1)


@pytest.fixture
def recorder() -> RecordingHandler:
    return RecordingHandler()


@pytest.fixture
def string_document() -> EditableDocument:
    return EditableDocument.from_string("<a>\n<b>\n</b>\n</a>\n")
