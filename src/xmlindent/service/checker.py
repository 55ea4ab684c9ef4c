"""Drives the markup lexer and the indentation validator over documents."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from xmlindent.config.project import ProjectConfig
from xmlindent.format.document import EditableDocument
from xmlindent.models.options import IndentOptions
from xmlindent.models.violation import Violation, ViolationHandler
from xmlindent.parser.lexer import MarkupLexer
from xmlindent.service.handlers import DocumentHandler, FormattingHandler, ViolationCollector
from xmlindent.validator.indentation import IndentationValidator

logger = logging.getLogger("xmlindent.check")


class IndentationChecker:
    """Checks documents: markup events → IndentationValidator → handler."""

    def __init__(self, lexer: MarkupLexer | None = None) -> None:
        self._lexer = lexer or MarkupLexer()

    def process(
        self,
        document: EditableDocument,
        options: IndentOptions,
        handler: ViolationHandler,
    ) -> None:
        """Check one document, reporting its violations to ``handler``."""
        validator = IndentationValidator(document.resource, options, handler)
        validator.feed(self._lexer.tokenize(document.as_string()))
        validator.finish()

    def check_paths(
        self,
        paths: Iterable[Path],
        config: ProjectConfig,
        handler: DocumentHandler,
        root: Path | None = None,
        encoding: str = "utf-8",
        overrides: dict[str, Any] | None = None,
    ) -> int:
        """Check several files, running the handler's lifecycle around them.

        Per-file options come from ``config``, matched against each path
        relative to ``root`` when it lies below it. Non-``None`` ``overrides``
        (e.g. command line options) win over everything the configuration says.
        Returns the number of files processed.
        """
        count = 0
        handler.start_files()
        for path in paths:
            options = config.options_for(relative_to_root(path, root))
            if overrides:
                options = options.merged(**overrides)
            logger.debug(
                "Checking %s (indent_style=%s, indent_size=%d)",
                path, options.indent_style, options.indent_size,
            )
            document = EditableDocument.load(path, encoding)
            handler.start_file(document)
            self.process(document, options, handler)
            handler.end_file()
            count += 1
        handler.end_files()
        return count


def relative_to_root(path: Path, root: Path | None) -> Path:
    if root is None:
        return path
    try:
        return path.resolve().relative_to(root.resolve())
    except ValueError:
        return path


def check_text(text: str, options: IndentOptions | None = None) -> list[Violation]:
    """Return the violations of an in-memory document, in document order."""
    document = EditableDocument.from_string(text)
    collector = ViolationCollector()
    collector.start_files()
    collector.start_file(document)
    IndentationChecker().process(document, options or IndentOptions(), collector)
    collector.end_file()
    return collector.violations.get(document.resource, [])


def format_text(text: str, options: IndentOptions | None = None) -> str:
    """Return ``text`` with every indentation violation fixed."""
    document = EditableDocument.from_string(text)
    formatter = FormattingHandler(write=False)
    formatter.start_files()
    formatter.start_file(document)
    IndentationChecker().process(document, options or IndentOptions(), formatter)
    formatter.end_file()
    formatter.end_files()
    return document.as_string()
