"""Violation handlers: collect violations for reporting, or apply their fixes."""

from __future__ import annotations

import logging
from typing import Protocol

from xmlindent.errors import ViolationsFoundError
from xmlindent.format.document import EditableDocument
from xmlindent.models.resource import Resource
from xmlindent.models.violation import Violation, ViolationHandler

check_logger = logging.getLogger("xmlindent.check")
format_logger = logging.getLogger("xmlindent.format")


class DocumentHandler(ViolationHandler, Protocol):
    """A :class:`ViolationHandler` notified as a batch of documents is processed."""

    def start_files(self) -> None: ...

    def start_file(self, document: EditableDocument) -> None: ...

    def end_file(self) -> None: ...

    def end_files(self) -> None: ...


class ViolationCollector:
    """Collects violations per resource for a report."""

    def __init__(self, fail_on_violation: bool = False) -> None:
        self._fail_on_violation = fail_on_violation
        self._violations: dict[Resource, list[Violation]] = {}
        self._current: EditableDocument | None = None

    @property
    def violations(self) -> dict[Resource, list[Violation]]:
        """Violations keyed by resource; resources without violations have no entry."""
        return self._violations

    @property
    def total(self) -> int:
        return sum(len(found) for found in self._violations.values())

    def start_files(self) -> None:
        self._violations = {}

    def start_file(self, document: EditableDocument) -> None:
        self._current = document

    def handle(self, violation: Violation) -> None:
        self._violations.setdefault(violation.resource, []).append(violation)
        check_logger.debug("%s", violation)

    def end_file(self) -> None:
        if self._current is not None:
            found = self._violations.get(self._current.resource, [])
            check_logger.debug("Checked %s: %d violation(s)", self._current, len(found))
        self._current = None

    def end_files(self) -> None:
        if self._fail_on_violation and self._violations:
            raise ViolationsFoundError(self.total, len(self._violations))


class FormattingHandler:
    """Applies the fix of every violation to the document it was found in."""

    def __init__(self, write: bool = True, backup: bool = False) -> None:
        self._write = write
        self._backup = backup
        self._document: EditableDocument | None = None
        self._pending: list[Violation] = []
        self._fixed: list[EditableDocument] = []

    @property
    def fixed_documents(self) -> list[EditableDocument]:
        return list(self._fixed)

    def start_files(self) -> None:
        self._fixed = []

    def start_file(self, document: EditableDocument) -> None:
        self._document = document
        self._pending = []

    def handle(self, violation: Violation) -> None:
        if self._document is None:
            raise RuntimeError("FormattingHandler.handle() called outside start_file()/end_file()")
        self._pending.append(violation)

    def end_file(self) -> None:
        document = self._document
        if document is None:
            return
        applied = 0
        # violations arrive in document order; applying them backwards keeps
        # the locations of the remaining ones valid
        for violation in reversed(self._pending):
            if not document.within_indentation(violation.location, violation.fix):
                format_logger.warning(
                    "Not fixing %s: the edit would change content, not indentation",
                    violation,
                )
                continue
            document.apply(violation.location, violation.fix)
            applied += 1
        if document.changed:
            self._fixed.append(document)
            format_logger.info("Fixed %d violation(s) in %s", applied, document)
            if self._write:
                document.save(backup=self._backup)
        self._document = None
        self._pending = []

    def end_files(self) -> None:
        format_logger.debug("Formatted %d file(s)", len(self._fixed))
