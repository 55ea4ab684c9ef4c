"""A mutable document buffer that edits are applied to."""

from __future__ import annotations

from pathlib import Path

from xmlindent.format.edits import INDENT_CHARS, Delete, Edit
from xmlindent.models.location import Location
from xmlindent.models.resource import Resource
from xmlindent.parser.lines import LineIndex


class EditableDocument:
    """The text of a :class:`Resource` that can be modified in place.

    Locations are resolved against the current text, so edits must be
    applied in reverse document order to keep earlier locations valid.
    """

    def __init__(self, resource: Resource, text: str) -> None:
        self._resource = resource
        self._original = text
        self._text = text
        self._lines: LineIndex | None = None

    @classmethod
    def load(cls, path: Path, encoding: str = "utf-8") -> EditableDocument:
        resource = Resource(path=path, encoding=encoding)
        return cls(resource, resource.read_text())

    @classmethod
    def from_string(cls, text: str, name: str = "<string>") -> EditableDocument:
        return cls(Resource(path=Path(name)), text)

    @property
    def resource(self) -> Resource:
        return self._resource

    @property
    def changed(self) -> bool:
        return self._text != self._original

    def as_string(self) -> str:
        return self._text

    def offset(self, location: Location) -> int:
        if self._lines is None:
            self._lines = LineIndex(self._text)
        return self._lines.offset(location.line, location.column)

    def within_indentation(self, location: Location, edit: Edit) -> bool:
        """Whether ``edit`` at ``location`` only touches the leading whitespace of its line.

        Text before a tag on the same line leaves the validator measuring against
        an older indent, and the fix it proposes there would land inside content.
        """
        start = self.offset(Location(line=location.line, column=1))
        offset = self.offset(location)
        if self._text[start:offset].strip(INDENT_CHARS):
            return False
        if isinstance(edit, Delete):
            removed = self._text[offset : offset + edit.length]
            return len(removed) == edit.length and not removed.strip(INDENT_CHARS)
        return True

    def apply(self, location: Location, edit: Edit) -> None:
        self._text = edit.apply(self._text, self.offset(location))
        self._lines = None

    def save(self, backup: bool = False) -> None:
        """Write the current text back to the resource, optionally keeping a ``.bak`` copy."""
        path = self._resource.path
        encoding = self._resource.encoding
        if backup:
            backup_path = path.with_name(path.name + ".bak")
            with backup_path.open("w", encoding=encoding, newline="") as handle:
                handle.write(self._original)
        with path.open("w", encoding=encoding, newline="") as handle:
            handle.write(self._text)
        self._original = self._text

    def __str__(self) -> str:
        return str(self._resource)
