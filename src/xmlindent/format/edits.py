"""Immutable text edits that correct a single violation."""

from __future__ import annotations

from dataclasses import dataclass

_CHAR_NAMES = {" ": "space", "\t": "tab"}

INDENT_CHARS = " \t"


@dataclass(frozen=True)
class Insert:
    """Insert ``text`` before the character at a location."""

    text: str

    @classmethod
    def repeat(cls, char: str, count: int) -> Insert:
        """An insert of ``count`` copies of ``char``."""
        if len(char) != 1:
            raise ValueError(f"Expected a single fill character, got {char!r}")
        if count <= 0:
            raise ValueError(f"Insert count must be positive, got {count}")
        return cls(text=char * count)

    @property
    def kind(self) -> str:
        return "insert"

    def apply(self, text: str, offset: int) -> str:
        return text[:offset] + self.text + text[offset:]

    def describe(self) -> str:
        count = len(self.text)
        name = _CHAR_NAMES.get(self.text[:1], repr(self.text[:1]))
        return f"insert {count} {name}{'s' if count != 1 else ''}"

    def to_dict(self) -> dict[str, object]:
        return {"kind": self.kind, "text": self.text, "count": len(self.text)}


@dataclass(frozen=True)
class Delete:
    """Delete ``length`` spaces or tabs starting at a location."""

    length: int

    def __post_init__(self) -> None:
        if self.length <= 0:
            raise ValueError(f"Delete length must be positive, got {self.length}")

    @property
    def kind(self) -> str:
        return "delete"

    def apply(self, text: str, offset: int) -> str:
        if offset + self.length > len(text):
            raise ValueError(
                f"Cannot delete {self.length} character(s) at offset {offset}: "
                f"text has only {len(text)}"
            )
        removed = text[offset : offset + self.length]
        if removed.strip(INDENT_CHARS):
            raise ValueError(
                f"Refusing to delete {removed!r} at offset {offset}: not indentation"
            )
        return text[:offset] + text[offset + self.length :]

    def describe(self) -> str:
        return f"delete {self.length} character{'s' if self.length != 1 else ''}"

    def to_dict(self) -> dict[str, object]:
        return {"kind": self.kind, "count": self.length}


Edit = Insert | Delete
