"""Identity of a checked file."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel


class Resource(BaseModel):
    """A file together with the encoding used to read it.

    Violations refer to a resource only for identification; equality and
    hashing are structural.
    """

    path: Path
    encoding: str = "utf-8"

    model_config = {"frozen": True}

    def read_text(self) -> str:
        """Read the whole file, keeping its line breaks untranslated."""
        with self.path.open("r", encoding=self.encoding, newline="") as handle:
            return handle.read()

    def __str__(self) -> str:
        return str(self.path)
