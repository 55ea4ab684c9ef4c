"""Source positions used by violations and configuration errors."""

from __future__ import annotations

from pydantic import BaseModel


class Location(BaseModel):
    """A character position in a document. Both ``line`` and ``column`` are 1-based."""

    line: int
    column: int

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


class SourceSpan(BaseModel):
    """Points to exact location in a YAML configuration file for error reporting."""

    file: str
    line: int
    column: int
    end_line: int | None = None
    end_column: int | None = None
