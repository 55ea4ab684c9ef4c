"""Per-file indentation options."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class IndentStyle(StrEnum):
    SPACE = "space"
    TAB = "tab"

    @property
    def indent_char(self) -> str:
        return "\t" if self is IndentStyle.TAB else " "


class IndentOptions(BaseModel):
    """How a single document is expected to be indented."""

    indent_style: IndentStyle = Field(IndentStyle.SPACE, alias="indentStyle")
    indent_size: int = Field(2, ge=1, alias="indentSize")

    model_config = {"populate_by_name": True, "frozen": True, "extra": "forbid"}

    @property
    def indent_char(self) -> str:
        return self.indent_style.indent_char

    def merged(self, **overrides: Any) -> IndentOptions:
        """Return a validated copy with the non-``None`` overrides applied."""
        values = self.model_dump()
        values.update({k: v for k, v in overrides.items() if v is not None})
        return IndentOptions.model_validate(values)
