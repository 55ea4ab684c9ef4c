"""Indentation violations and the capability that receives them."""

from __future__ import annotations

from typing import Protocol

from pydantic import BaseModel, field_serializer

from xmlindent.format.edits import Edit
from xmlindent.models.location import Location
from xmlindent.models.resource import Resource


class Violation(BaseModel):
    """A located, fixable deviation from the expected indentation."""

    resource: Resource
    location: Location
    fix: Edit

    model_config = {"frozen": True}

    @property
    def message(self) -> str:
        return f"Incorrect indentation, expected fix: {self.fix.describe()}"

    @field_serializer("fix")
    def _serialize_fix(self, fix: Edit) -> dict[str, object]:
        return fix.to_dict()

    def __str__(self) -> str:
        return f"{self.resource}:{self.location}: {self.message}"


class ViolationHandler(Protocol):
    """Receives violations one by one, in document order."""

    def handle(self, violation: Violation) -> None: ...
