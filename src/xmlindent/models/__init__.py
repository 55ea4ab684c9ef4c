"""Pydantic domain models for xmlindent."""

from xmlindent.models.location import Location, SourceSpan
from xmlindent.models.options import IndentOptions, IndentStyle
from xmlindent.models.resource import Resource
from xmlindent.models.violation import Violation, ViolationHandler

__all__ = [
    "IndentOptions",
    "IndentStyle",
    "Location",
    "Resource",
    "SourceSpan",
    "Violation",
    "ViolationHandler",
]
