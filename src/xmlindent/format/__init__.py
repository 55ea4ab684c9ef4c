"""Text edits and the document buffer they are applied to."""

from xmlindent.format.edits import Delete, Edit, Insert

__all__ = [
    "Delete",
    "Edit",
    "Insert",
]
