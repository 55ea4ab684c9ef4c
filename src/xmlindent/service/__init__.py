"""Checking, formatting and reporting services."""

from xmlindent.service.checker import IndentationChecker, check_text, format_text
from xmlindent.service.handlers import DocumentHandler, FormattingHandler, ViolationCollector
from xmlindent.service.report import render_text

__all__ = [
    "DocumentHandler",
    "FormattingHandler",
    "IndentationChecker",
    "ViolationCollector",
    "check_text",
    "format_text",
    "render_text",
]
