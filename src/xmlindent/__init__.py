"""xmlindent: indentation checking and correction for nested-element markup."""

__version__ = "0.1.0"
