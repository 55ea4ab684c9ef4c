"""Project configuration for xmlindent."""

from xmlindent.config.loader import ConfigLoader, SourceMap
from xmlindent.config.project import ProjectConfig, glob_match

__all__ = [
    "ConfigLoader",
    "ProjectConfig",
    "SourceMap",
    "glob_match",
]
