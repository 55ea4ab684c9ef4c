"""Project configuration: which files to check and how they are indented."""

from __future__ import annotations

from collections.abc import Iterable
from fnmatch import fnmatchcase
from pathlib import PurePath

from pydantic import BaseModel, Field

from xmlindent.models.options import IndentOptions, IndentStyle

DEFAULT_INCLUDE = (
    "*.xml",
    "*.xsd",
    "*.xsl",
    "*.xslt",
    "*.wsdl",
    "*.svg",
    "*.xhtml",
    "*.pom",
)


def glob_match(path: PurePath, pattern: str) -> bool:
    """Match ``path`` against an editorconfig-like glob.

    A pattern without ``/`` matches the file name in any directory; otherwise
    it matches the whole relative path, ``*`` crossing directories and a
    leading ``**/`` also matching at the top level.
    """
    if "/" not in pattern:
        return fnmatchcase(path.name, pattern)
    posix = path.as_posix()
    if pattern.startswith("**/") and fnmatchcase(posix, pattern[3:]):
        return True
    return fnmatchcase(posix, pattern)


class IndentOverride(BaseModel):
    """Options applied to files matching one ``overrides`` glob."""

    indent_style: IndentStyle | None = Field(None, alias="indentStyle")
    indent_size: int | None = Field(None, ge=1, alias="indentSize")

    model_config = {"populate_by_name": True, "extra": "forbid"}


class ProjectConfig(BaseModel):
    """Contents of a ``.xmlindent.yaml`` file."""

    indent_style: IndentStyle = Field(IndentStyle.SPACE, alias="indentStyle")
    indent_size: int = Field(2, ge=1, alias="indentSize")
    include: list[str] = Field(default_factory=lambda: list(DEFAULT_INCLUDE))
    exclude: list[str] = []
    overrides: dict[str, IndentOverride] = {}

    model_config = {"populate_by_name": True, "extra": "forbid"}

    @classmethod
    def from_options(cls, options: IndentOptions) -> ProjectConfig:
        return cls(indent_style=options.indent_style, indent_size=options.indent_size)

    @property
    def base_options(self) -> IndentOptions:
        return IndentOptions(indent_style=self.indent_style, indent_size=self.indent_size)

    def options_for(self, path: PurePath) -> IndentOptions:
        """Base options with every matching override applied, later overrides winning."""
        options = self.base_options
        for pattern, override in self.overrides.items():
            if glob_match(path, pattern):
                options = options.merged(
                    indent_style=override.indent_style,
                    indent_size=override.indent_size,
                )
        return options

    def is_selected(self, path: PurePath) -> bool:
        if not any(glob_match(path, pattern) for pattern in self.include):
            return False
        return not any(glob_match(path, pattern) for pattern in self.exclude)

    def select(self, paths: Iterable[PurePath]) -> list[PurePath]:
        return [path for path in paths if self.is_selected(path)]
