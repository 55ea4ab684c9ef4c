"""YAML loader for project configuration with position tracking for error reporting."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap, CommentedSeq
from ruamel.yaml.error import YAMLError

from xmlindent.config.project import ProjectConfig
from xmlindent.errors import ConfigError, DocumentSafetyError
from xmlindent.models.location import SourceSpan
from xmlindent.models.options import IndentOptions
from xmlindent.parser.lexer import MAX_DOCUMENT_SIZE


@dataclass
class SourceMap:
    """Maps YAML key paths to their source positions for error reporting."""

    _positions: dict[str, SourceSpan] = field(default_factory=dict)

    def add(self, path: str, span: SourceSpan) -> None:
        self._positions[path] = span

    def get(self, path: str) -> SourceSpan | None:
        return self._positions.get(path)

    def nearest(self, path: str) -> SourceSpan | None:
        """The span of ``path`` or of its closest recorded ancestor."""
        while path:
            span = self._positions.get(path)
            if span is not None:
                return span
            path = path.rpartition(".")[0]
        return None

    @property
    def paths(self) -> list[str]:
        return list(self._positions.keys())


class ConfigLoader:
    """Loads ``.xmlindent.yaml`` files into :class:`ProjectConfig`.

    Uses ruamel.yaml which preserves line/column info on every parsed node,
    so that configuration errors point at the offending key.
    """

    def __init__(self) -> None:
        self._yaml = YAML()

    def load(self, path: Path, defaults: IndentOptions | None = None) -> ProjectConfig:
        """Load a configuration file."""
        with path.open("r", encoding="utf-8") as handle:
            content = handle.read()
        return self.load_string(content, str(path), defaults)

    def load_string(
        self,
        content: str,
        filename: str = "<string>",
        defaults: IndentOptions | None = None,
    ) -> ProjectConfig:
        """Load configuration from a string.

        Indentation keys missing from the file are taken from ``defaults``.
        """
        if len(content) > MAX_DOCUMENT_SIZE:
            raise DocumentSafetyError(
                f"Configuration file {filename} exceeds maximum size "
                f"({len(content):,} chars > {MAX_DOCUMENT_SIZE:,} limit)"
            )
        try:
            data = self._yaml.load(content)
        except YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {filename}: {exc}") from exc

        if data is None:
            data = CommentedMap()
        if not isinstance(data, CommentedMap):
            raise ConfigError(
                f"Configuration in {filename} must be a mapping",
                span=SourceSpan(file=filename, line=1, column=1),
            )

        source_map = SourceMap()
        self._extract_positions(data, filename, "", source_map)
        try:
            config = ProjectConfig.model_validate(self._to_plain_value(data))
        except ValidationError as exc:
            error = exc.errors()[0]
            key_path = ".".join(str(part) for part in error["loc"])
            raise ConfigError(
                f"{key_path}: {error['msg']}", span=source_map.nearest(key_path)
            ) from exc

        if defaults is not None:
            unset = {
                name: getattr(defaults, name)
                for name in ("indent_style", "indent_size")
                if name not in config.model_fields_set
            }
            config = config.model_copy(update=unset)
        return config

    def _extract_positions(
        self,
        data: Any,
        filename: str,
        prefix: str,
        source_map: SourceMap,
    ) -> None:
        """Recursively extract source positions from ruamel.yaml nodes."""
        if isinstance(data, CommentedMap):
            for key in data:
                key_path = f"{prefix}.{key}" if prefix else str(key)
                try:
                    line, col = data.lc.key(key)
                    source_map.add(
                        key_path,
                        SourceSpan(file=filename, line=line + 1, column=col + 1),
                    )
                except (AttributeError, KeyError, TypeError):
                    pass
                self._extract_positions(data[key], filename, key_path, source_map)
        elif isinstance(data, CommentedSeq):
            for i, item in enumerate(data):
                item_path = f"{prefix}.{i}"
                try:
                    line, col = data.lc.item(i)
                    source_map.add(
                        item_path,
                        SourceSpan(file=filename, line=line + 1, column=col + 1),
                    )
                except (AttributeError, KeyError, TypeError):
                    pass
                self._extract_positions(item, filename, item_path, source_map)

    def _to_plain_value(self, data: Any) -> Any:
        """Convert ruamel.yaml CommentedMap/Seq to plain Python dict/list."""
        if isinstance(data, dict):
            return {str(k): self._to_plain_value(v) for k, v in data.items()}
        if isinstance(data, list):
            return [self._to_plain_value(item) for item in data]
        return data
