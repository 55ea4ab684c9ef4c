"""Shared settings loaded from environment / .env file."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from xmlindent.models.options import IndentOptions, IndentStyle


class Settings(BaseSettings):
    """Configuration for the xmlindent command line.

    Values are read from ``XMLINDENT_``-prefixed environment variables and
    from a ``.env`` file in the working directory. A project configuration
    file, when present, takes precedence over the indentation defaults here.
    """

    model_config = SettingsConfigDict(
        env_prefix="XMLINDENT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"

    # Indentation defaults
    indent_style: IndentStyle = IndentStyle.SPACE
    indent_size: int = Field(2, ge=1)

    # Files
    charset: str = "utf-8"
    config_file: str = ".xmlindent.yaml"

    def indent_options(self) -> IndentOptions:
        return IndentOptions(indent_style=self.indent_style, indent_size=self.indent_size)
