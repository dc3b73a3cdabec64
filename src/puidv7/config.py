"""
Configuration management for puidv7.

Loads and validates configuration from puidv7.toml files and PUIDV7_*
environment variables using Pydantic.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from puidv7.puid import validate_prefix

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "puidv7.toml"


class Settings(BaseSettings):
    """Main configuration for puidv7."""

    model_config = SettingsConfigDict(env_prefix="PUIDV7_")

    prefix: str = Field(
        default="", description="Default 3-letter prefix (empty = none)"
    )
    strict: bool = Field(
        default=False, description="Treat validation warnings as failures"
    )

    @field_validator("prefix")
    @classmethod
    def _check_prefix(cls, value: str) -> str:
        if value:
            validate_prefix(value)
        return value

    @classmethod
    def from_toml(cls, path: Path | str) -> Settings:
        """Load settings from a puidv7 TOML file.

        Values in the file take precedence over PUIDV7_* environment variables.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the file is not valid TOML or holds an invalid prefix
        """
        config_path = Path(path)
        if not config_path.is_file():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        logger.info(f"Loading puidv7 settings from {config_path}")
        data = tomllib.loads(config_path.read_text(encoding="utf-8"))
        return cls(**data)

    @classmethod
    def find_and_load(cls, start_dir: Path | None = None) -> Settings:
        """Load the nearest CONFIG_FILENAME at or above start_dir.

        Args:
            start_dir: First directory searched (default: current directory)

        Raises:
            FileNotFoundError: If no directory up to the root holds one
        """
        start = Path.cwd() if start_dir is None else Path(start_dir)
        resolved = start.resolve()

        for directory in (resolved, *resolved.parents):
            candidate = directory / CONFIG_FILENAME
            if candidate.is_file():
                return cls.from_toml(candidate)

        logger.debug(f"No {CONFIG_FILENAME} found above {start}")
        raise FileNotFoundError(
            f"No {CONFIG_FILENAME} found in {start} or parent directories."
        )

    def to_toml(self, path: Path | str) -> None:
        """
        Write configuration to TOML file.

        Args:
            path: Path to write puidv7.toml
        """
        config_path = Path(path)

        toml_content = f"""# puidv7 configuration

prefix = "{self.prefix}"
strict = {str(self.strict).lower()}
"""

        config_path.write_text(toml_content)
