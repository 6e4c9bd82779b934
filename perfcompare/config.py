"""Configuration file support for perfcompare."""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from perfcompare.exceptions import ConfigNotFoundError, ConfigValidationError

DEFAULT_CONFIG_FILENAME = "perfcompare.yaml"


class CompareConfig(BaseModel):
    """Defaults for the compare command.

    Attributes:
        format: Report format (text, json, markdown)
        output: Path the report is written to instead of stdout
        quiet: Suppress diagnostics for skipped measurement lines
        title: Heading used by the markdown report
    """

    model_config = ConfigDict(extra="forbid")

    format: Literal["text", "json", "markdown"] = "text"
    output: Optional[str] = None
    quiet: bool = False
    title: str = Field(default="Performance Comparison", min_length=1)

    @field_validator("output")
    @classmethod
    def validate_output(cls, v: Optional[str]) -> Optional[str]:
        """Treat an empty output path as unset."""
        if v is not None and not v.strip():
            return None
        return v


def load_config(
    path: Union[Path, str, None] = None, search_dir: Union[Path, str, None] = None
) -> CompareConfig:
    """Load configuration from a YAML file.

    An explicit path must exist. Without one, ``perfcompare.yaml`` in
    ``search_dir`` (default: the working directory) is used if present,
    otherwise defaults apply.

    Raises:
        ConfigNotFoundError: If an explicit path does not exist
        ConfigValidationError: If the file is not valid YAML or fails validation
    """
    if path is not None:
        config_path = Path(path)
        if not config_path.is_file():
            raise ConfigNotFoundError(f"Config file not found: {config_path}")
    else:
        config_path = Path(search_dir or Path.cwd()) / DEFAULT_CONFIG_FILENAME
        if not config_path.is_file():
            return CompareConfig()

    try:
        raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as e:
        raise ConfigValidationError(f"{config_path} is not valid UTF-8: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigValidationError(f"Invalid YAML in {config_path}: {e}") from e

    if raw is None:
        return CompareConfig()
    if not isinstance(raw, dict):
        raise ConfigValidationError(f"{config_path} must contain a mapping")

    try:
        return CompareConfig(**raw)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid config {config_path}:\n{e}") from e
