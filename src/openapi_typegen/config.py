"""Generation options: defaults, caller overrides and YAML config files."""

from pathlib import Path

import yaml

from .errors import ConfigError
from .parser.base import GenerateOptions


def merge_options(overrides: GenerateOptions | dict | None = None) -> GenerateOptions:
    """Layer ``overrides`` over the defaults; caller values win.

    Raises pydantic.ValidationError for invalid values (e.g. ``indent: 0``).
    """
    if overrides is None:
        return GenerateOptions()
    if isinstance(overrides, GenerateOptions):
        overrides = overrides.model_dump(exclude_unset=True)
    merged = {**GenerateOptions().model_dump(), **overrides}
    return GenerateOptions.model_validate(merged)


def load_options(file_path: Path) -> dict:
    """Read an options mapping from a YAML (or JSON) file."""
    text = file_path.read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"{file_path}: not valid YAML ({e})") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{file_path}: expected a mapping of options")
    return data
