from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .model import TaskFile
from ..errors import ConfigError, TaskError

_yaml = YAML(typ="safe")

DEFAULT_TASK_FILE = "inline-assets.yaml"


def load_task_file(path: Path) -> TaskFile:
    """
    Load and validate a YAML task file.

    Raises:
        TaskError: the file does not exist
        ConfigError: YAML syntax errors or schema violations
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise TaskError(f"task file not found: {path}") from None

    try:
        raw = _yaml.load(text) or {}
    except YAMLError as e:
        raise ConfigError(f"invalid YAML in {path}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"task file must be a mapping: {path}")

    try:
        return TaskFile.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f"invalid task file {path}: {e}") from e


__all__ = ["DEFAULT_TASK_FILE", "load_task_file"]
