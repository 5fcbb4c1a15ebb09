"""Settings for gotest2rdjsonl."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .errors import ConfigError

DEFAULT_BUF_LINES = 3
DEFAULT_LOG_LEVEL = "info"
LOG_LEVELS = ("debug", "info", "warning", "error")

ENV_PREFIX = "GOTEST2RDJSONL_"


@dataclass
class Settings:
    """Values that may come from a settings file."""

    buf_lines: int = DEFAULT_BUF_LINES
    log_level: str = DEFAULT_LOG_LEVEL


def validate_buf_lines(value) -> list[str]:
    errors = []
    if isinstance(value, bool) or not isinstance(value, int):
        errors.append(f"buf_lines must be an integer: {value!r}")
    elif value < 0:
        errors.append(f"buf_lines must be non-negative: {value}")
    return errors


def validate_log_level(value) -> list[str]:
    if not isinstance(value, str) or value.lower() not in LOG_LEVELS:
        return [f"log_level must be one of {', '.join(LOG_LEVELS)}: {value!r}"]
    return []


def load_settings(path: Path) -> Settings:
    """Read settings from a YAML mapping.

    Example:
        buf_lines: 5
        log_level: debug

    Unknown keys are ignored.
    """
    if not path.is_file():
        raise ConfigError(f"Settings file not found: {path}")
    yaml = YAML(typ="safe")
    try:
        data = yaml.load(path.read_text())
    except YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Settings file must contain a mapping: {path}")

    settings = Settings()
    errors = []
    if "buf_lines" in data:
        errors.extend(validate_buf_lines(data["buf_lines"]))
        settings.buf_lines = data["buf_lines"]
    if "log_level" in data:
        errors.extend(validate_log_level(data["log_level"]))
        settings.log_level = str(data["log_level"]).lower()
    if errors:
        raise ConfigError(f"{path}: " + "; ".join(errors))
    return settings
