"""Configuration system: loads and validates YAML config files."""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path

import yaml

from . import DEFAULT_BUFFER_SIZE


@dataclass
class CatConfig:
    """Settings for a single invocation."""
    program_name: str = "cat"
    buffer_size: int = DEFAULT_BUFFER_SIZE
    error_exit_status: int = 1  # 0 keeps the old always-succeed behavior


def default_config() -> CatConfig:
    return CatConfig()


def load_config(path: str | Path) -> CatConfig:
    """Load settings from a YAML file.

    Keys missing from the file keep their defaults; an empty file yields the
    default configuration.

    Args:
        path: Path to the YAML config file.

    Returns:
        A CatConfig instance.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ValueError: If the YAML is not a mapping or contains unknown keys.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return default_config()

    if not isinstance(data, dict):
        raise ValueError("Config YAML must be a mapping at the top level.")

    known = {f.name for f in fields(CatConfig)}
    unknown = sorted(str(k) for k in data if k not in known)
    if unknown:
        raise ValueError(f"Unknown config key(s): {', '.join(unknown)}.")

    return CatConfig(**data)


def validate_config(config: CatConfig) -> list[str]:
    """Validate a loaded configuration.

    Returns a list of validation error messages. Empty list means valid.
    """
    errors: list[str] = []

    if not isinstance(config.program_name, str) or not config.program_name:
        errors.append("program_name is required and must not be empty.")

    # bool is an int subclass; reject it explicitly
    if (
        not isinstance(config.buffer_size, int)
        or isinstance(config.buffer_size, bool)
        or config.buffer_size <= 0
    ):
        errors.append(
            f"buffer_size must be a positive integer, got {config.buffer_size!r}."
        )

    status = config.error_exit_status
    if (
        not isinstance(status, int)
        or isinstance(status, bool)
        or not 0 <= status <= 255
    ):
        errors.append(
            f"error_exit_status must be an integer between 0 and 255, got {status!r}."
        )

    return errors
