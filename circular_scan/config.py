"""YAML config loading for analysis runs."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from circular_scan.errors import ConfigError
from circular_scan.models import AnalysisConfig

DEFAULT_CONFIG_NAME = ".circular-scan.yaml"


def load_config_data(path: Path) -> dict[str, Any]:
    """Read a YAML mapping from *path*. An empty file gives ``{}``."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Could not read config {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must be a mapping, got {type(data).__name__}")
    return data


def load_config(
    project_root: Path,
    config_path: Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> AnalysisConfig:
    """Build an AnalysisConfig from file values plus explicit overrides.

    Without *config_path*, ``<project_root>/.circular-scan.yaml`` is used
    when present. Overrides whose value is None are ignored.
    """
    data: dict[str, Any] = {}
    if config_path is None:
        candidate = Path(project_root) / DEFAULT_CONFIG_NAME
        if candidate.is_file():
            config_path = candidate
    if config_path is not None:
        data.update(load_config_data(config_path))

    for key, value in (overrides or {}).items():
        if value is not None:
            data[key] = value
    data["project_root"] = Path(project_root)

    try:
        config = AnalysisConfig.from_dict(data)
    except TypeError as e:
        raise ConfigError(f"Invalid config values: {e}") from e
    validate_config(config)
    return config


def validate_config(config: AnalysisConfig) -> None:
    if not isinstance(config.workers, int) or isinstance(config.workers, bool):
        raise ConfigError(f"workers must be an integer, got {config.workers!r}")
    if config.max_depth is not None and (
        not isinstance(config.max_depth, int) or config.max_depth < 1
    ):
        raise ConfigError(f"max_depth must be a positive integer, got {config.max_depth!r}")
    if not isinstance(config.verbosity, int) or isinstance(config.verbosity, bool) or config.verbosity < 0:
        raise ConfigError(f"verbosity must be a non-negative integer, got {config.verbosity!r}")
