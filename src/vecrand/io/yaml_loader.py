"""YAML run-config loader."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from vecrand.config.schema import RunConfig
from vecrand.utils.exceptions import ConfigError


def load_yaml(path: Path) -> Any:
    """Load and parse a YAML file.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    with open(path) as f:
        return yaml.safe_load(f)


def load_run_config(path: Path) -> RunConfig:
    """Load a run configuration with optional ``sampler``, ``draw`` and ``check`` sections.

    An empty file yields the defaults.

    Raises:
        ConfigError: If the file is not valid YAML or does not match the schema.
    """
    try:
        data = load_yaml(path)
    except yaml.YAMLError as e:
        raise ConfigError(f"{path}: invalid YAML: {e}") from e
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping at the top level")
    try:
        return RunConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"{path}: {e}") from e
