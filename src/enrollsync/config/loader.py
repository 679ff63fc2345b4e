# SPDX-License-Identifier: Apache-2.0
"""Centralized configuration loader with version validation."""

from __future__ import annotations

import os
import warnings
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import ValidationError

from .settings import CURRENT_CONFIG_VERSION, MIN_SUPPORTED_VERSION, EnrollSyncConfig

PathLike = Union[str, Path]


class ConfigVersionError(RuntimeError):
    """Error when configuration version is incompatible."""
    pass


def load_config(path: PathLike) -> EnrollSyncConfig:
    """Load and validate configuration from YAML file with version checking.

    Args:
        path: Path to YAML configuration file

    Returns:
        EnrollSyncConfig instance

    Raises:
        ConfigVersionError: If config version is missing or too old
        FileNotFoundError: If the YAML file doesn't exist
        ValueError: If the YAML is invalid or contains invalid configuration
    """
    yaml_path = Path(path)
    if not yaml_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    # Expand environment variables before parsing
    expanded_content = os.path.expandvars(yaml_path.read_text(encoding="utf-8"))

    try:
        cfg_dict = yaml.safe_load(expanded_content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in configuration file: {e}") from e

    if not isinstance(cfg_dict, dict):
        raise ValueError("YAML file must contain a dictionary at the root level")

    normalized_data = _normalize_yaml_keys(cfg_dict)
    _check_version(normalized_data)

    try:
        return EnrollSyncConfig(**normalized_data)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration in {path}: {e}") from e


def resolve_config(path: Optional[PathLike] = None) -> EnrollSyncConfig:
    """Load ``path`` when given, otherwise build the default configuration."""
    if path is None:
        return EnrollSyncConfig()
    return load_config(path)


def _check_version(data: Dict[str, Any]) -> None:
    ver = str(data.get("config_version", ""))
    if not ver:
        raise ConfigVersionError(
            "config_version missing. Add `config_version: \"1\"` to your YAML."
        )

    if not ver.isdigit() or int(ver) < int(MIN_SUPPORTED_VERSION):
        raise ConfigVersionError(
            f"Config version {ver} is not supported. "
            f"Minimum supported is {MIN_SUPPORTED_VERSION}."
        )

    if int(ver) > int(CURRENT_CONFIG_VERSION):
        warnings.warn(
            f"This build understands config_version {CURRENT_CONFIG_VERSION}, "
            f"but file is {ver}. Attempting best-effort parse.",
            UserWarning,
            stacklevel=3,
        )

    data["config_version"] = ver


def _normalize_yaml_keys(data: Dict[str, Any]) -> Dict[str, Any]:
    """Normalize YAML keys from kebab-case to snake_case."""
    return {str(key).replace("-", "_"): value for key, value in data.items()}
