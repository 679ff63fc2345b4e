# SPDX-License-Identifier: Apache-2.0
"""Configuration management for EnrollSync."""

from .loader import ConfigVersionError, load_config, resolve_config
from .settings import CURRENT_CONFIG_VERSION, MIN_SUPPORTED_VERSION, EnrollSyncConfig

__all__ = [
    "EnrollSyncConfig",
    "CURRENT_CONFIG_VERSION",
    "MIN_SUPPORTED_VERSION",
    "load_config",
    "resolve_config",
    "ConfigVersionError",
]
