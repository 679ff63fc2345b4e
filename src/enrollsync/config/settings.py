# SPDX-License-Identifier: Apache-2.0
"""Pydantic configuration model for EnrollSync."""

from __future__ import annotations

import logging
import os
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Configuration versioning constants
CURRENT_CONFIG_VERSION = "1"
MIN_SUPPORTED_VERSION = "1"

DEFAULT_DATABASE_PATH = "data/db/enrollsync.db"
DATABASE_PATH_ENV = "ENROLLSYNC_DB"


def default_database_path() -> str:
    """Database path from ``ENROLLSYNC_DB``, falling back to the built-in default."""
    return os.getenv(DATABASE_PATH_ENV, DEFAULT_DATABASE_PATH)


class EnrollSyncConfig(BaseModel):
    """Runtime configuration.

    Loaded from YAML with snake_case or kebab-case keys; unknown keys are
    rejected.
    """

    model_config = ConfigDict(extra="forbid")

    config_version: str = Field(
        default=CURRENT_CONFIG_VERSION, description="Configuration schema version"
    )
    database_path: str = Field(
        default_factory=default_database_path,
        description="SQLite database file shared by all bounded contexts",
        min_length=1,
    )
    log_level: str = Field(default="INFO", description="Root logging level")
    metrics_enabled: bool = Field(
        default=True, description="Subscribe Prometheus metric handlers to domain events"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()

    def merge_overrides(self, **overrides: Any) -> EnrollSyncConfig:
        """Create a new config with non-None field overrides applied."""
        current_data = self.to_dict()
        for key, value in overrides.items():
            if value is not None:
                current_data[key] = value
        return self.__class__(**current_data)
