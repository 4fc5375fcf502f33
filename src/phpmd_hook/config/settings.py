# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Runtime settings for a single hook invocation."""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..constants import BINARY_SEGMENTS, CONFIGURATION_FILENAME, ROOT_ENV_VAR
from ..paths import binary_directory, configuration_path


def default_root() -> Path:
    """Return the project root from ``PHPMD_HOOK_ROOT`` or the working directory."""

    env_value = os.environ.get(ROOT_ENV_VAR)
    if env_value:
        return Path(env_value).expanduser()
    return Path.cwd()


class HookSettings(BaseModel):
    """Locations and presentation preferences used by the hook."""

    model_config = ConfigDict(validate_assignment=True)

    root: Path = Field(default_factory=default_root)
    config_filename: str = CONFIGURATION_FILENAME
    binary_segments: tuple[str, ...] = BINARY_SEGMENTS
    emoji: bool = True
    color: bool = True
    debug: bool = False

    @field_validator("config_filename")
    @classmethod
    def _validate_filename(cls, value: str) -> str:
        """Reject empty configuration filenames."""

        if not value.strip():
            raise ValueError("config_filename must not be empty")
        return value

    @property
    def configuration_path(self) -> Path:
        """Return the absolute path of the configuration file."""

        return configuration_path(self.root, self.config_filename)

    @property
    def binary_directory(self) -> Path:
        """Return the absolute directory expected to hold the PHPMD executable."""

        return binary_directory(self.root, self.binary_segments)


__all__ = ["HookSettings", "default_root"]
