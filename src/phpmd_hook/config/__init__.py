# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration loading for the PHPMD hook action."""

from __future__ import annotations

from .document import ConfigDocument, ConfigElement
from .models import PhpMdOptions
from .settings import HookSettings, default_root

__all__ = [
    "ConfigDocument",
    "ConfigElement",
    "HookSettings",
    "PhpMdOptions",
    "default_root",
]
