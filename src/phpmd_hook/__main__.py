# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Allow ``python -m phpmd_hook`` to run the hook CLI."""

from __future__ import annotations

from .cli import app

if __name__ == "__main__":  # pragma: no cover - module execution
    app()
