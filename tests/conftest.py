# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import os
import stat
from collections.abc import Callable
from pathlib import Path

import pytest

MINIMAL_CONFIGURATION = """<?xml version="1.0"?>
<configuration>
    <source><path>src</path></source>
    <output mode="text"/>
</configuration>
"""


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Return a helper writing ``phpmd.xml`` into ``tmp_path``."""

    def _write(body: str) -> Path:
        path = tmp_path / "phpmd.xml"
        path.write_text(body, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def minimal_config(write_config: Callable[[str], Path]) -> Path:
    """Write the smallest valid configuration and return its path."""

    return write_config(MINIMAL_CONFIGURATION)


@pytest.fixture
def fake_phpmd(tmp_path: Path) -> Callable[[str, int], Path]:
    """Return a helper installing a shell script at ``vendor/bin/phpmd``.

    The script echoes its arguments, one per line, followed by ``message`` and
    exits with ``status``.
    """

    if os.name == "nt":
        pytest.skip("shell script analyzer requires a POSIX host")

    def _install(message: str, status: int) -> Path:
        binary = tmp_path / "vendor" / "bin" / "phpmd"
        binary.parent.mkdir(parents=True, exist_ok=True)
        binary.write_text(
            "#!/bin/sh\n"
            'for arg in "$@"; do echo "arg:$arg"; done\n'
            f"echo '{message}' >&2\n"
            f"exit {status}\n",
            encoding="utf-8",
        )
        binary.chmod(binary.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return binary

    return _install
