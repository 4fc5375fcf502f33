# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for binary and configuration path resolution."""

from __future__ import annotations

from pathlib import Path

import pytest

from phpmd_hook.errors import PreconditionError
from phpmd_hook.paths import binary_directory, binary_path, configuration_exists, configuration_path, resolve_path
from phpmd_hook.platform import OsFamily, StaticHostPlatform


def test_resolve_path_joins_segments_without_touching_disk(tmp_path: Path) -> None:
    resolved = resolve_path(tmp_path, ("vendor", "bin", "phpmd"))

    assert resolved == tmp_path / "vendor" / "bin" / "phpmd"
    assert resolved.is_absolute()
    assert not resolved.exists()


def test_resolve_path_makes_relative_roots_absolute() -> None:
    resolved = resolve_path(Path("project"), ("phpmd.xml",))

    assert resolved.is_absolute()
    assert resolved.parts[-2:] == ("project", "phpmd.xml")


def test_configuration_path_uses_phpmd_xml(tmp_path: Path) -> None:
    assert configuration_path(tmp_path) == tmp_path / "phpmd.xml"


def test_binary_path_selects_bat_on_windows(tmp_path: Path) -> None:
    path = binary_path(tmp_path, StaticHostPlatform(OsFamily.WINDOWS))

    assert path == tmp_path / "vendor" / "bin" / "phpmd.bat"


def test_binary_path_selects_bare_name_elsewhere(tmp_path: Path) -> None:
    for family in (OsFamily.LINUX, OsFamily.DARWIN, OsFamily.BSD, OsFamily.SOLARIS, OsFamily.UNKNOWN):
        path = binary_path(tmp_path, StaticHostPlatform(family))
        assert path.name == "phpmd"


def test_configuration_exists_requires_a_file(tmp_path: Path) -> None:
    target = tmp_path / "phpmd.xml"
    assert not configuration_exists(target)

    target.mkdir()
    assert not configuration_exists(target)

    target.rmdir()
    target.write_text("<configuration/>", encoding="utf-8")
    assert configuration_exists(target)


def test_configuration_exists_reports_filesystem_errors(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    def _denied(self: Path) -> bool:
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr(Path, "is_file", _denied)

    with pytest.raises(PreconditionError, match="Permission denied") as excinfo:
        configuration_exists(tmp_path / "phpmd.xml")

    assert excinfo.value.exit_code == 2


def test_binary_directory_matches_binary_parent(tmp_path: Path) -> None:
    directory = binary_directory(tmp_path)

    assert directory == tmp_path / "vendor" / "bin"
    assert binary_path(tmp_path, StaticHostPlatform(OsFamily.LINUX)).parent == directory
