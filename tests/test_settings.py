# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for hook settings and the option model."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from phpmd_hook.config import HookSettings, PhpMdOptions, default_root


def test_default_root_prefers_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("PHPMD_HOOK_ROOT", str(tmp_path))

    assert default_root() == tmp_path
    assert HookSettings().root == tmp_path


def test_default_root_falls_back_to_cwd(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv("PHPMD_HOOK_ROOT", raising=False)
    monkeypatch.chdir(tmp_path)

    assert default_root() == Path.cwd()


def test_settings_derive_locations(tmp_path: Path) -> None:
    settings = HookSettings(root=tmp_path)

    assert settings.configuration_path == tmp_path / "phpmd.xml"
    assert settings.binary_directory == tmp_path / "vendor" / "bin"


def test_settings_validate_assignment(tmp_path: Path) -> None:
    settings = HookSettings(root=tmp_path)

    with pytest.raises(ValidationError):
        settings.config_filename = "   "


def test_options_require_a_source() -> None:
    with pytest.raises(ValidationError):
        PhpMdOptions(sources=(), output_mode="text")


def test_options_are_frozen() -> None:
    options = PhpMdOptions(sources=("src",), output_mode="text")

    with pytest.raises(ValidationError):
        options.strict = True  # type: ignore[misc]


def test_options_render_optional_flags_only_when_set() -> None:
    options = PhpMdOptions(sources=("src", "lib"), output_mode="xml", report_file="out.xml")

    assert options.to_arguments(Path("/repo/phpmd.xml")) == [
        "src,lib",
        "xml",
        str(Path("/repo/phpmd.xml")),
        "--reportfile=out.xml",
    ]
