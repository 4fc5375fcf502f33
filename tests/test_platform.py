# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for host platform detection."""

from __future__ import annotations

import pytest

from phpmd_hook import platform as host_platform
from phpmd_hook.platform import (
    HostPlatform,
    OsFamily,
    StaticHostPlatform,
    SystemHostPlatform,
    binary_name,
    family_from_system,
)


@pytest.mark.parametrize(
    ("system", "expected"),
    [
        ("Windows", OsFamily.WINDOWS),
        ("CYGWIN_NT-10.0", OsFamily.WINDOWS),
        ("Linux", OsFamily.LINUX),
        ("Darwin", OsFamily.DARWIN),
        ("FreeBSD", OsFamily.BSD),
        ("OpenBSD", OsFamily.BSD),
        ("SunOS", OsFamily.SOLARIS),
        ("Haiku", OsFamily.UNKNOWN),
        ("", OsFamily.UNKNOWN),
    ],
)
def test_family_from_system(system: str, expected: OsFamily) -> None:
    assert family_from_system(system) is expected


def test_system_host_platform_reads_platform_module(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(host_platform.platform, "system", lambda: "Windows")

    assert SystemHostPlatform().family() is OsFamily.WINDOWS


def test_static_host_platform_satisfies_protocol() -> None:
    host = StaticHostPlatform(OsFamily.DARWIN)

    assert isinstance(host, HostPlatform)
    assert host.family() is OsFamily.DARWIN


def test_binary_name_by_family() -> None:
    assert binary_name(StaticHostPlatform(OsFamily.WINDOWS)) == "phpmd.bat"
    assert binary_name(StaticHostPlatform(OsFamily.LINUX)) == "phpmd"
    assert binary_name(StaticHostPlatform(OsFamily.UNKNOWN)) == "phpmd"
