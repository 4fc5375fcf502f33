# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Host operating-system detection used to select the PHPMD binary."""

# pylint: disable=too-few-public-methods -- Protocol definitions intentionally expose minimal method surfaces.

from __future__ import annotations

import platform
from dataclasses import dataclass
from enum import Enum
from typing import Protocol, runtime_checkable

from .constants import BINARY_NAME, WINDOWS_BINARY_NAME


class OsFamily(str, Enum):
    """Enumerate operating-system families recognised by the hook."""

    WINDOWS = "Windows"
    BSD = "BSD"
    DARWIN = "Darwin"
    SOLARIS = "Solaris"
    LINUX = "Linux"
    UNKNOWN = "Unknown"


@runtime_checkable
class HostPlatform(Protocol):
    """Report the operating-system family of the current host."""

    def family(self) -> OsFamily:
        """Return the family of the host operating system."""

        raise NotImplementedError


def family_from_system(system: str) -> OsFamily:
    """Return the :class:`OsFamily` matching a ``platform.system()`` value.

    Args:
        system: Raw system name such as ``"Linux"`` or ``"FreeBSD"``.

    Returns:
        OsFamily: Matching family, ``OsFamily.UNKNOWN`` when unrecognised.
    """

    normalized = system.strip().lower()
    if normalized.startswith(("windows", "cygwin_nt", "msys_nt", "mingw")):
        return OsFamily.WINDOWS
    if normalized.endswith("bsd") or normalized == "dragonfly":
        return OsFamily.BSD
    if normalized == "darwin":
        return OsFamily.DARWIN
    if normalized in {"sunos", "solaris"}:
        return OsFamily.SOLARIS
    if normalized == "linux":
        return OsFamily.LINUX
    return OsFamily.UNKNOWN


class SystemHostPlatform:
    """Resolve the family from :func:`platform.system`."""

    def family(self) -> OsFamily:
        """Return the family of the running interpreter's host."""

        return family_from_system(platform.system())


@dataclass(frozen=True, slots=True)
class StaticHostPlatform:
    """Report a fixed family; used when the host must be simulated."""

    fixed: OsFamily

    def family(self) -> OsFamily:
        """Return the configured family."""

        return self.fixed


def binary_name(host: HostPlatform) -> str:
    """Return the PHPMD executable name appropriate for ``host``.

    Args:
        host: Platform capability queried for its family.

    Returns:
        str: ``phpmd.bat`` on Windows hosts, ``phpmd`` everywhere else.
    """

    if host.family() is OsFamily.WINDOWS:
        return WINDOWS_BINARY_NAME
    return BINARY_NAME


__all__ = [
    "HostPlatform",
    "OsFamily",
    "StaticHostPlatform",
    "SystemHostPlatform",
    "binary_name",
    "family_from_system",
]
