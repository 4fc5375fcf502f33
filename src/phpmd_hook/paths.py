# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Helpers for resolving the PHPMD binary and configuration paths."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from .constants import BINARY_SEGMENTS, CONFIGURATION_FILENAME
from .errors import PreconditionError
from .platform import HostPlatform, binary_name


def resolve_path(root: Path, segments: Iterable[str]) -> Path:
    """Join ``segments`` onto ``root`` and return an absolute path.

    The filesystem is never consulted: symlinks are not followed and the
    result need not exist.

    Args:
        root: Directory the segments are relative to.
        segments: Ordered path atoms appended to ``root``.

    Returns:
        Path: Absolute path built from ``root`` and ``segments``.
    """

    return Path(root).absolute().joinpath(*segments)


def configuration_path(root: Path, filename: str = CONFIGURATION_FILENAME) -> Path:
    """Return the location of the PHPMD configuration file under ``root``."""

    return resolve_path(root, (filename,))


def binary_directory(root: Path, segments: Iterable[str] = BINARY_SEGMENTS) -> Path:
    """Return the directory under ``root`` that holds the PHPMD executable."""

    return resolve_path(root, segments)


def binary_path(
    root: Path,
    host: HostPlatform,
    segments: Iterable[str] = BINARY_SEGMENTS,
) -> Path:
    """Return the location of the PHPMD executable under ``root``.

    Args:
        root: Project root containing the Composer ``vendor`` directory.
        host: Platform capability selecting the executable name.
        segments: Directory atoms between ``root`` and the executable.

    Returns:
        Path: Absolute path to ``vendor/bin/phpmd`` (or ``phpmd.bat``).
    """

    return binary_directory(root, segments) / binary_name(host)


def configuration_exists(path: Path) -> bool:
    """Return ``True`` when ``path`` points at an existing regular file.

    Raises:
        PreconditionError: If the filesystem refuses the lookup, for example
            because a path component is too long or a parent is unreadable.
    """

    try:
        return path.is_file()
    except OSError as exc:
        raise PreconditionError(path, exc.strerror or str(exc)) from exc


__all__ = ["binary_directory", "binary_path", "configuration_exists", "configuration_path", "resolve_path"]
