# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy raised while preparing or launching PHPMD."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from .constants import EXIT_WITH_EXCEPTIONS


class PhpMdHookError(RuntimeError):
    """Base error for fatal failures that abort the hook with exit code ``2``."""

    def __init__(self, message: str, *, exit_code: int = EXIT_WITH_EXCEPTIONS) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


class PreconditionError(PhpMdHookError):
    """Raised when the PHPMD configuration file is absent."""

    def __init__(self, path: Path, reason: str | None = None) -> None:
        """Initialise the error for the missing configuration ``path``.

        Args:
            path: Location where ``phpmd.xml`` was expected.
            reason: Filesystem error that prevented checking ``path``, if any.
        """

        message = f"PHPMD configuration file missing: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.path = path
        self.reason = reason


class ConfigParseError(PhpMdHookError):
    """Raised when the configuration file cannot be read or is not well-formed XML."""

    def __init__(self, path: Path, reason: str) -> None:
        """Initialise the error with the offending file and parser reason.

        Args:
            path: Configuration file that failed to parse.
            reason: Message reported by the XML parser or filesystem.
        """

        super().__init__(f"Unable to parse {path}: {reason}")
        self.path = path
        self.reason = reason


class SchemaError(PhpMdHookError):
    """Raised when the configuration document violates the expected structure."""


class ExecutionError(PhpMdHookError):
    """Raised when the PHPMD process cannot be launched."""

    def __init__(self, command: Sequence[str], reason: str) -> None:
        """Initialise the error with the attempted command.

        Args:
            command: Command sequence that failed to launch.
            reason: Description of the launch failure.
        """

        head = command[0] if command else "<empty>"
        super().__init__(f"Unable to launch '{head}': {reason}")
        self.command = tuple(command)
        self.reason = reason


__all__ = [
    "ConfigParseError",
    "ExecutionError",
    "PhpMdHookError",
    "PreconditionError",
    "SchemaError",
]
