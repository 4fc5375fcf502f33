# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Synchronous execution of the PHPMD binary.

The analyzer runs without a timeout: :meth:`AnalyzerInvoker.run` blocks until
the child process exits. Interrupting a hung analyzer is left to the caller's
environment (for example, killing the hook process).
"""

from __future__ import annotations

# Bandit: subprocess usage is intentional; the analyzer is launched from an
# argument list with ``shell=False``.
import subprocess  # nosec B404 suppression_valid: Shell-free subprocess wrapper enforces safe execution.
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

from .errors import ExecutionError


@dataclass(frozen=True, slots=True)
class CommandOptions:
    """Execution options applied to the analyzer process."""

    cwd: Path | None = None
    env: Mapping[str, str] | None = None


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """Outcome of a single analyzer run."""

    command: tuple[str, ...]
    output: str
    returncode: int

    @property
    def success(self) -> bool:
        """Return ``True`` when the analyzer exited with status zero."""

        return self.returncode == 0


def _ensure_text(value: str | bytes | None) -> str:
    """Return ``value`` decoded to text, replacing undecodable bytes.

    Args:
        value: Stream output captured from subprocess execution.

    Returns:
        str: Text output, empty when nothing was captured.
    """

    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return value.decode(errors="replace")


def _normalize_args(binary: Path, arguments: Sequence[str]) -> list[str]:
    """Return the full command with ``binary`` prepended.

    Args:
        binary: Absolute path of the analyzer executable.
        arguments: Arguments produced by the translator.

    Returns:
        list[str]: Command sequence suitable for :func:`subprocess.run`.

    Raises:
        ExecutionError: If ``binary`` is not an absolute path.
    """

    command = [str(binary), *arguments]
    if not binary.is_absolute():
        raise ExecutionError(command, "analyzer path must be absolute")
    return command


class AnalyzerInvoker:
    """Launch the analyzer once and capture its merged output."""

    def __init__(self, options: CommandOptions | None = None) -> None:
        """Initialise the invoker with optional execution ``options``."""

        self._options = options or CommandOptions()

    def run(self, binary: Path, arguments: Sequence[str]) -> AnalysisResult:
        """Execute ``binary`` with ``arguments`` and wait for it to exit.

        Standard error is redirected into standard output so the captured text
        preserves the interleaving the analyzer produced.

        Args:
            binary: Absolute path of the analyzer executable.
            arguments: Arguments appended after the binary.

        Returns:
            AnalysisResult: Captured output and exit status.

        Raises:
            ExecutionError: If the process cannot be started (missing binary,
                missing permissions, invalid path).
        """

        command = _normalize_args(binary, arguments)
        options = self._options
        try:
            completed = subprocess.run(  # nosec B603 - argument list, no shell expansion
                command,
                cwd=str(options.cwd) if options.cwd is not None else None,
                env=dict(options.env) if options.env is not None else None,
                check=False,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                stdin=subprocess.DEVNULL,
            )
        except OSError as exc:
            raise ExecutionError(command, exc.strerror or str(exc)) from exc
        return AnalysisResult(
            command=tuple(command),
            output=_ensure_text(completed.stdout),
            returncode=completed.returncode,
        )


__all__ = ["AnalysisResult", "AnalyzerInvoker", "CommandOptions"]
