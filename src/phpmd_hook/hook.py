# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Hook action orchestrating configuration translation and the PHPMD run."""

# pylint: disable=too-few-public-methods -- Protocol definitions intentionally expose minimal method surfaces.

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol, runtime_checkable

from .config.document import ConfigDocument
from .config.settings import HookSettings
from .constants import (
    EXCEPTION_MESSAGE_PREFIX,
    EXIT_ERRORS_FOUND,
    EXIT_SUCCESS,
    FAILURE_MESSAGE,
    SUCCESS_MESSAGE,
)
from .errors import PhpMdHookError, PreconditionError
from .logging import HookLogger
from .paths import binary_path, configuration_exists
from .platform import HostPlatform, SystemHostPlatform
from .process import AnalysisResult, AnalyzerInvoker
from .translator import ArgumentTranslator


@runtime_checkable
class HookHost(Protocol):
    """Primitives exposed by the framework invoking the hook."""

    def write(self, text: str) -> None:
        """Emit ``text`` verbatim."""

        raise NotImplementedError

    def success(self, message: str) -> None:
        """Report that the guarded operation may proceed."""

        raise NotImplementedError

    def error(self, message: str, exit_code: int) -> None:
        """Report a failure terminating with ``exit_code``."""

        raise NotImplementedError


@dataclass(slots=True)
class ConsoleHookHost:
    """Host rendering hook output on the terminal and remembering the exit code."""

    logger: HookLogger = field(default_factory=HookLogger)
    exit_code: int | None = None

    def write(self, text: str) -> None:
        """Write analyzer output without styling."""

        if text:
            self.logger.echo(text, newline=not text.endswith("\n"))

    def success(self, message: str) -> None:
        """Report ``message`` as a clean run and record exit code ``0``."""

        self.logger.outcome(message, EXIT_SUCCESS)
        self.exit_code = EXIT_SUCCESS

    def error(self, message: str, exit_code: int) -> None:
        """Report ``message`` styled for ``exit_code`` and record it."""

        self.logger.outcome(message, exit_code)
        self.exit_code = exit_code


@dataclass(slots=True)
class RecordingHookHost:
    """Host collecting every primitive call in order."""

    calls: list[tuple[str, str, int | None]] = field(default_factory=list)

    def write(self, text: str) -> None:
        """Record a ``write`` call."""

        self.calls.append(("write", text, None))

    def success(self, message: str) -> None:
        """Record a ``success`` call."""

        self.calls.append(("success", message, EXIT_SUCCESS))

    def error(self, message: str, exit_code: int) -> None:
        """Record an ``error`` call."""

        self.calls.append(("error", message, exit_code))

    @property
    def output(self) -> str:
        """Return the concatenated text passed to ``write``."""

        return "".join(text for kind, text, _ in self.calls if kind == "write")


@dataclass(frozen=True, slots=True)
class PreparedCommand:
    """Binary and arguments ready to hand to the invoker."""

    binary: Path
    arguments: tuple[str, ...]
    configuration_path: Path

    @property
    def command(self) -> tuple[str, ...]:
        """Return the complete command line with the binary first."""

        return (str(self.binary), *self.arguments)


class HookAdapter:
    """Run PHPMD for a project and report the outcome to a :class:`HookHost`."""

    def __init__(
        self,
        settings: HookSettings,
        host: HookHost,
        *,
        platform: HostPlatform | None = None,
        invoker: AnalyzerInvoker | None = None,
        logger: HookLogger | None = None,
    ) -> None:
        """Wire the adapter to its collaborators.

        Args:
            settings: Project root and file locations for this invocation.
            host: Framework primitives receiving output and the final status.
            platform: Host platform used to pick the binary name.
            invoker: Process launcher; defaults to :class:`AnalyzerInvoker`.
            logger: Logger for debug diagnostics.
        """

        self._settings = settings
        self._host = host
        self._platform = platform or SystemHostPlatform()
        self._invoker = invoker or AnalyzerInvoker()
        self._logger = logger or HookLogger(debug_enabled=settings.debug)

    def prepare(self) -> PreparedCommand:
        """Validate the configuration and build the PHPMD command.

        Returns:
            PreparedCommand: Binary path and translated arguments.

        Raises:
            PreconditionError: If the configuration file does not exist.
            ConfigParseError: If the configuration file is not well-formed XML.
            SchemaError: If the configuration violates the expected structure.
        """

        config_path = self._settings.configuration_path
        if not configuration_exists(config_path):
            raise PreconditionError(config_path)
        document = ConfigDocument.load(config_path)
        arguments = ArgumentTranslator(config_path).translate(document.configuration())
        binary = binary_path(self._settings.root, self._platform, self._settings.binary_segments)
        return PreparedCommand(binary=binary, arguments=tuple(arguments), configuration_path=config_path)

    def run(self) -> int:
        """Execute the hook and return its exit code.

        Returns:
            int: ``0`` when PHPMD passes, ``1`` when it reports violations and
            ``2`` when the run could not be set up or launched.
        """

        try:
            prepared = self.prepare()
            self._logger.debug(
                f"binary={prepared.binary} config={prepared.configuration_path} "
                f"arguments={len(prepared.arguments)}"
            )
            result = self._invoker.run(prepared.binary, prepared.arguments)
        except PhpMdHookError as exc:
            self._host.error(f"{EXCEPTION_MESSAGE_PREFIX}\n{exc}", exc.exit_code)
            return exc.exit_code
        return self._report(result)

    def _report(self, result: AnalysisResult) -> int:
        """Forward the analyzer output and map its status onto the host."""

        self._logger.debug(f"returncode={result.returncode}")
        self._host.write(result.output)
        if result.success:
            self._host.success(SUCCESS_MESSAGE)
            return EXIT_SUCCESS
        self._host.error(FAILURE_MESSAGE, EXIT_ERRORS_FOUND)
        return EXIT_ERRORS_FOUND


__all__ = [
    "ConsoleHookHost",
    "HookAdapter",
    "HookHost",
    "PreparedCommand",
    "RecordingHookHost",
]
