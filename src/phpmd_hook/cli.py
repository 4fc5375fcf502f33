# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command-line entry point for the PHPMD hook action."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer

from .config.settings import HookSettings, default_root
from .constants import EXCEPTION_MESSAGE_PREFIX
from .errors import PhpMdHookError
from .hook import ConsoleHookHost, HookAdapter
from .logging import HookLogger

app = typer.Typer(
    name="phpmd-hook",
    help="Run PHPMD as a pre-commit hook using the project's phpmd.xml.",
    no_args_is_help=True,
    add_completion=False,
)

ROOT_OPTION = Annotated[
    Path | None,
    typer.Option(
        "--root",
        "-r",
        help="Project root containing phpmd.xml and vendor/bin (defaults to $PHPMD_HOOK_ROOT or cwd).",
    ),
]
EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji output."),
]
COLOR_OPTION = Annotated[
    bool,
    typer.Option("--color/--no-color", help="Toggle coloured output."),
]
DEBUG_OPTION = Annotated[
    bool,
    typer.Option("--debug", help="Print resolved paths and the analyzer exit status."),
]


@dataclass(slots=True)
class HookCLIOptions:
    """Capture CLI options shared by every command."""

    settings: HookSettings
    logger: HookLogger

    @classmethod
    def from_cli(cls, root: Path | None, *, emoji: bool, color: bool, debug: bool) -> HookCLIOptions:
        """Return options parsed from CLI arguments."""

        resolved_root = (root if root is not None else default_root()).resolve()
        settings = HookSettings(root=resolved_root, emoji=emoji, color=color, debug=debug)
        logger = HookLogger(
            use_emoji=settings.emoji,
            use_color=None if settings.color else False,
            debug_enabled=settings.debug,
        )
        return cls(settings=settings, logger=logger)


@app.command("run")
def run_command(
    root: ROOT_OPTION = None,
    emoji: EMOJI_OPTION = True,
    color: COLOR_OPTION = True,
    debug: DEBUG_OPTION = False,
) -> None:
    """Check the project with PHPMD and exit with the hook status.

    Exit codes: 0 when PHPMD passes, 1 when it reports violations, 2 when the
    configuration or the analyzer launch fails.
    """

    options = HookCLIOptions.from_cli(root, emoji=emoji, color=color, debug=debug)
    host = ConsoleHookHost(logger=options.logger)
    exit_code = HookAdapter(options.settings, host, logger=options.logger).run()
    raise typer.Exit(code=exit_code)


@app.command("arguments")
def arguments_command(
    root: ROOT_OPTION = None,
    emoji: EMOJI_OPTION = True,
    color: COLOR_OPTION = True,
) -> None:
    """Print the PHPMD command line derived from phpmd.xml without running it."""

    options = HookCLIOptions.from_cli(root, emoji=emoji, color=color, debug=False)
    logger = options.logger
    adapter = HookAdapter(options.settings, ConsoleHookHost(logger=logger), logger=logger)
    try:
        prepared = adapter.prepare()
    except PhpMdHookError as exc:
        logger.outcome(f"{EXCEPTION_MESSAGE_PREFIX}\n{exc}", exc.exit_code)
        raise typer.Exit(code=exc.exit_code) from exc

    logger.section("PHPMD command")
    for token in prepared.command:
        logger.echo(token)
    logger.info(f"Ruleset: {prepared.configuration_path}")
    if not prepared.binary.is_file():
        logger.warn(f"PHPMD binary not found in {options.settings.binary_directory}")
    raise typer.Exit(code=0)


__all__ = ["app"]
