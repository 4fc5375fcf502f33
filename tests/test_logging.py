# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for hook outcome rendering."""

from __future__ import annotations

import pytest

from phpmd_hook.constants import EXCEPTION_MESSAGE_PREFIX
from phpmd_hook.logging import HookLogger


def _plain(*, emoji: bool = False, debug: bool = False) -> HookLogger:
    return HookLogger(use_emoji=emoji, use_color=False, debug_enabled=debug)


def test_setup_failure_prints_headline_and_indented_reason(capsys: pytest.CaptureFixture[str]) -> None:
    _plain().outcome(f"{EXCEPTION_MESSAGE_PREFIX}\nPHPMD configuration file missing: /p/phpmd.xml", 2)

    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == EXCEPTION_MESSAGE_PREFIX
    assert lines[1] == "   PHPMD configuration file missing: /p/phpmd.xml"


@pytest.mark.parametrize("exit_code", [0, 1])
def test_analysis_outcomes_print_single_line(exit_code: int, capsys: pytest.CaptureFixture[str]) -> None:
    _plain().outcome("PHPMD finished", exit_code)

    assert capsys.readouterr().out == "PHPMD finished\n"


def test_emoji_prefix_follows_preference(capsys: pytest.CaptureFixture[str]) -> None:
    _plain(emoji=True).outcome("PHPMD detected no errors", 0)
    _plain(emoji=False).outcome("PHPMD detected no errors", 0)

    with_emoji, without_emoji = capsys.readouterr().out.splitlines()
    assert with_emoji.startswith("✅")
    assert without_emoji == "PHPMD detected no errors"


def test_debug_is_silent_unless_enabled(capsys: pytest.CaptureFixture[str]) -> None:
    _plain().debug("binary=/p/vendor/bin/phpmd")
    assert capsys.readouterr().out == ""

    _plain(debug=True).debug("binary=/p/vendor/bin/phpmd")
    assert "[debug] binary=/p/vendor/bin/phpmd" in capsys.readouterr().out


def test_section_uses_plain_marker_without_colour(capsys: pytest.CaptureFixture[str]) -> None:
    _plain().section("PHPMD command")

    assert "--- PHPMD command ---" in capsys.readouterr().out
