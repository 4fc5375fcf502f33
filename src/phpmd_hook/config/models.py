# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typed view of the options declared in ``phpmd.xml``."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from ..constants import (
    EXCLUDE_FLAG,
    LIST_SEPARATOR,
    MINIMUM_PRIORITY_FLAG,
    REPORT_FILE_FLAG,
    STRICT_FLAG,
    SUFFIXES_FLAG,
)


class PhpMdOptions(BaseModel):
    """Options extracted from the ``<configuration>`` section.

    Optional settings are modelled by absence (``None``, empty tuple or
    ``False``) and render no argument at all.
    """

    model_config = ConfigDict(frozen=True)

    sources: tuple[str, ...] = Field(min_length=1)
    output_mode: str
    excludes: tuple[str, ...] = ()
    minimum_priority: str | None = None
    report_file: str | None = None
    suffixes: tuple[str, ...] = ()
    strict: bool = False

    def to_arguments(self, configuration_path: Path) -> list[str]:
        """Render the PHPMD argument vector.

        The first three arguments are positional (sources, report format,
        ruleset) and always present; flags follow in a fixed order.

        Args:
            configuration_path: Ruleset path passed as the third argument.

        Returns:
            list[str]: Ordered command-line arguments, without the binary.
        """

        arguments = [
            LIST_SEPARATOR.join(self.sources),
            self.output_mode,
            str(configuration_path),
        ]
        if self.excludes:
            arguments.append(f"{EXCLUDE_FLAG}{LIST_SEPARATOR.join(self.excludes)}")
        if self.minimum_priority is not None:
            arguments.append(f"{MINIMUM_PRIORITY_FLAG}{self.minimum_priority}")
        if self.report_file is not None:
            arguments.append(f"{REPORT_FILE_FLAG}{self.report_file}")
        if self.suffixes:
            arguments.append(f"{SUFFIXES_FLAG}{LIST_SEPARATOR.join(self.suffixes)}")
        if self.strict:
            arguments.append(STRICT_FLAG)
        return arguments


__all__ = ["PhpMdOptions"]
