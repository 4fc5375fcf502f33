# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Constants shared by the PHPMD hook action."""

from __future__ import annotations

from typing import Final

EXIT_SUCCESS: Final[int] = 0
EXIT_ERRORS_FOUND: Final[int] = 1
EXIT_WITH_EXCEPTIONS: Final[int] = 2

CONFIGURATION_FILENAME: Final[str] = "phpmd.xml"
BINARY_SEGMENTS: Final[tuple[str, ...]] = ("vendor", "bin")
BINARY_NAME: Final[str] = "phpmd"
WINDOWS_BINARY_NAME: Final[str] = "phpmd.bat"

ROOT_ENV_VAR: Final[str] = "PHPMD_HOOK_ROOT"

SUCCESS_MESSAGE: Final[str] = "PHPMD detected no errors, allowing commit to proceed."
FAILURE_MESSAGE: Final[str] = "PHPMD detected errors, aborting commit!"
EXCEPTION_MESSAGE_PREFIX: Final[str] = "An error occurred trying to run PHPMD:"

# XML vocabulary of ``phpmd.xml``.
CONFIGURATION_TAG: Final[str] = "configuration"
SOURCE_TAG: Final[str] = "source"
EXCLUDE_TAG: Final[str] = "exclude"
PATH_TAG: Final[str] = "path"
OUTPUT_TAG: Final[str] = "output"
OUTPUT_MODE_ATTRIBUTE: Final[str] = "mode"
MINIMUM_PRIORITY_TAG: Final[str] = "minimum-priority"
MINIMUM_PRIORITY_ATTRIBUTE: Final[str] = "value"
REPORT_TAG: Final[str] = "report"
REPORT_FILE_ATTRIBUTE: Final[str] = "file"
SUFFIXES_TAG: Final[str] = "suffixes"
SUFFIX_TAG: Final[str] = "suffix"
STRICT_TAG: Final[str] = "strict"

# Command-line flags understood by the PHPMD binary.
EXCLUDE_FLAG: Final[str] = "--exclude="
MINIMUM_PRIORITY_FLAG: Final[str] = "--minimumpriority="
REPORT_FILE_FLAG: Final[str] = "--reportfile="
SUFFIXES_FLAG: Final[str] = "--suffixes="
STRICT_FLAG: Final[str] = "--strict"
LIST_SEPARATOR: Final[str] = ","

__all__ = [
    "BINARY_NAME",
    "BINARY_SEGMENTS",
    "CONFIGURATION_FILENAME",
    "CONFIGURATION_TAG",
    "EXCEPTION_MESSAGE_PREFIX",
    "EXCLUDE_FLAG",
    "EXCLUDE_TAG",
    "EXIT_ERRORS_FOUND",
    "EXIT_SUCCESS",
    "EXIT_WITH_EXCEPTIONS",
    "FAILURE_MESSAGE",
    "LIST_SEPARATOR",
    "MINIMUM_PRIORITY_ATTRIBUTE",
    "MINIMUM_PRIORITY_FLAG",
    "MINIMUM_PRIORITY_TAG",
    "OUTPUT_MODE_ATTRIBUTE",
    "OUTPUT_TAG",
    "PATH_TAG",
    "REPORT_FILE_ATTRIBUTE",
    "REPORT_FILE_FLAG",
    "REPORT_TAG",
    "ROOT_ENV_VAR",
    "SOURCE_TAG",
    "STRICT_FLAG",
    "STRICT_TAG",
    "SUCCESS_MESSAGE",
    "SUFFIXES_FLAG",
    "SUFFIXES_TAG",
    "SUFFIX_TAG",
    "WINDOWS_BINARY_NAME",
]
