# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Translate the ``<configuration>`` section of ``phpmd.xml`` into PHPMD arguments.

The resulting vector is ordered as PHPMD expects::

    <sources> <output-mode> <ruleset> [--exclude=..] [--minimumpriority=..]
    [--reportfile=..] [--suffixes=..] [--strict]

Required settings raise :class:`~phpmd_hook.errors.SchemaError` at the first
violation. Optional settings that are absent produce no argument.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .config.document import ConfigElement
from .config.models import PhpMdOptions
from .constants import (
    EXCLUDE_TAG,
    MINIMUM_PRIORITY_ATTRIBUTE,
    MINIMUM_PRIORITY_TAG,
    OUTPUT_MODE_ATTRIBUTE,
    OUTPUT_TAG,
    PATH_TAG,
    REPORT_FILE_ATTRIBUTE,
    REPORT_TAG,
    SOURCE_TAG,
    STRICT_TAG,
    SUFFIX_TAG,
    SUFFIXES_TAG,
)
from .errors import SchemaError


def flatten_groups(configuration: ConfigElement, group_tag: str, leaf_tag: str) -> list[str]:
    """Return the text of every ``leaf_tag`` inside every ``group_tag``.

    Groups are visited in document order and leaves in document order within
    each group. Values are neither sorted, deduplicated nor trimmed.

    Args:
        configuration: Element whose subtree is searched.
        group_tag: Tag of the repeated grouping element (e.g. ``source``).
        leaf_tag: Tag of the text-bearing children (e.g. ``path``).

    Returns:
        list[str]: Flattened leaf values, possibly empty.
    """

    values: list[str] = []
    for group in configuration.find_elements(group_tag):
        values.extend(leaf.text() for leaf in group.find_elements(leaf_tag))
    return values


@dataclass(frozen=True, slots=True)
class _SingletonRule:
    """Describe an element that may appear at most once and carries one attribute."""

    tag: str
    attribute: str
    label: str


_OUTPUT_RULE = _SingletonRule(OUTPUT_TAG, OUTPUT_MODE_ATTRIBUTE, "output")
_MINIMUM_PRIORITY_RULE = _SingletonRule(
    MINIMUM_PRIORITY_TAG,
    MINIMUM_PRIORITY_ATTRIBUTE,
    "minimum priority",
)
_REPORT_RULE = _SingletonRule(REPORT_TAG, REPORT_FILE_ATTRIBUTE, "report file")


def _singleton_attribute(configuration: ConfigElement, rule: _SingletonRule) -> str | None:
    """Return the attribute described by ``rule`` or ``None`` when the element is absent.

    Raises:
        SchemaError: If the element is duplicated or present without its attribute.
    """

    elements = configuration.find_elements(rule.tag)
    if len(elements) > 1:
        raise SchemaError(f"More than one {rule.label} defined")
    if not elements:
        return None
    value = elements[0].attribute(rule.attribute)
    if value is None:
        raise SchemaError(f"{rule.label.capitalize()} does not have a {rule.attribute} defined")
    return value


def _required_attribute(configuration: ConfigElement, rule: _SingletonRule) -> str:
    """Return the attribute described by ``rule``, failing when the element is absent."""

    value = _singleton_attribute(configuration, rule)
    if value is None:
        raise SchemaError(f"No {rule.label} defined")
    return value


class ArgumentTranslator:
    """Build PHPMD command-line arguments from a configuration element."""

    def __init__(self, configuration_path: Path) -> None:
        """Bind the translator to the ruleset path passed as third argument.

        Args:
            configuration_path: Resolved location of ``phpmd.xml``.
        """

        self._configuration_path = configuration_path

    @property
    def configuration_path(self) -> Path:
        """Return the ruleset path emitted as the third argument."""

        return self._configuration_path

    def extract(self, configuration: ConfigElement) -> PhpMdOptions:
        """Validate ``configuration`` and collect its options.

        Checks run in argument order so the first reported violation matches
        the first argument that could not be built.

        Args:
            configuration: The ``<configuration>`` element.

        Returns:
            PhpMdOptions: Options ready to render.

        Raises:
            SchemaError: If a required section is missing or malformed.
        """

        sources = flatten_groups(configuration, SOURCE_TAG, PATH_TAG)
        if not sources:
            raise SchemaError("No source defined")
        output_mode = _required_attribute(configuration, _OUTPUT_RULE)
        return PhpMdOptions(
            sources=tuple(sources),
            output_mode=output_mode,
            excludes=tuple(flatten_groups(configuration, EXCLUDE_TAG, PATH_TAG)),
            minimum_priority=_singleton_attribute(configuration, _MINIMUM_PRIORITY_RULE),
            report_file=_singleton_attribute(configuration, _REPORT_RULE),
            suffixes=tuple(flatten_groups(configuration, SUFFIXES_TAG, SUFFIX_TAG)),
            strict=bool(configuration.find_elements(STRICT_TAG)),
        )

    def translate(self, configuration: ConfigElement) -> list[str]:
        """Return the ordered PHPMD arguments for ``configuration``.

        Args:
            configuration: The ``<configuration>`` element.

        Returns:
            list[str]: Arguments excluding the binary itself.

        Raises:
            SchemaError: If a required section is missing or malformed.
        """

        return self.extract(configuration).to_arguments(self._configuration_path)


__all__ = ["ArgumentTranslator", "flatten_groups"]
