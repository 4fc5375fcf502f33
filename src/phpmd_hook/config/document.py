# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Read-only view over a parsed ``phpmd.xml`` document.

Element queries search the *whole* subtree beneath the queried node rather
than only its direct children. A ``<source>`` nested inside ``<exclude>`` is
therefore reported by both ``find_elements("source")`` and
``find_elements("exclude")`` lookups; callers relying on strict nesting must
validate it themselves.

Tags are compared by local name, so a document declaring a default
namespace (``<configuration xmlns="...">``) is read the same way as an
un-namespaced one.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from xml.etree.ElementTree import Element, ParseError

from defusedxml import DefusedXmlException
from defusedxml.ElementTree import parse as parse_xml

from ..constants import CONFIGURATION_TAG
from ..errors import ConfigParseError, SchemaError


def local_name(tag: object) -> str | None:
    """Return ``tag`` without its ``{namespace}`` prefix, ``None`` for non-element nodes."""

    if not isinstance(tag, str):
        return None
    return tag.rpartition("}")[2]


def _iter_named(node: Element, tag: str) -> Iterator[Element]:
    """Yield ``node`` and its descendants whose local name is ``tag``, in document order."""

    return (candidate for candidate in node.iter() if local_name(candidate.tag) == tag)


@dataclass(frozen=True, slots=True)
class ConfigElement:
    """Wrap an XML element with the small query surface the translator needs."""

    node: Element

    @property
    def tag(self) -> str:
        """Return the element's tag name without any namespace."""

        return local_name(self.node.tag) or ""

    def find_elements(self, tag: str) -> list[ConfigElement]:
        """Return descendants named ``tag`` in document order.

        The element itself is never included, even when its own tag matches.

        Args:
            tag: Tag name to search for at any depth.

        Returns:
            list[ConfigElement]: Matching descendants, possibly empty.
        """

        return [ConfigElement(child) for child in _iter_named(self.node, tag) if child is not self.node]

    def attribute(self, name: str) -> str | None:
        """Return the value of attribute ``name`` or ``None`` when absent."""

        return self.node.get(name)

    def text(self) -> str:
        """Return the concatenated text content of the element, untrimmed."""

        return "".join(self.node.itertext())


@dataclass(frozen=True, slots=True)
class ConfigDocument:
    """Parsed configuration document bound to the file it came from."""

    path: Path
    root: Element

    @classmethod
    def load(cls, path: Path) -> ConfigDocument:
        """Parse ``path`` into a :class:`ConfigDocument`.

        Args:
            path: XML file to read.

        Returns:
            ConfigDocument: Parsed document.

        Raises:
            ConfigParseError: If the file cannot be read, is not well-formed,
                or declares forbidden constructs such as external entities.
        """

        try:
            tree = parse_xml(str(path))
        except OSError as exc:
            raise ConfigParseError(path, exc.strerror or str(exc)) from exc
        except (ParseError, DefusedXmlException) as exc:
            raise ConfigParseError(path, str(exc)) from exc
        return cls(path=path, root=tree.getroot())

    def find_elements(self, tag: str) -> list[ConfigElement]:
        """Return every element named ``tag`` in the document, root included."""

        return [ConfigElement(node) for node in _iter_named(self.root, tag)]

    def configuration(self) -> ConfigElement:
        """Return the single ``<configuration>`` element.

        Raises:
            SchemaError: If the document has zero or several configuration sections.
        """

        sections = self.find_elements(CONFIGURATION_TAG)
        if not sections:
            raise SchemaError("No configuration section found")
        if len(sections) > 1:
            raise SchemaError("More than one configuration section found")
        return sections[0]


__all__ = ["ConfigDocument", "ConfigElement", "local_name"]
