from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Protocol, runtime_checkable
from xml.etree.ElementTree import Element


@runtime_checkable
class MetadataElement(Protocol):
    """Read-only view of one node of the metadata document."""

    @property
    def tag(self) -> str: ...

    @property
    def text(self) -> str: ...

    def has_attribute(self, name: str) -> bool: ...

    def get_attribute(self, name: str, default: str = "") -> str: ...

    def children(self) -> tuple[MetadataElement, ...]: ...

    def find_all(self, tag: str) -> tuple[MetadataElement, ...]: ...


@dataclass(frozen=True, slots=True)
class XmlElement:
    element: Element

    @property
    def tag(self) -> str:
        return self.element.tag

    @property
    def text(self) -> str:
        return "".join(self.element.itertext())

    def has_attribute(self, name: str) -> bool:
        return name in self.element.attrib

    def get_attribute(self, name: str, default: str = "") -> str:
        return self.element.attrib.get(name, default)

    def children(self) -> tuple[MetadataElement, ...]:
        return tuple(XmlElement(child) for child in self.element)

    def find_all(self, tag: str) -> tuple[MetadataElement, ...]:
        return tuple(XmlElement(node) for node in _iter_descendants(self.element, tag))


def _iter_descendants(element: Element, tag: str) -> Iterator[Element]:
    # Element.iter() yields the element itself first.
    for node in element.iter(tag):
        if node is not element:
            yield node
