from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final
from xml.etree.ElementTree import ParseError as XmlParseError

import defusedxml.ElementTree as DefusedET
from defusedxml import DefusedXmlException

from phonemeta.parser.errors import BuildErrorCode, build_error

from .element import MetadataElement, XmlElement

TERRITORY: Final[str] = "territory"
SHORT_NUMBER_METADATA: Final[str] = "ShortNumberMetadata"
ALTERNATE_FORMATS_METADATA: Final[str] = "PhoneNumberAlternateFormats"


@dataclass(frozen=True, slots=True)
class MetadataDocument:
    root: MetadataElement
    is_short_number: bool
    is_alternate_formats: bool

    def territories(self) -> tuple[MetadataElement, ...]:
        return self.root.find_all(TERRITORY)


def _variant_flags(root: MetadataElement) -> tuple[bool, bool]:
    def present(tag: str) -> bool:
        return root.tag == tag or bool(root.find_all(tag))

    return (present(SHORT_NUMBER_METADATA), present(ALTERNATE_FORMATS_METADATA))


def document_from_element(root: MetadataElement) -> MetadataDocument:
    is_short_number, is_alternate_formats = _variant_flags(root)
    return MetadataDocument(
        root=root,
        is_short_number=is_short_number,
        is_alternate_formats=is_alternate_formats,
    )


def parse_metadata_document(payload: str | bytes, source: str = "<inline>") -> MetadataDocument:
    try:
        root = DefusedET.fromstring(payload)
    except (XmlParseError, DefusedXmlException) as exc:
        raise build_error(
            BuildErrorCode.E_BUILD_DOCUMENT_INVALID,
            f"unable to parse metadata document: {exc}",
            source,
        ) from exc
    return document_from_element(XmlElement(root))


def load_metadata_document(path: str | Path) -> MetadataDocument:
    target = Path(path)
    try:
        payload = target.read_bytes()
    except OSError as exc:
        raise build_error(
            BuildErrorCode.E_BUILD_DOCUMENT_INVALID,
            f"unable to read metadata document: {exc}",
            str(target),
        ) from exc
    return parse_metadata_document(payload, source=str(target))
