from .element import MetadataElement, XmlElement
from .loader import (
    MetadataDocument,
    document_from_element,
    load_metadata_document,
    parse_metadata_document,
)

__all__ = [
    "MetadataDocument",
    "MetadataElement",
    "XmlElement",
    "document_from_element",
    "load_metadata_document",
    "parse_metadata_document",
]
