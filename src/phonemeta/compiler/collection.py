from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor

from phonemeta.document import MetadataDocument, MetadataElement
from phonemeta.metadata import MetadataCollection, TerritoryMetadata

from .filters import MetadataFilter, metadata_filter_for_build
from .tags import ID
from .territory import compile_territory

logger = logging.getLogger(__name__)


def _compile_and_filter(
    element: MetadataElement,
    document: MetadataDocument,
    metadata_filter: MetadataFilter,
) -> TerritoryMetadata:
    # Supplementary data files may only carry the calling code.
    region_code = element.get_attribute(ID) if element.has_attribute(ID) else ""
    metadata = compile_territory(
        region_code,
        element,
        is_short_number=document.is_short_number,
        is_alternate_formats=document.is_alternate_formats,
    )
    return metadata_filter.filter_metadata(metadata)


def build_metadata_collection(
    document: MetadataDocument,
    *,
    lite_build: bool = False,
    special_build: bool = False,
    max_workers: int = 1,
) -> MetadataCollection:
    """Compile every territory of ``document`` into a collection in document order.

    With ``max_workers > 1`` territories are compiled on a thread pool; results keep
    document order and the first failing territory (in document order) is raised.
    """
    if max_workers < 1:
        raise ValueError("max_workers must be >= 1")
    metadata_filter = metadata_filter_for_build(lite_build, special_build)
    territories = document.territories()

    def compile_one(element: MetadataElement) -> TerritoryMetadata:
        return _compile_and_filter(element, document, metadata_filter)

    if max_workers == 1 or len(territories) < 2:
        compiled = [compile_one(element) for element in territories]
    else:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            compiled = list(executor.map(compile_one, territories))

    logger.info(
        "compiled %d territories (short_number=%s, alternate_formats=%s, workers=%d)",
        len(compiled),
        document.is_short_number,
        document.is_alternate_formats,
        max_workers,
    )
    return MetadataCollection(territories=tuple(compiled))


def build_country_code_to_region_code_map(
    collection: MetadataCollection,
) -> dict[int, list[str]]:
    """Map each calling code to its region codes, main country for the code first."""
    mapping: dict[int, list[str]] = {}
    for metadata in collection.territories:
        region_codes = mapping.get(metadata.country_code)
        if region_codes is None:
            mapping[metadata.country_code] = [metadata.id] if metadata.id else []
        elif metadata.main_country_for_code:
            region_codes.insert(0, metadata.id)
        else:
            region_codes.append(metadata.id)
    return mapping
