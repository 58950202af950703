from .collection import build_country_code_to_region_code_map, build_metadata_collection
from .descriptors import collect_possible_lengths, resolve_number_desc, resolve_possible_lengths
from .filters import MetadataFilter, metadata_filter_for_build
from .formats import (
    FormatDefaults,
    FormatRuleSet,
    format_defaults,
    resolve_international_format,
    resolve_national_format,
    resolve_number_formats,
)
from .general_desc import EXCLUDED_FROM_GENERAL_DESC, derive_general_desc
from .territory import compile_territory

__all__ = [
    "EXCLUDED_FROM_GENERAL_DESC",
    "FormatDefaults",
    "FormatRuleSet",
    "MetadataFilter",
    "build_country_code_to_region_code_map",
    "build_metadata_collection",
    "collect_possible_lengths",
    "compile_territory",
    "derive_general_desc",
    "format_defaults",
    "metadata_filter_for_build",
    "resolve_international_format",
    "resolve_national_format",
    "resolve_number_desc",
    "resolve_number_formats",
    "resolve_possible_lengths",
]
