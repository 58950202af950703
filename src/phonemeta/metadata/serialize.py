from __future__ import annotations

import hashlib
import json

from .models import (
    NUMBER_TYPE_FIELDS,
    MetadataCollection,
    NumberFormatRule,
    NumberTypeDesc,
    TerritoryMetadata,
)


def _desc_payload(desc: NumberTypeDesc) -> dict[str, object]:
    return {
        "example_number": desc.example_number,
        "national_number_pattern": desc.national_number_pattern,
        "possible_length": list(desc.possible_lengths.national),
        "possible_length_local_only": list(desc.possible_lengths.local_only),
    }


def _format_payload(rule: NumberFormatRule) -> dict[str, object]:
    return {
        "domestic_carrier_code_formatting_rule": rule.domestic_carrier_code_formatting_rule,
        "format": rule.format,
        "leading_digits_pattern": list(rule.leading_digits_patterns),
        "national_prefix_formatting_rule": rule.national_prefix_formatting_rule,
        "national_prefix_optional_when_formatting": rule.national_prefix_optional_when_formatting,
        "pattern": rule.pattern,
    }


def territory_payload(metadata: TerritoryMetadata) -> dict[str, object]:
    payload: dict[str, object] = {
        "country_code": metadata.country_code,
        "general_desc": _desc_payload(metadata.general_desc),
        "id": metadata.id,
        "international_prefix": metadata.international_prefix,
        "intl_number_format": [_format_payload(rule) for rule in metadata.intl_number_formats],
        "leading_digits": metadata.leading_digits,
        "leading_zero_possible": metadata.leading_zero_possible,
        "main_country_for_code": metadata.main_country_for_code,
        "national_prefix": metadata.national_prefix,
        "national_prefix_for_parsing": metadata.national_prefix_for_parsing,
        "national_prefix_transform_rule": metadata.national_prefix_transform_rule,
        "number_format": [_format_payload(rule) for rule in metadata.number_formats],
        "preferred_extn_prefix": metadata.preferred_extn_prefix,
        "preferred_international_prefix": metadata.preferred_international_prefix,
        "same_mobile_and_fixed_line_pattern": metadata.same_mobile_and_fixed_line_pattern,
    }
    for name in NUMBER_TYPE_FIELDS:
        desc = getattr(metadata, name)
        payload[name] = None if desc is None else _desc_payload(desc)
    return payload


def canonical_collection_json(collection: MetadataCollection) -> str:
    return json.dumps(
        {"territories": [territory_payload(territory) for territory in collection.territories]},
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=True,
    )


def serialize_collection(collection: MetadataCollection) -> bytes:
    return canonical_collection_json(collection).encode("utf-8")


def hash_collection(collection: MetadataCollection, algo: str = "sha256") -> str:
    hasher = hashlib.new(algo)
    hasher.update(serialize_collection(collection))
    return hasher.hexdigest()
