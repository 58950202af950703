from .models import (
    ABSENT_TYPE_LENGTH,
    NUMBER_TYPE_FIELDS,
    MetadataCollection,
    NumberFormatRule,
    NumberTypeDesc,
    PossibleLengths,
    TerritoryMetadata,
)
from .serialize import (
    canonical_collection_json,
    hash_collection,
    serialize_collection,
    territory_payload,
)

__all__ = [
    "ABSENT_TYPE_LENGTH",
    "MetadataCollection",
    "NUMBER_TYPE_FIELDS",
    "NumberFormatRule",
    "NumberTypeDesc",
    "PossibleLengths",
    "TerritoryMetadata",
    "canonical_collection_json",
    "hash_collection",
    "serialize_collection",
    "territory_payload",
]
