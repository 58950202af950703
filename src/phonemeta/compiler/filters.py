from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Final

from phonemeta.metadata import NUMBER_TYPE_FIELDS, NumberTypeDesc, TerritoryMetadata
from phonemeta.parser.errors import BuildErrorCode, build_error

SPECIAL_BUILD_NUMBER_TYPES: Final[frozenset[str]] = frozenset({"mobile"})
_SPECIAL_BUILD_CLEARED_FIELDS: Final[dict[str, object]] = {
    "preferred_international_prefix": None,
    "national_prefix": None,
    "preferred_extn_prefix": None,
    "national_prefix_transform_rule": None,
    "same_mobile_and_fixed_line_pattern": False,
    "main_country_for_code": False,
    "leading_zero_possible": False,
}


@dataclass(frozen=True, slots=True)
class MetadataFilter:
    """Strips fields from resolved territories according to a build profile."""

    strip_example_numbers: bool = False
    kept_number_types: frozenset[str] | None = None
    clear_optional_fields: bool = False

    @classmethod
    def empty(cls) -> MetadataFilter:
        return cls()

    @classmethod
    def for_lite_build(cls) -> MetadataFilter:
        return cls(strip_example_numbers=True)

    @classmethod
    def for_special_build(cls) -> MetadataFilter:
        return cls(kept_number_types=SPECIAL_BUILD_NUMBER_TYPES, clear_optional_fields=True)

    @property
    def is_empty(self) -> bool:
        return (
            not self.strip_example_numbers
            and self.kept_number_types is None
            and not self.clear_optional_fields
        )

    def _filter_desc(self, desc: NumberTypeDesc) -> NumberTypeDesc:
        if self.strip_example_numbers and desc.example_number is not None:
            return replace(desc, example_number=None)
        return desc

    def filter_metadata(self, metadata: TerritoryMetadata) -> TerritoryMetadata:
        if self.is_empty:
            return metadata
        changes: dict[str, object] = {}
        for name in NUMBER_TYPE_FIELDS:
            desc: NumberTypeDesc | None = getattr(metadata, name)
            if desc is None:
                continue
            if self.kept_number_types is not None and name not in self.kept_number_types:
                changes[name] = None
            else:
                changes[name] = self._filter_desc(desc)
        if self.clear_optional_fields:
            changes.update(_SPECIAL_BUILD_CLEARED_FIELDS)
        return replace(metadata, **changes)


def metadata_filter_for_build(lite_build: bool, special_build: bool) -> MetadataFilter:
    if special_build:
        if lite_build:
            raise build_error(
                BuildErrorCode.E_BUILD_FLAGS_CONFLICT,
                "lite_build and special_build may not both be set",
                "lite_build=true,special_build=true",
            )
        return MetadataFilter.for_special_build()
    if lite_build:
        return MetadataFilter.for_lite_build()
    return MetadataFilter.empty()
