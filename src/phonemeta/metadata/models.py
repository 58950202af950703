from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final

ABSENT_TYPE_LENGTH: Final[int] = -1

# Field names of TerritoryMetadata holding a NumberTypeDesc, in canonical order.
NUMBER_TYPE_FIELDS: Final[tuple[str, ...]] = (
    "fixed_line",
    "mobile",
    "toll_free",
    "premium_rate",
    "shared_cost",
    "personal_number",
    "voip",
    "pager",
    "uan",
    "emergency",
    "voicemail",
    "short_code",
    "standard_rate",
    "carrier_specific",
    "no_international_dialling",
)


def _canonical_lengths(values: tuple[int, ...], owner: str) -> tuple[int, ...]:
    canonical = tuple(sorted(set(values)))
    if len(canonical) != len(values):
        raise ValueError(f"{owner} must not contain duplicate lengths")
    return canonical


@dataclass(frozen=True, slots=True)
class PossibleLengths:
    """National and local-only dial-string lengths of one number type.

    An empty ``national`` tuple means the general descriptor's lengths apply; the single
    value ``-1`` marks a number type that does not exist for the territory.
    """

    national: tuple[int, ...] = ()
    local_only: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        national = _canonical_lengths(self.national, "national lengths")
        local_only = _canonical_lengths(self.local_only, "local-only lengths")
        overlap = set(national) & set(local_only)
        if overlap:
            raise ValueError(
                f"national and local-only lengths must be disjoint: {sorted(overlap)}"
            )
        object.__setattr__(self, "national", national)
        object.__setattr__(self, "local_only", local_only)

    @property
    def is_absent_marker(self) -> bool:
        return self.national == (ABSENT_TYPE_LENGTH,)

    @property
    def inherits_parent(self) -> bool:
        return not self.national

    def effective_national(self, parent: PossibleLengths) -> tuple[int, ...]:
        if self.inherits_parent:
            return parent.national
        return self.national


@dataclass(frozen=True, slots=True)
class NumberTypeDesc:
    national_number_pattern: str | None = None
    example_number: str | None = None
    possible_lengths: PossibleLengths = field(default_factory=PossibleLengths)

    @classmethod
    def absent(cls) -> NumberTypeDesc:
        return cls(possible_lengths=PossibleLengths(national=(ABSENT_TYPE_LENGTH,)))


@dataclass(frozen=True, slots=True)
class NumberFormatRule:
    pattern: str
    format: str
    leading_digits_patterns: tuple[str, ...] = ()
    national_prefix_formatting_rule: str | None = None
    national_prefix_optional_when_formatting: bool = False
    domestic_carrier_code_formatting_rule: str | None = None


@dataclass(frozen=True, slots=True)
class TerritoryMetadata:
    id: str
    country_code: int
    general_desc: NumberTypeDesc = field(default_factory=NumberTypeDesc)
    fixed_line: NumberTypeDesc | None = None
    mobile: NumberTypeDesc | None = None
    toll_free: NumberTypeDesc | None = None
    premium_rate: NumberTypeDesc | None = None
    shared_cost: NumberTypeDesc | None = None
    personal_number: NumberTypeDesc | None = None
    voip: NumberTypeDesc | None = None
    pager: NumberTypeDesc | None = None
    uan: NumberTypeDesc | None = None
    emergency: NumberTypeDesc | None = None
    voicemail: NumberTypeDesc | None = None
    short_code: NumberTypeDesc | None = None
    standard_rate: NumberTypeDesc | None = None
    carrier_specific: NumberTypeDesc | None = None
    no_international_dialling: NumberTypeDesc | None = None
    international_prefix: str | None = None
    preferred_international_prefix: str | None = None
    national_prefix: str | None = None
    preferred_extn_prefix: str | None = None
    national_prefix_for_parsing: str | None = None
    national_prefix_transform_rule: str | None = None
    same_mobile_and_fixed_line_pattern: bool = False
    number_formats: tuple[NumberFormatRule, ...] = ()
    intl_number_formats: tuple[NumberFormatRule, ...] = ()
    main_country_for_code: bool = False
    leading_digits: str | None = None
    leading_zero_possible: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.country_code, bool) or not isinstance(self.country_code, int):
            raise ValueError("country_code must be an integer")
        object.__setattr__(self, "number_formats", tuple(self.number_formats))
        object.__setattr__(self, "intl_number_formats", tuple(self.intl_number_formats))

    def number_types(self) -> tuple[tuple[str, NumberTypeDesc], ...]:
        """Resolved typed descriptors in canonical order, skipping unresolved ones."""
        resolved: list[tuple[str, NumberTypeDesc]] = []
        for name in NUMBER_TYPE_FIELDS:
            desc = getattr(self, name)
            if desc is not None:
                resolved.append((name, desc))
        return tuple(resolved)


@dataclass(frozen=True, slots=True)
class MetadataCollection:
    territories: tuple[TerritoryMetadata, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "territories", tuple(self.territories))

    def __len__(self) -> int:
        return len(self.territories)

    def by_region(self, region_code: str) -> TerritoryMetadata | None:
        for territory in self.territories:
            if territory.id == region_code:
                return territory
        return None
