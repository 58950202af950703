from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from phonemeta.document import MetadataElement
from phonemeta.metadata import NumberTypeDesc, TerritoryMetadata
from phonemeta.parser import BuildError, validate_pattern
from phonemeta.parser.errors import BuildErrorCode, build_error

from .descriptors import resolve_number_desc
from .formats import format_defaults, resolve_number_formats
from .general_desc import derive_general_desc
from .tags import (
    COUNTRY_CODE,
    INTERNATIONAL_PREFIX,
    LEADING_DIGITS,
    LEADING_ZERO_POSSIBLE,
    MAIN_COUNTRY_FOR_CODE,
    NATIONAL_PREFIX,
    NATIONAL_PREFIX_FOR_PARSING,
    NATIONAL_PREFIX_TRANSFORM_RULE,
    PREFERRED_EXTN_PREFIX,
    PREFERRED_INTERNATIONAL_PREFIX,
    SHORT_NUMBER_TYPES,
    STANDARD_NUMBER_TYPES,
)

logger = logging.getLogger(__name__)

_COUNTRY_CODE_PATTERN = re.compile(r"[0-9]+", flags=re.ASCII)


@dataclass(frozen=True, slots=True)
class _TerritoryAttributes:
    country_code: int
    leading_digits: str | None
    international_prefix: str | None
    preferred_international_prefix: str | None
    national_prefix: str | None
    national_prefix_for_parsing: str | None
    national_prefix_transform_rule: str | None
    preferred_extn_prefix: str | None
    main_country_for_code: bool
    leading_zero_possible: bool


def _optional_attribute(element: MetadataElement, name: str) -> str | None:
    if element.has_attribute(name):
        return element.get_attribute(name)
    return None


def parse_country_code(input_text: str) -> int:
    if _COUNTRY_CODE_PATTERN.fullmatch(input_text) is None:
        raise build_error(
            BuildErrorCode.E_BUILD_COUNTRY_CODE_INVALID,
            "country calling code must be a decimal integer",
            input_text,
        )
    return int(input_text)


def _territory_attributes(element: MetadataElement) -> _TerritoryAttributes:
    leading_digits = _optional_attribute(element, LEADING_DIGITS)
    international_prefix = _optional_attribute(element, INTERNATIONAL_PREFIX)

    prefix_for_parsing: str | None = None
    transform_rule: str | None = None
    if element.has_attribute(NATIONAL_PREFIX_FOR_PARSING):
        prefix_for_parsing = validate_pattern(
            element.get_attribute(NATIONAL_PREFIX_FOR_PARSING), strip_whitespace=True
        )
        # A transform rule is meaningless without the prefix it rewrites.
        if element.has_attribute(NATIONAL_PREFIX_TRANSFORM_RULE):
            transform_rule = validate_pattern(element.get_attribute(NATIONAL_PREFIX_TRANSFORM_RULE))

    national_prefix = element.get_attribute(NATIONAL_PREFIX) or None
    if national_prefix is not None and prefix_for_parsing is None:
        prefix_for_parsing = national_prefix

    return _TerritoryAttributes(
        country_code=parse_country_code(element.get_attribute(COUNTRY_CODE)),
        leading_digits=None if leading_digits is None else validate_pattern(leading_digits),
        international_prefix=(
            None if international_prefix is None else validate_pattern(international_prefix)
        ),
        preferred_international_prefix=_optional_attribute(element, PREFERRED_INTERNATIONAL_PREFIX),
        national_prefix=national_prefix,
        national_prefix_for_parsing=prefix_for_parsing,
        national_prefix_transform_rule=transform_rule,
        preferred_extn_prefix=_optional_attribute(element, PREFERRED_EXTN_PREFIX),
        main_country_for_code=element.has_attribute(MAIN_COUNTRY_FOR_CODE),
        leading_zero_possible=element.has_attribute(LEADING_ZERO_POSSIBLE),
    )


def _resolve_number_types(
    element: MetadataElement,
    general_desc: NumberTypeDesc,
    is_short_number: bool,
) -> dict[str, NumberTypeDesc]:
    number_types = SHORT_NUMBER_TYPES if is_short_number else STANDARD_NUMBER_TYPES
    return {
        field_name: resolve_number_desc(element, tag, general_desc)
        for tag, field_name in number_types
    }


def _territory_label(region_code: str, element: MetadataElement) -> str:
    if region_code:
        return region_code
    return element.get_attribute(COUNTRY_CODE) or "<unknown>"


def compile_territory(
    region_code: str,
    element: MetadataElement,
    *,
    is_short_number: bool = False,
    is_alternate_formats: bool = False,
) -> TerritoryMetadata:
    """Resolve one territory record into a validated TerritoryMetadata value.

    Alternate-formats records only carry formatting rules, so their typed number
    descriptions are left unresolved. Any failure aborts the whole record.
    """
    label = _territory_label(region_code, element)
    try:
        attributes = _territory_attributes(element)
        rule_set = resolve_number_formats(element, format_defaults(element))
        general_desc = derive_general_desc(element, is_short_number=is_short_number)
        number_types: dict[str, NumberTypeDesc] = {}
        same_mobile_and_fixed_line = False
        if not is_alternate_formats:
            number_types = _resolve_number_types(element, general_desc, is_short_number)
            if not is_short_number:
                same_mobile_and_fixed_line = (
                    number_types["mobile"].national_number_pattern
                    == number_types["fixed_line"].national_number_pattern
                )
    except BuildError as exc:
        logger.error("territory %s rejected: %s", label, exc.detail.message)
        tagged = exc.with_territory(label)
        if tagged is exc:
            raise
        raise tagged from exc

    logger.debug(
        "compiled territory %s: %d number formats, %d intl formats, %d number types",
        label,
        len(rule_set.number_formats),
        len(rule_set.intl_number_formats),
        len(number_types),
    )
    return TerritoryMetadata(
        id=region_code,
        country_code=attributes.country_code,
        general_desc=general_desc,
        international_prefix=attributes.international_prefix,
        preferred_international_prefix=attributes.preferred_international_prefix,
        national_prefix=attributes.national_prefix,
        preferred_extn_prefix=attributes.preferred_extn_prefix,
        national_prefix_for_parsing=attributes.national_prefix_for_parsing,
        national_prefix_transform_rule=attributes.national_prefix_transform_rule,
        same_mobile_and_fixed_line_pattern=same_mobile_and_fixed_line,
        number_formats=rule_set.number_formats,
        intl_number_formats=rule_set.intl_number_formats,
        main_country_for_code=attributes.main_country_for_code,
        leading_digits=attributes.leading_digits,
        leading_zero_possible=attributes.leading_zero_possible,
        **number_types,
    )
