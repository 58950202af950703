from __future__ import annotations

from dataclasses import dataclass

from phonemeta.document import MetadataElement
from phonemeta.metadata import NumberFormatRule
from phonemeta.parser import validate_pattern
from phonemeta.parser.errors import BuildErrorCode, build_error

from .tags import (
    CARRIER_CODE_FORMATTING_RULE,
    FIRST_GROUP_REPLACEMENT,
    FIRST_GROUP_TOKEN,
    FORMAT,
    INTL_FORMAT,
    INTL_FORMAT_NOT_APPLICABLE,
    LEADING_DIGITS,
    NATIONAL_PREFIX,
    NATIONAL_PREFIX_FORMATTING_RULE,
    NATIONAL_PREFIX_OPTIONAL_WHEN_FORMATTING,
    NATIONAL_PREFIX_TOKEN,
    NUMBER_FORMAT,
    PATTERN,
)


@dataclass(frozen=True, slots=True)
class FormatDefaults:
    """Territory-level values inherited by every numberFormat element."""

    national_prefix: str = ""
    national_prefix_formatting_rule: str | None = None
    national_prefix_optional_when_formatting: bool = False
    carrier_code_formatting_rule: str | None = None


@dataclass(frozen=True, slots=True)
class FormatRuleSet:
    number_formats: tuple[NumberFormatRule, ...] = ()
    intl_number_formats: tuple[NumberFormatRule, ...] = ()


def replace_first(text: str, token: str, replacement: str) -> str:
    return text.replace(token, replacement, 1)


def _none_if_empty(value: str) -> str | None:
    return value if value else None


def national_prefix_formatting_rule(element: MetadataElement, national_prefix: str) -> str | None:
    rule = element.get_attribute(NATIONAL_PREFIX_FORMATTING_RULE)
    rule = replace_first(rule, NATIONAL_PREFIX_TOKEN, national_prefix)
    rule = replace_first(rule, FIRST_GROUP_TOKEN, FIRST_GROUP_REPLACEMENT)
    return _none_if_empty(rule)


def carrier_code_formatting_rule(element: MetadataElement, national_prefix: str) -> str | None:
    rule = element.get_attribute(CARRIER_CODE_FORMATTING_RULE)
    rule = replace_first(rule, FIRST_GROUP_TOKEN, FIRST_GROUP_REPLACEMENT)
    rule = replace_first(rule, NATIONAL_PREFIX_TOKEN, national_prefix)
    return _none_if_empty(rule)


def format_defaults(territory: MetadataElement) -> FormatDefaults:
    national_prefix = territory.get_attribute(NATIONAL_PREFIX)
    return FormatDefaults(
        national_prefix=national_prefix,
        national_prefix_formatting_rule=national_prefix_formatting_rule(territory, national_prefix),
        national_prefix_optional_when_formatting=territory.has_attribute(
            NATIONAL_PREFIX_OPTIONAL_WHEN_FORMATTING
        ),
        carrier_code_formatting_rule=carrier_code_formatting_rule(territory, national_prefix),
    )


def leading_digits_patterns(element: MetadataElement) -> tuple[str, ...]:
    return tuple(
        validate_pattern(node.text, strip_whitespace=True)
        for node in element.find_all(LEADING_DIGITS)
    )


def resolve_national_format(
    element: MetadataElement,
    defaults: FormatDefaults,
) -> NumberFormatRule:
    if element.has_attribute(NATIONAL_PREFIX_FORMATTING_RULE):
        np_rule = national_prefix_formatting_rule(element, defaults.national_prefix)
        np_optional = element.has_attribute(NATIONAL_PREFIX_OPTIONAL_WHEN_FORMATTING)
    else:
        np_rule = defaults.national_prefix_formatting_rule
        np_optional = defaults.national_prefix_optional_when_formatting

    if element.has_attribute(CARRIER_CODE_FORMATTING_RULE):
        carrier_rule = carrier_code_formatting_rule(element, defaults.national_prefix)
    else:
        carrier_rule = defaults.carrier_code_formatting_rule

    pattern = validate_pattern(element.get_attribute(PATTERN))
    formats = element.find_all(FORMAT)
    if len(formats) != 1:
        raise build_error(
            BuildErrorCode.E_BUILD_FORMAT_COUNT,
            f"expected exactly one format pattern per numberFormat, found {len(formats)}",
            pattern,
            witness=(str(len(formats)),),
        )
    return NumberFormatRule(
        pattern=pattern,
        format=formats[0].text,
        leading_digits_patterns=leading_digits_patterns(element),
        national_prefix_formatting_rule=np_rule,
        national_prefix_optional_when_formatting=np_optional,
        domestic_carrier_code_formatting_rule=carrier_rule,
    )


def resolve_international_format(
    element: MetadataElement,
    national: NumberFormatRule,
) -> tuple[NumberFormatRule | None, bool]:
    """Return the international rule for a numberFormat and whether it was explicit.

    Without an intlFormat child the national template is reused; ``"NA"`` suppresses the
    rule. Both explicit outcomes report ``True``.
    """
    intl_formats = element.find_all(INTL_FORMAT)
    if len(intl_formats) > 1:
        raise build_error(
            BuildErrorCode.E_BUILD_INTL_FORMAT_DUPLICATE,
            "a maximum of one intlFormat pattern for a numberFormat element is allowed",
            national.pattern,
            witness=(str(len(intl_formats)),),
        )
    if not intl_formats:
        template: str | None = national.format
        explicit = False
    else:
        value = intl_formats[0].text
        template = None if value == INTL_FORMAT_NOT_APPLICABLE else value
        explicit = True

    if template is None:
        return (None, explicit)
    rule = NumberFormatRule(
        pattern=national.pattern,
        format=template,
        leading_digits_patterns=national.leading_digits_patterns,
    )
    return (rule, explicit)


def resolve_number_formats(
    territory: MetadataElement,
    defaults: FormatDefaults,
) -> FormatRuleSet:
    number_formats: list[NumberFormatRule] = []
    intl_number_formats: list[NumberFormatRule] = []
    has_explicit_intl_format = False
    for element in territory.find_all(NUMBER_FORMAT):
        national = resolve_national_format(element, defaults)
        number_formats.append(national)
        intl, explicit = resolve_international_format(element, national)
        if intl is not None:
            intl_number_formats.append(intl)
        has_explicit_intl_format = has_explicit_intl_format or explicit

    # No intlFormat anywhere: international formatting reuses number_formats.
    if not has_explicit_intl_format:
        intl_number_formats = []
    return FormatRuleSet(
        number_formats=tuple(number_formats),
        intl_number_formats=tuple(intl_number_formats),
    )
