from __future__ import annotations

from typing import Final

# Territory attributes.
ID: Final[str] = "id"
COUNTRY_CODE: Final[str] = "countryCode"
INTERNATIONAL_PREFIX: Final[str] = "internationalPrefix"
PREFERRED_INTERNATIONAL_PREFIX: Final[str] = "preferredInternationalPrefix"
NATIONAL_PREFIX: Final[str] = "nationalPrefix"
NATIONAL_PREFIX_FOR_PARSING: Final[str] = "nationalPrefixForParsing"
NATIONAL_PREFIX_TRANSFORM_RULE: Final[str] = "nationalPrefixTransformRule"
PREFERRED_EXTN_PREFIX: Final[str] = "preferredExtnPrefix"
MAIN_COUNTRY_FOR_CODE: Final[str] = "mainCountryForCode"
LEADING_ZERO_POSSIBLE: Final[str] = "leadingZeroPossible"
LEADING_DIGITS: Final[str] = "leadingDigits"

# Formatting.
NUMBER_FORMAT: Final[str] = "numberFormat"
PATTERN: Final[str] = "pattern"
FORMAT: Final[str] = "format"
INTL_FORMAT: Final[str] = "intlFormat"
NATIONAL_PREFIX_FORMATTING_RULE: Final[str] = "nationalPrefixFormattingRule"
NATIONAL_PREFIX_OPTIONAL_WHEN_FORMATTING: Final[str] = "nationalPrefixOptionalWhenFormatting"
CARRIER_CODE_FORMATTING_RULE: Final[str] = "carrierCodeFormattingRule"
INTL_FORMAT_NOT_APPLICABLE: Final[str] = "NA"
NATIONAL_PREFIX_TOKEN: Final[str] = "$NP"
FIRST_GROUP_TOKEN: Final[str] = "$FG"
FIRST_GROUP_REPLACEMENT: Final[str] = "${1}"

# Number descriptions.
GENERAL_DESC: Final[str] = "generalDesc"
NATIONAL_NUMBER_PATTERN: Final[str] = "nationalNumberPattern"
EXAMPLE_NUMBER: Final[str] = "exampleNumber"
POSSIBLE_LENGTHS: Final[str] = "possibleLengths"
NATIONAL: Final[str] = "national"
LOCAL_ONLY: Final[str] = "localOnly"

FIXED_LINE: Final[str] = "fixedLine"
MOBILE: Final[str] = "mobile"
TOLL_FREE: Final[str] = "tollFree"
PREMIUM_RATE: Final[str] = "premiumRate"
SHARED_COST: Final[str] = "sharedCost"
PERSONAL_NUMBER: Final[str] = "personalNumber"
VOIP: Final[str] = "voip"
PAGER: Final[str] = "pager"
UAN: Final[str] = "uan"
EMERGENCY: Final[str] = "emergency"
VOICEMAIL: Final[str] = "voicemail"
SHORT_CODE: Final[str] = "shortCode"
STANDARD_RATE: Final[str] = "standardRate"
CARRIER_SPECIFIC: Final[str] = "carrierSpecific"
NO_INTERNATIONAL_DIALLING: Final[str] = "noInternationalDialling"

# (element tag, TerritoryMetadata field) pairs resolved for each record variant.
STANDARD_NUMBER_TYPES: Final[tuple[tuple[str, str], ...]] = (
    (FIXED_LINE, "fixed_line"),
    (MOBILE, "mobile"),
    (TOLL_FREE, "toll_free"),
    (PREMIUM_RATE, "premium_rate"),
    (SHARED_COST, "shared_cost"),
    (PERSONAL_NUMBER, "personal_number"),
    (VOIP, "voip"),
    (PAGER, "pager"),
    (UAN, "uan"),
    (VOICEMAIL, "voicemail"),
    (EMERGENCY, "emergency"),
    (NO_INTERNATIONAL_DIALLING, "no_international_dialling"),
)
SHORT_NUMBER_TYPES: Final[tuple[tuple[str, str], ...]] = (
    (TOLL_FREE, "toll_free"),
    (PREMIUM_RATE, "premium_rate"),
    (STANDARD_RATE, "standard_rate"),
    (SHORT_CODE, "short_code"),
    (CARRIER_SPECIFIC, "carrier_specific"),
    (EMERGENCY, "emergency"),
)
