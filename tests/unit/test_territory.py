from __future__ import annotations

import logging
from xml.etree import ElementTree as ET

import pytest

from phonemeta.compiler import compile_territory, resolve_number_desc
from phonemeta.compiler.territory import parse_country_code
from phonemeta.document import MetadataElement, XmlElement
from phonemeta.metadata import NumberTypeDesc, PossibleLengths
from phonemeta.parser import BuildError, BuildErrorCode

pytestmark = pytest.mark.unit

GB_TERRITORY = r"""
<territory id="GB" countryCode="44" internationalPrefix="00" nationalPrefix="0"
           nationalPrefixFormattingRule="$NP$FG" preferredExtnPrefix=" ext. ">
  <availableFormats>
    <numberFormat pattern="(\d{4})(\d{6})">
      <leadingDigits>7</leadingDigits>
      <format>$1 $2</format>
    </numberFormat>
  </availableFormats>
  <generalDesc>
    <nationalNumberPattern>[1-9]\d{9}</nationalNumberPattern>
  </generalDesc>
  <fixedLine>
    <possibleLengths national="10"/>
    <exampleNumber>1212345678</exampleNumber>
    <nationalNumberPattern>[1-6]\d{9}</nationalNumberPattern>
  </fixedLine>
  <mobile>
    <possibleLengths national="10"/>
    <exampleNumber>7400123456</exampleNumber>
    <nationalNumberPattern>7\d{9}</nationalNumberPattern>
  </mobile>
</territory>
"""


def _element(xml: str) -> MetadataElement:
    return XmlElement(ET.fromstring(xml))


def test_standard_territory_compiles_with_compressed_lengths() -> None:
    metadata = compile_territory("GB", _element(GB_TERRITORY))

    assert metadata.id == "GB"
    assert metadata.country_code == 44
    assert metadata.international_prefix == "00"
    assert metadata.national_prefix == "0"
    assert metadata.national_prefix_for_parsing == "0"
    assert metadata.preferred_extn_prefix == " ext. "
    assert metadata.general_desc == NumberTypeDesc(
        national_number_pattern=r"[1-9]\d{9}",
        possible_lengths=PossibleLengths(national=(10,)),
    )
    assert metadata.fixed_line is not None
    assert metadata.fixed_line.possible_lengths == PossibleLengths()
    assert metadata.mobile is not None
    assert metadata.mobile.possible_lengths == PossibleLengths()
    assert metadata.same_mobile_and_fixed_line_pattern is False
    assert metadata.toll_free == NumberTypeDesc.absent()
    assert metadata.no_international_dialling == NumberTypeDesc.absent()
    assert metadata.number_formats[0].national_prefix_formatting_rule == "0${1}"
    assert metadata.intl_number_formats == ()


def test_standard_territory_resolves_standard_types_only() -> None:
    metadata = compile_territory("GB", _element(GB_TERRITORY))
    resolved = {name for name, _ in metadata.number_types()}

    assert len(resolved) == 12
    assert "short_code" not in resolved
    assert metadata.short_code is None
    assert metadata.emergency == NumberTypeDesc.absent()


def test_standard_territory_resolves_emergency() -> None:
    element = _element(
        """<territory id="GB" countryCode="44">
          <fixedLine><possibleLengths national="10"/></fixedLine>
          <emergency><possibleLengths national="10"/><exampleNumber>999</exampleNumber></emergency>
        </territory>"""
    )
    metadata = compile_territory("GB", element)

    assert metadata.emergency == NumberTypeDesc(
        example_number="999",
        possible_lengths=PossibleLengths(),
    )


def test_standard_territory_emergency_lengths_join_general_desc() -> None:
    element = _element(
        """<territory id="GB" countryCode="44">
          <fixedLine><possibleLengths national="10"/></fixedLine>
          <emergency><possibleLengths national="3"/></emergency>
        </territory>"""
    )
    metadata = compile_territory("GB", element)

    assert metadata.general_desc.possible_lengths.national == (3, 10)
    assert metadata.emergency is not None
    assert metadata.emergency.possible_lengths == PossibleLengths(national=(3,))

    general = NumberTypeDesc(possible_lengths=PossibleLengths(national=(10,)))
    with pytest.raises(BuildError) as exc_info:
        resolve_number_desc(element, "emergency", general)

    assert exc_info.value.detail.code == BuildErrorCode.E_BUILD_LENGTH_NOT_COVERED.value
    assert exc_info.value.detail.witness == ("3",)


def test_typed_local_only_lengths_feed_general_desc_only() -> None:
    element = _element(
        """<territory id="GB" countryCode="44">
          <fixedLine><possibleLengths national="10" localOnly="6"/></fixedLine>
          <noInternationalDialling><possibleLengths national="10" localOnly="7"/></noInternationalDialling>
        </territory>"""
    )
    metadata = compile_territory("GB", element)

    assert metadata.general_desc.possible_lengths == PossibleLengths(
        national=(10,),
        local_only=(6,),
    )
    assert metadata.fixed_line is not None
    assert metadata.fixed_line.possible_lengths == PossibleLengths()
    assert metadata.no_international_dialling is not None
    assert metadata.no_international_dialling.possible_lengths == PossibleLengths()


def test_identical_patterns_set_same_mobile_and_fixed_line_flag() -> None:
    element = _element(
        r"""<territory id="AA" countryCode="999">
          <fixedLine><possibleLengths national="8"/><nationalNumberPattern>\d{8}</nationalNumberPattern></fixedLine>
          <mobile><possibleLengths national="8,9"/><nationalNumberPattern>\d{8}</nationalNumberPattern></mobile>
        </territory>"""
    )
    metadata = compile_territory("AA", element)

    assert metadata.same_mobile_and_fixed_line_pattern is True
    assert metadata.fixed_line is not None
    assert metadata.fixed_line.possible_lengths.national == (8,)
    assert metadata.mobile is not None
    assert metadata.mobile.possible_lengths.national == ()


def test_missing_mobile_and_fixed_line_patterns_compare_equal() -> None:
    metadata = compile_territory("AA", _element("<territory id='AA' countryCode='999'/>"))

    assert metadata.same_mobile_and_fixed_line_pattern is True


def test_national_prefix_for_parsing_and_transform_rule() -> None:
    element = _element(
        "<territory id='AR' countryCode='54' nationalPrefix='0'"
        " nationalPrefixForParsing='0?(?:\n  (11|2)\n)?15'"
        " nationalPrefixTransformRule='9$1'/>"
    )
    metadata = compile_territory("AR", element)

    assert metadata.national_prefix_for_parsing == "0?(?:(11|2))?15"
    assert metadata.national_prefix_transform_rule == "9$1"


def test_transform_rule_without_prefix_for_parsing_is_ignored() -> None:
    element = _element(
        "<territory id='AA' countryCode='999' nationalPrefixTransformRule='9$1'/>"
    )
    metadata = compile_territory("AA", element)

    assert metadata.national_prefix_for_parsing is None
    assert metadata.national_prefix_transform_rule is None


def test_flags_and_optional_attributes() -> None:
    element = _element(
        "<territory id='IT' countryCode='39' mainCountryForCode='true' leadingZeroPossible='true'"
        " leadingDigits='0' preferredInternationalPrefix='00'/>"
    )
    metadata = compile_territory("IT", element)

    assert metadata.main_country_for_code is True
    assert metadata.leading_zero_possible is True
    assert metadata.leading_digits == "0"
    assert metadata.preferred_international_prefix == "00"
    assert metadata.national_prefix is None
    assert metadata.international_prefix is None


@pytest.mark.parametrize("raw", ["", "+44", "4a", " 44"])
def test_country_code_must_be_decimal(raw: str) -> None:
    with pytest.raises(BuildError) as exc_info:
        parse_country_code(raw)

    assert exc_info.value.detail.code == BuildErrorCode.E_BUILD_COUNTRY_CODE_INVALID.value
    assert exc_info.value.detail.input_text == raw


def test_errors_are_tagged_with_region_code(caplog: pytest.LogCaptureFixture) -> None:
    element = _element(
        "<territory id='GB' countryCode='44'>"
        "<mobile><possibleLengths national='10,10'/></mobile>"
        "</territory>"
    )
    with caplog.at_level(logging.ERROR, logger="phonemeta.compiler.territory"):
        with pytest.raises(BuildError) as exc_info:
            compile_territory("GB", element)

    detail = exc_info.value.detail
    assert detail.code == BuildErrorCode.E_BUILD_LENGTH_SPEC_MALFORMED.value
    assert detail.territory_id == "GB"
    assert "(territory 'GB')" in str(exc_info.value)
    assert "territory GB rejected" in caplog.text


def test_errors_without_region_code_use_country_code_label() -> None:
    element = _element("<territory countryCode='800'><generalDesc/><generalDesc/></territory>")
    with pytest.raises(BuildError) as exc_info:
        compile_territory("", element)

    assert exc_info.value.detail.territory_id == "800"


def test_invalid_international_prefix_is_rejected() -> None:
    element = _element("<territory id='AA' countryCode='999' internationalPrefix='0(0'/>")
    with pytest.raises(BuildError) as exc_info:
        compile_territory("AA", element)

    assert exc_info.value.detail.code == BuildErrorCode.E_BUILD_PATTERN_INVALID.value


def test_short_number_territory_resolves_short_types() -> None:
    element = _element(
        r"""<territory id="GB" countryCode="44">
          <generalDesc><nationalNumberPattern>[1-9]\d{2,5}</nationalNumberPattern></generalDesc>
          <tollFree><possibleLengths national="6"/></tollFree>
          <shortCode><possibleLengths national="[3-6]"/></shortCode>
          <emergency><possibleLengths national="3"/><exampleNumber>999</exampleNumber></emergency>
        </territory>"""
    )
    metadata = compile_territory("GB", element, is_short_number=True)

    assert metadata.general_desc.possible_lengths.national == (3, 4, 5, 6)
    assert {name for name, _ in metadata.number_types()} == {
        "toll_free",
        "premium_rate",
        "standard_rate",
        "short_code",
        "carrier_specific",
        "emergency",
    }
    assert metadata.short_code is not None
    assert metadata.short_code.possible_lengths == PossibleLengths()
    assert metadata.emergency is not None
    assert metadata.emergency.example_number == "999"
    assert metadata.premium_rate == NumberTypeDesc.absent()
    assert metadata.fixed_line is None
    assert metadata.same_mobile_and_fixed_line_pattern is False


def test_alternate_formats_territory_skips_number_types() -> None:
    element = _element(
        r"""<territory countryCode="49">
          <availableFormats>
            <numberFormat pattern="(\d{3})(\d{4,11})"><format>$1 $2</format></numberFormat>
          </availableFormats>
          <fixedLine><possibleLengths national="[5-15]"/></fixedLine>
        </territory>"""
    )
    metadata = compile_territory("", element, is_alternate_formats=True)

    assert metadata.id == ""
    assert metadata.country_code == 49
    assert metadata.number_types() == ()
    assert metadata.general_desc.possible_lengths.national == tuple(range(5, 16))
    assert len(metadata.number_formats) == 1
