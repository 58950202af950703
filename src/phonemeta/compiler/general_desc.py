from __future__ import annotations

from typing import Final

from phonemeta.document import MetadataElement
from phonemeta.metadata import NumberTypeDesc
from phonemeta.parser.errors import BuildErrorCode, build_error

from .descriptors import (
    collect_possible_lengths,
    read_pattern_and_example,
    resolve_possible_lengths,
    single_element,
)
from .tags import GENERAL_DESC, NO_INTERNATIONAL_DIALLING, SHORT_CODE

# Number descriptions with no matching number type; they never widen the general desc.
EXCLUDED_FROM_GENERAL_DESC: Final[frozenset[str]] = frozenset({NO_INTERNATIONAL_DIALLING})


def _standard_lengths(territory: MetadataElement) -> tuple[set[int], set[int]]:
    national: set[int] = set()
    local_only: set[int] = set()
    for child in territory.children():
        if child.tag in EXCLUDED_FROM_GENERAL_DESC:
            continue
        child_national, child_local_only = collect_possible_lengths(child)
        national |= child_national
        local_only |= child_local_only
    return national, local_only


def _short_number_lengths(territory: MetadataElement) -> tuple[set[int], set[int]]:
    # Only shortCode contributes; the other short-number types are checked against it.
    short_code = single_element(territory, SHORT_CODE)
    if short_code is None:
        return set(), set()
    national, local_only = collect_possible_lengths(short_code)
    if local_only:
        raise build_error(
            BuildErrorCode.E_BUILD_LOCAL_ONLY_UNEXPECTED,
            "found local-only lengths in short-number metadata",
            ",".join(str(value) for value in sorted(local_only)),
        )
    return national, local_only


def derive_general_desc(
    territory: MetadataElement,
    is_short_number: bool = False,
) -> NumberTypeDesc:
    pattern: str | None = None
    example: str | None = None
    element = single_element(territory, GENERAL_DESC)
    if element is not None:
        declared_national, declared_local_only = collect_possible_lengths(element)
        if declared_national or declared_local_only:
            raise build_error(
                BuildErrorCode.E_BUILD_GENERAL_DESC_LENGTHS,
                "found possible lengths specified at general desc: "
                "these are derived from child elements",
                GENERAL_DESC,
            )
        pattern, example = read_pattern_and_example(element)

    if is_short_number:
        national, local_only = _short_number_lengths(territory)
    else:
        national, local_only = _standard_lengths(territory)

    return NumberTypeDesc(
        national_number_pattern=pattern,
        example_number=example,
        possible_lengths=resolve_possible_lengths(national, local_only, parent=None),
    )
