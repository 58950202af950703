from __future__ import annotations

from collections.abc import Iterable

from phonemeta.document import MetadataElement
from phonemeta.metadata import NumberTypeDesc, PossibleLengths
from phonemeta.parser import parse_possible_lengths, sorted_lengths, validate_pattern
from phonemeta.parser.errors import BuildErrorCode, build_error

from .tags import EXAMPLE_NUMBER, LOCAL_ONLY, NATIONAL, NATIONAL_NUMBER_PATTERN, POSSIBLE_LENGTHS


def _lengths_text(values: Iterable[int]) -> str:
    return ",".join(str(value) for value in sorted(values))


def single_element(territory: MetadataElement, tag: str) -> MetadataElement | None:
    matches = territory.find_all(tag)
    if not matches:
        return None
    if len(matches) > 1:
        raise build_error(
            BuildErrorCode.E_BUILD_TYPE_DUPLICATE,
            f"multiple elements with type {tag} found",
            tag,
            witness=(str(len(matches)),),
        )
    return matches[0]


def collect_possible_lengths(element: MetadataElement) -> tuple[set[int], set[int]]:
    """Union the national and local-only lengths of every possibleLengths node under element.

    Duplicates across nodes are merged; a length declared both national and local-only on
    the same node is rejected.
    """
    national: set[int] = set()
    local_only: set[int] = set()
    for node in element.find_all(POSSIBLE_LENGTHS):
        node_national = parse_possible_lengths(node.get_attribute(NATIONAL))
        if node.has_attribute(LOCAL_ONLY):
            raw_local_only = node.get_attribute(LOCAL_ONLY)
            node_local_only = parse_possible_lengths(raw_local_only)
            overlap = node_national & node_local_only
            if overlap:
                raise build_error(
                    BuildErrorCode.E_BUILD_LENGTH_SETS_OVERLAP,
                    "possible length(s) found specified as a normal and local-only length: "
                    f"{_lengths_text(overlap)}",
                    raw_local_only,
                    witness=tuple(str(value) for value in sorted(overlap)),
                )
            local_only |= node_local_only
        national |= node_national
    return national, local_only


def resolve_possible_lengths(
    national: set[int] | frozenset[int],
    local_only: set[int] | frozenset[int],
    parent: PossibleLengths | None,
) -> PossibleLengths:
    """Check lengths against the parent descriptor and compress them.

    National lengths identical to the parent's are stored as ``()``. Local-only lengths that
    are also national here are dropped, since a sibling type may dial them nationally.
    """
    ordered_national = sorted_lengths(frozenset(national))
    stored_national: tuple[int, ...] = ()
    if parent is None or ordered_national != parent.national:
        for length in ordered_national:
            if parent is not None and length not in parent.national:
                raise build_error(
                    BuildErrorCode.E_BUILD_LENGTH_NOT_COVERED,
                    f"out-of-range possible length found ({length}), "
                    f"parent lengths {_lengths_text(parent.national)}",
                    _lengths_text(ordered_national),
                    witness=(str(length),),
                )
        stored_national = ordered_national

    stored_local_only: list[int] = []
    for length in sorted(local_only):
        if length in national:
            continue
        if parent is None or length in parent.local_only or length in parent.national:
            stored_local_only.append(length)
            continue
        raise build_error(
            BuildErrorCode.E_BUILD_LENGTH_NOT_COVERED,
            f"out-of-range local-only possible length found ({length}), "
            f"parent local-only lengths {_lengths_text(parent.local_only)}",
            _lengths_text(local_only),
            witness=(str(length),),
        )
    return PossibleLengths(national=stored_national, local_only=tuple(stored_local_only))


def read_pattern_and_example(element: MetadataElement) -> tuple[str | None, str | None]:
    pattern: str | None = None
    example: str | None = None
    patterns = element.find_all(NATIONAL_NUMBER_PATTERN)
    if patterns:
        pattern = validate_pattern(patterns[0].text, strip_whitespace=True)
    examples = element.find_all(EXAMPLE_NUMBER)
    if examples:
        example = examples[0].text
    return (pattern, example)


def resolve_number_desc(
    territory: MetadataElement,
    type_tag: str,
    general_desc: NumberTypeDesc,
) -> NumberTypeDesc:
    element = single_element(territory, type_tag)
    if element is None:
        # -1 never matches a real length; () is reserved for "same as general desc".
        return NumberTypeDesc.absent()

    # Local-only lengths of a typed element only feed the general desc.
    national, _ = collect_possible_lengths(element)
    lengths = resolve_possible_lengths(national, set(), general_desc.possible_lengths)
    pattern, example = read_pattern_and_example(element)
    return NumberTypeDesc(
        national_number_pattern=pattern,
        example_number=example,
        possible_lengths=lengths,
    )
