from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from phonemeta.compiler import resolve_possible_lengths
from phonemeta.metadata import PossibleLengths
from phonemeta.parser import BuildError, BuildErrorCode

pytestmark = pytest.mark.property

_LENGTHS = st.integers(min_value=1, max_value=17)


@st.composite
def _parent_and_subset(draw: st.DrawFn) -> tuple[PossibleLengths, frozenset[int]]:
    national = draw(st.frozensets(_LENGTHS, min_size=1, max_size=8))
    subset = draw(st.frozensets(st.sampled_from(sorted(national)), min_size=1))
    return PossibleLengths(national=tuple(national)), subset


@given(case=_parent_and_subset())
def test_subset_lengths_resolve_and_expand_to_themselves(
    case: tuple[PossibleLengths, frozenset[int]],
) -> None:
    parent, subset = case
    resolved = resolve_possible_lengths(subset, frozenset(), parent)

    assert resolved.effective_national(parent) == tuple(sorted(subset))
    assert resolved.inherits_parent == (tuple(sorted(subset)) == parent.national)
    assert not resolved.is_absent_marker


@given(
    national=st.frozensets(_LENGTHS, min_size=1, max_size=8),
    extra=_LENGTHS,
)
def test_length_outside_parent_is_not_covered(national: frozenset[int], extra: int) -> None:
    parent = PossibleLengths(national=tuple(national))
    if extra in national:
        extra = max(national) + 1

    with pytest.raises(BuildError) as exc_info:
        resolve_possible_lengths(national | {extra}, frozenset(), parent)

    assert exc_info.value.detail.code == BuildErrorCode.E_BUILD_LENGTH_NOT_COVERED.value
    assert exc_info.value.detail.witness == (str(extra),)


@given(
    national=st.frozensets(_LENGTHS, max_size=8),
    local_only=st.frozensets(_LENGTHS, max_size=8),
)
def test_unparented_resolution_keeps_sets_disjoint(
    national: frozenset[int],
    local_only: frozenset[int],
) -> None:
    resolved = resolve_possible_lengths(national, local_only, parent=None)

    assert resolved.national == tuple(sorted(national))
    assert resolved.local_only == tuple(sorted(local_only - national))
    assert not set(resolved.national) & set(resolved.local_only)
