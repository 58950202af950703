from __future__ import annotations

import re

from .errors import BuildErrorCode, build_error

_LENGTH_TOKEN_PATTERN = re.compile(r"[0-9]+", flags=re.ASCII)
_MIN_RANGE_SPAN = 2


def _parse_length(token: str, input_text: str) -> int:
    if _LENGTH_TOKEN_PATTERN.fullmatch(token) is None:
        raise build_error(
            BuildErrorCode.E_BUILD_LENGTH_SPEC_MALFORMED,
            f"invalid length token '{token}' in possible length string",
            input_text,
        )
    value = int(token)
    if value <= 0:
        raise build_error(
            BuildErrorCode.E_BUILD_LENGTH_SPEC_MALFORMED,
            f"possible length must be positive, got {value}",
            input_text,
        )
    return value


def _expand_range(token: str, input_text: str) -> range:
    if not token.endswith("]"):
        raise build_error(
            BuildErrorCode.E_BUILD_LENGTH_SPEC_MALFORMED,
            "missing end of range character in possible length string",
            input_text,
        )
    bounds = token[1:-1].split("-")
    if len(bounds) != 2:
        raise build_error(
            BuildErrorCode.E_BUILD_LENGTH_SPEC_MALFORMED,
            "ranges must have exactly one '-' character",
            input_text,
        )
    low = _parse_length(bounds[0], input_text)
    high = _parse_length(bounds[1], input_text)
    # [6-7] must be written as 6,7
    if high - low < _MIN_RANGE_SPAN:
        raise build_error(
            BuildErrorCode.E_BUILD_LENGTH_SPEC_MALFORMED,
            "the first number in a range must be two or more lower than the second",
            input_text,
        )
    return range(low, high + 1)


def parse_possible_lengths(input_text: str) -> frozenset[int]:
    """Parse a possible-length string such as ``"4,[6-9],12"`` into a set of lengths.

    Tokens are comma separated; each is a positive integer or an inclusive ``[min-max]``
    range. Every length may appear at most once across all tokens.
    """
    if not input_text:
        raise build_error(
            BuildErrorCode.E_BUILD_LENGTH_SPEC_MALFORMED,
            "empty possible length string",
            input_text,
        )

    seen: set[int] = set()
    for token in input_text.split(","):
        if not token:
            raise build_error(
                BuildErrorCode.E_BUILD_LENGTH_SPEC_MALFORMED,
                "leading, trailing or adjacent commas in possible length string",
                input_text,
            )
        if token.startswith("["):
            values: range | tuple[int, ...] = _expand_range(token, input_text)
        else:
            values = (_parse_length(token, input_text),)
        for value in values:
            if value in seen:
                raise build_error(
                    BuildErrorCode.E_BUILD_LENGTH_SPEC_MALFORMED,
                    f"duplicate length element found ({value})",
                    input_text,
                    witness=(str(value),),
                )
            seen.add(value)
    return frozenset(seen)


def sorted_lengths(values: frozenset[int] | set[int]) -> tuple[int, ...]:
    return tuple(sorted(values))
