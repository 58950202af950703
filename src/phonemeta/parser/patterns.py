from __future__ import annotations

import re

from .errors import BuildErrorCode, build_error

_WHITESPACE_PATTERN = re.compile(r"\s")


def validate_pattern(pattern: str, strip_whitespace: bool = False) -> str:
    """Check that ``pattern`` compiles and return it, optionally with all whitespace removed."""
    candidate = _WHITESPACE_PATTERN.sub("", pattern) if strip_whitespace else pattern
    try:
        re.compile(candidate)
    except re.error as exc:
        raise build_error(
            BuildErrorCode.E_BUILD_PATTERN_INVALID,
            f"invalid regular expression: {exc}",
            candidate,
        ) from exc
    return candidate
