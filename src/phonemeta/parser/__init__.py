from .errors import BuildError, BuildErrorCode, BuildErrorDetail
from .lengths import parse_possible_lengths, sorted_lengths
from .patterns import validate_pattern

__all__ = [
    "BuildError",
    "BuildErrorCode",
    "BuildErrorDetail",
    "parse_possible_lengths",
    "sorted_lengths",
    "validate_pattern",
]
