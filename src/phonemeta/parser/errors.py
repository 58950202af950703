from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class BuildErrorCode(StrEnum):
    E_BUILD_LENGTH_SPEC_MALFORMED = "E_BUILD_LENGTH_SPEC_MALFORMED"
    E_BUILD_PATTERN_INVALID = "E_BUILD_PATTERN_INVALID"
    E_BUILD_TYPE_DUPLICATE = "E_BUILD_TYPE_DUPLICATE"
    E_BUILD_LENGTH_NOT_COVERED = "E_BUILD_LENGTH_NOT_COVERED"
    E_BUILD_GENERAL_DESC_LENGTHS = "E_BUILD_GENERAL_DESC_LENGTHS"
    E_BUILD_LOCAL_ONLY_UNEXPECTED = "E_BUILD_LOCAL_ONLY_UNEXPECTED"
    E_BUILD_LENGTH_SETS_OVERLAP = "E_BUILD_LENGTH_SETS_OVERLAP"
    E_BUILD_FORMAT_COUNT = "E_BUILD_FORMAT_COUNT"
    E_BUILD_INTL_FORMAT_DUPLICATE = "E_BUILD_INTL_FORMAT_DUPLICATE"
    E_BUILD_FLAGS_CONFLICT = "E_BUILD_FLAGS_CONFLICT"
    E_BUILD_COUNTRY_CODE_INVALID = "E_BUILD_COUNTRY_CODE_INVALID"
    E_BUILD_DOCUMENT_INVALID = "E_BUILD_DOCUMENT_INVALID"


@dataclass(frozen=True, slots=True)
class BuildErrorDetail:
    code: str
    message: str
    input_text: str
    territory_id: str | None = None
    witness: tuple[str, ...] | None = None


class BuildError(ValueError):
    def __init__(self, detail: BuildErrorDetail) -> None:
        super().__init__(_render_message(detail))
        self.detail = detail

    def with_territory(self, territory_id: str) -> BuildError:
        """Return a copy of this error tagged with the territory it was raised for."""
        if self.detail.territory_id is not None:
            return self
        return BuildError(
            BuildErrorDetail(
                code=self.detail.code,
                message=self.detail.message,
                input_text=self.detail.input_text,
                territory_id=territory_id,
                witness=self.detail.witness,
            )
        )


def _render_message(detail: BuildErrorDetail) -> str:
    if detail.territory_id is None:
        return f"{detail.code}: {detail.message}"
    return f"{detail.code}: {detail.message} (territory '{detail.territory_id}')"


def build_error(
    code: BuildErrorCode,
    message: str,
    input_text: str,
    witness: tuple[str, ...] | None = None,
) -> BuildError:
    return BuildError(
        BuildErrorDetail(
            code=code.value,
            message=message,
            input_text=input_text,
            witness=witness,
        )
    )
