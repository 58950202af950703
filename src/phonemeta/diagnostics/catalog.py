from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .models import BuildStage, Severity


@dataclass(frozen=True, slots=True)
class DiagnosticCatalogEntry:
    code: str
    severity: Severity
    stage: BuildStage
    suggested_action: str

    def __post_init__(self) -> None:
        if not self.code:
            raise ValueError("diagnostic catalog code must be non-empty")
        if not self.suggested_action:
            raise ValueError(
                f"diagnostic catalog entry '{self.code}' suggested_action must be non-empty"
            )


def _entry(
    code: str,
    stage: BuildStage,
    suggested_action: str,
    severity: Severity = Severity.ERROR,
) -> DiagnosticCatalogEntry:
    return DiagnosticCatalogEntry(
        code=code,
        severity=severity,
        stage=stage,
        suggested_action=suggested_action,
    )


def _build_catalog(
    entries: tuple[DiagnosticCatalogEntry, ...],
) -> Mapping[str, DiagnosticCatalogEntry]:
    catalog: dict[str, DiagnosticCatalogEntry] = {}
    for entry in entries:
        if entry.code in catalog:
            raise ValueError(f"duplicate diagnostic catalog code: {entry.code}")
        catalog[entry.code] = entry
    return MappingProxyType(catalog)


_CATALOG_ENTRIES: tuple[DiagnosticCatalogEntry, ...] = (
    _entry(
        "E_BUILD_LENGTH_SPEC_MALFORMED",
        BuildStage.PARSE,
        "write possible lengths as comma-separated numbers or [min-max] ranges spanning 3+ values",
    ),
    _entry(
        "E_BUILD_PATTERN_INVALID",
        BuildStage.PARSE,
        "fix the regular expression so that it compiles",
    ),
    _entry(
        "E_BUILD_TYPE_DUPLICATE",
        BuildStage.RESOLVE,
        "declare each number type at most once per territory",
    ),
    _entry(
        "E_BUILD_LENGTH_NOT_COVERED",
        BuildStage.RESOLVE,
        "declare the length on a number type that contributes to the general description",
    ),
    _entry(
        "E_BUILD_GENERAL_DESC_LENGTHS",
        BuildStage.RESOLVE,
        "remove possibleLengths from generalDesc; they are derived from the number types",
    ),
    _entry(
        "E_BUILD_LOCAL_ONLY_UNEXPECTED",
        BuildStage.RESOLVE,
        "remove localOnly lengths from short-number metadata",
    ),
    _entry(
        "E_BUILD_LENGTH_SETS_OVERLAP",
        BuildStage.RESOLVE,
        "list each length as either national or localOnly, not both",
    ),
    _entry(
        "E_BUILD_FORMAT_COUNT",
        BuildStage.FORMAT,
        "give every numberFormat exactly one format child",
    ),
    _entry(
        "E_BUILD_INTL_FORMAT_DUPLICATE",
        BuildStage.FORMAT,
        "give every numberFormat at most one intlFormat child",
    ),
    _entry(
        "E_BUILD_FLAGS_CONFLICT",
        BuildStage.CONFIG,
        "select at most one of the lite and special build profiles",
    ),
    _entry(
        "E_BUILD_COUNTRY_CODE_INVALID",
        BuildStage.PARSE,
        "set countryCode to the decimal country calling code",
    ),
    _entry(
        "E_BUILD_DOCUMENT_INVALID",
        BuildStage.LOAD,
        "provide a readable, well-formed metadata XML document",
    ),
    _entry(
        "E_BUILD_CONFIG_READ_FAILED",
        BuildStage.CONFIG,
        "check that the build configuration file exists and is readable",
    ),
    _entry(
        "E_BUILD_CONFIG_PARSE_FAILED",
        BuildStage.CONFIG,
        "fix the YAML syntax of the build configuration file",
    ),
    _entry(
        "E_BUILD_CONFIG_INVALID",
        BuildStage.CONFIG,
        "use booleans for lite_build/special_build and an integer >= 1 for max_workers",
    ),
)


CANONICAL_DIAGNOSTIC_CATALOG: Mapping[str, DiagnosticCatalogEntry] = _build_catalog(
    _CATALOG_ENTRIES
)

REQUIRED_CATALOG_FIELDS: tuple[str, ...] = ("code", "severity", "stage", "suggested_action")
