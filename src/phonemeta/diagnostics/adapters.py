from __future__ import annotations

from phonemeta.config import BuildConfigError
from phonemeta.parser import BuildError

from .catalog import CANONICAL_DIAGNOSTIC_CATALOG
from .models import BuildStage, DiagnosticEvent, Severity


def build_diagnostic_event(  # noqa: PLR0913
    *,
    code: str,
    message: str,
    element_id: str | None = None,
    territory_id: str | None = None,
    witness: object | None = None,
    severity: Severity | None = None,
    stage: BuildStage | None = None,
    suggested_action: str | None = None,
) -> DiagnosticEvent:
    if not code:
        raise ValueError("diagnostic code must be non-empty")
    if not message:
        raise ValueError("diagnostic message must be non-empty")

    catalog_entry = CANONICAL_DIAGNOSTIC_CATALOG.get(code)
    resolved_severity = severity
    resolved_stage = stage
    resolved_action = suggested_action
    if catalog_entry is not None:
        resolved_severity = resolved_severity or catalog_entry.severity
        resolved_stage = resolved_stage or catalog_entry.stage
        resolved_action = resolved_action or catalog_entry.suggested_action
    if resolved_severity is None or resolved_stage is None or not resolved_action:
        raise ValueError(f"diagnostic code '{code}' is not cataloged and lacks explicit fields")

    return DiagnosticEvent(
        code=code,
        severity=resolved_severity,
        message=message,
        suggested_action=resolved_action,
        stage=resolved_stage,
        element_id=element_id,
        territory_id=territory_id,
        witness=witness,
    )


def diagnostic_from_build_error(exc: BuildError) -> DiagnosticEvent:
    detail = exc.detail
    witness: dict[str, object] = {"input_text": detail.input_text}
    if detail.witness is not None:
        witness["values"] = list(detail.witness)
    return build_diagnostic_event(
        code=detail.code,
        message=detail.message,
        element_id="document" if detail.territory_id is None else "territory",
        territory_id=detail.territory_id,
        witness=witness,
    )


def diagnostic_from_config_error(exc: BuildConfigError) -> DiagnosticEvent:
    return build_diagnostic_event(
        code=exc.code,
        message=exc.message,
        element_id="config",
    )
