from .adapters import (
    build_diagnostic_event,
    diagnostic_from_build_error,
    diagnostic_from_config_error,
)
from .catalog import CANONICAL_DIAGNOSTIC_CATALOG, REQUIRED_CATALOG_FIELDS
from .models import BuildStage, DiagnosticEvent, Severity

__all__ = [
    "BuildStage",
    "CANONICAL_DIAGNOSTIC_CATALOG",
    "DiagnosticEvent",
    "REQUIRED_CATALOG_FIELDS",
    "Severity",
    "build_diagnostic_event",
    "diagnostic_from_build_error",
    "diagnostic_from_config_error",
]
