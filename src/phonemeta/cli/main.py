from __future__ import annotations

import json
import logging
from typing import Final, Literal

import typer

from phonemeta.compiler import build_country_code_to_region_code_map, build_metadata_collection
from phonemeta.config import BuildConfig, BuildConfigError, load_build_config
from phonemeta.diagnostics import (
    DiagnosticEvent,
    diagnostic_from_build_error,
    diagnostic_from_config_error,
)
from phonemeta.document import load_metadata_document
from phonemeta.metadata import MetadataCollection, canonical_collection_json, hash_collection
from phonemeta.parser import BuildError

app = typer.Typer(help="Phone number metadata compiler CLI")

_BUILD_OUTPUT_SCHEMA_VERSION: Final[int] = 1
_EXIT_BUILD_FAILED: Final[int] = 2


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def _resolve_config(
    config_path: str | None,
    *,
    lite: bool,
    special: bool,
    workers: int | None,
) -> BuildConfig:
    config = load_build_config(config_path)
    return config.with_overrides(
        lite_build=True if lite else None,
        special_build=True if special else None,
        max_workers=workers,
    )


def _compile(document_path: str, config: BuildConfig) -> MetadataCollection:
    document = load_metadata_document(document_path)
    return build_metadata_collection(
        document,
        lite_build=config.lite_build,
        special_build=config.special_build,
        max_workers=config.max_workers,
    )


@app.command()
def build(
    document: str,
    lite: bool = typer.Option(False, "--lite", help="Strip example numbers from the output"),
    special: bool = typer.Option(False, "--special", help="Keep only mobile number data"),
    config: str | None = typer.Option(None, "--config", help="YAML build configuration"),
    workers: int | None = typer.Option(None, "--workers", min=1, help="Territory worker threads"),
    format: Literal["text", "json"] = typer.Option(
        "text",
        "--format",
        help="Output format: text|json",
        show_default=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """Compile a metadata document into the territory metadata table."""
    _configure_logging(verbose)
    try:
        build_config = _resolve_config(config, lite=lite, special=special, workers=workers)
        collection = _compile(document, build_config)
    except BuildConfigError as exc:
        _emit_failure(document, diagnostic_from_config_error(exc), format)
        raise typer.Exit(code=_EXIT_BUILD_FAILED) from exc
    except BuildError as exc:
        _emit_failure(document, diagnostic_from_build_error(exc), format)
        raise typer.Exit(code=_EXIT_BUILD_FAILED) from exc

    if format == "json":
        typer.echo(canonical_collection_json(collection))
        return
    for territory in collection.territories:
        typer.echo(
            "TERRITORY"
            f" id={territory.id or '-'}"
            f" country_code={territory.country_code}"
            f" formats={len(territory.number_formats)}"
            f" intl_formats={len(territory.intl_number_formats)}"
        )
    typer.echo(f"BUILD territories={len(collection)} sha256={hash_collection(collection)}")


@app.command("country-codes")
def country_codes(
    document: str,
    config: str | None = typer.Option(None, "--config", help="YAML build configuration"),
) -> None:
    """Print the country calling code to region code index."""
    _configure_logging(False)
    try:
        build_config = _resolve_config(config, lite=False, special=False, workers=None)
        collection = _compile(document, build_config)
    except BuildConfigError as exc:
        _emit_failure(document, diagnostic_from_config_error(exc), "text")
        raise typer.Exit(code=_EXIT_BUILD_FAILED) from exc
    except BuildError as exc:
        _emit_failure(document, diagnostic_from_build_error(exc), "text")
        raise typer.Exit(code=_EXIT_BUILD_FAILED) from exc

    mapping = build_country_code_to_region_code_map(collection)
    for country_code in sorted(mapping):
        typer.echo(f"CODE cc={country_code} regions={','.join(mapping[country_code])}")


def _emit_failure(
    document: str,
    event: DiagnosticEvent,
    output_format: Literal["text", "json"],
) -> None:
    if output_format == "json":
        payload: dict[str, object] = {
            "schema_version": _BUILD_OUTPUT_SCHEMA_VERSION,
            "document": document,
            "status": "fail",
            "exit_code": _EXIT_BUILD_FAILED,
            "diagnostics": [event.model_dump(mode="json", exclude_none=True)],
        }
        typer.echo(json.dumps(payload, ensure_ascii=True, separators=(",", ":")))
        return
    typer.echo(
        "DIAG"
        f" severity={event.severity}"
        f" stage={event.stage}"
        f" code={event.code}"
        f" territory={event.territory_id or '-'}"
        f" message={event.message}"
    )


def main() -> None:
    app()
