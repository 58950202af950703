from __future__ import annotations

from dataclasses import dataclass
from functools import cache
from pathlib import Path
from typing import cast

import yaml  # type: ignore[import-untyped]

_BUILD_SECTION = "build"


class BuildConfigError(ValueError):
    def __init__(self, code: str, message: str) -> None:
        super().__init__(f"{code}: {message}")
        self.code = code
        self.message = message


@dataclass(frozen=True, slots=True)
class BuildConfig:
    lite_build: bool = False
    special_build: bool = False
    max_workers: int = 1
    artifact_path: str | None = None

    def __post_init__(self) -> None:
        if self.max_workers < 1:
            raise BuildConfigError("E_BUILD_CONFIG_INVALID", "max_workers must be >= 1")

    def with_overrides(
        self,
        *,
        lite_build: bool | None = None,
        special_build: bool | None = None,
        max_workers: int | None = None,
    ) -> BuildConfig:
        return BuildConfig(
            lite_build=self.lite_build if lite_build is None else lite_build,
            special_build=self.special_build if special_build is None else special_build,
            max_workers=self.max_workers if max_workers is None else max_workers,
            artifact_path=self.artifact_path,
        )


def load_build_config(path: str | Path | None = None) -> BuildConfig:
    if path is None:
        return BuildConfig()
    return _load_build_config_cached(str(Path(path).resolve()))


@cache
def _load_build_config_cached(path: str) -> BuildConfig:
    target = Path(path)
    raw = _read_yaml_file(target)
    section = _optional_mapping(raw, _BUILD_SECTION)
    return BuildConfig(
        lite_build=_optional_bool(section, "lite_build", False),
        special_build=_optional_bool(section, "special_build", False),
        max_workers=_optional_positive_int(section, "max_workers", 1),
        artifact_path=str(target),
    )


def _read_yaml_file(path: Path) -> dict[str, object]:
    try:
        raw_text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise BuildConfigError(
            "E_BUILD_CONFIG_READ_FAILED",
            f"unable to read build configuration '{path}': {exc}",
        ) from exc
    try:
        payload = yaml.safe_load(raw_text)
    except yaml.YAMLError as exc:
        raise BuildConfigError(
            "E_BUILD_CONFIG_PARSE_FAILED",
            f"invalid build configuration yaml in '{path}': {exc}",
        ) from exc
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise BuildConfigError(
            "E_BUILD_CONFIG_INVALID",
            "build configuration root must be a mapping",
        )
    return cast(dict[str, object], payload)


def _optional_mapping(data: dict[str, object], key: str) -> dict[str, object]:
    value = data.get(key)
    if value is None:
        return {}
    if isinstance(value, dict):
        return cast(dict[str, object], value)
    raise BuildConfigError("E_BUILD_CONFIG_INVALID", f"invalid mapping for key '{key}'")


def _optional_bool(data: dict[str, object], key: str, default: bool) -> bool:
    value = data.get(key, default)
    if isinstance(value, bool):
        return value
    raise BuildConfigError("E_BUILD_CONFIG_INVALID", f"invalid bool for key '{key}'")


def _optional_positive_int(data: dict[str, object], key: str, default: int) -> int:
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise BuildConfigError("E_BUILD_CONFIG_INVALID", f"invalid integer for key '{key}'")
    if value < 1:
        raise BuildConfigError("E_BUILD_CONFIG_INVALID", f"'{key}' must be >= 1")
    return value
