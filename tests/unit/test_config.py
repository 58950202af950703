from __future__ import annotations

from pathlib import Path

import pytest

from phonemeta.config import BuildConfig, BuildConfigError, load_build_config

pytestmark = pytest.mark.unit


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "build.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults_without_path() -> None:
    assert load_build_config() == BuildConfig()
    assert load_build_config(None).max_workers == 1


def test_loads_build_section(tmp_path: Path) -> None:
    path = _write(tmp_path, "build:\n  lite_build: true\n  max_workers: 4\n")
    config = load_build_config(path)

    assert config.lite_build is True
    assert config.special_build is False
    assert config.max_workers == 4
    assert config.artifact_path == str(path.resolve())


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    config = load_build_config(_write(tmp_path, ""))

    assert (config.lite_build, config.special_build, config.max_workers) == (False, False, 1)


def test_loading_is_cached_per_resolved_path(tmp_path: Path) -> None:
    path = _write(tmp_path, "build:\n  special_build: true\n")
    first = load_build_config(path)
    path.write_text("build:\n  special_build: false\n", encoding="utf-8")

    assert load_build_config(str(path)) is first


def test_missing_file_is_read_failure(tmp_path: Path) -> None:
    with pytest.raises(BuildConfigError) as exc_info:
        load_build_config(tmp_path / "missing.yaml")

    assert exc_info.value.code == "E_BUILD_CONFIG_READ_FAILED"


def test_malformed_yaml_is_parse_failure(tmp_path: Path) -> None:
    with pytest.raises(BuildConfigError) as exc_info:
        load_build_config(_write(tmp_path, "build: [unterminated\n"))

    assert exc_info.value.code == "E_BUILD_CONFIG_PARSE_FAILED"


@pytest.mark.parametrize(
    "text",
    [
        "- just\n- a list\n",
        "build: 3\n",
        "build:\n  lite_build: 'yes please'\n",
        "build:\n  special_build: 1\n",
        "build:\n  max_workers: 0\n",
        "build:\n  max_workers: true\n",
        "build:\n  max_workers: '2'\n",
    ],
)
def test_invalid_values_are_rejected(tmp_path: Path, text: str) -> None:
    with pytest.raises(BuildConfigError) as exc_info:
        load_build_config(_write(tmp_path, text))

    assert exc_info.value.code == "E_BUILD_CONFIG_INVALID"
    assert str(exc_info.value).startswith("E_BUILD_CONFIG_INVALID: ")


def test_overrides_replace_only_given_values() -> None:
    base = BuildConfig(lite_build=True, max_workers=3, artifact_path="build.yaml")

    assert base.with_overrides() == base
    assert base.with_overrides(max_workers=8) == BuildConfig(
        lite_build=True,
        max_workers=8,
        artifact_path="build.yaml",
    )
    assert base.with_overrides(lite_build=False, special_build=True).special_build is True


def test_config_rejects_non_positive_workers() -> None:
    with pytest.raises(BuildConfigError):
        BuildConfig(max_workers=0)
