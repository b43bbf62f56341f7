"""Tests for loading the optional TOML configuration file."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path

import pytest

from mediaopts.config import Config
from mediaopts.features.values import IllegalValueError


def test_missing_file_yields_defaults(portable_repo_root: Path) -> None:
    config = Config.load()

    assert config.log_file is None
    assert config.file_log_level == "fine"


def test_values_are_read_from_file(tmp_path: Path) -> None:
    config_file = tmp_path / "config.toml"
    _ = config_file.write_text('log_file = "~/logs/mediaopts.log"\nfile_log_level = "info"\n')

    config = Config.load(config_file)

    assert config.log_file == Path("~/logs/mediaopts.log").expanduser()
    assert config.file_log_level == "info"


def test_blank_log_file_means_no_log_file(tmp_path: Path) -> None:
    config_file = tmp_path / "config.toml"
    _ = config_file.write_text('log_file = ""\n')

    assert Config.load(config_file).log_file is None


def test_unknown_keys_are_ignored_with_warning(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    config_file = tmp_path / "config.toml"
    _ = config_file.write_text('music_dir = "/music"\nfile_log_level = "warning"\n')

    with caplog.at_level(logging.WARNING, logger="mediaopts"):
        config = Config.load(config_file)

    assert config.file_log_level == "warning"
    assert "music_dir" in caplog.text


def test_invalid_toml_is_an_error(tmp_path: Path) -> None:
    config_file = tmp_path / "config.toml"
    _ = config_file.write_text("log_file = \n")

    with pytest.raises(tomllib.TOMLDecodeError):
        _ = Config.load(config_file)


@pytest.mark.parametrize(
    ("content", "field"),
    [
        ("file_log_level = 5\n", "file_log_level"),
        ("log_file = 5\n", "log_file"),
    ],
)
def test_wrongly_typed_values_are_rejected(tmp_path: Path, content: str, field: str) -> None:
    config_file = tmp_path / "config.toml"
    _ = config_file.write_text(content)

    with pytest.raises(IllegalValueError) as excinfo:
        _ = Config.load(config_file)

    assert excinfo.value.field == field
