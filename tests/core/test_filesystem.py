"""Tests for filesystem ordering and listing helpers."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from mediaopts.core.filesystem import get_children, human_name_key, is_hidden, is_visible_file, list_files


def test_human_name_key_orders_numbers_by_value() -> None:
    names = ["file10.txt", "a.txt", "file2.txt", "file1.txt"]

    assert sorted(names, key=human_name_key) == ["a.txt", "file1.txt", "file2.txt", "file10.txt"]


def test_human_name_key_ignores_case_and_accents() -> None:
    names = ["beta", "Alpha", "émile", "echo", "Foxtrot"]

    assert sorted(names, key=human_name_key) == ["Alpha", "beta", "echo", "émile", "Foxtrot"]


def test_human_name_key_sorts_prefix_before_longer_name() -> None:
    assert sorted(["file2", "file"], key=human_name_key) == ["file", "file2"]


def test_is_hidden_detects_dot_files(tmp_path: Path) -> None:
    assert is_hidden(tmp_path / ".DS_Store")
    assert not is_hidden(tmp_path / "movie.mkv")


def test_get_children_filters_and_orders(tmp_path: Path) -> None:
    for name in ["b.mkv", "a.mkv", ".hidden.mkv"]:
        (tmp_path / name).touch()
    (tmp_path / "folder").mkdir()

    assert get_children(tmp_path, is_visible_file) == [tmp_path / "a.mkv", tmp_path / "b.mkv"]


def test_list_files_skips_hidden_folders(tmp_path: Path) -> None:
    (tmp_path / ".cache").mkdir()
    (tmp_path / ".cache" / "thumb.jpg").touch()
    (tmp_path / "show").mkdir()
    (tmp_path / "show" / "e1.mkv").touch()

    assert list_files(tmp_path) == [tmp_path / "show" / "e1.mkv"]


@pytest.mark.skipif(not hasattr(os, "symlink") or os.name == "nt", reason="symlinks required")
def test_list_files_never_enters_a_folder_twice(tmp_path: Path) -> None:
    (tmp_path / "show").mkdir()
    (tmp_path / "show" / "e1.mkv").touch()
    (tmp_path / "show" / "loop").symlink_to(tmp_path, target_is_directory=True)

    assert list_files(tmp_path) == [tmp_path / "show" / "e1.mkv"]


def test_list_files_propagates_listing_errors(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        _ = list_files(tmp_path / "missing")
