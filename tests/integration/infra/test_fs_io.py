from __future__ import annotations

"""
Integration tests for the FileSystem Infrastructure Layer.
"""

import os
from pathlib import Path

import pytest

from dirsizer.infra.fs import get_user_data_dir, normalize_path, read_transcript, save_lines


def test_user_data_dir_is_created(isolated_home: Path):
    path = get_user_data_dir()
    assert os.path.isdir(path)
    assert path.startswith(str(isolated_home))


def test_normalize_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.chdir(tmp_path)
    assert normalize_path("x.txt") == str(tmp_path / "x.txt")
    assert normalize_path("  ", "fallback.txt") == str(tmp_path / "fallback.txt")
    assert normalize_path(None) == ""


def test_read_transcript_round_trip(tmp_path: Path, small_transcript: str):
    path = tmp_path / "t.txt"
    path.write_text(small_transcript, encoding="utf-8")
    assert read_transcript(str(path)) == small_transcript


def test_read_missing_transcript_raises(tmp_path: Path):
    with pytest.raises(OSError):
        read_transcript(str(tmp_path / "nope.txt"))


def test_save_lines_creates_parents(tmp_path: Path):
    target = tmp_path / "a" / "b" / "tree.txt"
    save_lines(str(target), ["one", "two"])
    assert target.read_text(encoding="utf-8") == "one\ntwo\n"


def test_save_empty_lines(tmp_path: Path):
    target = tmp_path / "empty.txt"
    save_lines(str(target), [])
    assert target.read_text(encoding="utf-8") == ""
