from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. An isolated home directory so config and log files never touch the user's.
3. Shared transcript samples used across unit and integration tests.
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
SAMPLE_TRANSCRIPT = """\
$ cd /
$ ls
dir a
14848514 b.txt
8504156 c.dat
dir d
$ cd a
$ ls
dir e
29116 f
2557 g
62596 h.lst
$ cd e
$ ls
584 i
$ cd ..
$ cd ..
$ cd d
$ ls
4060174 j
8033020 d.log
5626152 d.ext
7214296 k
"""

SMALL_TRANSCRIPT = """\
$ cd /
$ ls
dir a
100 f.txt
$ cd a
$ ls
200 g.txt
"""


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the user data directory at a throwaway location."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    monkeypatch.setenv("LOCALAPPDATA", str(home / "AppData"))
    return home


@pytest.fixture
def sample_transcript() -> str:
    """The reference session: root 48381165, '/a' 94853, '/a/e' 584, '/d' 24933642."""
    return SAMPLE_TRANSCRIPT


@pytest.fixture
def small_transcript() -> str:
    """Root 300 holding directory 'a' (200) and file 'f.txt' (100)."""
    return SMALL_TRANSCRIPT


@pytest.fixture
def transcript_file(tmp_path: Path, sample_transcript: str) -> Path:
    path = tmp_path / "transcript.txt"
    path.write_text(sample_transcript, encoding="utf-8")
    return path


@pytest.fixture
def mock_config_dict() -> Dict[str, Any]:
    """
    Return a valid, complete configuration dictionary for testing.

    Mirrors the keys defined in 'dirsizer.domain.config'.
    """
    return {
        "input_path": "",
        "tree_output_path": "",
        "small_directory_limit": 100000,
        "disk_capacity": 70000000,
        "required_free_space": 30000000,
        "show_tree": False,
    }
