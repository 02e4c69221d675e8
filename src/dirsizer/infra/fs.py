from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides the user data directory, path normalization and the small amount
of disk I/O the tool performs: reading transcripts and persisting rendered
trees. The reconstruction engine itself never touches the filesystem.
"""

import os
from typing import List, Optional

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "Dirsizer"
UNIX_APP_DIR_NAME = ".dirsizer"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/Dirsizer
    - Linux/Mac: ~/.dirsizer

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        pass

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str = "") -> str:
    """
    Normalize a path string into an absolute filesystem path.

    Expands environment variables and user home shortcuts. Reverts to the
    fallback when the input is empty.

    Args:
        path: Raw input path string.
        fallback: Path to use when the input is empty.

    Returns:
        str: Normalized absolute path, or "" when both inputs are empty.
    """
    p = (path or "").strip() or fallback
    if not p:
        return ""
    return os.path.abspath(os.path.expandvars(os.path.expanduser(p)))

# -----------------------------------------------------------------------------
# TRANSCRIPT AND ARTIFACT I/O
# -----------------------------------------------------------------------------

def read_transcript(path: str) -> str:
    """
    Read a whole transcript file.

    Args:
        path: Transcript location.

    Returns:
        str: Raw transcript text.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def save_lines(path: str, lines: List[str]) -> None:
    """
    Persist text lines to disk, creating parent directories as needed.

    Args:
        path: Destination file.
        lines: Lines to write, newline-joined.

    Raises:
        OSError: If the file cannot be written.
    """
    parent = os.path.dirname(os.path.abspath(path))
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write("\n".join(lines))
        if lines:
            f.write("\n")
