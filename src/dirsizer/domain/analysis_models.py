from __future__ import annotations

"""
Analysis Domain Data Models.

Defines the result object and factory functions used to communicate the
outcome of an analysis run between the pipeline engine and the CLI.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class AnalysisResult:
    """
    Unified result object of a complete analysis run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        error_line: 1-based transcript line that stopped the build, if any.
        source: Where the transcript came from (file path or "<text>").
        small_directory_limit: Threshold used by the bounded-sum query.
        disk_capacity: Total disk size used to derive the needed space.
        required_free_space: Free space the caller wants available.
        root_size: Aggregated size of "/".
        directory_count: Number of directories in the tree, root included.
        file_count: Number of files in the tree.
        small_directories_total: Bounded-sum query result.
        space_to_free: Threshold passed to the minimal-deletion query.
        deletion_path: Path of the directory to delete, None if no candidate.
        deletion_size: Size of that directory, None if no candidate.
        tree_lines: Rendered tree, empty unless rendering was requested.
        tree_path: Path the rendered tree was saved to.
        summary: Extra metadata for presentation layers.
    """
    ok: bool
    error: str
    source: str

    small_directory_limit: int
    disk_capacity: int
    required_free_space: int

    error_line: Optional[int] = None

    root_size: int = 0
    directory_count: int = 0
    file_count: int = 0
    small_directories_total: int = 0
    space_to_free: int = 0
    deletion_path: Optional[str] = None
    deletion_size: Optional[int] = None

    tree_lines: List[str] = field(default_factory=list)
    tree_path: str = ""

    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        cfg: Dict[str, Any],
        source: str,
        error_line: Optional[int] = None,
        summary_extra: Optional[Dict[str, Any]] = None
) -> AnalysisResult:
    """
    Create a failed analysis result instance.

    Args:
        error: Detailed error description.
        cfg: The configuration used during the failed run.
        source: Transcript origin.
        error_line: Transcript line that triggered the failure.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        AnalysisResult: An immutable error result object.
    """
    return AnalysisResult(
        ok=False,
        error=error,
        source=source,
        small_directory_limit=cfg.get("small_directory_limit", 0),
        disk_capacity=cfg.get("disk_capacity", 0),
        required_free_space=cfg.get("required_free_space", 0),
        error_line=error_line,
        summary=summary_extra or {},
    )


def create_success_result(
        cfg: Dict[str, Any],
        source: str,
        root_size: int,
        directory_count: int,
        file_count: int,
        small_directories_total: int,
        space_to_free: int,
        deletion_path: Optional[str] = None,
        deletion_size: Optional[int] = None,
        tree_lines: Optional[List[str]] = None,
        tree_path: str = "",
        summary_extra: Optional[Dict[str, Any]] = None
) -> AnalysisResult:
    """
    Create a successful analysis result instance.

    Args:
        cfg: Final configuration used during execution.
        source: Transcript origin.
        root_size: Aggregated size of the root.
        directory_count: Directories in the tree.
        file_count: Files in the tree.
        small_directories_total: Bounded-sum query result.
        space_to_free: Threshold used for the deletion query.
        deletion_path: Chosen directory, None when there is no candidate.
        deletion_size: Size of the chosen directory.
        tree_lines: Rendered tree lines.
        tree_path: Where the rendered tree was persisted.
        summary_extra: Additional metadata.

    Returns:
        AnalysisResult: An immutable success result object.
    """
    return AnalysisResult(
        ok=True,
        error="",
        source=source,
        small_directory_limit=cfg["small_directory_limit"],
        disk_capacity=cfg["disk_capacity"],
        required_free_space=cfg["required_free_space"],
        root_size=root_size,
        directory_count=directory_count,
        file_count=file_count,
        small_directories_total=small_directories_total,
        space_to_free=space_to_free,
        deletion_path=deletion_path,
        deletion_size=deletion_size,
        tree_lines=tree_lines or [],
        tree_path=tree_path,
        summary=summary_extra or {},
    )
