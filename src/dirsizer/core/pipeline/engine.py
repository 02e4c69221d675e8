from __future__ import annotations

"""
Core analysis pipeline.

This module coordinates the whole analysis of a transcript:
1. Validates configuration.
2. Lexes the transcript.
3. Rebuilds the directory tree.
4. Aggregates directory sizes.
5. Runs the bounded-sum and minimal-deletion queries.
6. Optionally renders and persists the sized tree.
"""

import logging
import os
from typing import Any, Dict, List, Optional, Tuple

from dirsizer.core.pipeline.validator import validate_config
from dirsizer.core.transcript.lexer import lex_text
from dirsizer.core.tree.aggregator import aggregate_sizes
from dirsizer.core.tree.builder import build_tree
from dirsizer.core.tree.queries import (
    find_smallest_directory_at_least,
    required_deletion,
    sum_directories_at_most,
)
from dirsizer.core.tree.renderer import render_size_tree
from dirsizer.domain.analysis_models import (
    AnalysisResult,
    create_error_result,
    create_success_result,
)
from dirsizer.domain.errors import TranscriptError
from dirsizer.domain.query_models import DeletionCandidate
from dirsizer.domain.tree_models import DirectoryNode, iter_directories
from dirsizer.infra.fs import normalize_path, read_transcript, save_lines

logger = logging.getLogger(__name__)

TEXT_SOURCE = "<text>"


def run_analysis(
        transcript: str,
        config: Optional[Dict[str, Any]] = None,
        *,
        source: str = TEXT_SOURCE,
) -> AnalysisResult:
    """
    Execute the full analysis over an in-memory transcript.

    Transcript errors do not propagate: they become a failed result that
    names the first offending line.

    Args:
        transcript: Raw transcript text.
        config: Configuration dictionary (raw or partial).
        source: Label describing where the transcript came from.

    Returns:
        AnalysisResult: Status, sizes and query answers.
    """
    logger.info(f"Analysis started for {source}.")

    # -------------------------------------------------------------------------
    # 1) Config
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    # -------------------------------------------------------------------------
    # 2) Lex & Build
    # -------------------------------------------------------------------------
    try:
        records = lex_text(transcript)
        root = build_tree(records)
    except TranscriptError as e:
        logger.error(f"Transcript rejected: {e}")
        return create_error_result(str(e), cfg, source, error_line=e.line_number)

    # -------------------------------------------------------------------------
    # 3) Aggregate
    # -------------------------------------------------------------------------
    root_size = aggregate_sizes(root)
    directory_count, file_count = _count_nodes(root)
    logger.info(
        f"Tree rebuilt: {directory_count} directories, {file_count} files, "
        f"total size {root_size}."
    )

    # -------------------------------------------------------------------------
    # 4) Queries
    # -------------------------------------------------------------------------
    small_total = sum_directories_at_most(root, cfg["small_directory_limit"])
    to_free = required_deletion(root_size, cfg["disk_capacity"], cfg["required_free_space"])
    deletion = find_smallest_directory_at_least(root, to_free)

    deletion_path: Optional[str] = None
    deletion_size: Optional[int] = None
    if isinstance(deletion, DeletionCandidate):
        deletion_path, deletion_size = deletion.path, deletion.size
        logger.info(f"Smallest directory freeing {to_free}: {deletion_path} ({deletion_size}).")
    else:
        logger.info(str(deletion))

    # -------------------------------------------------------------------------
    # 5) Rendering
    # -------------------------------------------------------------------------
    tree_lines: List[str] = []
    tree_path = ""
    if cfg["show_tree"] or cfg["tree_output_path"]:
        tree_lines = render_size_tree(root)

    if cfg["tree_output_path"]:
        tree_path = normalize_path(cfg["tree_output_path"])
        try:
            save_lines(tree_path, tree_lines)
            logger.info(f"Tree saved to {tree_path}")
        except OSError as e:
            msg = f"Failed to save tree to {tree_path}: {e}"
            logger.error(msg)
            return create_error_result(msg, cfg, source)

    return create_success_result(
        cfg,
        source,
        root_size=root_size,
        directory_count=directory_count,
        file_count=file_count,
        small_directories_total=small_total,
        space_to_free=to_free,
        deletion_path=deletion_path,
        deletion_size=deletion_size,
        tree_lines=tree_lines if cfg["show_tree"] else [],
        tree_path=tree_path,
        summary_extra={"has_deletion_candidate": deletion_path is not None},
    )


def analyze_file(path: str, config: Optional[Dict[str, Any]] = None) -> AnalysisResult:
    """
    Read a transcript from disk and analyze it.

    Args:
        path: Transcript file.
        config: Configuration dictionary.

    Returns:
        AnalysisResult: Failed result if the file cannot be read.
    """
    full_path = normalize_path(path)
    try:
        transcript = read_transcript(full_path)
    except (OSError, UnicodeDecodeError) as e:
        cfg, _ = validate_config(config, strict=False)
        msg = f"Cannot read transcript {full_path}: {e}"
        logger.error(msg)
        return create_error_result(msg, cfg, full_path)

    return run_analysis(transcript, config, source=full_path)


def _count_nodes(root: DirectoryNode) -> Tuple[int, int]:
    directories = 0
    files = 0
    for _, directory in iter_directories(root):
        directories += 1
        files += len(directory.children) - len(directory.subdirectories())
    return directories, files
