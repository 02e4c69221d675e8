from __future__ import annotations

"""
Size Query Engine.

Read-only queries over an aggregated tree. Both walk the directories in
pre-order and filter them by a size predicate.
"""

import logging
from typing import Iterator, Optional, Tuple

from dirsizer.domain.query_models import DeletionCandidate, DeletionResult, NoCandidate
from dirsizer.domain.tree_models import DirectoryNode, iter_directories

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def directory_sizes(root: DirectoryNode) -> Iterator[Tuple[str, int]]:
    """
    Yield `(path, size)` for every directory, root included, in pre-order.

    Raises:
        SizeNotComputedError: If the tree has not been aggregated.
    """
    for path, directory in iter_directories(root):
        yield path, directory.size


def sum_directories_at_most(root: DirectoryNode, threshold: int) -> int:
    """
    Sum the sizes of every directory whose size is <= `threshold`.

    Nested qualifying directories are counted each time, as a directory's
    size already includes its children.

    Args:
        root: Aggregated tree.
        threshold: Inclusive upper bound.

    Returns:
        int: Total of the qualifying sizes.
    """
    total = sum(size for _, size in directory_sizes(root) if size <= threshold)
    logger.debug(f"Directories at most {threshold} add up to {total}")
    return total


def find_smallest_directory_at_least(root: DirectoryNode, threshold: int) -> DeletionResult:
    """
    Find the smallest directory whose size is >= `threshold`.

    Ties go to the directory met first in pre-order.

    Args:
        root: Aggregated tree.
        threshold: Inclusive lower bound.

    Returns:
        DeletionResult: The candidate, or NoCandidate when nothing qualifies.
    """
    best: Optional[DeletionCandidate] = None

    for path, directory in iter_directories(root):
        size = directory.size
        if size < threshold:
            continue
        if best is None or size < best.size:
            best = DeletionCandidate(path=path, name=directory.name, size=size)

    if best is None:
        logger.debug(f"No directory reaches {threshold}")
        return NoCandidate(threshold=threshold, largest_size=root.size)
    return best


def required_deletion(used: int, capacity: int, required_free: int) -> int:
    """
    Space that must be freed so that `required_free` is available.

    Args:
        used: Space currently used (the root's size).
        capacity: Total disk capacity.
        required_free: Free space wanted.

    Returns:
        int: Non-negative amount to delete.
    """
    return max(0, required_free - (capacity - used))
