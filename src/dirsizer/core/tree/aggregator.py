from __future__ import annotations

"""
Size Aggregator.

Post-order pass that stores, on every directory, the total size of the
files it transitively contains.
"""

import logging
from typing import List, Tuple

from dirsizer.domain.tree_models import DirectoryNode

logger = logging.getLogger(__name__)


def aggregate_sizes(root: DirectoryNode) -> int:
    """
    Compute and cache the aggregated size of every directory under `root`.

    Uses an explicit stack so that arbitrarily deep transcripts cannot hit
    the recursion limit. Each node is visited once; re-running on an
    unmodified tree yields the same sizes.

    Args:
        root: Tree to size.

    Returns:
        int: Aggregated size of `root`.
    """
    # (directory, children_done)
    stack: List[Tuple[DirectoryNode, bool]] = [(root, False)]

    while stack:
        directory, children_done = stack.pop()
        if not children_done:
            stack.append((directory, True))
            for child in directory.subdirectories():
                stack.append((child, False))
            continue

        total = 0
        for child in directory.children:
            # Subdirectories were sized before their parent was revisited.
            total += child.size
        directory.cached_size = total

    logger.debug(f"Aggregated size of '{root.name}': {root.cached_size}")
    return root.size


def is_aggregated(root: DirectoryNode) -> bool:
    """True when every directory of the tree carries a cached size."""
    stack = [root]
    while stack:
        directory = stack.pop()
        if directory.cached_size is None:
            return False
        stack.extend(directory.subdirectories())
    return True
