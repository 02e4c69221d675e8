from __future__ import annotations

"""
Tree Builder.

Replays a lexed transcript against a tree under construction. A cursor,
the stack of directories from the root to the one currently open, decides
where declared children are attached and is moved by `cd` commands.
"""

import logging
from typing import Iterable, List

from dirsizer.domain.errors import (
    DirectoryNotFound,
    DuplicateChild,
    NavigateAboveRoot,
    NotADirectory,
    TranscriptError,
)
from dirsizer.domain.transcript_models import (
    PARENT_TARGET,
    ROOT_TARGET,
    ChildDeclaration,
    ListRequest,
    Navigate,
    TranscriptEntry,
    TranscriptRecord,
)
from dirsizer.domain.tree_models import DirectoryNode, FileNode, Node, new_root

logger = logging.getLogger(__name__)


class TreeBuilder:
    """
    Incremental tree construction under a moving cursor.

    Every operation validates before it mutates, so a failed step leaves
    both the cursor and the tree exactly as they were.
    """

    def __init__(self) -> None:
        self.root: DirectoryNode = new_root()
        self._cursor: List[DirectoryNode] = [self.root]

    @property
    def cwd(self) -> DirectoryNode:
        return self._cursor[-1]

    @property
    def cwd_path(self) -> str:
        names = [d.name for d in self._cursor[1:]]
        return "/" + "/".join(names)

    def apply(self, entry: TranscriptEntry) -> None:
        """
        Apply a single transcript entry.

        Raises:
            TranscriptError: On any navigation or declaration failure.
        """
        if isinstance(entry, Navigate):
            self._navigate(entry.target)
        elif isinstance(entry, ChildDeclaration):
            self._declare(entry.node)
        elif isinstance(entry, ListRequest):
            pass
        else:
            raise TypeError(f"Unsupported transcript entry: {entry!r}")

    def apply_record(self, record: TranscriptRecord) -> None:
        """Apply an entry, attaching its transcript position to failures."""
        try:
            self.apply(record.entry)
        except TranscriptError as e:
            raise e.at(record.line, record.line_number)

    def finish(self) -> DirectoryNode:
        """Return the completed tree and drop the cursor."""
        self._cursor = [self.root]
        return self.root

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def _navigate(self, target: str) -> None:
        if target == ROOT_TARGET:
            self._cursor = [self.root]
        elif target == PARENT_TARGET:
            if len(self._cursor) == 1:
                raise NavigateAboveRoot("Cannot move above '/'")
            self._cursor.pop()
        else:
            child = self.cwd.find_child(target)
            if child is None:
                raise DirectoryNotFound(f"No directory '{target}' in '{self.cwd_path}'")
            if not isinstance(child, DirectoryNode):
                raise NotADirectory(f"'{target}' in '{self.cwd_path}' is a file")
            self._cursor.append(child)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"cwd -> {self.cwd_path}")

    def _declare(self, node: Node) -> None:
        if self.cwd.find_child(node.name) is not None:
            raise DuplicateChild(f"'{node.name}' already declared in '{self.cwd_path}'")
        self.cwd.add_child(_fresh_copy(node))


def _fresh_copy(node: Node) -> Node:
    """Detach a declared node from the entry that carried it."""
    if isinstance(node, FileNode):
        return node
    return DirectoryNode(name=node.name)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_tree(records: Iterable[TranscriptRecord]) -> DirectoryNode:
    """
    Reconstruct the directory tree implied by a lexed transcript.

    Args:
        records: Lexed entries in transcript order.

    Returns:
        DirectoryNode: The root ("/"), present even for an empty transcript.

    Raises:
        TranscriptError: The first failure, tagged with its line.
    """
    builder = TreeBuilder()
    count = 0
    for record in records:
        builder.apply_record(record)
        count += 1
    logger.debug(f"Tree built from {count} entries.")
    return builder.finish()
