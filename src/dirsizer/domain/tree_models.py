from __future__ import annotations

"""
Directory Tree Data Models.

Provides the node types used to reconstruct a filesystem from a shell
transcript. Files carry an intrinsic size; directories own an ordered list
of children and cache their aggregated size once it has been computed.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple, Union

from dirsizer.domain.errors import SizeNotComputedError

ROOT_NAME = "/"

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FileNode:
    """
    Represents a leaf entry (file) in the directory tree.

    Attributes:
        name: Entry name, unique among its siblings.
        size: Intrinsic size declared by the listing.
    """
    name: str
    size: int


@dataclass
class DirectoryNode:
    """
    Represents a directory and exclusively owns its children.

    Attributes:
        name: Entry name ("/" for the root).
        children: Child nodes in first-seen order.
        cached_size: Aggregated size, None until the aggregator has run.
    """
    name: str
    children: List["Node"] = field(default_factory=list)
    cached_size: Optional[int] = None

    @property
    def size(self) -> int:
        """Aggregated size; only valid after aggregation."""
        if self.cached_size is None:
            raise SizeNotComputedError(self.name)
        return self.cached_size

    def find_child(self, name: str) -> Optional["Node"]:
        for child in self.children:
            if child.name == name:
                return child
        return None

    def add_child(self, node: "Node") -> None:
        self.children.append(node)

    def subdirectories(self) -> List["DirectoryNode"]:
        return [c for c in self.children if isinstance(c, DirectoryNode)]


Node = Union[FileNode, DirectoryNode]


def new_root() -> DirectoryNode:
    """Create the empty root directory every tree starts from."""
    return DirectoryNode(name=ROOT_NAME)


def join_path(parent: str, name: str) -> str:
    if parent == ROOT_NAME:
        return ROOT_NAME + name
    return f"{parent}/{name}"


def iter_directories(root: DirectoryNode) -> Iterator[Tuple[str, DirectoryNode]]:
    """
    Yield every directory with its absolute path, in pre-order.

    Children are visited in insertion order, which makes the traversal
    deterministic for tie-breaking.

    Args:
        root: Tree root.

    Yields:
        Tuple[str, DirectoryNode]: Absolute path and directory node.
    """
    stack: List[Tuple[str, DirectoryNode]] = [(ROOT_NAME, root)]
    while stack:
        path, directory = stack.pop()
        yield path, directory
        for child in reversed(directory.subdirectories()):
            stack.append((join_path(path, child.name), child))
