from __future__ import annotations

"""
Tree Renderer.

Converts a sized tree into ASCII lines using the usual box-drawing
connectors, one line per node with its kind and size.
"""

from typing import List, Tuple

from dirsizer.domain.tree_models import DirectoryNode, FileNode, Node

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_size_tree(root: DirectoryNode) -> List[str]:
    """
    Render an aggregated tree.

    Children keep their insertion order.

    Example:
        / (dir, size=300)
        ├── a (dir, size=200)
        │   └── g.txt (file, size=200)
        └── f.txt (file, size=100)

    Args:
        root: Aggregated tree.

    Returns:
        List[str]: Visual lines, root first.
    """
    lines = [describe_node(root)]
    _render_children(root, lines)
    return lines


def describe_node(node: Node) -> str:
    if isinstance(node, FileNode):
        return f"{node.name} (file, size={node.size})"
    return f"{node.name} (dir, size={node.size})"

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _render_children(root: DirectoryNode, lines: List[str]) -> None:
    """Depth-first walk with an explicit stack so deep trees stay renderable."""
    # (node, prefix, is_last)
    stack: List[Tuple[Node, str, bool]] = []
    _push_children(stack, root, prefix="")

    while stack:
        node, prefix, is_last = stack.pop()
        connector = "└── " if is_last else "├── "
        lines.append(f"{prefix}{connector}{describe_node(node)}")

        if isinstance(node, DirectoryNode):
            _push_children(stack, node, prefix + ("    " if is_last else "│   "))


def _push_children(stack: List[Tuple[Node, str, bool]], directory: DirectoryNode, prefix: str) -> None:
    total = len(directory.children)
    for i in reversed(range(total)):
        stack.append((directory.children[i], prefix, i == total - 1))
