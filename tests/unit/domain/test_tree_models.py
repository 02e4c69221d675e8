from __future__ import annotations

"""
Unit tests for the Tree Domain Models.

Verifies:
1. Root creation and the lookup helpers on DirectoryNode.
2. Size access before and after aggregation.
3. Deterministic pre-order traversal with absolute paths.
"""

import pytest

from dirsizer.domain.errors import SizeNotComputedError
from dirsizer.domain.tree_models import (
    ROOT_NAME,
    DirectoryNode,
    FileNode,
    iter_directories,
    join_path,
    new_root,
)


def _tree() -> DirectoryNode:
    root = new_root()
    a = DirectoryNode(name="a")
    b = DirectoryNode(name="b")
    a.add_child(DirectoryNode(name="c"))
    a.add_child(FileNode(name="x", size=1))
    root.add_child(a)
    root.add_child(FileNode(name="y", size=2))
    root.add_child(b)
    return root


def test_new_root_is_empty_directory():
    root = new_root()
    assert isinstance(root, DirectoryNode)
    assert root.name == ROOT_NAME == "/"
    assert root.children == []
    assert root.cached_size is None


def test_find_child_and_subdirectories():
    root = _tree()
    assert root.find_child("y") == FileNode(name="y", size=2)
    assert root.find_child("missing") is None
    assert [d.name for d in root.subdirectories()] == ["a", "b"]


def test_size_requires_aggregation():
    directory = DirectoryNode(name="pending")
    with pytest.raises(SizeNotComputedError, match="pending"):
        _ = directory.size

    directory.cached_size = 42
    assert directory.size == 42


def test_file_node_is_immutable():
    node = FileNode(name="f", size=3)
    with pytest.raises(Exception):
        node.size = 4  # type: ignore[misc]


def test_join_path():
    assert join_path("/", "a") == "/a"
    assert join_path("/a", "b") == "/a/b"


def test_iter_directories_is_preorder_in_insertion_order():
    paths = [path for path, _ in iter_directories(_tree())]
    assert paths == ["/", "/a", "/a/c", "/b"]
