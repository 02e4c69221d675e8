from __future__ import annotations

"""
Unit tests for the Tree Builder.

Verifies cursor movement, child insertion and that every failure leaves
the cursor and the tree untouched.
"""

import copy

import pytest

from dirsizer.core.transcript.lexer import lex_text
from dirsizer.core.tree.builder import TreeBuilder, build_tree
from dirsizer.domain.errors import (
    DirectoryNotFound,
    DuplicateChild,
    NavigateAboveRoot,
    NotADirectory,
)
from dirsizer.domain.transcript_models import ChildDeclaration, ListRequest, Navigate
from dirsizer.domain.tree_models import DirectoryNode, FileNode


@pytest.fixture
def builder() -> TreeBuilder:
    """Builder positioned at '/' with directory 'a' and file 'f.txt'."""
    b = TreeBuilder()
    b.apply(ListRequest())
    b.apply(ChildDeclaration(DirectoryNode(name="a")))
    b.apply(ChildDeclaration(FileNode(name="f.txt", size=100)))
    return b


def test_empty_transcript_yields_bare_root():
    root = build_tree([])
    assert root.name == "/"
    assert isinstance(root, DirectoryNode)
    assert root.children == []


def test_declarations_attach_to_cursor(builder):
    builder.apply(Navigate("a"))
    builder.apply(ChildDeclaration(FileNode(name="g.txt", size=200)))

    root = builder.finish()
    a = root.find_child("a")
    assert [c.name for c in root.children] == ["a", "f.txt"]
    assert a.children == [FileNode(name="g.txt", size=200)]


def test_navigation_moves_cursor(builder):
    builder.apply(Navigate("a"))
    builder.apply(ChildDeclaration(DirectoryNode(name="b")))
    builder.apply(Navigate("b"))
    assert builder.cwd_path == "/a/b"

    builder.apply(Navigate(".."))
    assert builder.cwd_path == "/a"

    builder.apply(Navigate("/"))
    assert builder.cwd_path == "/"
    assert builder.cwd is builder.root


def test_declared_directory_is_not_shared_with_the_entry():
    entry = ChildDeclaration(DirectoryNode(name="a"))
    b = TreeBuilder()
    b.apply(entry)
    b.apply(Navigate("a"))
    b.apply(ChildDeclaration(FileNode(name="x", size=1)))

    assert entry.node.children == []


def test_cd_parent_at_root_fails_without_side_effects(builder):
    before = copy.deepcopy(builder.root)

    with pytest.raises(NavigateAboveRoot):
        builder.apply(Navigate(".."))

    assert builder.cwd_path == "/"
    assert builder.root == before


def test_cd_missing_directory_fails(builder):
    with pytest.raises(DirectoryNotFound, match="nope"):
        builder.apply(Navigate("nope"))
    assert builder.cwd_path == "/"


def test_cd_into_file_fails(builder):
    with pytest.raises(NotADirectory, match="f.txt"):
        builder.apply(Navigate("f.txt"))
    assert builder.cwd_path == "/"


def test_duplicate_child_fails_and_first_declaration_survives(builder):
    before = copy.deepcopy(builder.root)

    with pytest.raises(DuplicateChild):
        builder.apply(ChildDeclaration(FileNode(name="a", size=5)))

    assert builder.root == before
    assert isinstance(builder.root.find_child("a"), DirectoryNode)


def test_same_name_in_different_directories_is_allowed():
    root = build_tree(lex_text("$ ls\ndir a\n1 x\n$ cd a\n$ ls\n2 x\n"))
    assert root.find_child("x") == FileNode(name="x", size=1)
    assert root.find_child("a").find_child("x") == FileNode(name="x", size=2)


def test_build_tree_tags_errors_with_line():
    records = lex_text("$ cd /\n$ ls\n10 f\n$ cd f\n")
    with pytest.raises(NotADirectory) as exc_info:
        build_tree(records)

    assert exc_info.value.line_number == 4
    assert exc_info.value.line == "$ cd f"


def test_declarations_without_ls_marker_still_attach():
    root = build_tree(lex_text("dir a\n5 b\n"))
    assert [c.name for c in root.children] == ["a", "b"]


def test_unknown_entry_type_is_rejected(builder):
    with pytest.raises(TypeError):
        builder.apply("$ ls")  # type: ignore[arg-type]
