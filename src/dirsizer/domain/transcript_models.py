from __future__ import annotations

"""
Transcript Entry Models.

Typed representation of the three kinds of transcript lines: navigation
commands, listing commands and child declarations produced by a listing.
"""

from dataclasses import dataclass
from typing import Union

from dirsizer.domain.tree_models import Node

PARENT_TARGET = ".."
ROOT_TARGET = "/"


@dataclass(frozen=True)
class Navigate:
    """`$ cd <target>`; target is "..", "/" or a child directory name."""
    target: str


@dataclass(frozen=True)
class ListRequest:
    """`$ ls`; marks that declarations follow."""


@dataclass(frozen=True)
class ChildDeclaration:
    """A `dir <name>` or `<size> <name>` listing line."""
    node: Node


TranscriptEntry = Union[Navigate, ListRequest, ChildDeclaration]


@dataclass(frozen=True)
class TranscriptRecord:
    """
    A lexed entry together with its origin in the transcript.

    Attributes:
        line_number: 1-based line position.
        line: Raw line text.
        entry: Typed entry.
    """
    line_number: int
    line: str
    entry: TranscriptEntry
