from __future__ import annotations

"""
Query Result Models.

Values returned by the size queries. A missing deletion candidate is an
ordinary outcome, represented by `NoCandidate` rather than an exception.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class DeletionCandidate:
    """
    Smallest directory whose removal frees the requested space.

    Attributes:
        path: Absolute path of the directory inside the reconstructed tree.
        name: Directory name.
        size: Aggregated size of the directory.
    """
    path: str
    name: str
    size: int


@dataclass(frozen=True)
class NoCandidate:
    """
    No directory reaches the threshold.

    Attributes:
        threshold: Size the query asked for.
        largest_size: Biggest directory size available (the root's).
    """
    threshold: int
    largest_size: int

    def __str__(self) -> str:
        return (
            f"No directory of at least {self.threshold} "
            f"(largest is {self.largest_size})"
        )


DeletionResult = Union[DeletionCandidate, NoCandidate]
