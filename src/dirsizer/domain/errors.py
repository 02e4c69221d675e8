from __future__ import annotations

"""
Domain Error Taxonomy.

Exceptions raised while lexing a transcript or building the tree from it.
Every transcript error carries the offending line and its 1-based position
so that callers can report exactly where reconstruction stopped.
"""

from typing import Optional

# -----------------------------------------------------------------------------
# TRANSCRIPT ERRORS (FATAL TO THE BUILD)
# -----------------------------------------------------------------------------

class TranscriptError(Exception):
    """
    Base class for every failure raised while reconstructing the tree.

    Attributes:
        reason: Human readable cause.
        line: Raw transcript line that triggered the failure.
        line_number: 1-based position of the line, when known.
    """

    def __init__(self, reason: str, line: str = "", line_number: Optional[int] = None):
        self.reason = reason
        self.line = line
        self.line_number = line_number
        super().__init__(self._format())

    def _format(self) -> str:
        where = f"Line {self.line_number}: " if self.line_number is not None else ""
        what = f" ({self.line!r})" if self.line else ""
        return f"{where}{self.reason}{what}"

    def at(self, line: str, line_number: int) -> "TranscriptError":
        """Attach transcript position to an error raised without one."""
        self.line = line
        self.line_number = line_number
        self.args = (self._format(),)
        return self


class MalformedLine(TranscriptError):
    """The line matches no production of the transcript grammar."""


class DuplicateChild(TranscriptError):
    """A directory declared the same child name twice."""


class NavigateAboveRoot(TranscriptError):
    """`cd ..` was issued while the cursor is at the root."""


class DirectoryNotFound(TranscriptError):
    """`cd` targets a name absent from the current directory."""


class NotADirectory(TranscriptError):
    """`cd` targets a name that was declared as a file."""


# -----------------------------------------------------------------------------
# QUERY ERRORS
# -----------------------------------------------------------------------------

class SizeNotComputedError(RuntimeError):
    """A size was read from a directory before aggregation ran."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Size of directory '{name}' has not been aggregated yet.")
