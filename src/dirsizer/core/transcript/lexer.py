from __future__ import annotations

"""
Transcript Lexer.

Classifies raw transcript lines into typed entries: navigation commands,
listing commands and child declarations. Lexing is purely per-line; the
tree builder gives the entries their meaning.
"""

import logging
import re
from typing import Iterable, Iterator, List

from dirsizer.domain.errors import MalformedLine
from dirsizer.domain.transcript_models import (
    ChildDeclaration,
    ListRequest,
    Navigate,
    TranscriptEntry,
    TranscriptRecord,
)
from dirsizer.domain.tree_models import DirectoryNode, FileNode

logger = logging.getLogger(__name__)

COMMAND_PREFIX = "$ "
CD_COMMAND = "cd "
LS_COMMAND = "ls"
DIR_MARKER = "dir"

_SIZE_RX = re.compile(r"[0-9]+")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def lex_line(line: str) -> TranscriptEntry:
    """
    Turn one transcript line into a typed entry.

    Args:
        line: Raw line, with or without its trailing newline.

    Returns:
        TranscriptEntry: Navigate, ListRequest or ChildDeclaration.

    Raises:
        MalformedLine: If the line matches no grammar production.
    """
    text = line.rstrip("\r\n")

    if text.startswith(COMMAND_PREFIX):
        command = text[len(COMMAND_PREFIX):]
        if command.startswith(CD_COMMAND):
            return _lex_navigate(command[len(CD_COMMAND):], text)
        if command.strip() == LS_COMMAND:
            return ListRequest()
        raise MalformedLine("Unknown command", text)

    return _lex_declaration(text)


def lex_transcript(lines: Iterable[str]) -> Iterator[TranscriptRecord]:
    """
    Lex a transcript lazily, tagging each entry with its 1-based position.

    Blank lines are malformed like any other line without two tokens.
    The first malformed line aborts the iteration.

    Args:
        lines: Raw transcript lines.

    Yields:
        TranscriptRecord: Entry plus its origin.

    Raises:
        MalformedLine: With the offending line and its position.
    """
    for number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        try:
            entry = lex_line(line)
        except MalformedLine as e:
            raise e.at(line, number)
        yield TranscriptRecord(line_number=number, line=line, entry=entry)


def lex_text(text: str) -> List[TranscriptRecord]:
    """Lex a whole transcript held in memory."""
    records = list(lex_transcript(text.splitlines()))
    logger.debug(f"Lexed {len(records)} transcript entries.")
    return records

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _lex_navigate(target: str, line: str) -> Navigate:
    target = target.strip()
    if not target or len(target.split()) != 1:
        raise MalformedLine("'cd' needs exactly one target", line)
    return Navigate(target=target)


def _lex_declaration(line: str) -> ChildDeclaration:
    tokens = line.split()
    if len(tokens) < 2:
        raise MalformedLine("Expected '<size|dir> <name>'", line)
    if len(tokens) > 2:
        raise MalformedLine("Names cannot contain whitespace", line)

    kind, name = tokens
    if kind == DIR_MARKER:
        return ChildDeclaration(node=DirectoryNode(name=name))
    if _SIZE_RX.fullmatch(kind):
        return ChildDeclaration(node=FileNode(name=name, size=int(kind)))

    raise MalformedLine(f"Unknown entry type '{kind}'", line)
