#!/usr/bin/env python3
"""
Purpose:
    Parses the bullet outline stored in a field's message text into the
    option tree used by choice widgets.

    *Red
    *Blue|Navy blue
    **sky|Sky blue
    *Green

parses to {"Red": "Red", "Navy blue": {"Sky blue": "sky"}, "Green": "Green"}.
Each `*` adds one level; the text left of `|` is the submitted value and
the text right of it is the label shown to the user.
"""
from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple, Union

from uploadfields.core.constants import (
    OPTION_MARKER,
    OPTION_DELIMITER,
    MAX_OPTION_DEPTH,
    MAX_MARKER_SCAN,
)

logger = logging.getLogger(__name__)

OptionGroup = Dict[str, str]
OptionTree = Dict[str, Union[str, OptionGroup]]


# --- Cursor --- #

class LineCursor:
    """
    Forward cursor over a list of lines that can step back by exactly one line.

    The parser reads a line, and when it belongs to a different depth, hands it
    back so the caller (or a nested parse) sees it again.
    """

    def __init__(self, lines: List[str]):
        self._lines = list(lines)
        self._index = 0
        self._can_rewind = False

    @property
    def exhausted(self) -> bool:
        return self._index >= len(self._lines)

    @property
    def position(self) -> int:
        return self._index

    def peek(self) -> Optional[str]:
        """Return the next line without consuming it (None at end of input)."""
        if self.exhausted:
            return None
        return self._lines[self._index]

    def advance(self) -> Optional[str]:
        """Consume and return the next line (None at end of input)."""
        line = self.peek()
        if line is None:
            return None
        self._index += 1
        self._can_rewind = True
        return line

    def push_back(self) -> None:
        """
        Un-consume the line returned by the last `advance()`.

        Raises:
            RuntimeError: if there is nothing to push back, or it was already pushed back.
        """
        if not self._can_rewind:
            raise RuntimeError("LineCursor can only push back the most recently read line")
        self._index -= 1
        self._can_rewind = False


# --- Public API --- #

def parse_options(text: Optional[str]) -> OptionTree:
    """
    Parse a bullet outline into an option tree (label -> value or label -> group).

    Lines that do not start with the marker, and blank lines, are ignored.
    Depths beyond two are treated as depth two.
    """
    if not text:
        return {}
    cursor = LineCursor(_split_lines(text))
    return _parse_depth(cursor, 1)


def count_depth(line: str) -> int:
    """Count leading markers on a line, stopping at MAX_MARKER_SCAN."""
    depth = 0
    while line[depth:depth + 1] == OPTION_MARKER:
        depth += 1
        if depth >= MAX_MARKER_SCAN:
            break
    return depth


# --- Internals --- #

def _split_lines(text: str) -> List[str]:
    """Split on line feeds only; one trailing carriage return is dropped per line."""
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]


def _parse_depth(cursor: LineCursor, depth: int) -> OptionTree:
    options: OptionTree = {}
    while not cursor.exhausted:
        line = cursor.advance()
        if not line.startswith(OPTION_MARKER):
            continue

        line_depth = count_depth(line)
        if line_depth > MAX_OPTION_DEPTH:
            line = line[line_depth - MAX_OPTION_DEPTH:]
            line_depth = MAX_OPTION_DEPTH

        if line_depth > depth:
            cursor.push_back()
            group = _parse_depth(cursor, line_depth)
            _attach_group(options, group)
            continue
        if line_depth < depth:
            cursor.push_back()
            break

        label, value = _split_entry(line[depth:])
        if not label:
            logger.debug("Skipping option line without a label: %r", line)
            continue
        options[label] = value
    return options


def _attach_group(options: OptionTree, group: OptionTree) -> None:
    """Store a nested group as the value of the most recently added entry."""
    if not options:
        logger.debug("Dropping option group with no parent entry: %r", list(group))
        return
    parent = next(reversed(options))
    options[parent] = group  # type: ignore[assignment]


def _split_entry(rest: str) -> Tuple[str, str]:
    """Split 'value|label' (label defaults to the value)."""
    if OPTION_DELIMITER in rest:
        value, label = rest.split(OPTION_DELIMITER, 1)
    else:
        value, label = rest, ""
    if not label and value:
        label = value
    return label, value
