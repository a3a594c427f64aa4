#!/usr/bin/env python3
"""
Purpose:
    Normalizes user-supplied category names into category titles, the way the
    host wiki does before looking them up: DB keys use underscores, display
    text uses spaces and carries the namespace prefix.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from uploadfields.core.constants import (
    CATEGORY_PREFIX,
    DEFAULT_TEXT_ENCODING,
    ILLEGAL_TITLE_CHARS_RE,
    MAX_TITLE_BYTES,
    RELATIVE_TITLE_RE,
)
from uploadfields.core.utils import ucfirst

_WHITESPACE_RE = re.compile(r"[ _\s]+")
_PREFIX_RE = re.compile(rf"^{CATEGORY_PREFIX}\s*:", re.IGNORECASE)


@dataclass(frozen=True)
class CategoryTitle:
    """A validated title in the category namespace."""
    text: str

    @property
    def db_key(self) -> str:
        """Storage form: spaces become underscores."""
        return self.text.replace(" ", "_")

    @property
    def prefixed_text(self) -> str:
        """Display form including the namespace, e.g. 'Category:Cover art'."""
        return f"{CATEGORY_PREFIX}:{self.text}"


def make_category_title(raw: object) -> Optional[CategoryTitle]:
    """
    Build a CategoryTitle from arbitrary input, or None when it is not a valid title.

    - underscores and whitespace runs collapse to a single space, ends trimmed
    - an optional leading 'Category:' prefix is dropped
    - first character is upper-cased
    - empty, too long, relative, or containing illegal characters -> None
    """
    if raw is None:
        return None
    text = _WHITESPACE_RE.sub(" ", str(raw)).strip()
    # Names picked from the category list may carry the prefix; only one is dropped
    text = _PREFIX_RE.sub("", text, count=1).strip()
    if not text:
        return None
    if ILLEGAL_TITLE_CHARS_RE.search(text):
        return None
    if RELATIVE_TITLE_RE.search(text):
        return None
    if len(text.encode(DEFAULT_TEXT_ENCODING)) > MAX_TITLE_BYTES:
        return None
    return CategoryTitle(text=ucfirst(text))
