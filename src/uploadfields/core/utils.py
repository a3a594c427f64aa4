#!/usr/bin/env python3
"""
Purpose:
    Provides common utility functions such as label/key normalization,
    dictionary merge, and file I/O helpers for UploadFields.
"""

import json
from pathlib import Path
from typing import Dict, Any

from uploadfields.core.constants import (
    NON_WORD_RE, HYPHEN_RUN_RE, DEFAULT_TEXT_ENCODING
)


# --- Naming Helpers --- #

def ucfirst(text: str) -> str:
    """
    Upper-case the first character only; the rest is left untouched.

    A character whose upper case is longer than one character ('ß' -> 'SS') is kept.
    """
    first = text[:1].upper()
    if len(first) != 1:
        return text
    return first + text[1:]


def label_from_name(name: str) -> str:
    """Display label for a definition name: lowercased, then first letter capitalized."""
    return ucfirst(name.lower())


def name_to_key(name: str) -> str:
    """
    Turn a human friendly name into a machine friendly key.

    Example:
        "Cover  Art!" -> "cover-art"
    """
    key = NON_WORD_RE.sub("-", name.strip().lower())
    return HYPHEN_RUN_RE.sub("-", key).strip("-")


# --- Generic Utilities --- #

def merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Recursively merge two dictionaries (values from 'override' take precedence).
    Non-dict values are overwritten; dict values are merged depth-first.
    """
    result = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(result.get(k), dict):
            result[k] = merge_dicts(result[k], v)
        else:
            result[k] = v
    return result


# --- File I/O Helpers --- #

def load_json_file(path: Path) -> Dict[str, Any]:
    """
    Load a JSON file from 'path'. Returns an empty dict if the file is missing.

    Raises:
        ValueError: if the file exists but contains invalid JSON.
    """
    if not path.exists():
        return {}
    try:
        with path.open("r", encoding=DEFAULT_TEXT_ENCODING) as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(
            f"Invalid JSON in {str(path)!r}: {e.msg} (line {e.lineno}, col {e.colno})"
        ) from e
