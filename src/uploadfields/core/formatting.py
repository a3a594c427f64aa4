#!/usr/bin/env python3
"""
Formatting helpers for UploadFields.

Site-file validation errors are reported as one line per problem, addressed
by where they sit in the file, e.g. `definitions[1].title: Field required`.
"""
from __future__ import annotations

from typing import Any, List, Sequence, Tuple

from pydantic import ValidationError


def error_path(loc: Sequence[Any]) -> str:
    """
    Render a pydantic `loc` as a site-file path.

    ('definitions', 1, 'title') -> "definitions[1].title"
    ('pages', 'File:A.png')     -> "pages.File:A.png"
    ()                          -> "<root>"
    """
    path = ""
    for seg in loc:
        if isinstance(seg, int):
            path += f"[{seg}]"
        else:
            path += f".{seg}" if path else str(seg)
    return path or "<root>"


def site_error_lines(exc: ValidationError) -> List[str]:
    """One `path: message` line per error, in pydantic's order."""
    return [f"{error_path(err['loc'])}: {err['msg']}" for err in exc.errors()]


def describe_site_error(source: str, exc: ValidationError) -> Tuple[str, List[str]]:
    """Headline naming the file, plus the individual error lines."""
    lines = site_error_lines(exc)
    noun = "error" if len(lines) == 1 else "errors"
    return f"Invalid site file {source!r} ({len(lines)} {noun})", lines
