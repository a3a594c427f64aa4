#!/usr/bin/env python3
"""
Core constants used across UploadFields.

- Host namespaces and edit flags.
- Field definition naming: record prefix, separator and title pattern.
- Wikitext block markers and option outline syntax.
- Regular expressions used by normalizers.
"""

import re
from typing import Final

# --- Host constants --- #

# MediaWiki namespace holding interface messages (field definitions live here)
NS_MEDIAWIKI: Final[int] = 8

# Canonical prefix of the category namespace
CATEGORY_PREFIX: Final[str] = "Category"

# Edit flags passed through to the page writer
EDIT_SUPPRESS_RC: Final[int] = 8
EDIT_AUTOSUMMARY: Final[int] = 32

# Default text encoding
DEFAULT_TEXT_ENCODING: Final[str] = "utf-8"


# --- Field definitions --- #

FIELD_RECORD_PREFIX: Final[str] = "UploadField"
FIELD_TITLE_SEPARATOR: Final[str] = "-"

# Labels are stored in a 255 character column on the host
MAX_LABEL_LENGTH: Final[int] = 255

# Rows for the multi-line text widget
TEXTAREA_ROWS: Final[int] = 5

# Form section the fields are grouped into
DESCRIPTOR_SECTION: Final[str] = "description"

# Descriptor key the host sets when the form is a re-upload
REUPLOAD_DESCRIPTOR_KEY: Final[str] = "ForReUpload"


# --- Option outline --- #

OPTION_MARKER: Final[str] = "*"
OPTION_DELIMITER: Final[str] = "|"

# Option groups support a single level below the top level
MAX_OPTION_DEPTH: Final[int] = 2

# Hard stop when counting markers on a pathological line
MAX_MARKER_SCAN: Final[int] = 10


# --- Wikitext block --- #

FILEINFO_TEMPLATE: Final[str] = "FileInfo"
FILEINFO_SENTINEL: Final[str] = "{{" + FILEINFO_TEMPLATE
SUMMARY_KEY: Final[str] = "summary"
CATEGORY_KEY: Final[str] = "category"


# --- Regular Expressions --- #

# Definition record titles: UploadField-<type>-<name>
FIELD_TITLE_RE: re.Pattern[str] = re.compile(
    rf"^{re.escape(FIELD_RECORD_PREFIX)}{re.escape(FIELD_TITLE_SEPARATOR)}.+{re.escape(FIELD_TITLE_SEPARATOR)}.+$"
)

# Runs of non-word characters in a label (collapsed into the key separator)
NON_WORD_RE: re.Pattern[str] = re.compile(r"\W")
HYPHEN_RUN_RE: re.Pattern[str] = re.compile(r"-{2,}")

# Characters never allowed in a page title
ILLEGAL_TITLE_CHARS_RE: re.Pattern[str] = re.compile(r"[#<>\[\]|{}\x00-\x1f\x7f]")

# Relative path segments that cannot appear in a title
RELATIVE_TITLE_RE: re.Pattern[str] = re.compile(r"^\.\.?$|^\.\.?/|/\.\.?/|/\.\.?$")

# Max title length in bytes
MAX_TITLE_BYTES: Final[int] = 255
