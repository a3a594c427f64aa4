#!/usr/bin/env python3
"""
Purpose:
    Defines the FieldType enumeration for upload fields, along with helpers
    for parsing and introspection of field types.
"""

from __future__ import annotations

from enum import Enum


class FieldType(str, Enum):
    """
    Supported upload field types.

    - select      : single choice from an option outline
    - multiselect : multiple choices from an option outline
    - text        : single-line free text
    - textarea    : multi-line free text
    - category    : multiple choices from the wiki's existing categories
    - invalid     : unrecognized/unsupported type (returned by `parse`)
    """

    SELECT = "select"
    MULTISELECT = "multiselect"
    TEXT = "text"
    TEXTAREA = "textarea"
    CATEGORY = "category"
    INVALID = "invalid"

    # --- Parsing helpers --- #

    @classmethod
    def parse(cls, value: str | FieldType | None) -> FieldType:
        """
        Coerce arbitrary input to a `FieldType`.

        - `FieldType` instance → returned as-is
        - `None` or unknown strings → `FieldType.INVALID`
        - strings are lowercased before lookup

        Examples
        --------
        >>> FieldType.parse("TextArea")
        <FieldType.TEXTAREA: 'textarea'>
        >>> FieldType.parse("checkbox")
        <FieldType.INVALID: 'invalid'>
        """
        if isinstance(value, FieldType):
            return value
        if value is None:
            return cls.INVALID
        try:
            return cls(str(value).lower())
        except ValueError:
            return cls.INVALID

    @classmethod
    def try_parse(cls, value: str | FieldType | None) -> FieldType | None:
        """
        Like `parse`, but returns `None` for unknowns instead of `FieldType.INVALID`.
        """
        ft = cls.parse(value)
        return None if ft is cls.INVALID else ft

    @classmethod
    def valid_types(cls) -> list[FieldType]:
        """All accepted types, in declaration order."""
        return [ft for ft in cls if ft is not cls.INVALID]

    # --- Introspection helpers --- #

    def is_choice(self) -> bool:
        """True if the field offers a fixed set of options."""
        return self in {FieldType.SELECT, FieldType.MULTISELECT, FieldType.CATEGORY}

    def is_multi_value(self) -> bool:
        """True if the widget posts a list of values."""
        return self in {FieldType.MULTISELECT, FieldType.CATEGORY}
