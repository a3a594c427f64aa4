#!/usr/bin/env python3
"""
Purpose:
    Implements the UploadField model: one administrator-defined upload field
    read from a definition record, with its form descriptor and the wikitext
    fragment produced from a submitted value.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

from uploadfields.core import constants as C
from uploadfields.core.field.descriptor import FormFieldDescriptor, Widget
from uploadfields.core.field.field_type import FieldType
from uploadfields.core.field.options import OptionTree, parse_options
from uploadfields.core.stores import CategoryStore, DefinitionRecord, MessageStore
from uploadfields.core.titles import CategoryTitle, make_category_title
from uploadfields.core.utils import label_from_name, name_to_key

logger = logging.getLogger(__name__)


class UploadField:
    """
    One custom upload field.

    Identity is write-once: `set_id` refuses a second assignment. The key is
    derived from the first label unless one was given at construction.
    """

    def __init__(
        self,
        messages: MessageStore,
        categories: CategoryStore,
        *,
        key: Optional[str] = None,
    ):
        self._messages = messages
        self._categories = categories
        self._id: Optional[int] = None
        self._type: Optional[FieldType] = None
        self._label: Optional[str] = None
        self._key: Optional[str] = key or None
        self._record: Optional[DefinitionRecord] = None

    # --- Construction --- #

    @staticmethod
    def rejection_reason(record: DefinitionRecord) -> Optional[str]:
        """Why `record` cannot define a field, or None when it can."""
        parts = _title_parts(record.title)
        if parts is None:
            return "malformed-title"
        raw_type, name = parts
        if FieldType.try_parse(raw_type) is None:
            return "unknown-type"
        if not name:
            return "empty-name"
        return None

    @classmethod
    def from_record(
        cls,
        record: DefinitionRecord,
        *,
        messages: MessageStore,
        categories: CategoryStore,
    ) -> Optional["UploadField"]:
        """
        Build a field from a record titled `UploadField-<type>-<name>`.

        Returns None (not an exception) when the type is unknown or the name is empty.
        """
        if cls.rejection_reason(record) is not None:
            return None
        raw_type, name = _title_parts(record.title)

        field = cls(messages, categories)
        field.set_id(record.id)
        if not field.set_label(label_from_name(name)):
            return None
        field.set_type(raw_type)
        field._record = record
        return field

    # --- Accessors --- #

    @property
    def id(self) -> Optional[int]:
        return self._id

    @property
    def key(self) -> Optional[str]:
        return self._key

    @property
    def label(self) -> Optional[str]:
        return self._label

    @property
    def type(self) -> Optional[FieldType]:
        return self._type

    @property
    def record(self) -> Optional[DefinitionRecord]:
        return self._record

    @property
    def message_key(self) -> Optional[str]:
        """Message holding the default text or option outline (the record title)."""
        return self._record.title if self._record else None

    def set_id(self, field_id: int) -> bool:
        """Set the identifier; False (and no change) if it is already set."""
        if self._id is not None:
            return False
        self._id = int(field_id)
        return True

    def set_label(self, label: str) -> bool:
        """Set the label (truncated to 255 characters); derives the key if none is set."""
        if not label:
            return False
        self._label = label[:C.MAX_LABEL_LENGTH]
        if not self._key:
            self._key = name_to_key(self._label)
        return True

    def set_type(self, field_type: Any) -> bool:
        ft = FieldType.try_parse(field_type)
        if ft is None:
            return False
        self._type = ft
        return True

    def message_text(self) -> str:
        if self.message_key is None:
            return ""
        return self._messages.plain(self.message_key)

    def category_names(self) -> List[str]:
        """Every known category, queried fresh from the category store."""
        return [c.title for c in self._categories.all_categories()]

    def get_options(self) -> OptionTree:
        """Option tree parsed from the message outline (recomputed on every call)."""
        return parse_options(self.message_text())

    # --- Form descriptor --- #

    def get_descriptor(self) -> FormFieldDescriptor:
        """Descriptor for this field's form widget."""
        params: Dict[str, Any] = {
            "name": self.key,
            "fieldname": self.key,
            "label": f"{self.label}:",
            "section": C.DESCRIPTOR_SECTION,
            "value": "",
        }
        params.update(_DESCRIPTOR_BUILDERS[self.type](self))
        return FormFieldDescriptor(**params)

    # --- Wikitext --- #

    def get_wikitext(self, value: Any) -> str:
        """
        Wikitext fragment (`key=value`) for a submitted value.

        Values are embedded as-is: '|' and newlines are not escaped.
        Category values keep only titles that exist and are populated; an
        empty string means the field contributes nothing.
        """
        if self.type is FieldType.CATEGORY:
            return self._category_wikitext(value)
        return f"{self.key}={_flatten(value)}"

    def _category_wikitext(self, value: Any) -> str:
        titles: Dict[str, CategoryTitle] = {}
        for raw in _as_list(value):
            title = make_category_title(raw)
            if title is None:
                logger.debug("Dropping invalid category title %r", raw)
                continue
            titles.setdefault(title.db_key, title)
        if not titles:
            return ""

        found = self._categories.find_existing(titles.keys())
        names = [t.prefixed_text for k, t in titles.items() if k in found]
        dropped = [k for k in titles if k not in found]
        if dropped:
            logger.debug("Dropping unknown categories %s", dropped)
        if not names:
            return ""
        return f"{C.CATEGORY_KEY}={','.join(names)}"

    def __repr__(self) -> str:
        ft = self.type.value if self.type else None
        return f"<UploadField id={self.id} type={ft} key={self.key!r}>"


# --- Title helpers --- #

def _title_parts(title: str) -> Optional[Tuple[str, str]]:
    """
    (type, name) segments of `UploadField-<type>-<name>`.

    Every separator splits; segments after the name are ignored, so
    `UploadField-text-Year-Of-Release` names the field `Year`.
    """
    parts = title.split(C.FIELD_TITLE_SEPARATOR)
    if len(parts) < 3:
        return None
    return parts[1], parts[2]


# --- Descriptor builders (one per field type) --- #

def _select_params(field: UploadField) -> Dict[str, Any]:
    return {"options": field.get_options(), "widget": Widget.SELECT}


def _multiselect_params(field: UploadField) -> Dict[str, Any]:
    return {"options": field.get_options(), "widget": Widget.MULTISELECT}


def _text_params(field: UploadField) -> Dict[str, Any]:
    return {"default": field.message_text(), "widget": Widget.TEXT}


def _textarea_params(field: UploadField) -> Dict[str, Any]:
    return {"default": field.message_text(), "rows": C.TEXTAREA_ROWS, "widget": Widget.TEXTAREA}


def _category_params(field: UploadField) -> Dict[str, Any]:
    names = field.category_names()
    return {
        "options": {n: n for n in names},
        "widget": Widget.MULTISELECT,
        "value": [],
    }


_DESCRIPTOR_BUILDERS: Dict[FieldType, Callable[[UploadField], Dict[str, Any]]] = {
    FieldType.SELECT: _select_params,
    FieldType.MULTISELECT: _multiselect_params,
    FieldType.TEXT: _text_params,
    FieldType.TEXTAREA: _textarea_params,
    FieldType.CATEGORY: _category_params,
}


# --- Value helpers --- #

def _as_list(value: Any) -> List[Any]:
    if value is None:
        return []
    if isinstance(value, (list, tuple, set)):
        return list(value)
    if isinstance(value, dict):
        return list(value.values())
    return [value]


def _flatten(value: Any) -> str:
    """Multi-choice widgets post lists; those are joined with commas."""
    if isinstance(value, (list, tuple)):
        return ",".join(str(v) for v in value)
    return "" if value is None else str(value)
