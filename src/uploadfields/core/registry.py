#!/usr/bin/env python3
"""
Purpose:
    Implements the FieldRegistry for UploadFields, which loads every field
    definition record from the definition store, builds UploadField objects,
    and keeps a record of rejected definitions for diagnostics.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from uploadfields.core.field.upload_field import UploadField
from uploadfields.core.stores import (
    CategoryStore,
    DefinitionRecord,
    DefinitionStore,
    MessageStore,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldEntry:
    """
    Lightweight record for a definition seen during load.
    - id: record identifier
    - title: record title (UploadField-<type>-<name>)
    - valid: whether a field was built from it
    - reason: diagnostic text for invalid entries (unknown-type, empty-name, ...)
    """
    id: int
    title: str
    valid: bool
    reason: Optional[str] = None


class FieldRegistry:
    """
    Builds UploadField objects from the definition store.

    Fields are rebuilt on every `load()`; iteration order is the store's return order.
    """

    def __init__(
        self,
        definitions: DefinitionStore,
        messages: MessageStore,
        categories: CategoryStore,
    ):
        self._definitions = definitions
        self._messages = messages
        self._categories = categories
        self._fields: Dict[int, UploadField] = {}
        self._entries: List[FieldEntry] = []
        self._loaded: bool = False

    # --- Loading --- #

    def load(self, *, clear: bool = True) -> Dict[int, UploadField]:
        """
        Query the definition store and build a field per valid record.

        Invalid records are recorded as entries and skipped.

        Args:
            clear: if True, clears prior state before loading.

        Returns:
            Mapping of field id -> UploadField.
        """
        if clear:
            self._fields.clear()
            self._entries.clear()

        for record in self._definitions.find_field_records():
            field = UploadField.from_record(
                record, messages=self._messages, categories=self._categories
            )
            if field is None:
                self._record_invalid_entry(record)
                continue
            self._fields[field.id] = field
            self._entries.append(FieldEntry(id=record.id, title=record.title, valid=True))

        self._loaded = True
        logger.debug("Loaded %d upload field(s)", len(self._fields))
        return self.all()

    # --- Query API --- #

    def all(self) -> Dict[int, UploadField]:
        """Mapping of id -> field, in load order."""
        return dict(self._fields)

    def get(self, field_id: int) -> Optional[UploadField]:
        return self._fields.get(field_id)

    def require(self, field_id: int) -> UploadField:
        """Return the field or raise LookupError if not found."""
        field = self.get(field_id)
        if field is None:
            raise LookupError(f"Upload field {field_id!r} not found")
        return field

    def get_by_key(self, key: str) -> Optional[UploadField]:
        for field in self._fields.values():
            if field.key == key:
                return field
        return None

    def entries(self) -> List[FieldEntry]:
        """All loaded entries (valid + invalid)."""
        return list(self._entries)

    def valid_entries(self) -> List[FieldEntry]:
        return [e for e in self._entries if e.valid]

    def invalid_entries(self) -> List[FieldEntry]:
        return [e for e in self._entries if not e.valid]

    @property
    def loaded(self) -> bool:
        """True if a load() has completed."""
        return self._loaded

    def __len__(self) -> int:
        return len(self._fields)

    # --- Loading Helpers --- #

    def _record_invalid_entry(self, record: DefinitionRecord) -> None:
        reason = UploadField.rejection_reason(record) or "invalid"
        logger.debug("Skipping definition %r: %s", record.title, reason)
        self._entries.append(
            FieldEntry(id=record.id, title=record.title, valid=False, reason=reason)
        )
