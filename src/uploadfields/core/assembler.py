#!/usr/bin/env python3
"""
Purpose:
    Turns a set of upload fields into form descriptors, and submitted values
    into the {{FileInfo}} template block appended to the file page.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from uploadfields.core.constants import FILEINFO_TEMPLATE, SUMMARY_KEY
from uploadfields.core.field.upload_field import UploadField

logger = logging.getLogger(__name__)

FieldSet = Union[Mapping[int, UploadField], Iterable[UploadField]]


def _iter_fields(fields: FieldSet) -> List[UploadField]:
    if isinstance(fields, Mapping):
        return list(fields.values())
    return list(fields)


def render_block(fragments: List[str]) -> str:
    """Wrap fragments as '{{FileInfo\\n|a\\n|b\\n}}'."""
    return "{{" + FILEINFO_TEMPLATE + "\n|" + "\n|".join(fragments) + "\n}}"


class FormAssembler:
    """Stateless; fields and values are passed in per call."""

    def build_form_descriptors(
        self, descriptor: Dict[str, Any], fields: FieldSet
    ) -> Dict[str, Any]:
        """
        Add one entry per field to the host's form descriptor, keyed by label.

        Mutates and returns `descriptor`.
        """
        for field in _iter_fields(fields):
            descriptor[field.label] = field.get_descriptor().to_dict()
        return descriptor

    def collect_fragments(
        self, fields: FieldSet, submitted: Mapping[str, Any]
    ) -> List[str]:
        """Fragments for every field with a non-null submitted value, in field order."""
        fragments: List[str] = []
        for field in _iter_fields(fields):
            value = submitted.get(field.key)
            if value is None:
                continue
            fragment = field.get_wikitext(value)
            if fragment:
                fragments.append(fragment)
        return fragments

    def assemble_wikitext_block(
        self,
        fields: FieldSet,
        submitted: Mapping[str, Any],
        summary: Optional[str] = "",
    ) -> Optional[str]:
        """
        Build the {{FileInfo}} block: a leading `summary=` entry, then one
        fragment per submitted field.

        Returns None when there is neither a summary nor any field fragment;
        the caller then makes no edit.
        """
        summary = summary or ""
        field_fragments = self.collect_fragments(fields, submitted)
        if not field_fragments and not summary:
            logger.debug("No summary and no submitted fields; nothing to assemble")
            return None
        return render_block([f"{SUMMARY_KEY}={summary}"] + field_fragments)
