#!/usr/bin/env python3
"""
Purpose:
    Entry points the host upload workflow calls: one when the upload form is
    built, one after an upload completes.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

from uploadfields.core.assembler import FormAssembler
from uploadfields.core.constants import (
    EDIT_AUTOSUMMARY,
    EDIT_SUPPRESS_RC,
    FILEINFO_SENTINEL,
    REUPLOAD_DESCRIPTOR_KEY,
)
from uploadfields.core.registry import FieldRegistry
from uploadfields.core.stores import PageStore

logger = logging.getLogger(__name__)


class UploadHooks:
    def __init__(
        self,
        registry: FieldRegistry,
        pages: PageStore,
        assembler: Optional[FormAssembler] = None,
    ):
        self.registry = registry
        self.pages = pages
        self.assembler = assembler or FormAssembler()

    def on_upload_form_init_descriptor(self, descriptor: Dict[str, Any]) -> bool:
        """Add the custom fields to the upload form (skipped for re-uploads)."""
        if REUPLOAD_DESCRIPTOR_KEY in descriptor:
            return True
        fields = self.registry.load()
        self.assembler.build_form_descriptors(descriptor, fields)
        return True

    def on_upload_complete(
        self,
        title: str,
        submitted: Mapping[str, Any],
        summary: Optional[str] = "",
        *,
        for_reupload: bool = False,
    ) -> Optional[str]:
        """
        Append the {{FileInfo}} block to the file page, at most once.

        Returns the saved page text, or None when no edit was made.
        """
        if for_reupload:
            return None

        current = self.pages.get_text(title) or ""
        if FILEINFO_SENTINEL in current:
            logger.debug("%r already carries a %s block", title, FILEINFO_SENTINEL)
            return None

        fields = self.registry.load()
        if not fields:
            return None

        block = self.assembler.assemble_wikitext_block(fields, submitted, summary)
        if block is None:
            return None

        text = block if not current else f"{current}\n\n{block}"
        self.pages.save_text(title, text, summary="", flags=EDIT_AUTOSUMMARY | EDIT_SUPPRESS_RC)
        logger.info("Appended file information to %r", title)
        return text
