#!/usr/bin/env python3
"""
Purpose:
    Collaborator interfaces to the host wiki (definition records, categories,
    interface messages, page text) plus two implementations: an in-memory
    site used by tests and embedding code, and a YAML-backed site file used
    by the CLI.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Protocol, Set, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from uploadfields.core.constants import (
    DEFAULT_TEXT_ENCODING,
    FIELD_TITLE_RE,
    NS_MEDIAWIKI,
)
from uploadfields.core.formatting import describe_site_error

logger = logging.getLogger(__name__)


# --- Records --- #

class DefinitionRecord(BaseModel):
    """A page row that may define an upload field (title is the DB key)."""
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Page identifier.")
    title: str = Field(..., description="Page title without namespace prefix.")
    namespace: int = Field(default=NS_MEDIAWIKI, description="Namespace number.")
    is_redirect: bool = Field(default=False, description="Whether the page is a redirect.")


class CategoryRecord(BaseModel):
    """A category row; `pages` counts member pages."""
    model_config = ConfigDict(frozen=True)

    title: str = Field(..., description="Category DB key (underscores for spaces).")
    pages: int = Field(default=1, ge=0, description="Number of member pages.")


class PageEdit(BaseModel):
    """One write made through a PageStore (kept for inspection)."""
    title: str
    text: str
    summary: str = ""
    flags: int = 0


# --- Collaborator interfaces --- #

class DefinitionStore(Protocol):
    def find_field_records(self) -> List[DefinitionRecord]:
        """Non-redirect records in the MediaWiki namespace titled UploadField-<type>-<name>."""
        ...


class CategoryStore(Protocol):
    def all_categories(self) -> List[CategoryRecord]:
        ...

    def find_existing(self, keys: Iterable[str]) -> Set[str]:
        """Subset of `keys` naming categories with at least one member page."""
        ...


class MessageStore(Protocol):
    def plain(self, key: str) -> str:
        """Raw message text for `key`, or an empty string."""
        ...


class PageStore(Protocol):
    def get_text(self, title: str) -> Optional[str]:
        ...

    def save_text(self, title: str, text: str, *, summary: str = "", flags: int = 0) -> None:
        ...


# --- In-memory site --- #

class InMemorySite:
    """
    Implements every collaborator interface over plain Python containers.
    Insertion order of `definitions` is the natural return order.
    """

    def __init__(
        self,
        definitions: Optional[Iterable[DefinitionRecord]] = None,
        categories: Optional[Iterable[CategoryRecord]] = None,
        messages: Optional[Dict[str, str]] = None,
        pages: Optional[Dict[str, str]] = None,
    ):
        self.definitions: List[DefinitionRecord] = list(definitions or [])
        self.categories: List[CategoryRecord] = list(categories or [])
        self.messages: Dict[str, str] = dict(messages or {})
        self.pages: Dict[str, str] = dict(pages or {})
        self.edits: List[PageEdit] = []

    # DefinitionStore
    def find_field_records(self) -> List[DefinitionRecord]:
        return [
            r for r in self.definitions
            if r.namespace == NS_MEDIAWIKI
            and not r.is_redirect
            and FIELD_TITLE_RE.match(r.title)
        ]

    # CategoryStore
    def all_categories(self) -> List[CategoryRecord]:
        return list(self.categories)

    def find_existing(self, keys: Iterable[str]) -> Set[str]:
        wanted = set(keys)
        return {c.title for c in self.categories if c.title in wanted and c.pages > 0}

    # MessageStore
    def plain(self, key: str) -> str:
        return self.messages.get(key, "")

    # PageStore
    def get_text(self, title: str) -> Optional[str]:
        return self.pages.get(title)

    def save_text(self, title: str, text: str, *, summary: str = "", flags: int = 0) -> None:
        self.pages[title] = text
        self.edits.append(PageEdit(title=title, text=text, summary=summary, flags=flags))
        logger.info("Saved %d characters to %r", len(text), title)


# --- YAML site file --- #

class SiteFile(BaseModel):
    """On-disk layout of a YAML site file."""
    model_config = ConfigDict(extra="forbid")

    definitions: List[DefinitionRecord] = Field(default_factory=list)
    categories: List[CategoryRecord] = Field(default_factory=list)
    messages: Dict[str, str] = Field(default_factory=dict)
    pages: Dict[str, str] = Field(default_factory=dict)


class YamlSite(InMemorySite):
    """An InMemorySite loaded from, and saved back to, a YAML file."""

    def __init__(self, path: Union[str, Path], data: Optional[SiteFile] = None):
        data = data or SiteFile()
        super().__init__(data.definitions, data.categories, data.messages, data.pages)
        self.path = Path(path)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "YamlSite":
        """
        Load a site file. A missing file yields an empty site.

        Raises:
            ValueError: if the file is not valid YAML or does not match the site layout.
        """
        path = Path(path)
        if not path.exists():
            logger.debug("Site file %s not found; starting empty", path)
            return cls(path)
        try:
            raw = yaml.safe_load(path.read_text(encoding=DEFAULT_TEXT_ENCODING)) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {str(path)!r}: {e}") from e
        try:
            data = SiteFile.model_validate(raw)
        except ValidationError as e:
            headline, lines = describe_site_error(str(path), e)
            raise ValueError(f"{headline}: {'; '.join(lines)}") from e
        return cls(path, data)

    def to_site_file(self) -> SiteFile:
        return SiteFile(
            definitions=self.definitions,
            categories=self.categories,
            messages=self.messages,
            pages=self.pages,
        )

    def save(self) -> None:
        payload = self.to_site_file().model_dump(mode="json")
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding=DEFAULT_TEXT_ENCODING) as f:
            yaml.safe_dump(payload, f, sort_keys=False, allow_unicode=True)
