#!/usr/bin/env python3
import pytest

from uploadfields.core.stores import CategoryRecord, DefinitionRecord, InMemorySite


@pytest.fixture
def site() -> InMemorySite:
    """A small wiki with one field of every type plus some noise records."""
    return InMemorySite(
        definitions=[
            DefinitionRecord(id=10, title="UploadField-select-Licence"),
            DefinitionRecord(id=11, title="UploadField-multiselect-Tags"),
            DefinitionRecord(id=12, title="UploadField-text-Artist"),
            DefinitionRecord(id=13, title="UploadField-textarea-Notes"),
            DefinitionRecord(id=14, title="UploadField-category-Categories"),
            DefinitionRecord(id=20, title="UploadField-checkbox-Agree"),
            DefinitionRecord(id=21, title="UploadField-text-Old", is_redirect=True),
            DefinitionRecord(id=22, title="UploadField-text-Elsewhere", namespace=0),
            DefinitionRecord(id=23, title="Sidebar"),
        ],
        categories=[
            CategoryRecord(title="Foo", pages=3),
            CategoryRecord(title="Cover_art", pages=1),
            CategoryRecord(title="Empty", pages=0),
        ],
        messages={
            "UploadField-select-Licence": "*cc-by|CC BY\n*cc0|Public domain\n",
            "UploadField-multiselect-Tags": "*Weapons\n**sword|Swords\n**bow|Bows\n*Armor",
            "UploadField-text-Artist": "Unknown",
            "UploadField-textarea-Notes": "",
        },
    )
