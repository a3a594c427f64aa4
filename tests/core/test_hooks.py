#!/usr/bin/env python3
import pytest

from uploadfields.core.constants import EDIT_AUTOSUMMARY, EDIT_SUPPRESS_RC
from uploadfields.core.hooks import UploadHooks
from uploadfields.core.registry import FieldRegistry
from uploadfields.core.stores import InMemorySite


@pytest.fixture
def hooks(site):
    return UploadHooks(FieldRegistry(site, site, site), pages=site)


# --- Form init --- #

def test_form_init_adds_fields(hooks):
    descriptor = {}
    assert hooks.on_upload_form_init_descriptor(descriptor) is True
    assert set(descriptor) == {"Licence", "Tags", "Artist", "Notes", "Categories"}


def test_form_init_skips_reupload(hooks):
    descriptor = {"ForReUpload": {"type": "hidden"}}
    assert hooks.on_upload_form_init_descriptor(descriptor) is True
    assert descriptor == {"ForReUpload": {"type": "hidden"}}


# --- Upload completion --- #

def test_creates_page_when_missing(hooks, site):
    text = hooks.on_upload_complete("File:A.png", {"artist": "Me"}, "desc")

    assert text == "{{FileInfo\n|summary=desc\n|artist=Me\n}}"
    assert site.pages["File:A.png"] == text
    assert len(site.edits) == 1
    edit = site.edits[0]
    assert edit.summary == ""
    assert edit.flags == EDIT_AUTOSUMMARY | EDIT_SUPPRESS_RC


def test_appends_after_existing_text(hooks, site):
    site.pages["File:A.png"] = "Uploaded by bot."
    text = hooks.on_upload_complete("File:A.png", {"artist": "Me"}, "desc")
    assert text == "Uploaded by bot.\n\n{{FileInfo\n|summary=desc\n|artist=Me\n}}"


def test_skips_when_sentinel_present(hooks, site):
    site.pages["File:A.png"] = "{{FileInfo\n|summary=old\n}}"
    assert hooks.on_upload_complete("File:A.png", {"artist": "Me"}, "desc") is None
    assert site.pages["File:A.png"] == "{{FileInfo\n|summary=old\n}}"
    assert site.edits == []


def test_second_run_is_a_no_op(hooks, site):
    hooks.on_upload_complete("File:A.png", {"artist": "Me"}, "desc")
    assert hooks.on_upload_complete("File:A.png", {"artist": "You"}, "other") is None
    assert len(site.edits) == 1


def test_reupload_makes_no_edit(hooks, site):
    assert hooks.on_upload_complete("File:A.png", {"artist": "Me"}, "d", for_reupload=True) is None
    assert site.edits == []


def test_no_fields_defined_makes_no_edit():
    site = InMemorySite()
    hooks = UploadHooks(FieldRegistry(site, site, site), pages=site)
    assert hooks.on_upload_complete("File:A.png", {"artist": "Me"}, "desc") is None
    assert site.edits == []


def test_nothing_to_write_makes_no_edit(hooks, site):
    assert hooks.on_upload_complete("File:A.png", {}, "") is None
    assert "File:A.png" not in site.pages
