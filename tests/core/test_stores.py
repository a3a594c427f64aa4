#!/usr/bin/env python3
import pytest
import yaml
from pydantic import ValidationError

from uploadfields.core.stores import CategoryRecord, DefinitionRecord, InMemorySite, YamlSite


# --- InMemorySite --- #

def test_find_field_records_filters_like_the_host_query(site):
    ids = [r.id for r in site.find_field_records()]
    assert ids == [10, 11, 12, 13, 14, 20]


def test_find_existing_requires_member_pages(site):
    assert site.find_existing(["Foo", "Empty", "Missing"]) == {"Foo"}


def test_plain_returns_empty_for_missing_message(site):
    assert site.plain("nope") == ""


def test_save_text_records_edit():
    s = InMemorySite()
    s.save_text("File:A.png", "x", summary="", flags=40)
    assert s.get_text("File:A.png") == "x"
    assert s.edits[0].flags == 40


def test_records_are_frozen():
    rec = DefinitionRecord(id=1, title="UploadField-text-A")
    with pytest.raises(ValidationError):
        rec.title = "other"  # type: ignore[misc]


# --- YamlSite --- #

def _write(path, payload):
    path.write_text(yaml.safe_dump(payload), encoding="utf-8")
    return path


def test_yaml_site_round_trip(tmp_path):
    path = _write(tmp_path / "site.yaml", {
        "definitions": [{"id": 1, "title": "UploadField-text-Artist"}],
        "categories": [{"title": "Foo", "pages": 2}],
        "messages": {"UploadField-text-Artist": "Unknown"},
        "pages": {"File:A.png": "hello"},
    })

    s = YamlSite.from_file(path)
    assert [r.title for r in s.find_field_records()] == ["UploadField-text-Artist"]
    assert s.all_categories() == [CategoryRecord(title="Foo", pages=2)]
    assert s.plain("UploadField-text-Artist") == "Unknown"

    s.save_text("File:A.png", "hello\n\nmore")
    s.save()

    reloaded = yaml.safe_load(path.read_text(encoding="utf-8"))
    assert reloaded["pages"]["File:A.png"] == "hello\n\nmore"
    assert reloaded["definitions"][0] == {
        "id": 1, "title": "UploadField-text-Artist", "namespace": 8, "is_redirect": False,
    }


def test_missing_yaml_site_is_empty(tmp_path):
    s = YamlSite.from_file(tmp_path / "nope.yaml")
    assert s.find_field_records() == []
    assert s.path == tmp_path / "nope.yaml"


def test_invalid_yaml_raises_value_error(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("definitions: [\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid YAML"):
        YamlSite.from_file(path)


def test_schema_mismatch_names_location(tmp_path):
    path = _write(tmp_path / "bad.yaml", {"definitions": [{"id": 1}]})
    with pytest.raises(ValueError, match=r"definitions\[0\]\.title: Field required"):
        YamlSite.from_file(path)


def test_unknown_top_level_key_is_rejected(tmp_path):
    path = _write(tmp_path / "bad.yaml", {"users": []})
    with pytest.raises(ValueError, match="Invalid site file"):
        YamlSite.from_file(path)


@pytest.mark.parametrize("title,listed", [
    ("UploadField-text-A", True),
    ("UploadField-text-Year-Of-Release", True),
    ("UploadField-text", False),
    ("UploadFieldX-text-A", False),
    ("uploadfield-text-A", False),
])
def test_field_title_pattern(title, listed):
    s = InMemorySite(definitions=[DefinitionRecord(id=1, title=title)])
    assert bool(s.find_field_records()) is listed
