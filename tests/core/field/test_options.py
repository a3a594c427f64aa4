#!/usr/bin/env python3
import pytest

from uploadfields.core.field.options import LineCursor, count_depth, parse_options


# --- Flat and nested outlines --- #

def test_nested_group_attaches_to_preceding_entry():
    text = "*a\n*b\n**x|label\n*c"
    assert parse_options(text) == {"a": "a", "b": {"label": "x"}, "c": "c"}


def test_value_left_label_right():
    assert parse_options("*cc-by|CC BY") == {"CC BY": "cc-by"}


def test_only_first_delimiter_splits():
    assert parse_options("*v|a|b") == {"a|b": "v"}


def test_ignores_blank_and_unmarked_lines():
    text = "Pick one:\n\n*a\n  *not-a-bullet\n\n*b\ntrailing prose"
    assert parse_options(text) == {"a": "a", "b": "b"}


@pytest.mark.parametrize("text", [None, "", "\n\n", "no bullets here"])
def test_empty_results(text):
    assert parse_options(text) == {}


def test_depth_beyond_two_is_clamped():
    assert parse_options("*p\n***x|y") == parse_options("*p\n**x|y") == {"p": {"y": "x"}}


def test_pathological_marker_run_is_clamped():
    deep = "*" * 30 + "deep"
    assert parse_options("*p\n" + "*" * 40 + "deep") == {"p": {deep: deep}}


def test_group_closes_when_depth_drops():
    text = "*Weapons\n**sword|Swords\n**bow|Bows\n*Armor\n**helm|Helmets"
    assert parse_options(text) == {
        "Weapons": {"Swords": "sword", "Bows": "bow"},
        "Armor": {"Helmets": "helm"},
    }


def test_group_without_parent_is_dropped():
    assert parse_options("**orphan\n*a") == {"a": "a"}


def test_entries_without_label_are_skipped():
    assert parse_options("*\n*|\n*a") == {"a": "a"}


def test_value_may_be_empty_when_label_given():
    assert parse_options("*|Nothing") == {"Nothing": ""}


def test_later_duplicate_label_wins():
    assert parse_options("*x|Same\n*y|Same") == {"Same": "y"}


def test_delimiter_is_not_stripped_of_whitespace():
    assert parse_options("* a | A ") == {" A ": " a "}


def test_windows_line_endings():
    assert parse_options("*a\r\n*b\r\n") == {"a": "a", "b": "b"}


def test_only_newline_ends_a_line():
    assert parse_options("*a\u2028b\n*c\x0cd|C\x85D") == {"a\u2028b": "a\u2028b", "C\x85D": "c\x0cd"}


def test_only_one_carriage_return_is_dropped():
    assert parse_options("*a\r\r\n") == {"a\r": "a\r"}


# --- count_depth --- #

@pytest.mark.parametrize("line,expected", [
    ("a", 0),
    ("*a", 1),
    ("**a", 2),
    ("***", 3),
    ("*" * 10 + "a", 10),
    ("*" * 25, 10),
])
def test_count_depth(line, expected):
    assert count_depth(line) == expected


# --- LineCursor --- #

def test_cursor_advance_and_push_back_one_step():
    cur = LineCursor(["a", "b"])
    assert cur.peek() == "a"
    assert cur.advance() == "a"
    cur.push_back()
    assert cur.advance() == "a"
    assert cur.advance() == "b"
    assert cur.exhausted
    assert cur.advance() is None
    assert cur.peek() is None


def test_cursor_push_back_twice_raises():
    cur = LineCursor(["a", "b"])
    cur.advance()
    cur.advance()
    cur.push_back()
    with pytest.raises(RuntimeError, match="push back"):
        cur.push_back()
    assert cur.position == 1


def test_cursor_push_back_before_read_raises():
    with pytest.raises(RuntimeError):
        LineCursor(["a"]).push_back()
