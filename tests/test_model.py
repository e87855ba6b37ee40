from __future__ import annotations

import pytest

from inistore.store import (
    IniDocument,
    MalformedIdentifierError,
    MalformedIdentifierWarning,
    split_identifier,
    trim_text,
)


def test_trim_text_strips_spaces_tabs_and_newline():
    assert trim_text("  \tvalue \t") == "value"
    assert trim_text("value\n") == "value"
    assert trim_text("a b") == "a b"


def test_trim_text_removes_newline_after_spaces():
    # spaces before the newline are kept
    assert trim_text("  v \n") == "v "


def test_split_identifier_uses_first_dot():
    assert split_identifier("db.host") == ("db", "host")
    # the key keeps the rest of the dots
    assert split_identifier("db.conn.timeout") == ("db", "conn.timeout")


def test_split_identifier_without_dot_warns_and_continues():
    with pytest.warns(MalformedIdentifierWarning):
        assert split_identifier("foo") == ("foo", "")


def test_split_identifier_strict_raises():
    with pytest.raises(MalformedIdentifierError):
        split_identifier("foo", strict=True)


def test_remove_last_key_drops_section():
    doc = IniDocument()
    doc.put("db", "host", "localhost")
    doc.put("db", "port", "5432")

    doc.remove("db", "port")
    assert "db" in doc
    doc.remove("db", "host")
    assert "db" not in doc
    assert len(doc) == 0


def test_remove_missing_key_leaves_section():
    doc = IniDocument()
    doc.put("db", "host", "localhost")

    with pytest.raises(KeyError):
        doc.remove("db", "missing")
    assert doc["db"].to_dict() == {"host": "localhost"}


def test_setting_empty_section_is_not_kept():
    doc = IniDocument()
    doc["empty"] = {}
    assert "empty" not in doc


def test_merge_overwrites_and_accumulates():
    first, second = IniDocument(), IniDocument()
    first.put("a", "x", "1")
    first.put("a", "y", "2")
    second.put("a", "x", "9")
    second.put("b", "z", "3")

    first.merge(second)
    assert first.to_dict() == {"a": {"x": "9", "y": "2"}, "b": {"z": "3"}}


def test_to_dict_is_sorted():
    doc = IniDocument()
    doc.put("zeta", "b", "1")
    doc.put("alpha", "z", "2")
    doc.put("alpha", "a", "3")

    out = doc.to_dict()
    assert list(out) == ["alpha", "zeta"]
    assert list(out["alpha"]) == ["a", "z"]
