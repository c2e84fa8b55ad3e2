"""Tests for the immutable Session value."""

import re

import pytest

from weblet.session.session import ZERO_SESSION, Session, new_session_id, secure_session_id


class TestSessionIds:
    def test_new_session_id_is_32_lowercase_hex(self):
        assert re.fullmatch(r"[0-9a-f]{32}", new_session_id())

    def test_secure_session_id_is_32_lowercase_hex(self):
        assert re.fullmatch(r"[0-9a-f]{32}", secure_session_id())

    def test_new_sessions_get_distinct_ids(self):
        ids = {Session.new().id for _ in range(100)}
        assert len(ids) == 100

    def test_new_uses_given_id_factory(self):
        session = Session.new(lambda: "fixed")
        assert session.id == "fixed"
        assert session.keys() == []


class TestZeroSession:
    def test_zero_session_has_empty_id(self):
        assert Session.zero().id == ""
        assert Session.zero().is_zero()
        assert ZERO_SESSION.is_zero()

    def test_new_session_is_not_zero(self):
        assert not Session.new().is_zero()

    def test_get_on_zero_session_returns_default(self):
        assert ZERO_SESSION.get("name", "anon") == "anon"


class TestCopyOnWrite:
    def test_with_value_does_not_mutate_receiver(self):
        s1 = Session("abc")
        s2 = s1.with_value("x", "1")
        assert s1.get("x", "") == ""
        assert s2.get("x", "") == "1"

    def test_with_value_keeps_id(self):
        s = Session("abc").with_value("x", "1")
        assert s.id == "abc"

    def test_chained_values_are_independent(self):
        base = Session("abc").with_value("a", "1")
        left = base.with_value("b", "2")
        right = base.with_value("b", "3")
        assert left.get("b") == "2"
        assert right.get("b") == "3"
        assert base.get("b") == ""

    def test_without_value_does_not_mutate_receiver(self):
        s1 = Session("abc", {"a": "1", "b": "2"})
        s2 = s1.without_value("a")
        assert s1.keys() == ["a", "b"]
        assert s2.keys() == ["b"]

    def test_constructor_copies_input_mapping(self):
        values = {"a": "1"}
        s = Session("abc", values)
        values["a"] = "changed"
        assert s.get("a") == "1"

    def test_values_view_is_read_only(self):
        s = Session("abc", {"a": "1"})
        with pytest.raises(TypeError):
            s.values["a"] = "2"  # type: ignore[index]
        assert s.get("a") == "1"


class TestSessionAccessors:
    def test_keys_are_sorted(self):
        s = Session("abc", {"zeta": "1", "alpha": "2", "mid": "3"})
        assert s.keys() == ["alpha", "mid", "zeta"]

    def test_get_returns_default_when_missing(self):
        assert Session("abc").get("missing", "dflt") == "dflt"

    def test_equality_compares_id_and_values(self):
        assert Session("a", {"k": "v"}) == Session("a", {"k": "v"})
        assert Session("a", {"k": "v"}) != Session("a", {"k": "w"})
        assert Session("a") != Session("b")
