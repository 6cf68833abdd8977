"""Tests for CredentialEntry and CredentialSet."""

import json

import pytest

from lockbox.credentials import CredentialEntry, CredentialSet, format_entry
from lockbox.errors import ParseError


def _set(*triples):
    return CredentialSet(CredentialEntry(s, u, p) for s, u, p in triples)


class TestCredentialEntry:

    def test_repr_hides_password(self):
        entry = CredentialEntry("svc", "user", "hunter2")
        assert "hunter2" not in repr(entry)

    def test_none_username_differs_from_empty(self):
        entry = CredentialEntry("svc", None, "p")
        assert entry.matches("svc", None)
        assert not entry.matches("svc", "")

    @pytest.mark.parametrize("data", [
        {"username": "u", "password": "p"},
        {"service": "s", "username": "u"},
        {"service": 1, "password": "p"},
        {"service": "s", "username": 5, "password": "p"},
        ["s", "u", "p"],
    ])
    def test_from_dict_rejects_bad_data(self, data):
        with pytest.raises(ParseError):
            CredentialEntry.from_dict(data)

    def test_from_dict_missing_username_is_none(self):
        entry = CredentialEntry.from_dict({"service": "s", "password": "p"})
        assert entry.username is None


class TestCredentialSet:

    def test_append_keeps_order(self):
        credentials = _set(("a", None, "1"), ("b", "u", "2"))
        assert [e.service for e in credentials] == ["a", "b"]
        assert len(credentials) == 2

    def test_find_returns_first_match(self):
        credentials = _set(("svc", "u", "p1"), ("svc", "u", "p2"))
        assert credentials.find("svc", "u").password == "p1"

    def test_remove_returns_first_match_and_keeps_rest(self):
        credentials = _set(("svc", "u", "p1"), ("other", None, "x"), ("svc", "u", "p2"))
        removed = credentials.remove("svc", "u")
        assert removed.password == "p1"
        assert [e.password for e in credentials] == ["x", "p2"]
        assert credentials.find("svc", "u").password == "p2"

    def test_not_found(self):
        credentials = CredentialSet()
        assert credentials.find("nonexistent", None) is None
        assert credentials.remove("nonexistent", None) is None

        credentials = _set(("svc", "u", "p"))
        assert credentials.remove("svc", None) is None
        assert credentials == _set(("svc", "u", "p"))

    def test_json_roundtrip_preserves_username_presence(self):
        credentials = _set(("a", None, "1"), ("b", "", "2"), ("c", "ü", "3"))
        restored = CredentialSet.from_json(credentials.to_json())
        assert restored == credentials
        assert [e.username for e in restored] == [None, "", "ü"]

    def test_empty_json(self):
        assert CredentialSet.from_json("[]") == CredentialSet()
        assert CredentialSet().to_json() == "[]"

    def test_json_shape(self):
        data = json.loads(_set(("svc", None, "p")).to_json())
        assert data == [{"service": "svc", "username": None, "password": "p"}]

    @pytest.mark.parametrize("text", ["not json", "{}", "[1, 2]", '[{"service": "s"}]'])
    def test_from_json_rejects_malformed(self, text):
        with pytest.raises(ParseError):
            CredentialSet.from_json(text)


class TestFormatEntry:

    def test_masked(self):
        line = format_entry(CredentialEntry("service1", "username1", "password1"))
        assert line == "Service: service1, Username: username1, Password: ***"

    def test_shown_without_username(self):
        line = format_entry(CredentialEntry("service2", None, "password2"), show_password=True)
        assert line == "Service: service2, Password: password2"
