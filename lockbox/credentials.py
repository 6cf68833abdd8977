#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Credential entries and the ordered set that gets encrypted on disk"""

import json
from dataclasses import dataclass, field
from typing import Optional

from lockbox.constants import HIDDEN_PASSWORD
from lockbox.errors import ParseError


@dataclass
class CredentialEntry:
    """
    A single stored secret.

    Entries are looked up by (service, username). A username of None is
    not the same as an empty username.
    """
    service: str
    username: Optional[str] = None
    password: str = field(default="", repr=False)

    def matches(self, service, username):
        """Check whether this entry has the given lookup identity"""
        return self.service == service and self.username == username

    def to_dict(self):
        """
        Serialize entry to a dictionary.

        Returns:
            Dictionary with service, username and password keys.
        """
        return {
            "service": self.service,
            "username": self.username,
            "password": self.password,
        }

    @classmethod
    def from_dict(cls, data):
        """
        Create an entry from its stored form.

        Args:
            data: Dictionary produced by to_dict.

        Returns:
            Reconstructed CredentialEntry.

        Raises:
            ParseError: If fields are missing or have the wrong type.
        """
        if not isinstance(data, dict):
            raise ParseError("Credential entry must be a JSON object")
        try:
            service = data["service"]
            password = data["password"]
        except KeyError as e:
            raise ParseError(f"Credential entry is missing {e.args[0]!r}") from e
        username = data.get("username")

        if not isinstance(service, str) or not isinstance(password, str):
            raise ParseError("Credential service and password must be strings")
        if username is not None and not isinstance(username, str):
            raise ParseError("Credential username must be a string or null")

        return cls(service=service, username=username, password=password)


def format_entry(entry, show_password=False):
    """
    Render an entry as a single line for listing

    Args:
        entry: CredentialEntry to render
        show_password: Whether to reveal the password or mask it

    Returns:
        Formatted line
    """
    password = entry.password if show_password else HIDDEN_PASSWORD
    if entry.username is None:
        return f"Service: {entry.service}, Password: {password}"
    return f"Service: {entry.service}, Username: {entry.username}, Password: {password}"


class CredentialSet:
    """Insertion-ordered collection of credential entries"""

    def __init__(self, entries=None):
        self._entries = list(entries or [])

    def __iter__(self):
        return iter(self._entries)

    def __len__(self):
        return len(self._entries)

    def __eq__(self, other):
        if not isinstance(other, CredentialSet):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self):
        return f"CredentialSet({self._entries!r})"

    def append(self, entry):
        """Add an entry at the end. Duplicates are allowed."""
        self._entries.append(entry)

    def find(self, service, username):
        """
        Find the first entry with the given service and username

        Returns:
            The matching CredentialEntry or None
        """
        for entry in self._entries:
            if entry.matches(service, username):
                return entry
        return None

    def remove(self, service, username):
        """
        Remove the first entry with the given service and username

        The remaining entries keep their relative order.

        Returns:
            The removed CredentialEntry or None if nothing matched
        """
        for index, entry in enumerate(self._entries):
            if entry.matches(service, username):
                return self._entries.pop(index)
        return None

    def to_json(self):
        """Serialize the set to the JSON text that gets encrypted"""
        return json.dumps(
            [entry.to_dict() for entry in self._entries],
            separators=(",", ":"),
            ensure_ascii=False,
        )

    @classmethod
    def from_json(cls, text):
        """
        Parse decrypted store contents

        Args:
            text: JSON array of credential objects

        Returns:
            CredentialSet in stored order

        Raises:
            ParseError: If the text is not a JSON array of valid entries
        """
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as e:
            raise ParseError(f"Store contents are not valid JSON: {e}") from e
        if not isinstance(raw, list):
            raise ParseError("Store contents must be a JSON array")
        return cls(CredentialEntry.from_dict(item) for item in raw)
