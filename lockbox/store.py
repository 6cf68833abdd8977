#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Store lifecycle for Lockbox

A CredentialStore only knows its file and master passphrase. Loading it
decrypts the file and hands back an UnlockedStore, which is the only
object that can change credentials and write them back.
"""

import logging

from lockbox.constants import EMPTY_CREDENTIALS, ENCODING
from lockbox.credentials import CredentialEntry, CredentialSet
from lockbox.encryption import generate_salt, open_envelope, seal, unpack_envelope
from lockbox.errors import AuthenticationError, ParseError
from lockbox.storage import StoreFile

logger = logging.getLogger(__name__)


class CredentialStore:
    """An encrypted store file that has not been decrypted yet"""

    def __init__(self, file_path, master_password):
        """
        Open a store, initializing the file if it is missing or empty

        Args:
            file_path: Path to the store file
            master_password: Master passphrase used for the store

        Raises:
            StoreIOError: If the file cannot be created or written
        """
        self.file = StoreFile(file_path)
        self.file_path = self.file.path
        self._master_password = master_password

        if not self.file.has_content():
            self._initialize()

    def _initialize(self):
        """Write an encrypted empty credential list under a new salt"""
        salt = generate_salt()
        self.file.write(seal(EMPTY_CREDENTIALS.encode(ENCODING), self._master_password, salt))
        logger.info(f"Initialized new store at {self.file_path}")

    @property
    def master_password(self):
        return self._master_password

    def update_master(self, new_master_password):
        """
        Replace the master passphrase in memory

        The file is not touched; the next dump encrypts under the new
        passphrase.
        """
        self._master_password = new_master_password
        logger.info("Master password updated in memory")
        return self

    def load(self):
        """
        Decrypt the store file

        Returns:
            UnlockedStore holding the decrypted credentials

        Raises:
            AuthenticationError: If the passphrase is wrong or the file was tampered with
            StoreIOError: If the file cannot be read
            ParseError: If the file or its decrypted contents are malformed
        """
        data = self.file.read()
        try:
            _, plaintext = open_envelope(data, self._master_password)
        except AuthenticationError:
            logger.warning(f"Failed to unlock store at {self.file_path}")
            raise

        try:
            text = plaintext.decode(ENCODING)
        except UnicodeDecodeError as e:
            raise ParseError(f"Store contents are not valid {ENCODING}: {e}") from e

        credentials = CredentialSet.from_json(text)
        logger.info(f"Unlocked store at {self.file_path} ({len(credentials)} entries)")
        return UnlockedStore(self, credentials)


class UnlockedStore:
    """A store whose credentials have been decrypted into memory"""

    def __init__(self, store, credentials):
        self._store = store
        self.credentials = credentials

    @property
    def file_path(self):
        return self._store.file_path

    @property
    def master_password(self):
        return self._store.master_password

    def __iter__(self):
        return iter(self.credentials)

    def __len__(self):
        return len(self.credentials)

    def entries(self):
        """Return the stored entries in insertion order"""
        return list(self.credentials)

    def update_master(self, new_master_password):
        """Replace the master passphrase; takes effect on the next dump"""
        self._store.update_master(new_master_password)
        return self

    def push(self, service, username, password):
        """
        Append a new credential

        Args:
            service: Service name
            username: Username, or None
            password: Password to store

        Returns:
            self, for chaining
        """
        self.credentials.append(CredentialEntry(service, username, password))
        logger.info(f"Added password for service {service}")
        return self

    def pop(self, service, username):
        """
        Remove the first credential matching service and username

        Returns:
            The removed CredentialEntry, or None if none matched
        """
        entry = self.credentials.remove(service, username)
        if entry is None:
            logger.info(f"No password to remove for service {service}")
        else:
            logger.info(f"Removed password for service {service}")
        return entry

    def find(self, service, username):
        """
        Look up the first credential matching service and username

        Returns:
            The matching CredentialEntry, or None
        """
        return self.credentials.find(service, username)

    def dump(self):
        """
        Encrypt the credentials and write them back to the store file

        The salt already in the file is kept; the nonce is always new.

        Returns:
            self, for chaining

        Raises:
            StoreIOError: If the file cannot be read or written
            ParseError: If the file on disk no longer has a valid layout
            CipherError: If encryption fails
        """
        envelope = unpack_envelope(self._store.file.read())
        plaintext = self.credentials.to_json().encode(ENCODING)
        self._store.file.write(seal(plaintext, self.master_password, envelope.salt))
        logger.info(f"Saved {len(self.credentials)} entries to {self.file_path}")
        return self
