#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Unlocking a store for one command or interactive session"""

import logging

from lockbox.constants import MAX_PASSPHRASE_ATTEMPTS
from lockbox.errors import AuthenticationError
from lockbox.store import CredentialStore

logger = logging.getLogger(__name__)


def unlock_store(file_path, prompt, master_password=None, max_attempts=MAX_PASSPHRASE_ATTEMPTS):
    """
    Open and decrypt a store, asking for the master password if needed

    A master password passed in explicitly gets a single attempt. A
    prompted one is asked for again after each failed attempt until
    max_attempts is reached.

    Args:
        file_path: Path to the store file
        prompt: Object providing prompt_password
        master_password: Master password from the command line, if any
        max_attempts: Number of prompted attempts allowed

    Returns:
        UnlockedStore

    Raises:
        AuthenticationError: If every attempt used a wrong master password
        StoreIOError: If the store file cannot be created or read
        ParseError: If the store file is malformed
    """
    if master_password is not None:
        return CredentialStore(file_path, master_password).load()

    attempts = 0
    while True:
        attempts += 1
        store = CredentialStore(file_path, prompt.prompt_password("master password"))
        try:
            return store.load()
        except AuthenticationError:
            remaining = max_attempts - attempts
            logger.warning(f"Failed unlock attempt {attempts} of {max_attempts}")
            if remaining <= 0:
                raise
            print(f"⚠️ Invalid password. {remaining} attempt{'s' if remaining != 1 else ''} remaining.")
