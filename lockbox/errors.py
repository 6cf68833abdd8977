#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Exceptions raised by Lockbox"""


class LockboxError(Exception):
    """Base class for every recoverable Lockbox failure"""


class AuthenticationError(LockboxError):
    """The store could not be authenticated: wrong passphrase or tampered file"""

    def __init__(self, message="Master password incorrect. Please try again."):
        super().__init__(message)


class StoreIOError(LockboxError):
    """The store file could not be read, created or written"""

    def __init__(self, path, action, cause):
        self.path = path
        self.action = action
        super().__init__(f"Could not {action} store file {path}: {cause}")


class ParseError(LockboxError):
    """The store file or its decrypted contents are malformed"""


class CipherError(LockboxError):
    """Unexpected failure inside the cipher while encrypting"""


class PasswordOptionsError(LockboxError, ValueError):
    """Password generator options that cannot produce a password"""
