#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Encryption utilities for Lockbox

Key derivation (PBKDF2-HMAC-SHA256) and the AES-256-GCM envelope that
protects the credential list on disk.

Store file layout: salt(16) + nonce(12) + ciphertext+tag
"""

import os
from collections import namedtuple

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from lockbox.constants import (
    ENCODING,
    KEY_LENGTH,
    MIN_ENVELOPE_LENGTH,
    NONCE_END,
    NONCE_LENGTH,
    PBKDF2_ITERATIONS,
    SALT_END,
    SALT_LENGTH,
)
from lockbox.errors import AuthenticationError, CipherError, ParseError

Envelope = namedtuple("Envelope", ["salt", "nonce", "ciphertext"])


def generate_salt():
    """
    Generate a random salt for key derivation

    Returns:
        Random salt bytes
    """
    return os.urandom(SALT_LENGTH)


def derive_key(passphrase, salt):
    """
    Derive the store key from the master passphrase

    Args:
        passphrase: The master passphrase string
        salt: Salt bytes read from (or written to) the store file

    Returns:
        32 raw key bytes
    """
    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=KEY_LENGTH,
        salt=salt,
        iterations=PBKDF2_ITERATIONS,
    )
    return kdf.derive(passphrase.encode(ENCODING))


def encrypt(plaintext, key):
    """
    Encrypt bytes with AES-256-GCM under a fresh random nonce

    Args:
        plaintext: Bytes to protect
        key: 32-byte key from derive_key

    Returns:
        Tuple of (ciphertext, nonce); the ciphertext carries the tag

    Raises:
        CipherError: If the cipher rejects the key or input
    """
    nonce = os.urandom(NONCE_LENGTH)
    try:
        ciphertext = AESGCM(key).encrypt(nonce, plaintext, None)
    except (ValueError, TypeError, OverflowError) as e:
        raise CipherError(f"Failed to encrypt passwords: {e}") from e
    return ciphertext, nonce


def decrypt(ciphertext, key, nonce):
    """
    Decrypt and authenticate an AES-256-GCM ciphertext

    A wrong passphrase derives a wrong key, so the tag check is also how
    the master passphrase gets verified.

    Args:
        ciphertext: Ciphertext with the tag appended
        key: 32-byte key from derive_key
        nonce: The nonce used at encryption time

    Returns:
        Plaintext bytes

    Raises:
        AuthenticationError: If the key, nonce or ciphertext do not match
    """
    try:
        return AESGCM(key).decrypt(nonce, ciphertext, None)
    except InvalidTag as e:
        raise AuthenticationError() from e


def pack_envelope(salt, nonce, ciphertext):
    """Join salt, nonce and ciphertext into the on-disk byte layout"""
    return bytes(salt) + bytes(nonce) + bytes(ciphertext)


def unpack_envelope(data):
    """
    Split store file contents into salt, nonce and ciphertext

    Args:
        data: Raw bytes of the store file

    Returns:
        Envelope namedtuple

    Raises:
        ParseError: If the data is too short to hold a salt, nonce and tag
    """
    if len(data) < MIN_ENVELOPE_LENGTH:
        raise ParseError(
            f"Store file is {len(data)} bytes; at least {MIN_ENVELOPE_LENGTH} expected."
        )
    return Envelope(
        salt=data[:SALT_END],
        nonce=data[SALT_END:NONCE_END],
        ciphertext=data[NONCE_END:],
    )


def seal(plaintext, passphrase, salt):
    """
    Derive the key and encrypt plaintext into a packed envelope

    Args:
        plaintext: Bytes to protect
        passphrase: The master passphrase string
        salt: Salt bytes to derive with and store in the envelope

    Returns:
        Envelope bytes ready to be written to disk
    """
    key = derive_key(passphrase, salt)
    ciphertext, nonce = encrypt(plaintext, key)
    return pack_envelope(salt, nonce, ciphertext)


def open_envelope(data, passphrase):
    """
    Unpack envelope bytes and decrypt them with the passphrase

    Returns:
        Tuple of (Envelope, plaintext bytes)
    """
    envelope = unpack_envelope(data)
    key = derive_key(passphrase, envelope.salt)
    return envelope, decrypt(envelope.ciphertext, key, envelope.nonce)
