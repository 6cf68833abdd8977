#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Constants for Lockbox"""

import string

# Store file layout: salt || nonce || ciphertext (tag included)
SALT_LENGTH = 16
NONCE_LENGTH = 12
TAG_LENGTH = 16
SALT_END = SALT_LENGTH
NONCE_END = SALT_LENGTH + NONCE_LENGTH
MIN_ENVELOPE_LENGTH = NONCE_END + TAG_LENGTH

# Key derivation. Changing these makes existing stores unreadable.
KEY_LENGTH = 32  # AES-256
PBKDF2_ITERATIONS = 100_000

# Plaintext of a freshly initialized store
EMPTY_CREDENTIALS = "[]"
ENCODING = "utf-8"

# Define character sets for password generation
LOWERCASE = list(string.ascii_lowercase)
UPPERCASE = list(string.ascii_uppercase)
DIGITS = list(string.digits)
SPECIAL_CHARS = list("!@#$%^&*()-_=+[]{};:,.?/|~")

ALLOWED_LENGTHS = (8, 16, 32)
DEFAULT_LENGTH = 16

# Locations
DEFAULT_STORE_DIR = ".lockbox"
DEFAULT_STORE_NAME = "store"
LOG_FILE_NAME = "lockbox.log"
STORE_ENV_VAR = "LOCKBOX_STORE"

# Interactive use
MAX_PASSPHRASE_ATTEMPTS = 3
HIDDEN_PASSWORD = "***"
