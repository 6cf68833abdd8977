#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Password generation module for Lockbox"""

import logging
import math
import secrets

from lockbox.constants import DEFAULT_LENGTH, DIGITS, LOWERCASE, SPECIAL_CHARS, UPPERCASE
from lockbox.errors import PasswordOptionsError

logger = logging.getLogger(__name__)

# (minimum bits, rating), checked from the top
STRENGTH_RATINGS = [
    (120, "Excellent"),
    (80, "Very Strong"),
    (60, "Strong"),
    (36, "Medium"),
]


def select_char_sets(symbols=True, uppercase=True, lowercase=True, numbers=True):
    """Return the character lists enabled by the generator options"""
    char_sets = []
    if lowercase:
        char_sets.append(LOWERCASE)
    if uppercase:
        char_sets.append(UPPERCASE)
    if numbers:
        char_sets.append(DIGITS)
    if symbols:
        char_sets.append(SPECIAL_CHARS)
    return char_sets


def create_diverse_password(length, char_sets):
    """
    Create a password with at least one character from each character set

    Args:
        length: Length of password to generate
        char_sets: List of character lists that must all be represented

    Returns:
        Generated password string
    """
    all_chars = [c for chars in char_sets for c in chars]

    # Start with one character from each required set
    password = [secrets.choice(chars) for chars in char_sets]

    # Fill remaining characters randomly
    while len(password) < length:
        password.append(secrets.choice(all_chars))

    secrets.SystemRandom().shuffle(password)
    return ''.join(password)


def calculate_password_strength(password, symbols=True, uppercase=True, lowercase=True, numbers=True):
    """
    Rate a generated password by the entropy of its character pool

    The pool is made of the character types the password was generated
    with, so a 16 digit PIN rates lower than 16 characters drawn from
    every type. Characters outside the enabled types are ignored.

    Args:
        password: Password to evaluate
        symbols: Whether special characters were enabled
        uppercase: Whether uppercase letters were enabled
        lowercase: Whether lowercase letters were enabled
        numbers: Whether digits were enabled

    Returns:
        String rating of password strength
    """
    char_sets = select_char_sets(symbols, uppercase, lowercase, numbers)
    pool = set(c for chars in char_sets for c in chars)
    length = sum(1 for c in password if c in pool)
    if not length:
        return "Weak"

    bits = length * math.log2(len(pool))
    for minimum, rating in STRENGTH_RATINGS:
        if bits >= minimum:
            return rating
    return "Weak"


def generate_password(length=DEFAULT_LENGTH, symbols=True, uppercase=True, lowercase=True, numbers=True):
    """
    Generate a random password with the selected character types

    Every enabled character type appears at least once.

    Args:
        length: Length of password to generate
        symbols: Whether to include special characters
        uppercase: Whether to include uppercase letters
        lowercase: Whether to include lowercase letters
        numbers: Whether to include digits

    Returns:
        Password string

    Raises:
        PasswordOptionsError: If no character type is enabled or the length
            is too short to fit one character of each enabled type
    """
    char_sets = select_char_sets(symbols, uppercase, lowercase, numbers)

    if not char_sets:
        raise PasswordOptionsError("At least one character type must be enabled.")
    if not isinstance(length, int) or length < len(char_sets):
        raise PasswordOptionsError(f"Password length must be at least {len(char_sets)}.")

    # Log password generation (without the actual password)
    logger.info(
        f"Generating password (length={length}, symbols={symbols}, uppercase={uppercase}, "
        f"lowercase={lowercase}, numbers={numbers})"
    )
    return create_diverse_password(length, char_sets)


def generate_passwords(count, **options):
    """
    Generate several passwords with the same options

    Args:
        count: Number of passwords to generate
        **options: Keyword arguments passed to generate_password

    Returns:
        List of password strings

    Raises:
        PasswordOptionsError: If count is below 1 or the options are invalid
    """
    if count < 1:
        raise PasswordOptionsError("Count must be at least 1.")
    return [generate_password(**options) for _ in range(count)]
