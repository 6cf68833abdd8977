#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Utility functions for Lockbox"""

import getpass
import re


class TerminalPrompt:
    """
    Reads secrets and plain lines from the terminal

    Anything with the same two methods can stand in for it, which is how
    the commands and the interactive menu get scripted input in tests.
    """

    def prompt_password(self, label):
        """Ask for a hidden value such as the master password"""
        return getpass.getpass(f"Please enter the {label}\n>> ").strip()

    def read_line(self, prompt):
        """Ask for a visible line of input"""
        return input(prompt)


def confirm_new_master(prompt):
    """
    Ask for a new master password twice until both entries match

    Args:
        prompt: Object providing prompt_password

    Returns:
        The confirmed master password
    """
    while True:
        password = prompt.prompt_password("new master password")
        if not password:
            print("⚠️ Master password cannot be empty.")
            continue
        confirm_password = prompt.prompt_password("new master password again")
        if password != confirm_password:
            print("⚠️ Passwords do not match. Please try again.")
            continue
        return password


def get_validated_input(prompt, reader, valid_options=None, valid_pattern=None, default=None, allow_back=True):
    """
    Get user input with validation

    Args:
        prompt: Text to display to the user
        reader: Object providing read_line
        valid_options: List of valid input options (case insensitive)
        valid_pattern: Regex pattern that input must match
        default: Default value if user enters nothing
        allow_back: Whether to allow 'b' or 'back' as input to go back

    Returns:
        User input string or '_BACK_' for back command
    """
    # Add back option notice if allowed
    if allow_back:
        if prompt.strip().endswith(':'):
            prompt = prompt.strip() + " (or 'b' to go back): "
        else:
            prompt = prompt.strip() + " (or enter 'b' to go back): "

    while True:
        user_input = reader.read_line(prompt).strip()

        # Check for back command
        if allow_back and user_input.lower() in ['b', 'back']:
            return '_BACK_'

        # Use default if input is empty and default is provided
        if not user_input and default is not None:
            return default

        # Validate against valid options
        if valid_options and user_input.lower() not in valid_options:
            print(f"⚠️ Invalid input. Valid options are: {', '.join(valid_options)}")
            continue

        # Validate against pattern
        if valid_pattern and not re.match(valid_pattern, user_input):
            print(f"⚠️ Invalid input. Must match pattern: {valid_pattern}")
            continue

        return user_input.lower() if valid_options else user_input


def optional_username(value):
    """Map an empty username answer to None"""
    return value if value else None
