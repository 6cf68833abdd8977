#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Path configuration for Lockbox"""

import os

from lockbox.constants import DEFAULT_STORE_DIR, DEFAULT_STORE_NAME, LOG_FILE_NAME, STORE_ENV_VAR


def default_store_path():
    """Return ~/.lockbox/store"""
    return os.path.join(os.path.expanduser("~"), DEFAULT_STORE_DIR, DEFAULT_STORE_NAME)


def resolve_store_path(cli_path=None):
    """
    Work out which store file to use

    Args:
        cli_path: Path given on the command line, if any

    Returns:
        The command line path, else $LOCKBOX_STORE, else the default path
    """
    if cli_path:
        return cli_path
    env = os.getenv(STORE_ENV_VAR)
    return env if env else default_store_path()


def resolve_log_path(store_path):
    """Place the log file next to the store file, creating the directory if needed"""
    directory = os.path.dirname(os.path.abspath(store_path))
    os.makedirs(directory, mode=0o700, exist_ok=True)
    return os.path.join(directory, LOG_FILE_NAME)
