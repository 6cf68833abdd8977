#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Storage utilities for Lockbox"""

import contextlib
import os
import logging

from lockbox.errors import StoreIOError

logger = logging.getLogger(__name__)


class StoreFile:
    """Handles raw byte I/O on the encrypted store file"""

    def __init__(self, path):
        """
        Initialize the storage handler

        Args:
            path: Path to the store file
        """
        self.path = os.fspath(path)

    def has_content(self):
        """
        Check whether the store file exists and is not empty

        Returns:
            True if there is something to load, False otherwise

        Raises:
            StoreIOError: If the file exists but cannot be inspected
        """
        try:
            return os.path.getsize(self.path) > 0
        except FileNotFoundError:
            return False
        except OSError as e:
            raise StoreIOError(self.path, "inspect", e) from e

    def read(self):
        """
        Read the whole store file

        Returns:
            File contents as bytes

        Raises:
            StoreIOError: If the file is missing or unreadable
        """
        try:
            with open(self.path, 'rb') as f:
                return f.read()
        except OSError as e:
            raise StoreIOError(self.path, "read", e) from e

    def write(self, data):
        """
        Replace the store file with new contents

        Data goes to a temporary file in the same directory first and is
        then renamed over the store, so a failed write leaves the previous
        file intact.

        Args:
            data: Envelope bytes to persist

        Raises:
            StoreIOError: If the directory or file cannot be written
        """
        tmp_path = self.path + ".tmp"
        try:
            self._ensure_dir_exists()
            fd = os.open(tmp_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
            with os.fdopen(fd, 'wb') as f:
                f.write(data)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self.path)
        except OSError as e:
            with contextlib.suppress(OSError):
                os.remove(tmp_path)
            raise StoreIOError(self.path, "write", e) from e

    def _ensure_dir_exists(self):
        """Create the directory holding the store if it doesn't exist"""
        directory = os.path.dirname(os.path.abspath(self.path))
        if not os.path.exists(directory):
            os.makedirs(directory, mode=0o700, exist_ok=True)
            logger.info(f"Created store directory: {directory}")
