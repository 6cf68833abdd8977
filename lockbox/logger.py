#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Logging module for Lockbox"""

import logging

LOGGER_NAME = "lockbox"


def setup_logger(log_file, level=logging.INFO):
    """
    Set up the logging system

    Module loggers live under the "lockbox" namespace, so handlers added
    here receive their records too.

    Args:
        log_file: Path to the log file
        level: Logging level for the file handler

    Returns:
        Logger instance
    """
    # Create logger
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Configure once per process
    if any(isinstance(h, logging.FileHandler) for h in logger.handlers):
        return logger

    # Create file handler
    file_handler = logging.FileHandler(log_file)
    file_handler.setLevel(level)

    # Create formatter
    formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')
    file_handler.setFormatter(formatter)

    # Add handler to logger
    logger.addHandler(file_handler)

    return logger
