#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Lockbox

This program allows you to:
1. Store passwords for services in a single encrypted file
2. Show, list and remove stored passwords
3. Generate strong, random passwords
4. Change the master password

All data is stored locally, encrypted with AES-256-GCM, at ~/.lockbox/store
"""

import logging
import sys

from lockbox.cli import main as cli_main

logger = logging.getLogger("lockbox")


def main(argv=None):
    """Run the Lockbox command line"""
    try:
        return cli_main(argv)
    except KeyboardInterrupt:
        print("\nProgram interrupted. Exiting...")
        return 1
    except Exception as e:
        print(f"An error occurred: {e}")
        # Don't log the error details to console for security reasons
        logger.error(f"Unhandled exception: {str(e)}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
