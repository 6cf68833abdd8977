#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Run script for Lockbox
"""

import sys

from lockbox.__main__ import main

if __name__ == "__main__":
    sys.exit(main())
