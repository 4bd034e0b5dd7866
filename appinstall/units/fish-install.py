#!/usr/bin/env python3
"""
Install or update Fish shell on Manjaro Linux

Usage: fish-install.py [--dry-run] [--force]
"""

import sys

from appinstall.cli import unit_main

if __name__ == "__main__":
    sys.exit(unit_main("fish"))
