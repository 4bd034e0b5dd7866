#!/usr/bin/env python3
"""
Install or update Visual Studio Code on Manjaro Linux (AUR: visual-studio-code-bin)

Usage: vscode-install.py [--dry-run] [--force]
"""

import sys

from appinstall.cli import unit_main

if __name__ == "__main__":
    sys.exit(unit_main("vscode"))
