#!/usr/bin/env python3
"""
Install or update all applications using the *-install scripts next to this file
"""

import sys
from pathlib import Path

from appinstall.cli import orchestrator_main

if __name__ == "__main__":
    sys.exit(orchestrator_main(units_dir=Path(__file__).resolve().parent))
