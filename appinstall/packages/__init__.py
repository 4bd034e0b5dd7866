"""
Package system access modules
"""

from .aur_client import AURClient
from .pacman_client import PackageManager, PackageOrigin, PacmanClient, parse_version_field

__all__ = ['AURClient', 'PackageManager', 'PackageOrigin', 'PacmanClient', 'parse_version_field']
