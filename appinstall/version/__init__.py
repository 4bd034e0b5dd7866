"""
Version modules package
"""

from .version_manager import (
    ComparisonResult,
    VersionCheck,
    VersionResolver,
    clean_version,
    compare,
    version_key,
)

__all__ = ['ComparisonResult', 'VersionCheck', 'VersionResolver', 'clean_version', 'compare', 'version_key']
