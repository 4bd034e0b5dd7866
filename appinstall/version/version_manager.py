"""
Version Manager Module - Handles version normalization and comparison
"""

import enum
import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from appinstall.common.errors import VersionQueryError

logger = logging.getLogger(__name__)

# pacman appends "-<pkgrel>" to every version; a bare trailing dash is dropped as well
REVISION_SUFFIX = re.compile(r'-[0-9]*$')
SEGMENT = re.compile(r'[0-9]+|[^0-9]+')


class ComparisonResult(enum.Enum):
    EQUAL = 'equal'
    UPGRADE_AVAILABLE = 'upgrade-available'
    INSTALLED_NEWER = 'installed-newer'


def clean_version(version: str) -> str:
    """Strip the trailing revision suffix, "1.2.3-4" -> "1.2.3" """
    return REVISION_SUFFIX.sub('', version)


def version_key(version: str) -> List[Tuple[int, int, str]]:
    """Sort key ordering versions the way ``sort -V`` does

    Digit runs compare as integers and sort after text runs at the same
    position; text runs compare by code point. A version that is a prefix
    of another sorts first.
    """
    key = []
    for segment in SEGMENT.findall(version):
        if segment.isdigit():
            key.append((1, int(segment), ''))
        else:
            key.append((0, 0, segment))
    return key


def compare(installed: str, available: str) -> ComparisonResult:
    """Compare an installed version against the one offered by the repositories"""
    if installed == available:
        return ComparisonResult.EQUAL

    installed_key = version_key(clean_version(installed))
    available_key = version_key(clean_version(available))

    if installed_key == available_key:
        return ComparisonResult.EQUAL
    if installed_key < available_key:
        return ComparisonResult.UPGRADE_AVAILABLE
    return ComparisonResult.INSTALLED_NEWER


@dataclass(frozen=True)
class VersionCheck:
    package: str
    installed: str
    available: str
    result: ComparisonResult


class VersionResolver:
    """Resolves live versions through a PackageManager and compares them"""

    def __init__(self, package_manager):
        self.package_manager = package_manager

    def installed_version(self, package: str) -> Optional[str]:
        """Installed version, or None when the package is not installed"""
        return self.package_manager.query_installed(package) or None

    def check(self, package: str, installed: Optional[str] = None) -> VersionCheck:
        """
        Compare the installed version of a package with the available one.

        Args:
            package: Package name
            installed: Installed version when the caller already queried it

        Raises:
            VersionQueryError: if the package is not installed or no available
                version could be retrieved
        """
        if installed is None:
            installed = self.installed_version(package)
        if not installed:
            raise VersionQueryError(f"{package} is not installed, nothing to compare")

        available = self.package_manager.query_available(package)
        if not available:
            raise VersionQueryError("Could not retrieve available version information")

        result = compare(installed, available)
        logger.debug(f"VERSION_COMPARE pkg={package} installed={installed} available={available} result={result.value}")
        return VersionCheck(package, installed, available, result)
