"""
Pacman Client Module - Queries and installs packages through pacman or an AUR helper
"""

import abc
import enum
import logging
import re
from typing import List, Optional

from appinstall.common.errors import HelperRequiredError, VersionQueryError

logger = logging.getLogger(__name__)

VERSION_FIELD = re.compile(r'^Version\s*:\s*(\S+)', re.MULTILINE)
# Field names are localized, queries always run in the C locale
QUERY_ENV = {'LC_ALL': 'C'}


class PackageOrigin(enum.Enum):
    OFFICIAL = 'official'
    AUR = 'aur'


def parse_version_field(info_output: str) -> Optional[str]:
    """Extract the first "Version : x" value from -Qi/-Si output"""
    if not info_output:
        return None
    match = VERSION_FIELD.search(info_output)
    return match.group(1) if match else None


class PackageManager(abc.ABC):
    """Capability used by install units to talk to the package system"""

    @abc.abstractmethod
    def query_installed(self, package: str) -> Optional[str]:
        """Installed version, or None when not installed"""

    @abc.abstractmethod
    def query_available(self, package: str) -> Optional[str]:
        """Version offered by the repositories, or None when unknown"""

    @abc.abstractmethod
    def install_command(self, package: str) -> List[str]:
        """Command line that installs or updates the package"""

    @abc.abstractmethod
    def install_or_update(self, package: str) -> int:
        """Install the package, or upgrade it when already installed; returns the exit status"""


class PacmanClient(PackageManager):
    """pacman for official packages, the resolved AUR helper for AUR packages

    Args:
        shell_executor: ShellExecutor used for every command
        origin: Where the packages handled by this client come from
        aur_helper: Helper name, required for AUR packages
        aur_client: Optional AURClient answering query_available for AUR
            packages instead of '<helper> -Si'
    """

    def __init__(self, shell_executor, origin=PackageOrigin.OFFICIAL, aur_helper=None, aur_client=None):
        if origin is PackageOrigin.AUR and not aur_helper:
            raise HelperRequiredError("An AUR helper is required to manage AUR packages")
        self.shell_executor = shell_executor
        self.origin = origin
        self.aur_helper = aur_helper
        self.aur_client = aur_client

    def _query(self, cmd):
        """Run a -Qi/-Si style query; None when it fails or cannot be started"""
        try:
            result = self.shell_executor.run_command(cmd, extra_env=QUERY_ENV)
        except OSError as e:
            logger.debug(f"{' '.join(cmd)} could not be run: {e}")
            return None
        if result.returncode != 0:
            logger.debug(f"{' '.join(cmd)} exited with {result.returncode}")
            return None
        return result.stdout

    def query_installed(self, package):
        output = self._query(['pacman', '-Qi', package])
        if output is None:
            logger.debug(f"{package} is not installed")
            return None

        version = parse_version_field(output)
        if not version:
            raise VersionQueryError(f"{package} is installed but pacman reported no version for it")
        return version

    def query_available(self, package):
        if self.origin is PackageOrigin.AUR:
            if self.aur_client is not None:
                return self.aur_client.get_package_version(package)
            cmd = [self.aur_helper, '-Si', package]
        else:
            cmd = ['pacman', '-Si', package]

        output = self._query(cmd)
        return parse_version_field(output) if output else None

    def install_command(self, package):
        if self.origin is PackageOrigin.AUR:
            return [self.aur_helper, '-S', '--noconfirm', package]
        return ['sudo', 'pacman', '-S', '--noconfirm', package]

    def install_or_update(self, package):
        # Output goes straight to the terminal so prompts and progress stay visible
        result = self.shell_executor.run_command(
            self.install_command(package), capture=False, log_cmd=True
        )
        return result.returncode
