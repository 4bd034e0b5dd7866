"""
AUR Helper Module - Detects an AUR helper and installs one on request
"""

import logging
import re
import sys
import tempfile
from pathlib import Path
from typing import Callable, Optional

from appinstall import config
from appinstall.common.errors import HelperInstallError, HelperRequiredError

logger = logging.getLogger(__name__)

YES_ANSWER = re.compile(r'^[Yy]$')


def terminal_confirm(prompt: str) -> bool:
    """Ask a y/n question on the terminal"""
    try:
        reply = input(f"{prompt} (y/n): ")
    except EOFError:
        return False
    return bool(YES_ANSWER.match(reply.strip()))


def default_confirm() -> Optional[Callable[[str], bool]]:
    """Terminal prompt when stdin is interactive, otherwise None"""
    if sys.stdin is not None and sys.stdin.isatty():
        return terminal_confirm
    return None


class AURHelperManager:
    """Finds the AUR helper to use, installing the default one if allowed

    Args:
        shell_executor: ShellExecutor used for probing and installation
        confirm: Callable asked before installing a helper, None when the
            session is not interactive
        dry_run: Log the helper installation instead of performing it
    """

    def __init__(self, shell_executor, confirm=None, dry_run=False):
        self.shell_executor = shell_executor
        self.confirm = confirm
        self.dry_run = dry_run

    def detect(self) -> Optional[str]:
        """First helper from config.AUR_HELPERS found on PATH"""
        for helper in config.AUR_HELPERS:
            if self.shell_executor.which(helper):
                return helper
        return None

    def resolve(self) -> str:
        """
        Return the helper to use for this process.

        Raises:
            HelperRequiredError: no helper found and the user declined, or
                could not be asked
            HelperInstallError: automatic installation failed
        """
        helper = self.detect()
        if helper:
            return helper

        logger.info("No AUR helper found")
        default = config.DEFAULT_AUR_HELPER
        if self.confirm is None or not self.confirm(f"Would you like to install '{default}' automatically?"):
            raise HelperRequiredError(
                "AUR helper is required. Please install 'yay' or 'paru' manually and try again."
            )

        self.install_helper()
        return default

    def install_helper(self):
        """Build and install the default helper from its AUR recipe"""
        name = config.DEFAULT_AUR_HELPER
        logger.info(f"No AUR helper found. Installing '{name}'...")
        if self.dry_run:
            logger.info(f"[DRY RUN] Would install {name} AUR helper")
            return

        self._ensure_prerequisites()

        with tempfile.TemporaryDirectory(prefix=f"{name}-build-") as temp_dir:
            self._run_step(['git', 'clone', config.HELPER_BUILD_URL], cwd=temp_dir)
            build_dir = Path(temp_dir) / name
            self._run_step(['makepkg', '-si', '--noconfirm'], cwd=build_dir)

        logger.info(f"{name} installed successfully")

    def _ensure_prerequisites(self):
        for package, probe in config.HELPER_PREREQUISITES:
            if probe == 'command':
                present = self.shell_executor.which(package) is not None
            else:
                result = self.shell_executor.run_command(['pacman', '-Qi', package])
                present = result.returncode == 0

            if not present:
                logger.info(f"Installing {package} (required for AUR helper)...")
                self._run_step(['sudo', 'pacman', '-S', '--noconfirm', package])

    def _run_step(self, cmd, cwd=None):
        try:
            result = self.shell_executor.run_command(cmd, cwd=cwd, capture=False, log_cmd=True)
        except OSError as e:
            raise HelperInstallError(
                f"Failed to install {config.DEFAULT_AUR_HELPER}: '{' '.join(cmd)}' could not be started ({e})"
            ) from e
        if result.returncode != 0:
            raise HelperInstallError(
                f"Failed to install {config.DEFAULT_AUR_HELPER}: '{' '.join(cmd)}' exited with {result.returncode}"
            )
