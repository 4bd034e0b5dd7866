"""
App Unit Module - Install, update or leave alone a single application
"""

import enum
import logging

from appinstall.common.environment import validate_environment
from appinstall.common.errors import PackageOperationError
from appinstall.helper.aur_helper import AURHelperManager
from appinstall.packages.aur_client import AURClient
from appinstall.packages.pacman_client import PacmanClient
from appinstall.version.version_manager import ComparisonResult, VersionResolver

logger = logging.getLogger(__name__)


class UnitAction(enum.Enum):
    INSTALLED = 'installed'
    UPDATED = 'updated'
    REINSTALLED = 'reinstalled'
    UP_TO_DATE = 'up-to-date'
    INSTALLED_NEWER = 'installed-newer'


def build_package_manager(app, shell_executor, options, confirm=None, aur_query='helper'):
    """
    Create the PacmanClient for an application.

    AUR applications resolve their helper here, once per process.
    """
    if not app.needs_aur_helper:
        return PacmanClient(shell_executor, origin=app.origin)

    helper = AURHelperManager(shell_executor, confirm=confirm, dry_run=options.dry_run).resolve()
    logger.info(f"Using AUR helper: {helper}")
    aur_client = AURClient() if aur_query == 'rpc' else None
    return PacmanClient(shell_executor, origin=app.origin, aur_helper=helper, aur_client=aur_client)


class AppInstaller:
    """Runs the install/update/no-op decision for one application"""

    def __init__(self, app, package_manager, options):
        self.app = app
        self.package_manager = package_manager
        self.options = options
        self.resolver = VersionResolver(package_manager)

    def run(self) -> UnitAction:
        name = self.app.display_name
        installed = self.resolver.installed_version(self.app.package)

        if not installed:
            logger.info(f"{name} is not installed")
            self._apply(f"Installing {name}...", f"{name} installed successfully")
            if not self.options.dry_run:
                for hint in self.app.post_install:
                    logger.info(hint)
            return UnitAction.INSTALLED

        logger.info(f"{name} is already installed (version: {installed})")

        if self.options.force:
            logger.info("Force flag specified, reinstalling...")
            self._apply(f"Updating {name}...", f"{name} updated successfully")
            return UnitAction.REINSTALLED

        logger.info("Checking for updates...")
        check = self.resolver.check(self.app.package, installed=installed)
        logger.info(f"Available version: {check.available}")

        if check.result is ComparisonResult.EQUAL:
            logger.info(f"{name} is up to date (version: {installed})")
            return UnitAction.UP_TO_DATE

        if check.result is ComparisonResult.UPGRADE_AVAILABLE:
            logger.info(f"Update available: {installed} -> {check.available}")
            self._apply(f"Updating {name}...", f"{name} updated successfully")
            return UnitAction.UPDATED

        logger.info(f"Installed version ({installed}) is newer than available ({check.available})")
        logger.info("No action needed")
        return UnitAction.INSTALLED_NEWER

    def _apply(self, start_message, done_message):
        logger.info(start_message)
        command = self.package_manager.install_command(self.app.package)
        if self.options.dry_run:
            logger.info(f"[DRY RUN] Would execute: {' '.join(command)}")
            return

        returncode = self.package_manager.install_or_update(self.app.package)
        if returncode != 0:
            raise PackageOperationError(self.app.package, command, returncode)
        logger.info(done_message)


def run_unit(app, shell_executor, options, confirm=None, aur_query='helper') -> UnitAction:
    """Full unit routine: environment check, helper resolution, version decision"""
    logger.info(f"Starting {app.display_name} installation/update check...")
    validate_environment(shell_executor)
    package_manager = build_package_manager(app, shell_executor, options, confirm=confirm, aur_query=aur_query)
    action = AppInstaller(app, package_manager, options).run()
    logger.info("Script completed successfully")
    return action
