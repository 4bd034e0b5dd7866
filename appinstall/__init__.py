"""
Manjaro application installer modules
"""

__version__ = "1.0.0"

# Common modules
from .common.config_loader import ConfigLoader
from .common.errors import InstallerError
from .common.logging_utils import setup_logging
from .common.options import RunOptions
from .common.shell_executor import ShellExecutor

# Version modules
from .version.version_manager import ComparisonResult, VersionResolver, compare

# Package system modules
from .packages.aur_client import AURClient
from .packages.pacman_client import PackageManager, PackageOrigin, PacmanClient

# AUR helper module
from .helper.aur_helper import AURHelperManager

# Application modules
from .apps.app_unit import AppInstaller, UnitAction, run_unit
from .apps.catalog import AppDefinition, get_app, load_catalog

# Orchestrator modules
from .orchestrator.batch_runner import BatchRunner, SubprocessUnitRunner
from .orchestrator.discovery import DirectoryUnitSource, InstallUnit, StaticUnitSource
from .orchestrator.state import RunOutcome, RunStatus, RunSummary

__all__ = [
    # Common
    'ConfigLoader',
    'InstallerError',
    'setup_logging',
    'RunOptions',
    'ShellExecutor',

    # Version
    'ComparisonResult',
    'VersionResolver',
    'compare',

    # Package system
    'AURClient',
    'PackageManager',
    'PackageOrigin',
    'PacmanClient',

    # AUR helper
    'AURHelperManager',

    # Applications
    'AppInstaller',
    'UnitAction',
    'run_unit',
    'AppDefinition',
    'get_app',
    'load_catalog',

    # Orchestrator
    'BatchRunner',
    'SubprocessUnitRunner',
    'DirectoryUnitSource',
    'InstallUnit',
    'StaticUnitSource',
    'RunOutcome',
    'RunStatus',
    'RunSummary',
]
