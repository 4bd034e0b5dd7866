"""
Error types shared by install units and the batch runner
"""


class InstallerError(Exception):
    """Base class for every fatal condition reported to the user"""


class UsageError(InstallerError):
    """Unknown or malformed command line option"""


class EnvironmentCheckError(InstallerError):
    """The host system cannot run the installer (e.g. pacman missing)"""


class HelperRequiredError(EnvironmentCheckError):
    """No AUR helper is available and none will be installed"""


class HelperInstallError(EnvironmentCheckError):
    """Automatic installation of the AUR helper failed"""


class VersionQueryError(InstallerError):
    """The available version of a package could not be determined"""


class PackageOperationError(InstallerError):
    """An install or update command exited with a non-zero status"""

    def __init__(self, package, command, returncode):
        self.package = package
        self.command = command
        self.returncode = returncode
        super().__init__(
            f"Command failed with exit code {returncode}: {' '.join(command)}"
        )


class CatalogError(InstallerError):
    """The application catalogue is missing, malformed or lacks an entry"""


class NoUnitsFoundError(InstallerError):
    """Discovery produced no install units"""


class UnitExecutionError(InstallerError):
    """A discovered install unit exited with a non-zero status"""

    def __init__(self, unit_name, returncode):
        self.unit_name = unit_name
        self.returncode = returncode
        super().__init__(f"{unit_name} exited with status {returncode}")
