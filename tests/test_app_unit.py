"""
Tests for the per-application install/update routine.
"""

import pytest

from appinstall.apps.app_unit import AppInstaller, UnitAction, build_package_manager, run_unit
from appinstall.apps.catalog import AppDefinition
from appinstall.common.errors import (
    EnvironmentCheckError,
    HelperRequiredError,
    PackageOperationError,
    VersionQueryError,
)
from appinstall.common.options import RunOptions
from appinstall.packages.aur_client import AURClient
from appinstall.packages.pacman_client import PackageOrigin

from tests.conftest import FakePackageManager, FakeShellExecutor, pacman_info

FISH = AppDefinition(
    name="fish",
    package="fish",
    display_name="Fish shell",
    post_install=["To set Fish as your default shell, run: chsh -s /usr/bin/fish"],
)
VSCODE = AppDefinition(
    name="vscode",
    package="visual-studio-code-bin",
    display_name="Visual Studio Code",
    origin=PackageOrigin.AUR,
)


def installer(pm, **options):
    return AppInstaller(FISH, pm, RunOptions(**options))


class TestDecision:

    def test_installs_when_missing(self, caplog):
        caplog.set_level("INFO")
        pm = FakePackageManager()
        assert installer(pm).run() is UnitAction.INSTALLED
        assert pm.install_calls == ["fish"]
        assert "Fish shell is not installed" in caplog.text
        assert "chsh -s /usr/bin/fish" in caplog.text

    def test_up_to_date(self, caplog):
        caplog.set_level("INFO")
        pm = FakePackageManager(installed={"fish": "3.7.1-1"}, available={"fish": "3.7.1-2"})
        assert installer(pm).run() is UnitAction.UP_TO_DATE
        assert pm.install_calls == []
        assert "Fish shell is up to date (version: 3.7.1-1)" in caplog.text

    def test_updates_when_newer_available(self, caplog):
        caplog.set_level("INFO")
        pm = FakePackageManager(installed={"fish": "3.7.0-1"}, available={"fish": "3.7.1-2"})
        assert installer(pm).run() is UnitAction.UPDATED
        assert pm.install_calls == ["fish"]
        assert "Update available: 3.7.0-1 -> 3.7.1-2" in caplog.text
        assert "chsh" not in caplog.text

    def test_installed_newer_is_left_alone(self, caplog):
        caplog.set_level("INFO")
        pm = FakePackageManager(installed={"fish": "4.0-1"}, available={"fish": "3.7.1-2"})
        assert installer(pm).run() is UnitAction.INSTALLED_NEWER
        assert pm.install_calls == []
        assert "Installed version (4.0-1) is newer than available (3.7.1-2)" in caplog.text

    def test_force_reinstalls_without_querying(self):
        pm = FakePackageManager(installed={"fish": "3.7.1-1"})
        assert installer(pm, force=True).run() is UnitAction.REINSTALLED
        assert pm.install_calls == ["fish"]

    def test_missing_available_version_fails(self):
        pm = FakePackageManager(installed={"fish": "3.7.1-1"})
        with pytest.raises(VersionQueryError):
            installer(pm).run()
        assert pm.install_calls == []

    def test_failed_install_raises(self):
        pm = FakePackageManager(install_returncode=1)
        with pytest.raises(PackageOperationError) as excinfo:
            installer(pm).run()
        assert excinfo.value.returncode == 1
        assert excinfo.value.package == "fish"


class TestDryRun:

    def test_install_is_only_logged(self, caplog):
        caplog.set_level("INFO")
        pm = FakePackageManager()
        assert installer(pm, dry_run=True).run() is UnitAction.INSTALLED
        assert pm.install_calls == []
        assert "[DRY RUN] Would execute: fake-pm -S fish" in caplog.text
        assert "chsh" not in caplog.text

    def test_update_is_only_logged(self):
        pm = FakePackageManager(installed={"fish": "1.0-1"}, available={"fish": "2.0-1"})
        assert installer(pm, dry_run=True).run() is UnitAction.UPDATED
        assert pm.install_calls == []

    def test_force_is_only_logged(self):
        pm = FakePackageManager(installed={"fish": "1.0-1"})
        installer(pm, dry_run=True, force=True).run()
        assert pm.install_calls == []


class TestBuildPackageManager:

    def test_official_app_skips_helper(self):
        shell = FakeShellExecutor(on_path=("pacman",))
        pm = build_package_manager(FISH, shell, RunOptions())
        assert pm.aur_helper is None

    def test_aur_app_resolves_helper(self):
        shell = FakeShellExecutor(on_path=("pacman", "paru"))
        pm = build_package_manager(VSCODE, shell, RunOptions())
        assert pm.aur_helper == "paru"
        assert pm.aur_client is None

    def test_rpc_query_mode(self):
        shell = FakeShellExecutor(on_path=("pacman", "yay"))
        pm = build_package_manager(VSCODE, shell, RunOptions(), aur_query="rpc")
        assert isinstance(pm.aur_client, AURClient)

    def test_aur_app_without_helper_is_fatal(self):
        shell = FakeShellExecutor(on_path=("pacman",))
        with pytest.raises(HelperRequiredError):
            build_package_manager(VSCODE, shell, RunOptions(), confirm=lambda prompt: False)


class TestRunUnit:

    def test_requires_pacman(self):
        with pytest.raises(EnvironmentCheckError, match="pacman"):
            run_unit(FISH, FakeShellExecutor(on_path=()), RunOptions())

    def test_end_to_end_update_through_shell(self):
        shell = FakeShellExecutor({
            ("pacman", "-Qi", "fish"): (0, pacman_info("fish", "3.7.0-1")),
            ("pacman", "-Si", "fish"): (0, pacman_info("fish", "3.7.1-2")),
        })
        assert run_unit(FISH, shell, RunOptions()) is UnitAction.UPDATED
        assert shell.commands[-1] == ["sudo", "pacman", "-S", "--noconfirm", "fish"]

    def test_dry_run_never_mutates(self):
        shell = FakeShellExecutor({
            ("pacman", "-Qi", "visual-studio-code-bin"): (0, pacman_info("visual-studio-code-bin", "1.85.0-1")),
            ("yay", "-Si", "visual-studio-code-bin"): (0, pacman_info("visual-studio-code-bin", "1.86.0-1")),
        }, on_path=("pacman", "yay"))
        assert run_unit(VSCODE, shell, RunOptions(dry_run=True)) is UnitAction.UPDATED
        assert all("-S" not in cmd for cmd in shell.commands)
