"""
Tests for AUR helper detection and automatic installation.
"""

from pathlib import Path

import pytest

from appinstall.common.errors import HelperInstallError, HelperRequiredError
from appinstall.helper import aur_helper
from appinstall.helper.aur_helper import AURHelperManager, terminal_confirm

from tests.conftest import FakeShellExecutor


def always(answer):
    prompts = []

    def confirm(prompt):
        prompts.append(prompt)
        return answer

    confirm.prompts = prompts
    return confirm


class TestDetect:

    def test_prefers_yay(self):
        shell = FakeShellExecutor(on_path=("yay", "paru"))
        assert AURHelperManager(shell).resolve() == "yay"

    def test_falls_back_to_paru(self):
        shell = FakeShellExecutor(on_path=("paru",))
        assert AURHelperManager(shell).resolve() == "paru"

    def test_found_helper_never_prompts(self):
        confirm = always(True)
        AURHelperManager(FakeShellExecutor(on_path=("yay",)), confirm=confirm).resolve()
        assert confirm.prompts == []


class TestMissingHelper:

    def test_non_interactive_is_fatal(self):
        with pytest.raises(HelperRequiredError, match="AUR helper is required"):
            AURHelperManager(FakeShellExecutor(on_path=()), confirm=None).resolve()

    def test_declined_is_fatal(self):
        confirm = always(False)
        with pytest.raises(HelperRequiredError):
            AURHelperManager(FakeShellExecutor(on_path=()), confirm=confirm).resolve()
        assert confirm.prompts == ["Would you like to install 'yay' automatically?"]

    def test_dry_run_only_logs(self, caplog):
        shell = FakeShellExecutor(on_path=())
        caplog.set_level("INFO")
        helper = AURHelperManager(shell, confirm=always(True), dry_run=True).resolve()
        assert helper == "yay"
        assert shell.commands == []
        assert "[DRY RUN] Would install yay AUR helper" in caplog.text

    def test_installs_missing_prerequisites_and_builds(self):
        shell = FakeShellExecutor(
            responses={("pacman", "-Qi", "base-devel"): (1, "")},
            on_path=("pacman",),
        )
        assert AURHelperManager(shell, confirm=always(True)).resolve() == "yay"

        assert shell.commands == [
            ["sudo", "pacman", "-S", "--noconfirm", "git"],
            ["pacman", "-Qi", "base-devel"],
            ["sudo", "pacman", "-S", "--noconfirm", "base-devel"],
            ["git", "clone", "https://aur.archlinux.org/yay.git"],
            ["makepkg", "-si", "--noconfirm"],
        ]

    def test_build_runs_in_scratch_directory_that_is_removed(self):
        shell = FakeShellExecutor(on_path=("pacman", "git"))
        AURHelperManager(shell, confirm=always(True)).resolve()

        clone_cwd = Path(shell.calls[-2]["cwd"])
        build_cwd = Path(shell.calls[-1]["cwd"])
        assert build_cwd == clone_cwd / "yay"
        assert not clone_cwd.exists()

    def test_failed_build_step_raises(self):
        shell = FakeShellExecutor(
            responses={("makepkg", "-si", "--noconfirm"): (1, "")},
            on_path=("pacman", "git"),
        )
        with pytest.raises(HelperInstallError, match="makepkg -si --noconfirm"):
            AURHelperManager(shell, confirm=always(True)).resolve()

    def test_build_tool_that_cannot_start_raises(self):
        shell = FakeShellExecutor(on_path=("pacman", "git"), missing={"makepkg"})
        with pytest.raises(HelperInstallError, match="could not be started"):
            AURHelperManager(shell, confirm=always(True)).resolve()


class TestTerminalConfirm:

    @pytest.mark.parametrize("reply,expected", [("y", True), ("Y", True), ("yes", False), ("n", False), ("", False)])
    def test_reply(self, monkeypatch, reply, expected):
        monkeypatch.setattr("builtins.input", lambda prompt: reply)
        assert terminal_confirm("Install?") is expected

    def test_eof_declines(self, monkeypatch):
        def raise_eof(prompt):
            raise EOFError

        monkeypatch.setattr("builtins.input", raise_eof)
        assert terminal_confirm("Install?") is False

    def test_default_confirm_without_tty(self, monkeypatch):
        class NotATty:
            def isatty(self):
                return False

        monkeypatch.setattr(aur_helper.sys, "stdin", NotATty())
        assert aur_helper.default_confirm() is None
