"""
Shared test fixtures and fakes.
"""

import logging
import subprocess
from pathlib import Path

import pytest

from appinstall.orchestrator.batch_runner import UnitRunner
from appinstall.common.errors import UnitExecutionError
from appinstall.packages.pacman_client import PackageManager


def pacman_info(name, version):
    """Minimal 'pacman -Qi' / 'pacman -Si' style output."""
    return (
        f"Repository      : extra\n"
        f"Name            : {name}\n"
        f"Version         : {version}\n"
        f"Description     : test package\n"
    )


class FakeShellExecutor:
    """Records commands and answers them from a lookup table.

    ``responses`` maps a command tuple to ``(returncode, stdout)``.
    Unknown commands succeed with empty output. Programs listed in
    ``missing`` cannot be started, like a real executable that is not
    installed.
    """

    def __init__(self, responses=None, on_path=("pacman",), missing=()):
        self.responses = dict(responses or {})
        self.on_path = set(on_path)
        self.missing = set(missing)
        self.commands = []
        self.calls = []

    def which(self, name):
        return f"/usr/bin/{name}" if name in self.on_path else None

    def run_command(self, cmd, cwd=None, capture=True, log_cmd=False, extra_env=None):
        self.commands.append(list(cmd))
        self.calls.append({"cmd": list(cmd), "cwd": cwd, "capture": capture, "extra_env": extra_env})
        if cmd[0] in self.missing:
            raise FileNotFoundError(2, "No such file or directory", cmd[0])
        returncode, stdout = self.responses.get(tuple(cmd), (0, ""))
        return subprocess.CompletedProcess(list(cmd), returncode, stdout=stdout, stderr="")


class FakePackageManager(PackageManager):
    def __init__(self, installed=None, available=None, install_returncode=0):
        self.installed = dict(installed or {})
        self.available = dict(available or {})
        self.install_returncode = install_returncode
        self.install_calls = []

    def query_installed(self, package):
        return self.installed.get(package)

    def query_available(self, package):
        return self.available.get(package)

    def install_command(self, package):
        return ["fake-pm", "-S", package]

    def install_or_update(self, package):
        self.install_calls.append(package)
        return self.install_returncode


class RecordingUnitRunner(UnitRunner):
    """Pretends to run units; identifiers listed in ``failing`` exit with status 1."""

    def __init__(self, failing=()):
        self.failing = set(failing)
        self.executed = []

    def command_for(self, unit, args):
        return [str(unit.path), *args]

    def run(self, unit, args):
        self.executed.append((unit.identifier, list(args)))
        if unit.identifier in self.failing:
            raise UnitExecutionError(unit.file_name, 1)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """CLI entry points reconfigure the root logger; undo that after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def fake_shell():
    return FakeShellExecutor()


@pytest.fixture
def units_dir(tmp_path: Path) -> Path:
    """Directory holding three units plus the batch runner itself."""
    root = tmp_path / "units"
    root.mkdir()
    for name in ("c-install.py", "a-install.py", "b-install.sh", "install-all.py", "README.md"):
        (root / name).write_text("#!/bin/sh\n# usage: [--dry-run] [--force]\n")
    return root
