import pytest

from appinstall.common.environment import validate_environment
from appinstall.common.errors import EnvironmentCheckError

from tests.conftest import FakeShellExecutor


def test_pacman_present():
    validate_environment(FakeShellExecutor(on_path=("pacman",)))


def test_pacman_missing():
    with pytest.raises(EnvironmentCheckError, match="pacman"):
        validate_environment(FakeShellExecutor(on_path=()))
