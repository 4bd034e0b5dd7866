"""
Environment validation module
"""

import logging

from appinstall.common.errors import EnvironmentCheckError

logger = logging.getLogger(__name__)

REQUIRED_COMMANDS = ['pacman']


def validate_environment(shell_executor):
    """Pre-flight check that the host looks like an Arch-based system

    Raises:
        EnvironmentCheckError: if a required command is missing from PATH
    """
    missing = [cmd for cmd in REQUIRED_COMMANDS if not shell_executor.which(cmd)]
    if missing:
        raise EnvironmentCheckError(
            f"Required command(s) not found: {', '.join(missing)}. "
            "This installer only supports Arch-based distributions such as Manjaro."
        )
    logger.debug("Environment validation passed")
    return True
